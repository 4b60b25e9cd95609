class ServiceError(Exception):
    """Base for errors raised by the client itself, never for remote API failures."""
    error_code: int
    emoji: str

    def __init__(
        self,
        message: str,
        error_code: int,
        emoji: str = "⚠️",
    ):
        super().__init__(message)
        self.error_code = error_code
        self.emoji = emoji

    def __str__(self) -> str:
        return self.to_log_string()

    def to_log_string(self) -> str:
        cause_str = f" # Caused by: {self.__cause__}" if self.__cause__ else ""
        return f"[{self.emoji} E{self.error_code}] {super().__str__()}{cause_str}"


class ValidationError(ServiceError):
    def __init__(self, message: str, error_code: int, emoji: str = "✏️"):
        super().__init__(message, error_code, emoji = emoji)


class ConfigurationError(ServiceError):
    def __init__(self, message: str, error_code: int, emoji: str = "⚙️"):
        super().__init__(message, error_code, emoji = emoji)
