import os
from typing import Callable

from tebex_headless.util.error_codes import INVALID_TIMEOUT_CONFIG
from tebex_headless.util.errors import ConfigurationError
from tebex_headless.util.singleton import Singleton


class Config(metaclass = Singleton):

    DEFAULT_API_BASE_URL = "https://headless.tebex.io"

    api_base_url: str
    log_level: str
    web_timeout_s: int | None

    def __init__(
        self,
        def_api_base_url: str = DEFAULT_API_BASE_URL,
        def_log_level: str = "INFO",
        def_web_timeout_s: int | None = None,
    ):
        self.api_base_url = self.__env("HEADLESS_API_BASE_URL", lambda: def_api_base_url).rstrip("/")
        self.log_level = self.__env("LOG_LEVEL", lambda: def_log_level).lower()
        self.web_timeout_s = self.__timeout(
            self.__env("WEB_TIMEOUT_S", lambda: str(def_web_timeout_s) if def_web_timeout_s else ""),
        )

    @staticmethod
    def __timeout(raw: str) -> int | None:
        if not raw:
            return None  # no timeout, requests waits indefinitely
        try:
            timeout = int(raw)
        except ValueError as e:
            raise ConfigurationError(f"WEB_TIMEOUT_S must be a whole number of seconds, got '{raw}'", INVALID_TIMEOUT_CONFIG) from e
        return timeout if timeout > 0 else None

    @staticmethod
    def __env(name: str, default: Callable[[], str]) -> str:
        env_value = os.environ.get(name, "").strip()
        return env_value if env_value else default()


config = Config()
