from pydantic import BaseModel, ConfigDict


class Message(BaseModel):
    model_config = ConfigDict(frozen = True, extra = "allow")

    success: bool
    message: str
