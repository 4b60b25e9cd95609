from pydantic import BaseModel, ConfigDict


class AuthUrl(BaseModel):
    """One of the login options offered for a basket (e.g. a platform's OAuth page)"""
    model_config = ConfigDict(frozen = True, extra = "allow")

    name: str
    url: str
