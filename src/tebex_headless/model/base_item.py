from pydantic import BaseModel, ConfigDict


class BaseItem(BaseModel):
    """Common identity of catalog entries (packages, categories, basket packages)"""
    model_config = ConfigDict(frozen = True, extra = "allow")

    id: int
    name: str
