from pydantic import BaseModel, ConfigDict


class Page(BaseModel):
    """A static content page of the webstore (terms, about, etc.)"""
    model_config = ConfigDict(frozen = True, extra = "allow")

    id: int
    created_at: str
    updated_at: str
    account_id: int
    title: str
    slug: str
    private: bool
    hidden: bool
    disabled: bool
    sequence: bool
    content: str
