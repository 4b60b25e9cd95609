from pydantic import BaseModel, ConfigDict


class Webstore(BaseModel):
    model_config = ConfigDict(frozen = True, extra = "allow")

    id: int
    description: str
    name: str
    webstore_url: str
    currency: str
    lang: str
    logo: str
    platform_type: str
    platform_type_id: int
    created_at: str
