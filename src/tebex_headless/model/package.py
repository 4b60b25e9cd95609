from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from tebex_headless.model.base_item import BaseItem

PackageType = Literal["subscription", "single", "both"]


class Package(BaseItem):
    description: str
    type: PackageType
    disable_gifting: bool
    disable_quantity: bool
    expiration_date: str | None
    currency: str
    category: BaseItem
    base_price: float
    sales_tax: float
    total_price: float
    discount: float
    image: str | None
    created_at: str
    updated_at: str
    order: int


class PackageBody(BaseModel):
    """Request body for adding a package to a basket"""
    model_config = ConfigDict(frozen = True)

    package_id: int
    quantity: int
    type: PackageType | None = None
    variable_data: dict[str, Any] | None = None
