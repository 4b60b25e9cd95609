from typing import Any

from pydantic import BaseModel, ConfigDict

from tebex_headless.model.base_item import BaseItem


class InBasket(BaseModel):
    """Quantity and pricing of a package inside a basket, plus its gift recipient if gifted"""
    model_config = ConfigDict(frozen = True, extra = "allow")

    quantity: int
    price: float
    gift_username_id: str | None
    gift_username: str | None


class BasketPackage(BaseItem):
    description: str
    in_basket: InBasket
    image: str | None


class Code(BaseModel):
    model_config = ConfigDict(frozen = True, extra = "allow")

    code: str


class GiftCard(BaseModel):
    """A gift card already applied to a basket"""
    model_config = ConfigDict(frozen = True, extra = "allow")

    card_number: str


class Links(BaseModel):
    """Always carries the checkout link; any other links the API sends are kept as extras"""
    model_config = ConfigDict(frozen = True, extra = "allow")

    checkout: str


class Basket(BaseModel):
    model_config = ConfigDict(frozen = True, extra = "allow")

    ident: str
    complete: bool
    id: int
    country: str
    ip: str
    username_id: str | None
    username: str | None
    cancel_url: str
    complete_url: str
    complete_auto_redirect: bool
    base_price: float
    sales_tax: float
    total_price: float
    email: str
    currency: str
    packages: list[BasketPackage]
    coupons: list[Code]
    giftcards: list[GiftCard]
    creator_code: str
    links: Links
    custom: dict[str, Any]


class BasketUrls(BaseModel):
    """Request body for creating a basket"""
    model_config = ConfigDict(frozen = True)

    complete_url: str
    cancel_url: str
    custom: dict[str, Any] | None = None
    complete_auto_redirect: bool | None = None


class MinecraftBasketUrls(BasketUrls):
    username: str
