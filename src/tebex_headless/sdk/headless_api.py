from typing import Any, Mapping

from pydantic import BaseModel, TypeAdapter

from tebex_headless.model.apply_code import ApplyCode, ApplyType, resolve_apply_code
from tebex_headless.model.auth_url import AuthUrl
from tebex_headless.model.basket import Basket, BasketUrls, MinecraftBasketUrls
from tebex_headless.model.category import Category
from tebex_headless.model.data import Data
from tebex_headless.model.message import Message
from tebex_headless.model.package import Package, PackageBody, PackageType
from tebex_headless.model.page import Page
from tebex_headless.model.webstore import Webstore
from tebex_headless.sdk.headless_request import QueryValue, Route, send_request
from tebex_headless.util import log


class TebexHeadlessAPI:
    """https://docs.tebex.io/developers/headless-api/overview"""
    store_identifier: str
    __private_key: str | None
    __base_url: str | None

    def __init__(
        self,
        store_identifier: str,
        private_key: str | None = None,
        base_url: str | None = None,
    ):
        self.store_identifier = store_identifier
        self.__private_key = private_key
        self.__base_url = base_url
        log.i(f"Headless API client ready for store '{store_identifier}' ({'private' if private_key else 'public'} access)")

    # === Catalog ===

    def get_categories(
        self,
        include_packages: bool | None = None,
        basket_ident: str | None = None,
        ip_address: str | None = None,
    ) -> list[Category]:
        log.t(f"Fetching categories of store '{self.store_identifier}'")
        response = self.__store_request(
            "get",
            "/categories",
            params = {
                "includePackages": include_packages,
                "basketIdent": basket_ident,
                "ipAddress": ip_address,
            },
        )
        return Data[list[Category]].model_validate(response).data

    def get_category(
        self,
        id: int,
        include_packages: bool | None = None,
        basket_ident: str | None = None,
        ip_address: str | None = None,
    ) -> Category:
        log.t(f"Fetching category #{id}")
        response = self.__store_request(
            "get",
            f"/categories/{id}",
            params = {
                "includePackages": include_packages,
                "basketIdent": basket_ident,
                "ipAddress": ip_address,
            },
        )
        return Data[Category].model_validate(response).data

    def get_packages(
        self,
        basket_ident: str | None = None,
        ip_address: str | None = None,
    ) -> list[Package]:
        log.t(f"Fetching packages of store '{self.store_identifier}'")
        response = self.__store_request(
            "get",
            "/packages",
            params = {"basketIdent": basket_ident, "ipAddress": ip_address},
        )
        return Data[list[Package]].model_validate(response).data

    def get_package(
        self,
        id: int,
        basket_ident: str | None = None,
        ip_address: str | None = None,
    ) -> Package:
        log.t(f"Fetching package #{id}")
        response = self.__store_request(
            "get",
            f"/packages/{id}",
            params = {"basketIdent": basket_ident, "ipAddress": ip_address},
        )
        return Data[Package].model_validate(response).data

    # === Baskets ===

    def get_basket(self, basket_ident: str) -> Basket:
        log.t(f"Fetching basket '{basket_ident}'")
        response = self.__store_request("get", f"/baskets/{basket_ident}")
        return Data[Basket].model_validate(response).data

    def create_basket(
        self,
        complete_url: str,
        cancel_url: str,
        custom: dict[str, Any] | None = None,
        complete_auto_redirect: bool | None = None,
        ip_address: str | None = None,
    ) -> Basket:
        log.t(f"Creating a basket in store '{self.store_identifier}'")
        body = BasketUrls(
            complete_url = complete_url,
            cancel_url = cancel_url,
            custom = custom,
            complete_auto_redirect = complete_auto_redirect,
        )
        response = self.__store_request("post", "/baskets", params = {"ip_address": ip_address}, body = body)
        return Data[Basket].model_validate(response).data

    def create_minecraft_basket(
        self,
        username: str,
        complete_url: str,
        cancel_url: str,
        custom: dict[str, Any] | None = None,
        complete_auto_redirect: bool | None = None,
        ip_address: str | None = None,
    ) -> Basket:
        log.t(f"Creating a Minecraft basket for '{username}'")
        body = MinecraftBasketUrls(
            username = username,
            complete_url = complete_url,
            cancel_url = cancel_url,
            custom = custom,
            complete_auto_redirect = complete_auto_redirect,
        )
        response = self.__store_request("post", "/baskets", params = {"ip_address": ip_address}, body = body)
        return Data[Basket].model_validate(response).data

    def get_basket_auth_url(self, basket_ident: str, return_url: str) -> list[AuthUrl]:
        log.t(f"Fetching auth URLs for basket '{basket_ident}'")
        response = self.__store_request(
            "get",
            f"/baskets/{basket_ident}/auth",
            params = {"returnUrl": return_url},
        )
        # this endpoint responds with a bare list, without the data envelope
        return TypeAdapter(list[AuthUrl]).validate_python(response)

    # === Basket packages ===

    def add_package_to_basket(
        self,
        basket_ident: str,
        package_id: int,
        quantity: int,
        type: PackageType | None = None,
        variable_data: dict[str, Any] | None = None,
    ) -> Basket:
        log.t(f"Adding {quantity}x package #{package_id} to basket '{basket_ident}'")
        body = PackageBody(
            package_id = package_id,
            quantity = quantity,
            type = type,
            variable_data = variable_data,
        )
        response = self.__basket_request(basket_ident, "post", "/packages", body = body)
        return Data[Basket].model_validate(response).data

    def gift_package(
        self,
        basket_ident: str,
        package_id: int,
        target_username_id: str,
    ) -> Basket:
        log.t(f"Gifting package #{package_id} to '{target_username_id}' in basket '{basket_ident}'")
        response = self.__basket_request(
            basket_ident,
            "post",
            "/packages",
            body = {"package_id": package_id, "target_username_id": target_username_id},
        )
        return Data[Basket].model_validate(response).data

    def remove_package(self, basket_ident: str, package_id: int) -> Basket:
        log.t(f"Removing package #{package_id} from basket '{basket_ident}'")
        response = self.__basket_request(
            basket_ident,
            "post",
            "/packages/remove",
            body = {"package_id": package_id},
        )
        return Data[Basket].model_validate(response).data

    def update_quantity(self, basket_ident: str, package_id: int, quantity: int) -> Basket:
        log.t(f"Setting quantity of package #{package_id} to {quantity} in basket '{basket_ident}'")
        response = self.__basket_request(
            basket_ident,
            "put",
            f"/packages/{package_id}",
            body = {"quantity": quantity},
        )
        return Data[Basket].model_validate(response).data

    # === Coupons, gift cards and creator codes ===

    def apply(
        self,
        basket_ident: str,
        apply_type: ApplyType,
        body: ApplyCode | Mapping[str, Any],
    ) -> Message:
        code = resolve_apply_code(apply_type, body)
        log.t(f"Applying {type(code).__name__} to basket '{basket_ident}'")
        response = self.__store_request("post", f"/baskets/{basket_ident}/{apply_type}", body = code)
        return Message.model_validate(response)

    def remove(
        self,
        basket_ident: str,
        apply_type: ApplyType,
        body: ApplyCode | Mapping[str, Any],
    ) -> Message:
        code = resolve_apply_code(apply_type, body)
        log.t(f"Removing {type(code).__name__} from basket '{basket_ident}'")
        response = self.__store_request("post", f"/baskets/{basket_ident}/{apply_type}/remove", body = code)
        return Message.model_validate(response)

    # === Store ===

    def get_webstore(self) -> Webstore:
        log.t(f"Fetching webstore '{self.store_identifier}'")
        response = self.__store_request("get")
        return Data[Webstore].model_validate(response).data

    def get_pages(self) -> list[Page]:
        log.t(f"Fetching pages of store '{self.store_identifier}'")
        response = self.__store_request("get", "/pages")
        return Data[list[Page]].model_validate(response).data

    def update_tier(self, tier_id: int | str, package_id: int) -> Message:
        log.t(f"Moving tier #{tier_id} to package #{package_id}")
        response = self.__store_request("patch", f"/tiers/{tier_id}", body = {"package_id": package_id})
        return Message.model_validate(response)

    # === Dispatch ===

    def __store_request(
        self,
        method: str,
        path: str | None = None,
        params: Mapping[str, QueryValue] | None = None,
        body: BaseModel | Mapping[str, Any] | None = None,
    ) -> Any:
        return self.__request(method, self.store_identifier, "accounts", path, params, body)

    def __basket_request(
        self,
        basket_ident: str,
        method: str,
        path: str,
        body: BaseModel | Mapping[str, Any] | None = None,
    ) -> Any:
        return self.__request(method, basket_ident, "baskets", path, None, body)

    def __request(
        self,
        method: str,
        identifier: str | None,
        route: Route,
        path: str | None,
        params: Mapping[str, QueryValue] | None,
        body: BaseModel | Mapping[str, Any] | None,
    ) -> Any:
        return send_request(
            store_identifier = self.store_identifier,
            private_key = self.__private_key,
            method = method,
            identifier = identifier,
            route = route,
            path = path,
            params = params,
            body = body,
            base_url = self.__base_url,
        )
