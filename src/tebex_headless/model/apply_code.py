from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as ModelValidationError

from tebex_headless.util import log
from tebex_headless.util.error_codes import APPLY_BODY_MISMATCH, INVALID_APPLY_BODY, UNKNOWN_APPLY_TYPE
from tebex_headless.util.errors import ValidationError

ApplyType = Literal["coupons", "giftcards", "creator-codes"]


class CouponCode(BaseModel):
    model_config = ConfigDict(frozen = True, extra = "forbid")

    coupon_code: str


class GiftCardCode(BaseModel):
    model_config = ConfigDict(frozen = True, extra = "forbid")

    card_number: str


class CreatorCode(BaseModel):
    model_config = ConfigDict(frozen = True, extra = "forbid")

    creator_code: str


ApplyCode = CouponCode | GiftCardCode | CreatorCode

APPLY_TYPES: tuple[str, ...] = ("coupons", "giftcards", "creator-codes")


def code_type_for(apply_type: str) -> type[ApplyCode]:
    match apply_type:
        case "coupons":
            return CouponCode
        case "giftcards":
            return GiftCardCode
        case "creator-codes":
            return CreatorCode
        case _:
            raise ValidationError(
                log.w(f"Unknown apply type '{apply_type}', expected one of {', '.join(APPLY_TYPES)}"),
                UNKNOWN_APPLY_TYPE,
            )


def describe_shape(code_type: type[ApplyCode]) -> str:
    fields = ", ".join(f"{name}: str" for name in code_type.model_fields)
    return f"{code_type.__name__} {{{fields}}}"


def resolve_apply_code(apply_type: str, body: ApplyCode | Mapping[str, Any]) -> ApplyCode:
    """
    Binds a request body to its apply type before anything is sent to the API.

    Parameters:
    apply_type (str): One of 'coupons', 'giftcards' or 'creator-codes'.
    body (ApplyCode | Mapping): Either the matching code model or a plain mapping with its single field.

    Returns:
    ApplyCode: The validated code model for the given apply type.

    Raises:
    ValidationError: When the apply type is unknown or the body does not have the expected shape.
    """
    code_type = code_type_for(apply_type)
    if isinstance(body, BaseModel):
        if not isinstance(body, code_type):
            raise ValidationError(
                log.w(f"Apply type '{apply_type}' expects {describe_shape(code_type)}, got {type(body).__name__}"),
                APPLY_BODY_MISMATCH,
            )
        return body
    try:
        return code_type.model_validate(body)
    except ModelValidationError as e:
        raise ValidationError(
            log.w(f"Apply type '{apply_type}' expects {describe_shape(code_type)}, got {body!r}"),
            INVALID_APPLY_BODY,
        ) from e
