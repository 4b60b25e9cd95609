from typing import Any, Mapping


def mask_secret(secret: str | None = None, mask: str = "*") -> str | None:
    if secret is None:
        return None
    # short strings: mask all
    if len(secret) <= 4:
        return mask * len(secret)
    # medium strings: show one char on each side
    if len(secret) <= 8:
        return secret[0] + (mask * (len(secret) - 2)) + secret[-1:]
    # long strings: show 3 chars on each end with 5 masks in the middle
    return secret[:3] + (mask * 5) + secret[-3:]


def without_none_values(source: Mapping[str, Any] | None) -> dict[str, Any]:
    if not source:
        return {}
    return {key: value for key, value in source.items() if value is not None}
