from typing import Any, Literal, Mapping

import requests
from pydantic import BaseModel
from requests import HTTPError, Response
from requests.auth import HTTPBasicAuth

from tebex_headless.util import log
from tebex_headless.util.config import config
from tebex_headless.util.functions import mask_secret, without_none_values

Route = Literal["accounts", "baskets"]
QueryValue = str | int | float | bool | None

DEFAULT_HEADERS = {"Content-Type": "application/json"}


def build_url(
    route: Route,
    identifier: str | None,
    path: str | None = None,
    base_url: str | None = None,
) -> str:
    segment = identifier
    if segment is None:
        log.w(f"No identifier given for route '{route}', sending 'null' in its place")
        segment = "null"
    return f"{(base_url or config.api_base_url).rstrip('/')}/api/{route}/{segment}{path or ''}"


def normalize_params(params: Mapping[str, QueryValue] | None) -> dict[str, str | int | float]:
    normalized: dict[str, str | int | float] = {}
    for key, value in without_none_values(params).items():
        # booleans go over the wire as 1/0
        normalized[key] = int(value) if isinstance(value, bool) else value
    return normalized


def serialize_body(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return without_none_values(body.model_dump(mode = "json"))
    if isinstance(body, Mapping):
        return without_none_values(body)
    # lists and scalars are sent as they are
    return body


def send_request(
    store_identifier: str,
    private_key: str | None,
    method: str,
    identifier: str | None,
    route: Route,
    path: str | None = None,
    params: Mapping[str, QueryValue] | None = None,
    body: Any = None,
    base_url: str | None = None,
) -> Any:
    """
    Sends a single request to the Tebex Headless API and returns the decoded JSON body.

    The URL is built as `{base_url}/api/{route}/{identifier}{path}`. Basic auth is attached only
    when both the store identifier and the private key are present. Failures are never retried:
    transport errors, non-2xx responses and undecodable bodies propagate as `requests` exceptions.
    """
    url = build_url(route, identifier, path, base_url)
    auth = HTTPBasicAuth(store_identifier, private_key) if store_identifier and private_key else None
    log.t(
        f"{method.upper()} {url}",
        f"params: {params or {}}",
        f"auth: {f'{store_identifier}:{mask_secret(private_key)}' if auth else 'none'}",
    )
    response = requests.request(
        method.upper(),
        url,
        params = normalize_params(params),
        json = serialize_body(body),
        headers = DEFAULT_HEADERS,
        auth = auth,
        timeout = config.web_timeout_s,
    )
    _raise_for_status(response)
    log.d(f"Received HTTP_{response.status_code} from {url}")
    return response.json()


def _raise_for_status(response: Response):
    if response.status_code < 200 or response.status_code > 299:
        log.e(f"  Status is not '200': HTTP_{response.status_code}!", response.text)
        response.raise_for_status()
        raise HTTPError(f"Unexpected HTTP_{response.status_code} from {response.url}", response = response)
