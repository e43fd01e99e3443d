from __future__ import annotations

import logging
from typing import Iterable

import httpx

from hitkit.core.config import Settings, settings
from hitkit.core.errors import PayloadTooLarge
from hitkit.schemas.parameters import ParameterSet
from hitkit.services.payload import build
from hitkit.services.validator import ensure_valid

logger = logging.getLogger(__name__)


def encode_payload(pairs: Iterable[tuple[str, str]]) -> str:
    return str(httpx.QueryParams(list(pairs)))


def prepare_request(
    params: ParameterSet, *, config: Settings | None = None
) -> httpx.Request:
    """
    Validate, build and wrap one hit as an unsent httpx request.

    Notes:
    - GET with a query string while the full URL fits max_get_length,
      otherwise POST with a form-encoded body.
    - Sending, retries and batching belong to the caller's HTTP client.
    """
    cfg = config or settings

    ensure_valid(params)
    payload = encode_payload(build(params))
    body = payload.encode("utf-8")
    if len(body) > cfg.max_post_bytes:
        raise PayloadTooLarge(size=len(body), limit=cfg.max_post_bytes)

    headers = {"user-agent": params.user_agent or cfg.user_agent}
    if params.referral_url:
        headers["referer"] = params.referral_url

    endpoint = cfg.endpoint()
    url = f"{endpoint}?{payload}"
    if len(url.encode("utf-8")) <= cfg.max_get_length:
        logger.debug("Prepared GET hit (%s bytes) for %s", len(url), endpoint)
        return httpx.Request("GET", url, headers=headers)

    headers["content-type"] = "application/x-www-form-urlencoded"
    logger.debug("Prepared POST hit (%s bytes) for %s", len(body), endpoint)
    return httpx.Request("POST", endpoint, headers=headers, content=body)
