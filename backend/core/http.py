import logging
from typing import Any, Dict, Optional

import httpx

from core.outcomes import DownstreamError, Outcome, Success, TransportError

logger = logging.getLogger(__name__)


def auth_headers(token: Optional[str] = None) -> Dict[str, str]:
    headers = {"Accept": "application/json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def _decode(resp: httpx.Response) -> Any:
    if resp.status_code == 204 or not resp.content:
        return None
    return resp.json()


async def send(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    json: Any = None,
    token: Optional[str] = None,
) -> Outcome:
    """
    Make a single outbound call and classify the result.

    No retries: a failed attempt is reported straight back to the caller.
    """
    try:
        resp = await client.request(method, url, json=json, headers=auth_headers(token))
    except httpx.HTTPError as e:
        logger.debug("%s %s failed: %r", method, url, e)
        return TransportError(message=str(e) or type(e).__name__)

    if resp.is_success:
        try:
            return Success(status_code=resp.status_code, payload=_decode(resp))
        except ValueError:
            return TransportError(message=f"Malformed response body from {method} {url}")

    # redirects are not followed; anything outside 2xx, 4xx and 5xx is unusable
    if not (resp.is_client_error or resp.is_server_error):
        return TransportError(message=f"Unexpected status code {resp.status_code} from {method} {url}")

    try:
        body = resp.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        return TransportError(message=f"Request failed with status code {resp.status_code}")

    return DownstreamError(
        status_code=resp.status_code,
        message=body.get("message"),
        detail=body.get("errors"),
    )
