from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from core.http import send
from core.outcomes import Outcome


@dataclass
class BreweryApiClient:
    """
    Thin async client for the downstream brewery inventory API.

    Reads are anonymous; mutating calls forward the caller's bearer token.
    """

    base_url: str
    http: httpx.AsyncClient

    def _url(self, path: str = "") -> str:
        return f"{self.base_url.rstrip('/')}/api/inventory{path}"

    async def create_product(self, payload: Dict[str, Any], token: Optional[str] = None) -> Outcome:
        return await send(self.http, "POST", self._url(), json=payload, token=token)

    async def get_product(self, product_id: str) -> Outcome:
        return await send(self.http, "GET", self._url(f"/{product_id}"))

    async def update_product(self, product_id: str, payload: Dict[str, Any], token: Optional[str] = None) -> Outcome:
        return await send(self.http, "PUT", self._url(f"/{product_id}"), json=payload, token=token)

    async def delete_product(self, product_id: str, token: Optional[str] = None) -> Outcome:
        return await send(self.http, "DELETE", self._url(f"/{product_id}"), token=token)

    async def list_products(self) -> Outcome:
        return await send(self.http, "GET", self._url())

    async def update_stock(self, product_id: str, quantity: int, token: Optional[str] = None) -> Outcome:
        return await send(
            self.http,
            "PUT",
            self._url(f"/{product_id}/stock"),
            json={"quantity": quantity},
            token=token,
        )

    async def list_low_stock(self, token: Optional[str] = None) -> Outcome:
        return await send(self.http, "GET", self._url("/low-stock"), token=token)
