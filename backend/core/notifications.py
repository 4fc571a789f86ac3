import logging
from dataclasses import dataclass

import httpx

from core.http import send
from core.outcomes import Outcome, Success

logger = logging.getLogger(__name__)


@dataclass
class LowStockNotifier:
    """Client for the notification service's low-stock endpoint."""

    base_url: str
    http: httpx.AsyncClient

    async def notify_low_stock(self, product_id: str) -> Outcome:
        url = f"{self.base_url.rstrip('/')}/notifications/low-stock"
        logger.info("Sending low-stock notification for product=%s", product_id)
        outcome = await send(self.http, "POST", url, json={"productId": product_id})
        if not isinstance(outcome, Success):
            logger.warning("Low-stock notification for product=%s failed: %s", product_id, outcome)
        return outcome
