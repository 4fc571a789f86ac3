import logging
from numbers import Number
from typing import Any, Optional

from core.notifications import LowStockNotifier
from core.outcomes import Outcome, Success

logger = logging.getLogger(__name__)

STOCK_UPDATED = "Stock updated successfully"


def is_low_stock(product: Any) -> bool:
    """True when the record's stockQuantity has dropped to its reorderPoint or below."""
    if not isinstance(product, dict):
        return False
    stock = product.get("stockQuantity")
    reorder = product.get("reorderPoint")
    if isinstance(stock, bool) or isinstance(reorder, bool):
        return False
    if not isinstance(stock, Number) or not isinstance(reorder, Number):
        return False
    return stock <= reorder


async def update_stock_and_notify(
    inventory,
    notifier: LowStockNotifier,
    product_id: str,
    quantity: int,
    token: Optional[str] = None,
    fail_on_notification_error: bool = False,
) -> Outcome:
    """
    Apply a stock delta, then fire a low-stock notification if the product
    is now at or under its reorder point.

    The notification is a separate call with no atomicity: the stock change
    stands whatever happens to it. By default a failed notification is only
    logged; with fail_on_notification_error the failure is returned instead.
    """
    outcome = await inventory.update_stock(product_id, quantity, token=token)
    if not isinstance(outcome, Success):
        return outcome

    product = outcome.payload
    if is_low_stock(product):
        notified = await notifier.notify_low_stock(product_id)
        if not isinstance(notified, Success) and fail_on_notification_error:
            return notified
    else:
        logger.debug("Product %s above reorder point, no notification", product_id)

    return Success(status_code=200, payload={"message": STOCK_UPDATED, "product": product})
