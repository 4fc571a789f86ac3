import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from fastapi import status
from fastapi.responses import JSONResponse

from core.outcomes import DownstreamError, Outcome, Success, TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Operation:
    name: str
    success_status: int
    fallback_status: int
    fallback_message: str
    success_message: Optional[str] = None


ADD = Operation("add", status.HTTP_201_CREATED, status.HTTP_500_INTERNAL_SERVER_ERROR, "Error adding product")
GET = Operation("get", status.HTTP_200_OK, status.HTTP_404_NOT_FOUND, "Product not found")
UPDATE = Operation("update", status.HTTP_200_OK, status.HTTP_404_NOT_FOUND, "Product not found")
DELETE = Operation(
    "delete",
    status.HTTP_200_OK,
    status.HTTP_404_NOT_FOUND,
    "Product not found",
    success_message="Product deleted successfully",
)
LIST = Operation("list", status.HTTP_200_OK, status.HTTP_500_INTERNAL_SERVER_ERROR, "Error fetching products")
STOCK = Operation("stock", status.HTTP_200_OK, status.HTTP_500_INTERNAL_SERVER_ERROR, "Error updating stock")
LOW_STOCK = Operation("low_stock", status.HTTP_200_OK, status.HTTP_500_INTERNAL_SERVER_ERROR, "Error fetching low stock")


def _error_body(message: str, error: Any) -> Dict[str, Any]:
    return {"message": message, "error": error}


def to_response(operation: Operation, outcome: Outcome) -> JSONResponse:
    """Map a gateway outcome onto the status + JSON body this service exposes."""
    if isinstance(outcome, Success):
        if operation.success_message is not None:
            return JSONResponse(status_code=operation.success_status, content={"message": operation.success_message})
        return JSONResponse(status_code=operation.success_status, content=outcome.payload)

    if isinstance(outcome, DownstreamError):
        logger.error(
            "%s: downstream answered %s: %s %s",
            operation.fallback_message, outcome.status_code, outcome.message, outcome.detail,
        )
        return JSONResponse(
            status_code=outcome.status_code,
            content=_error_body(outcome.message or operation.fallback_message, outcome.detail),
        )

    if isinstance(outcome, TransportError):
        logger.error("%s: %s", operation.fallback_message, outcome.message)
        return JSONResponse(
            status_code=operation.fallback_status,
            content=_error_body(operation.fallback_message, outcome.message),
        )

    raise TypeError(f"Unknown outcome {outcome!r}")
