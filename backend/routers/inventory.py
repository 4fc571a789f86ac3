from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request, status

from core import responses
from core.auth import AuthenticatedUser, current_user
from core.notifications import LowStockNotifier
from core.stock import update_stock_and_notify
from schemas.inventory import (
    ErrorResponse,
    MessageResponse,
    ProductCreate,
    ProductUpdate,
    StockUpdateRequest,
    StockUpdateResponse,
    ValidationErrorResponse,
)

router = APIRouter()

ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def get_inventory(request: Request):
    """BreweryApiClient or ProductStore, picked at startup."""
    return request.app.state.inventory


def get_notifier(request: Request) -> LowStockNotifier:
    return request.app.state.notifier


@router.post("/add-product", status_code=status.HTTP_201_CREATED, response_model=Dict, responses=ERROR_RESPONSES)
async def add_product(
    payload: ProductCreate,
    user: AuthenticatedUser = Depends(current_user),
    inventory=Depends(get_inventory),
):
    """Create a product"""
    outcome = await inventory.create_product(payload.model_dump(by_alias=True, exclude_unset=True), token=user.token)
    return responses.to_response(responses.ADD, outcome)


@router.get("/low-stock", response_model=List[Dict], responses=ERROR_RESPONSES)
async def get_low_stock(
    user: AuthenticatedUser = Depends(current_user),
    inventory=Depends(get_inventory),
):
    """Products at or below their reorder point"""
    outcome = await inventory.list_low_stock(token=user.token)
    return responses.to_response(responses.LOW_STOCK, outcome)


@router.get("/{product_id}", response_model=Dict, responses=ERROR_RESPONSES)
async def get_product(product_id: str, inventory=Depends(get_inventory)):
    """Get a product by ID"""
    outcome = await inventory.get_product(product_id)
    return responses.to_response(responses.GET, outcome)


@router.put("/{product_id}", response_model=Dict, responses=ERROR_RESPONSES)
async def update_product(
    product_id: str,
    payload: ProductUpdate,
    user: AuthenticatedUser = Depends(current_user),
    inventory=Depends(get_inventory),
):
    """Update some or all fields of a product"""
    outcome = await inventory.update_product(
        product_id, payload.model_dump(by_alias=True, exclude_unset=True), token=user.token
    )
    return responses.to_response(responses.UPDATE, outcome)


@router.delete("/{product_id}", response_model=MessageResponse, responses=ERROR_RESPONSES)
async def delete_product(
    product_id: str,
    user: AuthenticatedUser = Depends(current_user),
    inventory=Depends(get_inventory),
):
    """Delete a product"""
    outcome = await inventory.delete_product(product_id, token=user.token)
    return responses.to_response(responses.DELETE, outcome)


@router.get("", response_model=List[Dict], responses=ERROR_RESPONSES, include_in_schema=False)
@router.get("/", response_model=List[Dict], responses=ERROR_RESPONSES)
async def get_products(inventory=Depends(get_inventory)):
    """Get all products"""
    outcome = await inventory.list_products()
    return responses.to_response(responses.LIST, outcome)


@router.put("/{product_id}/stock", response_model=StockUpdateResponse, responses=ERROR_RESPONSES)
async def update_stock(
    product_id: str,
    payload: StockUpdateRequest,
    request: Request,
    user: AuthenticatedUser = Depends(current_user),
    inventory=Depends(get_inventory),
    notifier: LowStockNotifier = Depends(get_notifier),
):
    """Apply a stock delta; notifies when the product reaches its reorder point"""
    outcome = await update_stock_and_notify(
        inventory,
        notifier,
        product_id,
        payload.quantity,
        token=user.token,
        fail_on_notification_error=request.app.state.settings.notification_failure_is_error,
    )
    return responses.to_response(responses.STOCK, outcome)
