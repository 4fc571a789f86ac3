import logging
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel
from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError

from core.outcomes import DownstreamError, Outcome, Success, TransportError
from db.database import Database
from db.product import Product as ProductModel
from schemas.inventory import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)

NOT_FOUND = DownstreamError(status_code=404, message="Product not found")


def _columns(model: Type[BaseModel], payload: Dict[str, Any]) -> Dict[str, Any]:
    """camelCase payload -> column values, dropping fields that were not sent"""
    parsed = model.model_validate(payload)
    data = parsed.model_dump(exclude_unset=True)
    if parsed.taste_profile is not None:
        data["taste_profile"] = parsed.taste_profile.model_dump(by_alias=True)
    return {k: v for k, v in data.items() if v is not None or k == "taste_profile"}


class ProductStore:
    """
    Direct-persistence inventory backend.

    Offers the same operations as BreweryApiClient and answers with the same
    outcome types, so handlers do not care which one is wired in. The token
    arguments are accepted for parity and ignored.
    """

    def __init__(self, database: Database):
        self.database = database

    async def create_product(self, payload: Dict[str, Any], token: Optional[str] = None) -> Outcome:
        try:
            async with self.database.session_maker() as db:
                product = ProductModel(**_columns(ProductCreate, payload))
                db.add(product)
                await db.commit()
                await db.refresh(product)
                return Success(status_code=201, payload=product.to_schema)
        except SQLAlchemyError as e:
            logger.exception("create_product failed")
            return TransportError(message=str(e))

    async def get_product(self, product_id: str) -> Outcome:
        try:
            async with self.database.session_maker() as db:
                product = await db.get(ProductModel, product_id)
                if not product:
                    return NOT_FOUND
                return Success(status_code=200, payload=product.to_schema)
        except SQLAlchemyError as e:
            logger.exception("get_product failed")
            return TransportError(message=str(e))

    async def update_product(self, product_id: str, payload: Dict[str, Any], token: Optional[str] = None) -> Outcome:
        try:
            async with self.database.session_maker() as db:
                product = await db.get(ProductModel, product_id)
                if not product:
                    return NOT_FOUND
                for key, value in _columns(ProductUpdate, payload).items():
                    setattr(product, key, value)
                await db.commit()
                await db.refresh(product)
                return Success(status_code=200, payload=product.to_schema)
        except SQLAlchemyError as e:
            logger.exception("update_product failed")
            return TransportError(message=str(e))

    async def delete_product(self, product_id: str, token: Optional[str] = None) -> Outcome:
        try:
            async with self.database.session_maker() as db:
                product = await db.get(ProductModel, product_id)
                if not product:
                    return NOT_FOUND
                await db.delete(product)
                await db.commit()
                return Success(status_code=200)
        except SQLAlchemyError as e:
            logger.exception("delete_product failed")
            return TransportError(message=str(e))

    async def list_products(self) -> Outcome:
        try:
            async with self.database.session_maker() as db:
                result = await db.execute(select(ProductModel).order_by(ProductModel.created_at.asc()))
                return Success(status_code=200, payload=[p.to_schema for p in result.scalars().all()])
        except SQLAlchemyError as e:
            logger.exception("list_products failed")
            return TransportError(message=str(e))

    async def update_stock(self, product_id: str, quantity: int, token: Optional[str] = None) -> Outcome:
        try:
            async with self.database.session_maker() as db:
                # delta applied in SQL so concurrent updates cannot overwrite each other
                result = await db.execute(
                    update(ProductModel)
                    .where(
                        ProductModel.id == product_id,
                        ProductModel.stock_quantity + quantity >= 0,
                    )
                    .values(stock_quantity=ProductModel.stock_quantity + quantity)
                    .returning(ProductModel)
                    .execution_options(synchronize_session=False)
                )
                product = result.scalar_one_or_none()
                if product is None:
                    await db.rollback()
                    if await db.get(ProductModel, product_id) is None:
                        return NOT_FOUND
                    return DownstreamError(status_code=400, message="Insufficient stock")
                await db.commit()
                return Success(status_code=200, payload=product.to_schema)
        except SQLAlchemyError as e:
            logger.exception("update_stock failed")
            return TransportError(message=str(e))

    async def list_low_stock(self, token: Optional[str] = None) -> Outcome:
        try:
            async with self.database.session_maker() as db:
                result = await db.execute(
                    select(ProductModel)
                    .where(ProductModel.stock_quantity <= ProductModel.reorder_point)
                    .order_by(ProductModel.stock_quantity.asc())
                )
                return Success(status_code=200, payload=[p.to_schema for p in result.scalars().all()])
        except SQLAlchemyError as e:
            logger.exception("list_low_stock failed")
            return TransportError(message=str(e))
