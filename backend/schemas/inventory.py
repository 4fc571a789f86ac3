from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator
from pydantic.alias_generators import to_camel


ProductType = Literal["Beer", "Cocktail", "Liqueur", "Hard Seltzer"]
PackageType = Literal["Can", "Bottle"]

NUMERIC_FIELDS = ("abv", "volume", "price", "cost", "stock_quantity", "reorder_point")


def _reject_bool(v: Any) -> Any:
    # JSON true/false would otherwise coerce to 1/0
    if isinstance(v, bool):
        raise ValueError("must be a number, not a boolean")
    return v


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TasteProfile(CamelModel):
    primary_flavor: Optional[str] = None
    sweetness: Optional[str] = None
    bitterness: Optional[str] = None


class ProductCreate(CamelModel):
    name: str
    type: ProductType
    description: str
    abv: float = Field(ge=0)
    volume: float = Field(ge=0)
    package: PackageType
    price: float = Field(ge=0)
    cost: float = Field(ge=0)
    stock_quantity: int = Field(ge=0)
    reorder_point: int = Field(ge=0)
    is_active: Optional[StrictBool] = None
    taste_profile: Optional[TasteProfile] = None

    @field_validator(*NUMERIC_FIELDS, mode="before")
    @classmethod
    def _numbers_not_bool(cls, v: Any) -> Any:
        return _reject_bool(v)

    @field_validator("name", "description")
    @classmethod
    def _strip_required(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("field is required")
        return v


class ProductUpdate(CamelModel):
    name: Optional[str] = None
    type: Optional[ProductType] = None
    description: Optional[str] = None
    abv: Optional[float] = Field(default=None, ge=0)
    volume: Optional[float] = Field(default=None, ge=0)
    package: Optional[PackageType] = None
    price: Optional[float] = Field(default=None, ge=0)
    cost: Optional[float] = Field(default=None, ge=0)
    stock_quantity: Optional[int] = Field(default=None, ge=0)
    reorder_point: Optional[int] = Field(default=None, ge=0)
    is_active: Optional[StrictBool] = None
    taste_profile: Optional[TasteProfile] = None

    @field_validator(*NUMERIC_FIELDS, mode="before")
    @classmethod
    def _numbers_not_bool(cls, v: Any) -> Any:
        return _reject_bool(v)

    @field_validator("name", "description")
    @classmethod
    def _strip_optional(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty")
        return v


class StockUpdateRequest(BaseModel):
    # delta; negative values take stock out
    quantity: int

    @field_validator("quantity", mode="before")
    @classmethod
    def _quantity_not_bool(cls, v: Any) -> Any:
        return _reject_bool(v)


class Violation(BaseModel):
    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    errors: List[Violation]


class ErrorResponse(BaseModel):
    message: str
    error: Optional[Any] = None


class MessageResponse(BaseModel):
    message: str


class StockUpdateResponse(BaseModel):
    message: str
    product: Any
