import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, Integer, String, Text

from .database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False, index=True)

    # 'Beer' | 'Cocktail' | 'Liqueur' | 'Hard Seltzer'
    type = Column(String, nullable=False)
    description = Column(Text, nullable=False)

    abv = Column(Float, nullable=False)
    volume = Column(Float, nullable=False)
    # 'Can' | 'Bottle'
    package = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    cost = Column(Float, nullable=False)

    stock_quantity = Column(Integer, nullable=False, default=0)
    reorder_point = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    # {"primaryFlavor", "sweetness", "bitterness"}
    taste_profile = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    @property
    def to_schema(self):
        """Convert Product model to the camelCase wire format"""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "description": self.description,
            "abv": self.abv,
            "volume": self.volume,
            "package": self.package,
            "price": self.price,
            "cost": self.cost,
            "stockQuantity": self.stock_quantity,
            "reorderPoint": self.reorder_point,
            "isActive": self.is_active,
            "tasteProfile": self.taste_profile,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
