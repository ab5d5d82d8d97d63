from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from app.core.dates import utcnow
from app.database.base import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)

    price = Column(Numeric(15, 2), nullable=False)
    currency_id = Column(
        Integer,
        ForeignKey("currencies.id", ondelete="RESTRICT"),
        nullable=False,
    )
    tax_cost = Column(Numeric(15, 2), nullable=False)
    manufacturing_cost = Column(Numeric(15, 2), nullable=False)

    deleted_at = Column(DateTime(timezone=True))
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    currency = relationship("Currency", back_populates="products")
    prices = relationship(
        "ProductPrice",
        back_populates="product",
        order_by="ProductPrice.currency_id",
    )

    __table_args__ = (
        Index("idx_products_name_currency", "name", "currency_id"),
        Index("idx_products_price", "price"),
    )

    @property
    def total_cost(self):
        return self.price + self.tax_cost + self.manufacturing_cost


__all__ = ["Product"]
