from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, UniqueConstraint
from sqlalchemy.orm import relationship

from app.core.dates import utcnow
from app.database.base import Base


class ProductPrice(Base):
    __tablename__ = "product_prices"

    id = Column(Integer, primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    currency_id = Column(Integer, ForeignKey("currencies.id"), nullable=False)

    price = Column(Numeric(15, 2), nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    product = relationship("Product", back_populates="prices")
    currency = relationship("Currency", back_populates="product_prices")

    __table_args__ = (
        UniqueConstraint("product_id", "currency_id", name="uq_product_prices_product_currency"),
    )


__all__ = ["ProductPrice"]
