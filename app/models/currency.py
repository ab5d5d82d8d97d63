from sqlalchemy import CheckConstraint, Column, DateTime, Integer, Numeric, String
from sqlalchemy.orm import relationship

from app.core.dates import utcnow
from app.database.base import Base


class Currency(Base):
    __tablename__ = "currencies"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    symbol = Column(String(16), nullable=False)
    exchange_rate = Column(Numeric(15, 6), nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    products = relationship("Product", back_populates="currency")
    product_prices = relationship("ProductPrice", back_populates="currency")

    __table_args__ = (
        CheckConstraint("exchange_rate > 0", name="ck_currencies_exchange_rate_positive"),
    )

    @property
    def formatted_name(self) -> str:
        return "{} ({})".format(self.name, self.symbol)


__all__ = ["Currency"]
