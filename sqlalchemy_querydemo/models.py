from datetime import date
from typing import Optional

from sqlalchemy import Date, ForeignKey
from sqlalchemy.orm import declarative_base, mapped_column, relationship, Mapped

Base = declarative_base()


class Category(Base):
    __tablename__ = "CATEGORY"
    id: Mapped[int] = mapped_column("CATEGORY_ID", primary_key=True)
    name: Mapped[Optional[str]] = mapped_column()

    def __repr__(self):
        return f"Category(id={self.id} name={self.name})"


class Product(Base):
    __tablename__ = "PRODUCT"
    id: Mapped[int] = mapped_column("PRODUCT_ID", primary_key=True)
    name: Mapped[Optional[str]] = mapped_column()
    description: Mapped[Optional[str]] = mapped_column()
    price: Mapped[float] = mapped_column(default=0.0)

    category_id: Mapped[Optional[int]] = mapped_column("CATEGORY_ID", ForeignKey("CATEGORY.CATEGORY_ID"))
    category: Mapped[Optional[Category]] = relationship()

    def __repr__(self):
        return f"Product(id={self.id} name={self.name})"


class Order(Base):
    __tablename__ = "ORDERS"
    id: Mapped[int] = mapped_column("ORDER_ID", primary_key=True)
    customer_name: Mapped[Optional[str]] = mapped_column("CUSTOMER_NAME")
    # Day precision only, no time component
    purchase_date: Mapped[Optional[date]] = mapped_column("PURCHASE_DATE", Date)
    amount: Mapped[float] = mapped_column(default=0.0)

    product_id: Mapped[Optional[int]] = mapped_column("PRODUCT_ID", ForeignKey("PRODUCT.PRODUCT_ID"))
    product: Mapped[Optional[Product]] = relationship()

    def __repr__(self):
        return f"Order(id={self.id} customer_name={self.customer_name})"


class OldCategory(Base):
    """
    Legacy category table, only read as the source of the INSERT ... SELECT example.
    """
    __tablename__ = "OLD_CATEGORY"
    id: Mapped[int] = mapped_column("CATEGORY_ID", primary_key=True)
    name: Mapped[Optional[str]] = mapped_column()

    def __repr__(self):
        return f"OldCategory(id={self.id} name={self.name})"
