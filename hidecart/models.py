# hidecart/models.py
from sqlalchemy import (
    Column, Integer, String, Text, CheckConstraint, UniqueConstraint, Index
)
from .database import Base


# ⚙️ Key/value configuration store (one row per option)
class Option(Base):
    __tablename__ = "options"

    key = Column(String(191), primary_key=True)
    value = Column(Text, nullable=False, default="")


# 🛒 Session cart line; cart_key is the visitor's cart cookie
class CartItem(Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True, index=True)
    cart_key = Column(String(64), nullable=False)
    product_id = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    __table_args__ = (
        UniqueConstraint("cart_key", "product_id", name="uq_cart_key_product"),  # 🚫 no duplicate lines
        CheckConstraint("quantity > 0", name="ck_cartitem_quantity_pos"),
        Index("ix_cart_items_cart_key", "cart_key"),
    )
