# hidecart/schemas.py
from pydantic import BaseModel
from typing import Dict, List, Optional


# 🧭 Navigation entry
class MenuItem(BaseModel):
    title: str
    url: str


# 🛒 Cart line
class CartItemCreate(BaseModel):
    product_id: int
    quantity: int = 1


class CartItemOut(BaseModel):
    id: int
    product_id: int
    quantity: int

    class Config:
        from_attributes = True


class CartOut(BaseModel):
    items: List[CartItemOut]
    count: int


# 🔄 Response of every cart-mutating call (WooCommerce-style fragments)
class CartMutationOut(BaseModel):
    count: int
    fragments: Dict[str, str]


# ⚙️ Admin settings
class SelectorSettingsIn(BaseModel):
    selectors: Optional[str] = ""


class SelectorSettingsOut(BaseModel):
    selectors: str
    effective: List[str]
    variant: str
