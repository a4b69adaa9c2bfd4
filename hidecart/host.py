# hidecart/host.py
"""Glue between the FastAPI storefront and the hide-cart core.

Everything async (database reads, cookies) happens here, before the core
objects are built, so the core itself stays synchronous and request-scoped.
"""
import logging
from dataclasses import dataclass, field
from typing import List, NoReturn, Optional
from urllib.parse import urljoin

from fastapi import Depends, Request
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from . import config
from .channels import untrailingslashit
from .database import get_session
from .models import CartItem
from .options import OptionStore, SqlOptionStore
from .plugin import HideCartPlugin, Variant
from .schemas import MenuItem

logger = logging.getLogger(__name__)


class RedirectRequested(Exception):
    """Raised to stop a page request; answered with a 302 by the app."""

    def __init__(self, url: str):
        super().__init__(url)
        self.url = url


@dataclass
class CartSnapshot:
    """Cart state loaded once per request; implements ``CartService``."""

    key: Optional[str]
    items: List[CartItem] = field(default_factory=list)
    available: bool = True

    @property
    def count(self) -> int:
        return sum(item.quantity for item in self.items)

    def cart_exists(self) -> bool:
        return self.available

    def cart_is_empty(self) -> bool:
        return not self.items


async def load_cart(session: AsyncSession, cart_key: Optional[str]) -> CartSnapshot:
    if not cart_key:
        return CartSnapshot(key=None)
    try:
        result = await session.execute(
            select(CartItem).where(CartItem.cart_key == cart_key).order_by(CartItem.id)
        )
        return CartSnapshot(key=cart_key, items=list(result.scalars().all()))
    except SQLAlchemyError:
        logger.warning("could not load cart %s, treating cart as unavailable", cart_key, exc_info=True)
        await session.rollback()
        return CartSnapshot(key=cart_key, available=False)


async def read_selectors(store: OptionStore) -> str:
    try:
        return await store.get(config.SELECTORS_OPTION, "")
    except SQLAlchemyError:
        logger.warning("could not read %s, using built-in selectors only", config.SELECTORS_OPTION, exc_info=True)
        return ""


class RequestPageContext:
    def __init__(self, request: Request):
        self.request = request

    def home_url(self) -> str:
        return str(self.request.base_url)

    def cart_url(self) -> str:
        return urljoin(self.home_url(), config.CART_PATH)

    def is_cart_page(self) -> bool:
        return untrailingslashit(self.request.url.path) == untrailingslashit(config.CART_PATH)

    def resolve_permalink(self, page_id: str) -> Optional[str]:
        if page_id == "shop" and config.SHOP_PAGE_URL:
            return config.SHOP_PAGE_URL
        return None

    def redirect(self, url: str) -> NoReturn:
        raise RedirectRequested(url)


def navigation(request: Request) -> List[MenuItem]:
    base = str(request.base_url)
    return [
        MenuItem(title="Home", url=base),
        MenuItem(title="Shop", url=urljoin(base, "shop/")),
        MenuItem(title="Cart", url=urljoin(base, config.CART_PATH.lstrip("/") + "/")),
    ]


# ---- FastAPI dependencies -------------------------------------------------

def get_variant() -> Variant:
    return Variant(config.HIDE_CART_VARIANT)


def get_option_store(session: AsyncSession = Depends(get_session)) -> OptionStore:
    return SqlOptionStore(session)


async def get_cart(request: Request, session: AsyncSession = Depends(get_session)) -> CartSnapshot:
    return await load_cart(session, request.cookies.get(config.CART_COOKIE_NAME))


async def get_plugin(
    cart: CartSnapshot = Depends(get_cart),
    store: OptionStore = Depends(get_option_store),
    variant: Variant = Depends(get_variant),
) -> HideCartPlugin:
    return HideCartPlugin(cart, variant, await read_selectors(store))
