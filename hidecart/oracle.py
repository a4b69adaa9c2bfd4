# hidecart/oracle.py
import logging
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class CartService(Protocol):
    """What the commerce host must answer about the visitor's cart."""

    def cart_exists(self) -> bool: ...

    def cart_is_empty(self) -> bool: ...


class CartStateOracle:
    """Single place where "is the cart empty?" is asked.

    A missing or not-yet-initialised cart service counts as *not* empty, so
    the normal UI renders instead of a half-hidden one.
    """

    def __init__(self, cart: Optional[CartService]):
        self.cart = cart

    def is_empty(self) -> bool:
        if self.cart is None or not self.cart.cart_exists():
            logger.debug("cart service unavailable, leaving cart UI visible")
            return False
        return bool(self.cart.cart_is_empty())
