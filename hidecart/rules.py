# hidecart/rules.py
from .oracle import CartStateOracle


class VisibilityRule:
    def __init__(self, oracle: CartStateOracle):
        self.oracle = oracle

    def should_suppress(self) -> bool:
        # no memoisation: the cart may change between two calls
        return self.oracle.is_empty()
