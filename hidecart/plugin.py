# hidecart/plugin.py
"""Lifecycle surface called by the storefront.

The host calls these at fixed points of a request:

* ``on_request_start`` before a page renders (may redirect the cart page),
* ``on_render_menu`` with the navigation entries,
* ``on_render_footer`` for markup appended to every page,
* ``on_build_fragments`` for the AJAX fragments returned after a cart change.

``Variant.LEGACY`` removes cart menu links and cart fragments;
``Variant.ENHANCED`` hides configurable selectors with one CSS rule and
mirrors that rule into the fragments. Both redirect the empty cart page.
"""
import enum
from typing import Dict, Optional, Sequence, TypeVar

from .channels import (
    FragmentFilter,
    FragmentSync,
    MenuFilter,
    PageContext,
    PageGuard,
    StyleInjector,
)
from .oracle import CartService, CartStateOracle
from .rules import VisibilityRule
from .selector_set import compute

T = TypeVar("T")


class Variant(str, enum.Enum):
    LEGACY = "legacy"
    ENHANCED = "enhanced"


class HideCartPlugin:
    def __init__(
        self,
        cart: Optional[CartService],
        variant: Variant = Variant.ENHANCED,
        raw_selectors: Optional[str] = "",
    ):
        self.variant = Variant(variant)
        self.rule = VisibilityRule(CartStateOracle(cart))
        self.selectors = compute(raw_selectors)

        self.page_guard = PageGuard(self.rule)
        self.menu_filter = MenuFilter(self.rule)
        self.fragment_filter = FragmentFilter(self.rule)
        self.style_injector = StyleInjector(self.rule, self.selectors)
        self.fragment_sync = FragmentSync(self.style_injector)

    def on_request_start(self, page: PageContext) -> Optional[str]:
        return self.page_guard.on_request(page)

    def on_render_menu(self, items: Sequence[T], cart_url: str) -> Sequence[T]:
        if self.variant is Variant.LEGACY:
            return self.menu_filter.filter(items, cart_url)
        return items

    def on_render_footer(self) -> str:
        if self.variant is Variant.ENHANCED:
            return self.style_injector.render_style_block()
        return ""

    def on_build_fragments(self, fragments: Dict[str, str]) -> Dict[str, str]:
        if self.variant is Variant.LEGACY:
            return self.fragment_filter.filter(fragments)
        return self.fragment_sync.sync_fragment(fragments)
