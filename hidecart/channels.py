# hidecart/channels.py
import logging
from typing import Dict, List, NoReturn, Optional, Protocol, Sequence, TypeVar
from urllib.parse import urljoin, urlsplit

from .rules import VisibilityRule
from .selector_set import selector_list

logger = logging.getLogger(__name__)

STYLE_ID = "wc-hide-cart-when-empty"
FRAGMENT_KEY = f"style#{STYLE_ID}"

T = TypeVar("T")


def untrailingslashit(url: str) -> str:
    return url.rstrip("/\\")


class PageContext(Protocol):
    """Router/page collaborator used by the cart page guard."""

    def is_cart_page(self) -> bool: ...

    def cart_url(self) -> str: ...

    def resolve_permalink(self, page_id: str) -> Optional[str]: ...

    def home_url(self) -> str: ...

    def redirect(self, url: str) -> NoReturn: ...


# 🧭 Menu links pointing at the cart page
class MenuFilter:
    def __init__(self, rule: VisibilityRule):
        self.rule = rule

    def filter(self, items: Sequence[T], cart_url: str) -> Sequence[T]:
        if not self.rule.should_suppress():
            return items

        target = untrailingslashit(cart_url)
        kept: List[T] = []
        for item in items:
            url = getattr(item, "url", None)
            if url is not None and untrailingslashit(url) == target:
                continue
            kept.append(item)
        logger.debug("menu: hid %d cart link(s)", len(items) - len(kept))
        return kept


# 🚧 The cart page itself
class PageGuard:
    def __init__(self, rule: VisibilityRule):
        self.rule = rule

    def on_request(self, page: PageContext) -> Optional[str]:
        """Redirect away from an empty cart page.

        Returns None when nothing happens; otherwise ``page.redirect`` is
        expected to stop the request, and the target is returned only for
        hosts whose redirect does not raise.
        """
        if not page.is_cart_page() or not self.rule.should_suppress():
            return None

        target = self.resolve_target(page)
        logger.debug("cart page requested with empty cart, redirecting to %s", target)
        page.redirect(target)
        return target

    @staticmethod
    def resolve_target(page: PageContext) -> str:
        home = page.home_url()
        target = page.resolve_permalink("shop") or home

        absolute = urljoin(home, target)
        cart = urljoin(home, page.cart_url())
        # safe redirect: stay on our host and never bounce back onto the cart page
        if urlsplit(absolute).netloc != urlsplit(home).netloc:
            return home
        if untrailingslashit(absolute) == untrailingslashit(cart):
            return home
        return target


# 🎨 CSS rule + AJAX fragment (enhanced variant)
class StyleInjector:
    def __init__(self, rule: VisibilityRule, selectors: Sequence[str]):
        self.rule = rule
        self.selectors = tuple(selectors)

    def css_rule(self) -> str:
        return selector_list(self.selectors) + "{display:none!important}"

    def render_style_block(self) -> str:
        if not self.rule.should_suppress():
            return ""
        return f'<style id="{STYLE_ID}">{self.css_rule()}</style>'


class FragmentSync:
    def __init__(self, injector: StyleInjector):
        self.injector = injector

    def sync_fragment(self, fragments: Dict[str, str]) -> Dict[str, str]:
        # same renderer as the footer so both outputs stay byte-identical
        synced = dict(fragments)
        synced[FRAGMENT_KEY] = self.injector.render_style_block()
        return synced


# 🧹 Cart fragments (legacy variant)
class FragmentFilter:
    def __init__(self, rule: VisibilityRule):
        self.rule = rule

    def filter(self, fragments: Dict[str, str]) -> Dict[str, str]:
        if not self.rule.should_suppress():
            return fragments
        # key or markup mentioning "cart", any case
        return {
            key: html
            for key, html in fragments.items()
            if "cart" not in (key + html).lower()
        }
