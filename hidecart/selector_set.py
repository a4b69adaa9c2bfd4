# hidecart/selector_set.py
"""Selectors hidden while the cart is empty.

The admin can add selectors through the settings endpoint; the built-in
defaults below are always part of the result.
"""
import re
from typing import Iterable, List, Optional, Tuple

from markupsafe import escape

BUILTIN_DEFAULTS: Tuple[str, ...] = (
    ".show-cart-btn",
    ".wd-header-cart",
    ".site-header .cart-contents",
    ".menu-item-type-woocommerce-cart",
)


_SCRIPT_STYLE_RE = re.compile(r"<(script|style)[^>]*?>.*?</\1>", re.IGNORECASE | re.DOTALL)
# an unclosed trailing tag counts as a tag too
_TAG_RE = re.compile(r"<[^>]*(?:>|$)")


def strip_tags(raw: Optional[str]) -> str:
    """Remove tags (and script/style bodies) without decoding entities."""
    if not raw:
        return ""
    value, previous = raw, None
    while value != previous:
        previous = value
        value = _TAG_RE.sub("", _SCRIPT_STYLE_RE.sub("", value))
    return value


def split_selectors(raw: Optional[str]) -> List[str]:
    """Strip markup, split on commas, trim and drop empty pieces."""
    pieces = (" ".join(part.split()) for part in strip_tags(raw).split(","))
    return [piece for piece in pieces if piece]


def sanitize(raw: Optional[str]) -> str:
    """Normalised form stored in the option (admin write path)."""
    return ", ".join(split_selectors(raw))


def compute(raw: Optional[str]) -> Tuple[str, ...]:
    """Configured selectors first, then the defaults, duplicates dropped."""
    seen = []
    for selector in [*split_selectors(raw), *BUILTIN_DEFAULTS]:
        if selector not in seen:
            seen.append(selector)
    return tuple(seen)


def selector_list(selectors: Iterable[str]) -> str:
    return ",".join(str(escape(s)) for s in selectors)
