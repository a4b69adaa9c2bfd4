# hidecart/config.py
import os

# Use DATABASE_URL env var when available (makes containerized runs configurable)
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    "postgresql+asyncpg://postgres:postgres@db:5432/hide_cart_db",
)
SQL_ECHO = os.getenv("SQL_ECHO", "0") == "1"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# "legacy" strips menu links and cart fragments, "enhanced" injects a CSS rule
HIDE_CART_VARIANT = os.getenv("HIDE_CART_VARIANT", "enhanced").strip().lower()
VARIANTS = ("legacy", "enhanced")
if HIDE_CART_VARIANT not in VARIANTS:
    raise RuntimeError(f"HIDE_CART_VARIANT must be one of {VARIANTS}, got {HIDE_CART_VARIANT!r}")

CART_PATH = os.getenv("CART_PATH", "/cart")
# Empty string means "no shop page configured" -> redirect to home
SHOP_PAGE_URL = os.getenv("SHOP_PAGE_URL", "/shop")
CART_COOKIE_NAME = os.getenv("CART_COOKIE_NAME", "hc_cart")

SECRET_KEY = os.getenv("JWT_SECRET", "supersecretkey")
ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

SELECTORS_OPTION = "wc_hide_cart_when_empty_selectors"
