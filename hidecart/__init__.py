"""Hide the storefront cart UI while the visitor's cart is empty."""

__version__ = "1.1.0"
