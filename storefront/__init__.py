"""Storefront catalog and cart API"""

__version__ = "1.0.0"
