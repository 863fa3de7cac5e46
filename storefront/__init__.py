"""Storefront backend: catalog, accounts and cart checkout."""

__version__ = "1.0.0"
