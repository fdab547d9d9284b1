"""Storefront commerce state: cart, home-trial bag and order summaries."""

__version__ = "1.0.0"
