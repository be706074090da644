"""Perfume supply-chain monitoring driven by Manager and Dispatcher agents."""

__version__ = "1.0.0"
