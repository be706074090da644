"""Product catalog management."""

from .product_catalog import CatalogStats, ProductCatalog, generate_product_id, stock_health

__all__ = [
    "CatalogStats",
    "ProductCatalog",
    "generate_product_id",
    "stock_health",
]
