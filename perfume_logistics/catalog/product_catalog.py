"""Product catalog maintenance."""
from dataclasses import dataclass
from datetime import datetime
from typing import Literal

from perfume_logistics.ids import generate_id
from perfume_logistics.models.product import Product, ProductDraft, ProductStatus

StockHealth = Literal["critical", "warning", "healthy"]


def generate_product_id() -> str:
    return generate_id("prod", random_length=4)


def stock_health(product: Product) -> StockHealth:
    """Classify a product's stock against its own minimum."""
    if product.current_stock <= 0 or product.current_stock < product.min_stock * 0.2:
        return "critical"
    if product.current_stock < product.min_stock:
        return "warning"
    return "healthy"


@dataclass
class CatalogStats:
    """Catalog summary figures."""

    total: int
    active: int
    low_stock: int
    out_of_stock: int
    total_value: float


class ProductCatalog:
    """Validated edits over a product list.

    Every edit returns a new list; the catalog itself is never mutated, so
    the caller decides when to persist.
    """

    def __init__(self, products: list[Product]):
        self._products = list(products)

    @property
    def products(self) -> list[Product]:
        return list(self._products)

    def get(self, product_id: str) -> Product | None:
        return next((p for p in self._products if p.id == product_id), None)

    def _validate(self, draft: ProductDraft, editing_id: str | None) -> ProductDraft:
        """Trim text fields and enforce required fields and SKU uniqueness.

        Raises:
            ValueError: On a missing field or a duplicate SKU.
        """
        cleaned = draft.model_copy(
            update={
                "sku": draft.sku.strip(),
                "name": draft.name.strip(),
                "brand": draft.brand.strip(),
                "supplier": draft.supplier.strip(),
            }
        )
        if not cleaned.sku:
            raise ValueError("SKU is required")
        if not cleaned.name:
            raise ValueError("Product name is required")
        if not cleaned.brand:
            raise ValueError("Brand is required")

        if any(p.sku == cleaned.sku and p.id != editing_id for p in self._products):
            raise ValueError("A product with this SKU already exists")
        return cleaned

    def add(self, draft: ProductDraft) -> list[Product]:
        """Add a product at the top of the catalog."""
        cleaned = self._validate(draft, editing_id=None)
        product = Product(
            **cleaned.model_dump(),
            id=generate_product_id(),
            last_updated=datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        )
        return [product, *self._products]

    def update(self, product_id: str, draft: ProductDraft) -> list[Product]:
        """Replace the editable fields of ``product_id``.

        Raises:
            ValueError: If validation fails or the product does not exist.
        """
        if self.get(product_id) is None:
            raise ValueError(f"Unknown product: {product_id}")

        cleaned = self._validate(draft, editing_id=product_id)
        now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        return [
            p.model_copy(update={**cleaned.model_dump(), "last_updated": now})
            if p.id == product_id
            else p
            for p in self._products
        ]

    def delete(self, product_id: str) -> list[Product]:
        return [p for p in self._products if p.id != product_id]

    def search(
        self,
        term: str = "",
        category: str | None = None,
        status: ProductStatus | None = None,
    ) -> list[Product]:
        """Filter by free text (name, SKU, brand, supplier), category and status."""
        items = self._products
        needle = term.strip().lower()
        if needle:
            items = [
                p
                for p in items
                if needle in p.name.lower()
                or needle in p.sku.lower()
                or needle in p.brand.lower()
                or needle in p.supplier.lower()
            ]
        if category:
            items = [p for p in items if p.category == category]
        if status:
            items = [p for p in items if p.status == status]
        return list(items)

    def stats(self) -> CatalogStats:
        return CatalogStats(
            total=len(self._products),
            active=sum(1 for p in self._products if p.status == ProductStatus.ACTIVE),
            low_stock=sum(
                1
                for p in self._products
                if p.current_stock < p.min_stock and p.status == ProductStatus.ACTIVE
            ),
            out_of_stock=sum(
                1
                for p in self._products
                if p.current_stock <= 0 or p.status == ProductStatus.OUT_OF_STOCK
            ),
            total_value=sum(p.price * p.current_stock for p in self._products),
        )
