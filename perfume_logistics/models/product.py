"""Product catalog models."""
from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ProductStatus(str, Enum):
    """Lifecycle status of a catalog SKU."""

    ACTIVE = "Active"
    DISCONTINUED = "Discontinued"
    OUT_OF_STOCK = "Out of Stock"


CATEGORIES = ["EDP", "EDT", "Parfum", "Cologne", "Body Mist"]
SIZES = ["10ml", "30ml", "50ml", "75ml", "100ml", "150ml", "200ml"]


class ProductDraft(BaseModel):
    """Editable fields of a product, as submitted by the catalog form."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    sku: str = ""
    name: str = ""
    brand: str = ""
    category: str = "EDP"
    size: str = "100ml"
    current_stock: int = 0
    min_stock: int = 50
    reorder_point: int = 100
    price: float = 0.0
    supplier: str = ""
    status: ProductStatus = ProductStatus.ACTIVE


class Product(ProductDraft):
    """A catalog SKU."""

    id: str
    last_updated: str = ""

    @property
    def is_monitored(self) -> bool:
        """Whether the product is included in logistics checks.

        Discontinued products cannot be restocked and are left out.
        """
        return self.status in (ProductStatus.ACTIVE, ProductStatus.OUT_OF_STOCK)
