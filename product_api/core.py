# product_api/core.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict, Any, Union

Price = Union[int, float]


# ---------------------------
# Request bodies
# ---------------------------
class ProductIn(BaseModel):
    """Create body: every field must be present and non-empty; 0 and false are valid.

    Strict, so values are stored exactly as sent instead of being coerced.
    """

    model_config = ConfigDict(populate_by_name=True, strict=True)

    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    price: Price
    category: str = Field(min_length=1)
    in_stock: bool = Field(alias="inStock")


class ProductUpdate(BaseModel):
    """Update body: nothing is checked, omitted fields overwrite with null."""

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[Any] = None
    description: Optional[Any] = None
    price: Optional[Any] = None
    category: Optional[Any] = None
    in_stock: Optional[Any] = Field(default=None, alias="inStock")


# ---------------------------
# Helpers
# ---------------------------
def _product_fields(p: Union[ProductIn, ProductUpdate]) -> Dict[str, Any]:
    return p.model_dump(by_alias=True)


def _make_product_dict(product_id: str, p: ProductIn) -> Dict[str, Any]:
    return {"id": product_id, **_product_fields(p)}
