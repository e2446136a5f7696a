# product_api/models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Any, List


class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    # loose: update stores whatever it is sent, omitted fields as null
    name: Optional[Any] = None
    description: Optional[Any] = None
    price: Optional[Any] = None
    category: Optional[Any] = None
    in_stock: Optional[Any] = Field(default=None, alias="inStock")


class ProductPage(BaseModel):
    total: int
    page: int
    limit: int
    data: List[Product]
