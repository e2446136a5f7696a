import asyncio
import copy
from typing import Dict, Any, List, Optional

# In-memory product collection. Nothing is persisted; every store starts
# from the same three sample products.

SAMPLE_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
]


class ProductStore:
    """Owns the product records, keyed by id in insertion order.

    ``lock`` must be held around any read-modify-write sequence.
    """

    def __init__(self, seed: bool = True):
        self.products: Dict[str, Dict[str, Any]] = {}
        self.lock = asyncio.Lock()
        if seed:
            self.seed()

    def seed(self) -> None:
        self.products.clear()
        for p in copy.deepcopy(SAMPLE_PRODUCTS):
            self.products[p["id"]] = p

    def all(self) -> List[Dict[str, Any]]:
        return list(self.products.values())

    def get(self, product_id: str) -> Optional[Dict[str, Any]]:
        return self.products.get(product_id)

    def add(self, product: Dict[str, Any]) -> Dict[str, Any]:
        if product["id"] in self.products:
            raise KeyError(f"duplicate product id: {product['id']}")
        self.products[product["id"]] = product
        return product

    def replace(self, product_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        p = self.products.get(product_id)
        if p is None:
            return None
        p.update(fields)
        p["id"] = product_id
        return p

    def remove(self, product_id: str) -> Optional[Dict[str, Any]]:
        return self.products.pop(product_id, None)

    def __len__(self) -> int:
        return len(self.products)
