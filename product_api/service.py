import logging
import re
import uuid
from collections import Counter
from typing import Optional, Dict, Any, List

from .core import ProductIn, ProductUpdate, _make_product_dict, _product_fields
from .database import ProductStore
from .errors import ProductNotFound

# Core logic behind each product endpoint. Handlers in main.py only parse
# the request and delegate here.

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(raw: Optional[str], default: int) -> int:
    """Parse the leading integer of ``raw``.

    Missing, non-numeric and zero values all fall back to ``default``;
    negative values are passed through untouched.
    """
    if raw is None:
        return default
    m = _LEADING_INT.match(raw)
    if not m:
        return default
    return int(m.group(1)) or default


def paginate(items: List[Dict[str, Any]], page: int, limit: int) -> List[Dict[str, Any]]:
    start = (page - 1) * limit
    return items[start:start + limit]


def _require(store: ProductStore, product_id: str) -> Dict[str, Any]:
    p = store.get(product_id)
    if p is None:
        raise ProductNotFound()
    return p


# Product endpoints
async def list_products_logic(store: ProductStore) -> List[Dict[str, Any]]:
    return store.all()


async def get_product_logic(store: ProductStore, product_id: str) -> Dict[str, Any]:
    return _require(store, product_id)


async def create_product_logic(store: ProductStore, payload: ProductIn) -> Dict[str, Any]:
    async with store.lock:
        pid = str(uuid.uuid4())
        while store.get(pid) is not None:
            pid = str(uuid.uuid4())
        product = store.add(_make_product_dict(pid, payload))
    logger.info("created product %s (%s)", pid, product["name"])
    return product


async def update_product_logic(store: ProductStore, product_id: str, payload: ProductUpdate) -> Dict[str, Any]:
    async with store.lock:
        _require(store, product_id)
        product = store.replace(product_id, _product_fields(payload))
    logger.info("updated product %s", product_id)
    return product


async def delete_product_logic(store: ProductStore, product_id: str) -> Dict[str, Any]:
    async with store.lock:
        _require(store, product_id)
        product = store.remove(product_id)
    logger.info("deleted product %s", product_id)
    return product


# Filtering / stats
async def filter_products_logic(
    store: ProductStore,
    category: Optional[str] = None,
    search: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> Dict[str, Any]:
    out = store.all()
    if category:
        wanted = category.lower()
        out = [p for p in out if isinstance(p["category"], str) and p["category"].lower() == wanted]
    if search:
        term = search.lower()
        out = [p for p in out if isinstance(p["name"], str) and term in p["name"].lower()]

    page_num = parse_int(page, 1)
    page_limit = parse_int(limit, len(out))
    return {
        "total": len(out),
        "page": page_num,
        "limit": page_limit,
        "data": paginate(out, page_num, page_limit),
    }


def _category_key(category: Any) -> Optional[str]:
    # update stores values unchecked; object keys must be strings (or null)
    if category is None or isinstance(category, str):
        return category
    return str(category)


async def product_stats_logic(store: ProductStore) -> Dict[str, int]:
    return dict(Counter(_category_key(p["category"]) for p in store.all()))
