# sdk/product_client.py
import requests
from typing import Optional, Dict, Any


class ProductClient:
    def __init__(self, base_url: str = "http://localhost:3000", api_key: str = "12345", timeout: int = 10, session=None):
        self.base_url = base_url.rstrip("/")
        # any requests-compatible session works, e.g. fastapi.testclient.TestClient
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        if api_key:
            self.session.headers.update({"x-api-key": api_key})

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def welcome(self) -> str:
        r = self.session.get(self._url("/"), timeout=self.timeout)
        r.raise_for_status()
        return r.text

    # Products
    def list_products(self):
        r = self.session.get(self._url("/api/products"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_product(self, product_id: str):
        r = self.session.get(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def create_product(self, name: str, description: str, price: float, category: str, in_stock: bool = True):
        r = self.session.post(self._url("/api/products"), json={
            "name": name, "description": description, "price": price,
            "category": category, "inStock": in_stock,
        }, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def update_product(self, product_id: str, fields: Dict[str, Any]):
        # the server replaces all five fields; anything missing here is stored as null
        r = self.session.put(self._url(f"/api/products/{product_id}"), json=fields, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def delete_product(self, product_id: str):
        r = self.session.delete(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Filtering / stats
    def filter_products(self, category: Optional[str] = None, search: Optional[str] = None,
                        page: Optional[int] = None, limit: Optional[int] = None):
        params = {}
        if category:
            params["category"] = category
        if search:
            params["search"] = search
        if page is not None:
            params["page"] = page
        if limit is not None:
            params["limit"] = limit
        r = self.session.get(self._url("/api/products/filter"), params=params, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def stats(self):
        r = self.session.get(self._url("/api/products/stats"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()


if __name__ == "__main__":
    import argparse
    import os
    from rich import print

    parser = argparse.ArgumentParser(description="Product API client")
    parser.add_argument("--base-url", default=os.getenv("PRODUCT_API_URL", "http://localhost:3000"))
    parser.add_argument("--api-key", default=os.getenv("API_KEY", "12345"))
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List all products")

    gp = subparsers.add_parser("get", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True, help="ID of the product")

    cp = subparsers.add_parser("create", help="Create a new product")
    cp.add_argument("--name", required=True, help="Product name")
    cp.add_argument("--description", required=True, help="Product description")
    cp.add_argument("--price", type=float, required=True, help="Price")
    cp.add_argument("--category", required=True, help="Product category")
    cp.add_argument("--out-of-stock", action="store_true", help="Mark the product as not in stock")

    up = subparsers.add_parser("update", help="Replace a product's fields")
    up.add_argument("--product-id", required=True, help="ID of the product")
    up.add_argument("--name", required=True, help="Product name")
    up.add_argument("--description", required=True, help="Product description")
    up.add_argument("--price", type=float, required=True, help="Price")
    up.add_argument("--category", required=True, help="Product category")
    up.add_argument("--out-of-stock", action="store_true", help="Mark the product as not in stock")

    dp = subparsers.add_parser("delete", help="Delete a product")
    dp.add_argument("--product-id", required=True, help="ID of the product")

    fp = subparsers.add_parser("filter", help="Filter, search and paginate products")
    fp.add_argument("--category", help="Exact category (case-insensitive)")
    fp.add_argument("--search", help="Substring of the product name")
    fp.add_argument("--page", type=int, help="Page number, starting at 1")
    fp.add_argument("--limit", type=int, help="Page size")

    subparsers.add_parser("stats", help="Count products per category")

    args = parser.parse_args()
    client = ProductClient(base_url=args.base_url, api_key=args.api_key)

    try:
        if args.command == "list":
            print(client.list_products())
        elif args.command == "get":
            print(client.get_product(args.product_id))
        elif args.command == "create":
            print(client.create_product(args.name, args.description, args.price, args.category, not args.out_of_stock))
        elif args.command == "update":
            print(client.update_product(args.product_id, {
                "name": args.name, "description": args.description, "price": args.price,
                "category": args.category, "inStock": not args.out_of_stock,
            }))
        elif args.command == "delete":
            print(client.delete_product(args.product_id))
        elif args.command == "filter":
            print(client.filter_products(args.category, args.search, args.page, args.limit))
        elif args.command == "stats":
            print(client.stats())
    except requests.exceptions.HTTPError as e:
        print(f"[red]Error:[/red] {e.response.status_code} {e.response.text}")
        raise SystemExit(1)
