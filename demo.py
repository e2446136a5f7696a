#!/usr/bin/env python
import os

from sdk.product_client import ProductClient


def main():
    c = ProductClient(
        base_url=os.getenv("PRODUCT_API_URL", "http://127.0.0.1:3000"),
        api_key=os.getenv("API_KEY", "12345"),
    )

    print(c.welcome())

    # -----------------------------
    # Seeded catalog
    # -----------------------------
    print("\nListing products...")
    print(c.list_products())

    # -----------------------------
    # Create
    # -----------------------------
    print("\nCreating products...")
    kettle = c.create_product("Electric Kettle", "1.7L stainless steel kettle", 35, "kitchen", True)
    headphones = c.create_product("Headphones", "Noise-cancelling over-ear headphones", 199.99, "electronics", False)
    print(kettle)
    print(headphones)

    # -----------------------------
    # Filter / search / paginate
    # -----------------------------
    print("\nElectronics, page 1 of 2 per page...")
    print(c.filter_products(category="Electronics", page=1, limit=2))

    print("\nSearching for 'phone'...")
    print(c.filter_products(search="phone"))

    # -----------------------------
    # Update and delete
    # -----------------------------
    print("\nUpdating the kettle...")
    print(c.update_product(kettle["id"], {
        "name": "Electric Kettle",
        "description": "1.7L stainless steel kettle",
        "price": 29.5,
        "category": "kitchen",
        "inStock": False,
    }))

    print("\nDeleting the headphones...")
    print(c.delete_product(headphones["id"]))

    # -----------------------------
    # Stats
    # -----------------------------
    print("\nProducts per category...")
    print(c.stats())


if __name__ == "__main__":
    main()
