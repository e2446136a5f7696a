import asyncio
import os

import httpx

BASE_URL = os.getenv("PRODUCT_API_URL", "http://127.0.0.1:3000")
API_KEY = os.getenv("API_KEY", "12345")


async def create(client: httpx.AsyncClient, n: int):
    r = await client.post("/api/products", json={
        "name": f"Widget {n}",
        "description": "Concurrently created widget",
        "price": n,
        "category": "widgets",
        "inStock": n % 2 == 0,
    })
    r.raise_for_status()
    return r.json()


async def main(count: int = 20):
    async with httpx.AsyncClient(base_url=BASE_URL, headers={"x-api-key": API_KEY}) as client:
        before = (await client.get("/api/products/stats")).json()
        print("Stats before:", before)

        print(f"\n⚡ Creating {count} products concurrently...")
        created = await asyncio.gather(*(create(client, n) for n in range(count)))
        ids = {p["id"] for p in created}
        print(f"Created {len(created)} products with {len(ids)} distinct ids")

        after = (await client.get("/api/products/stats")).json()
        print("Stats after:", after)


if __name__ == "__main__":
    asyncio.run(main())
