import asyncio

from sdk.products_client import ProductsClient


async def fetch_listing(client, version):
    try:
        body = await client.list_products_async(version)
        items = body["data"] if isinstance(body, dict) else body
        print(f"✅ v{version}: {[p['name'] for p in items]}")
        return body
    except Exception as e:
        print(f"❌ v{version} failed: {e}")
        return None


async def create(client, name, price):
    r = await client.create_product_async(name, price, "Gaming")
    if r.status_code == 201:
        print(f"✅ created {name}: id={r.json()['id']} ({r.headers.get('Location')})")
    else:
        print(f"❌ {name}: HTTP {r.status_code} {r.text}")


async def main():
    c = ProductsClient(base_url="http://127.0.0.1:8085")

    # The service keeps no state, so interleaved calls need no coordination.
    print("\n⚡ Firing concurrent requests...")
    await asyncio.gather(
        *(fetch_listing(c, v) for v in ["1", "2", "1.0", "2.0"] * 3),
        create(c, "Gaming Mouse", "89.99"),
        create(c, "Gaming Pad", "19.99"),
        create(c, "", "5"),
    )

    # created products were never stored
    print("\n📦 v1 listing afterwards:", await c.list_products_async("1"))


if __name__ == "__main__":
    asyncio.run(main())
