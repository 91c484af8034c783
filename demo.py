#!/usr/bin/env python
from sdk.products_client import ProductsClient


def main():
    c = ProductsClient(base_url="http://127.0.0.1:8085")

    # -----------------------------
    # v1: flat products
    # -----------------------------
    print("Listing products (v1)...")
    print(c.list_products("1"))

    print("\nGetting product 5 (v1)...")
    print(c.get_product(5, "1"))

    print("\nNo version segment falls back to v1...")
    print(c.list_products(None))

    # -----------------------------
    # v2: enhanced products in an envelope
    # -----------------------------
    print("\nListing products (v2)...")
    envelope = c.list_products("2")
    print(f"total={envelope['total']} version={envelope['version']}")
    for p in envelope["data"]:
        print(p)

    print("\nGetting product 4 (v2)...")
    print(c.get_product(4, "2"))

    # -----------------------------
    # v2 only: create
    # -----------------------------
    print("\nCreating a product (v2)...")
    r = c.create_product("Gaming Mouse", "89.99", "Gaming")
    print(r.status_code, r.headers.get("Location"), r.json())

    print("\nCreating a product without a name...")
    r = c.create_product("  ", "10")
    print(r.status_code, r.text)

    print("\nCreating a product with a zero price...")
    r = c.create_product("Free Thing", "0")
    print(r.status_code, r.text)

    print("\nPOST under v1 is not mapped...")
    r = c.session.post(f"{c.base_url}/api/v1/products", json={"name": "x", "price": 1})
    print(r.status_code, r.headers.get("Allow"), r.text)


if __name__ == "__main__":
    main()
