# sdk/products_client.py
from decimal import Decimal
from typing import Optional, Union

import httpx
import requests

Number = Union[int, float, Decimal, str]


class ProductsClient:
    def __init__(self, base_url: str = "http://localhost:8085", timeout: int = 10):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.timeout = timeout

    def _products_url(self, version: Optional[str]) -> str:
        # no version -> the server's default
        if version is None:
            return f"{self.base_url}/api/products"
        return f"{self.base_url}/api/v{version}/products"

    # Products
    def list_products(self, version: Optional[str] = "1"):
        r = self.session.get(self._products_url(version), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_product(self, product_id: int, version: Optional[str] = "1"):
        r = self.session.get(f"{self._products_url(version)}/{product_id}", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Create (v2 only)
    def create_product(self, name: str, price: Number, category: Optional[str] = None):
        payload = {"name": name, "price": str(price), "category": category}
        r = self.session.post(self._products_url("2"), json=payload, timeout=self.timeout)
        # do not r.raise_for_status() -- callers may want to read the 400 text
        return r

    async def create_product_async(self, name: str, price: Number, category: Optional[str] = None):
        payload = {"name": name, "price": str(price), "category": category}
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.post(self._products_url("2"), json=payload)

    async def list_products_async(self, version: Optional[str] = "1"):
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            r = await client.get(self._products_url(version))
            r.raise_for_status()
            return r.json()


if __name__ == "__main__":
    import argparse

    from rich import print

    parser = argparse.ArgumentParser(description="Products API client")
    parser.add_argument("--base-url", default="http://127.0.0.1:8085", help="Server base URL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    lp = subparsers.add_parser("list-products", help="List all products")
    lp.add_argument("--api-version", default="1", help="API version (1, 1.0, 2, 2.0)")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", type=int, required=True, help="ID of the product")
    gp.add_argument("--api-version", default="1", help="API version (1, 1.0, 2, 2.0)")

    cp = subparsers.add_parser("create-product", help="Create a product (v2)")
    cp.add_argument("--name", required=True, help="Product name")
    cp.add_argument("--price", required=True, help="Price, e.g. 89.99")
    cp.add_argument("--category", help="Product category")

    args = parser.parse_args()
    c = ProductsClient(base_url=args.base_url)

    if args.command == "list-products":
        print(c.list_products(args.api_version))

    elif args.command == "get-product":
        print(c.get_product(args.product_id, args.api_version))

    elif args.command == "create-product":
        r = c.create_product(args.name, args.price, args.category)
        if r.status_code == 201:
            print(f"[green]Created[/green] ({r.headers.get('Location')})", r.json())
        else:
            print(f"[red]HTTP {r.status_code}:[/red] {r.text}")
