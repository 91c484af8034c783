# cli.py
import sys
from datetime import datetime
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.products_client import ProductsClient

console = Console()
c = ProductsClient(base_url="http://127.0.0.1:8085")

VERSIONS = ["1.0", "2.0"]

# Global state for the status line and the active API version
status_message = "Ready"
current_version = "1.0"

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def _fmt_date(raw: Optional[str]) -> str:
    if not raw:
        return "-"
    try:
        return datetime.fromisoformat(raw.replace("Z", "+00:00")).strftime("%Y-%m-%d")
    except ValueError:
        return raw


def show_products_v1(products: List[Dict[str, Any]]):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(title="📦 Products (v1)", box=box.ROUNDED, header_style="bold cyan",
                  title_style="bold magenta", show_lines=True)
    table.add_column("ID", justify="right", width=6)
    table.add_column("Name", style="bold", width=24)
    table.add_column("Price", justify="right", width=12)

    for p in products:
        table.add_row(str(p.get("id", "N/A")), p.get("name", "N/A"), f"${p.get('price', 0):.2f}")
    console.print(table)


def show_products_v2(products: List[Dict[str, Any]], title: str = "📦 Products (v2)"):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(title=title, box=box.ROUNDED, header_style="bold cyan",
                  title_style="bold magenta", show_lines=True)
    table.add_column("ID", justify="right", width=6)
    table.add_column("Name", style="bold", width=24)
    table.add_column("Price", justify="right", width=12)
    table.add_column("Category", width=16)
    table.add_column("In stock", width=9)
    table.add_column("Created", width=12)

    for p in products:
        in_stock = "[green]yes[/green]" if p.get("inStock") else "[red]no[/red]"
        table.add_row(
            str(p.get("id", "N/A")),
            p.get("name", "N/A"),
            f"${p.get('price', 0):.2f}",
            p.get("category") or "-",
            in_stock,
            _fmt_date(p.get("createdAt")),
        )
    console.print(table)


def show_product_detail(product: Dict[str, Any]):
    if "description" not in product:
        show_products_v1([product])
        return
    show_products_v2([product], title=f"ℹ️ Product {product.get('id')}")
    console.print(Panel.fit(
        f"{product.get('description', '')}\n[dim]tags: {', '.join(product.get('tags', []))}[/dim]",
        border_style="cyan",
    ))


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    Returns the result, or None after printing the error.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
        return result
    except Exception as e:
        status_message = f"Error: {e}"
        return None


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Products API",
        f"[bold blue]API version {current_version}[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message, current_version

    console.clear()
    console.print(create_header())

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=36)
        for row in [
            ("1", "📦 List products"),
            ("2", "ℹ️ Get product by ID"),
            ("3", "➕ Create product (v2 only)"),
            ("4", f"🔀 Switch API version (now {current_version})"),
            ("q", "👋 Quit"),
        ]:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter(["1", "2", "3", "4", "q", "quit", "exit"])
        ).strip()

        if choice == "1":
            resp = try_api(c.list_products, current_version,
                           success_msg=f"Products loaded (v{current_version})")
            if resp is None:
                pass
            elif isinstance(resp, dict):
                show_products_v2(resp.get("data", []))
                console.print(f"[dim]total: {resp.get('total')} | version: {resp.get('version')}[/dim]")
            else:
                show_products_v1(resp)

        elif choice == "2":
            pid = IntPrompt.ask("Product ID", default=1)
            resp = try_api(c.get_product, pid, current_version, success_msg=f"Product {pid} loaded")
            if resp:
                show_product_detail(resp)

        elif choice == "3":
            if current_version != "2.0" and not Confirm.ask("Creating needs v2. Send it to v2 anyway?"):
                continue
            name = prompt_with_autocomplete("Product name")
            price = Prompt.ask("💰 Price", default="10.00")
            category = prompt_with_autocomplete(
                "🏷️ Category", completer=WordCompleter(["Electronics", "Accessories", "Gaming"]))
            r = try_api(c.create_product, name, price, category or None)
            if r is None:
                continue
            if r.status_code == 201:
                status_message = f"Created product {r.json().get('id')}"
                show_products_v2([r.json()], title=f"✅ Created ({r.headers.get('Location')})")
            else:
                status_message = f"Error: HTTP {r.status_code}: {r.text}"

        elif choice == "4":
            current_version = prompt_with_autocomplete(
                "API version", completer=WordCompleter(VERSIONS), default=current_version).strip()
            status_message = f"Using API version {current_version}"
            console.print(create_header())

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Bye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
