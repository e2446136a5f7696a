# cli.py - interactive console for the Product API
import os
import sys
from datetime import datetime
from typing import List, Dict, Any, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.product_client import ProductClient

console = Console()
c = ProductClient(
    base_url=os.getenv("PRODUCT_API_URL", "http://127.0.0.1:3000"),
    api_key=os.getenv("API_KEY", "12345"),
)

status_message = "Ready"
product_cache: List[Dict[str, Any]] = []

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]], title: str = "📦 Products"):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title=title,
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=12, overflow="fold")
    table.add_column("Name", style="bold", width=20)
    table.add_column("Description", width=30)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Category", width=15)
    table.add_column("In stock", justify="center", width=9)

    for p in products:
        price = p.get("price")
        table.add_row(
            p.get("id") or "N/A",
            p.get("name") or "N/A",
            p.get("description") or "",
            f"{price:.2f}" if isinstance(price, (int, float)) else "N/A",
            p.get("category") or "N/A",
            "✅" if p.get("inStock") else "❌",
        )
    console.print(table)


def show_page(page: Dict[str, Any]):
    show_products(page.get("data", []), title=f"📦 Page {page.get('page')} (limit {page.get('limit')})")
    console.print(f"[dim]{page.get('total', 0)} matching product(s)[/dim]")


def show_stats(stats: Dict[str, int]):
    if not stats:
        console.print("[italic yellow]No products yet[/italic yellow]")
        return
    table = Table(title="📊 Products per category", box=box.ROUNDED, header_style="bold cyan")
    table.add_column("Category", style="bold")
    table.add_column("Count", justify="right")
    for category, count in stats.items():
        table.add_row(str(category), str(count))
    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    Returns the result, or None after reporting the error.
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
            console.print(show_status(success_msg, True))
        return result
    except Exception as e:
        status_message = f"Error: {e}"
        console.print(show_status(f"Error: {e}", False))
        return None


def refresh_cache():
    global product_cache
    product_cache = try_api(c.list_products) or []


def get_product_completer():
    if not product_cache:
        refresh_cache()
    ids = [p.get("id", "") for p in product_cache]
    return WordCompleter([i for i in ids if i], ignore_case=True)


def get_category_completer():
    categories = {p.get("category") for p in product_cache}
    return WordCompleter(sorted(cat for cat in categories if cat), ignore_case=True)


# ---------------------------
# Input helpers
# ---------------------------
def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Product API",
        "[bold blue]Product catalog console[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_float(message: str, default: float = 10.0) -> float:
    while True:
        raw = Prompt.ask(message, default=str(default))
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def ask_product_fields(current: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    current = current or {}
    return {
        "name": prompt_with_autocomplete("Name", default=current.get("name") or ""),
        "description": prompt_with_autocomplete("Description", default=current.get("description") or ""),
        "price": ask_float("💰 Price", default=current["price"] if current.get("price") is not None else 10.0),
        "category": prompt_with_autocomplete(
            "🏷️ Category", completer=get_category_completer(), default=current.get("category") or "general"
        ),
        "inStock": Confirm.ask("In stock?", default=current.get("inStock", True) is not False),
    }


# ---------------------------
# Main menu
# ---------------------------
def menu():
    console.clear()
    console.print(create_header())
    refresh_cache()

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 List products", "5", "✏️ Update product"),
            ("2", "🔍 Filter / search", "6", "🗑️ Delete product"),
            ("3", "ℹ️ Get product by ID", "7", "📊 Category stats"),
            ("4", "➕ Create product", "q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 8)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            refresh_cache()
            show_products(product_cache)

        elif choice == "2":
            category = prompt_with_autocomplete("Category (blank for any)", completer=get_category_completer()).strip()
            search = prompt_with_autocomplete("Name contains (blank for any)").strip()
            page = IntPrompt.ask("Page", default=1)
            limit = IntPrompt.ask("Page size (0 for everything)", default=0)
            resp = try_api(
                c.filter_products, category or None, search or None, page, limit or None,
                success_msg="Filter applied"
            )
            if resp is not None:
                show_page(resp)

        elif choice == "3":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            resp = try_api(c.get_product, pid, success_msg=f"Product {pid} loaded")
            if resp:
                show_products([resp])

        elif choice == "4":
            fields = ask_product_fields()
            resp = try_api(
                c.create_product, fields["name"], fields["description"], fields["price"],
                fields["category"], fields["inStock"],
                success_msg=f"Product '{fields['name']}' created"
            )
            if resp:
                show_products([resp])
                refresh_cache()

        elif choice == "5":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            current = try_api(c.get_product, pid)
            if current:
                resp = try_api(c.update_product, pid, ask_product_fields(current), success_msg=f"Product {pid} updated")
                if resp:
                    show_products([resp])
                    refresh_cache()

        elif choice == "6":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            if Confirm.ask(f"[red]Delete product {pid}?[/red]"):
                resp = try_api(c.delete_product, pid, success_msg=f"Product {pid} deleted")
                if resp:
                    refresh_cache()

        elif choice == "7":
            resp = try_api(c.stats, success_msg="Stats loaded")
            if resp is not None:
                show_stats(resp)

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Goodbye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
