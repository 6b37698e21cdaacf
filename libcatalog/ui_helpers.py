import os
import json
from typing import List
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from libcatalog.book import Book, Transaction
from libcatalog.config import settings

# Environment variable to control CLI output mode
# İzin verilen değerler: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

RULE = "-" * 46

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode
    # Geçersiz değerleri yoksay; mevcut varsayılanı koru

def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, settings.output_mode).lower()
    return mode if mode in OUTPUT_MODES else "plain"

def print_book_list(books: List[Book]) -> None:
    """Kitap listesini mevcut çıktı moduna göre yazdır.
    - plain: 'ID: .. | Title: .. | Author: .. | Status: ..' satırları
    - json: JSON dizisi olarak id, title, author, status
    - rich: Rich tablosu
    """
    mode = get_output_mode()

    if not books:
        # Boş liste her modda aynı düz mesajı verir
        print("No books available in the library.")
        return

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="📚 Books", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Status", style="green")
        for b in books:
            status_style = "yellow" if b.is_issued else "green"
            table.add_row(str(b.id), escape(b.title), escape(b.author), f"[{status_style}]{b.status.value}[/]")
        _console.print(table)
    else:
        print("\nCurrent Books in Library:")
        print(RULE)
        for b in books:
            print(f"ID: {b.id} | Title: {b.title} | Author: {b.author} | Status: {b.status.value}")
        print(RULE)

def print_transaction_list(transactions: List[Transaction]) -> None:
    """İşlem geçmişini en yeniden eskiye doğru yazdır."""
    mode = get_output_mode()

    if not transactions:
        print("No transactions yet.")
        return

    if mode == "json":
        print(json.dumps([t.to_dict() for t in transactions], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="🧾 Transaction History", header_style="bold cyan")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Book ID", style="magenta")
        table.add_column("Action", style="white")
        for position, t in enumerate(transactions, 1):
            table.add_row(str(position), str(t.book_id), t.action.value)
        _console.print(table)
    else:
        print("\nTransaction History:")
        for t in transactions:
            print(f"Book ID {t.book_id} -> {t.action.value}")
