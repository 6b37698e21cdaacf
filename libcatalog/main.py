import logging
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt
from rich.table import Table

from libcatalog.config import settings
from libcatalog.library import Library
from libcatalog.outcome import Outcome
from libcatalog.ui_helpers import print_book_list, print_transaction_list, set_output_mode

logger = logging.getLogger(__name__)

console = Console()

MENU_ITEMS = [
    ("1", "Insert Book", "➕"),
    ("2", "Delete Book", "🗑️"),
    ("3", "Issue Book", "📤"),
    ("4", "Return Book", "📥"),
    ("5", "Undo Last Transaction", "↩️"),
    ("6", "View Transactions", "🧾"),
    ("7", "Display All Books", "📚"),
    ("8", "Exit", "🚪"),
]


def configure_logging(level: Optional[str] = None) -> None:
    name = (level or settings.effective_log_level()).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# --- Menu handlers ---
def insert_book(lib: Library) -> None:
    book_id = IntPrompt.ask("Enter Book ID")
    if book_id <= 0:
        # Başlık ve yazar sorulmadan önce reddedilir
        console.print("[bold red]Invalid Book ID! Must be positive.[/]")
        return
    title = Prompt.ask("Enter Title")
    author = Prompt.ask("Enter Author")

    result = lib.insert_book(book_id, title, author)
    if result.outcome is Outcome.SUCCESS:
        console.print(f'[green]Book "{escape(result.book.title)}" added successfully![/]')
    elif result.outcome is Outcome.DUPLICATE_KEY:
        console.print(f"[yellow]Book ID {book_id} already exists! Insertion cancelled.[/]")
    else:
        console.print("[bold red]Invalid Book ID! Must be positive.[/]")


def delete_book(lib: Library) -> None:
    book_id = IntPrompt.ask("Enter Book ID to delete")
    result = lib.delete_book(book_id)
    if result.ok:
        console.print(f"[green]Book ID {book_id} deleted successfully.[/]")
    else:
        console.print("[yellow]Book not found.[/]")


def issue_book(lib: Library) -> None:
    book_id = IntPrompt.ask("Enter Book ID to issue")
    result = lib.issue_book(book_id)
    if result.outcome is Outcome.SUCCESS:
        console.print(f"[green]Book ID {book_id} issued successfully.[/]")
    elif result.outcome is Outcome.ALREADY_ISSUED:
        console.print("[yellow]Book already issued.[/]")
    else:
        console.print("[yellow]Book not found.[/]")


def return_book(lib: Library) -> None:
    book_id = IntPrompt.ask("Enter Book ID to return")
    result = lib.return_book(book_id)
    if result.outcome is Outcome.SUCCESS:
        console.print(f"[green]Book ID {book_id} returned successfully.[/]")
    elif result.outcome is Outcome.ALREADY_AVAILABLE:
        console.print("[yellow]Book is already available.[/]")
    else:
        console.print("[yellow]Book not found.[/]")


def undo_transaction(lib: Library) -> None:
    result = lib.undo()
    if result.outcome is Outcome.SUCCESS:
        console.print(f"[green]Undo: Book ID {result.book.id} marked as {result.book.status.value}.[/]")
    elif result.outcome is Outcome.NOTHING_TO_UNDO:
        console.print("[yellow]No transactions to undo.[/]")
    else:
        console.print("[yellow]Book not found for undo.[/]")


def view_transactions(lib: Library) -> None:
    print_transaction_list(lib.list_transactions())


def display_books(lib: Library) -> None:
    print_book_list(lib.list_books())


HANDLERS = {
    "1": insert_book,
    "2": delete_book,
    "3": issue_book,
    "4": return_book,
    "5": undo_transaction,
    "6": view_transactions,
    "7": display_books,
}


def render_menu() -> None:
    table = Table.grid(padding=(0, 2))
    table.add_column(justify="right", style="bold cyan", width=4)
    table.add_column(justify="left", style="white")
    for key, label, icon in MENU_ITEMS:
        table.add_row(f"[reverse]{key}[/]", f"{icon} {label}")

    console.print(Panel(
        table,
        title=settings.app_name,
        border_style="cyan",
        box=box.HEAVY,
        padding=(1, 2),
    ))


def run_menu(lib: Optional[Library] = None) -> Library:
    """Interactive menu loop. Returns the library so callers can inspect it."""
    lib = lib or Library()
    choices = [key for key, _, _ in MENU_ITEMS]

    while True:
        render_menu()
        try:
            choice = Prompt.ask("Enter your choice", choices=choices)
            if choice == "8":
                break
            HANDLERS[choice](lib)
        except EOFError:
            # Girdi bitti; menüden normal çıkış gibi davran
            logger.debug("Input closed, leaving menu")
            break
        console.print()  # işlemler arasında boşluk bırakır

    console.print("[green]Exiting Library System. Goodbye![/]")
    return lib


# --- Typer CLI Uygulaması ---
app = typer.Typer(help="Library book catalog with issue/return tracking and undo")


@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format for listings: plain | json | rich (default: plain)",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level, e.g. DEBUG or INFO (default: from LOG_LEVEL)",
    ),
):
    """Global options; starts the interactive menu when no command is given."""
    if output:
        set_output_mode(output)
    configure_logging(log_level)
    if ctx.invoked_subcommand is None:
        run_menu()


@app.command("menu")
def cli_menu():
    """Start the interactive catalog menu."""
    run_menu()


if __name__ == "__main__":
    app()
