"""Komenda: notion-cli list-blocks — listuje bloki strony (z dziećmi)."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from data_model import BlockList
from notion_api import NotionAPIError
from notion_cli._client import get_wrapper
from notion_cli.commands.get_page import _print_json

console = Console(width=200)
# komunikaty statusu idą na stderr, stdout zostaje dla tabeli lub JSON
err_console = Console(stderr=True, width=200)


# ---------------------------------------------------------------------------
# Zapis do JSON
# ---------------------------------------------------------------------------

def _write_json(blocks: BlockList, json_path: Path) -> None:
    data = [b.to_json() for b in blocks]
    json_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    err_console.print(f"[green]JSON:[/green] {json_path}  ({len(blocks)} bloków)")


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _depths(blocks: BlockList) -> dict[str, int]:
    """Głębokość każdego bloku; rodzic zawsze występuje wcześniej na liście."""
    depth: dict[str, int] = {}
    for b in blocks:
        parent = b.parent_block_id
        depth[b.block_id] = depth.get(parent, -1) + 1 if parent else 0
    return depth


def _show_table(blocks: BlockList) -> None:
    if not blocks:
        console.print("[yellow]Strona nie ma bloków.[/yellow]")
        return

    depth = _depths(blocks)

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("BLOCK ID", no_wrap=True, style="bold cyan")
    table.add_column("TYP",      no_wrap=True)
    table.add_column("PARENT",   no_wrap=True, style="dim")
    table.add_column("TEKST",    no_wrap=False, max_width=80)

    for b in blocks:
        indent = "  " * depth[b.block_id]
        table.add_row(
            indent + b.block_id,
            b.block_type,
            b.parent_block_id or "-",
            escape(b.text),
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(blocks)} bloków[/dim]\n")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    try:
        notion = get_wrapper(args.id)
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {escape(str(e))}")
        raise SystemExit(1)

    try:
        blocks = notion.get_page_blocks()
    except NotionAPIError as e:
        console.print(f"[red]Błąd pobierania bloków strony:[/red] {escape(str(e))}")
        raise SystemExit(1)

    if args.out:
        _write_json(blocks, Path(args.out))

    if args.json:
        _print_json([b.to_json() for b in blocks])
    elif not args.out:
        _show_table(blocks)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "list-blocks",
        help="Listuje wszystkie bloki strony (razem z zagnieżdżonymi).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Listuje bloki strony w uproszczonej postaci: identyfikator, typ, rodzic, tekst.
Zagnieżdżone bloki pojawiają się zaraz po swoim rodzicu (kolejność pre-order).
Bloki bez rich_text (np. image) pokazywane są jako [typ].

Przykłady:
  notion-cli list-blocks
  notion-cli list-blocks --id <page-id>
  notion-cli list-blocks --json
  notion-cli list-blocks --out bloki.json
        """,
    )
    p.add_argument(
        "--id", "-i",
        metavar="PAGE_ID",
        default=None,
        help="Identyfikator strony (domyślnie: NOTION_PAGE_ID).",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="Wypisz bloki jako JSON zamiast tabeli.",
    )
    p.add_argument(
        "--out", "-o",
        metavar="PLIK",
        default=None,
        help="Zapisz bloki jako JSON do pliku.",
    )
    p.set_defaults(func=run)
