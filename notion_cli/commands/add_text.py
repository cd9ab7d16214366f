"""Komenda: notion-cli add-text — dopisuje blok tekstu do strony lub bloku."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.markup import escape

from notion_api import NotionAPIError
from notion_cli._client import get_wrapper
from notion_cli.commands.get_page import _print_json

console = Console()


def run(args: argparse.Namespace) -> None:
    # Strona jest potrzebna tylko, gdy nie podano bloku-rodzica.
    try:
        notion = get_wrapper(args.id, require_page=args.block is None)
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {escape(str(e))}")
        raise SystemExit(1)

    try:
        response = notion.add_text(args.text, args.block)
    except NotionAPIError as e:
        console.print(f"[red]Błąd dodawania tekstu:[/red] {escape(str(e))}")
        raise SystemExit(1)

    console.print("[green]Tekst dodany.[/green]")
    _print_json(response)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "add-text",
        help="Dopisuje blok tekstu (paragraph) do strony Notion.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Dopisuje nowy blok paragraph z podanym tekstem na końcu strony.
Z --block tekst trafia jako dziecko wskazanego bloku zamiast na stronę.

Przykłady:
  notion-cli add-text "Witaj, Notion!"
  notion-cli add-text "Tekst na innej stronie" --id <page-id>
  notion-cli add-text "Tekst w bloku" --block <block-id>
        """,
    )
    p.add_argument(
        "text",
        metavar="TEKST",
        help="Treść dodawanego bloku.",
    )
    p.add_argument(
        "--id", "-i",
        metavar="PAGE_ID",
        default=None,
        help="Identyfikator strony (domyślnie: NOTION_PAGE_ID).",
    )
    p.add_argument(
        "--block", "-b",
        metavar="BLOCK_ID",
        default=None,
        help="Blok-rodzic, do którego dopisać tekst (opcjonalnie).",
    )
    p.set_defaults(func=run)
