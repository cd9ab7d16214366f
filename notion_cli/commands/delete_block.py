"""Komenda: notion-cli delete-block — archiwizuje blok."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.markup import escape

from notion_api import NotionAPIError
from notion_cli._client import get_wrapper
from notion_cli.commands.get_page import _print_json

console = Console()


def run(args: argparse.Namespace) -> None:
    try:
        notion = get_wrapper(require_page=False)
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {escape(str(e))}")
        raise SystemExit(1)

    try:
        response = notion.delete_block(args.block_id)
    except NotionAPIError as e:
        console.print(f"[red]Błąd usuwania bloku:[/red] {escape(str(e))}")
        raise SystemExit(1)

    console.print("[green]Blok usunięty.[/green]")
    _print_json(response)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "delete-block",
        help="Usuwa blok z Notion (archiwizacja).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Usuwa blok o podanym identyfikatorze. Notion nie kasuje bloku fizycznie,
tylko oznacza go jako zarchiwizowany (archived=true).

Przykład:
  notion-cli delete-block <block-id>

Identyfikatory bloków pokazuje notion-cli list-blocks.
        """,
    )
    p.add_argument(
        "block_id",
        metavar="BLOCK_ID",
        help="Identyfikator bloku do usunięcia.",
    )
    p.set_defaults(func=run)
