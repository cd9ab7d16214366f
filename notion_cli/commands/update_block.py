"""Komenda: notion-cli update-block — nadpisuje tekst bloku."""

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
        response = notion.update_block(args.block_id, args.text)
    except NotionAPIError as e:
        console.print(f"[red]Błąd aktualizacji bloku:[/red] {escape(str(e))}")
        raise SystemExit(1)

    console.print("[green]Blok zaktualizowany.[/green]")
    _print_json(response)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "update-block",
        help="Nadpisuje tekst bloku (tylko paragraph).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Zastępuje treść bloku podanym tekstem. Obsługiwane są bloki paragraph;
dla innych typów wypisywane jest ostrzeżenie, a o wyniku decyduje API.

Przykład:
  notion-cli update-block <block-id> "Nowa treść"

Identyfikatory bloków pokazuje notion-cli list-blocks.
        """,
    )
    p.add_argument(
        "block_id",
        metavar="BLOCK_ID",
        help="Identyfikator bloku do aktualizacji.",
    )
    p.add_argument(
        "text",
        metavar="TEKST",
        help="Nowa treść bloku.",
    )
    p.set_defaults(func=run)
