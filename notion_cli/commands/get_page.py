"""Komenda: notion-cli get-page — pobiera stronę Notion."""

from __future__ import annotations

import argparse
import json
from typing import Any

from rich.console import Console
from rich.markup import escape

from notion_api import NotionAPIError
from notion_cli._client import get_wrapper

console = Console()


def _print_json(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def run(args: argparse.Namespace) -> None:
    try:
        notion = get_wrapper(args.id)
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {escape(str(e))}")
        raise SystemExit(1)

    try:
        page = notion.get_page()
    except NotionAPIError as e:
        console.print(f"[red]Błąd pobierania strony:[/red] {escape(str(e))}")
        raise SystemExit(1)

    _print_json(page)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "get-page",
        help="Pobiera stronę z Notion i wypisuje ją jako JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Pobiera stronę Notion i wypisuje jej obiekt (JSON) na stdout.
Bez --id używana jest strona z NOTION_PAGE_ID.

Przykłady:
  notion-cli get-page
  notion-cli get-page --id <page-id>
        """,
    )
    p.add_argument(
        "--id", "-i",
        metavar="PAGE_ID",
        default=None,
        help="Identyfikator strony (domyślnie: NOTION_PAGE_ID).",
    )
    p.set_defaults(func=run)
