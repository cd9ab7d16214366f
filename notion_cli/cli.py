"""
notion-cli — narzędzie CLI do pracy ze stroną Notion.

Użycie:
  notion-cli <komenda> [opcje]

Komendy:
  get-page      Pobiera stronę i wypisuje ją jako JSON.
  add-text      Dopisuje blok tekstu do strony lub do bloku.
  delete-block  Usuwa (archiwizuje) blok.
  update-block  Nadpisuje tekst bloku paragraph.
  list-blocks   Listuje bloki strony razem z zagnieżdżonymi dziećmi.

Wymaga zmiennej NOTION_TOKEN (oraz NOTION_PAGE_ID albo --id dla komend stron).
"""

from __future__ import annotations

import argparse
import sys

from notion_cli.commands import get_page as cmd_get_page
from notion_cli.commands import add_text as cmd_add_text
from notion_cli.commands import delete_block as cmd_delete_block
from notion_cli.commands import update_block as cmd_update_block
from notion_cli.commands import list_blocks as cmd_list_blocks

VERSION = "1.0.0"


def _force_utf8() -> None:
    # Windows: terminal może używać cp1252, wymuszamy UTF-8 dla polskich znaków.
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(encoding="utf-8", errors="replace")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="notion-cli",
        description="CLI do pracy z API Notion.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"notion-cli {VERSION}"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_get_page.add_parser(subparsers)
    cmd_add_text.add_parser(subparsers)
    cmd_delete_block.add_parser(subparsers)
    cmd_list_blocks.add_parser(subparsers)
    cmd_update_block.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    _force_utf8()
    parser = build_parser()
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        parser.print_help()
        return
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
