"""
notion_api/flatten.py — spłaszczanie drzewa bloków do listy SimplifiedBlock.

Publiczne API:
  plain_text_from_rich_text(segments)                  -> str
  extract_text(block)                                  -> str
  flatten_block(block, fetch_children, parent_id)      -> list[SimplifiedBlock]

Kolejność wyniku: pre-order (blok, potem jego potomkowie), rodzeństwo
w kolejności zwróconej przez API. Dzieci pobierane są sekwencyjnie,
po jednym zapytaniu na blok z has_children.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any, TypeAlias

from data_model import Block, BlockList, SimplifiedBlock

# Zwraca surowe bloki-dzieci danego bloku (pole "results" odpowiedzi API).
FetchChildren: TypeAlias = Callable[[str], list[dict[str, Any]]]


def plain_text_from_rich_text(segments: Any) -> str:
    """Skleja plain_text wszystkich fragmentów; dla nie-listy zwraca ""."""
    if not isinstance(segments, list):
        return ""
    return "".join(str(s.get("plain_text") or "") for s in segments if isinstance(s, dict))


def extract_text(block: Block | dict[str, Any]) -> str:
    """
    Tekst bloku: rich_text, jeśli typ go udostępnia, inaczej "[typ]".

    Nie ma listy znanych typów — każdy typ z payloadem rich_text jest
    traktowany jak tekstowy, pozostałe (image, divider, nowe typy API)
    dostają zastępczy opis.
    """
    if isinstance(block, dict):
        block = Block.from_dict(block)
    segments = block.rich_text
    if segments is not None:
        return plain_text_from_rich_text(segments)
    return f"[{block.type}]"


def flatten_block(
    block: Block | dict[str, Any],
    fetch_children: FetchChildren,
    parent_id: str | None = None,
) -> BlockList:
    """
    Spłaszcza blok i wszystkich jego potomków.

    Zamiast rekurencji używa jawnego stosu (blok, parent_id), więc głębokość
    dokumentu nie jest ograniczona stosem wywołań. Dzieci odkładane są na stos
    w odwrotnej kolejności, dzięki czemu zdejmowane są w kolejności API.

    Błąd pobrania dzieci danego bloku nie przerywa listowania: blok zostaje
    w wyniku, jego poddrzewo jest pomijane, a na stderr trafia ostrzeżenie.

    Args:
        block:          Blok startowy (Block lub surowy słownik z API).
        fetch_children: Funkcja block_id -> lista surowych bloków-dzieci.
        parent_id:      Identyfikator rodzica bloku startowego (None = top-level).

    Returns:
        Lista SimplifiedBlock w kolejności pre-order.
    """
    results: BlockList = []
    stack: list[tuple[Block | dict[str, Any], str | None]] = [(block, parent_id)]

    while stack:
        raw, parent = stack.pop()
        node = raw if isinstance(raw, Block) else Block.from_dict(raw)

        results.append(SimplifiedBlock(
            block_id=node.id,
            text=extract_text(node),
            block_type=node.type,
            parent_block_id=parent,
        ))

        if not node.has_children:
            continue

        try:
            children = fetch_children(node.id)
        except Exception as e:
            print(f"[warn] Błąd pobierania dzieci bloku {node.id}: {e}", file=sys.stderr)
            continue

        for child in reversed(children):
            stack.append((child, node.id))

    return results
