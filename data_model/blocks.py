"""
data_model/blocks.py — model bloków dokumentu Notion.

Block odpowiada jednemu węzłowi drzewa strony (tak jak zwraca go API).
SimplifiedBlock to spłaszczona projekcja bloku używana przez list-blocks;
powstaje wyłącznie w notion_api.flatten i nigdy nie jest zapisywana.

Mapowanie na JSON API Notion (obiekt "block"):
  id            → Block.id
  type          → Block.type
  <type>        → Block.payload   (np. block["paragraph"] = {"rich_text": [...]})
  has_children  → Block.has_children
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeAlias

# Fragment rich text tak jak zwraca go API: {"type": "text", "plain_text": ..., ...}
RichTextSegment: TypeAlias = dict[str, Any]


# ---------------------------------------------------------------------------
# Block
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Block:
    """
    Węzeł drzewa dokumentu.

    - id:           identyfikator bloku nadany przez Notion
    - type:         znacznik typu, np. "paragraph", "image", "toggle"
    - payload:      zawartość zależna od typu (block[type]), może mieć rich_text
    - has_children: czy blok ma dzieci (pobierane osobnym zapytaniem)

    Rodzic nie jest przechowywany w węźle.
    """
    id: str
    type: str
    payload: dict[str, Any] = field(default_factory=dict)
    has_children: bool = False

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Block:
        block_type = str(raw.get("type", ""))
        payload = raw.get(block_type)
        return cls(
            id=str(raw["id"]),
            type=block_type,
            payload=payload if isinstance(payload, dict) else {},
            has_children=bool(raw.get("has_children", False)),
        )

    @property
    def rich_text(self) -> list[RichTextSegment] | None:
        """Lista fragmentów rich text lub None, gdy typ bloku jej nie ma."""
        segments = self.payload.get("rich_text")
        return segments if isinstance(segments, list) else None


# ---------------------------------------------------------------------------
# SimplifiedBlock
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class SimplifiedBlock:
    block_id: str
    text: str
    block_type: str
    parent_block_id: str | None = None   # None dla bloków najwyższego poziomu

    def to_json(self) -> dict[str, str | None]:
        """Słownik w kształcie używanym przez wyjście --json komendy list-blocks."""
        return {
            "blockId":       self.block_id,
            "text":          self.text,
            "blockType":     self.block_type,
            "parentBlockId": self.parent_block_id,
        }


# Spłaszczona lista bloków strony w kolejności pre-order.
BlockList: TypeAlias = list[SimplifiedBlock]
