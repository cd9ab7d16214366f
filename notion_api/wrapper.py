"""
notion_api/wrapper.py — fasada operacji na stronie i blokach Notion.

Publiczne API (NotionWrapper):
  get_page()                     -> dict            (obiekt "page")
  set_page_id(page_id) / get_page_id()
  add_text(text, parent_block)   -> dict            ({"results": [block]})
  delete_block(block_id)         -> dict            (blok z archived=True)
  update_block(block_id, text)   -> dict            (zaktualizowany blok)
  get_page_blocks()              -> list[SimplifiedBlock]

Błędy API (NotionAPIError) są propagowane bez zmian i bez ponawiania.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol

from data_model import BlockList, NotionConfig

from .client import NotionClient
from .flatten import flatten_block

# Jedyny typ bloku, którego treść update_block potrafi nadpisać.
TEXT_BLOCK_TYPE = "paragraph"


class NotionTransport(Protocol):
    def retrieve_page(self, page_id: str) -> dict[str, Any]: ...
    def append_children(self, block_id: str, children: list[dict[str, Any]]) -> dict[str, Any]: ...
    def delete_block(self, block_id: str) -> dict[str, Any]: ...
    def retrieve_block(self, block_id: str) -> dict[str, Any]: ...
    def update_block(self, block_id: str, payload: dict[str, Any]) -> dict[str, Any]: ...
    def list_children(self, block_id: str) -> dict[str, Any]: ...


def _paragraph_rich_text(text: str) -> dict[str, Any]:
    return {"rich_text": [{"type": "text", "text": {"content": text}}]}


def paragraph_block(text: str) -> dict[str, Any]:
    """Definicja nowego bloku paragraph z jednym fragmentem tekstu."""
    return {
        "object": "block",
        "type": TEXT_BLOCK_TYPE,
        TEXT_BLOCK_TYPE: _paragraph_rich_text(text),
    }


class NotionWrapper:
    def __init__(self, config: NotionConfig, client: NotionTransport | None = None) -> None:
        self.client: NotionTransport = client or NotionClient(
            config.token, api_version=config.api_version
        )
        self.page_id = config.page_id

    # ------------------------------------------------------------------
    # Strona
    # ------------------------------------------------------------------

    def set_page_id(self, page_id: str) -> None:
        self.page_id = page_id

    def get_page_id(self) -> str | None:
        return self.page_id

    def _require_page_id(self) -> str:
        if not self.page_id:
            raise ValueError("Brak identyfikatora strony (NOTION_PAGE_ID lub --id).")
        return self.page_id

    def get_page(self) -> dict[str, Any]:
        return self.client.retrieve_page(self._require_page_id())

    # ------------------------------------------------------------------
    # Bloki
    # ------------------------------------------------------------------

    def add_text(self, text: str, parent_block: str | None = None) -> dict[str, Any]:
        """
        Dopisuje blok paragraph z tekstem.

        Args:
            text:         Treść nowego bloku.
            parent_block: Blok-rodzic; gdy None, blok trafia bezpośrednio na stronę.

        Returns:
            Odpowiedź API {"results": [utworzony blok, ...]}.
        """
        target = parent_block or self._require_page_id()
        return self.client.append_children(target, [paragraph_block(text)])

    def delete_block(self, block_id: str) -> dict[str, Any]:
        """Usuwa blok logicznie (Notion ustawia archived=True)."""
        return self.client.delete_block(block_id)

    def update_block(self, block_id: str, text: str) -> dict[str, Any]:
        """
        Nadpisuje tekst bloku.

        Obsługiwany jest tylko typ paragraph. Dla innych typów wypisywane jest
        ostrzeżenie, ale zapytanie i tak jest wysyłane; o wyniku decyduje API.
        """
        info = self.client.retrieve_block(block_id)
        block_type = info.get("type")
        if block_type != TEXT_BLOCK_TYPE:
            print(
                f"[warn] Typ bloku {block_type} nie jest obsługiwany przy aktualizacji tekstu. "
                f"Tylko bloki {TEXT_BLOCK_TYPE} mogą być aktualizowane.",
                file=sys.stderr,
            )

        return self.client.update_block(
            block_id, {TEXT_BLOCK_TYPE: _paragraph_rich_text(text)}
        )

    def get_page_blocks(self) -> BlockList:
        """Wszystkie bloki strony (z zagnieżdżonymi dziećmi) jako płaska lista."""
        response = self.client.list_children(self._require_page_id())

        blocks: BlockList = []
        for block in response.get("results", []):
            blocks.extend(flatten_block(block, self._fetch_children))
        return blocks

    def _fetch_children(self, block_id: str) -> list[dict[str, Any]]:
        return self.client.list_children(block_id).get("results", [])
