from __future__ import annotations

import copy
import itertools
from typing import Any

import pytest

from data_model import NotionConfig
from notion_api import NotionAPIError, NotionWrapper

PAGE_ID = "page-1"


def make_block(
    block_id: str,
    text: str | None = None,
    block_type: str = "paragraph",
    has_children: bool = False,
) -> dict[str, Any]:
    """Surowy blok w kształcie odpowiedzi API; text=None oznacza brak rich_text."""
    if text is not None:
        payload: dict[str, Any] = {
            "rich_text": [{"type": "text", "text": {"content": text}, "plain_text": text}]
        }
    else:
        payload = {"type": "external", "external": {"url": "https://example.com/x.png"}}
    return {
        "object": "block",
        "id": block_id,
        "type": block_type,
        block_type: payload,
        "has_children": has_children,
        "archived": False,
    }


class FakeNotionClient:
    """Notion w pamięci: strony, bloki i relacja rodzic -> dzieci."""

    def __init__(self) -> None:
        self.pages: dict[str, dict[str, Any]] = {
            PAGE_ID: {"object": "page", "id": PAGE_ID, "archived": False},
        }
        self.blocks: dict[str, dict[str, Any]] = {}
        self.children: dict[str, list[str]] = {PAGE_ID: []}
        self.parents: dict[str, str] = {}
        self.failing: set[str] = set()
        self.calls: list[tuple[str, str]] = []
        self._ids = itertools.count(1)

    # -- budowanie stanu ----------------------------------------------------

    def add(self, parent_id: str, block: dict[str, Any]) -> dict[str, Any]:
        self.blocks[block["id"]] = block
        self.children.setdefault(parent_id, []).append(block["id"])
        self.parents[block["id"]] = parent_id
        if parent_id in self.blocks:
            self.blocks[parent_id]["has_children"] = True
        return block

    def _not_found(self, object_id: str) -> NotionAPIError:
        return NotionAPIError(
            f"Could not find block with ID: {object_id}.", status=404, code="object_not_found"
        )

    # -- API ------------------------------------------------------------------

    def retrieve_page(self, page_id: str) -> dict[str, Any]:
        self.calls.append(("retrieve_page", page_id))
        if page_id not in self.pages:
            raise self._not_found(page_id)
        return copy.deepcopy(self.pages[page_id])

    def append_children(self, block_id: str, children: list[dict[str, Any]]) -> dict[str, Any]:
        self.calls.append(("append_children", block_id))
        if block_id not in self.pages and block_id not in self.blocks:
            raise self._not_found(block_id)
        created = []
        for new_block in children:
            new_id = f"new-{next(self._ids)}"
            parent_key = "page_id" if block_id in self.pages else "block_id"
            block = {
                **copy.deepcopy(new_block),
                "id": new_id,
                "has_children": False,
                "archived": False,
                "parent": {"type": parent_key, parent_key: block_id},
            }
            self.add(block_id, block)
            created.append(copy.deepcopy(block))
        return {"object": "list", "results": created}

    def delete_block(self, block_id: str) -> dict[str, Any]:
        self.calls.append(("delete_block", block_id))
        if block_id not in self.blocks:
            raise self._not_found(block_id)
        self.blocks[block_id]["archived"] = True
        return copy.deepcopy(self.blocks[block_id])

    def retrieve_block(self, block_id: str) -> dict[str, Any]:
        self.calls.append(("retrieve_block", block_id))
        if block_id not in self.blocks:
            raise self._not_found(block_id)
        return copy.deepcopy(self.blocks[block_id])

    def update_block(self, block_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        self.calls.append(("update_block", block_id))
        block = self.blocks.get(block_id)
        if block is None:
            raise self._not_found(block_id)
        if block["type"] not in payload:
            raise NotionAPIError(
                f"body failed validation: body.{block['type']} should be defined",
                status=400,
                code="validation_error",
            )
        block.update(copy.deepcopy(payload))
        for seg in block[block["type"]].get("rich_text", []):
            seg.setdefault("plain_text", seg["text"]["content"])
        return copy.deepcopy(block)

    def list_children(self, block_id: str) -> dict[str, Any]:
        self.calls.append(("list_children", block_id))
        if block_id in self.failing:
            raise NotionAPIError("Forbidden", status=403, code="restricted_resource")
        ids = self.children.get(block_id, [])
        return {
            "object": "list",
            "results": [copy.deepcopy(self.blocks[i]) for i in ids],
            "has_more": False,
        }


@pytest.fixture
def fake_client() -> FakeNotionClient:
    return FakeNotionClient()


@pytest.fixture
def wrapper(fake_client: FakeNotionClient) -> NotionWrapper:
    return NotionWrapper(NotionConfig(token="secret_test", page_id=PAGE_ID), client=fake_client)


@pytest.fixture
def sample_page(fake_client: FakeNotionClient) -> FakeNotionClient:
    """Strona: A "Intro"; B "Details" z dzieckiem C "Sub"."""
    fake_client.add(PAGE_ID, make_block("A", "Intro"))
    fake_client.add(PAGE_ID, make_block("B", "Details"))
    fake_client.add("B", make_block("C", "Sub"))
    return fake_client
