"""Połączenie z Notion — konfiguracja przez zmienne środowiskowe."""

from __future__ import annotations

from notion_api import NotionWrapper, load_config


def get_wrapper(page_id: str | None = None, require_page: bool = True) -> NotionWrapper:
    return NotionWrapper(load_config(page_id=page_id, require_page=require_page))
