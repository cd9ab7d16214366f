"""
data_model/config.py — konfiguracja połączenia z Notion.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_API_VERSION = "2022-06-28"


@dataclass(slots=True)
class NotionConfig:
    token: str                   # integration token (Bearer)
    page_id: str | None = None   # domyślna strona; może być nadpisana przez --id
    api_version: str = DEFAULT_API_VERSION
