"""
notion_api/config.py — konfiguracja ze zmiennych środowiskowych.

Zmienne środowiskowe:
  NOTION_TOKEN        token integracji (wymagany)
  NOTION_PAGE_ID      domyślna strona dla get-page / add-text / list-blocks
  NOTION_API_VERSION  nagłówek Notion-Version (domyślnie 2022-06-28)

Opcjonalnie plik .env w katalogu głównym projektu:
  NOTION_TOKEN=secret_...
  NOTION_PAGE_ID=1a2b3c...
"""

from __future__ import annotations

import os
import pathlib

from dotenv import load_dotenv

from data_model import NotionConfig
from data_model.config import DEFAULT_API_VERSION

ENV_FILE     = pathlib.Path(__file__).resolve().parent.parent / ".env"
_ENV_TOKEN   = "NOTION_TOKEN"
_ENV_PAGE_ID = "NOTION_PAGE_ID"
_ENV_VERSION = "NOTION_API_VERSION"


def load_config(
    page_id: str | None = None,
    require_page: bool = True,
    env_file: pathlib.Path = ENV_FILE,
) -> NotionConfig:
    """
    Buduje NotionConfig ze środowiska (i pliku .env, jeśli istnieje).

    Args:
        page_id:      Jawny identyfikator strony (np. z --id); ma pierwszeństwo
                      przed NOTION_PAGE_ID.
        require_page: Czy brak identyfikatora strony jest błędem
                      (False dla komend operujących tylko na blokach).
        env_file:     Ścieżka do pliku .env.

    Raises:
        ValueError: Brak tokenu lub (gdy require_page) identyfikatora strony.
    """
    load_dotenv(env_file, override=False)

    token = os.getenv(_ENV_TOKEN)
    if not token:
        raise ValueError(
            f"Brak tokenu Notion. Ustaw zmienną środowiskową {_ENV_TOKEN}."
        )

    page = page_id or os.getenv(_ENV_PAGE_ID) or None
    if require_page and not page:
        raise ValueError(
            f"Brak identyfikatora strony. "
            f"Ustaw zmienną {_ENV_PAGE_ID} lub podaj --id."
        )

    return NotionConfig(
        token=token,
        page_id=page,
        api_version=os.getenv(_ENV_VERSION) or DEFAULT_API_VERSION,
    )
