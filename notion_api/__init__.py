"""
notion_api — integracja z API Notion: transport, konfiguracja, spłaszczanie bloków.

Publiczne API:
  NotionWrapper(config, client)                   fasada operacji na stronie
  NotionClient(token, api_version, timeout)       klient REST (requests)
  NotionAPIError                                  błąd wywołania API
  load_config(page_id, require_page)              -> NotionConfig
  flatten_block(block, fetch_children, parent_id) -> list[SimplifiedBlock]
  extract_text(block)                             -> str
  plain_text_from_rich_text(segments)             -> str
"""

from .client import NotionClient, NotionAPIError
from .config import load_config
from .flatten import flatten_block, extract_text, plain_text_from_rich_text
from .wrapper import NotionWrapper, paragraph_block

__all__ = [
    "NotionClient",
    "NotionAPIError",
    "load_config",
    "flatten_block",
    "extract_text",
    "plain_text_from_rich_text",
    "NotionWrapper",
    "paragraph_block",
]
