"""
data_model — struktury danych notion-cli.

Użycie:
  from data_model import Block, SimplifiedBlock, NotionConfig

Moduły:
  blocks — Block, SimplifiedBlock, RichTextSegment, BlockList
  config — NotionConfig
"""

from .blocks import (
    RichTextSegment,
    Block,
    SimplifiedBlock,
    BlockList,
)
from .config import NotionConfig

__all__ = [
    # blocks
    "RichTextSegment",
    "Block",
    "SimplifiedBlock",
    "BlockList",
    # config
    "NotionConfig",
]
