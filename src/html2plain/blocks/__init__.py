"""Block regions converted ahead of the structural tag pass."""

from .blockquote import convert_blockquotes
from .pre import convert_pre_blocks

__all__ = ["convert_blockquotes", "convert_pre_blocks"]
