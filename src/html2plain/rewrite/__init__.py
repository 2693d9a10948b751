"""Tag level rewriting: structural tags, content callbacks and stripping."""

from .callbacks import rewrite_callbacks
from .strip import strip_tags
from .tags import rewrite_tags

__all__ = ["rewrite_callbacks", "rewrite_tags", "strip_tags"]
