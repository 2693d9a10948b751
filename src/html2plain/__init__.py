"""Convert HTML documents to readable, word-wrapped plain text.

Paragraph, list and table structure survive as line breaks and indentation,
emphasis is shown in capitals and hyperlinks are rendered inline, on the next
line or collected into a numbered reference list.

>>> from html2plain import convert
>>> convert("<p>Hello <b>World</b></p>")
'Hello WORLD'
"""

from .config import ConversionConfig, LinkStyle, load_config
from .converter import HtmlToText, convert

__all__ = ["ConversionConfig", "LinkStyle", "HtmlToText", "convert", "load_config"]

__version__ = "0.1.0"
