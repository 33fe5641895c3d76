from __future__ import annotations
from typing import Optional, Union
from bs4 import BeautifulSoup, Tag

from .. import config

LDJSON_SELECTOR = 'script[type="application/ld+json"]'

def soupify(html: Union[str, bytes], parser: Optional[str] = None) -> BeautifulSoup:
    return BeautifulSoup(html, parser or config.HTML_PARSER)

def script_text(tag: Tag) -> str:
    """Raw text content of a <script> element ("" when empty)."""
    if tag.string is not None:
        return str(tag.string)
    return tag.get_text() or ""
