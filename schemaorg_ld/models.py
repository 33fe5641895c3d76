# schemaorg_ld/models.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from bs4 import BeautifulSoup

from .errors import InvalidDocumentError


class JsonKind(Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def json_kind(value: Any) -> JsonKind:
    """Classify a value from a parsed JSON tree."""
    if value is None:
        return JsonKind.NULL
    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    raise TypeError(f"not a JSON value: {type(value).__name__}")


@dataclass(frozen=True)
class HtmlDocument:
    """
    Markup of a single HTML page.

    Construction fails with InvalidDocumentError when there is nothing that
    could be loaded as HTML, so callers get an error instead of an empty scan.
    """
    html: Union[str, bytes]

    def __post_init__(self) -> None:
        if self.html is None:
            raise InvalidDocumentError("html must not be None")
        if not isinstance(self.html, (str, bytes)):
            raise InvalidDocumentError(
                f"html must be str or bytes, not {type(self.html).__name__}"
            )

    @classmethod
    def coerce(cls, document: Union["HtmlDocument", str, bytes]) -> "HtmlDocument":
        if isinstance(document, cls):
            return document
        return cls(document)

    def soup(self, parser: Optional[str] = None) -> BeautifulSoup:
        from .parsers.utils import soupify
        return soupify(self.html, parser)
