# schemaorg_ld/errors.py
from __future__ import annotations


class JsonLdError(Exception):
    """Base class for errors raised by schemaorg_ld."""


class InvalidDocumentError(JsonLdError, ValueError):
    """The HTML input itself could not be loaded."""


class InvalidJsonError(JsonLdError, ValueError):
    """Raw JSON input text could not be parsed."""
