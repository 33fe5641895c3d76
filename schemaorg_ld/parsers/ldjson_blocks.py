# schemaorg_ld/parsers/ldjson_blocks.py
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Union

from ..models import HtmlDocument
from .utils import LDJSON_SELECTOR, script_text

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlockParse:
    """Outcome of parsing one <script type="application/ld+json"> element."""
    index: int
    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_block(text: str, index: int = 0) -> BlockParse:
    try:
        return BlockParse(index=index, value=json.loads(text))
    except ValueError as ex:
        return BlockParse(index=index, error=str(ex) or ex.__class__.__name__)


def iter_block_parses(
    document: Union[HtmlDocument, str, bytes],
    parser: Optional[str] = None,
) -> Iterator[BlockParse]:
    """
    Parse every ld+json script element of the page, in document order.
    One record per element, whether or not its text is valid JSON.
    """
    doc = HtmlDocument.coerce(document)
    return _iter_block_parses(doc, parser)


def _iter_block_parses(doc: HtmlDocument, parser: Optional[str]) -> Iterator[BlockParse]:
    scripts = doc.soup(parser).select(LDJSON_SELECTOR)
    log.debug("found %d ld+json script blocks", len(scripts))
    for i, tag in enumerate(scripts):
        yield parse_block(script_text(tag), i)


def find_ldjson_blocks(
    document: Union[HtmlDocument, str, bytes],
    parser: Optional[str] = None,
) -> Iterator[Any]:
    """
    Yield the parsed JSON value of each ld+json block on the page.

    Blocks whose text is not valid JSON are skipped; the scan goes on with the
    next block. The document itself is validated before this returns.
    """
    blocks = iter_block_parses(document, parser)
    return _ok_values(blocks)


def _ok_values(blocks: Iterator[BlockParse]) -> Iterator[Any]:
    for block in blocks:
        if not block.ok:
            log.debug("skipping ld+json block #%d: %s", block.index, block.error)
            continue
        yield block.value
