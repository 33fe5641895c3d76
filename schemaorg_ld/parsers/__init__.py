# Keep this package lightweight; re-export the block locator only.
from .ldjson_blocks import BlockParse, find_ldjson_blocks, iter_block_parses

__all__ = [
    "BlockParse",
    "find_ldjson_blocks",
    "iter_block_parses",
]
