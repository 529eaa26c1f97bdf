"""Tile month blocks side by side into one printable row."""

import logging
from typing import List, Sequence

from ..config.settings import LayoutSettings
from ..utils.exceptions import RenderError

logger = logging.getLogger(__name__)


def compose_row(blocks: Sequence[Sequence[str]], layout: LayoutSettings) -> List[str]:
    """Join corresponding lines of ``blocks`` and append the row gap.

    A batch smaller than ``layout.columns`` is composed from the blocks it
    has; no blank placeholder blocks are added. Combined lines that contain
    only whitespace are dropped before the ``row_gap`` empty lines are
    appended.

    Args:
        blocks: Month blocks of identical height, left to right
        layout: Grid layout supplying ``column_gap`` and ``row_gap``

    Returns:
        Row lines followed by ``layout.row_gap`` empty strings; empty for no blocks

    Raises:
        RenderError: If the blocks do not all have the same height
    """
    if not blocks:
        return []

    heights = {len(block) for block in blocks}
    if len(heights) != 1:
        raise RenderError(
            "Month blocks in a row must have the same height",
            {"heights": sorted(heights)},
        )

    gap = " " * layout.column_gap
    combined = (gap.join(parts) for parts in zip(*blocks))
    lines = [line for line in combined if line.strip()]
    lines.extend("" for _ in range(layout.row_gap))

    logger.debug(f"Composed row of {len(blocks)} blocks into {len(lines)} lines")
    return lines
