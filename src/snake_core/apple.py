"""Apple placement."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from snake_core.errors import FreeSetExhausted

if TYPE_CHECKING:
    from snake_core.free_cells import FreeCellSet
    from snake_core.grid import Cell

logger = logging.getLogger(__name__)


def place_apple(free_cells: FreeCellSet) -> Cell:
    """Pick the next apple cell uniformly from *free_cells*.

    The cell stays in the set; the caller removes it once the placement is
    committed. Raises :class:`FreeSetExhausted` when no free cell remains.
    """
    try:
        cell = free_cells.pick_random()
    except FreeSetExhausted:
        logger.warning("No free cells available for apple placement.")
        raise
    logger.debug("Apple placed at %s.", tuple(cell))
    return cell
