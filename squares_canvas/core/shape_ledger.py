"""Counter of committed shapes backing undo and clear."""

import logging

logger = logging.getLogger(__name__)


class ShapeLedger:
    """
    Tracks how many shapes have been committed.

    Only the count is kept. Which drawn shape an undo removes is up to the
    renderer (most recently committed first).
    """

    def __init__(self, count: int = 0):
        if count < 0:
            raise ValueError(f"Shape count cannot be negative: {count}")
        self._count = count

    @property
    def count(self) -> int:
        return self._count

    def commit(self) -> int:
        """Record one more committed shape and return the new count."""
        self._count += 1
        return self._count

    def undo(self) -> int:
        """Forget the most recent shape. Does nothing when empty."""
        if self._count == 0:
            logger.debug("Undo on empty ledger ignored")
            return 0
        self._count -= 1
        return self._count

    def clear(self) -> int:
        """Forget all shapes."""
        self._count = 0
        return self._count

    def __repr__(self) -> str:
        return f"ShapeLedger(count={self._count})"


__all__ = ['ShapeLedger']
