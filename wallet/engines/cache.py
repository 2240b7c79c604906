"""Caller-side memoization for the balance normalizer."""

import logging
from collections.abc import Sequence
from typing import Any

from wallet.engines.normalizer import PriceTable, PriorityTable, normalize
from wallet.models.balances import EnrichedBalance

logger = logging.getLogger(__name__)


class NormalizationCache:
    """Recomputes normalized balances only when an input object changes.

    Inputs are compared by identity, so callers that mutate a table in place
    must pass a new object (or call invalidate) to see the change. The cache
    keeps references to the last inputs, so their identities cannot be reused
    by other objects while cached.
    """

    def __init__(self) -> None:
        self._inputs: tuple[Any, Any, Any] | None = None
        self._result: list[EnrichedBalance] = []
        self.hits = 0
        self.misses = 0

    def get(
        self,
        records: Sequence[Any],
        prices: PriceTable | None,
        priorities: PriorityTable,
    ) -> list[EnrichedBalance]:
        """Return the normalized list, recomputing if any input is a new object."""
        if self._inputs is not None and all(
            cached is current for cached, current in zip(self._inputs, (records, prices, priorities))
        ):
            self.hits += 1
            return list(self._result)

        self.misses += 1
        logger.debug("Normalization cache miss (%d so far)", self.misses)
        self._result = normalize(records, prices, priorities)
        self._inputs = (records, prices, priorities)
        return list(self._result)

    def invalidate(self) -> None:
        self._inputs = None
        self._result = []
