"""Shortest unique identifier prefixes across a batch of containers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from dockps_common import ID_PREFIX_LENGTH


class PrefixIndex:
    """Count how many identifiers share each prefix of length 1..``max_length``.

    The index is built once per batch and is read-only afterwards. Lookups
    return the shortest prefix length whose count is 1, i.e. the number of
    leading characters needed to tell an identifier apart from every other
    identifier in the batch.
    """

    def __init__(self, ids: Iterable[str] = (), *, max_length: int = ID_PREFIX_LENGTH):
        self.max_length = max_length
        self._counts: Counter[str] = Counter()
        for container_id in ids:
            self._add(container_id)

    def _add(self, container_id: str) -> None:
        for i in range(1, min(len(container_id), self.max_length) + 1):
            self._counts[container_id[:i]] += 1

    def offset(self, container_id: str) -> int:
        """Return the disambiguation length for ``container_id``.

        Falls back to the full indexed length when no prefix is unique
        (duplicate identifiers, or identifiers equal up to ``max_length``).
        """
        limit = min(len(container_id), self.max_length)
        for i in range(1, limit + 1):
            if self._counts[container_id[:i]] == 1:
                return i
        return limit


def unique_prefix_lengths(ids: list[str], *, max_length: int = ID_PREFIX_LENGTH) -> list[int]:
    """Disambiguation length for each identifier, in input order."""
    index = PrefixIndex(ids, max_length=max_length)
    return [index.offset(container_id) for container_id in ids]
