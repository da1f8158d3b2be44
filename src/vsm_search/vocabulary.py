"""
Vocabulary: the fixed column order shared by every vector in the index.

Column ``j`` of the TF matrix, entry ``j`` of the IDF vector, column ``j`` of
the TF-IDF matrix and position ``j`` of a query vector all refer to
``vocabulary.terms[j]``. The order is decided once, here, and never changes.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import NDArray


@dataclass(frozen=True, eq=False)
class Vocabulary:
    """
    Distinct corpus terms with their corpus-wide occurrence count.

    Attributes:
        terms: Terms in column order (order of first occurrence in the corpus).
        counts: Total number of occurrences of each term across all documents.
    """

    terms: tuple[str, ...]
    counts: NDArray[np.float64]
    _positions: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.terms) != len(self.counts):
            raise ValueError(
                f"Got {len(self.counts)} counts for {len(self.terms)} terms."
            )
        counts = np.array(self.counts, dtype=np.float64)
        counts.flags.writeable = False
        object.__setattr__(self, "counts", counts)
        object.__setattr__(
            self,
            "_positions",
            MappingProxyType({term: idx for idx, term in enumerate(self.terms)}),
        )

    def __len__(self) -> int:
        return len(self.terms)

    def __iter__(self) -> Iterator[str]:
        return iter(self.terms)

    def __contains__(self, term: object) -> bool:
        return term in self._positions

    def position(self, term: str) -> int | None:
        """Column of ``term`` (None if not in vocabulary)."""
        return self._positions.get(term)

    def positions(self, tokens: Iterable[str]) -> NDArray[np.int64]:
        """Sorted, de-duplicated columns of the in-vocabulary ``tokens``."""
        ids = {self._positions[t] for t in tokens if t in self._positions}
        return np.array(sorted(ids), dtype=np.int64)

    def count(self, term: str) -> int:
        """Corpus-wide occurrence count of ``term`` (0 if unknown)."""
        idx = self._positions.get(term)
        return 0 if idx is None else int(self.counts[idx])

    def as_dict(self) -> dict[str, int]:
        return {term: int(count) for term, count in zip(self.terms, self.counts)}


def build_vocabulary(documents: Iterable[Iterable[str]]) -> Vocabulary:
    """
    Count every token across all documents.

    The statistic is the total number of occurrences, not the number of
    documents containing the term. An empty corpus yields an empty vocabulary.
    """
    counter: Counter[str] = Counter(term for doc in documents for term in doc)
    return Vocabulary(
        terms=tuple(counter.keys()),
        counts=np.array(list(counter.values()), dtype=np.float64),
    )
