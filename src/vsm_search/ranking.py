"""
Ranking of documents against a query vector.

Pipeline for one query:

1. Scoring - cosine similarity of the query against every document row
2. Ranking - stable descending sort, so equal scores keep corpus order
3. Filtering - drop every document whose similarity is not > 0
4. Truncation - keep at most ``top_n`` documents
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, NamedTuple

import numpy as np

from vsm_search.config import Config
from vsm_search.errors import VocabularyMismatchError
from vsm_search.similarity import cosine_similarities

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray
    from scipy.sparse import spmatrix


class SearchResult(NamedTuple):
    """One ranked document."""

    index: int
    identifier: str
    score: float


def rank_indices(similarities: ArrayLike) -> NDArray[np.int64]:
    """
    Document indices by descending similarity, positive scores only.

    The sort is stable: documents with equal similarity keep their original
    relative order.
    """
    similarities = np.asarray(similarities, dtype=np.float64)
    order = np.argsort(-similarities, kind="stable").astype(np.int64)
    return order[similarities[order] > 0.0]


def select_top_n(indices: NDArray[np.int64], top_n: int) -> NDArray[np.int64]:
    """First ``top_n`` ranked indices (all of them if fewer remain)."""
    return indices[: max(top_n, 0)]


def rank(
    query_vector: NDArray[np.float64],
    matrix: spmatrix | NDArray[np.float64],
    identifiers: Sequence[str],
    top_n: int = Config.top_n,
    norms: NDArray[np.float64] | None = None,
) -> list[SearchResult]:
    """
    Rank the rows of ``matrix`` against ``query_vector``.

    Args:
        query_vector: Query weights (vocab_size,)
        matrix: TF-IDF matrix (N_docs, vocab_size)
        identifiers: Identifier of each row, used for reporting
        top_n: Maximum number of results
        norms: Precomputed row norms of ``matrix``

    Returns:
        Ranked results with strictly positive scores. Empty when nothing matches.
    """
    if len(identifiers) != matrix.shape[0]:
        raise VocabularyMismatchError(
            f"Got {len(identifiers)} identifiers for {matrix.shape[0]} documents."
        )

    similarities = cosine_similarities(query_vector, matrix, norms)
    top = select_top_n(rank_indices(similarities), top_n)
    return [SearchResult(int(i), identifiers[i], float(similarities[i])) for i in top]


def format_results(results: Sequence[SearchResult], precision: int = Config.score_precision) -> str:
    """Render results one per line as ``identifier, (score)``."""
    if not results:
        return "No matches found."
    return "\n".join(f"{result.identifier}, ({result.score:.{precision}f})" for result in results)
