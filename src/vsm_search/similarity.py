"""
Cosine similarity between a query vector and document vectors.

A zero dot product always yields a similarity of exactly 0.0 and the norms
are not consulted. This covers all-zero vectors (no 0/0) and orthogonal
non-zero vectors alike.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from scipy.sparse import issparse

from vsm_search.errors import VocabularyMismatchError

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray
    from scipy.sparse import spmatrix


def _check_lengths(vec1: NDArray[np.float64], vec2: NDArray[np.float64]) -> None:
    if vec1.shape != vec2.shape:
        raise VocabularyMismatchError(
            f"Vectors have different shapes: {vec1.shape} and {vec2.shape}."
        )


def dot_product(vec1: ArrayLike, vec2: ArrayLike) -> float:
    """Dot product of two equal-length vectors."""
    a = np.asarray(vec1, dtype=np.float64)
    b = np.asarray(vec2, dtype=np.float64)
    _check_lengths(a, b)
    return float(np.dot(a, b))


def vector_magnitude(vec: ArrayLike) -> float:
    """Euclidean norm of a 1D vector."""
    return float(np.sqrt(np.sum(np.square(np.asarray(vec, dtype=np.float64)))))


def cosine_similarity(vec1: ArrayLike, vec2: ArrayLike) -> float:
    """
    Cosine similarity of two vectors, 0.0 when their dot product is zero.

    Raises:
        VocabularyMismatchError: if the vectors differ in length.
    """
    dot_prod = dot_product(vec1, vec2)
    if dot_prod == 0.0:
        return 0.0
    return dot_prod / (vector_magnitude(vec1) * vector_magnitude(vec2))


def row_norms(matrix: spmatrix | NDArray[np.float64]) -> NDArray[np.float64]:
    """Euclidean norm of every row of a (sparse or dense) matrix."""
    if issparse(matrix):
        squared = np.asarray(matrix.multiply(matrix).sum(axis=1), dtype=np.float64).ravel()
    else:
        squared = np.sum(np.square(np.asarray(matrix, dtype=np.float64)), axis=1)
    return np.sqrt(squared)


def cosine_similarities(
    query_vector: NDArray[np.float64],
    matrix: spmatrix | NDArray[np.float64],
    norms: NDArray[np.float64] | None = None,
) -> NDArray[np.float64]:
    """
    Cosine similarity of ``query_vector`` against every row of ``matrix``.

    Args:
        query_vector: Query weights (vocab_size,)
        matrix: Document weights (N_docs, vocab_size), sparse or dense
        norms: Precomputed row norms of ``matrix`` (N_docs,); computed if omitted

    Returns:
        Similarities in document order (N_docs,)

    Raises:
        VocabularyMismatchError: if the query length differs from the matrix width.
    """
    query_vector = np.asarray(query_vector, dtype=np.float64)
    if query_vector.shape != (matrix.shape[1],):
        raise VocabularyMismatchError(
            f"Query vector has shape {query_vector.shape} but the index has "
            f"{matrix.shape[1]} columns."
        )
    if norms is None:
        norms = row_norms(matrix)

    dots = np.asarray(matrix @ query_vector, dtype=np.float64).ravel()
    similarities = np.zeros(matrix.shape[0], dtype=np.float64)
    nonzero = dots != 0.0
    if np.any(nonzero):
        query_norm = vector_magnitude(query_vector)
        similarities[nonzero] = dots[nonzero] / (query_norm * norms[nonzero])
    return similarities
