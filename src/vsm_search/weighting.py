"""
TF, IDF and TF-IDF construction plus query vectorization.

All structures are laid out in the column order of a single Vocabulary:

    TF:     tf[i, j]     = occurrences of term j in document i (raw count)
    IDF:    idf[j]       = ln(N / (1 + count[j]))
    TF-IDF: tfidf[i, j]  = tf[i, j] * idf[j]
    Query:  q[j]         = idf[j] if term j is in the query else 0

``count[j]`` is the corpus-wide occurrence count stored in the vocabulary,
not the document frequency. Values are kept as-is, negative IDF included.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np
from scipy.sparse import csr_matrix, lil_matrix

from vsm_search.errors import EmptyInputError, VocabularyMismatchError
from vsm_search.vocabulary import Vocabulary

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = logging.getLogger(__name__)


def term_frequency_matrix(
    documents: Sequence[Sequence[str]],
    vocabulary: Vocabulary,
) -> csr_matrix:
    """
    Build the (documents x vocabulary) raw count matrix.

    Each document is counted once and its counts are placed at the
    vocabulary's columns. Tokens missing from the vocabulary are ignored.
    """
    tf_matrix_lil = lil_matrix((len(documents), len(vocabulary)), dtype=np.float64)
    for doc_idx, doc in enumerate(documents):
        for term, count in Counter(doc).items():
            term_id = vocabulary.position(term)
            if term_id is not None:
                tf_matrix_lil[doc_idx, term_id] = count

    # CSR for fast row access and matrix-vector products
    return csr_matrix(tf_matrix_lil)


def inverse_document_frequency(document_count: int, vocabulary: Vocabulary) -> NDArray[np.float64]:
    """
    IDF per vocabulary term: ln(N / (1 + count)).

    Args:
        document_count: Number of documents N in the corpus.
        vocabulary: Vocabulary holding the corpus-wide occurrence counts.

    Returns:
        IDF values in vocabulary order (vocab_size,)
    """
    return np.log(document_count / (1.0 + vocabulary.counts))


def tf_idf_matrix(tf_matrix: csr_matrix, idf_array: NDArray[np.float64]) -> csr_matrix:
    """
    Weight every TF entry by the IDF of its column.

    Raises:
        VocabularyMismatchError: if the TF width differs from the IDF length.
    """
    if tf_matrix.shape[1] != len(idf_array):
        raise VocabularyMismatchError(
            f"TF matrix has {tf_matrix.shape[1]} columns but IDF has {len(idf_array)} entries."
        )

    weighted = csr_matrix(tf_matrix, dtype=np.float64, copy=True)
    # Each stored entry sits in column indices[k]; zeros stay implicit.
    weighted.data = weighted.data * np.asarray(idf_array, dtype=np.float64)[weighted.indices]
    return weighted


def vectorize_query(
    query: Sequence[str],
    vocabulary: Vocabulary,
    idf_array: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Project a tokenized query into the index's vector space.

    Presence is binary: a term repeated in the query still contributes its
    IDF once. Out-of-vocabulary tokens contribute nothing.

    Raises:
        EmptyInputError: if ``query`` has no tokens.
        VocabularyMismatchError: if ``idf_array`` does not match ``vocabulary``.
    """
    if not query:
        raise EmptyInputError("Empty query")
    if len(idf_array) != len(vocabulary):
        raise VocabularyMismatchError(
            f"IDF has {len(idf_array)} entries but vocabulary has {len(vocabulary)} terms."
        )

    query_vector = np.zeros(len(vocabulary), dtype=np.float64)
    term_ids = vocabulary.positions(query)
    query_vector[term_ids] = idf_array[term_ids]

    logger.debug(f"Query matched {len(term_ids)} of {len(set(query))} distinct terms")
    return query_vector
