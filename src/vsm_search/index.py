"""
The TF-IDF index: built once from a corpus, read-only afterwards.

Usage:
    from vsm_search import Corpus, TfIdfIndex, clean_text, tokenize

    index = TfIdfIndex.from_corpus(Corpus.from_directory("notes"))
    for result in index.search(tokenize(clean_text("sparse matrices"))):
        print(result.identifier, result.score)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from vsm_search.config import Config
from vsm_search.corpus import Corpus
from vsm_search.ranking import SearchResult, rank
from vsm_search.similarity import cosine_similarities, row_norms
from vsm_search.vocabulary import Vocabulary, build_vocabulary
from vsm_search.weighting import (
    inverse_document_frequency,
    term_frequency_matrix,
    tf_idf_matrix,
    vectorize_query,
)

if TYPE_CHECKING:
    from numpy.typing import NDArray
    from scipy.sparse import csr_matrix

logger = logging.getLogger(__name__)


def _freeze(*arrays: NDArray) -> None:
    for array in arrays:
        array.flags.writeable = False


@dataclass(frozen=True, eq=False)
class TfIdfIndex:
    """
    Vocabulary, TF, IDF and TF-IDF of one corpus.

    Every structure shares the column order of ``vocabulary``. All arrays are
    marked read-only, so a single instance can serve any number of queries.

    Attributes:
        corpus: The indexed corpus (document order = matrix row order).
        vocabulary: Terms and their corpus-wide occurrence counts.
        tf_matrix: Raw term counts (N_docs, vocab_size).
        idf_array: IDF per term (vocab_size,).
        tf_idf_matrix: TF weighted by IDF (N_docs, vocab_size).
        norm_array: Euclidean norm of each TF-IDF row (N_docs,).
    """

    corpus: Corpus
    vocabulary: Vocabulary
    tf_matrix: csr_matrix
    idf_array: NDArray[np.float64]
    tf_idf_matrix: csr_matrix
    norm_array: NDArray[np.float64]

    @classmethod
    def from_corpus(cls, corpus: Corpus) -> "TfIdfIndex":
        """Build every structure of the index from ``corpus``."""
        vocabulary = build_vocabulary(corpus.documents)
        tf = term_frequency_matrix(corpus.documents, vocabulary)
        idf = inverse_document_frequency(len(corpus), vocabulary)
        tf_idf = tf_idf_matrix(tf, idf)
        norms = row_norms(tf_idf)

        _freeze(
            idf,
            norms,
            tf.data, tf.indices, tf.indptr,
            tf_idf.data, tf_idf.indices, tf_idf.indptr,
        )
        logger.info(
            f"Indexed {len(corpus)} documents with a vocabulary of {len(vocabulary)} terms"
        )
        return cls(
            corpus=corpus,
            vocabulary=vocabulary,
            tf_matrix=tf,
            idf_array=idf,
            tf_idf_matrix=tf_idf,
            norm_array=norms,
        )

    @classmethod
    def from_documents(
        cls, documents: list[list[str]], ids: list[str] | None = None
    ) -> "TfIdfIndex":
        return cls.from_corpus(Corpus(documents, ids))

    def __len__(self) -> int:
        return len(self.corpus)

    def vectorize(self, query: Sequence[str]) -> NDArray[np.float64]:
        """Query vector in this index's space. Raises EmptyInputError for an empty query."""
        return vectorize_query(query, self.vocabulary, self.idf_array)

    def similarities(self, query_vector: NDArray[np.float64]) -> NDArray[np.float64]:
        """Cosine similarity of the query vector against every document."""
        return cosine_similarities(query_vector, self.tf_idf_matrix, self.norm_array)

    def rank(
        self, query_vector: NDArray[np.float64], top_n: int = Config.top_n
    ) -> list[SearchResult]:
        """Top ``top_n`` documents with a positive similarity, best first."""
        return rank(
            query_vector,
            self.tf_idf_matrix,
            self.corpus.ids,
            top_n=top_n,
            norms=self.norm_array,
        )

    def search(self, query: Sequence[str], top_n: int = Config.top_n) -> list[SearchResult]:
        """Vectorize a tokenized query and rank the corpus against it."""
        results = self.rank(self.vectorize(query), top_n)
        logger.debug(f"Query {list(query)} returned {len(results)} results")
        return results
