"""Vector-space (TF-IDF + cosine similarity) search over text and markdown files."""

from vsm_search.config import Config
from vsm_search.corpus import Corpus
from vsm_search.errors import EmptyInputError, SearchError, VocabularyMismatchError
from vsm_search.index import TfIdfIndex
from vsm_search.ranking import SearchResult, format_results, rank, rank_indices
from vsm_search.similarity import cosine_similarity
from vsm_search.text import clean_text, tokenize
from vsm_search.vocabulary import Vocabulary, build_vocabulary
from vsm_search.weighting import vectorize_query

__all__ = [
    "Config",
    "Corpus",
    "EmptyInputError",
    "SearchError",
    "SearchResult",
    "TfIdfIndex",
    "Vocabulary",
    "VocabularyMismatchError",
    "build_vocabulary",
    "clean_text",
    "cosine_similarity",
    "format_results",
    "rank",
    "rank_indices",
    "tokenize",
    "vectorize_query",
]
