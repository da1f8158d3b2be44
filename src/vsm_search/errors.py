"""Exceptions raised by the indexing and query path."""


class SearchError(Exception):
    """Base class for errors raised by vsm_search."""


class EmptyInputError(SearchError, ValueError):
    """No documents, no words, or an empty query token sequence."""


class VocabularyMismatchError(SearchError, RuntimeError):
    """
    Two structures disagree on vocabulary size.

    Only raised when the build pipeline is bypassed or misused; every
    structure produced by a single TfIdfIndex shares one Vocabulary.
    """
