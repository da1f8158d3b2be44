from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Sequence

from vsm_search.config import Config
from vsm_search.loading import find_documents, load_documents


class Corpus:
    """
    An ordered, read-only collection of tokenized documents.

    Document order defines the row index used by every matrix built from the
    corpus and by the ranking results. Inputs are copied into tuples, so
    changing the caller's lists afterwards has no effect.

    Args:
        documents (Sequence[Sequence[str]]): Tokenized documents. Each document is a list of terms.
        ids (Sequence[str] | None): Human-readable identifiers (e.g. file paths), parallel to
            ``documents``. Defaults to the stringified position.

    Attributes:
        documents (Tuple[Tuple[str, ...], ...]): The tokenized documents.
        ids (Tuple[str, ...]): Identifier of each document.
        document_count (int): Total number of documents in the corpus.
    """

    def __init__(self, documents: Sequence[Sequence[str]], ids: Sequence[str] | None = None):
        if ids is not None and len(ids) != len(documents):
            raise ValueError(
                f"Got {len(ids)} ids for {len(documents)} documents."
            )
        self._documents = tuple(tuple(doc) for doc in documents)
        self._ids = (
            tuple(str(id) for id in ids)
            if ids is not None
            else tuple(str(i) for i in range(len(documents)))
        )

    @property
    def documents(self) -> tuple[tuple[str, ...], ...]:
        return self._documents

    @property
    def ids(self) -> tuple[str, ...]:
        return self._ids

    @property
    def document_count(self) -> int:
        return len(self._documents)

    def __len__(self) -> int:
        return self.document_count

    def __getitem__(self, index: int) -> tuple[str, ...]:
        return self._documents[index]

    def __iter__(self) -> Iterator[tuple[str, ...]]:
        return iter(self._documents)

    @classmethod
    def from_directory(
        cls,
        directory: str | os.PathLike[str],
        extensions: Iterable[str] = Config.extensions,
    ) -> "Corpus":
        """Load every matching file below ``directory``, keyed by its path."""
        documents, ids = load_documents(find_documents(directory, extensions))
        return cls(documents, ids)
