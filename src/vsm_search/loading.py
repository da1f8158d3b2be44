"""Discover text and markdown files on disk and turn them into token lists."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from tqdm import tqdm

from vsm_search.config import Config
from vsm_search.errors import EmptyInputError
from vsm_search.text import clean_text, tokenize

logger = logging.getLogger(__name__)


def find_documents(
    directory: str | os.PathLike[str],
    extensions: Iterable[str] = Config.extensions,
) -> list[str]:
    """
    Recursively collect files below ``directory`` with a matching extension.

    Args:
        directory: Root of the walk.
        extensions: Accepted suffixes including the dot, compared case-insensitively.

    Returns:
        Sorted list of file paths, so document indices are reproducible.

    Raises:
        NotADirectoryError: if ``directory`` is not an existing directory.
        EmptyInputError: if no file matches.
    """
    root = Path(directory)
    if not root.is_dir():
        raise NotADirectoryError("Directory does not exist.")

    wanted = {ext.lower() for ext in extensions}
    paths = sorted(
        str(path) for path in root.rglob("*") if path.is_file() and path.suffix.lower() in wanted
    )
    if not paths:
        raise EmptyInputError("No files found in directory.")

    logger.debug(f"Found {len(paths)} files below {root}")
    return paths


def read_document(path: str | os.PathLike[str]) -> list[str]:
    """
    Read a file and return its tokens.

    Unreadable files are treated as empty.

    Raises:
        EmptyInputError: if the file yields no tokens.
    """
    try:
        contents = Path(path).read_text(encoding="utf-8", errors="ignore")
    except OSError as exc:
        logger.warning(f"Could not read {path}: {exc}")
        contents = ""
    return tokenize(clean_text(contents))


def load_documents(paths: Iterable[str]) -> tuple[list[list[str]], list[str]]:
    """
    Tokenize every file in ``paths``.

    Files without any token are skipped. The returned identifiers are the
    paths of the files that were kept, in the same order as the documents.

    Raises:
        EmptyInputError: if no file produced any token.
    """
    documents: list[list[str]] = []
    ids: list[str] = []
    for path in tqdm(list(paths), desc="Tokenizing", unit="doc"):
        try:
            tokens = read_document(path)
        except EmptyInputError:
            logger.warning(f"Skipping {path}: no words extracted")
            continue
        documents.append(tokens)
        ids.append(str(path))

    if not documents:
        raise EmptyInputError("No words extracted from files.")
    return documents, ids
