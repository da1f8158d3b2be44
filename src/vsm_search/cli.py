"""
Interactive search over a directory of text and markdown files.

Usage:
    vsm-search [DIRECTORY] [--top-n N] [--verbose]

Builds the index once, then reads one query per line until a query contains
``quit`` or input ends.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable

from vsm_search.config import Config
from vsm_search.corpus import Corpus
from vsm_search.errors import EmptyInputError
from vsm_search.index import TfIdfIndex
from vsm_search.ranking import format_results
from vsm_search.text import clean_text, tokenize

NO_INPUT_MESSAGE = "Error: no input (stop words were stripped from the query)"


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def handle_query(line: str, index: TfIdfIndex, top_n: int = Config.top_n) -> str | None:
    """
    Answer one line of user input.

    Returns:
        The text to show, or None when the user asked to quit.
    """
    try:
        tokens = tokenize(clean_text(line))
    except EmptyInputError:
        return NO_INPUT_MESSAGE

    if Config.quit_command in tokens:
        return None

    results = index.search(tokens, top_n)
    return f"\nResults:\n\n{format_results(results)}\n------"


def interactive_loop(
    index: TfIdfIndex,
    top_n: int = Config.top_n,
    read_line: Callable[[str], str] = input,
) -> None:
    """Prompt for queries until ``quit`` or end of input."""
    while True:
        try:
            line = read_line("Search for: ")
        except EOFError:
            print()
            break

        output = handle_query(line, index, top_n)
        if output is None:
            print(f"'{Config.quit_command}' detected, ending program.")
            break
        print(output)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Rank text and markdown files by TF-IDF cosine similarity to a query."
    )
    parser.add_argument(
        "directory", nargs="?", default=".", help="Directory to index (default: current directory)."
    )
    parser.add_argument(
        "--top-n",
        type=_positive_int,
        default=Config.top_n,
        help=f"Number of results per query (default: {Config.top_n}).",
    )
    parser.add_argument("--verbose", action="store_true", help="Log indexing and query details.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    print("Loading files.")
    try:
        corpus = Corpus.from_directory(args.directory)
    except (NotADirectoryError, EmptyInputError) as exc:
        print(exc)
        return 1

    print("Creating model.")
    index = TfIdfIndex.from_corpus(corpus)

    interactive_loop(index, args.top_n)
    return 0


if __name__ == "__main__":
    sys.exit(main())
