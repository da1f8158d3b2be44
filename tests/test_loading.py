from pathlib import Path

import pytest

from vsm_search.corpus import Corpus
from vsm_search.errors import EmptyInputError
from vsm_search.loading import find_documents, load_documents, read_document


@pytest.fixture
def notes_dir(tmp_path: Path) -> Path:
    (tmp_path / "a").mkdir()
    (tmp_path / "b").mkdir()
    (tmp_path / "a" / "doc1.txt").write_text("The sky is blue.")
    (tmp_path / "b" / "notes.MD").write_text("# Heading\n\nGrass is green, see https://example.com")
    (tmp_path / "empty.txt").write_text("the and of")
    (tmp_path / "script.py").write_text("print('sky')")
    return tmp_path


def test_find_documents_filters_extensions_recursively(notes_dir):
    paths = find_documents(notes_dir)

    assert paths == [
        str(notes_dir / "a" / "doc1.txt"),
        str(notes_dir / "b" / "notes.MD"),
        str(notes_dir / "empty.txt"),
    ]


def test_find_documents_missing_directory(tmp_path):
    with pytest.raises(NotADirectoryError, match="Directory does not exist."):
        find_documents(tmp_path / "wrong_path")


def test_find_documents_without_matches(tmp_path):
    (tmp_path / "script.py").write_text("pass")

    with pytest.raises(EmptyInputError, match="No files found in directory."):
        find_documents(tmp_path)


def test_read_document(notes_dir):
    assert read_document(notes_dir / "a" / "doc1.txt") == ["sky", "blue"]
    assert read_document(notes_dir / "b" / "notes.MD") == ["heading", "grass", "green", "see"]


def test_read_document_missing_file(tmp_path):
    with pytest.raises(EmptyInputError):
        read_document(tmp_path / "abcdefg.txt")


def test_load_documents_skips_files_without_words(notes_dir):
    documents, ids = load_documents(find_documents(notes_dir))

    assert documents == [["sky", "blue"], ["heading", "grass", "green", "see"]]
    assert ids == [str(notes_dir / "a" / "doc1.txt"), str(notes_dir / "b" / "notes.MD")]


def test_load_documents_nothing_extracted(tmp_path):
    with pytest.raises(EmptyInputError, match="No words extracted from files."):
        load_documents([str(tmp_path / "abcdefg.txt")])


def test_corpus_from_directory(notes_dir):
    corpus = Corpus.from_directory(notes_dir)

    assert len(corpus) == 2
    assert corpus[0] == ("sky", "blue")
    assert corpus.ids[1] == str(notes_dir / "b" / "notes.MD")
