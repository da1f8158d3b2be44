import io

import pytest

from vsm_search.cli import NO_INPUT_MESSAGE, handle_query, interactive_loop, main
from vsm_search.index import TfIdfIndex


@pytest.fixture
def index():
    documents = [["sky", "blue"], ["grass", "green"], ["sea", "blue", "deep"], ["rock"]]
    return TfIdfIndex.from_documents(documents, ["sky.txt", "grass.txt", "sea.md", "rock.txt"])


def test_handle_query_prints_results(index):
    output = handle_query("The GREEN grass!", index)

    assert output == "\nResults:\n\ngrass.txt, (1.00)\n------"


def test_handle_query_no_matches(index):
    assert "No matches found." in handle_query("volcano", index)


def test_handle_query_only_stop_words(index):
    assert handle_query("the and of", index) == NO_INPUT_MESSAGE


def test_handle_query_quit(index):
    assert handle_query("please quit now", index) is None


def test_interactive_loop_until_quit(index, capsys):
    lines = iter(["sky", "the", "quit", "never read"])

    interactive_loop(index, top_n=1, read_line=lambda prompt: next(lines))

    out = capsys.readouterr().out
    assert "sky.txt" in out
    assert NO_INPUT_MESSAGE in out
    assert "'quit' detected, ending program." in out


def test_interactive_loop_stops_at_end_of_input(index, capsys):
    def read_line(prompt):
        raise EOFError

    interactive_loop(index, read_line=read_line)

    assert capsys.readouterr().out == "\n"


def test_main_runs_search_session(tmp_path, monkeypatch, capsys):
    (tmp_path / "sky.txt").write_text("the sky is blue")
    (tmp_path / "grass.md").write_text("grass is green")
    (tmp_path / "rock.txt").write_text("a grey rock")
    monkeypatch.setattr("sys.stdin", io.StringIO("green\nquit\n"))

    assert main([str(tmp_path), "--top-n", "3"]) == 0

    out = capsys.readouterr().out
    assert "Loading files." in out
    assert "Creating model." in out
    # "grass" and "green" weigh the same, so a one-word query scores 1 / sqrt(2)
    assert "grass.md, (0.71)" in out
    assert "'quit' detected, ending program." in out


def test_main_missing_directory(tmp_path, capsys):
    assert main([str(tmp_path / "missing")]) == 1
    assert "Directory does not exist." in capsys.readouterr().out


def test_main_rejects_non_positive_top_n(tmp_path):
    with pytest.raises(SystemExit):
        main([str(tmp_path), "--top-n", "0"])
