"""End-to-end tests for the wordwalk command line."""

import pytest

from wordwalk.cli import main

CORPUS = (
    "The monster spoke. Did the monster weep? The monster fled!\n"
    "Why did he create me? How cruel he was!\n"
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep WORDWALK_* variables from the developer shell out of the tests."""
    for name in ("CORPUS", "HASH_SIZE", "MAX_LENGTH", "MAX_ATTEMPTS", "SEED"):
        monkeypatch.delenv(f"WORDWALK_{name}", raising=False)


@pytest.fixture
def corpus_file(tmp_path):
    path = tmp_path / "pg84.txt"
    path.write_text(CORPUS, encoding="utf-8")
    return path


def test_prints_question_then_exclamation(corpus_file, capsys):
    assert main([str(corpus_file), "--seed", "3"]) == 0
    out = capsys.readouterr().out
    question, exclamation = out.rstrip("\n").split("\n\n")
    assert question.endswith("?")
    assert exclamation.endswith("!")
    assert question[0].isupper() and exclamation[0].isupper()


def test_default_corpus_in_working_directory(corpus_file, monkeypatch, capsys):
    monkeypatch.chdir(corpus_file.parent)
    assert main(["--seed", "1"]) == 0
    assert "?" in capsys.readouterr().out


def test_corpus_from_environment(corpus_file, monkeypatch, capsys):
    monkeypatch.setenv("WORDWALK_CORPUS", str(corpus_file))
    monkeypatch.setenv("WORDWALK_SEED", "5")
    assert main([]) == 0
    first = capsys.readouterr().out
    assert main([]) == 0
    assert capsys.readouterr().out == first


def test_missing_corpus_exits_nonzero(tmp_path, capsys):
    assert main([str(tmp_path / "pg84.txt")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "corpus file does not exist" in captured.err


def test_unmatched_mark_is_skipped(tmp_path, capsys):
    path = tmp_path / "plain.txt"
    path.write_text("Only questions here? Really?\n", encoding="utf-8")
    assert main([str(path), "--seed", "0", "--max-attempts", "20"]) == 0
    assert capsys.readouterr().out.rstrip("\n").endswith("?")


def test_invalid_max_length(corpus_file, capsys):
    assert main([str(corpus_file), "--max-length", "0"]) == 2
    assert "max_length" in capsys.readouterr().err


def test_hash_size_too_small(corpus_file, capsys):
    assert main([str(corpus_file), "--hash-size", "4"]) == 1
    assert "hash index full" in capsys.readouterr().err
