"""Tests for the tokenizer pass, successor lists and model building."""

from collections import Counter

import pytest

import wordwalk as ww
from wordwalk import SuccessorTable
from wordwalk._tokenize import iter_spans


def successor_texts(model, text):
    """Return successor tokens of ``text`` as strings."""
    return [model.text(s) for s in model.successors_of(model.find(text))]


# Tokenizer pass
# ---------------------------------------------------------------------------


def test_iter_spans_splits_on_space_cr_lf_only():
    """Punctuation and tabs stay attached; runs of delimiters yield no empty tokens."""
    buf = b"  Hello,\r\nworld!\tok  \n"
    assert [buf[s:e] for s, e in iter_spans(buf)] == [b"Hello,", b"world!\tok"]


def test_iter_spans_empty_buffer():
    assert list(iter_spans(b"")) == []
    assert list(iter_spans(b" \r\n ")) == []


# Successor table
# ---------------------------------------------------------------------------


def test_successor_table_keeps_duplicates_in_order():
    table = SuccessorTable()
    for _ in range(3):
        table.add_node()
    table.record(0, 1)
    table.record(0, 2)
    table.record(0, 1)
    assert table.successors_of(0) == (1, 2, 1)
    assert table.successors_of(1) == ()
    assert table.edge_count() == 3
    assert table.dead_ends() == [1, 2]


def test_successor_table_rejects_unknown_ids():
    table = SuccessorTable()
    table.add_node()
    with pytest.raises(IndexError):
        table.record(0, 5)


def test_successors_of_is_a_snapshot():
    """Callers cannot mutate the model through the returned sequence."""
    table = SuccessorTable()
    table.add_node()
    table.record(0, 0)
    succs = table.successors_of(0)
    assert isinstance(succs, tuple)


# Model building
# ---------------------------------------------------------------------------


def test_cat_corpus_successors(cat_model):
    """'cat' is followed by exactly three tokens in first-seen order."""
    assert successor_texts(cat_model, "cat") == ["sat.", "run?", "ran!"]
    assert successor_texts(cat_model, "The") == ["cat", "cat"]
    assert successor_texts(cat_model, "Did") == ["the"]


def test_cat_corpus_ids_follow_first_occurrence(cat_model):
    texts = [cat_model.text(i) for i in range(len(cat_model))]
    assert texts == ["The", "cat", "sat.", "Did", "the", "run?", "ran!"]


def test_last_token_is_a_dead_end(cat_model):
    assert cat_model.successors_of(cat_model.find("ran!")) == ()


def test_frequency_preservation():
    """Each successor list matches the exact bigram counts of the text."""
    text = b"a b a c a b b a a\nc a b"
    model = ww.build_model(text)
    words = text.split()
    expected = Counter(zip(words, words[1:]))

    observed = Counter()
    for tok_id in range(len(model)):
        prev = model.token(tok_id).tobytes()
        for succ in model.successors_of(tok_id):
            observed[(prev, model.token(succ).tobytes())] += 1

    assert observed == expected


def test_build_model_accepts_str_and_bytearray():
    from_str = ww.build_model("Hi there. Hi you.")
    from_bytearray = ww.build_model(bytearray(b"Hi there. Hi you."))
    assert successor_texts(from_str, "Hi") == ["there.", "you."]
    assert successor_texts(from_bytearray, "Hi") == ["there.", "you."]


def test_build_model_stats(cat_model):
    stats = cat_model.stats()
    assert stats == ww.ModelStats(
        n_tokens=10, n_distinct=7, n_edges=9, n_dead_ends=1, n_starts=2
    )


def test_build_model_empty_text_warns(caplog):
    model = ww.build_model(b"   \n ")
    assert len(model) == 0
    assert "no tokens" in caplog.text


def test_build_model_hash_size_limit():
    """Too many distinct tokens for the index is a hard failure."""
    with pytest.raises(ww.InternerCapacityError):
        ww.build_model(b"one two three four", hash_size=3)


def test_build_model_logs_timing(caplog):
    with caplog.at_level("INFO", logger="wordwalk"):
        ww.build_model(b"A b. C d.")
    assert "model build took" in caplog.text
    assert "4 distinct" in caplog.text


# Read-only model
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("tok_id", [-1, 7, 100])
def test_successors_of_unknown_id_raises(cat_model, tok_id):
    """Out-of-range ids are rejected instead of wrapping around."""
    with pytest.raises(IndexError):
        cat_model.successors_of(tok_id)


def test_frozen_successors_are_not_copied(cat_model):
    """A built model hands out its stored tuple on every read."""
    cat_id = cat_model.find("cat")
    first = cat_model.successors_of(cat_id)
    assert isinstance(first, tuple)
    assert cat_model.successors_of(cat_id) is first


def test_built_model_is_read_only(cat_model):
    """Neither table accepts changes once build_model has returned."""
    assert cat_model.interner.frozen
    assert cat_model.successors.frozen
    with pytest.raises(ww.ModelFrozenError):
        cat_model.interner.intern(0, 3)
    with pytest.raises(ww.ModelFrozenError):
        cat_model.successors.record(0, 1)
    with pytest.raises(ww.ModelFrozenError):
        cat_model.successors.add_node()
    assert cat_model.successors_of(0) == (1, 1)
    assert cat_model.stats().n_edges == 9


def test_successor_table_freeze_is_idempotent():
    table = SuccessorTable()
    table.add_node()
    table.record(0, 0)
    table.freeze()
    table.freeze()
    assert table.successors_of(0) == (0,)
    assert table.dead_ends() == []


def test_build_model_logs_failure_timing(caplog):
    with pytest.raises(ww.InternerCapacityError):
        ww.build_model(b"one two three", hash_size=2)
    assert "model build failed" in caplog.text
    assert "InternerCapacityError" in caplog.text
