"""Shared fixtures for wordwalk tests."""

import random

import pytest

import wordwalk as ww

CAT_CORPUS = b"The cat sat. Did the cat run? The cat ran!"


@pytest.fixture
def cat_model():
    """Return a model built from a tiny three-sentence corpus."""
    return ww.build_model(CAT_CORPUS)


@pytest.fixture
def rng():
    """Return a seeded random source so walks are reproducible."""
    return random.Random(1234)
