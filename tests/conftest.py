"""Pytest configuration and fixtures."""

import random

import pytest

from deck_utils import DeckController


@pytest.fixture
def empty_deck() -> DeckController:
    return DeckController()


@pytest.fixture
def two_card_deck() -> DeckController:
    return DeckController([("Q1", "A1"), ("Q2", "A2")])


@pytest.fixture
def three_card_deck() -> DeckController:
    return DeckController([("Q1", "A1"), ("Q2", "A2"), ("Q3", "A3")])


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def change_log():
    """Callable that counts change notifications; inspect ``.calls``."""

    class Recorder:
        def __init__(self):
            self.calls = 0

        def __call__(self):
            self.calls += 1

    return Recorder()
