"""Tests for session start-up from the sample deck."""

from config_utils import AppConfig
from sample_deck import SAMPLE_CARDS, build_controller


def test_sample_cards_are_valid() -> None:
    assert len(SAMPLE_CARDS) == 10
    for front, back in SAMPLE_CARDS:
        assert front.strip()
        assert back.strip()


def test_unshuffled_keeps_order() -> None:
    controller = build_controller(AppConfig(shuffle=False))
    assert [(c.front, c.back) for c in controller.cards] == SAMPLE_CARDS
    assert controller.current_index == 0
    assert controller.is_front_visible


def test_seeded_shuffle_is_reproducible() -> None:
    first = build_controller(AppConfig(shuffle=True, seed=3))
    second = build_controller(AppConfig(shuffle=True, seed=3))
    assert [c.front for c in first.cards] == [c.front for c in second.cards]
    assert sorted((c.front, c.back) for c in first.cards) == sorted(SAMPLE_CARDS)


def test_without_sample_deck_starts_empty() -> None:
    controller = build_controller(AppConfig(sample_deck=False))
    assert controller.is_empty
