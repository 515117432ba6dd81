"""Tests for the card display model."""

import pytest

from deck_utils import DeckController
from display_utils import EMPTY_MESSAGE, CardDisplay, describe, shortcut_allowed


def test_empty_deck_disables_controls(empty_deck: DeckController) -> None:
    display = describe(empty_deck)
    assert display.text == EMPTY_MESSAGE
    assert display.position == "No cards"
    assert not display.can_navigate
    assert not display.can_modify
    assert display.question == ""
    assert display.answer == ""


def test_front_side(two_card_deck: DeckController) -> None:
    display = describe(two_card_deck)
    assert display == CardDisplay(
        text="Q1",
        side="Question",
        position="Card 1 of 2",
        can_navigate=True,
        can_modify=True,
        question="Q1",
        answer="A1",
    )


def test_back_side_after_flip(two_card_deck: DeckController) -> None:
    two_card_deck.next()
    two_card_deck.flip()
    display = describe(two_card_deck)
    assert display.text == "A2"
    assert display.side == "Answer"
    assert display.position == "Card 2 of 2"


def test_editor_fields_hold_both_sides(two_card_deck: DeckController) -> None:
    two_card_deck.flip()
    display = describe(two_card_deck)
    assert (display.question, display.answer) == ("Q1", "A1")


def test_display_is_frozen(two_card_deck: DeckController) -> None:
    display = describe(two_card_deck)
    with pytest.raises(AttributeError):
        display.text = "other"  # type: ignore[misc]


@pytest.mark.parametrize("keysym", ["Left", "Right", "space"])
def test_shortcuts_ignored_while_typing(keysym: str) -> None:
    assert not shortcut_allowed("Text", keysym)


@pytest.mark.parametrize("focus_class", [None, "Canvas", "TFrame", "Tk"])
@pytest.mark.parametrize("keysym", ["Left", "Right", "space"])
def test_shortcuts_fire_without_input_focus(focus_class, keysym: str) -> None:
    assert shortcut_allowed(focus_class, keysym)


def test_focused_button_keeps_arrow_shortcuts() -> None:
    assert shortcut_allowed("TButton", "Left")
    assert shortcut_allowed("TButton", "Right")
    assert not shortcut_allowed("TButton", "space")
