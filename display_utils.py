from dataclasses import dataclass

from deck_utils import DeckController

EMPTY_MESSAGE = "Deck is empty! Add a new card to begin."


@dataclass(frozen=True)
class CardDisplay:
    text: str
    side: str
    position: str
    can_navigate: bool
    can_modify: bool
    question: str
    answer: str


def describe(controller: DeckController) -> CardDisplay:
    """Snapshot of what the card window should show for the controller's state."""
    if controller.is_empty:
        return CardDisplay(
            text=EMPTY_MESSAGE,
            side="",
            position="No cards",
            can_navigate=False,
            can_modify=False,
            question="",
            answer="",
        )

    card = controller.current_card()
    return CardDisplay(
        text=controller.visible_text(),
        side="Question" if controller.is_front_visible else "Answer",
        position=f"Card {controller.current_index + 1} of {len(controller)}",
        can_navigate=True,
        can_modify=True,
        question=card.front,
        answer=card.back,
    )


def shortcut_allowed(focus_class, keysym):
    """Whether a window-level key shortcut should fire for the focused widget.

    Inputs keep every key while typing. A focused button already treats
    space as a press, so only space is left to it.
    """
    if focus_class == "Text":
        return False
    if focus_class == "TButton" and keysym == "space":
        return False
    return True
