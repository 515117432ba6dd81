import itertools
import random

import structlog

logger = structlog.get_logger(__name__)


class DeckError(Exception):
    """Base class for errors raised by DeckController."""


class EmptyDeck(DeckError):
    def __init__(self, message="Deck is empty! Add a new card to begin."):
        super().__init__(message)


class ValidationError(DeckError):
    def __init__(self, fields, message="Question and Answer cannot be empty!"):
        super().__init__(message)
        self.fields = tuple(fields)


class Card:
    def __init__(self, card_id: int, front: str, back: str):
        self.card_id = card_id
        self.front = front
        self.back = back

    def __repr__(self):
        return f"Card(card_id={self.card_id!r}, front={self.front!r}, back={self.back!r})"


def _clean(front, back):
    front = (front or "").strip()
    back = (back or "").strip()
    blank = [name for name, text in (("front", front), ("back", back)) if not text]
    if blank:
        raise ValidationError(blank)
    return front, back


class DeckController:
    """Owns the deck, the cursor and the front/back visibility flag.

    Every mutation goes through this class so the cursor always points at a
    real card (or is 0 for an empty deck). Views subscribe with on_change()
    and re-render from the read-only properties.
    """

    def __init__(self, initial_cards=(), shuffle=False, rng: random.Random | None = None):
        self._rng = rng or random.Random()
        self._ids = itertools.count(1)
        self._listeners = []
        self._cards = []
        self._index = 0
        self._front_visible = True
        self.initialize(initial_cards, shuffle)

    # ---------- Observable state ----------
    @property
    def cards(self):
        return tuple(self._cards)

    @property
    def current_index(self):
        return self._index

    @property
    def is_front_visible(self):
        return self._front_visible

    @property
    def is_empty(self):
        return not self._cards

    def __len__(self):
        return len(self._cards)

    def current_card(self) -> Card:
        if not self._cards:
            raise EmptyDeck()
        return self._cards[self._index]

    def visible_text(self) -> str:
        card = self.current_card()
        return card.front if self._front_visible else card.back

    # ---------- Subscriptions ----------
    def on_change(self, callback):
        # One token per registration; the same callable may be subscribed twice
        subscription = (object(), callback)
        self._listeners.append(subscription)
        removed = False

        def unsubscribe():
            nonlocal removed
            if removed:
                return
            removed = True
            self._listeners.remove(subscription)

        return unsubscribe

    def _notify(self):
        for _, callback in list(self._listeners):
            callback()

    # ---------- Setup ----------
    def initialize(self, initial_cards, shuffle=False):
        cards = [Card(next(self._ids), front, back) for front, back in initial_cards]
        if shuffle:
            self._rng.shuffle(cards)
        self._cards = cards
        self._index = 0
        self._front_visible = True
        logger.debug("deck_initialized", size=len(cards), shuffled=shuffle)
        self._notify()

    # ---------- Navigation ----------
    def flip(self):
        if not self._cards:
            return
        self._front_visible = not self._front_visible
        self._notify()

    def next(self):
        if not self._cards:
            return
        self._index = (self._index + 1) % len(self._cards)
        self._front_visible = True
        self._notify()

    def previous(self):
        if not self._cards:
            return
        self._index = (self._index - 1 + len(self._cards)) % len(self._cards)
        self._front_visible = True
        self._notify()

    # ---------- Card Methods ----------
    def add_card(self, front, back) -> Card:
        try:
            front, back = _clean(front, back)
        except ValidationError as e:
            logger.info("card_rejected", operation="add", fields=e.fields)
            raise
        card = Card(next(self._ids), front, back)
        self._cards.append(card)
        self._index = len(self._cards) - 1
        self._front_visible = True
        logger.debug("card_added", card_id=card.card_id, size=len(self._cards))
        self._notify()
        return card

    def edit_current(self, front, back) -> Card:
        if not self._cards:
            logger.info("card_rejected", operation="edit", reason="empty_deck")
            raise EmptyDeck()
        try:
            front, back = _clean(front, back)
        except ValidationError as e:
            logger.info("card_rejected", operation="edit", fields=e.fields)
            raise
        card = self._cards[self._index]
        card.front = front
        card.back = back
        logger.debug("card_edited", card_id=card.card_id)
        self._notify()
        return card

    def delete_current(self) -> Card:
        if not self._cards:
            logger.info("card_rejected", operation="delete", reason="empty_deck")
            raise EmptyDeck()
        card = self._cards.pop(self._index)
        if self._cards:
            self._index = max(0, min(self._index, len(self._cards) - 1))
        else:
            self._index = 0
        self._front_visible = True
        logger.debug("card_deleted", card_id=card.card_id, size=len(self._cards))
        self._notify()
        return card
