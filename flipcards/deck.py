"""A standard 52-card deck stored in a linked list."""

from __future__ import annotations

import random
from typing import Iterator, Optional

from flipcards.card import Card, Suit, Value
from flipcards.linked_list import LinkedList

DECK_MAX_SIZE = 52


class Deck:
    """A full deck of cards; the last card added sits at the front."""

    def __init__(self) -> None:
        self._cards: LinkedList[Card] = LinkedList(
            Card(suit, value) for suit in Suit for value in Value
        )
        if len(self._cards) != DECK_MAX_SIZE:
            raise RuntimeError(
                f"deck initialisation produced {len(self._cards)} cards, "
                f"expected {DECK_MAX_SIZE}"
            )

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """Shuffle the deck in place using ``rng`` (a fresh generator by default)."""
        rng = rng if rng is not None else random.Random()
        cards = self._cards.to_list()
        rng.shuffle(cards)
        node = self._cards.head
        for card in cards:
            if node is None:
                raise RuntimeError("size mismatch between deck and shuffled cards")
            node.data = card
            node = node.next

    def front(self) -> Card:
        """Return the card at the front of the deck."""
        return self._cards.get(0)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __str__(self) -> str:
        return str(self._cards)