"""Playing cards: suits, values and the card itself."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Suit(IntEnum):
    """The four card suits."""

    SPADE = 0
    HEART = 1
    DIAMOND = 2
    CLUB = 3


class Value(IntEnum):
    """The thirteen card values, King first and Ace last."""

    KING = 0
    QUEEN = 1
    JACK = 2
    TEN = 3
    NINE = 4
    EIGHT = 5
    SEVEN = 6
    SIX = 7
    FIVE = 8
    FOUR = 9
    THREE = 10
    TWO = 11
    ACE = 12


@dataclass
class Card:
    """A playing card with a suit and a value."""

    suit: Suit
    value: Value

    def __post_init__(self) -> None:
        self.suit = Suit(self.suit)
        self.value = Value(self.value)

    def __str__(self) -> str:
        return f"{self.value.name} of {self.suit.name}S"