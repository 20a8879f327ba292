"""Command that prints a fresh deck, shuffles it and prints it again."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from flipcards.deck import Deck


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print a new deck, shuffle it, then print it again."""
    parser = argparse.ArgumentParser(
        prog="flipcards",
        description="Print a deck of cards before and after shuffling.",
    )
    parser.parse_args(argv)

    deck = Deck()
    print(deck, end="")
    deck.shuffle()
    print(deck, end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())