# flipcards

flipcards models a standard deck of 52 playing cards. You can shuffle the
deck and print it.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

```
flipcards
```

The command builds a new deck and prints it. It then shuffles the deck and
prints it again. Each printout starts with the line `Printing linked list:`.
The next line lists the cards separated by commas, for example
`ACE of CLUBS`. The command takes no options apart from `--help`.

## Library use

```python
import random

from flipcards.card import Card, Suit, Value
from flipcards.deck import Deck

deck = Deck()
print(len(deck))           # 52
print(deck.front())        # the card at the front of the deck

deck.shuffle(random.Random(42))   # pass your own generator for a repeatable order
for card in deck:
    print(card)

print(Card(Suit.HEART, Value.QUEEN))   # QUEEN of HEARTS
```

### Cards

`flipcards.card` defines two enums and the card class:

- `Suit` has four members: `SPADE`, `HEART`, `DIAMOND` and `CLUB`.
- `Value` has thirteen members, from `KING` first to `ACE` last.
- `Card` is a dataclass with a `suit` and a `value`. Plain integers are
  converted to the enums. An integer outside the range raises `ValueError`.
  `str(card)` gives text such as `TWO of SPADES`.

### The deck

`flipcards.deck.Deck()` builds all 52 cards. It goes suit by suit and adds
each new card at the front, so a new, unshuffled deck begins with
`ACE of CLUBS`.

- `shuffle(rng=None)` shuffles the deck in place. With no argument it uses a
  fresh `random.Random`.
- `front()` returns the card at the front of the deck.
- `len(deck)` gives the number of cards, and iterating over the deck yields
  them from the front.
- `str(deck)` gives the same text that the command prints.

### The linked list

`flipcards.linked_list.LinkedList` is the singly linked list that holds the
cards. It can be built from any iterable. `add` puts a new item at the head.
`get` and `set` work by zero-based position. They raise `IndexError` when
that position does not exist. `clear` removes every item. `to_list` returns
a copy of the contents, in order from the head. The list also supports
`len()`, iteration and `str()`.

## What it does not do

flipcards provides a deck and nothing more. It has no game rules, no players
and no dealing. It does not flip cards during play or keep score.