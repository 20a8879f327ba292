import pytest

from flipcards.card import Card, Suit, Value


def test_every_suit_value_pair_prints_distinctly():
    rendered = {str(Card(suit, value)) for suit in Suit for value in Value}
    assert len(rendered) == 52


def test_value_order_king_first_ace_last():
    assert Card(Suit.SPADE, 0).value is Value.KING
    assert Card(Suit.SPADE, 12).value is Value.ACE
    assert str(Card(Suit.SPADE, 0)) == "KING of SPADES"
    assert str(Card(Suit.SPADE, 12)) == "ACE of SPADES"


def test_str_format():
    assert str(Card(Suit.SPADE, Value.KING)) == "KING of SPADES"


@pytest.mark.parametrize("suit", list(Suit))
@pytest.mark.parametrize("value", list(Value))
def test_str_uses_names(suit, value):
    assert str(Card(suit, value)) == f"{value.name} of {suit.name}S"


def test_fields_are_mutable():
    card = Card(Suit.HEART, Value.TWO)
    card.value = Value.ACE
    card.suit = Suit.CLUB
    assert card == Card(Suit.CLUB, Value.ACE)


def test_integer_arguments_become_enums():
    card = Card(1, 12)
    assert card.suit is Suit.HEART
    assert card.value is Value.ACE


def test_invalid_suit_raises():
    with pytest.raises(ValueError):
        Card(4, Value.ACE)


def test_invalid_value_raises():
    with pytest.raises(ValueError):
        Card(Suit.SPADE, 13)