"""Display labels for stored suit and card value tags."""

from markupsafe import Markup, escape

SUIT_SYMBOLS: dict[str, Markup] = {
    "CLUBS": Markup("♣"),
    "SPADES": Markup("♠"),
    "DIAMONDS": Markup('<span class="suit-red">♦</span>'),
    "HEARTS": Markup('<span class="suit-red">♥</span>'),
}

CARD_VALUE_LABELS: dict[str, str] = {
    "SEVEN": "7",
    "EIGHT": "8",
    "NINE": "9",
    "TEN": "10",
    "JACK": "J",
    "QUEEN": "Q",
    "KING": "K",
    "ACE": "A",
}


def suit_symbol(suit: str) -> Markup:
    """Return the suit glyph as safe HTML. Unknown tags are returned escaped."""
    symbol = SUIT_SYMBOLS.get(suit)
    if symbol is None:
        return escape(suit)
    return symbol


def card_value_label(value: str) -> str:
    """Return the short card value label ("TEN" -> "10"). Unknown tags pass through."""
    return CARD_VALUE_LABELS.get(value, value)
