"""Character pools used for chart generation and regeneration."""

LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"


def get_character_pool(include_digits: bool = False) -> str:
    """Return the selectable characters: 26 letters, plus 10 digits if requested."""
    return LETTERS + DIGITS if include_digits else LETTERS
