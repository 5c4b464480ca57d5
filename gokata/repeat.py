"""Repeating a string."""


def repeat(character: str, repeat_count: int) -> str:
    """Return ``character`` repeated ``repeat_count`` times."""
    return character * max(repeat_count, 0)