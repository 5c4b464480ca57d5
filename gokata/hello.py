"""Greetings in a few languages."""

_PREFIXES = {
    "Spanish": "Hola, ",
    "French": "Bonjour, ",
}
_ENGLISH_PREFIX = "Hello, "


def hello(name: str, language: str = "") -> str:
    """Greet ``name`` in ``language``; an empty name greets the World."""
    return _PREFIXES.get(language, _ENGLISH_PREFIX) + (name or "World")