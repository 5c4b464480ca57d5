import pytest

from gokata.hello import hello


@pytest.mark.parametrize(
    ("name", "language", "want"),
    [
        ("Chris", "", "Hello, Chris"),
        ("", "", "Hello, World"),
        ("Chris", "Spanish", "Hola, Chris"),
        ("Chris", "French", "Bonjour, Chris"),
        ("Chris", "Klingon", "Hello, Chris"),
        ("", "French", "Bonjour, World"),
    ],
)
def test_hello(name, language, want):
    assert hello(name, language) == want


def test_default_language_is_english():
    assert hello("Ann") == "Hello, Ann"