"""A word dictionary with explicit add, update and delete rules."""


class DictionaryError(Exception):
    """Base class for dictionary errors."""

    default_message = "dictionary error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class WordNotFoundError(DictionaryError):
    """The word looked up is not in the dictionary."""

    default_message = "could not find the word you are looking for"


class WordExistsError(DictionaryError):
    """The word to add is already in the dictionary."""

    default_message = "cannot add word because it already exists"


class WordDoesNotExistError(DictionaryError):
    """The word to change or remove is not in the dictionary."""

    default_message = "cannot perform operation on word because it does not exist"


class Dictionary(dict):
    """A mapping of words to their definitions."""

    def search(self, word: str) -> str:
        """Return the definition of ``word``."""
        try:
            return self[word]
        except KeyError:
            raise WordNotFoundError() from None

    def add(self, word: str, definition: str) -> None:
        """Add a new word; fail if it is already present."""
        if word in self:
            raise WordExistsError()
        self[word] = definition

    def update(self, word: str, definition: str) -> None:
        """Replace the definition of an existing word."""
        if word not in self:
            raise WordDoesNotExistError()
        self[word] = definition

    def delete(self, word: str) -> None:
        """Remove an existing word."""
        if word not in self:
            raise WordDoesNotExistError()
        del self[word]