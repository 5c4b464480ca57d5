"""A simple bitcoin wallet."""


class Bitcoin(int):
    """An amount of bitcoin."""

    def __str__(self) -> str:
        return f"{int(self)} BTC"

    def __repr__(self) -> str:
        return f"Bitcoin({int(self)})"


class InsufficientFundsError(Exception):
    """Raised when a withdrawal exceeds the balance."""

    def __init__(self, message: str = "cannot withdraw, insufficient funds") -> None:
        super().__init__(message)


class Wallet:
    """Holds a bitcoin balance."""

    def __init__(self, balance: int = 0) -> None:
        self._balance = Bitcoin(balance)

    def deposit(self, amount: int) -> None:
        """Add ``amount`` to the balance."""
        self._balance = Bitcoin(self._balance + amount)

    @property
    def balance(self) -> Bitcoin:
        """The current balance."""
        return self._balance

    def withdraw(self, amount: int) -> None:
        """Take ``amount`` out, refusing to go below zero."""
        if amount > self._balance:
            raise InsufficientFundsError()
        self._balance = Bitcoin(self._balance - amount)