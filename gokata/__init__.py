"""Small tested building blocks: sums, greetings, a dictionary, a wallet, shapes, a countdown and a website checker."""

__version__ = "0.1.0"