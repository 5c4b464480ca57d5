"""Greeting written to any text stream."""

from typing import TextIO


def greet(writer: TextIO, name: str) -> None:
    """Write a greeting for ``name`` to ``writer``."""
    writer.write(f"hello {name}")