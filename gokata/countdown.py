"""A countdown that writes numbers and pauses between them."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Protocol, TextIO

COUNTDOWN_START = 3
FINAL_WORD = "Go!"

SLEEP = "sleep"
WRITE = "write"


class Sleeper(Protocol):
    """Anything that can pause."""

    def sleep(self) -> None:
        """Pause once."""
        ...


@dataclass
class SpySleeper:
    """Counts how often it was asked to sleep."""

    calls: int = 0

    def sleep(self) -> None:
        self.calls += 1


@dataclass
class SpyCountdownOperations:
    """Records the order of sleeps and writes."""

    calls: list[str] = field(default_factory=list)

    def sleep(self) -> None:
        self.calls.append(SLEEP)

    def write(self, value: str) -> int:
        self.calls.append(WRITE)
        return len(value)


@dataclass
class ConfigurableSleeper:
    """Sleeps for ``duration`` seconds using ``sleep_func``."""

    duration: float
    sleep_func: Callable[[float], object]

    def sleep(self) -> None:
        self.sleep_func(self.duration)


@dataclass
class SpyTime:
    """Records the duration it was asked to sleep for."""

    duration_slept: float = 0.0

    def set_duration_slept(self, duration: float) -> None:
        self.duration_slept = duration


def _countdown_from(start: int) -> Iterator[int]:
    yield from range(start, 0, -1)


def countdown(writer: TextIO, sleeper: Sleeper) -> None:
    """Write 3, 2, 1 on separate lines, sleeping after each, then the final word."""
    for number in _countdown_from(COUNTDOWN_START):
        writer.write(f"{number}\n")
        sleeper.sleep()
    writer.write(FINAL_WORD)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the countdown on standard output with one-second pauses."""
    sleeper = ConfigurableSleeper(1.0, time.sleep)
    countdown(sys.stdout, sleeper)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())