# gokata

A set of small, tested building blocks. Each one is a separate module that
uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The countdown command

```
gokata-countdown
```

This prints `3`, `2` and `1` on separate lines, pausing one second after each,
and then prints `Go!`.

## Modules

### `gokata.sums`

```python
from gokata.sums import total, sum_all, sum_all_tails

total([1, 2, 3, 4, 5])                 # 15
sum_all([1, 2], [0, 9])                # [3, 9]
sum_all_tails([1, 2], [0, 3, 9])       # [2, 12]
sum_all_tails([], [0, 9])              # [0, 9]
```

`sum_all_tails` skips the first number of each sequence. An empty sequence
sums to 0.

### `gokata.hello`

```python
from gokata.hello import hello

hello("Chris", "")          # "Hello, Chris"
hello("", "")               # "Hello, World"
hello("Chris", "Spanish")   # "Hola, Chris"
hello("Chris", "French")    # "Bonjour, Chris"
```

The `language` argument defaults to `""`. A language the function does not
know gets the English greeting.

### `gokata.adder` and `gokata.repeat`

```python
from gokata.adder import add
from gokata.repeat import repeat

add(5, 2)         # 7
repeat("c", 4)    # "cccc"
repeat("b", 0)    # ""
```

A negative count gives an empty string.

### `gokata.greet`

`greet` writes to a text stream you pass in rather than printing, so it is
easy to test:

```python
import io
from gokata.greet import greet

buffer = io.StringIO()
greet(buffer, "Charlie")
buffer.getvalue()   # "hello Charlie"
```

### `gokata.dictionary`

`Dictionary` is a `dict` subclass with checked operations:

```python
from gokata.dictionary import Dictionary, WordNotFoundError

words = Dictionary()
words.add("test", "this is a test")
words.search("test")                     # "this is a test"
words.update("test", "a new definition")
words.delete("test")

try:
    words.search("test")
except WordNotFoundError as err:
    print(err)   # could not find the word you are looking for
```

`search` raises `WordNotFoundError` for a missing word. `add` raises
`WordExistsError` if the word is already present. `update` and `delete`
raise `WordDoesNotExistError` if it is missing. All three are subclasses of
`DictionaryError`.

### `gokata.wallet`

```python
from gokata.wallet import Bitcoin, InsufficientFundsError, Wallet

wallet = Wallet()
wallet.deposit(Bitcoin(20))
wallet.withdraw(Bitcoin(10))
wallet.balance             # Bitcoin(10)
str(wallet.balance)        # "10 BTC"
wallet.withdraw(Bitcoin(50))   # raises InsufficientFundsError
```

`balance` is a read-only property. A withdrawal that fails leaves the balance
as it was. `Wallet(balance=...)` sets a starting balance, which defaults to 0.

### `gokata.shapes`

```python
from gokata.shapes import Circle, Rectangle, Triangle

Rectangle(height=10.0, width=10.0).perimeter()   # 40.0
Rectangle(height=12, width=6).area()             # 72.0
Circle(radius=10).area()                         # 314.1592653589793
Triangle(base=12, height=6).area()               # 36.0
```

Every shape is a frozen dataclass and a subclass of the abstract `Shape`,
which declares `area()`.

### `gokata.countdown`

`countdown(writer, sleeper)` writes `3`, `2` and `1` to `writer`, each on its
own line, calls `sleeper.sleep()` after each number, and then writes `Go!`.
Any object with a `sleep()` method can be the sleeper (see the `Sleeper`
protocol).

- `ConfigurableSleeper(duration, sleep_func)` calls `sleep_func(duration)`.
- `SpySleeper` counts its calls in `calls`.
- `SpyCountdownOperations` records the order of writes and sleeps in `calls`
  and can serve as both writer and sleeper.
- `SpyTime.set_duration_slept` stores its argument in `duration_slept`, so it
  can be passed as the `sleep_func` of a `ConfigurableSleeper`.

```python
import io
from gokata.countdown import SpySleeper, countdown

out = io.StringIO()
spy = SpySleeper()
countdown(out, spy)
out.getvalue()   # "3\n2\n1\nGo!"
spy.calls        # 3
```

`main()` runs the countdown on standard output with one-second pauses; the
`gokata-countdown` command calls it.

### `gokata.website_checker`

`check_websites(checker, urls)` calls `checker` on every URL at once, each in
its own thread, and returns a dict that maps each URL to its result:

```python
from gokata.website_checker import check_websites

def is_up(url: str) -> bool:
    return url != "https://down.example.com"

check_websites(is_up, ["https://example.com", "https://down.example.com"])
# {"https://example.com": True, "https://down.example.com": False}
```

## What it does not do

`check_websites` makes no network requests of its own. Deciding whether a site
is up is entirely up to the `checker` function you pass in.