import io
from unittest import mock

from gokata.countdown import (
    SLEEP,
    WRITE,
    ConfigurableSleeper,
    SpyCountdownOperations,
    SpySleeper,
    SpyTime,
    countdown,
    main,
)


def test_countdown_from_three():
    buffer = io.StringIO()
    spy_sleeper = SpySleeper()
    countdown(buffer, spy_sleeper)
    assert buffer.getvalue() == "3\n2\n1\nGo!"
    assert spy_sleeper.calls == 3


def test_sleep_after_every_print():
    spy = SpyCountdownOperations()
    countdown(spy, spy)
    assert spy.calls == [WRITE, SLEEP, WRITE, SLEEP, WRITE, SLEEP, WRITE]


def test_configurable_sleeper():
    spy_time = SpyTime()
    sleeper = ConfigurableSleeper(5.0, spy_time.set_duration_slept)
    sleeper.sleep()
    assert spy_time.duration_slept == 5.0


def test_spy_operations_write_reports_length():
    spy = SpyCountdownOperations()
    assert spy.write("abc") == 3
    assert spy.calls == [WRITE]


def test_main_counts_down_on_stdout(capsys):
    with mock.patch("time.sleep") as fake_sleep:
        assert main([]) == 0
    assert capsys.readouterr().out == "3\n2\n1\nGo!"
    assert fake_sleep.call_args_list == [mock.call(1.0)] * 3