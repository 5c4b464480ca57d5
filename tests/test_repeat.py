from gokata.repeat import repeat


def test_repeat_more_than_once():
    assert repeat("a", 8) == "aaaaaaaa"


def test_repeat_zero_times():
    assert repeat("b", 0) == ""


def test_repeat_example():
    assert repeat("c", 4) == "cccc"


def test_repeat_negative_count():
    assert repeat("d", -2) == ""