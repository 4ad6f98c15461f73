import pytest

from iterkit.mapping import (
    EnumYield,
    enumerated,
    filterfalse,
    imap,
    starmap,
    unique_everseen,
    unique_justseen,
    zipped,
)


def _char_range(stop):
    """Yield characters from 'a' up to, but not including, ``stop``."""
    return (chr(c) for c in range(ord("a"), ord(stop)))


def _int_char_pairs(stop_int, stop_char):
    return ((i, chr(ord("a") + i)) for i in range(min(stop_int, ord(stop_char) - ord("a"))))


# enumerated


def test_enumerate_basic():
    assert list(enumerated("abc")) == [(0, "a"), (1, "b"), (2, "c")]


@pytest.mark.parametrize("source", ["abc", ("a", "b", "c"), ["a", "b", "c"]])
def test_enumerate_various_sources(source):
    assert list(enumerated(source)) == [(0, "a"), (1, "b"), (2, "c")]


def test_enumerate_has_index_element_first_second():
    item = next(iter(enumerated("abc")))
    assert item.index == item.first == 0
    assert item.element is item.second
    assert item.element == "a"


def test_enumerate_empty():
    assert list(enumerated("")) == []


def test_enumerate_second_item():
    it = enumerated("amz")
    next(it)
    assert next(it).first == 1


def test_enumerate_unpacking():
    item = next(iter(enumerated("amz")))
    assert len(item) == 2
    assert item[0] == item.first
    pairs = [(i, c) for i, c in enumerated("xyz")]
    assert pairs == [(0, "x"), (1, "y"), (2, "z")]


def test_enumerate_with_start():
    assert list(enumerated("hey", 5)) == [(5, "h"), (6, "e"), (7, "y")]


def test_enumerate_list_of_ints():
    item = next(iter(enumerated([50, 60, 70])))
    assert item.first == 0
    assert item.second == 50


def test_enumerate_index_and_element():
    result = [(p.index, p.element) for p in enumerated("ace")]
    assert result == [(0, "a"), (1, "c"), (2, "e")]


def test_enumerate_pipe():
    piped = list("abc" | enumerated)
    called = list(enumerated("abc"))
    assert piped == called == [(0, "a"), (1, "b"), (2, "c")]


def test_enumerate_pipe_with_start():
    assert list("abc" | enumerated(2)) == [(2, "a"), (3, "b"), (4, "c")]


def test_enumerate_generator_source():
    assert list(enumerated(_char_range("d"))) == [(0, "a"), (1, "b"), (2, "c")]


def test_enumerate_yields_enum_yield():
    item = next(iter(enumerated("a")))
    assert item == EnumYield(0, "a")


# starmap


def _mul(d, i):
    return d * i


def _describe(s, i, c):
    return f"{s} {i} {c}"


def _overloaded(*args):
    if len(args) == 3:
        return sum(args)
    if len(args) == 2:
        return int(args[0] + args[1])
    return args[0]


class _Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y

    def prefix(self, text):
        return f"{text}({self.x}, {self.y})"


PAIRS = [(1, 2), (3, 11), (6, 7)]


def test_starmap_function():
    assert list(starmap(_mul, PAIRS)) == [2, 33, 42]


def test_starmap_pipe():
    assert list(PAIRS | starmap(_mul)) == [2, 33, 42]


def test_starmap_lambda():
    assert list(starmap(lambda a, b: a * b, PAIRS)) == [2, 33, 42]


def test_starmap_unbound_method():
    items = [(_Point(10, 20), "a"), (_Point(6, 8), "point"), (_Point(3, 15), "pos")]
    assert list(starmap(_Point.prefix, items)) == ["a(10, 20)", "point(6, 8)", "pos(3, 15)"]


def test_starmap_overloaded_callable():
    pairs = [(1.0, 2), (3.0, 11), (6.0, 7)]
    assert list(starmap(_overloaded, pairs)) == [3, 14, 13]


def test_starmap_generator_source():
    result = list(starmap(lambda i, c: f"{i}{c}", _int_char_pairs(3, "d")))
    assert result == ["0a", "1b", "2c"]


def test_starmap_list_of_tuples():
    items = [("hey", 42, "a"), ("there", 3, "b"), ("yall", 5, "c")]
    assert list(starmap(_describe, items)) == ["hey 42 a", "there 3 b", "yall 5 c"]


def test_starmap_tuple_of_tuples():
    tup = ((10, 19, 60), (7,))
    assert list(starmap(_overloaded, tup)) == [89, 7]
    assert list(tup | starmap(_overloaded)) == [89, 7]


def test_starmap_tuple_of_mixed():
    pair = ([15, 100, 2000], (16,))
    assert list(starmap(_overloaded, pair)) == [2115, 16]


def test_starmap_empty():
    assert list(starmap(_mul, [])) == []


def test_starmap_rejects_non_iterable():
    with pytest.raises(TypeError):
        starmap(_mul, 5)


# imap and zipped


def test_imap_two_iterables():
    assert list(imap(lambda a, b: a + b, [1, 2, 3], [10, 20, 30])) == [11, 22, 33]


def test_imap_stops_at_shortest():
    assert list(imap(lambda a, b: a * b, [1, 2, 3, 4], [5, 6])) == [5, 12]


def test_imap_pipe():
    assert list([1, 2, 3] | imap(lambda a: a * a)) == [1, 4, 9]


def test_zipped_stops_at_shortest():
    assert list(zipped("abc", [1, 2])) == [("a", 1), ("b", 2)]


def test_zipped_no_iterables_is_empty():
    assert list(zipped()) == []


def test_zipped_three():
    assert list(zipped([1], "x", (True,))) == [(1, "x", True)]


# filterfalse


def test_filterfalse_predicate():
    assert list(filterfalse(lambda n: n % 2, range(7))) == [0, 2, 4, 6]


def test_filterfalse_default_truthiness():
    assert list(filterfalse([0, 1, "", 2, None])) == [0, "", None]


def test_filterfalse_pipe_with_predicate():
    assert list(range(6) | filterfalse(lambda n: n < 3)) == [3, 4, 5]


def test_filterfalse_pipe_default():
    piped = list([0, 1, 0, 5] | filterfalse)
    called = list(filterfalse([0, 1, 0, 5]))
    assert piped == called == [0, 0]


# unique_everseen


def test_unique_everseen():
    assert list(unique_everseen([1, 2, 1, 3, 2, 4])) == [1, 2, 3, 4]


def test_unique_everseen_pipe():
    piped = list("abracadabra" | unique_everseen)
    called = list(unique_everseen("abracadabra"))
    assert piped == called == ["a", "b", "r", "c", "d"]


def test_unique_everseen_unhashable():
    with pytest.raises(TypeError):
        list(unique_everseen([[1], [2]]))


# unique_justseen


def test_unique_justseen_adjacent_repeats():
    ns = [1, 1, 1, 2, 2, 3, 4, 4, 5, 6, 7, 8, 8, 8, 8, 9, 9]
    assert list(unique_justseen(ns)) == [1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_unique_justseen_some_repeats():
    ns = [1, 2, 2, 3, 4, 4, 5, 6, 6]
    assert list(unique_justseen(ns)) == [1, 2, 3, 4, 5, 6]
    assert list(ns | unique_justseen) == [1, 2, 3, 4, 5, 6]


def test_unique_justseen_generator_source():
    assert list(unique_justseen(_char_range("d"))) == ["a", "b", "c"]


def test_unique_justseen_keeps_non_adjacent_duplicates():
    ns = [1, 2, 3, 2, 1, 2, 3, 2, 1]
    assert list(unique_justseen(ns)) == ns


def test_unique_justseen_empty():
    assert list(unique_justseen([])) == []