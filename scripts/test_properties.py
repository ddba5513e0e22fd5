"""
Randomized checks of the laws `UString` and `UStr` must obey, run against
Python's own `str` as the baseline.

Seeds come from `test_helpers.get_seed_values()`; pin one for a reproducible
run with `USTRING_TESTS_SEED=<int>`.
"""

from random import choice, randint, seed

import pytest

from test_helpers import ASTRAL_ALPHABET, get_random_chars, get_random_string, get_seed_values

from ustring import UString, UStr

SEED_VALUES = get_seed_values()


def check_identical(native: str, big):
    """Every read-only query must agree with `str` for the same content."""
    assert len(big) == len(native)
    assert str(big) == native
    assert big == native
    assert hash(big) == hash(native)
    assert list(big) == list(native)
    for i in range(len(native)):
        assert big[i] == native[i]


@pytest.mark.parametrize("length", list(range(0, 40)) + [1000])
@pytest.mark.parametrize("seed_value", SEED_VALUES)
def test_fuzzy_round_trip(length: int, seed_value: int):
    seed(seed_value)
    native = get_random_string(length=length)
    big = UString(native)
    check_identical(native, big)
    check_identical(native, big.as_ustr())
    assert str(UString.from_chars(native)) == native
    assert str(UString.from_codepoints(map(ord, native))) == native


@pytest.mark.parametrize("length", range(0, 30))
@pytest.mark.parametrize("seed_value", SEED_VALUES)
def test_fuzzy_slice_concatenation(length: int, seed_value: int):
    seed(seed_value)
    native = get_random_string(length=length)
    big = UString(native)
    for split in range(len(native) + 1):
        head, tail = big.slice(0, split), big.slice(split, len(big))
        assert head == native[:split]
        assert tail == native[split:]
        assert head + tail == big
        assert str(head) + str(tail) == native


@pytest.mark.parametrize("length", range(0, 30))
@pytest.mark.parametrize("seed_value", SEED_VALUES)
def test_fuzzy_sub_slices(length: int, seed_value: int):
    seed(seed_value)
    native = get_random_string(length=length)
    view = UString(native).as_ustr()
    for _ in range(20):
        start = randint(0, len(native))
        stop = randint(start, len(native))
        narrowed = view[start:stop]
        check_identical(native[start:stop], narrowed)

        # Narrowing a narrowed view stays relative to it
        inner_start = randint(0, len(narrowed))
        assert narrowed[inner_start:] == native[start + inner_start : stop]


@pytest.mark.parametrize("length", range(0, 20))
@pytest.mark.parametrize("seed_value", SEED_VALUES)
def test_fuzzy_split_first(length: int, seed_value: int):
    seed(seed_value)
    view = UString(get_random_string(length=length)).as_ustr()
    while len(view):
        first, rest = view.split_first()
        assert first == view[0]
        assert rest == view.slice(1, len(view))
        view = rest
    assert view.split_first() is None


@pytest.mark.parametrize("length", range(0, 20))
@pytest.mark.parametrize("seed_value", SEED_VALUES)
def test_fuzzy_prefixes_and_suffixes(length: int, seed_value: int):
    seed(seed_value)
    native = get_random_string(length=length, variability=3)
    view = UString(native).as_ustr()
    assert view.startswith(view)
    assert view.endswith(view)
    for _ in range(10):
        other = get_random_string(length=randint(0, 4), variability=3)
        assert view.startswith(other) == native.startswith(other)
        assert view.endswith(other) == native.endswith(other)
        assert view.startswith(UString(other).as_ustr()) == native.startswith(other)
        assert (other in view) == (other in native)
        assert view.find(other) == native.find(other)


@pytest.mark.parametrize("seed_value", SEED_VALUES)
def test_fuzzy_equality_and_hashing(seed_value: int):
    seed(seed_value)
    natives = [get_random_string(length=randint(0, 4), variability=2) for _ in range(100)]
    owned = [UString(native) for native in natives]
    for a, native_a in zip(owned, natives):
        b_index = randint(0, len(natives) - 1)
        b, native_b = owned[b_index], natives[b_index]
        assert (a == b) == (native_a == native_b)
        assert (a < b) == (native_a < native_b)
        if a == b:
            assert hash(a) == hash(b)
            assert hash(a.as_ustr()) == hash(b[:])
    assert [str(x) for x in sorted(owned)] == sorted(natives)


@pytest.mark.parametrize("seed_value", SEED_VALUES)
def test_fuzzy_append_and_pop(seed_value: int):
    seed(seed_value)
    native = list(get_random_string(length=randint(0, 50)))
    big = UString.from_chars(native)

    for char in get_random_chars(200, alphabet=ASTRAL_ALPHABET + "xyz"):
        if native and choice((True, False)):
            position = randint(-len(native), len(native) - 1)
            assert big.pop(position) == native.pop(position)
        else:
            big.append(char)
            native.append(char)
            assert big[len(big) - 1] == char
        assert len(big) == len(native)

    # Failed removals leave the length untouched
    length_before = len(big)
    with pytest.raises(IndexError):
        big.pop(length_before)
    assert len(big) == length_before
    assert str(big) == "".join(native)


@pytest.mark.parametrize("length", [0, 1, 2, 100])
@pytest.mark.parametrize("seed_value", SEED_VALUES)
def test_fuzzy_drain(length: int, seed_value: int):
    seed(seed_value)
    native = get_random_string(length=length)
    big = UString(native)
    assert "".join(big.drain()) == native
    assert len(big) == 0
    assert isinstance(big.as_ustr(), UStr)
