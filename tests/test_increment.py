import pytest

from flywheel_common.increment import Counter, IntKind, wrapping_add


def test_u8_bounds_fixed_by_width():
    assert wrapping_add(255, 1, IntKind.U8) == 0
    assert wrapping_add(0, -1, IntKind.U8) == 255
    assert IntKind.U8.wrap(300) == 44


def test_i8_bounds_fixed_by_width():
    assert wrapping_add(127, 1, IntKind.I8) == -128
    assert wrapping_add(-128, -1, IntKind.I8) == 127
    assert IntKind.I8.wrap(200) == -56


@pytest.mark.parametrize("kind", list(IntKind))
def test_bounds_match_width(kind):
    assert wrapping_add(kind.min, (1 << kind.bits) - 1, kind) == kind.max


@pytest.mark.parametrize("kind", list(IntKind))
def test_wrap_at_max_goes_to_min(kind):
    assert wrapping_add(kind.max, 1, kind) == kind.min


@pytest.mark.parametrize("kind", list(IntKind))
def test_wrap_below_min_goes_to_max(kind):
    assert wrapping_add(kind.min, -1, kind) == kind.max


@pytest.mark.parametrize("kind", list(IntKind))
def test_wrap_identity_in_range(kind):
    values = [kind.min, kind.max, 0]
    assert [wrapping_add(value, 0, kind) for value in values] == values


@pytest.mark.parametrize("kind", list(IntKind))
def test_wrap_is_periodic(kind):
    modulus = 1 << kind.bits
    assert wrapping_add(kind.max, modulus, kind) == kind.max
    assert wrapping_add(kind.min, -modulus, kind) == kind.min


def test_increment_returns_old_value():
    c = Counter(41, IntKind.U32)
    assert c.increment() == 41
    assert c.value == 41 + 1


def test_increment_sequence_is_consecutive():
    c = Counter(0, IntKind.U16)
    seen = [c.increment() for _ in range(5)]
    assert seen == list(range(5))
    assert c.value == len(seen)


@pytest.mark.parametrize("kind", list(IntKind))
def test_increment_wraps_at_max(kind):
    c = Counter(kind.max, kind)
    assert c.increment() == kind.max
    assert c.value == kind.min


def test_counter_default_kind_and_int_conversion():
    c = Counter()
    assert c.kind is IntKind.I32
    c.increment()
    assert int(c) == c.value


@pytest.mark.parametrize(
    "value, kind",
    [(-1, IntKind.U8), (IntKind.I16.max + 1, IntKind.I16), (IntKind.U64.max + 1, IntKind.USIZE)],
)
def test_counter_rejects_out_of_range(value, kind):
    with pytest.raises(ValueError):
        Counter(value, kind)