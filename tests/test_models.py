import dataclasses

import pytest

from seasonip.models import (
    InvalidOctetRange,
    V4,
    V6,
    is_v4,
    is_v6,
    make_v4,
    make_v6,
    variant_tag,
)


def test_v4_and_v6_tags_are_exact():
    a = make_v4(192, 168, 1, 1)
    b = make_v6("::1")
    assert is_v4(a) and not is_v6(a)
    assert is_v6(b) and not is_v4(b)
    assert variant_tag(a) == "V4"
    assert variant_tag(b) == "V6"


def test_out_of_range_octet_is_accepted_by_default():
    a = make_v4(999, 0, -1, 256)
    assert (a.p0, a.p1, a.p2, a.p3) == (999, 0, -1, 256)
    assert str(a) == "999.0.-1.256"


def test_strict_rejects_first_bad_octet():
    with pytest.raises(InvalidOctetRange) as exc:
        make_v4(10, 300, -5, 1, strict=True)
    assert exc.value.position == 1
    assert exc.value.value == 300
    assert isinstance(exc.value, ValueError)


def test_strict_accepts_bounds():
    assert make_v4(0, 255, 0, 255, strict=True) == V4(0, 255, 0, 255)


def test_values_are_immutable_and_structural():
    a = make_v4(1, 2, 3, 4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        a.p0 = 5
    assert a == V4(1, 2, 3, 4)
    assert make_v6("1.2.3.4") != a
    assert make_v6("fe80::1") == V6("fe80::1")
    assert str(make_v6("not an address")) == "not an address"


@pytest.mark.parametrize("other", [None, "::1", (1, 2, 3, 4)])
def test_variant_tag_rejects_non_variants(other):
    with pytest.raises(TypeError):
        variant_tag(other)
