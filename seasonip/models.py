# seasonip/models.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

OCTET_MIN = 0
OCTET_MAX = 255


class InvalidOctetRange(ValueError):
    """Raised by make_v4(..., strict=True) when an octet is outside [0, 255]."""

    def __init__(self, position: int, value: int):
        self.position = position
        self.value = value
        super().__init__(
            f"octet p{position}={value} is outside [{OCTET_MIN}, {OCTET_MAX}]"
        )


@dataclass(frozen=True)
class V4:
    p0: int  # octets are not range-checked unless built with strict=True
    p1: int
    p2: int
    p3: int

    def __str__(self) -> str:
        return f"{self.p0}.{self.p1}.{self.p2}.{self.p3}"


@dataclass(frozen=True)
class V6:
    value: str  # raw text, IPv6 syntax is not validated

    def __str__(self) -> str:
        return self.value


IpAddr = Union[V4, V6]


def make_v4(p0: int, p1: int, p2: int, p3: int, strict: bool = False) -> V4:
    """
    Build an IPv4 variant.

    Out-of-range octets are accepted as-is unless ``strict`` is set,
    in which case the first offending octet raises InvalidOctetRange.
    """
    octets = (p0, p1, p2, p3)
    if strict:
        for position, value in enumerate(octets):
            if not OCTET_MIN <= value <= OCTET_MAX:
                raise InvalidOctetRange(position, value)
    return V4(*octets)


def make_v6(value: str) -> V6:
    return V6(value)


def is_v4(addr: IpAddr) -> bool:
    return isinstance(addr, V4)


def is_v6(addr: IpAddr) -> bool:
    return isinstance(addr, V6)


def variant_tag(addr: IpAddr) -> str:
    """Return "V4" or "V6" for display; anything else is a TypeError."""
    if is_v4(addr):
        return "V4"
    if is_v6(addr):
        return "V6"
    raise TypeError(f"not an IP address variant: {addr!r}")
