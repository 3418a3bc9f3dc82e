# seasonip/season.py

from __future__ import annotations
from typing import Union

from seasonip.utils.logging import get_logger

log = get_logger(__name__)


class Season(int):
    """
    Integer-backed season flags.

    Any integer is a valid Season. Named bits can be combined with ``|``;
    values without a name render as their decimal integer.
    """

    # Bound below the class body, once Season can be instantiated.
    Winter: Season
    Spring: Season
    Summer: Season
    Fall: Season
    WinterOrSpring: Season

    # value -> name, in declaration order
    _names: dict[int, str] = {}

    def __repr__(self) -> str:
        return f"Season({int(self)})"

    def __str__(self) -> str:
        return _format_flags(int(self))

    def __format__(self, spec: str) -> str:
        # Specs apply to the rendered name, e.g. f"{Season.Fall:>8}"
        return format(str(self), spec)

    def __or__(self, other: Union[int, "Season"]) -> "Season":
        return Season(int(self) | int(other))

    __ror__ = __or__

    def __and__(self, other: Union[int, "Season"]) -> "Season":
        return Season(int(self) & int(other))

    __rand__ = __and__


Season.Winter = Season(1)
Season.Spring = Season(2)
Season.Summer = Season(4)
Season.Fall = Season(8)
Season.WinterOrSpring = Season(Season.Winter | Season.Spring)

Season._names = {
    1: "Winter",
    2: "Spring",
    4: "Summer",
    8: "Fall",
    3: "WinterOrSpring",
}

_MOODS = {
    int(Season.Summer): "Let's go to the beach",
    int(Season.Winter): "Oh the weather outside is frightful",
    int(Season.Spring): "Watch out for allergies",
    int(Season.Fall): "Not too hot, not too cold",
}


def _format_flags(value: int) -> str:
    # Exact member wins, then a full cover by named bits, else the bare number.
    name = Season._names.get(value)
    if name is not None:
        return name
    if value <= 0:
        return str(value)

    remaining = value
    picked = []
    for member in sorted(Season._names, reverse=True):
        if remaining & member == member:
            picked.append(member)
            remaining &= ~member
        if remaining == 0:
            break

    if remaining != 0:
        return str(value)
    return ", ".join(Season._names[m] for m in sorted(picked))


def to_int(season: Season) -> int:
    return int(season)


def from_int(n: int) -> Season:
    """Never fails; unnamed bit patterns are kept verbatim."""
    season = Season(n)
    if n not in Season._names:
        log.debug("No named season for %d, rendering as %s", n, season)
    return season


def describe(season: Season) -> str:
    """
    One display line for a season.

    Only the four singular seasons have a line of their own. Everything
    else, WinterOrSpring included, gets the "never heard of" fallback.
    """
    mood = _MOODS.get(int(season))
    if mood is not None:
        return mood
    return f"I've never heard of {Season(season)}"


def format_season(season: Season) -> str:
    return f"It is {Season(season)}"
