"""Parser for the SDP "r=" (repeat times) field, RFC 4566 section 5.10.

The field comes in two shapes::

    r=604800 3600 0 90000
    r=7d 1h 0 25h

Both describe the same schedule. The first is the explicit form, where every
value is in seconds. The second is the compact form, where each value carries
a ``d``/``h``/``m``/``s`` suffix (a bare ``0`` is also allowed). A single
suffixed token anywhere on the line switches the whole line to the compact
form.
"""

from dataclasses import dataclass
from typing import Iterable, Literal, Optional

from sdp_repeat_parser.parsers import (
    UNIT_SECONDS,
    Description,
    OpaqueDescription,
    ParseError,
    Parser,
    UnitError,
    duration,
    natural,
)


Reason = Literal[
    "malformed_repeat",
    "no_offsets",
    "interval_nan",
    "duration_nan",
    "invalid_offset",
    "invalid_unit",
]


@dataclass(frozen=True)
class RepeatTimes:
    repeat_interval: int
    active_duration: int
    offsets: tuple[int, ...]

    def __post_init__(self):
        object.__setattr__(self, "offsets", tuple(self.offsets))
        if self.repeat_interval < 0 or self.active_duration < 0:
            raise ValueError("Interval and duration must be non-negative")
        if not self.offsets:
            raise ValueError("At least one offset is required")
        if any(offset < 0 for offset in self.offsets):
            raise ValueError("Offsets must be non-negative")


@dataclass
class RepeatTimesError(ParseError):
    reason: Reason
    token: Optional[str] = None

    def __post_init__(self):
        super().__init__(self.reason, self.token)

    def describe(self) -> str:
        if self.token is None:
            return self.reason
        return "{0}: {1!r}".format(self.reason, self.token)


@dataclass(frozen=True)
class RepeatTimesParser(Parser[RepeatTimes]):
    def description(self) -> Description:
        return OpaqueDescription(
            "interval, duration and one or more offsets, each a {0} of seconds or an {1}".format(
                natural.description().message, duration.description().message
            )
        )

    def parse(self, source: str, /) -> tuple[str, RepeatTimes]:
        tokens = source.split(" ")
        if len(tokens) < 2:
            raise RepeatTimesError("malformed_repeat")
        if len(tokens) == 2:
            raise RepeatTimesError("no_offsets")

        if is_compact(tokens):
            values = _decode_compact(tokens)
        else:
            values = _decode_explicit(tokens)
        return "", _build(values)


def is_compact(tokens: Iterable[str]) -> bool:
    return any(token.endswith(tuple(UNIT_SECONDS)) for token in tokens)


def _whole_number(token: str) -> Optional[int]:
    try:
        rest, value = natural.parse(token)
    except ParseError:
        return None
    return value if not rest else None


def _decode_explicit(tokens: list[str]) -> list[int]:
    interval_token, active_token, *offsets = tokens

    interval = _whole_number(interval_token)
    if interval is None:
        raise RepeatTimesError("interval_nan")
    active = _whole_number(active_token)
    if active is None:
        raise RepeatTimesError("duration_nan")

    values = [interval, active]

    for token in offsets:
        offset = _whole_number(token)
        if offset is None:
            raise RepeatTimesError("invalid_offset", token)
        values.append(offset)
    return values


def _decode_compact(tokens: list[str]) -> list[int]:
    values = []
    for token in tokens:
        try:
            _, value = duration.parse(token)
        except UnitError as e:
            raise RepeatTimesError("invalid_unit", e.unit) from None
        values.append(value)
    return values


def _build(values: list[int]) -> RepeatTimes:
    # parse() already rejects lines with fewer than three tokens
    if len(values) < 2:
        raise RepeatTimesError("malformed_repeat")
    interval, active, *offsets = values
    if not offsets:
        raise RepeatTimesError("no_offsets")
    return RepeatTimes(interval, active, tuple(offsets))


repeat_times = RepeatTimesParser()


def parse_repeat_times(line: str) -> RepeatTimes:
    _, result = repeat_times.parse(line)
    return result
