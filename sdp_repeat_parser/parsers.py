import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Mapping, TypeVar


A = TypeVar("A", covariant=True)


@dataclass(frozen=True)
class OpaqueDescription:
    message: str


Description = OpaqueDescription


class ParseError(ABC, Exception):
    @abstractmethod
    def describe(self) -> str:
        raise NotImplementedError


@dataclass
class SimpleParseError(ParseError):
    message: str

    def __post_init__(self):
        super().__init__(self.message)

    def describe(self) -> str:
        return self.message


@dataclass
class UnitError(ParseError):
    unit: str

    def __post_init__(self):
        super().__init__(self.unit)

    def describe(self) -> str:
        return "Unknown time unit: {0!r}".format(self.unit)


class Parser(ABC, Generic[A]):
    @abstractmethod
    def description(self) -> Description:
        raise NotImplementedError

    @abstractmethod
    def parse(self, source: str, /) -> tuple[str, A]:
        raise NotImplementedError

    def matches(self, source: str, /) -> bool:
        try:
            self.parse(source)
        except ParseError:
            return False
        else:
            return True


# int() caps digit strings at sys.get_int_max_str_digits(), never below 640.
_DIGIT_CHUNK = 600


def _to_int(digits: str) -> int:
    value = 0
    for start in range(0, len(digits), _DIGIT_CHUNK):
        chunk = digits[start:start + _DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


UNIT_SECONDS: Mapping[str, int] = {
    "d": 86400,
    "h": 3600,
    "m": 60,
    "s": 1,
}


@dataclass(frozen=True)
class Natural(Parser[int]):
    """Leading non-negative base-10 integer.

    No whitespace is skipped and the unconsumed tail is returned verbatim, so
    callers decide whether trailing characters are a unit suffix or garbage.
    """

    def description(self) -> Description:
        return OpaqueDescription("non-negative integer")

    def parse(self, source: str, /) -> tuple[str, int]:
        match = re.match(r"\+?([0-9]+)", source)
        if match is None:
            raise SimpleParseError("Expected a non-negative integer, got: {0!r}".format(source))
        return source[match.end():], _to_int(match[1])


@dataclass(frozen=True)
class Duration(Parser[int]):
    """A compact time value such as ``7d`` or ``25h``, expanded to seconds.

    The bare literal ``0`` is the only value accepted without a unit. When the
    token has no leading magnitude the whole token is reported as the unit.
    """

    def description(self) -> Description:
        return OpaqueDescription(
            "integer with a unit suffix ({0})".format("/".join(UNIT_SECONDS))
        )

    def parse(self, source: str, /) -> tuple[str, int]:
        if source == "0":
            return "", 0
        try:
            unit, magnitude = natural.parse(source)
        except SimpleParseError:
            raise UnitError(source) from None
        if unit not in UNIT_SECONDS:
            raise UnitError(unit)
        return "", magnitude * UNIT_SECONDS[unit]


natural = Natural()
duration = Duration()
