import re
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from snaptext import LocatedString, LocationArea

from .core import UnitRegistry


REGEXP_SCALAR = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
REGEXP_SPACE = re.compile(r"\s+")


E = TypeVar('E', bound=Enum)


@dataclass
class ParserError(Exception):
  message: str
  area: LocationArea

  def __str__(self):
    return self.message

@dataclass(frozen=True)
class ParsedQuantity(Generic[E]):
  value: float
  unit: E


def parse_quantity(string: str, unit_type: type[E], registry: UnitRegistry, /) -> ParsedQuantity[E]:
  source = LocatedString(string)

  if not string.strip():
    raise ParserError("Invalid value", source.area)

  source = source.strip()

  if not (match := source.match_re(REGEXP_SCALAR)):
    raise ParserError("Invalid value", source[0].area)

  cursor = match.span()[1]
  value = float(match.group().value)

  if cursor >= len(source):
    raise ParserError("Invalid token, expected unit", source[-1].area)

  forward_value = source[cursor:]

  if (space_match := forward_value.match_re(REGEXP_SPACE)):
    forward_value = forward_value[space_match.span()[1]:]

  abbreviation = forward_value.value
  unit, found = registry.try_parse(unit_type, abbreviation)

  if not found:
    raise ParserError(f"Invalid unit '{abbreviation}'", forward_value.area)

  return ParsedQuantity(value, unit)


__all__ = [
  'ParsedQuantity',
  'ParserError',
  'parse_quantity'
]
