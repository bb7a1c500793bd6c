from enum import Enum
from typing import Optional, TypeVar

from .core import (DEFAULT_LOCALE, AmbiguousUnitParseError, RegistryCache,
                   UnitRegistry, UnsupportedUnitTypeError, default_unit)
from .parser import ParsedQuantity, ParserError
from .parser import parse_quantity as _parse_quantity
from .units import (UNIT_TYPES, AngleUnit, DurationUnit, LengthUnit, MassUnit,
                    SpeedUnit, TemperatureUnit, VolumeUnit)


E = TypeVar('E', bound=Enum)


def get_registry(locale: Optional[str] = None, /):
  return RegistryCache.get_default().get(locale)

def clear_cache():
  RegistryCache.get_default().clear()


def parse(unit_type: type[E], abbreviation: str, /, locale: Optional[str] = None) -> E:
  return get_registry(locale).parse(unit_type, abbreviation)

def try_parse(unit_type: type[E], abbreviation: str, /, locale: Optional[str] = None) -> tuple[E, bool]:
  return get_registry(locale).try_parse(unit_type, abbreviation)

def parse_quantity(string: str, unit_type: type[E], /, locale: Optional[str] = None) -> ParsedQuantity[E]:
  return _parse_quantity(string, unit_type, get_registry(locale))

def get_all_abbreviations(unit: Enum, /, locale: Optional[str] = None):
  return get_registry(locale).get_all_abbreviations(unit)

def get_default_abbreviation(unit: Enum, /, locale: Optional[str] = None):
  return get_registry(locale).get_default_abbreviation(unit)

def register(unit: Enum, /, *abbreviations: str, locale: Optional[str] = None):
  get_registry(locale).register(unit, *abbreviations)


__all__ = [
  'AmbiguousUnitParseError',
  'AngleUnit',
  'DEFAULT_LOCALE',
  'DurationUnit',
  'LengthUnit',
  'MassUnit',
  'ParsedQuantity',
  'ParserError',
  'RegistryCache',
  'SpeedUnit',
  'TemperatureUnit',
  'UNIT_TYPES',
  'UnitRegistry',
  'UnsupportedUnitTypeError',
  'VolumeUnit',
  'clear_cache',
  'default_unit',
  'get_all_abbreviations',
  'get_default_abbreviation',
  'get_registry',
  'parse',
  'parse_quantity',
  'register',
  'try_parse'
]
