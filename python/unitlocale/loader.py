import functools
import tomllib
from dataclasses import dataclass
from enum import Enum
from importlib.resources import files
from typing import IO, Mapping, TypedDict, cast

from .units import UNIT_TYPES
from .util import normalize_locale


class RegistryVariantData(TypedDict):
  name: str
  abbreviations: dict[str, list[str]]

class RegistryUnitData(TypedDict):
  type: str
  variants: list[RegistryVariantData]

class RegistryData(TypedDict):
  units: list[RegistryUnitData]


@dataclass(frozen=True, slots=True)
class LocaleAbbreviations:
  locale: str
  abbreviations: tuple[str, ...]

@dataclass(frozen=True, slots=True)
class VariantLocalization:
  value: int
  locales: tuple[LocaleAbbreviations, ...]

  def find(self, locale: str, /):
    return next((item for item in self.locales if item.locale == locale), None)

@dataclass(frozen=True, slots=True)
class UnitLocalization:
  unit_type: type[Enum]
  variants: tuple[VariantLocalization, ...]


def load(file: IO[bytes], /, unit_types: Mapping[str, type[Enum]] = UNIT_TYPES):
  data = cast(RegistryData, tomllib.load(file))
  localizations = list[UnitLocalization]()
  seen_unit_types = set[type[Enum]]()

  for data_unit in data.get('units', list()):
    if not (unit_type := unit_types.get(data_unit['type'])):
      raise ValueError(f"Invalid unit type: {data_unit['type']}")

    if unit_type in seen_unit_types:
      raise ValueError(f"Duplicate unit type: {data_unit['type']}")

    seen_unit_types.add(unit_type)
    variants = list[VariantLocalization]()

    for data_variant in data_unit.get('variants', list()):
      if not data_variant['name'] in unit_type.__members__:
        raise ValueError(f"Invalid unit name: {data_unit['type']}.{data_variant['name']}")

      unit = unit_type[data_variant['name']]

      variants.append(VariantLocalization(
        value=int(unit.value),
        locales=tuple(
          LocaleAbbreviations(normalize_locale(locale), tuple(abbreviations))
            for locale, abbreviations in data_variant.get('abbreviations', dict()).items()
        )
      ))

    localizations.append(UnitLocalization(unit_type, tuple(variants)))

  return tuple(localizations)


@functools.cache
def load_default():
  with files("unitlocale").joinpath("registry.toml").open("rb") as file:
    return load(file)


__all__ = [
  'LocaleAbbreviations',
  'UnitLocalization',
  'VariantLocalization',
  'load',
  'load_default'
]
