import logging
import threading
from enum import Enum
from typing import ClassVar, Iterable, Optional, Sequence, TypeVar, final

from .loader import UnitLocalization, load_default
from .util import normalize_locale


DEFAULT_LOCALE = "en-US"

# Abbreviations written directly after the value, e.g. 90°
ATTACHED_ABBREVIATIONS = {"°", "'", "\"", "′", "″"}

E = TypeVar('E', bound=Enum)

logger = logging.getLogger(__name__)


class UnsupportedUnitTypeError(LookupError):
  pass

class AmbiguousUnitParseError(ValueError):
  def __init__(self, abbreviation: str, candidates: Sequence[Enum]):
    self.abbreviation = abbreviation
    self.candidates = list(candidates)

    super().__init__(
      f"Cannot parse '{abbreviation}' since it could be either of these: "
      + ", ".join(unit.name for unit in self.candidates)
    )


def default_unit(unit_type: type[E], /) -> E:
  """
  Return the zero member of a unit type, or its first member if it has no member with value 0.
  """

  try:
    return unit_type(0)
  except ValueError:
    return next(iter(unit_type))

def unit_value(unit: Enum, /):
  if not isinstance(unit, Enum):
    raise TypeError(f"Invalid unit: {unit!r}")

  return int(unit.value)


@final
class UnitRegistry:
  """
  Bidirectional index between unit enum members and their abbreviations for a single locale.

  Both maps are kept as exact inverses of each other. Registration is additive: the first abbreviation
  registered for a unit stays its default abbreviation.
  """

  _abbreviations_by_unit: dict[type[Enum], dict[int, list[str]]]
  _units_by_abbreviation: dict[type[Enum], dict[str, list[int]]]

  def __init__(
      self,
      locale: Optional[str] = None,
      *,
      cache: Optional['RegistryCache'] = None,
      localizations: Optional[Iterable[UnitLocalization]] = None
    ):
    self.locale = normalize_locale(locale) if (locale is not None) else DEFAULT_LOCALE

    self._cache = cache
    self._lock = threading.RLock()
    self._abbreviations_by_unit = dict()
    self._units_by_abbreviation = dict()

    self._load(load_default() if (localizations is None) else localizations)

  @property
  def is_default_locale(self):
    return self.locale == DEFAULT_LOCALE

  def __repr__(self):
    return f"{self.__class__.__name__}({self.locale!r})"

  def _load(self, localizations: Iterable[UnitLocalization], /):
    mapped_count = 0
    skipped_count = 0

    for localization in localizations:
      for variant in localization.variants:
        match = variant.find(self.locale) or variant.find(DEFAULT_LOCALE)

        if match is None:
          skipped_count += 1
          continue

        self.register_value(localization.unit_type, variant.value, match.abbreviations)
        mapped_count += 1

    logger.debug(f"Loaded abbreviations of {mapped_count} units for locale {self.locale}, skipped {skipped_count}")

  def _default_registry(self):
    cache = self._cache if (self._cache is not None) else RegistryCache.get_default()
    return cache.get(DEFAULT_LOCALE)

  def _lookup_chain(self):
    yield self

    if not self.is_default_locale:
      yield self._default_registry()

  def _find_abbreviations(self, unit_type: type[Enum], value: int, /):
    with self._lock:
      abbreviations = self._abbreviations_by_unit.get(unit_type, dict()).get(value)
      return list(abbreviations) if (abbreviations is not None) else None

  def _find_values(self, unit_type: type[Enum], abbreviation: str, /):
    with self._lock:
      values = self._units_by_abbreviation.get(unit_type, dict()).get(abbreviation)
      return list(values) if (values is not None) else None


  def register(self, unit: Enum, /, *abbreviations: str):
    self.register_value(type(unit), unit_value(unit), abbreviations)

  def register_value(self, unit_type: type[Enum], value: int, abbreviations: Sequence[str], /):
    if not (isinstance(unit_type, type) and issubclass(unit_type, Enum)):
      raise TypeError(f"Unit type must be an enum type, not {unit_type!r}")

    if abbreviations is None:
      raise TypeError("Abbreviations must not be None")

    if isinstance(abbreviations, str):
      raise TypeError("Abbreviations must be a sequence of strings, not a string")

    abbreviations = list(abbreviations)

    for abbreviation in abbreviations:
      if not isinstance(abbreviation, str):
        raise TypeError(f"Invalid abbreviation: {abbreviation!r}")

    try:
      value = unit_value(unit_type(value))
    except ValueError:
      raise ValueError(f"Invalid value for unit type {unit_type.__name__}: {value!r}") from None

    if not abbreviations:
      return

    with self._lock:
      unit_abbreviations = self._abbreviations_by_unit.setdefault(unit_type, dict()).setdefault(value, list())
      abbreviation_values = self._units_by_abbreviation.setdefault(unit_type, dict())

      for abbreviation in abbreviations:
        if not abbreviation in unit_abbreviations:
          unit_abbreviations.append(abbreviation)

        values = abbreviation_values.setdefault(abbreviation, list())

        if not value in values:
          values.append(value)


  def candidates(self, unit_type: type[E], abbreviation: str, /) -> list[E]:
    values = self._find_values(unit_type, abbreviation)
    return [unit_type(value) for value in dict.fromkeys(values or list())]

  def parse(self, unit_type: type[E], abbreviation: str, /) -> E:
    with self._lock:
      if not unit_type in self._units_by_abbreviation:
        raise UnsupportedUnitTypeError(
          f"No abbreviations defined for unit type {unit_type.__name__} for locale {self.locale}"
        )

      units = self.candidates(unit_type, abbreviation)

    match units:
      case [unit]:
        return unit
      case []:
        return default_unit(unit_type)
      case _:
        raise AmbiguousUnitParseError(abbreviation, units)

  def try_parse(self, unit_type: type[E], abbreviation: str, /) -> tuple[E, bool]:
    """
    Parse an abbreviation without raising, falling back once to the default locale.

    The first registry of the chain that knows the abbreviation decides the result, so an abbreviation which is
    ambiguous in this locale is reported as not found even if the default locale could resolve it.
    """

    for registry in self._lookup_chain():
      if (values := registry._find_values(unit_type, abbreviation)) is None:
        continue

      if len(values) == 1:
        return unit_type(values[0]), True

      return default_unit(unit_type), False

    return default_unit(unit_type), False

  def get_all_abbreviations(self, unit: Enum, /):
    unit_type = type(unit)
    value = unit_value(unit)

    for registry in self._lookup_chain():
      if (abbreviations := registry._find_abbreviations(unit_type, value)) is not None:
        return abbreviations

    return [f"(no abbreviation for {unit_type.__name__}.{unit.name})"]

  def get_default_abbreviation(self, unit: Enum, /):
    return self.get_all_abbreviations(unit)[0]

  def format(self, value: float, unit: Enum, /, *, precision: Optional[int] = None):
    abbreviation = self.get_default_abbreviation(unit)
    output = format(value, f".{precision}f" if (precision is not None) else "")

    if not abbreviation in ATTACHED_ABBREVIATIONS:
      output += " "

    return output + abbreviation

  def serialize(self):
    with self._lock:
      return {
        "locale": self.locale,
        "units": {
          unit_type.__name__: {
            unit_type(value).name: list(abbreviations) for value, abbreviations in abbreviations_by_unit.items()
          } for unit_type, abbreviations_by_unit in self._abbreviations_by_unit.items()
        }
      }


@final
class RegistryCache:
  """
  Per-locale cache of unit registries.

  Registries built by a cache share its data feed and resolve their default-locale fallback through it.
  """

  _default: ClassVar[Optional['RegistryCache']] = None
  _default_lock = threading.Lock()

  def __init__(self, localizations: Optional[Iterable[UnitLocalization]] = None):
    self._localizations = tuple(localizations) if (localizations is not None) else None
    self._lock = threading.Lock()
    self._registries = dict[str, UnitRegistry]()

  def __contains__(self, locale: str, /):
    with self._lock:
      return normalize_locale(locale) in self._registries

  def __len__(self):
    with self._lock:
      return len(self._registries)

  def __repr__(self):
    with self._lock:
      locales = sorted(self._registries.keys())

    return f"{self.__class__.__name__}({locales!r})"

  def clear(self):
    with self._lock:
      self._registries.clear()

    logger.debug("Cleared unit registry cache")

  def get(self, locale: Optional[str] = None, /):
    locale = normalize_locale(locale) if (locale is not None) else DEFAULT_LOCALE

    with self._lock:
      if not locale in self._registries:
        logger.debug(f"Creating unit registry for locale {locale}")
        self._registries[locale] = UnitRegistry(locale, cache=self, localizations=self._localizations)

      return self._registries[locale]


  @classmethod
  def get_default(cls):
    with cls._default_lock:
      if cls._default is None:
        cls._default = cls()

      return cls._default

  @classmethod
  def reset_default(cls):
    with cls._default_lock:
      cls._default = None


__all__ = [
  'AmbiguousUnitParseError',
  'DEFAULT_LOCALE',
  'RegistryCache',
  'UnitRegistry',
  'UnsupportedUnitTypeError',
  'default_unit'
]
