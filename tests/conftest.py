import io
from enum import IntEnum

import pytest

from unitlocale import loader
from unitlocale.core import RegistryCache


class WidgetUnit(IntEnum):
  Undefined = 0
  Sprocket = 1
  Cog = 2


def load_feed(text: str, unit_types=None):
  file = io.BytesIO(text.encode("utf-8"))
  return loader.load(file) if unit_types is None else loader.load(file, unit_types)


def assert_inverse_maps(registry):
  for unit_type, abbreviations_by_unit in registry._abbreviations_by_unit.items():
    for value, abbreviations in abbreviations_by_unit.items():
      assert len(abbreviations) == len(set(abbreviations))

      for abbreviation in abbreviations:
        assert value in registry._units_by_abbreviation[unit_type][abbreviation]

  for unit_type, units_by_abbreviation in registry._units_by_abbreviation.items():
    for abbreviation, values in units_by_abbreviation.items():
      assert len(values) == len(set(values))

      for value in values:
        assert abbreviation in registry._abbreviations_by_unit[unit_type][value]


@pytest.fixture(autouse=True)
def reset_default_cache():
  RegistryCache.reset_default()
  yield
  RegistryCache.reset_default()


@pytest.fixture()
def cache():
  """Isolated cache built from the packaged data feed."""
  return RegistryCache()


@pytest.fixture()
def registry(cache):
  return cache.get()


@pytest.fixture()
def ru_registry(cache):
  return cache.get("ru-RU")


@pytest.fixture()
def nb_registry(cache):
  return cache.get("nb-NO")
