import pytest

from conftest import WidgetUnit, assert_inverse_maps, load_feed
from unitlocale import loader
from unitlocale.core import RegistryCache, UnitRegistry
from unitlocale.units import UNIT_TYPES, LengthUnit


WIDGET_FEED = """
[[units]]
type = "WidgetUnit"

[[units.variants]]
name = "Sprocket"
abbreviations = { "en_us" = ["spr", "sprocket"], "de-DE" = ["Kr"] }

[[units.variants]]
name = "Cog"
abbreviations = { "de-DE" = ["Zr"] }
"""


@pytest.fixture()
def widget_feed():
  return load_feed(WIDGET_FEED, { "WidgetUnit": WidgetUnit })


class TestLoad:
  def test_load(self, widget_feed):
    assert len(widget_feed) == 1

    localization = widget_feed[0]

    assert localization.unit_type is WidgetUnit
    assert [variant.value for variant in localization.variants] == [1, 2]

  def test_locales_are_normalized(self, widget_feed):
    sprocket = widget_feed[0].variants[0]

    assert sprocket.find("en-US").abbreviations == ("spr", "sprocket")
    assert sprocket.find("de-DE").abbreviations == ("Kr",)
    assert sprocket.find("ru-RU") is None

  def test_invalid_unit_type(self):
    with pytest.raises(ValueError, match="Invalid unit type"):
      load_feed(WIDGET_FEED)

  def test_invalid_unit_name(self):
    with pytest.raises(ValueError, match="Invalid unit name"):
      load_feed("""
[[units]]
type = "LengthUnit"

[[units.variants]]
name = "Parsec"
abbreviations = { "en-US" = ["pc"] }
""")

  def test_duplicate_unit_type(self):
    with pytest.raises(ValueError, match="Duplicate unit type"):
      load_feed("""
[[units]]
type = "LengthUnit"

[[units]]
type = "LengthUnit"
""")

  def test_empty_feed(self):
    assert load_feed("") == ()

  def test_load_default(self):
    localizations = loader.load_default()

    assert localizations is loader.load_default()
    assert {localization.unit_type for localization in localizations} == set(UNIT_TYPES.values())


class TestRegistryLoading:
  def test_exact_locale(self, widget_feed):
    registry = UnitRegistry("de-DE", cache=RegistryCache(widget_feed), localizations=widget_feed)

    assert registry.get_all_abbreviations(WidgetUnit.Sprocket) == ["Kr"]
    assert registry.parse(WidgetUnit, "Zr") is WidgetUnit.Cog
    assert_inverse_maps(registry)

  def test_default_locale_fallback_and_skip(self, widget_feed):
    cache = RegistryCache(widget_feed)
    registry = cache.get("fr-FR")

    assert registry.get_all_abbreviations(WidgetUnit.Sprocket) == ["spr", "sprocket"]
    assert WidgetUnit.Cog not in registry._abbreviations_by_unit[WidgetUnit]
    assert registry.get_all_abbreviations(WidgetUnit.Cog) == ["(no abbreviation for WidgetUnit.Cog)"]

  def test_unknown_types_are_unsupported(self, widget_feed):
    cache = RegistryCache(widget_feed)

    assert cache.get().try_parse(LengthUnit, "m") == (LengthUnit.Undefined, False)
