from enum import IntEnum


class AngleUnit(IntEnum):
  Undefined = 0
  Arcminute = 1
  Arcsecond = 2
  Degree = 3
  Gradian = 4
  Radian = 5


class DurationUnit(IntEnum):
  Undefined = 0
  Day = 1
  Hour = 2
  Millisecond = 3
  Minute = 4
  Month = 5
  Second = 6
  Week = 7
  Year = 8


class LengthUnit(IntEnum):
  Undefined = 0
  Centimeter = 1
  Foot = 2
  Inch = 3
  Kilometer = 4
  Meter = 5
  Microinch = 6
  Mile = 7
  Millimeter = 8
  NauticalMile = 9
  Yard = 10


class MassUnit(IntEnum):
  Undefined = 0
  Gram = 1
  Kilogram = 2
  Milligram = 3
  Ounce = 4
  Pound = 5
  Stone = 6
  Tonne = 7


class SpeedUnit(IntEnum):
  Undefined = 0
  FootPerSecond = 1
  KilometerPerHour = 2
  Knot = 3
  MeterPerSecond = 4
  MilePerHour = 5


class TemperatureUnit(IntEnum):
  Undefined = 0
  DegreeCelsius = 1
  DegreeFahrenheit = 2
  Kelvin = 3


class VolumeUnit(IntEnum):
  Undefined = 0
  CubicMeter = 1
  Liter = 2
  Milliliter = 3
  UsGallon = 4
  UsTablespoon = 5
  UsTeaspoon = 6


UNIT_TYPES: dict[str, type[IntEnum]] = {
  unit_type.__name__: unit_type for unit_type in [
    AngleUnit,
    DurationUnit,
    LengthUnit,
    MassUnit,
    SpeedUnit,
    TemperatureUnit,
    VolumeUnit
  ]
}


__all__ = [
  'AngleUnit',
  'DurationUnit',
  'LengthUnit',
  'MassUnit',
  'SpeedUnit',
  'TemperatureUnit',
  'UNIT_TYPES',
  'VolumeUnit'
]
