#
# ScubaGas - breathing gas blending library.
#
# Copyright (C) 2014 by ScubaGas Team
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

"""
Unit systems.

ScubaGas supports two unit systems

imperial
    Pressure in psi, depth in feet, cylinder internal volume in cubic
    inches, nominal gas volume (capacity) in cubic feet, absolute
    temperature in Rankine.
metric
    Pressure in bar, depth in meters, internal volume and capacity in
    liters, absolute temperature in Kelvin.

The unit system classes provide physical constants used by equations of
state and conversions of values between the unit systems. For example,
the Van der Waals constant :math:`a` of oxygen in imperial units is

    >>> from scubagas.units import Imperial, METRIC
    >>> round(Imperial().convert_a(1.382, METRIC), 5)
    0.02499
"""

from .error import ConfigError
from . import const

IMPERIAL = 0
METRIC = 1


def _convert(value, m2i, from_system, to_system):
    """
    Convert value between unit systems.

    :param value: Value to convert.
    :param m2i: Metric to imperial unit multiplier.
    :param from_system: Unit system of the value.
    :param to_system: Target unit system.
    """
    if from_system == to_system:
        return value
    elif from_system == IMPERIAL:
        return value / m2i
    else:
        return value * m2i



class Units(object):
    """
    Base class for a unit system.

    :var SYSTEM: Unit system identifier.
    :var PRESSURE_ATM: Atmospheric pressure at sea level.
    :var GAS_CONSTANT: Universal gas constant.
    :var ABS_TEMP_AMBIENT: Ambient absolute temperature.
    :var REL_TO_ABS_TEMP: Relative to absolute temperature offset.
    :var DEPTH_PER_ATM: Depth of water column equal to one atmosphere.
    :var CAPACITY_PER_VOLUME: Capacity units per internal volume unit.
    """
    SYSTEM = None
    PRESSURE_ATM = None
    GAS_CONSTANT = None
    ABS_TEMP_AMBIENT = None
    REL_TO_ABS_TEMP = None
    DEPTH_PER_ATM = None
    CAPACITY_PER_VOLUME = None

    def convert_pressure(self, pressure, from_system):
        """
        Convert pressure into this unit system.

        :param pressure: Pressure value.
        :param from_system: Unit system of the pressure value.
        """
        return _convert(pressure, const.PRESSURE_M2I, from_system, self.SYSTEM)


    def convert_depth(self, depth, from_system):
        """
        Convert depth into this unit system.

        :param depth: Depth value.
        :param from_system: Unit system of the depth value.
        """
        return _convert(depth, const.DEPTH_M2I, from_system, self.SYSTEM)


    def convert_volume(self, volume, from_system):
        """
        Convert internal volume into this unit system.

        :param volume: Internal volume value.
        :param from_system: Unit system of the volume value.
        """
        return _convert(volume, const.VOLUME_M2I, from_system, self.SYSTEM)


    def convert_capacity(self, capacity, from_system):
        """
        Convert capacity (nominal gas volume) into this unit system.

        :param capacity: Capacity value.
        :param from_system: Unit system of the capacity value.
        """
        return _convert(capacity, const.CAPACITY_M2I, from_system, self.SYSTEM)


    def convert_abs_temp(self, temperature, from_system):
        """
        Convert absolute temperature into this unit system.

        :param temperature: Absolute temperature value.
        :param from_system: Unit system of the temperature value.
        """
        return _convert(temperature, const.ABS_TEMP_M2I, from_system, self.SYSTEM)


    def convert_a(self, a, from_system):
        """
        Convert Van der Waals constant :math:`a` into this unit system.

        :param a: Van der Waals constant :math:`a`.
        :param from_system: Unit system of the constant.
        """
        return _convert(a, const.A_M2I, from_system, self.SYSTEM)


    def to_abs_temp(self, temperature):
        """
        Convert relative temperature (Fahrenheit or Celsius) into absolute
        temperature.

        :param temperature: Relative temperature.
        """
        return temperature + self.REL_TO_ABS_TEMP


    def to_rel_temp(self, temperature):
        """
        Convert absolute temperature into relative temperature.

        :param temperature: Absolute temperature.
        """
        return temperature - self.REL_TO_ABS_TEMP


    def volume_to_capacity(self, volume):
        """
        Convert internal volume of a cylinder into capacity units.

        :param volume: Internal volume of a cylinder.
        """
        return volume * self.CAPACITY_PER_VOLUME


    def capacity_to_volume(self, capacity):
        """
        Convert capacity units into internal volume units.

        :param capacity: Volume in capacity units.
        """
        return capacity / self.CAPACITY_PER_VOLUME


    def __repr__(self):
        return '<{}>'.format(self.__class__.__name__)



class Imperial(Units):
    SYSTEM = IMPERIAL
    PRESSURE_ATM = 14.7
    GAS_CONSTANT = 2.3658e-2
    ABS_TEMP_AMBIENT = 530
    REL_TO_ABS_TEMP = 459.67
    DEPTH_PER_ATM = 33
    CAPACITY_PER_VOLUME = 1 / 1728



class Metric(Units):
    SYSTEM = METRIC
    PRESSURE_ATM = 1.013
    GAS_CONSTANT = 8.3145e-2
    ABS_TEMP_AMBIENT = 294
    REL_TO_ABS_TEMP = 273.15
    DEPTH_PER_ATM = 10
    CAPACITY_PER_VOLUME = 1



UNIT_SYSTEMS = {
    IMPERIAL: Imperial,
    METRIC: Metric,
}


def units(system):
    """
    Create unit system object.

    :param system: Unit system identifier, i.e. `IMPERIAL` or `METRIC`.
    """
    if system not in UNIT_SYSTEMS:
        raise ConfigError('Unknown unit system {}'.format(system))
    return UNIT_SYSTEMS[system]()


# vim: sw=4:et:ai
