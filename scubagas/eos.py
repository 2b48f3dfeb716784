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
Equations of state of gas in a cylinder.

The amount of gas in a cylinder is expressed as capacity - nominal
volume of the gas at atmospheric pressure. ScubaGas converts between
pressure of gas in a cylinder and capacity using one of two equations of
state

ideal gas law
    The capacity is proportional to the pressure.
Van der Waals equation
    Real gas equation of state correcting ideal gas law with
    intermolecular attraction (constant :math:`a`) and volume of gas
    molecules (constant :math:`b`).

.. _eq-vdw:

Van der Waals Equation
----------------------
The Van der Waals equation is

    .. math::

        P = \\frac{RT}{v - b} - \\frac{a}{v^2}

where :math:`v` is molar volume of gas. Given pressure :math:`P`, the
molar volume is root of the cubic polynomial

    .. math::

        P v^3 - (P b + R T) v^2 + a v - a b = 0

The root is found with Newton-Raphson method seeded with ideal gas
solution :math:`v_0 = RT / P`. Once molar volume is known, capacity at
atmospheric pressure :math:`P_a` of a cylinder with internal volume
:math:`V` is calculated with ideal gas law

    .. math::

        V_a = \\frac{V R T}{P_a v}

The Newton-Raphson search tolerance is derived with first order
uncertainty propagation, so capacity is accurate to 0.05 capacity units

    .. math::

        \\Delta v < \\frac{P_a R T}{20 P^2 V}

The inverse conversion, capacity to pressure, needs no search. Molar
volume is :math:`v = V R T / (P_a V_a)` and pressure is given by Van der
Waals equation directly.
"""

import logging

from .error import ConfigError
from .ft import newton_find
from .units import METRIC
from . import const

logger = logging.getLogger(__name__)


class State(object):
    """
    Equation of state enumeration.

    IDEAL_GAS
        Ideal gas law.
    VAN_DER_WAALS
        Van der Waals real gas equation.
    """
    IDEAL_GAS = 'ideal_gas'
    VAN_DER_WAALS = 'van_der_waals'


def eq_vdw_pressure(v, a, b, rt):
    """
    Calculate pressure of gas using Van der Waals equation.

    :param v: Molar volume of gas.
    :param a: Van der Waals constant :math:`a`.
    :param b: Van der Waals constant :math:`b`.
    :param rt: Product of gas constant and absolute temperature.
    """
    return rt / (v - b) - a / (v * v)


def eq_vdw_molar_volume(p, a, b, rt, uncertainty):
    """
    Calculate molar volume of gas using Van der Waals equation.

    See :ref:`eq-vdw` section for details.

    :param p: Pressure of gas.
    :param a: Van der Waals constant :math:`a`.
    :param b: Van der Waals constant :math:`b`.
    :param rt: Product of gas constant and absolute temperature.
    :param uncertainty: Max uncertainty of the molar volume.
    """
    assert p > 0
    pb_rt = p * b + rt
    ab = a * b
    f = lambda v: p * v ** 3 - pb_rt * v ** 2 + a * v - ab
    df = lambda v: 3 * p * v ** 2 - 2 * pb_rt * v + a
    return newton_find(f, df, rt / p, uncertainty)



class IdealGas(object):
    """
    Ideal gas law conversions between pressure and capacity.

    Gas mix and temperature do not affect the conversions.

    :var units: Unit system.
    """
    def __init__(self, units):
        self.units = units


    def capacity(self, pressure, volume, mix=None, temperature=None):
        """
        Calculate capacity of a cylinder at given pressure.

        :param pressure: Pressure of gas in the cylinder.
        :param volume: Internal volume of the cylinder [capacity units].
        :param mix: Gas mix in the cylinder (ignored).
        :param temperature: Absolute temperature of gas (ignored).
        """
        _check_pressure(pressure)
        return volume * pressure / self.units.PRESSURE_ATM


    def pressure(self, capacity, volume, mix=None, temperature=None):
        """
        Calculate pressure in a cylinder holding given capacity of gas.

        :param capacity: Capacity of gas in the cylinder.
        :param volume: Internal volume of the cylinder [capacity units].
        :param mix: Gas mix in the cylinder (ignored).
        :param temperature: Absolute temperature of gas (ignored).
        """
        return capacity * self.units.PRESSURE_ATM / volume



class VanDerWaals(object):
    """
    Van der Waals equation conversions between pressure and capacity.

    :var units: Unit system.
    """
    def __init__(self, units):
        self.units = units


    def constants(self, mix):
        """
        Get Van der Waals constants of a gas mix in the unit system of
        the solver.

        :param mix: Gas mix.
        """
        a = self.units.convert_a(mix.a, METRIC)
        b = self.units.convert_capacity(mix.b, METRIC)
        return a, b


    def molar_volume(self, pressure, mix, temperature, uncertainty):
        """
        Calculate molar volume of a gas mix.

        :param pressure: Pressure of gas.
        :param mix: Gas mix.
        :param temperature: Absolute temperature of gas.
        :param uncertainty: Max uncertainty of the molar volume.
        """
        a, b = self.constants(mix)
        rt = temperature * self.units.GAS_CONSTANT
        return eq_vdw_molar_volume(pressure, a, b, rt, uncertainty)


    def capacity(self, pressure, volume, mix, temperature):
        """
        Calculate capacity of a cylinder at given pressure.

        `ConfigError` is raised if the pressure is negative.

        :param pressure: Pressure of gas in the cylinder.
        :param volume: Internal volume of the cylinder [capacity units].
        :param mix: Gas mix in the cylinder.
        :param temperature: Absolute temperature of gas.
        """
        _check_pressure(pressure)
        if pressure == 0:
            return 0

        p_atm = self.units.PRESSURE_ATM
        rt = temperature * self.units.GAS_CONSTANT
        uncertainty = p_atm * rt * const.VDW_CAPACITY_PRECISION \
            / (pressure ** 2 * volume)
        v = self.molar_volume(pressure, mix, temperature, uncertainty)

        if __debug__:
            logger.debug('vdw capacity at {}: v={}, uncertainty={}'.format(
                pressure, v, uncertainty
            ))

        return volume * rt / (p_atm * v)


    def pressure(self, capacity, volume, mix, temperature):
        """
        Calculate pressure in a cylinder holding given capacity of gas.

        :param capacity: Capacity of gas in the cylinder.
        :param volume: Internal volume of the cylinder [capacity units].
        :param mix: Gas mix in the cylinder.
        :param temperature: Absolute temperature of gas.
        """
        if capacity == 0:
            return 0

        a, b = self.constants(mix)
        rt = temperature * self.units.GAS_CONSTANT
        v = volume * rt / (self.units.PRESSURE_ATM * capacity)
        return eq_vdw_pressure(v, a, b, rt)



SOLVERS = {
    State.IDEAL_GAS: IdealGas,
    State.VAN_DER_WAALS: VanDerWaals,
}


def solver(units, state):
    """
    Create equation of state solver.

    :param units: Unit system.
    :param state: Equation of state, see :class:`State`.
    """
    if state not in SOLVERS:
        raise ConfigError('Unknown equation of state {}'.format(state))
    return SOLVERS[state](units)


def _check_pressure(pressure):
    if pressure < 0:
        raise ConfigError('Negative pressure {}'.format(pressure))


# vim: sw=4:et:ai
