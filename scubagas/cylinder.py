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
Gas cylinder.

A cylinder (or a manifolded set of cylinders) is described by its
internal volume and service pressure. The internal volume is kept in
capacity units of the unit system, i.e. cubic feet for imperial system.

Cylinders are usually labeled with nominal capacity instead of internal
volume, i.e. 80 cubic feet at 3000 psi. Such cylinder can be created with
ideal gas law

    >>> from scubagas.units import Imperial
    >>> c = Cylinder.from_capacity_ideal(Imperial(), 80, 3000)
    >>> round(c.internal_volume, 4)
    0.392

or with Van der Waals equation, which is more accurate at high pressures

    >>> c = Cylinder.from_capacity_vdw(Imperial(), 80, 3000)
    >>> round(c.vdw_capacity, 1)
    80.0
"""

import logging

from .eos import State, VanDerWaals, solver
from .error import ConfigError
from .mix import AIR
from . import const

logger = logging.getLogger(__name__)


class Cylinder(object):
    """
    Gas cylinder.

    :var units: Unit system.
    :var internal_volume: Internal volume of the cylinder [capacity units].
    :var service_pressure: Service pressure of the cylinder.
    """
    def __init__(self, units, internal_volume, service_pressure):
        """
        Create cylinder.

        :param units: Unit system.
        :param internal_volume: Internal volume of the cylinder [capacity
            units].
        :param service_pressure: Service pressure of the cylinder.
        """
        if internal_volume <= 0:
            raise ConfigError(
                'Internal volume {} is not positive'.format(internal_volume)
            )
        _check_service_pressure(service_pressure)
        self.units = units
        self.internal_volume = internal_volume
        self.service_pressure = service_pressure


    @classmethod
    def from_capacity_ideal(cls, units, capacity, service_pressure):
        """
        Create cylinder with nominal capacity using ideal gas law.

        :param units: Unit system.
        :param capacity: Capacity of the cylinder filled with air to
            service pressure.
        :param service_pressure: Service pressure of the cylinder.
        """
        _check_service_pressure(service_pressure)
        volume = _ideal_volume(units, capacity, service_pressure)
        return cls(units, volume, service_pressure)


    @classmethod
    def from_capacity_vdw(cls, units, capacity, service_pressure):
        """
        Create cylinder with nominal capacity using Van der Waals equation.

        :param units: Unit system.
        :param capacity: Capacity of the cylinder filled with air to
            service pressure.
        :param service_pressure: Service pressure of the cylinder.
        """
        _check_service_pressure(service_pressure)
        volume = _vdw_volume(units, capacity, service_pressure)
        return cls(units, volume, service_pressure)


    @property
    def ideal_capacity(self):
        """
        Capacity of the cylinder filled with air to service pressure
        calculated with ideal gas law.
        """
        return self.ideal_capacity_at_pressure(self.service_pressure)


    @property
    def vdw_capacity(self):
        """
        Capacity of the cylinder filled with air to service pressure
        calculated with Van der Waals equation.
        """
        return self.vdw_capacity_at_pressure(self.service_pressure, AIR)


    def set_ideal_capacity(self, capacity):
        """
        Set internal volume of the cylinder from capacity using ideal gas
        law.

        The cylinder object is returned.

        :param capacity: Capacity of the cylinder filled with air to
            service pressure.
        """
        self.internal_volume = _ideal_volume(
            self.units, capacity, self.service_pressure
        )
        return self


    def set_vdw_capacity(self, capacity):
        """
        Set internal volume of the cylinder from capacity using Van der
        Waals equation.

        The cylinder object is returned.

        :param capacity: Capacity of the cylinder filled with air to
            service pressure.
        """
        self.internal_volume = _vdw_volume(
            self.units, capacity, self.service_pressure
        )
        return self


    def ideal_capacity_at_pressure(self, pressure):
        """
        Calculate capacity of the cylinder at given pressure using ideal
        gas law.

        :param pressure: Pressure of gas in the cylinder.
        """
        return self.capacity_at_pressure(pressure, state=State.IDEAL_GAS)


    def ideal_pressure_at_capacity(self, capacity):
        """
        Calculate pressure in the cylinder holding given capacity of gas
        using ideal gas law.

        :param capacity: Capacity of gas in the cylinder.
        """
        return self.pressure_at_capacity(capacity, state=State.IDEAL_GAS)


    def vdw_capacity_at_pressure(self, pressure, mix=AIR, temperature=None):
        """
        Calculate capacity of the cylinder at given pressure using Van der
        Waals equation.

        :param pressure: Pressure of gas in the cylinder.
        :param mix: Gas mix in the cylinder.
        :param temperature: Absolute temperature of gas, ambient
            temperature by default.
        """
        return self.capacity_at_pressure(
            pressure, mix, temperature, State.VAN_DER_WAALS
        )


    def vdw_pressure_at_capacity(self, capacity, mix=AIR, temperature=None):
        """
        Calculate pressure in the cylinder holding given capacity of gas
        using Van der Waals equation.

        :param capacity: Capacity of gas in the cylinder.
        :param mix: Gas mix in the cylinder.
        :param temperature: Absolute temperature of gas, ambient
            temperature by default.
        """
        return self.pressure_at_capacity(
            capacity, mix, temperature, State.VAN_DER_WAALS
        )


    def capacity_at_pressure(self, pressure, mix=AIR, temperature=None,
            state=State.VAN_DER_WAALS):
        """
        Calculate capacity of the cylinder at given pressure.

        :param pressure: Pressure of gas in the cylinder.
        :param mix: Gas mix in the cylinder.
        :param temperature: Absolute temperature of gas, ambient
            temperature by default.
        :param state: Equation of state.
        """
        if temperature is None:
            temperature = self.units.ABS_TEMP_AMBIENT
        eos = solver(self.units, state)
        return eos.capacity(pressure, self.internal_volume, mix, temperature)


    def pressure_at_capacity(self, capacity, mix=AIR, temperature=None,
            state=State.VAN_DER_WAALS):
        """
        Calculate pressure in the cylinder holding given capacity of gas.

        :param capacity: Capacity of gas in the cylinder.
        :param mix: Gas mix in the cylinder.
        :param temperature: Absolute temperature of gas, ambient
            temperature by default.
        :param state: Equation of state.
        """
        if temperature is None:
            temperature = self.units.ABS_TEMP_AMBIENT
        eos = solver(self.units, state)
        return eos.pressure(capacity, self.internal_volume, mix, temperature)


    def __repr__(self):
        return 'Cylinder(internal_volume={:.4f}, service_pressure={})'.format(
            self.internal_volume, self.service_pressure
        )



def _ideal_volume(units, capacity, service_pressure):
    """
    Calculate internal volume of a cylinder from capacity using ideal gas
    law.

    :param units: Unit system.
    :param capacity: Capacity of the cylinder filled with air to service
        pressure.
    :param service_pressure: Service pressure of the cylinder.
    """
    _check_capacity(capacity)
    return capacity * units.PRESSURE_ATM / service_pressure


def _vdw_volume(units, capacity, service_pressure):
    """
    Calculate internal volume of a cylinder from capacity using Van der
    Waals equation.

    The amount of gas (in moles) is known from the capacity, so internal
    volume is the amount multiplied by molar volume of air at service
    pressure.

    :param units: Unit system.
    :param capacity: Capacity of the cylinder filled with air to service
        pressure.
    :param service_pressure: Service pressure of the cylinder.
    """
    _check_capacity(capacity)
    t = units.ABS_TEMP_AMBIENT
    n = units.PRESSURE_ATM * capacity / (t * units.GAS_CONSTANT)

    # capacity error is n * dv * P / P_atm for v close to RT / P
    uncertainty = const.VDW_CAPACITY_PRECISION * units.PRESSURE_ATM \
        / (n * service_pressure)
    v = VanDerWaals(units).molar_volume(service_pressure, AIR, t, uncertainty)
    volume = v * n

    logger.debug('cylinder capacity {} at {}: internal volume {}'.format(
        capacity, service_pressure, volume
    ))
    return volume


def _check_capacity(capacity):
    if capacity <= 0:
        raise ConfigError('Capacity {} is not positive'.format(capacity))


def _check_service_pressure(service_pressure):
    if service_pressure <= 0:
        raise ConfigError(
            'Service pressure {} is not positive'.format(service_pressure)
        )


# vim: sw=4:et:ai
