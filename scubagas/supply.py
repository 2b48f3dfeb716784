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
Gas supply - a cylinder containing a gas mix at a pressure.

Gas supply supports operations to add gas to and remove gas from the
cylinder. The operations change gas supply object and return it, so
they can be chained

    >>> from scubagas.cylinder import Cylinder
    >>> from scubagas.eos import State
    >>> from scubagas.mix import Mix, OXYGEN, HELIUM
    >>> from scubagas.units import Imperial
    >>> c = Cylinder(Imperial(), 0.5, 3000)
    >>> s = GasSupply(c, OXYGEN, 1000, state=State.IDEAL_GAS)
    >>> s.topup(HELIUM, 3000).mix
    Mix(o2=0.3333, he=0.6667)
    >>> s.pressure
    3000

Topup
-----
Adding a gas mix to a cylinder until final pressure is reached is
called topup. The amount of the gas to add :math:`\\Delta` is unknown and
the pressure after adding the gas depends on the amount in nonlinear
way, because the gas mix and its Van der Waals constants change during
blending. The amount is found with secant method, which starts with two
ideal gas guesses

    .. math::

        \\Delta = (1 - P / P_f) V_f

where :math:`P` is current pressure, :math:`P_f` is final pressure and
:math:`V_f` is real gas capacity of the cylinder at final pressure for
the added gas mix (first guess) and for the current gas mix (second
guess).

The search stops when the secant step is smaller than 0.5% divided by
the largest fraction of the added gas mix. This bounds the error of
oxygen and helium fractions of the final mix to about 0.5%.
"""

import copy
import logging

from .eos import State
from .error import ConfigError
from .ft import secant_find
from .mix import Mix, AIR, OXYGEN, HELIUM
from . import const

logger = logging.getLogger(__name__)


class GasSupply(object):
    """
    Gas supply.

    The cylinder and the gas mix are shared with clones of a gas supply.
    A gas supply never changes its cylinder or gas mix objects, the gas
    mix is replaced with new object when gas is added.

    :var cylinder: Gas cylinder.
    :var mix: Gas mix in the cylinder.
    :var pressure: Pressure of gas in the cylinder.
    :var state: Equation of state, see :class:`scubagas.eos.State`.
    :var temperature: Absolute temperature of gas.
    """
    def __init__(self, cylinder, mix=AIR, pressure=0,
            state=State.VAN_DER_WAALS, temperature=None):
        """
        Create gas supply.

        :param cylinder: Gas cylinder.
        :param mix: Gas mix in the cylinder.
        :param pressure: Pressure of gas in the cylinder.
        :param state: Equation of state.
        :param temperature: Absolute temperature of gas, ambient
            temperature by default.
        """
        if pressure < 0:
            raise ConfigError('Negative pressure {}'.format(pressure))

        self.cylinder = cylinder
        self.mix = mix
        self.pressure = pressure
        self.state = state
        if temperature is None:
            temperature = cylinder.units.ABS_TEMP_AMBIENT
        self.temperature = temperature


    def clone(self):
        """
        Create copy of the gas supply.

        The copy shares cylinder and gas mix with the gas supply.
        """
        return copy.copy(self)


    def gas_amount(self):
        """
        Calculate amount of gas in the supply [capacity units].
        """
        return self._capacity(self.pressure, self.mix)


    def o2_amount(self):
        """
        Calculate amount of oxygen in the supply [capacity units].
        """
        return self.gas_amount() * self.mix.o2


    def n2_amount(self):
        """
        Calculate amount of nitrogen in the supply [capacity units].
        """
        return self.gas_amount() * self.mix.n2


    def he_amount(self):
        """
        Calculate amount of helium in the supply [capacity units].
        """
        return self.gas_amount() * self.mix.he


    def drain_to_gas_amount(self, amount):
        """
        Drain the supply, so it contains given amount of gas.

        :param amount: Amount of gas to leave in the supply [capacity
            units].
        """
        self.pressure = self._pressure(amount, self.mix)
        return self


    def drain_to_o2_amount(self, amount):
        """
        Drain the supply, so it contains given amount of oxygen.

        Nothing is drained if the supply contains the amount of oxygen
        already.

        :param amount: Amount of oxygen to leave in the supply [capacity
            units].
        """
        return self._drain_to(amount, self.o2_amount(), self.mix.o2)


    def drain_to_n2_amount(self, amount):
        """
        Drain the supply, so it contains given amount of nitrogen.

        :param amount: Amount of nitrogen to leave in the supply [capacity
            units].
        """
        return self._drain_to(amount, self.n2_amount(), self.mix.n2)


    def drain_to_he_amount(self, amount):
        """
        Drain the supply, so it contains given amount of helium.

        :param amount: Amount of helium to leave in the supply [capacity
            units].
        """
        return self._drain_to(amount, self.he_amount(), self.mix.he)


    def add_gas(self, mix, amount):
        """
        Add gas mix to the supply.

        Gas mix and pressure of the supply are changed accordingly.

        :param mix: Gas mix to add.
        :param amount: Amount of gas mix to add [capacity units].
        """
        current = self.gas_amount()
        total = current + amount
        if total == 0:
            self.pressure = 0
            return self

        o2 = self.mix.o2 * current + mix.o2 * amount
        he = self.mix.he * current + mix.he * amount

        # pressure depends on the new mix, replace the mix first
        self.mix = Mix(o2 / total, he / total)
        self.pressure = self._pressure(total, self.mix)
        return self


    def add_o2(self, amount):
        """
        Add oxygen to the supply.

        :param amount: Amount of oxygen to add [capacity units].
        """
        return self.add_gas(OXYGEN, amount)


    def add_he(self, amount):
        """
        Add helium to the supply.

        :param amount: Amount of helium to add [capacity units].
        """
        return self.add_gas(HELIUM, amount)


    def topup(self, mix, final_pressure):
        """
        Top up the supply with gas mix to final pressure.

        `ConfigError` is raised if the final pressure is lower than
        current pressure of the supply. `ConvergenceError` is raised if
        the amount of gas mix to add cannot be found.

        :param mix: Gas mix to add.
        :param final_pressure: Final pressure of the supply.
        """
        if self.mix == mix:
            logger.debug('topup with the same mix {!r}'.format(mix))
            self.pressure = final_pressure
            return self

        if final_pressure < self.pressure:
            raise ConfigError(
                'Final pressure {} lower than current pressure {}'.format(
                    final_pressure, self.pressure
                )
            )
        if final_pressure == self.pressure:
            return self

        tolerance = const.TOPUP_MIX_PRECISION / max(mix.o2, mix.he, mix.n2)

        k = 1 - self.pressure / final_pressure
        cylinder = self.cylinder
        t = self.temperature
        x0 = k * cylinder.vdw_capacity_at_pressure(final_pressure, mix, t)
        x1 = k * cylinder.vdw_capacity_at_pressure(final_pressure, self.mix, t)

        def f(amount):
            supply = self.clone().add_gas(mix, amount)
            return supply.pressure - final_pressure

        amount = secant_find(f, x0, x1, tolerance)
        logger.debug('topup with {!r} to {}: add {}'.format(
            mix, final_pressure, amount
        ))

        self.add_gas(mix, amount)
        # the secant search finds the amount only, final pressure is
        # exact
        self.pressure = final_pressure
        return self


    def _drain_to(self, amount, current, fraction):
        """
        Drain the supply, so it contains given amount of a component gas.

        :param amount: Amount of component gas to leave in the supply.
        :param current: Current amount of the component gas.
        :param fraction: Fraction of the component gas in the mix.
        """
        if amount - current >= -const.DRAIN_TOLERANCE:
            return self
        return self.drain_to_gas_amount(amount / fraction)


    def _capacity(self, pressure, mix):
        return self.cylinder.capacity_at_pressure(
            pressure, mix, self.temperature, self.state
        )


    def _pressure(self, amount, mix):
        return self.cylinder.pressure_at_capacity(
            amount, mix, self.temperature, self.state
        )


    def __repr__(self):
        return 'GasSupply(mix={!r}, pressure={:.1f}, state={})'.format(
            self.mix, self.pressure, self.state
        )


# vim: sw=4:et:ai
