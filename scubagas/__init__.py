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
Basic Usage
-----------

The ScubaGas breathing gas blending library exports its main API via
``scubagas`` module.

Gas supply, a cylinder filled with a gas mix, can be created with
:func:`~scubagas.create` function. The following example creates 12
liter cylinder with 232 bar service pressure, filled with air to 50 bar::

    >>> import scubagas
    >>> supply = scubagas.create(12, 232, scubagas.AIR, 50)
    >>> supply
    GasSupply(mix=Mix(o2=0.2100, he=0.0000), pressure=50.0, state=van_der_waals)

The amount of gas is calculated with Van der Waals equation of state by
default. The equation takes into account attraction of gas molecules,
so there is more gas in the cylinder than predicted by ideal gas law::

    >>> supply.gas_amount() > supply.cylinder.ideal_capacity_at_pressure(50)
    True

Having the gas supply, we can add some oxygen and top it up with air to
create nitrox mix. The example below uses ideal gas law, which gives the
same results as simple partial pressure blending tables::

    >>> supply = scubagas.create(12, 232, scubagas.AIR, 50,
    ...     state=scubagas.State.IDEAL_GAS)
    >>> round(supply.gas_amount(), 1)
    592.3
    >>> supply.add_o2(300)
    GasSupply(mix=Mix(o2=0.4756, he=0.0000), pressure=75.3, state=ideal_gas)
    >>> supply.topup(scubagas.AIR, 200)
    GasSupply(mix=Mix(o2=0.3100, he=0.0000), pressure=200.0, state=ideal_gas)

Cylinder sizing, unit systems and gas mix properties are available via
:class:`Cylinder`, :class:`Imperial`, :class:`Metric` and :class:`Mix`
classes.
"""

from .cylinder import Cylinder
from .eos import State
from .error import GasError, MixError, ConfigError, ConvergenceError
from .mix import Mix, AIR, OXYGEN, HELIUM, NITROGEN
from .supply import GasSupply
from .units import Imperial, Metric, IMPERIAL, METRIC, units

__version__ = '0.1.0'


def create(internal_volume, service_pressure, mix=AIR, pressure=0,
        system=METRIC, state=State.VAN_DER_WAALS, temperature=None):
    """
    Create gas supply.

    Usage

    >>> import scubagas
    >>> supply = scubagas.create(0.5, 3000, scubagas.OXYGEN, 1000,
    ...     system=scubagas.IMPERIAL, state=scubagas.State.IDEAL_GAS)
    >>> supply.topup(scubagas.HELIUM, 3000).mix
    Mix(o2=0.3333, he=0.6667)

    :param internal_volume: Internal volume of cylinder [capacity units].
    :param service_pressure: Service pressure of cylinder.
    :param mix: Gas mix in the cylinder.
    :param pressure: Pressure of gas in the cylinder.
    :param system: Unit system, `IMPERIAL` or `METRIC`.
    :param state: Equation of state.
    :param temperature: Absolute temperature of gas, ambient temperature
        by default.
    """
    cylinder = Cylinder(units(system), internal_volume, service_pressure)
    return GasSupply(cylinder, mix, pressure, state, temperature)


__all__ = [
    'create', 'Cylinder', 'GasSupply', 'Mix', 'State', 'Imperial',
    'Metric', 'AIR', 'OXYGEN', 'HELIUM', 'NITROGEN',
]

# vim: sw=4:et:ai
