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
ScubaGas unit tests tools.
"""

from scubagas.cylinder import Cylinder
from scubagas.eos import State
from scubagas.mix import AIR
from scubagas.supply import GasSupply
from scubagas.units import Imperial, Metric

def _cylinder(volume=12, service_pressure=232, units=None):
    if units is None:
        units = Metric()
    return Cylinder(units, volume, service_pressure)


def _supply(mix=AIR, pressure=0, state=State.VAN_DER_WAALS, volume=12,
        service_pressure=232, units=None):
    cylinder = _cylinder(volume, service_pressure, units)
    return GasSupply(cylinder, mix, pressure, state)


def _imperial_supply(mix=AIR, pressure=0, state=State.VAN_DER_WAALS):
    return _supply(mix, pressure, state, 0.5, 3000, Imperial())


# vim: sw=4:et:ai
