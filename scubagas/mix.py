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
Gas mix of oxygen, helium and nitrogen.

A gas mix is defined by fractions of oxygen and helium, the rest of the
mix is nitrogen

    >>> from scubagas.mix import Mix
    >>> mix = Mix(0.18, 0.45)
    >>> round(mix.n2, 2)
    0.37
    >>> print(mix)
    18/45

Gas mix is immutable and two gas mixes are equal if their fractions
differ by less than 0.05%

    >>> Mix(0.3333, 0.6667) == Mix(1 / 3, 2 / 3)
    True

Van der Waals Mixing Rules
--------------------------
Real gas behaviour of a gas mix is modeled with Van der Waals equation
of state using constants :math:`a` and :math:`b` of a theoretical
homogeneous gas equivalent to the mix

    .. math::

        a = \\sum_i \\sum_j \\sqrt{a_i a_j} x_i x_j

        b = \\sum_i b_i x_i

where :math:`x_i` is fraction of oxygen, nitrogen and helium and
:math:`a_i`, :math:`b_i` are constants of the pure gases. The constants
are in the metric system (:math:`l^2 bar / mol^2` and :math:`l / mol`).
"""

from functools import lru_cache
import math
import logging

from .error import MixError
from . import const

logger = logging.getLogger(__name__)


@lru_cache(maxsize=256)
def vdw_constants(o2, he):
    """
    Calculate Van der Waals constants :math:`a` and :math:`b` of a gas mix.

    The results are cached for each pair of oxygen and helium fractions.

    :param o2: Fraction of oxygen.
    :param he: Fraction of helium.
    """
    x = (o2, 1 - (o2 + he), he)
    av = (const.A_OXYGEN, const.A_NITROGEN, const.A_HELIUM)
    bv = (const.B_OXYGEN, const.B_NITROGEN, const.B_HELIUM)

    a = sum(
        math.sqrt(av[i] * av[j]) * x[i] * x[j]
        for i in range(3) for j in range(3)
    )
    b = sum(bi * xi for bi, xi in zip(bv, x))

    logger.debug('vdw constants o2={}, he={}: a={:.5f}, b={:.5f}'.format(
        o2, he, a, b
    ))
    return a, b



class Mix(object):
    """
    Gas mix of oxygen, helium and nitrogen.

    :var o2: Fraction of oxygen.
    :var he: Fraction of helium.
    :var n2: Fraction of nitrogen.
    """
    __slots__ = ('_o2', '_he')

    def __init__(self, o2, he):
        """
        Create gas mix.

        `MixError` is raised if a fraction is negative or sum of oxygen
        and helium fractions is over 1.

        :param o2: Fraction of oxygen.
        :param he: Fraction of helium.
        """
        if o2 < 0 or he < 0:
            raise MixError(
                'Negative gas fraction (o2={}, he={})'.format(o2, he)
            )
        if o2 + he > 1 + const.MIX_EPSILON:
            raise MixError(
                'Sum of gas fractions over 100% (o2={}, he={})'.format(o2, he)
            )
        self._o2 = o2
        self._he = he


    @property
    def o2(self):
        return self._o2


    @property
    def he(self):
        return self._he


    @property
    def n2(self):
        return 1 - (self._o2 + self._he)


    @property
    def a(self):
        """
        Van der Waals constant :math:`a` of the mix (metric system).
        """
        return vdw_constants(self._o2, self._he)[0]


    @property
    def b(self):
        """
        Van der Waals constant :math:`b` of the mix (metric system).
        """
        return vdw_constants(self._o2, self._he)[1]


    def pp_o2(self, depth, units, surface_pressure=1):
        """
        Calculate partial pressure of oxygen at depth [atm].

        :param depth: Depth.
        :param units: Unit system of the depth.
        :param surface_pressure: Surface pressure [atm].
        """
        return self._abs_p(depth, units, surface_pressure) * self.o2


    def pp_n2(self, depth, units, surface_pressure=1):
        """
        Calculate partial pressure of nitrogen at depth [atm].

        :param depth: Depth.
        :param units: Unit system of the depth.
        :param surface_pressure: Surface pressure [atm].
        """
        return self._abs_p(depth, units, surface_pressure) * self.n2


    def pp_he(self, depth, units, surface_pressure=1):
        """
        Calculate partial pressure of helium at depth [atm].

        :param depth: Depth.
        :param units: Unit system of the depth.
        :param surface_pressure: Surface pressure [atm].
        """
        return self._abs_p(depth, units, surface_pressure) * self.he


    def mod(self, units, max_ppo2=1.4):
        """
        Calculate maximum operating depth of the mix, rounded down.

        :param units: Unit system of the depth.
        :param max_ppo2: Maximum partial pressure of oxygen.
        """
        self._check_o2()
        depth = (max_ppo2 / self.o2 - 1) * units.DEPTH_PER_ATM
        return math.floor(depth + 0.01)


    def ceiling(self, units, min_ppo2=0.16):
        """
        Calculate minimum depth at which the mix can be breathed, rounded
        up.

        :param units: Unit system of the depth.
        :param min_ppo2: Minimum partial pressure of oxygen.
        """
        self._check_o2()
        depth = (min_ppo2 / self.o2 - 1) * units.DEPTH_PER_ATM
        return max(math.ceil(depth - 0.01), 0)


    def end(self, depth, units, oxygen_is_narcotic=True):
        """
        Calculate equivalent narcotic depth of the mix, rounded up.

        :param depth: Depth.
        :param units: Unit system of the depth.
        :param oxygen_is_narcotic: Include narcotic effect of oxygen.
        """
        p = self.pp_n2(depth, units)
        if oxygen_is_narcotic:
            p += self.pp_o2(depth, units)
            p0 = 1
        else:
            p0 = const.AIR_N2
        return max(math.ceil((p / p0 - 1) * units.DEPTH_PER_ATM - 0.01), 0)


    def ead(self, depth, units):
        """
        Calculate equivalent air depth of the mix, rounded up.

        :param depth: Depth.
        :param units: Unit system of the depth.
        """
        return self.end(depth, units, oxygen_is_narcotic=False)


    @classmethod
    def best(cls, depth, max_end, units, max_ppo2=1.4, oxygen_is_narcotic=True):
        """
        Find the mix with highest fraction of oxygen and lowest fraction
        of helium for given depth and maximum equivalent narcotic depth.

        The fractions are rounded to whole percentages. If there is no
        such mix, then `None` is returned.

        :param depth: Maximum depth of the mix.
        :param max_end: Maximum equivalent narcotic depth at `depth`.
        :param units: Unit system of the depths.
        :param max_ppo2: Maximum partial pressure of oxygen.
        :param oxygen_is_narcotic: Include narcotic effect of oxygen.
        """
        dpa = units.DEPTH_PER_ATM
        abs_p = depth / dpa + 1
        o2 = max_ppo2 / abs_p
        o2 = 1 if o2 > 1 else math.floor(o2 * 100 + 0.0001) / 100

        max_end = min(depth, max_end)
        p0 = 1 if oxygen_is_narcotic else const.AIR_N2
        narc = math.floor((max_end / dpa + 1) / abs_p * p0 * 100 + 0.0001) / 100
        he = 1 - (narc if oxygen_is_narcotic else narc + o2)
        he = max(he, 0)

        if o2 + he > 1 + const.MIX_EPSILON:
            logger.debug('no best mix for depth {} and end {}'.format(
                depth, max_end
            ))
            return None
        return cls(o2, he)


    def _abs_p(self, depth, units, surface_pressure):
        return depth / units.DEPTH_PER_ATM + surface_pressure


    def _check_o2(self):
        if self.o2 == 0:
            raise MixError('No oxygen in mix {!r}'.format(self))


    def __eq__(self, other):
        if not isinstance(other, Mix):
            return NotImplemented
        return abs(self.o2 - other.o2) < const.MIX_TOLERANCE \
            and abs(self.he - other.he) < const.MIX_TOLERANCE

    __hash__ = None


    def __str__(self):
        o2 = round(self.o2 * 100)
        he = round(self.he * 100)
        if o2 == 100:
            return 'Oxygen'
        elif he == 100:
            return 'Helium'
        elif o2 + he == 0:
            return 'Nitrogen'
        elif o2 == 21 and he == 0:
            return 'Air'
        elif he == 0:
            return '{}%'.format(o2)
        else:
            return '{}/{}'.format(o2, he)


    def __repr__(self):
        return 'Mix(o2={:.4f}, he={:.4f})'.format(self.o2, self.he)



AIR = Mix(const.AIR_O2, 0)
OXYGEN = Mix(1, 0)
HELIUM = Mix(0, 1)
NITROGEN = Mix(0, 0)

# vim: sw=4:et:ai
