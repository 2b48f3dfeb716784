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
ScubaGas exceptions.
"""

class GasError(Exception):
    """
    Base class for all ScubaGas errors.
    """


class MixError(GasError):
    """
    Gas mix composition error, i.e. negative fraction of a gas or sum of
    fractions over 100%.
    """


class ConfigError(GasError):
    """
    Configuration error, i.e. unknown unit system or invalid cylinder
    parameters.
    """


class ConvergenceError(GasError):
    """
    Numerical search did not converge within the iteration limit.
    """


# vim: sw=4:et:ai
