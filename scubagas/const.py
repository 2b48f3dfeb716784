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
ScubaGas constants.
"""

# Van der Waals constants of pure gases, metric system
# a [l^2 * bar / mol^2], b [l / mol]
A_OXYGEN = 1.382
A_NITROGEN = 1.370
A_HELIUM = 0.0346
B_OXYGEN = 0.03186
B_NITROGEN = 0.03870
B_HELIUM = 0.02380

# fractions of oxygen and nitrogen in air
AIR_O2 = 0.21
AIR_N2 = 0.79

# metric to imperial unit multipliers
PRESSURE_M2I = 14.5     # bar -> psi
DEPTH_M2I = 3.28        # m -> ft
VOLUME_M2I = 61.02      # l -> cuin
CAPACITY_M2I = 3.531e-2 # l -> cuft
ABS_TEMP_M2I = 1.8      # K -> R
A_M2I = 1.808e-2        # l^2 * bar / mol^2 -> cuft^2 * psi / mol^2

# two mixes are the same gas when fractions differ by less than
MIX_TOLERANCE = 0.0005

# rounding allowance of sum of gas fractions
MIX_EPSILON = 1e-9

# allowance of drain to component gas amount
DRAIN_TOLERANCE = 0.0001

# absolute precision of nominal volume calculated with Van der Waals
# equation [capacity units]
VDW_CAPACITY_PRECISION = 0.05

# max error of O2 and He fractions of topped up mix
TOPUP_MIX_PRECISION = 0.005

# iteration limit of numerical searches
MAX_ITER = 100

# vim: sw=4:et:ai
