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
Unit systems tests.
"""

from scubagas.error import ConfigError
from scubagas.units import Imperial, Metric, IMPERIAL, METRIC, units

import unittest


class ConversionTestCase(unittest.TestCase):
    """
    Unit system conversion tests.
    """
    def test_pressure_m2i(self):
        """
        Test pressure conversion from metric to imperial system
        """
        v = Imperial().convert_pressure(10, METRIC)
        self.assertAlmostEqual(145, v)


    def test_pressure_i2m(self):
        """
        Test pressure conversion from imperial to metric system
        """
        v = Metric().convert_pressure(145, IMPERIAL)
        self.assertAlmostEqual(10, v)


    def test_same_system(self):
        """
        Test conversion within the same unit system
        """
        m = Metric()
        self.assertEqual(232, m.convert_pressure(232, METRIC))
        self.assertEqual(12, m.convert_capacity(12, METRIC))
        self.assertEqual(294, m.convert_abs_temp(294, METRIC))


    def test_capacity(self):
        """
        Test capacity conversion between unit systems
        """
        v = Imperial().convert_capacity(2265, METRIC)
        self.assertAlmostEqual(79.98, v, 2)

        v = Metric().convert_capacity(80, IMPERIAL)
        self.assertAlmostEqual(2265.65, v, 2)


    def test_depth(self):
        """
        Test depth conversion between unit systems
        """
        self.assertAlmostEqual(98.4, Imperial().convert_depth(30, METRIC))
        self.assertAlmostEqual(30, Metric().convert_depth(98.4, IMPERIAL))


    def test_volume(self):
        """
        Test internal volume conversion between unit systems
        """
        v = Imperial().convert_volume(12, METRIC)
        self.assertAlmostEqual(732.24, v)


    def test_abs_temp(self):
        """
        Test absolute temperature conversion between unit systems
        """
        v = Imperial().convert_abs_temp(294, METRIC)
        self.assertAlmostEqual(529.2, v)


    def test_vdw_a(self):
        """
        Test Van der Waals constant a conversion to imperial system
        """
        v = Imperial().convert_a(1.382, METRIC)
        self.assertAlmostEqual(0.024987, v, 6)



class TemperatureTestCase(unittest.TestCase):
    """
    Relative and absolute temperature tests.
    """
    def test_metric(self):
        """
        Test Celsius to Kelvin conversion
        """
        m = Metric()
        self.assertAlmostEqual(293.15, m.to_abs_temp(20))
        self.assertAlmostEqual(20, m.to_rel_temp(293.15))


    def test_imperial(self):
        """
        Test Fahrenheit to Rankine conversion
        """
        i = Imperial()
        self.assertAlmostEqual(529.67, i.to_abs_temp(70))
        self.assertAlmostEqual(70, i.to_rel_temp(529.67))



class UnitSystemTestCase(unittest.TestCase):
    """
    Unit system objects tests.
    """
    def test_constants(self):
        """
        Test unit system constants
        """
        i = Imperial()
        m = Metric()
        self.assertEqual(14.7, i.PRESSURE_ATM)
        self.assertEqual(1.013, m.PRESSURE_ATM)
        self.assertEqual(530, i.ABS_TEMP_AMBIENT)
        self.assertEqual(294, m.ABS_TEMP_AMBIENT)
        self.assertEqual(33, i.DEPTH_PER_ATM)
        self.assertEqual(10, m.DEPTH_PER_ATM)


    def test_volume_to_capacity(self):
        """
        Test internal volume to capacity units conversion
        """
        i = Imperial()
        self.assertAlmostEqual(1, i.volume_to_capacity(1728))
        self.assertAlmostEqual(1728, i.capacity_to_volume(1))

        m = Metric()
        self.assertEqual(12, m.volume_to_capacity(12))
        self.assertEqual(12, m.capacity_to_volume(12))


    def test_factory(self):
        """
        Test unit system creation
        """
        self.assertIsInstance(units(IMPERIAL), Imperial)
        self.assertIsInstance(units(METRIC), Metric)


    def test_factory_unknown(self):
        """
        Test unit system creation with unknown identifier
        """
        self.assertRaises(ConfigError, units, 2)


    def test_repr(self):
        """
        Test unit system representation
        """
        self.assertEqual('<Metric>', repr(Metric()))
        self.assertEqual('<Imperial>', repr(Imperial()))


# vim: sw=4:et:ai
