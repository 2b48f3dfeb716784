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
Root finding functions tests.
"""

from scubagas.error import ConvergenceError
from scubagas.ft import newton_find, secant_find

import unittest
from unittest import mock


class NewtonFindTestCase(unittest.TestCase):
    """
    Newton-Raphson search tests.
    """
    def test_find(self):
        """
        Test Newton-Raphson search of square root of 2
        """
        f = lambda x: x * x - 2
        df = lambda x: 2 * x
        v = newton_find(f, df, 1, 1e-10)
        self.assertAlmostEqual(1.41421356, v, 8)


    def test_find_exact(self):
        """
        Test Newton-Raphson search starting at root
        """
        f = mock.Mock(side_effect=lambda x: x - 3)
        df = lambda x: 1
        v = newton_find(f, df, 3, 1e-6)
        self.assertEqual(3, v)
        self.assertEqual(1, f.call_count)


    def test_no_convergence(self):
        """
        Test Newton-Raphson search of function without root
        """
        f = lambda x: x * x + 1
        df = lambda x: 2 * x
        with self.assertRaises(ConvergenceError):
            newton_find(f, df, 0.5, 1e-10, max_iter=10)



class SecantFindTestCase(unittest.TestCase):
    """
    Secant search tests.
    """
    def test_find_linear(self):
        """
        Test secant search of linear function root
        """
        f = mock.Mock(side_effect=lambda x: 2 * x - 4)
        v = secant_find(f, 0, 1, 1e-6)
        self.assertAlmostEqual(2, v)
        self.assertEqual(3, f.call_count)


    def test_find(self):
        """
        Test secant search of cube root of 10
        """
        f = lambda x: x ** 3 - 10
        v = secant_find(f, 2, 3, 1e-10)
        self.assertAlmostEqual(2.15443469, v, 8)


    def test_same_guess(self):
        """
        Test secant search with equal guesses
        """
        f = lambda x: x - 3
        self.assertRaises(ConvergenceError, secant_find, f, 5, 5, 1e-6)


    def test_same_guess_root(self):
        """
        Test secant search with equal guesses at root
        """
        f = lambda x: x - 3
        v = secant_find(f, 3, 3, 1e-6)
        self.assertEqual(3, v)


    def test_equal_values(self):
        """
        Test secant search with equal function values
        """
        f = lambda x: 1
        self.assertRaises(ConvergenceError, secant_find, f, 0, 1, 1e-6)


    def test_no_convergence(self):
        """
        Test secant search of function without root
        """
        f = lambda x: x * x + 1
        self.assertRaises(ConvergenceError, secant_find, f, 1, 2, 1e-10, 20)


    def test_max_iter(self):
        """
        Test secant search iteration limit
        """
        f = mock.Mock(side_effect=lambda x: x ** 3 - 10)
        self.assertRaises(ConvergenceError, secant_find, f, 2, 3, 1e-10, 2)
        self.assertEqual(3, f.call_count)


# vim: sw=4:et:ai
