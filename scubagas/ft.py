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
Numerical root finding functions.
"""

import logging

from .error import ConvergenceError
from . import const

logger = logging.getLogger(__name__)


def newton_find(f, df, x, tolerance, max_iter=const.MAX_ITER):
    """
    Find root of function `f` using Newton-Raphson method.

    The search stops when absolute value of a step is smaller than
    tolerance. If the search does not stop within `max_iter` iterations,
    then `ConvergenceError` is raised.

    :param f: Function to find root of.
    :param df: Derivative of the function.
    :param x: Initial guess.
    :param tolerance: Search tolerance.
    :param max_iter: Maximum number of iterations.
    """
    for k in range(max_iter):
        step = f(x) / df(x)
        x -= step

        if __debug__:
            logger.debug('newton {}: x={}, step={}'.format(k, x, step))

        if abs(step) < tolerance:
            return x

    raise ConvergenceError(
        'Newton-Raphson search did not converge after {} iterations' \
        ' (x={}, tolerance={})'.format(max_iter, x, tolerance)
    )


def secant_find(f, x0, x1, tolerance, max_iter=const.MAX_ITER):
    """
    Find root of function `f` using secant method.

    The search starts with two guesses and stops when absolute value of
    a step is not larger than tolerance. If the search does not stop
    within `max_iter` iterations or function `f` has equal, non-zero
    values at two consecutive guesses (i.e. when the guesses are equal),
    then `ConvergenceError` is raised.

    :param f: Function to find root of.
    :param x0: First guess.
    :param x1: Second guess.
    :param tolerance: Search tolerance.
    :param max_iter: Maximum number of iterations.
    """
    f0 = f(x0)
    for k in range(max_iter):
        f1 = f(x1)
        if f1 == f0:
            if f1 == 0:
                return x1
            raise ConvergenceError(
                'Secant search failed, equal function values at {} and {}' \
                .format(x0, x1)
            )

        step = (x1 - x0) / (f1 - f0) * f1
        x0, f0 = x1, f1
        x1 -= step

        if __debug__:
            logger.debug('secant {}: x={}, step={}'.format(k, x1, step))

        if abs(step) <= tolerance:
            return x1

    raise ConvergenceError(
        'Secant search did not converge after {} iterations' \
        ' (x={}, tolerance={})'.format(max_iter, x1, tolerance)
    )


# vim: sw=4:et:ai
