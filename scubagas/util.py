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
ScubaGas various utilities.
"""

from collections import namedtuple
import csv
import re

from .error import MixError
from .mix import Mix, AIR, OXYGEN, HELIUM, NITROGEN

MIX_NAMES = {
    'air': AIR,
    'oxygen': OXYGEN,
    'o2': OXYGEN,
    'helium': HELIUM,
    'he': HELIUM,
    'nitrogen': NITROGEN,
    'n2': NITROGEN,
}

RE_MIX = re.compile(r'^(?:ean|nx|tx)?(\d+(?:\.\d+)?)(?:/(\d+(?:\.\d+)?))?$')

BlendStep = namedtuple('BlendStep', 'label pressure amount mix')
BlendStep.__doc__ = """
Gas blending step information.

:var label: Description of the step.
:var pressure: Pressure of gas supply after the step.
:var amount: Amount of gas in the supply after the step [capacity units].
:var mix: Gas mix in the supply after the step.
"""


def parse_mix(text):
    """
    Parse gas mix specification.

    The specification is name of a gas ("air", "oxygen", "helium",
    "nitrogen"), percentage of oxygen of nitrox mix, i.e. "32" or
    "ean32", or percentages of oxygen and helium of trimix, i.e. "18/45"
    or "tx18/45".

    :param text: Gas mix specification.
    """
    value = text.strip().lower()
    if value in MIX_NAMES:
        return MIX_NAMES[value]

    match = RE_MIX.match(value)
    if match is None:
        raise MixError('Invalid gas mix specification "{}"'.format(text))

    o2, he = match.groups()
    he = 0 if he is None else float(he)
    return Mix(float(o2) / 100, he / 100)


def blend_step(label, supply):
    """
    Create gas blending step information from gas supply.

    :param label: Description of the step.
    :param supply: Gas supply.
    """
    return BlendStep(label, supply.pressure, supply.gas_amount(), supply.mix)


def write_csv(f, steps):
    """
    Write gas blending steps into a CSV file.

    :param f: File object.
    :param steps: Collection of gas blending steps.
    """
    header = ['step', 'pressure', 'amount', 'o2', 'he', 'n2']

    fcsv = csv.writer(f)
    fcsv.writerow(header)

    for step in steps:
        mix = step.mix
        fcsv.writerow([
            step.label, step.pressure, step.amount, mix.o2, mix.he, mix.n2
        ])


# vim: sw=4:et:ai
