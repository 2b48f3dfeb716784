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


from setuptools import setup, find_packages

import scubagas

setup(
    name='scubagas',
    version=scubagas.__version__,
    description='ScubaGas - breathing gas blending library',
    author='ScubaGas Team',
    packages=find_packages('.'),
    scripts=('bin/sg-blend',),
    include_package_data=True,
    long_description=\
"""\
ScubaGas is Python library to calculate amount of breathing gas in diving
cylinders with ideal gas law and Van der Waals equation of state, and to
plan partial pressure blending of nitrox, heliox and trimix.
""",
    classifiers=[
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
    ],
    keywords='diving gas blending nitrox trimix',
    license='GPL',
    install_requires=[],
    extras_require={
        'test': ['pytest'],
        'doc': ['sphinx', 'sphinx_rtd_theme'],
    },
)

# vim: sw=4:et:ai
