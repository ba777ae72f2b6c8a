#!/usr/bin/env python
#
# Licensed under a 3-clause BSD style license - see LICENSE.
#
import os
import re
from os.path import abspath, isdir, join

from setuptools import setup, find_packages



# 'python' is just a folder in our repository, not a package itself, so the
# version is read from the _version.py file rather than imported.

def get_version():
    """Get the value of ``__version__`` without having to import the package.

    Returns
    -------
    :class:`str`
        The value of ``__version__``.
    """
    ver = 'unknown'
    try:
        version_dir = find_version_directory()
    except IOError:
        return ver

    version_file = join(version_dir, '_version.py')
    with open(version_file, 'r') as f:
        for line in f.readlines():
            mo = re.match("__version__ = '(.*)'", line)
            if mo:
                ver = mo.group(1)
    return ver


def find_version_directory():
    """Return the name of a directory containing version information.
    Looks for files in the following places:
    * python/mcest/_version.py
    * mcest/_version.py

    Returns
    -------
    :class:`str`
        Name of a directory that can or does contain version information.

    Raises
    ------
    IOError
        If no valid directory can be found.
    """
    packagename = 'mcest'
    setup_dir = abspath(os.path.dirname(__file__))

    if isdir(join(setup_dir, 'python', packagename)):
        version_dir = join(setup_dir, 'python', packagename)
    elif isdir(join(setup_dir, packagename)):
        version_dir = join(setup_dir, packagename)
    else:
        raise IOError('Could not find a directory containing version information!')
    return version_dir





# Begin setup
#
setup_keywords = dict()
#
setup_keywords['name'] = 'mcest'
setup_keywords['description'] = 'Monte Carlo estimators for integrals, pi and sphere volumes'
setup_keywords['license'] = 'BSD 3-clause License'
setup_keywords['version'] = get_version()
setup_keywords['provides'] = [setup_keywords['name']]
setup_keywords['python_requires'] = '>=3.8'
setup_keywords['zip_safe'] = False
setup_keywords['packages'] = find_packages('python')
setup_keywords['package_dir'] = {'': 'python'}
setup_keywords['test_suite'] = 'mcest.test.mcest_test_suite.mcest_test_suite'
#
# Requirements
#
requires = []
with open(join(abspath(os.path.dirname(__file__)), 'requirements.txt'), 'r') as f:
    for line in f:
        if line.strip():
            requires.append(line.strip())
setup_keywords['install_requires'] = requires
setup_keywords['extras_require'] = {'test': ['pytest']}
#
# Use README.md as a long_description.
#
setup_keywords['long_description'] = ''
if os.path.exists('README.md'):
    with open('README.md') as readme:
        setup_keywords['long_description'] = readme.read()
setup_keywords['long_description_content_type'] = 'text/markdown'
#
# Command line programs
#
setup_keywords['entry_points'] = {'console_scripts': ['mcest-pi = mcest.cli:pi_main',
                                                      'mcest-integrate = mcest.cli:integrate_main',
                                                      'mcest-spheres = mcest.cli:spheres_main']}
#
# Run the setup command
#
setup(**setup_keywords)
