"""
Module containing Audioscope version.

This module is the authority regarding the Audioscope version. Any
other module that needs the Audioscope version should obtain it from
this module.
"""


# The `setup.py` file at the root of the repository loads this module
# to obtain the package version.
__version__ = '0.2.0'
