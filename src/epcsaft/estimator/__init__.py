"""Experimental data sets compared against an external property model."""

from .viscosity import Viscosity, ViscosityModel

__all__ = ["Viscosity", "ViscosityModel"]
