"""
Arm Configuration Package
=========================

Centralized configuration for the planar FABRIK solver.
All parameters are organized into logical modules:

- physical: Base anchor, reference direction, default arm geometry
- motion: FABRIK iteration, precision and initialization parameters
- system: Logging and command line output settings

Usage:
    from arm_config import physical, motion, system

    # Or import specific values
    from arm_config.motion import FABRIK_PRECISION
    from arm_config.system import LOG_FORMAT
"""

# Import all submodules for convenient access
from . import physical
from . import motion
from . import system

__version__ = '1.0.0'
__all__ = ['physical', 'motion', 'system']
