"""
Sensor Parser Configuration Editor (sensorcfg)

Edits the Stellar field transformation of a sensor parser configuration.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Evaluating Stellar expressions
    - Where configurations are stored
    - How the host shell dispatches functions

Every operation takes a configuration document as text and
returns text. Nothing is kept between calls.
"""

__version__ = "0.1.0"
