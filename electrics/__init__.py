"""
Electrics

Basic electrical theory and the equivalent resistance of series and
parallel resistor networks.

All math is deterministic: for a given input order the results are
bit-for-bit reproducible.
"""

from electrics.config import Policy, Settings, get_settings
from electrics.resistance import InvalidInput, series, parallel, conductance
from electrics.laws import (
    ohms_law, power, kcl_residual, kvl_residual, satisfies_kcl, satisfies_kvl,
    voltage_divider, current_divider,
)
from electrics.notation import engineering_notation
from electrics.theory import Units, RELATIVE_RESISTIVITY
from electrics.logging_config import configure_logging

__version__ = "0.1.0"
