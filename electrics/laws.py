"""
Ohm's law, electrical power and Kirchhoff's circuit laws.

Ohm's law relates voltage E (volts), current I (amperes) and resistance
R (Ohms):

    R = E / I        E = I · R        I = E / R

Quantities must already be in volts, amperes and Ohms; a current in
milliamperes has to be expressed as a fraction of an ampere first.

Kirchhoff's current law (KCL): the currents flowing into a node balance
the currents flowing out of it, so in a series circuit the current is the
same everywhere.

Kirchhoff's voltage law (KVL): the signed voltage drops around any closed
loop sum to zero, so components in parallel share the same voltage.

The Kirchhoff helpers work on values the caller has already collected for
one node or one loop; they do not analyse circuit topology.
"""

import logging
import math
from typing import Dict, Iterable, List, Optional

import numpy as np

from electrics.resistance import PolicyLike, parallel, series, _as_floats, _resolve_policy

logger = logging.getLogger(__name__)


def _given(**quantities) -> Dict[str, float]:
    return {k: float(v) for k, v in quantities.items() if v is not None}


def ohms_law(
    voltage: Optional[float] = None,
    current: Optional[float] = None,
    resistance: Optional[float] = None,
) -> Dict[str, float]:
    """
    Solve Ohm's law for the missing quantity.

    Exactly two of voltage (V), current (A) and resistance (Ω) must be given.

    Returns:
        Dict with 'voltage', 'current' and 'resistance'.

    Raises:
        ValueError: If not exactly two quantities are given, or the
            missing one would need a division by zero.
    """
    known = _given(voltage=voltage, current=current, resistance=resistance)
    if len(known) != 2:
        raise ValueError(f"Ohm's law needs exactly two of voltage, current, resistance; got {sorted(known)}")

    if 'voltage' not in known:
        known['voltage'] = known['current'] * known['resistance']
    elif 'current' not in known:
        if known['resistance'] == 0:
            raise ValueError("Cannot solve for current with zero resistance")
        known['current'] = known['voltage'] / known['resistance']
    else:
        if known['current'] == 0:
            raise ValueError("Cannot solve for resistance with zero current")
        known['resistance'] = known['voltage'] / known['current']

    return {
        'voltage': known['voltage'],
        'current': known['current'],
        'resistance': known['resistance'],
    }


def power(
    voltage: Optional[float] = None,
    current: Optional[float] = None,
    resistance: Optional[float] = None,
) -> float:
    """
    Power in watts from any two of voltage, current and resistance.

        P = E · I = I² · R = E² / R
    """
    known = _given(voltage=voltage, current=current, resistance=resistance)
    if len(known) != 2:
        raise ValueError(f"Power needs exactly two of voltage, current, resistance; got {sorted(known)}")

    if 'resistance' not in known:
        return known['voltage'] * known['current']
    if 'voltage' not in known:
        return known['current'] ** 2 * known['resistance']
    if known['resistance'] == 0:
        raise ValueError("Cannot compute power from voltage with zero resistance")
    return known['voltage'] ** 2 / known['resistance']


def kcl_residual(currents_in: Iterable[float], currents_out: Iterable[float]) -> float:
    """Sum of currents into a node minus the sum of currents out of it."""
    return math.fsum(currents_in) - math.fsum(currents_out)


def kvl_residual(voltage_drops: Iterable[float]) -> float:
    """Sum of signed voltage drops around one closed loop."""
    return math.fsum(voltage_drops)


def satisfies_kcl(currents_in: Iterable[float], currents_out: Iterable[float], abs_tol: float = 1e-9) -> bool:
    residual = kcl_residual(currents_in, currents_out)
    if not math.isclose(residual, 0.0, abs_tol=abs_tol):
        logger.debug("KCL violated: residual %r A", residual)
        return False
    return True


def satisfies_kvl(voltage_drops: Iterable[float], abs_tol: float = 1e-9) -> bool:
    residual = kvl_residual(voltage_drops)
    if not math.isclose(residual, 0.0, abs_tol=abs_tol):
        logger.debug("KVL violated: residual %r V", residual)
        return False
    return True


def voltage_divider(source_voltage: float, resistances: Iterable[float], policy: PolicyLike = None) -> List[float]:
    """
    Voltage drop across each resistor of a series string.

    The series current is E / R_total; each drop is that current times
    the resistor. Drops sum to the source voltage (KVL).
    """
    policy = _resolve_policy(policy)
    values = _as_floats(resistances, policy)
    total = series(values, policy)

    with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
        current = np.float64(source_voltage) / np.float64(total)
        return (current * np.asarray(values, dtype=float)).tolist()


def current_divider(source_current: float, resistances: Iterable[float], policy: PolicyLike = None) -> List[float]:
    """
    Current through each branch of a parallel group.

    All branches share the voltage I · R_eq; each branch current is that
    voltage over the branch resistance. Branch currents sum to the source
    current (KCL).
    """
    policy = _resolve_policy(policy)
    values = _as_floats(resistances, policy)
    voltage = np.float64(source_current) * parallel(values, policy)

    with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
        return (voltage / np.asarray(values, dtype=float)).tolist()
