"""
Equivalent resistance of series and parallel resistor networks.

Series:    R_eq = R1 + R2 + ... + Rn
Parallel:  R_eq = 1 / (1/R1 + 1/R2 + ... + 1/Rn)

In a series circuit the same current flows through every resistor, so the
voltage drops (and the resistances) add. In a parallel circuit every branch
sees the same voltage, so the conductances add and the equivalent resistance
is the reciprocal of the total conductance. Putting resistors in parallel
always gives a smaller resistance than the smallest branch.

Two input policies are supported (see electrics.config.Policy):

    strict      every value must be a finite number > 0 whose conductance
                is finite (no subnormals), and parallel()
                needs at least one value. Violations raise InvalidInput.
    permissive  any real number is accepted and the IEEE-754 result is
                returned as is (0 Ω in parallel short-circuits to 0.0,
                negative values give negative results, nan propagates).

parallel() of an empty sequence raises InvalidInput under both policies.
"""

import logging
import math
import numbers
from decimal import Decimal
from typing import Iterable, List, Optional, Union

import numpy as np

from electrics.config import Policy, get_settings

logger = logging.getLogger(__name__)

PolicyLike = Union[Policy, str, None]


class InvalidInput(ValueError):
    """A resistance value (or the sequence as a whole) was rejected.

    Attributes:
        index: Position of the offending value, None when the whole
               sequence is at fault (e.g. empty input to parallel()).
        value: The offending value, if any.
    """

    def __init__(self, message: str, index: Optional[int] = None, value=None):
        super().__init__(message)
        self.index = index
        self.value = value


def _resolve_policy(policy: PolicyLike) -> Policy:
    if policy is None:
        return get_settings().input_policy
    if isinstance(policy, str):
        return Policy(policy.lower())
    raise ValueError(f"Unknown input policy {policy!r}")


def _is_resistance_type(v) -> bool:
    return isinstance(v, (numbers.Real, Decimal)) and not isinstance(v, bool)


def _to_float(v, i: int, policy: Policy) -> float:
    try:
        return float(v)
    except OverflowError:
        if policy is Policy.STRICT:
            logger.debug("Rejected resistance at index %d (too large for a float)", i)
            raise InvalidInput(f"Resistance at index {i} must be finite, got an integer too large for a float",
                               index=i, value=v)
        return math.inf if v > 0 else -math.inf


def _as_floats(values: Iterable, policy: Policy) -> List[float]:
    """Coerce resistances to floats, enforcing the strict policy if selected."""
    items = list(values)

    for i, v in enumerate(items):
        if not _is_resistance_type(v):
            logger.debug("Rejected non-numeric resistance %r at index %d", v, i)
            raise InvalidInput(f"Resistance at index {i} must be a real number (int, float or Decimal), got {v!r}",
                               index=i, value=v)

    floats = [_to_float(v, i, policy) for i, v in enumerate(items)]
    if policy is Policy.PERMISSIVE or not floats:
        return floats

    arr = np.asarray(floats, dtype=float)
    bad = np.flatnonzero(~(np.isfinite(arr) & (arr > 0)))
    if bad.size:
        i = int(bad[0])
        reason = "finite" if not np.isfinite(arr[i]) else "positive"
        logger.debug("Rejected resistance %r at index %d (not %s)", items[i], i, reason)
        raise InvalidInput(f"Resistance at index {i} must be {reason}, got {items[i]!r}", index=i, value=items[i])

    # Subnormal resistances have no finite conductance
    with np.errstate(divide='ignore', over='ignore'):
        tiny = np.flatnonzero(~np.isfinite(1.0 / arr))
    if tiny.size:
        i = int(tiny[0])
        logger.debug("Rejected resistance %r at index %d (conductance overflows)", items[i], i)
        raise InvalidInput(f"Resistance at index {i} is too small for a finite conductance, got {items[i]!r}",
                           index=i, value=items[i])

    return floats


def series(values: Iterable[float], policy: PolicyLike = None) -> float:
    """
    Equivalent resistance of resistors connected in series (Ohms).

    Args:
        values: Resistances in Ohms, in circuit order.
        policy: 'strict' or 'permissive'; None uses the configured default.

    Returns:
        The sum of the resistances. An empty sequence gives 0.0.
    """
    resistances = _as_floats(values, _resolve_policy(policy))

    total = 0.0
    for r in resistances:
        total += r

    logger.debug("series of %d resistors = %r", len(resistances), total)
    return total


def parallel(values: Iterable[float], policy: PolicyLike = None) -> float:
    """
    Equivalent resistance of resistors connected in parallel (Ohms).

    Reciprocals are accumulated left to right in double precision and a
    single reciprocal is taken at the end, so results are reproducible for
    a given input order.

    Args:
        values: Resistances in Ohms, at least one.
        policy: 'strict' or 'permissive'; None uses the configured default.

    Returns:
        1 / sum(1 / r) over the inputs.

    Raises:
        InvalidInput: Empty input, or (strict) a non-positive, non-finite
            or subnormal resistance.
    """
    resistances = _as_floats(values, _resolve_policy(policy))
    if not resistances:
        logger.debug("Rejected empty parallel network")
        raise InvalidInput("Parallel network needs at least one resistance")

    total = np.float64(0.0)
    with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
        for r in resistances:
            total += np.float64(1.0) / np.float64(r)
        result = float(total ** -1)

    logger.debug("parallel of %d resistors = %r", len(resistances), result)
    return result


def conductance(resistance: float, policy: PolicyLike = None) -> float:
    """Conductance in siemens of a resistance in Ohms (G = 1/R)."""
    (r,) = _as_floats([resistance], _resolve_policy(policy))
    with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
        result = float(np.float64(1.0) / np.float64(r))

    logger.debug("conductance of %r Ohm = %r S", r, result)
    return result
