"""
Engineering notation for displaying electrical quantities.

Formatting only: values are expected in base SI units (Ohms, volts,
amperes, ...) and are never converted between units.
"""

_SI_PREFIXES = [
    (1e-15, 'f'),
    (1e-12, 'p'),
    (1e-9,  'n'),
    (1e-6,  'µ'),
    (1e-3,  'm'),
    (1e0,   ''),
    (1e3,   'k'),
    (1e6,   'M'),
    (1e9,   'G'),
]


def engineering_notation(value: float, unit: str = '', precision: int = 3) -> str:
    """
    Format a value with an SI prefix.

    Examples:
        engineering_notation(4700, 'Ω')    → '4.7kΩ'
        engineering_notation(0.015, 'A')   → '15mA'
        engineering_notation(2.5e-6, 'S')  → '2.5µS'
        engineering_notation(0, 'Ω')       → '0Ω'
    """
    if value == 0:
        return f"0{unit}"
    if value != value or value in (float('inf'), float('-inf')):
        return f"{value}{unit}"

    abs_value = abs(value)
    sign = '-' if value < 0 else ''

    for i in range(len(_SI_PREFIXES) - 1, -1, -1):
        scale, prefix = _SI_PREFIXES[i]
        if abs_value >= scale:
            # Rounding can carry into the next prefix (999.9k → 1M)
            rounded = float(f"{abs_value / scale:.{precision}g}")
            if rounded >= 1000 and i + 1 < len(_SI_PREFIXES):
                scale, prefix = _SI_PREFIXES[i + 1]
                rounded = float(f"{abs_value / scale:.{precision}g}")
            if rounded == int(rounded):
                return f"{sign}{int(rounded)}{prefix}{unit}"
            return f"{sign}{rounded:.{precision}g}{prefix}{unit}"

    # Below the smallest prefix
    return f"{value:.{precision}g}{unit}"
