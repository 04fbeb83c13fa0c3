"""
Basic electrical theory as plain descriptive records.

Nothing here computes circuits; the records give names (and a few derived
properties) to the ideas the calculators build on: atoms and charge,
voltage, current, resistance, conductance and the units they are measured in.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple, Union

from electrics.notation import engineering_notation


# --- Physics: the foundations ---

@dataclass(frozen=True)
class Proton:
    """Resides in the nucleus and carries a positive charge.

    The number of protons is an element's atomic number.
    """
    charge: int = 1


@dataclass(frozen=True)
class Electron:
    """Carries a negative charge. Electrons not bound to an atom are free electrons."""
    charge: int = -1


@dataclass
class Nucleus:
    protons: List[Proton] = field(default_factory=list)
    electrons: List[Electron] = field(default_factory=list)


@dataclass
class Atom:
    """
    The primary building block of matter.

    Left alone an atom is electrically neutral: it has as many electrons
    as protons. An atom that loses electrons has a net positive charge,
    one that gains electrons a net negative charge. Charged atoms (and
    molecules) are ions.
    """
    nucleus: Nucleus

    @property
    def charge(self) -> int:
        return (sum(p.charge for p in self.nucleus.protons)
                + sum(e.charge for e in self.nucleus.electrons))

    @property
    def is_ion(self) -> bool:
        return self.charge != 0


@dataclass
class Element:
    """A type of atom identified by its number of protons (iron, oxygen, silicon, ...)."""
    protons: List[Proton] = field(default_factory=list)
    electrons: List[Electron] = field(default_factory=list)

    @property
    def atomic_number(self) -> int:
        return len(self.protons)


@dataclass
class Molecule:
    """Two or more atoms bonded together and acting as a single particle."""
    bonding: List[Atom] = field(default_factory=list)


# --- Electricity ---
# Any piece of matter with a net charge is electrically charged. Like
# charges repel and opposite charges attract; the electromotive force (EMF)
# pushes charge from the positive region toward the negative one, and is
# always measured between two points.

class Voltage:
    """Strength of the EMF, the difference in electrical potential between two points.

    Devices that produce a voltage (batteries, generators) are voltage sources.
    """


class Current:
    """
    Movement of electrical charge along a conducting path.

    Conductors (copper, aluminium) pass current easily, insulators do not,
    and semiconductors (silicon, germanium) sit in between. Electronic
    current follows the electrons toward positive voltage; conventional
    current, used in nearly all literature, flows the other way.
    """


class Circuit:
    """
    Any conducting path between two points at different voltages.

    An open circuit has its desired path interrupted (broken wire, switch);
    a short circuit lets current flow directly between the two points.
    A series circuit has a single current path, identical at every point.
    A parallel circuit offers several paths that share the same voltage.
    A branch is one two-terminal element, a node joins two or more
    branches, and a loop is any closed path.
    """


class DirectCurrent:
    """Current flowing in one direction only."""


class AlternatingCurrent:
    """Current (and voltage) that reverses direction, usually periodically."""


class Resistance:
    """
    Energy loss from moving charges colliding with the conductor's atoms, in Ohms (Ω).

    Resistance grows with the conductor's length and falls with its
    cross-sectional area. The material's own contribution is its
    resistivity (ρ); see RELATIVE_RESISTIVITY.
    """


class Conductance:
    """Reciprocal of resistance (G = 1/R), in siemens (S). 1 MΩ is 1 µS."""


class Resistor:
    """A packaged amount of resistance made into a single component."""


class OhmsLaw:
    """R = E / I. One Ohm lets one ampere flow under one volt. See electrics.laws.ohms_law."""


class KirchhoffCurrentLaw:
    """Currents into a node balance the currents out of it. See electrics.laws.satisfies_kcl."""


class KirchhoffVoltageLaw:
    """Voltage drops around a closed loop sum to zero. See electrics.laws.satisfies_kvl."""


# Resistivity relative to annealed copper; ranges are (low, high).
RELATIVE_RESISTIVITY: Dict[str, Union[float, Tuple[float, float]]] = {
    'aluminum (pure)': 1.60,
    'brass': (3.7, 4.90),
    'cadmium': 4.40,
    'chromium': 8.10,
    'copper (hard-drawn)': 1.03,
    'copper (annealed)': 1.00,
    'gold': 1.40,
    'iron (pure)': 5.68,
    'lead': 12.80,
    'nickel': 5.10,
    'phosphor bronze': (2.8, 5.40),
    'silver': 0.94,
    'steel': (7.6, 12.70),
    'tin': 6.70,
    'zinc': 3.40,
}


# --- Units and their namesakes ---

class Units(Enum):
    #          symbol  quantity       namesake
    AMPERE = ('A', 'current', 'André-Marie Ampère (1775-1836)')
    COULOMB = ('C', 'charge', 'Charles-Augustin de Coulomb (1736-1806)')
    FARAD = ('F', 'capacitance', 'Michael Faraday (1791-1867)')
    HENRY = ('H', 'inductance', 'Joseph Henry (1797-1878)')
    HERTZ = ('Hz', 'frequency', 'Heinrich Hertz (1857-1894)')
    OHM = ('Ω', 'resistance', 'Georg Simon Ohm (1789-1854)')
    WATT = ('W', 'power', 'James Watt (1736-1819)')
    VOLT = ('V', 'voltage', 'Alessandro Volta (1745-1827)')

    @property
    def symbol(self) -> str:
        return self.value[0]

    @property
    def quantity(self) -> str:
        return self.value[1]

    @property
    def namesake(self) -> str:
        return self.value[2]

    def format(self, value: float, precision: int = 3) -> str:
        """Display a value in this unit with an SI prefix, e.g. Units.OHM.format(4700) → '4.7kΩ'."""
        return engineering_notation(value, self.symbol, precision)
