"""
Tests for Ohm's law, power, Kirchhoff checks and the divider helpers.
"""

import math

import pytest

from electrics.laws import (
    current_divider,
    kcl_residual,
    kvl_residual,
    ohms_law,
    power,
    satisfies_kcl,
    satisfies_kvl,
    voltage_divider,
)
from electrics.resistance import InvalidInput


class TestOhmsLaw:
    """E = I·R in all three arrangements."""

    def test_solve_current(self):
        result = ohms_law(voltage=12.0, resistance=4.0)
        assert result == {'voltage': 12.0, 'current': 3.0, 'resistance': 4.0}

    def test_solve_voltage(self):
        assert ohms_law(current=2.0, resistance=5.0)['voltage'] == 10.0

    def test_solve_resistance(self):
        assert ohms_law(voltage=9.0, current=3.0)['resistance'] == 3.0

    def test_one_ohm_one_amp_one_volt(self):
        assert ohms_law(voltage=1.0, current=1.0)['resistance'] == 1.0

    def test_milliamps_must_be_converted_first(self):
        """15 mA through 1 kΩ is 15 V only once expressed in amperes."""
        assert ohms_law(current=0.015, resistance=1000.0)['voltage'] == pytest.approx(15.0)

    def test_integers_accepted(self):
        result = ohms_law(voltage=10, current=2)
        assert result['resistance'] == 5.0
        assert isinstance(result['resistance'], float)

    def test_single_quantity_raises(self):
        with pytest.raises(ValueError):
            ohms_law(voltage=12.0)

    def test_all_three_raises(self):
        with pytest.raises(ValueError):
            ohms_law(voltage=12.0, current=1.0, resistance=12.0)

    def test_zero_resistance_raises(self):
        with pytest.raises(ValueError):
            ohms_law(voltage=12.0, resistance=0.0)

    def test_zero_current_raises(self):
        with pytest.raises(ValueError):
            ohms_law(voltage=12.0, current=0.0)


class TestPower:
    """P = E·I = I²R = E²/R."""

    def test_from_voltage_and_current(self):
        assert power(voltage=12.0, current=2.0) == 24.0

    def test_from_current_and_resistance(self):
        assert power(current=2.0, resistance=5.0) == 20.0

    def test_from_voltage_and_resistance(self):
        assert power(voltage=10.0, resistance=5.0) == 20.0

    def test_all_forms_agree(self):
        v = ohms_law(current=0.5, resistance=220.0)
        p1 = power(voltage=v['voltage'], current=v['current'])
        p2 = power(current=v['current'], resistance=v['resistance'])
        p3 = power(voltage=v['voltage'], resistance=v['resistance'])
        assert p1 == pytest.approx(p2)
        assert p2 == pytest.approx(p3)

    def test_wrong_number_of_quantities(self):
        with pytest.raises(ValueError):
            power(voltage=5.0)

    def test_zero_resistance_raises(self):
        with pytest.raises(ValueError):
            power(voltage=5.0, resistance=0.0)


class TestKirchhoff:
    def test_kcl_balanced_node(self):
        assert kcl_residual([1.0, 2.0], [3.0]) == 0.0
        assert satisfies_kcl([0.5, 0.25], [0.75])

    def test_kcl_unbalanced_node(self):
        assert kcl_residual([1.0], [0.9]) == pytest.approx(0.1)
        assert not satisfies_kcl([1.0], [0.9])

    def test_kcl_tolerance(self):
        assert satisfies_kcl([0.1, 0.2], [0.3])
        assert satisfies_kcl([1.0], [0.999], abs_tol=1e-2)

    def test_kvl_closed_loop(self):
        assert kvl_residual([12.0, -4.0, -8.0]) == 0.0
        assert satisfies_kvl([12.0, -4.0, -8.0])

    def test_kvl_open_loop(self):
        assert not satisfies_kvl([12.0, -4.0])

    def test_accepts_generators(self):
        assert satisfies_kvl(v for v in [5.0, -5.0])


class TestVoltageDivider:
    def test_drops(self):
        assert voltage_divider(12.0, [4.0, 8.0]) == [4.0, 8.0]

    def test_drops_satisfy_kvl(self):
        drops = voltage_divider(9.0, [1000.0, 2200.0, 4700.0])
        assert satisfies_kvl([9.0] + [-d for d in drops])

    def test_single_resistor_takes_full_voltage(self):
        assert voltage_divider(5.0, [330.0]) == [pytest.approx(5.0)]

    def test_strict_rejects_zero(self):
        with pytest.raises(InvalidInput):
            voltage_divider(5.0, [0.0, 10.0])

    def test_empty_string(self):
        assert voltage_divider(5.0, [], policy="permissive") == []


class TestCurrentDivider:
    def test_branch_currents(self):
        currents = current_divider(3.0, [6.0, 3.0])
        assert currents == [pytest.approx(1.0), pytest.approx(2.0)]

    def test_currents_satisfy_kcl(self):
        currents = current_divider(0.1, [5.0, 20.0, 8.0])
        assert satisfies_kcl([0.1], currents)

    def test_strict_rejects_zero(self):
        with pytest.raises(InvalidInput):
            current_divider(1.0, [0.0, 5.0])

    def test_empty_group_rejected(self):
        with pytest.raises(InvalidInput):
            current_divider(1.0, [])

    def test_permissive_short_circuit(self):
        currents = current_divider(1.0, [0.0, 5.0], policy="permissive")
        assert math.isnan(currents[0])
        assert currents[1] == 0.0
