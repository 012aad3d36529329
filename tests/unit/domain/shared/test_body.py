"""Unit tests for measures shared between calculators."""

import ast
from pathlib import Path

import pytest

import health_tools.domain as domain
from health_tools.domain.shared import ActivityLevel, calculate_bmi

DOMAIN_DIR = Path(domain.__file__).parent


def _sibling_imports(path: Path):
    """Relative imports that reach into another calculator package."""
    tree = ast.parse(path.read_text(encoding="utf-8"))
    for node in ast.walk(tree):
        if isinstance(node, ast.ImportFrom) and node.level == 2 and node.module:
            package = node.module.split(".")[0]
            if package != "shared":
                yield package


class TestSharedMeasures:
    """Test BMI and activity level shared by several calculators."""

    def test_calculate_bmi(self):
        """70 kg at 175 cm -> 22.86."""
        assert calculate_bmi(70, 175) == pytest.approx(22.857, abs=1e-3)

    def test_activity_level_is_one_type(self):
        from health_tools.domain.energy import ActivityLevel as EnergyActivityLevel
        from health_tools.domain.heart_rate.value_objects import (
            ActivityLevel as TrainingActivityLevel,
        )

        assert EnergyActivityLevel is ActivityLevel
        assert TrainingActivityLevel is ActivityLevel
        assert ActivityLevel.MODERATELY_ACTIVE.pal_multiplier() == 1.55

    def test_bmi_helpers_are_one_function(self):
        from health_tools.domain.bmi import calculate_bmi as bmi_module_helper

        assert bmi_module_helper is calculate_bmi

    def test_calculators_do_not_import_each_other(self):
        offenders = {
            f"{path.parent.name}/{path.name}": sorted(set(_sibling_imports(path)))
            for path in DOMAIN_DIR.glob("*/*.py")
            if path.parent.name != "shared"
        }

        assert {name: pkgs for name, pkgs in offenders.items() if pkgs} == {}
