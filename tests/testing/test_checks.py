"""Tests for the public testing helpers."""

from __future__ import annotations

import pytest

from class_enumerations import Enumeration
from class_enumerations.testing import assert_well_formed, check_enumeration
from tests.helpers.sample_enumerations import ALL_SAMPLES


class TestChecks:
    """Well-formed samples pass; each kind of defect is reported."""

    @pytest.mark.parametrize("enum_cls", ALL_SAMPLES, ids=lambda c: c.__name__)
    def test_samples_are_well_formed(self, enum_cls: type[Enumeration]) -> None:
        assert check_enumeration(enum_cls) == []
        assert_well_formed(enum_cls)

    def test_wrong_value_type(self) -> None:
        class Bad(Enumeration):
            OK = "ok"
            BAD = {"no": "dicts"}

        issues = check_enumeration(Bad)
        assert issues == ["BAD has a dict value; only strings and numbers are allowed"]
        assert not Bad.is_materialized()

    def test_duplicate_value(self) -> None:
        class Twice(Enumeration):
            A = 1
            B = 1.0

        with pytest.raises(AssertionError, match="B duplicates the value of A"):
            assert_well_formed(Twice)

    def test_duplicate_name(self) -> None:
        class Shouting(Enumeration):
            loud = "l"
            LOUD = "L"

        with pytest.raises(AssertionError, match="LOUD duplicates the name loud"):
            assert_well_formed(Shouting)
