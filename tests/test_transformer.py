from dataclasses import dataclass
from datetime import timedelta

import pytest

from cqlx.transformer import UNSET, Unset, unset_empty_transformer


@dataclass
class Point:
    x: int = 0
    y: int = 0


def test_unset_is_singleton():
    assert Unset() is UNSET
    assert Unset() is Unset()


def test_unset_is_falsy_and_named():
    marker = Unset()
    assert not marker
    assert repr(marker) == "UNSET"


def test_transformer_result_is_falsy_unset():
    result = unset_empty_transformer("col", 0)
    assert not result
    assert repr(result) == "UNSET"


@pytest.mark.parametrize(
    "value",
    [None, 0, 0.0, "", b"", False, timedelta(0), Point(), (0, "")],
)
def test_zero_values_are_unset(value):
    assert unset_empty_transformer("col", value) is UNSET


@pytest.mark.parametrize(
    "value",
    [1, -3, 2.5, "text", b"x", True, timedelta(seconds=1), Point(1, 0), (0, "a")],
)
def test_non_zero_values_pass_through(value):
    assert unset_empty_transformer("col", value) == value


def test_lists_and_dicts_are_kept_even_when_empty():
    empty_list = []
    empty_dict = {}
    assert unset_empty_transformer("col", empty_list) is empty_list
    assert unset_empty_transformer("col", empty_dict) is empty_dict


def test_name_does_not_matter():
    assert unset_empty_transformer("a", 0) is unset_empty_transformer("b", "")