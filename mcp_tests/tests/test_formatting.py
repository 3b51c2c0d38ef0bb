import json

import pytest

from core.errors import ProcessingError
from core.formatting import format_number, format_structured


def test_format_number_fixed_two_decimals():
    assert format_number(3) == "3.00"
    assert format_number(12.5) == "12.50"
    assert format_number(0.333333) == "0.33"


@pytest.mark.parametrize("value", [None, "3", True, [1]])
def test_format_number_rejects_non_numeric(value):
    with pytest.raises(ProcessingError):
        format_number(value)


def test_format_structured_is_indented_json():
    out = format_structured(["A", "B"])
    assert out == '[\n  "A",\n  "B"\n]'
    assert json.loads(out) == ["A", "B"]


def test_format_structured_boolean():
    assert format_structured(True) == "true"


class FakeConfiguration:
    def __init__(self, selected):
        self._selected = selected

    def get_selected_elements(self):
        return list(self._selected)


class FakeFeature:
    def __init__(self, name):
        self.name = name


def test_format_structured_engine_objects():
    value = [FakeConfiguration(["Root", "B", "A"]), {"Y", "X"}, FakeFeature("Root")]
    assert json.loads(format_structured(value)) == [["A", "B", "Root"], ["X", "Y"], "Root"]
