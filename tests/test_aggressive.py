"""Tests for the opt-in lossy passes."""

import pytest

from lottieslim.kernel.aggressive import (
    collapse_transforms,
    is_identity_value,
    remove_effects,
    remove_expressions,
)


def test_remove_expressions_drops_string_scripts_everywhere():
    doc = {"layers": [{"ks": {"r": {"a": 0, "k": 0, "x": "time * 90"}}, "x": 5}]}
    assert remove_expressions(doc) == {"layers": [{"ks": {"r": {"a": 0, "k": 0}}, "x": 5}]}


def test_remove_effects_drops_whole_stacks():
    doc = {"layers": [{"ty": 4, "ef": [{"ty": 29, "ef": [{"v": {"k": 10}}]}]}, {"ef": "not a stack"}]}
    assert remove_effects(doc) == {"layers": [{"ty": 4}, {"ef": "not a stack"}]}


@pytest.mark.parametrize("name,value", [
    ("o", 100), ("o", [100]),
    ("r", 0), ("r", [0]),
    ("p", [0, 0]), ("p", [0, 0, 0]),
    ("a", [0, 0, 0]),
    ("s", [100, 100]), ("s", [100, 100, 100]),
])
def test_identity_values(name, value):
    assert is_identity_value(name, value)


@pytest.mark.parametrize("name,value", [
    ("o", 50), ("o", [100, 100]), ("r", 90), ("p", [1, 0]),
    ("p", 0), ("s", [100, 50]), ("s", 100), ("sk", 0), ("o", True),
])
def test_non_identity_values(name, value):
    assert not is_identity_value(name, value)


class TestCollapseTransforms:
    def test_drops_static_identity_properties(self):
        layer = {"ks": {
            "o": {"a": 0, "k": 100},
            "r": {"k": 0},
            "p": {"a": 0, "k": [256, 256, 0]},
            "a": {"a": 0, "k": [0, 0, 0]},
            "s": {"a": 0, "k": [100, 100, 100]},
        }}
        assert collapse_transforms(layer) == {"ks": {"p": {"a": 0, "k": [256, 256, 0]}}}

    def test_animated_properties_kept(self):
        layer = {"ks": {"o": {"a": 1, "k": [{"t": 0, "s": [100]}, {"t": 10, "s": [100]}]}}}
        assert collapse_transforms(layer) == layer

    def test_applies_inside_nested_layers(self):
        doc = {"assets": [{"id": "c", "layers": [{"ks": {"o": {"a": 0, "k": 100}, "r": {"a": 0, "k": 15}}}]}]}
        assert collapse_transforms(doc) == {"assets": [{"id": "c", "layers": [{"ks": {"r": {"a": 0, "k": 15}}}]}]}

    def test_only_transform_objects_affected(self):
        shape = {"ty": "rc", "r": {"a": 0, "k": 0}, "s": {"a": 0, "k": [100, 100]}}
        assert collapse_transforms({"shapes": [shape]}) == {"shapes": [shape]}
