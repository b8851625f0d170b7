"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed lottieslim package.
"""

import copy

import pytest


MINIMAL_ANIMATION = {
    "v": "5.5.0",
    "fr": 30,
    "ip": 0,
    "op": 30,
    "w": 100,
    "h": 100,
    "layers": [],
    "assets": [],
}


def make_animation(**fields):
    """Build a minimal valid animation document with extra top-level fields."""
    document = copy.deepcopy(MINIMAL_ANIMATION)
    document.update(fields)
    return document


@pytest.fixture
def animation():
    """A fresh minimal valid animation document."""
    return make_animation()


@pytest.fixture
def rich_animation():
    """A document exercising every pass: metadata, hidden layers, assets, groups, keyframes."""
    return make_animation(
        nm="Scene",
        ddd=0,
        meta={"g": "LottieFiles AE 3.0.0", "a": "someone"},
        markers=[{"tm": 0, "cm": "intro", "dr": 10}],
        fonts={"list": []},
        author="someone",
        assets=[
            {"id": "comp_0", "nm": "Precomp", "layers": [
                {"ty": 2, "refId": "img_0", "nm": "Image", "ind": 1},
                {"ty": 3, "nm": "Null in precomp", "refId": "img_2"},
            ]},
            {"id": "img_0", "w": 10, "h": 10, "u": "images/", "p": "img_0.png", "e": 0},
            {"id": "img_1", "w": 10, "h": 10, "u": "images/", "p": "img_1.png", "e": 0},
            {"id": "img_2", "w": 10, "h": 10, "u": "images/", "p": "img_2.png", "e": 0},
        ],
        layers=[
            {
                "ddd": 0, "ind": 1, "ty": 0, "nm": "Precomp layer", "refId": "comp_0",
                "sr": 1, "ao": 0, "bm": 0, "hd": False,
                "ks": {
                    "o": {"a": 0, "k": 100, "ix": 11},
                    "r": {"a": 0, "k": 0, "ix": 10},
                    "p": {"a": 0, "k": [50.123456, 50.987654, 0], "ix": 2},
                    "a": {"a": 0, "k": [0, 0, 0], "ix": 1},
                    "s": {"a": 0, "k": [100, 100, 100], "ix": 6},
                },
                "ip": 0, "op": 30, "st": 0,
            },
            {
                "ddd": 0, "ind": 2, "ty": 4, "nm": "Shape layer", "sr": 1,
                "ks": {
                    "o": {"a": 1, "k": [
                        {"t": 0, "s": [0], "i": {"x": [0.5], "y": [0.5]}, "o": {"x": [0.167], "y": [0.167]}},
                        {"t": 30, "s": [100]},
                    ], "ix": 11},
                    "r": {"a": 1, "k": [
                        {"t": 0, "s": [45], "i": {"x": [0.833], "y": [0.833]}, "o": {"x": [0.505], "y": [0.498]}},
                        {"t": 30, "s": [45]},
                    ], "x": "loopOut('cycle')"},
                },
                "ef": [{"ty": 29, "nm": "Gaussian Blur", "ef": []}],
                "shapes": [
                    {"ty": "gr", "nm": "Empty group", "it": [{"ty": "tr"}]},
                    {"ty": "gr", "nm": "Real group", "it": [
                        {"ty": "rc", "s": {"a": 0, "k": [20, 20]}, "p": {"a": 0, "k": [0, 0]}, "r": {"a": 0, "k": 0}},
                        {"ty": "fl", "c": {"a": 0, "k": [0.2, 0.4, 0.6, 1]}, "o": {"a": 0, "k": 100}},
                        {"ty": "tr", "p": {"a": 0, "k": [0, 0]}},
                    ]},
                ],
                "ip": 0, "op": 30, "st": 0,
            },
            {"ddd": 0, "ind": 3, "ty": 3, "nm": "Null controller", "refId": "img_1"},
            {"ddd": 0, "ind": 4, "ty": 4, "nm": "Hidden", "hd": True, "refId": "img_1", "shapes": []},
        ],
    )


@pytest.fixture
def make_doc():
    """Factory fixture: make_doc(layers=[...]) builds a valid document."""
    return make_animation
