"""Tests for the ManySubFactories generator."""

import pytest

from dataknobs_factory import Factory, ManySubFactories, ValidationError, configure, many, sequence
from dataknobs_factory.testing import ScriptedRandom


class ChildFactory(Factory):
    define = {
        "id": 0,
    }


class ResourceFactory(Factory):
    define = {
        "id": 0,
        "children": many(ChildFactory),
    }


def test_default_range():
    for _ in range(50):
        length = len(ResourceFactory().create()["children"])
        assert 1 <= length <= 10


def test_custom_range():
    resource = ResourceFactory().override(
        {"children": many(ChildFactory, min=25, max=25)}
    ).create()
    assert len(resource["children"]) == 25
    assert resource["children"][0] == {"id": 0}


def test_fixed_range_for_repeated_evaluations():
    generator = many(ChildFactory, min=3, max=3)
    assert all(len(generator.evaluate()) == 3 for _ in range(20))


def test_length_drawn_per_item():
    """Test that items in one batch get independently drawn lengths."""
    rng = ScriptedRandom([0.0, 0.99])
    resources = ResourceFactory().override(
        {"children": many(ChildFactory, min=1, max=4, rng=rng)}
    ).create(4)
    assert [len(resource["children"]) for resource in resources] == [1, 4, 1, 4]


def test_zero_length_allowed():
    generator = many(ChildFactory, min=0, max=0)
    assert generator.evaluate() == []


def test_nested_batch_uses_index():
    """Test that nested items are created as one batch with their own indexes."""

    class CountedFactory(Factory):
        define = {
            "position": sequence(lambda index: index),
        }

    generator = many(CountedFactory, min=4, max=4)
    assert generator.evaluate() == [{"position": i} for i in range(4)]


def test_nested_factory_built_once():
    built = []

    class TrackedFactory(Factory):
        define = {"id": 1}

        def __init__(self):
            built.append(self)
            super().__init__()

    generator = ManySubFactories(TrackedFactory, min=1, max=2)
    generator.evaluate()
    generator.evaluate()
    assert len(built) == 1
    assert generator.object is built[0]


def test_defaults_from_settings():
    configure(many_min=2, many_max=2)
    generator = many(ChildFactory)
    assert (generator.min, generator.max) == (2, 2)
    assert len(generator.evaluate()) == 2


def test_partial_bounds_use_settings():
    generator = many(ChildFactory, max=15)
    assert (generator.min, generator.max) == (1, 15)


class TestManyValidation:
    """Test rejected ranges."""

    def test_min_greater_than_max(self):
        with pytest.raises(ValidationError) as exc_info:
            many(ChildFactory, min=5, max=2)
        assert exc_info.value.context == {"min": 5, "max": 2}

    def test_negative_min(self):
        with pytest.raises(ValidationError):
            many(ChildFactory, min=-1, max=2)
