"""Tests for the Sequence generator."""

import pytest

from dataknobs_factory import Factory, Sequence, ValidationError, configure, sequence
from dataknobs_factory.testing import CountingRandom, ScriptedRandom


def ids(resources):
    return [resource["id"] for resource in resources]


def test_values_in_sequence(resource_factory):
    resources = resource_factory.override({"id": sequence([5, 0, 1])}).create(5)
    assert ids(resources) == [5, 0, 1, 5, 0]


def test_first_item_for_single_creation(resource_factory):
    resource = resource_factory.override({"id": sequence([10, 2])}).create()
    assert resource == {"id": 10}


def test_fallback_when_batch_is_smaller(resource_factory):
    resources = resource_factory.override({"id": sequence([5, 0, 1], fallback=100)}).create(2)
    assert resources == [{"id": 100}, {"id": 100}]


def test_fallback_unused_when_batch_is_large_enough(resource_factory):
    resources = resource_factory.override({"id": sequence([5, 0, 1], fallback=100)}).create(3)
    assert ids(resources) == [5, 0, 1]


@pytest.mark.parametrize("fallback", [0, "", False])
def test_falsy_fallback_is_honored(resource_factory, fallback):
    resources = resource_factory.override(
        {"id": sequence([5, 0, 1], fallback=fallback)}
    ).create(2)
    assert ids(resources) == [fallback, fallback]


def test_none_fallback_means_no_fallback(resource_factory):
    resources = resource_factory.override(
        {"id": sequence([5, 0, 1], fallback=None)}
    ).create(2)
    assert ids(resources) == [5, 0]


def test_fallback_is_never_called(resource_factory):
    def fallback(index):
        raise AssertionError("fallback must not be called")

    resource = resource_factory.override(
        {"id": sequence([1, 2], fallback=fallback)}
    ).create()
    assert resource["id"] is fallback


def test_randomize_draws(resource_factory, counting_rng):
    """Test that the shuffle uses one draw per swap and happens once."""
    seq = sequence([5, 0, 1, 5], randomize_if_not_enough_items=True, rng=counting_rng)
    resources = resource_factory.override({"id": seq}).create(3)

    assert counting_rng.calls == 3
    assert all(value in (5, 0, 1) for value in ids(resources))


def test_randomized_cache_is_reused(resource_factory):
    rng = ScriptedRandom([0.0])
    seq = sequence([1, 2, 3], randomize_if_not_enough_items=True, rng=rng)
    factory = resource_factory.override({"id": seq})

    first = ids(factory.create(3))
    second = ids(factory.create(3))

    # [1, 2, 3] -> swap(2, 0) -> [3, 2, 1] -> swap(1, 0) -> [2, 3, 1]
    assert first == [2, 3, 1]
    assert second == first
    assert rng.calls == 2


def test_randomized_index_wraps_around(resource_factory):
    seq = sequence([1, 2, 3], randomize_if_not_enough_items=True, rng=ScriptedRandom([0.0]))
    resources = resource_factory.override({"id": seq}).create(5)
    assert ids(resources) == [2, 3, 1, 2, 3]


def test_randomized_covers_each_value_once(resource_factory, counting_rng):
    values = list(range(10))
    seq = sequence(values, randomize_if_not_enough_items=True, rng=counting_rng)
    resources = resource_factory.override({"id": seq}).create(10)
    assert sorted(ids(resources)) == values


def test_fallback_takes_precedence_over_randomize(resource_factory, counting_rng):
    seq = sequence(
        [1, 2, 3], fallback=-1, randomize_if_not_enough_items=True, rng=counting_rng
    )
    resources = resource_factory.override({"id": seq}).create(2)
    assert ids(resources) == [-1, -1]
    assert counting_rng.calls == 0


def test_randomize_default_from_settings():
    configure(randomize_if_not_enough_items=True)
    assert sequence([1, 2]).randomize_if_not_enough_items is True
    assert sequence([1, 2], randomize_if_not_enough_items=False).randomize_if_not_enough_items is False


def test_index_passed_to_function(resource_factory):
    resources = resource_factory.override({"id": sequence(lambda index: index)}).create(3)
    assert ids(resources) == [0, 1, 2]


def test_index_passed_to_list_of_functions(resource_factory):
    resources = resource_factory.override(
        {"id": sequence([lambda index: index, lambda index: index * 100, -5])}
    ).create(3)
    assert ids(resources) == [0, 100, -5]


class TestSequenceConstruction:
    """Test Sequence construction."""

    def test_single_value_normalized(self):
        assert Sequence(7).values == [7]

    def test_tuple_values(self):
        assert Sequence((1, 2)).values == [1, 2]

    def test_empty_sequence_rejected(self):
        with pytest.raises(ValidationError):
            Sequence([])

    def test_evaluate_directly(self):
        seq = Sequence(["a", "b"])
        assert [seq.evaluate(index, 4) for index in range(4)] == ["a", "b", "a", "b"]

    def test_has_fallback(self):
        assert not Sequence([1]).has_fallback
        assert not Sequence([1], fallback=None).has_fallback
        assert Sequence([1], fallback=0).has_fallback

    def test_class_entries_are_not_called(self):
        class DogFactory(Factory):
            define = {"name": "Cooper"}

        seq = Sequence([DogFactory, int])
        assert [seq.evaluate(index, 2) for index in range(2)] == [DogFactory, int]

    def test_values_not_shuffled_in_place(self):
        values = [1, 2, 3, 4]
        seq = Sequence(values, randomize_if_not_enough_items=True, rng=CountingRandom(7))
        seq.evaluate(0, 4)
        assert seq.values == [1, 2, 3, 4]
