import logging
import random
import typing

import pytest

import conftest
import probability_resolver.walker
import probability_resolver.weighted_graph


def test_resolves_single_leaf () -> None:

	"""A start node pointing only at a non-node key resolves to that key."""

	graph = {"first": "n1", "n1": {"leaf": 1}}

	assert probability_resolver.walker.resolve(graph, random.Random(1)) == "leaf"


def test_follows_nested_nodes () -> None:

	"""Keys naming other nodes are followed until a terminal value."""

	graph = {
		"first": "chest",
		"chest": {"gold": 1, "gems": 1},
		"gems": {"ruby": 1, "emerald": 3},
	}

	# Draw 2 of 2 picks "gems", then draw 4 of 4 picks "emerald".
	rng = conftest.ScriptedRandom([2, 4])
	result = probability_resolver.walker.walk(graph, rng)

	assert result.value == "emerald"
	assert result.path == ["chest", "gems"]
	assert result.steps == 1
	assert result.draws == 2
	assert not result.exhausted


def test_terminal_on_first_draw () -> None:

	"""A walk that lands on a terminal immediately makes no follow-up draws."""

	graph = {"first": "chest", "chest": {"gold": 1, "gems": 1}, "gems": {"ruby": 1}}

	result = probability_resolver.walker.walk(graph, conftest.ScriptedRandom([1]))

	assert result.value == "gold"
	assert result.path == ["chest"]
	assert result.steps == 0


def test_first_entry_is_not_a_node () -> None:

	"""Drawing the key ``first`` ends the walk, since ``first`` is not a node."""

	graph = {"first": "n1", "n1": {"first": 1}}

	assert probability_resolver.walker.resolve(graph, random.Random(3)) == "first"


def test_cycle_is_exhausted_after_101_draws (cycle_graph: typing.Dict[str, typing.Any]) -> None:

	"""A walk that never leaves the graph stops after the initial draw plus 100 more."""

	rng = conftest.ScriptedRandom(default=1)
	result = probability_resolver.walker.walk(cycle_graph, rng)

	assert result.exhausted
	assert result.value is None
	assert result.steps == 100
	assert len(rng.randint_calls) == 101
	assert len(result.path) == 101


def test_resolve_returns_none_when_exhausted (cycle_graph: typing.Dict[str, typing.Any]) -> None:

	"""resolve() reports exhaustion as None."""

	assert probability_resolver.walker.resolve(cycle_graph, random.Random(5)) is None


def test_exhaustion_is_logged (cycle_graph: typing.Dict[str, typing.Any], caplog: pytest.LogCaptureFixture) -> None:

	"""Exhausted walks log a warning."""

	with caplog.at_level(logging.WARNING, logger="probability_resolver.walker"):
		probability_resolver.walker.walk(cycle_graph, random.Random(5))

	assert "exhausted" in caplog.text


def test_custom_max_steps (cycle_graph: typing.Dict[str, typing.Any]) -> None:

	"""The step bound is configurable."""

	rng = conftest.ScriptedRandom(default=1)
	result = probability_resolver.walker.walk(cycle_graph, rng, max_steps=3)

	assert result.exhausted
	assert len(rng.randint_calls) == 4


def test_zero_max_steps_allows_direct_terminal () -> None:

	"""With no follow-up draws allowed, only a direct terminal resolves."""

	graph = {"first": "n1", "n1": {"leaf": 1}}

	assert probability_resolver.walker.walk(graph, random.Random(1), max_steps=0).value == "leaf"


def test_negative_max_steps_raises () -> None:

	"""A negative step bound is rejected."""

	with pytest.raises(ValueError):
		probability_resolver.walker.walk({"first": "n1", "n1": {"leaf": 1}}, random.Random(1), max_steps=-1)


def test_missing_start_raises () -> None:

	"""A graph whose start node does not exist cannot be walked."""

	with pytest.raises(probability_resolver.weighted_graph.UnknownNodeError):
		probability_resolver.walker.resolve({"first": "nowhere", "n1": {"leaf": 1}})


def test_empty_node_mid_walk_ends_with_none () -> None:

	"""Reaching an empty node ends the walk without a value."""

	graph = {"first": "n1", "n1": {"n2": 1}, "n2": {}}
	result = probability_resolver.walker.walk(graph, random.Random(1))

	assert result.value is None
	assert not result.exhausted
	assert result.path == ["n1", "n2"]


def test_zero_sum_node_mid_walk_raises () -> None:

	"""A reachable node with no usable weight raises."""

	graph = {"first": "n1", "n1": {"n2": 1}, "n2": {"leaf": 0}}

	with pytest.raises(probability_resolver.weighted_graph.InvalidNodeError):
		probability_resolver.walker.resolve(graph, random.Random(1))


def test_graph_is_not_mutated () -> None:

	"""Walking reads the graph in place without changing it."""

	graph = {"first": "n1", "n1": {"n2": 2, "leaf": 1}, "n2": {"end": 1}}
	snapshot = {"first": "n1", "n1": {"n2": 2, "leaf": 1}, "n2": {"end": 1}}

	for _ in range(10):
		probability_resolver.walker.resolve(graph, random.Random(2))

	assert graph == snapshot
