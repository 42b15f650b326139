"""
Weight graph data model and the helpers shared by selection, walking and mutation.

A weight graph is a plain ``dict`` owned by the caller. Each node maps outcome
keys to non-negative weights, and the special ``"first"`` entry names the node
a walk starts from:

```python
graph = {
	"first": "chest",
	"chest": {"gold": 5, "gem_table": 1},
	"gem_table": {"ruby": 1, "emerald": 2},
}
```
"""

import math
import numbers
import typing


FIRST_KEY = "first"

Weight = typing.Union[int, float]
WeightNode = typing.Dict[str, Weight]
WeightGraph = typing.Dict[str, typing.Any]


class InvalidNodeError (ValueError):

	"""Raised when a node's weights cannot support a weighted draw."""


class UnknownNodeError (KeyError):

	"""Raised when a walk cannot find its start node."""


def is_weight (value: typing.Any) -> bool:

	"""Return True for real numbers other than bools."""

	return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_integral (value: Weight) -> bool:

	"""Return True if the weight is a whole number (``3`` or ``3.0``)."""

	if isinstance(value, numbers.Integral):
		return True

	return float(value).is_integer()


def keys_in_order (node: typing.Mapping[str, Weight]) -> typing.List[str]:

	"""Return the node's keys in canonical (insertion) order."""

	return list(node.keys())


def total_weight (node: typing.Mapping[str, Weight]) -> Weight:

	"""
	Sum a node's weights, validating each one.

	Raises InvalidNodeError for negative, infinite, NaN or non-numeric weights.
	"""

	total: Weight = 0

	for key, weight in node.items():

		if not is_weight(weight):
			raise InvalidNodeError(f"Weight for {key!r} must be a number, got {weight!r}")

		if not math.isfinite(weight):
			raise InvalidNodeError(f"Weight for {key!r} must be finite, got {weight!r}")

		if weight < 0:
			raise InvalidNodeError(f"Weight for {key!r} must not be negative, got {weight!r}")

		total += weight

	return total


def node_names (graph: typing.Mapping[str, typing.Any]) -> typing.Set[str]:

	"""Return the names of every node in the graph (entries whose value is a mapping)."""

	return {name for name, value in graph.items() if isinstance(value, typing.Mapping)}


def get_start (graph: typing.Mapping[str, typing.Any]) -> str:

	"""
	Return the name of the node a walk starts from.

	Raises UnknownNodeError if ``first`` is missing or does not name a node.
	"""

	if FIRST_KEY not in graph:
		raise UnknownNodeError(f"Graph has no {FIRST_KEY!r} entry")

	start = graph[FIRST_KEY]

	if not isinstance(start, str) or not isinstance(graph.get(start), typing.Mapping):
		raise UnknownNodeError(f"Start node {start!r} is not a node in the graph")

	return start
