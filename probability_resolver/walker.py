"""Random walks over a weight graph.

A walk starts at the node named by the graph's ``first`` entry, draws a key
from it, and keeps following drawn keys while they name other nodes. The first
key that is not a node name is the walk's terminal value.
"""

import dataclasses
import logging
import random
import typing

import probability_resolver.selector
import probability_resolver.weighted_graph


logger = logging.getLogger(__name__)


DEFAULT_MAX_STEPS = 100


@dataclasses.dataclass
class WalkResult:

	"""
	The outcome of one walk.

	Attributes:
		value: The terminal key, or ``None`` if the walk was exhausted or
			reached an empty node.
		path: Node names visited, start node first.
		steps: Follow-up draws made after the initial draw.
		exhausted: True if the step bound was hit before a terminal value.
	"""

	value: typing.Optional[str]
	path: typing.List[str] = dataclasses.field(default_factory=list)
	steps: int = 0
	exhausted: bool = False

	@property
	def draws (self) -> int:

		"""Return the total number of weighted draws, including the initial one."""

		return self.steps + 1


def walk (graph: probability_resolver.weighted_graph.WeightGraph, rng: typing.Optional[random.Random] = None, max_steps: int = DEFAULT_MAX_STEPS) -> WalkResult:

	"""Walk the graph from its start node until a terminal value or the step bound.

	A walk that is still on a node after the initial draw plus ``max_steps``
	follow-up draws is exhausted: it is not retried, and the result has
	``value=None`` and ``exhausted=True``.

	Parameters:
		graph: Weight graph with a ``first`` entry naming the start node
		rng: Random number generator instance (a fresh one if omitted)
		max_steps: Follow-up draws allowed after the initial draw

	Raises:
		UnknownNodeError: if ``first`` is missing or does not name a node
		InvalidNodeError: if a visited node has unusable weights
	"""

	if max_steps < 0:
		raise ValueError("Max steps must not be negative")

	if rng is None:
		rng = random.Random()

	start = probability_resolver.weighted_graph.get_start(graph)
	names = probability_resolver.weighted_graph.node_names(graph)

	path = [start]
	value = probability_resolver.selector.select_key(graph[start], rng)
	steps = 0

	while value in names:

		if steps >= max_steps:
			logger.warning(f"Walk from {start!r} exhausted after {steps + 1} draws without reaching a terminal value")
			return WalkResult(value=None, path=path, steps=steps, exhausted=True)

		path.append(value)
		value = probability_resolver.selector.select_key(graph[value], rng)
		steps += 1

	logger.debug(f"Walk from {start!r} resolved to {value!r} in {steps + 1} draws")

	return WalkResult(value=value, path=path, steps=steps)


def resolve (graph: probability_resolver.weighted_graph.WeightGraph, rng: typing.Optional[random.Random] = None, max_steps: int = DEFAULT_MAX_STEPS) -> typing.Optional[str]:

	"""Walk the graph and return the terminal value, or ``None`` if the walk was exhausted."""

	return walk(graph, rng, max_steps).value
