import random
import typing

import probability_resolver.mutator
import probability_resolver.selector
import probability_resolver.walker
import probability_resolver.weighted_graph


class ProbabilityResolver:

	"""Resolve and modify weight graphs with a shared random source and step bound."""

	def __init__ (
		self,
		rng: typing.Optional[random.Random] = None,
		seed: typing.Optional[int] = None,
		max_steps: int = probability_resolver.walker.DEFAULT_MAX_STEPS
	) -> None:

		"""
		Initialize the resolver.

		Parameters:
			rng: Optional ``random.Random`` used for every draw. Takes
				precedence over ``seed``.
			seed: Seed for a new ``random.Random`` when ``rng`` is omitted,
				for repeatable walks.
			max_steps: Follow-up draws a walk may make after its initial draw
				before it is reported as exhausted. Default 100.
		"""

		if max_steps < 0:
			raise ValueError("Max steps must not be negative")

		self.rng = rng or random.Random(seed)
		self.max_steps = max_steps


	def resolve_node (self, node: typing.Mapping[str, probability_resolver.weighted_graph.Weight]) -> typing.Optional[str]:

		"""Pick one key from a single node."""

		return probability_resolver.selector.select_key(node, self.rng)


	def walk (self, graph: probability_resolver.weighted_graph.WeightGraph) -> probability_resolver.walker.WalkResult:

		"""Walk the graph and return the full result."""

		return probability_resolver.walker.walk(graph, self.rng, self.max_steps)


	def resolve (self, graph: probability_resolver.weighted_graph.WeightGraph) -> typing.Optional[str]:

		"""Walk the graph and return the terminal value, or ``None`` if exhausted."""

		return self.walk(graph).value


	def modify (self, base: probability_resolver.weighted_graph.WeightGraph, mod: typing.Mapping[str, typing.Any]) -> probability_resolver.weighted_graph.WeightGraph:

		"""Apply modifications to the graph in place and return it."""

		return probability_resolver.mutator.modify(base, mod)
