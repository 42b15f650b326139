import random
import typing

import probability_resolver.weighted_graph


def select_key (node: typing.Mapping[str, probability_resolver.weighted_graph.Weight], rng: typing.Optional[random.Random] = None) -> typing.Optional[str]:

	"""Pick one key from a node with probability proportional to its weight.

	Integer weights use an integer draw in ``[1, total]`` and select the first
	key whose cumulative weight reaches the draw, so ``{"A": 2, "B": 2}``
	returns ``"A"`` for draws 1-2 and ``"B"`` for draws 3-4. If any weight is
	fractional the draw is continuous in ``[0, total)`` and the first key whose
	cumulative weight exceeds it wins. Either way a zero-weight key is never
	selected.

	Parameters:
		node: Mapping of outcome key to non-negative weight
		rng: Random number generator instance (a fresh one if omitted)

	Returns:
		The selected key, or ``None`` if the node is empty

	Raises:
		InvalidNodeError: if a weight is negative or non-numeric, or every
			weight is zero
	"""

	keys = probability_resolver.weighted_graph.keys_in_order(node)

	if not keys:
		return None

	total = probability_resolver.weighted_graph.total_weight(node)

	if total <= 0:
		raise probability_resolver.weighted_graph.InvalidNodeError("Total weight must be positive")

	if rng is None:
		rng = random.Random()

	accum: probability_resolver.weighted_graph.Weight = 0

	if all(probability_resolver.weighted_graph.is_integral(node[key]) for key in keys):

		roll = rng.randint(1, int(total))

		for key in keys:
			accum += int(node[key])
			if accum >= roll:
				return key

	else:

		threshold = rng.random() * total

		for key in keys:
			accum += node[key]
			if accum > threshold:
				return key

	# A draw at the very top of the range can leave the threshold unreached.
	return [key for key in keys if node[key] > 0][-1]
