"""Weight graph modification.

A modification set is a mapping whose keys follow a naming convention:

- ``"<name>_"`` (trailing underscore) replaces the graph entry ``<name>``
  wholesale, if it exists.
- ``"<key>"`` adds its value to the ``<key>`` weight of every node that has
  one, flooring the result at zero.

Entries are parsed into :class:`Replace` and :class:`Adjust` before anything is
applied, then applied in order against the same graph object, so later entries
see the effects of earlier ones.
"""

import dataclasses
import logging
import typing

import probability_resolver.weighted_graph


logger = logging.getLogger(__name__)


REPLACE_SUFFIX = "_"


@dataclasses.dataclass(frozen=True)
class Replace:

	"""Overwrite the graph entry ``target`` with ``value``."""

	target: str
	value: typing.Any


@dataclasses.dataclass(frozen=True)
class Adjust:

	"""Add ``delta`` to ``key`` in every node that contains it, floored at zero."""

	key: str
	delta: probability_resolver.weighted_graph.Weight


Modification = typing.Union[Replace, Adjust]


def parse_modifications (mod: typing.Mapping[str, typing.Any]) -> typing.List[Modification]:

	"""Turn a modification mapping into an ordered list of Replace / Adjust entries.

	Raises ValueError if an adjust delta is not a number.
	"""

	parsed: typing.List[Modification] = []

	for key, value in mod.items():

		if key.endswith(REPLACE_SUFFIX):
			parsed.append(Replace(target=key[:-len(REPLACE_SUFFIX)], value=value))
			continue

		if not probability_resolver.weighted_graph.is_weight(value):
			raise ValueError(f"Delta for {key!r} must be a number, got {value!r}")

		parsed.append(Adjust(key=key, delta=value))

	return parsed


def _apply_replace (base: probability_resolver.weighted_graph.WeightGraph, modification: Replace) -> None:

	if modification.target not in base:
		return

	base[modification.target] = modification.value

	logger.debug(f"Replaced {modification.target!r}")


def _apply_adjust (base: probability_resolver.weighted_graph.WeightGraph, modification: Adjust) -> None:

	for name, node in base.items():

		if not isinstance(node, typing.Mapping) or modification.key not in node:
			continue

		node[modification.key] = max(0, node[modification.key] + modification.delta)

		logger.debug(f"Adjusted {name}.{modification.key} by {modification.delta} to {node[modification.key]}")


def apply_modification (base: probability_resolver.weighted_graph.WeightGraph, modification: Modification) -> None:

	"""Apply a single parsed modification to the graph in place."""

	if isinstance(modification, Replace):
		_apply_replace(base, modification)

	elif isinstance(modification, Adjust):
		_apply_adjust(base, modification)

	else:
		raise TypeError(f"Unknown modification: {modification!r}")


def modify (base: probability_resolver.weighted_graph.WeightGraph, mod: typing.Mapping[str, typing.Any]) -> probability_resolver.weighted_graph.WeightGraph:

	"""
	Apply a modification mapping to the graph in place and return the same graph.

	Absent nodes and keys are silently skipped.

	Example:
		```python
		graph = {"n1": {"a": 5}, "n2": {"a": 5, "b": 1}}
		probability_resolver.modify(graph, {"a": -10})
		# {"n1": {"a": 0}, "n2": {"a": 0, "b": 1}}
		```
	"""

	for modification in parse_modifications(mod):
		apply_modification(base, modification)

	return base
