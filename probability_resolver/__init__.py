"""
probability_resolver - weighted random resolution over caller-owned graphs.

A weight graph is a ``dict`` of nodes, each mapping outcome keys to
non-negative weights, plus a ``first`` entry naming the start node. Resolving
the graph draws a key from the start node in proportion to its weight, follows
that key if it names another node, and stops at the first key that does not.
That makes nested loot tables, dialogue branches and similar chained choices a
single call:

```python
import probability_resolver

graph = {
	"first": "chest",
	"chest": {"gold": 5, "gem_table": 1},
	"gem_table": {"ruby": 1, "emerald": 2},
}

probability_resolver.resolve(graph)  # "gold", "ruby" or "emerald"
```

Weights are changed in place with :func:`modify`: ``{"gold": -2}`` lowers the
``gold`` weight in every node (never below zero) and ``{"gem_table_": {...}}``
replaces the ``gem_table`` node outright.

For repeatable results, pass a seeded ``random.Random`` or use
:class:`ProbabilityResolver`:

```python
resolver = probability_resolver.ProbabilityResolver(seed=42)
resolver.resolve(graph)
```

Package-level exports: ``resolve``, ``resolve_node``, ``walk``, ``modify``,
``ProbabilityResolver`` and the types they use.
"""

import probability_resolver.mutator
import probability_resolver.resolver
import probability_resolver.selector
import probability_resolver.walker
import probability_resolver.weighted_graph


Adjust = probability_resolver.mutator.Adjust
DEFAULT_MAX_STEPS = probability_resolver.walker.DEFAULT_MAX_STEPS
InvalidNodeError = probability_resolver.weighted_graph.InvalidNodeError
ProbabilityResolver = probability_resolver.resolver.ProbabilityResolver
Replace = probability_resolver.mutator.Replace
UnknownNodeError = probability_resolver.weighted_graph.UnknownNodeError
WalkResult = probability_resolver.walker.WalkResult
modify = probability_resolver.mutator.modify
parse_modifications = probability_resolver.mutator.parse_modifications
resolve = probability_resolver.walker.resolve
resolve_node = probability_resolver.selector.select_key
select_key = probability_resolver.selector.select_key
walk = probability_resolver.walker.walk
