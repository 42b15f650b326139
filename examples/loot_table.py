import collections
import logging

import probability_resolver

logging.basicConfig(level=logging.INFO)

ROLLS = 1000

# Each node maps outcomes to weights. Outcomes that name another node are
# followed, so "gem_table" is a table of its own.
loot = {
	"first": "chest",
	"chest":		{"gold": 6, "potion": 3, "gem_table": 1},
	"gem_table":	{"ruby": 1, "emerald": 2, "rare_table": 1},
	"rare_table":	{"crown": 1, "sceptre": 1},
}

resolver = probability_resolver.ProbabilityResolver(seed=42)


def roll_all (label: str) -> None:

	counts = collections.Counter(resolver.resolve(loot) for _ in range(ROLLS))
	logging.info(f"{label}: {dict(counts.most_common())}")


roll_all("Base table")

# The player finds a lucky charm: less gold, more gems, and the rare table
# only holds crowns now.
resolver.modify(loot, {"gold": -4, "gem_table": 2, "rare_table_": {"crown": 1}})

roll_all("With lucky charm")
