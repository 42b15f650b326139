import typing

import pytest


class ScriptedRandom:

	"""Random stub that returns queued draws and counts calls."""

	def __init__ (self, draws: typing.Optional[typing.List[int]] = None, default: typing.Optional[int] = None, fractions: typing.Optional[typing.List[float]] = None) -> None:

		"""Store the queued integer and fractional draws and an optional integer to repeat once they run out."""

		self.draws = list(draws or [])
		self.fractions = list(fractions or [])
		self.default = default
		self.randint_calls: typing.List[typing.Tuple[int, int]] = []

	def randint (self, a: int, b: int) -> int:

		"""Return the next queued draw, checking it lies in the requested range."""

		self.randint_calls.append((a, b))

		if self.draws:
			value = self.draws.pop(0)

		elif self.default is not None:
			value = self.default

		else:
			raise AssertionError("ScriptedRandom ran out of draws")

		assert a <= value <= b
		return value

	def random (self) -> float:

		"""Return the next queued fractional draw."""

		if not self.fractions:
			raise AssertionError("Unexpected continuous draw")

		return self.fractions.pop(0)


@pytest.fixture
def cycle_graph () -> typing.Dict[str, typing.Any]:

	"""Two nodes that only ever point at each other."""

	return {
		"first": "ping",
		"ping": {"pong": 1},
		"pong": {"ping": 1},
	}
