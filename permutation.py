from typing import Self
from typing import Iterator, Iterable, Any, TypeVar
import math

T = TypeVar('T')

__all__ = [
	'Permutation',
]

def _cycle_pairs(cycle: list[T]) -> Iterator[tuple[T, T]]:
	''' each point of a cycle paired with the next, wrapping around '''
	return zip(cycle, cycle[1:] + cycle[:1])


class Permutation:
	'''
	permutation of `{0, ..., n-1}`, stored as the tuple of images.

	the implemented operation follows usual left action notation, meaning
	`a * b` is equivalent to the composition `a ∘ b` of their associated
	functions (b is performed first, then a).

	`str()` gives the canonical form (images joined by commas), which is what
	groups built from permutations use as element id. two permutations are
	equal iff their canonical forms are.
	'''

	__slots__ = ('_value',)

	_value: tuple[int, ...]

	def __init__(self, value: Iterable[int]):
		value = tuple(value)
		if sorted(value) != list(range(len(value))):
			raise ValueError(f'{value!r} is not a permutation of 0..{len(value) - 1}')
		self._value = value

	@property
	def value(self) -> tuple[int, ...]:
		''' underlying permutation value (tuple of images) '''
		return self._value

	@property
	def n(self) -> int:
		''' size of the underlying set '''
		return len(self._value)

	# construction

	@classmethod
	def identity(cls, n: int) -> Self:
		return cls(range(n))

	@classmethod
	def from_cycles(cls, n: int, cycles: Iterable[Iterable[int]]) -> Self:
		'''
		construct a permutation of n points from disjoint cycles, given in
		1-based notation (`[[1, 2], [3, 4]]` is `(1 2)(3 4)`). points not
		mentioned are fixed.
		'''
		result = list(range(n))
		seen = 0
		for cycle in cycles:
			cycle = list(cycle)
			if not cycle:
				continue
			for i, j in _cycle_pairs(cycle):
				if not (isinstance(i, int) and 1 <= i <= n):
					raise ValueError(f'cycle point {i!r} out of range 1..{n}')
				if seen >> (i - 1) & 1:
					raise ValueError(f'point {i} appears in more than one cycle')
				seen |= 1 << (i - 1)
				result[i - 1] = j - 1
		return cls(result)

	# core operations

	def multiply(self, other: 'Permutation') -> 'Permutation':
		''' composition `self ∘ other`: `(a * b)(i) = a(b(i))` '''
		if not isinstance(other, Permutation):
			raise TypeError(f'cannot compose a permutation with {type(other).__name__}')
		if self.n != other.n:
			raise ValueError(f'permutation size mismatch: {self.n} vs {other.n}')
		return type(self)(self._value[j] for j in other._value)

	def __mul__(self, other: 'Permutation') -> 'Permutation':
		if isinstance(other, Permutation):
			return self.multiply(other)
		return NotImplemented

	def inverse(self) -> 'Permutation':
		result = [-1] * self.n
		for i, j in enumerate(self._value):
			result[j] = i
		return type(self)(result)

	def __call__(self, x: int) -> int:
		''' image of point x (0-based) '''
		assert isinstance(x, int) and 0 <= x < self.n
		return self._value[x]

	# cycle decomposition

	def cycles_iter(self) -> Iterator[list[int]]:
		'''
		walks the cycles of this permutation as 0-based point lists, each one
		starting at its smallest point. fixed points come out as 1-cycles.
		'''
		pending = (1 << self.n) - 1
		while pending:
			start = (pending & -pending).bit_length() - 1
			cycle = [start]
			pending ^= 1 << start
			point = self._value[start]
			while point != start:
				cycle.append(point)
				pending ^= 1 << point
				point = self._value[point]
			yield cycle

	def cycles(self) -> list[list[int]]:
		''' disjoint cycles in 1-based notation, omitting fixed points '''
		return [ [i + 1 for i in c] for c in self.cycles_iter() if len(c) > 1 ]

	def cycle_type(self) -> tuple[int, ...]:
		''' cycle lengths, longest first; they add up to n '''
		return tuple(sorted((len(c) for c in self.cycles_iter()), reverse=True))

	def order(self) -> int:
		''' smallest k > 0 with p^k the identity '''
		return math.lcm(*self.cycle_type())

	def sign(self) -> int:
		''' parity as 0 (even) or 1 (odd): n minus the number of cycles, mod 2 '''
		return (self.n - len(self.cycle_type())) % 2

	# formatting / comparison

	def format(self) -> str:
		''' cycle notation, e.g. `(1 2)(3 4)`; the identity is `(1)` '''
		cycles = self.cycles()
		if not cycles:
			return '(1)'
		return ''.join('(' + ' '.join(map(str, c)) + ')' for c in cycles)

	def __str__(self):
		return ','.join(map(str, self._value))

	def __repr__(self):
		return f'{type(self).__name__}.from_cycles({self.n}, {self.cycles()})'

	def __eq__(self, other: Any):
		if not isinstance(other, Permutation):
			return NotImplemented
		return self._value == other._value

	def __hash__(self):
		return hash(self._value)
