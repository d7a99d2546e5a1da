from typing import Optional, Iterator, Iterable, Any, Callable, Mapping, TypeVar
from dataclasses import dataclass, field
from types import MappingProxyType
import collections
import itertools
import logging
import threading

import subgroups as algorithms

T = TypeVar('T')

__all__ = [
	'ElementId',
	'GroupElement', 'CayleyTable', 'GroupProperties', 'Subgroup',
	'ConcreteGroup',
	'generate_closure',
]

logger = logging.getLogger(__name__)

ElementId = str
'''
opaque string that canonically identifies one element of a group. two elements
are equal iff their ids are. the ordering of ids is only used to pick canonical
representatives (e.g. of cosets), it carries no mathematical meaning.
'''


# RECORDS
# -------

@dataclass
class GroupElement:
	id: ElementId
	label: str
	order: Optional[int] = None
	''' multiplicative order; `None` until `ConcreteGroup.properties()` computes it '''

@dataclass(frozen=True)
class CayleyTable:
	''' full multiplication table, `table[a][b] = a * b`. immutable. '''

	elements: tuple[ElementId, ...]
	table: Mapping[ElementId, Mapping[ElementId, ElementId]]

	def product(self, a: ElementId, b: ElementId) -> ElementId:
		return self.table[a][b]

	def rows(self) -> Iterator[tuple[ElementId, ...]]:
		''' rows of the table, in element order '''
		for a in self.elements:
			row = self.table[a]
			yield tuple(row[b] for b in self.elements)

@dataclass(frozen=True)
class GroupProperties:
	order: int
	is_abelian: bool
	is_cyclic: bool
	is_simple: bool
	center: tuple[ElementId, ...]

@dataclass(frozen=True)
class Subgroup:
	'''
	a subgroup of some group. `elements` always contains the identity and is
	closed under the group operation and inversion.
	'''

	elements: frozenset[ElementId]
	is_normal: bool
	order: int
	index: int
	generators: tuple[ElementId, ...] = ()
	name: Optional[str] = None

	def __post_init__(self):
		assert self.order == len(self.elements)

	def __contains__(self, x: ElementId) -> bool:
		return x in self.elements

	def __len__(self) -> int:
		return self.order

	def __lt__(self, other: 'Subgroup') -> bool:
		''' proper containment '''
		if not isinstance(other, Subgroup):
			return NotImplemented
		return self.elements < other.elements


# CLOSURE
# -------

def generate_closure(
	generators: Iterable[T],
	multiply: Callable[[T, T], T],
	identity: T,
	identify: Callable[[T], str] = str,
) -> list[T]:
	'''
	returns the elements of the group generated by `generators`, in discovery
	order (the identity always comes first).

	starting from the identity and the generators, every discovered element is
	multiplied on the right by the identity and by each generator, and new
	products are queued, until nothing new shows up. the closure must be
	finite; on an infinite carrier this never returns.
	'''
	generators = list(generators)
	elements: list[T] = []
	seen: set[str] = set()
	queue: collections.deque[T] = collections.deque()

	def visit(x: T):
		key = identify(x)
		if key not in seen:
			seen.add(key)
			elements.append(x)
			queue.append(x)

	for x in itertools.chain((identity,), generators):
		visit(x)
	multipliers = [identity, *generators]
	while queue:
		x = queue.popleft()
		for g in multipliers:
			visit(multiply(x, g))
	return elements


# CONCRETE GROUP
# --------------

class ConcreteGroup:
	'''
	finite group given by a generating set plus a multiplication rule over an
	arbitrary carrier type.

	at construction the closure of the generators is computed, and the
	supplied functions are used once to tabulate the whole product table and
	inverses by element index. after that the carrier values are dropped:
	every operation goes through element ids and the table, so the public
	surface never touches the carrier type again.

	derived structures (`cayley_table()`, `properties()`, `subgroups()`,
	`conjugacy_classes()`) are computed on first use and cached for the
	lifetime of the instance; repeated calls return the very same object.
	'''

	id: str
	display_name: str
	elements: list[GroupElement]
	generators: tuple[ElementId, ...]

	def __init__(
		self,
		id: str,
		display_name: str,
		generators: Iterable[T],
		multiply: Callable[[T, T], T],
		invert: Callable[[T], T],
		identity: T,
		identify: Callable[[T], str] = str,
		label: Callable[[T], str] = str,
	):
		self.id = id
		self.display_name = display_name

		generators = list(generators)
		values = generate_closure(generators, multiply, identity, identify)
		self._ids = [ identify(x) for x in values ]
		self._index = { x: i for i, x in enumerate(self._ids) }
		self.elements = [ GroupElement(id=x, label=label(v)) for x, v in zip(self._ids, values) ]
		self.generators = tuple(dict.fromkeys(identify(g) for g in generators))

		def lookup(x: T, what: str) -> int:
			key = identify(x)
			if key not in self._index:
				raise ValueError(f'{self.id}: {what} {key!r} escapes the closure of the generators')
			return self._index[key]

		self._table = [ [lookup(multiply(a, b), 'product') for b in values] for a in values ]
		self._inverse = [ lookup(invert(a), 'inverse') for a in values ]
		assert all(self._table[i][j] == 0 for i, j in enumerate(self._inverse))

		self._lock = threading.RLock()
		self._cayley_table: Optional[CayleyTable] = None
		self._properties: Optional[GroupProperties] = None
		self._subgroups: Optional[tuple[Subgroup, ...]] = None
		self._conjugacy_classes: Optional[tuple[tuple[ElementId, ...], ...]] = None
		logger.debug('%s: generated %d elements from %d generators', self.id, len(self._ids), len(generators))

	def __repr__(self):
		return f'<{type(self).__name__} {self.id} of order {self.order}>'

	# element access

	@property
	def order(self) -> int:
		return len(self._ids)

	def __len__(self) -> int:
		return len(self._ids)

	def __iter__(self) -> Iterator[ElementId]:
		return iter(self._ids)

	def __contains__(self, x: Any) -> bool:
		return x in self._index

	@property
	def identity(self) -> ElementId:
		return self._ids[0]

	def element(self, x: ElementId) -> Optional[GroupElement]:
		i = self._index.get(x)
		return None if i is None else self.elements[i]

	def label(self, x: ElementId) -> Optional[str]:
		el = self.element(x)
		return None if el is None else el.label

	# core group operations

	def multiply(self, a: ElementId, b: ElementId) -> Optional[ElementId]:
		''' product `a * b`, or `None` if either id is not an element '''
		i, j = self._index.get(a), self._index.get(b)
		if i is None or j is None:
			return None
		return self._ids[self._table[i][j]]

	def invert(self, a: ElementId) -> Optional[ElementId]:
		i = self._index.get(a)
		return None if i is None else self._ids[self._inverse[i]]

	def conjugate(self, x: ElementId, g: ElementId) -> Optional[ElementId]:
		''' `g x g⁻¹` '''
		i, j = self._index.get(x), self._index.get(g)
		if i is None or j is None:
			return None
		return self._ids[self._table[self._table[j][i]][self._inverse[j]]]

	def element_order(self, x: ElementId) -> Optional[int]:
		'''
		smallest k > 0 with x^k = identity, by repeated multiplication.
		the loop is capped at |G| + 1 steps; going over means the table is not
		a group table and RuntimeError is raised.
		'''
		i = self._index.get(x)
		if i is None:
			return None
		current, k = i, 1
		while current != 0:
			current = self._table[current][i]
			k += 1
			if k > len(self._ids) + 1:
				raise RuntimeError(f'{self.id}: element {x!r} has no finite order within {len(self._ids)} steps')
		return k

	# derived structures (memoized)

	def _memo(self, attr: str, compute: Callable[[], Any]) -> Any:
		with self._lock:
			value = getattr(self, attr)
			if value is None:
				value = compute()
				setattr(self, attr, value)
			return value

	def cayley_table(self) -> CayleyTable:
		def compute():
			ids = self._ids
			table = { ids[i]: MappingProxyType({ ids[j]: ids[k] for j, k in enumerate(row) })
				for i, row in enumerate(self._table) }
			return CayleyTable(elements=tuple(ids), table=MappingProxyType(table))
		return self._memo('_cayley_table', compute)

	def properties(self) -> GroupProperties:
		def compute():
			max_order = 0
			for el in self.elements:
				el.order = self.element_order(el.id)
				max_order = max(max_order, el.order)
			normal = sum(1 for s in self.subgroups() if s.is_normal)
			return GroupProperties(
				order=self.order,
				is_abelian=algorithms.is_abelian(self._table),
				is_cyclic=max_order == self.order,
				is_simple=normal == 2 and self.order > 1,
				center=tuple(self._ids[i] for i in algorithms.find_center(self._table)),
			)
		return self._memo('_properties', compute)

	def subgroups(self) -> tuple[Subgroup, ...]:
		'''
		every subgroup of this group, each exactly once, sorted by ascending
		order (ties by position of their elements). the trivial subgroup is
		named '1' and the whole group carries the group's display name.
		'''
		def compute():
			found = algorithms.find_all_subgroups(self._table)
			masks = sorted(found, key=lambda m: (m.bit_count(), list(algorithms.members(m))))
			result = []
			for mask in masks:
				order = mask.bit_count()
				name = None
				if order == 1:
					name = '1'
				elif order == self.order:
					name = self.display_name
				result.append(Subgroup(
					elements=frozenset(self._ids[i] for i in algorithms.members(mask)),
					is_normal=algorithms.is_normal(self._table, self._inverse, mask),
					order=order,
					index=self.order // order,
					generators=tuple(self._ids[i] for i in found[mask]),
					name=name,
				))
			logger.debug('%s: %d subgroups, %d normal', self.id, len(result), sum(s.is_normal for s in result))
			return tuple(result)
		return self._memo('_subgroups', compute)

	def normal_subgroups(self) -> tuple[Subgroup, ...]:
		''' normal subgroups by descending order; this is the indexing quotient ids use '''
		return tuple(sorted((s for s in self.subgroups() if s.is_normal), key=lambda s: -s.order))

	def subgroup_generated_by(self, xs: Iterable[ElementId]) -> Optional[Subgroup]:
		''' the subgroup generated by the given elements, or `None` if one of them is not an element '''
		indices = [ self._index.get(x) for x in xs ]
		if any(i is None for i in indices):
			return None
		mask = algorithms.generated_subgroup(self._table, indices)
		elements = frozenset(self._ids[i] for i in algorithms.members(mask))
		return next(s for s in self.subgroups() if s.elements == elements)

	def conjugacy_classes(self) -> tuple[tuple[ElementId, ...], ...]:
		''' conjugacy classes; the identity's class `(identity,)` comes first '''
		def compute():
			classes = algorithms.conjugacy_classes(self._table, self._inverse)
			return tuple( tuple(self._ids[i] for i in cls) for cls in classes )
		return self._memo('_conjugacy_classes', compute)
