'''
subgroup and conjugacy analysis over an index-based product table.

all functions here work on a table `table[a][b] = a * b` whose rows and
columns are element indices, with index 0 being the identity. subsets of the
group are encoded as int bitmasks (bit `i` set iff element `i` is a member),
which keeps set algebra (intersection, containment, dedup by exact element
set) down to integer operations.
'''

from typing import Iterable, Iterator, Sequence
import logging

__all__ = [
	'Table',
	'members',
	'generated_subgroup',
	'cyclic_subgroup',
	'find_all_subgroups',
	'is_normal',
	'conjugacy_classes',
	'find_center',
	'is_abelian',
]

logger = logging.getLogger(__name__)

Table = Sequence[Sequence[int]]


def members(mask: int) -> Iterator[int]:
	''' yields the indices present in `mask`, ascending '''
	while mask:
		low = mask & -mask
		yield low.bit_length() - 1
		mask ^= low


# SUBGROUPS
# ---------

def generated_subgroup(table: Table, generators: Iterable[int]) -> int:
	'''
	closure of `generators` under the group operation, as a mask.

	this only multiplies on the right by generators, starting from the
	identity. for a finite group that is enough: inverses are positive powers.
	'''
	gens = list(dict.fromkeys(generators))
	mask, queue = 1, [0]
	for u in queue:
		row = table[u]
		for g in gens:
			v = row[g]
			if not mask >> v & 1:
				mask |= 1 << v
				queue.append(v)
	return mask

def cyclic_subgroup(table: Table, x: int) -> int:
	''' the subgroup generated by element `x` alone '''
	return generated_subgroup(table, (x,))

def find_all_subgroups(table: Table) -> dict[int, tuple[int, ...]]:
	'''
	enumerates every subgroup, returned as `{mask: generators}`.

	starts from the cyclic subgroups and keeps joining pairs of known
	subgroups until no new subgroup appears. every subgroup is the join of the
	cyclic subgroups of its own elements, so the fixed point is the complete
	lattice. comparable pairs are skipped since their join is the larger one.
	'''
	found: dict[int, tuple[int, ...]] = {}
	for x in range(len(table)):
		mask = cyclic_subgroup(table, x)
		if mask not in found:
			found[mask] = (x,) if x else ()
	logger.debug('%d cyclic subgroups', len(found))

	known = list(found)
	pending = list(found)
	while pending:
		discovered = []
		for a in pending:
			for b in known:
				meet = a & b
				if meet == a or meet == b:
					continue
				generators = tuple(dict.fromkeys(found[a] + found[b]))
				join = generated_subgroup(table, generators)
				if join not in found:
					found[join] = generators
					discovered.append(join)
		known.extend(discovered)
		pending = discovered
	logger.debug('%d subgroups in total', len(found))
	return found

def is_normal(table: Table, inverse: Sequence[int], mask: int) -> bool:
	''' whether `g n g⁻¹ ∈ N` holds for every group element g and every n in N '''
	elements = list(members(mask))
	for g in range(len(table)):
		row, g_inv = table[g], inverse[g]
		for n in elements:
			if not mask >> table[row[n]][g_inv] & 1:
				return False
	return True


# CONJUGACY, CENTER
# -----------------

def conjugacy_classes(table: Table, inverse: Sequence[int]) -> list[list[int]]:
	'''
	partitions the group into conjugacy classes.

	classes are emitted in order of their first element, so the identity's
	class `[0]` always comes first.
	'''
	classified = 0
	classes = []
	for x in range(len(table)):
		if classified >> x & 1:
			continue
		cls = []
		for g in range(len(table)):
			y = table[table[g][x]][inverse[g]]
			if not classified >> y & 1:
				classified |= 1 << y
				cls.append(y)
		classes.append(cls)
	return classes

def find_center(table: Table) -> list[int]:
	n = len(table)
	return [ a for a in range(n) if all(table[a][b] == table[b][a] for b in range(n)) ]

def is_abelian(table: Table) -> bool:
	n = len(table)
	return all(table[a][b] == table[b][a] for a in range(n) for b in range(a + 1, n))
