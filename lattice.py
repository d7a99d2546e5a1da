'''
subgroup lattice (Hasse diagram) construction.

the input is an unordered list of subgroups; the output ranks them and keeps
only the covering relation, which is what presentation code draws.
'''

from typing import Iterable
from dataclasses import dataclass

from groups import Subgroup

__all__ = [
	'LatticeNode',
	'LatticeGraph',
	'build_lattice',
]


@dataclass(frozen=True)
class LatticeNode:
	subgroup: Subgroup
	id: int
	''' position of the subgroup in the input list '''
	rank: int
	''' length of the longest strictly increasing chain from the trivial subgroup '''

	@property
	def order(self) -> int:
		return self.subgroup.order

	@property
	def elements(self) -> frozenset[str]:
		return self.subgroup.elements

	@property
	def is_normal(self) -> bool:
		return self.subgroup.is_normal

@dataclass(frozen=True)
class LatticeGraph:
	nodes: tuple[LatticeNode, ...]
	''' nodes sorted by ascending subgroup order '''
	links: tuple[tuple[int, int], ...]
	''' covering pairs `(a, b)` of node indices, a < b with nothing in between '''
	layers: dict[int, list[int]]
	''' subgroup order → node indices, ascending order keys '''
	max_rank: int


def _below(a: Subgroup, b: Subgroup) -> bool:
	''' a is a proper subgroup of b '''
	return b.order % a.order == 0 and a < b

def build_lattice(subgroups: Iterable[Subgroup]) -> LatticeGraph:
	# stable sort, so equal orders keep their input order
	ordered = sorted(enumerate(subgroups), key=lambda p: p[1].order)
	subs = [ s for _, s in ordered ]

	ranks: list[int] = []
	for i, s in enumerate(subs):
		below = [ ranks[j] for j in range(i) if _below(subs[j], s) ]
		ranks.append(1 + max(below) if below else 0)

	links = []
	for i, a in enumerate(subs):
		for j in range(i + 1, len(subs)):
			b = subs[j]
			if not _below(a, b):
				continue
			# sorted by order, so anything strictly between sits between i and j
			if not any(_below(a, subs[k]) and _below(subs[k], b) for k in range(i + 1, j)):
				links.append((i, j))

	layers: dict[int, list[int]] = {}
	for i, s in enumerate(subs):
		layers.setdefault(s.order, []).append(i)

	nodes = tuple( LatticeNode(subgroup=s, id=orig, rank=r) for (orig, s), r in zip(ordered, ranks) )
	return LatticeGraph(nodes=nodes, links=tuple(links), layers=layers, max_rank=max(ranks, default=0))
