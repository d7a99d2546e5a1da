'''
isomorphism testing between two finite groups.

cheap invariants (order, abelian, cyclic, element order profile, center size)
reject most non-isomorphic pairs quickly, but they are only necessary
conditions. the answer always comes from an exact search that either exhibits
an explicit isomorphism or exhausts every candidate.
'''

from typing import Optional, Sequence
import collections
import logging
import math

from groups import ConcreteGroup, ElementId

__all__ = [
	'order_profile',
	'invariants_match',
	'greedy_generators',
	'extend_to_isomorphism',
	'find_isomorphism',
	'are_isomorphic',
]

logger = logging.getLogger(__name__)


def order_profile(g: ConcreteGroup) -> collections.Counter[int]:
	''' multiset of element orders, as `{order: count}` '''
	g.properties()  # fills in element orders
	return collections.Counter(el.order for el in g.elements)

def invariants_match(g1: ConcreteGroup, g2: ConcreteGroup) -> bool:
	p1, p2 = g1.properties(), g2.properties()
	return (p1.order == p2.order
		and p1.is_abelian == p2.is_abelian
		and p1.is_cyclic == p2.is_cyclic
		and len(p1.center) == len(p2.center)
		and order_profile(g1) == order_profile(g2))

def _closure(g: ConcreteGroup, gens: Sequence[ElementId]) -> set[ElementId]:
	result = {g.identity}
	queue = [g.identity]
	for u in queue:
		for x in gens:
			v = g.multiply(u, x)
			if v not in result:
				result.add(v)
				queue.append(v)
	return result

def greedy_generators(g: ConcreteGroup) -> list[ElementId]:
	'''
	a generating set picked greedily: walk the elements and take every one
	that isn't yet in the subgroup generated by those already taken.
	'''
	gens: list[ElementId] = []
	generated = {g.identity}
	for x in g:
		if len(generated) == g.order:
			break
		if x in generated:
			continue
		gens.append(x)
		generated = _closure(g, gens)
	return gens

def extend_to_isomorphism(
	g1: ConcreteGroup, g2: ConcreteGroup,
	gens: Sequence[ElementId], images: Sequence[ElementId],
) -> Optional[dict[ElementId, ElementId]]:
	'''
	extends the generator assignment `gens[i] ↦ images[i]` to all of g1 by
	breadth-first multiplication, following `φ(u·x) = φ(u)·φ(x)`.

	returns the full map if it is a bijective homomorphism onto g2, or `None`
	on a conflict (some element reached with two different images) or a
	collision (two elements sharing an image).
	'''
	mapping = { g1.identity: g2.identity }
	used = { g2.identity }
	queue = [g1.identity]
	for u in queue:
		image_u = mapping[u]
		for x, image_x in zip(gens, images):
			v = g1.multiply(u, x)
			image_v = g2.multiply(image_u, image_x)
			if v in mapping:
				if mapping[v] != image_v:
					return None
			else:
				if image_v in used:
					return None
				mapping[v] = image_v
				used.add(image_v)
				queue.append(v)
	if len(mapping) != g1.order or len(used) != g2.order:
		return None
	return mapping

def find_isomorphism(g1: ConcreteGroup, g2: ConcreteGroup) -> Optional[dict[ElementId, ElementId]]:
	'''
	returns an explicit isomorphism g1 → g2 as an element map, or `None` if
	the groups are not isomorphic.

	each generator of g1 (see `greedy_generators`) may only go to an element
	of the same order in g2; every combination of such images is tried, by
	backtracking, until one extends to a bijective homomorphism.
	'''
	if g1.order == 1 and g2.order == 1:
		return { g1.identity: g2.identity }
	if not invariants_match(g1, g2):
		return None

	gens = greedy_generators(g1)
	by_order = collections.defaultdict(list)
	for el in g2.elements:
		by_order[el.order].append(el.id)
	candidates = [ by_order[g1.element(x).order] for x in gens ]
	logger.debug('%s → %s: %d generators, %d assignments at most',
		g1.id, g2.id, len(gens), math.prod(map(len, candidates)))

	images: list[ElementId] = []
	def search(i: int) -> Optional[dict[ElementId, ElementId]]:
		if i == len(gens):
			return extend_to_isomorphism(g1, g2, gens, images)
		for y in candidates[i]:
			# distinct generators of g1 must have distinct images
			if y in images:
				continue
			images.append(y)
			result = search(i + 1)
			images.pop()
			if result is not None:
				return result
		return None
	return search(0)

def are_isomorphic(g1: ConcreteGroup, g2: ConcreteGroup) -> bool:
	return find_isomorphism(g1, g2) is not None
