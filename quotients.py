from typing import Optional
import logging

from groups import ConcreteGroup, ElementId, Subgroup

__all__ = [
	'coset_partition',
	'quotient_group',
]

logger = logging.getLogger(__name__)


def coset_partition(g: ConcreteGroup, n: Subgroup) -> dict[ElementId, ElementId]:
	'''
	partitions g into left cosets `xN`, returning the map from each element to
	the representative of its coset (the smallest id in it).
	'''
	coset_of: dict[ElementId, ElementId] = {}
	for x in g:
		if x in coset_of:
			continue
		members = [ g.multiply(x, m) for m in n.elements ]
		representative = min(members)
		for m in members:
			coset_of[m] = representative
	return coset_of

def quotient_group(g: ConcreteGroup, n: Subgroup, id: Optional[str] = None) -> ConcreteGroup:
	'''
	builds the quotient group g/n, whose elements are the coset representatives.

	`n` must be a normal subgroup of `g`; that is not verified here. the result
	is an independent group that shares no state with `g`.
	'''
	coset_of = coset_partition(g, n)
	representatives = list(dict.fromkeys(coset_of.values()))
	logger.debug('%s / %s: %d cosets', g.id, n.name or 'N', len(representatives))

	def label(x: ElementId) -> str:
		if n.order == g.order:
			return '1'
		if n.order == 1:
			return g.label(x)
		return f'[{g.label(x)}]'

	return ConcreteGroup(
		id if id is not None else f'{g.id}/{n.name or "N"}',
		f'{g.display_name} / {n.name or "N"}',
		representatives,
		lambda a, b: coset_of[g.multiply(a, b)],
		lambda a: coset_of[g.invert(a)],
		coset_of[g.identity],
		identify=str,
		label=label,
	)
