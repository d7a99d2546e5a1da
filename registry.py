'''
lazy, string-keyed store of groups.

groups are registered as factories and only built on first lookup. besides
registered ids, lookups resolve two kinds of derived ids on demand:

 - family ids such as `Z_13`, `S_4`, `A_6`, `D_14` or `Dic_5`, built from the
   matching family constructor;
 - quotient ids `<base>_quo_<i>`, the quotient of `<base>` by its i-th normal
   subgroup (normal subgroups by descending order). the base may itself be a
   quotient id, so `S_4_quo_3_quo_1` works.

derived groups are cached but never listed in the catalog.
'''

from typing import Optional, Callable, Iterable
from dataclasses import dataclass
import logging
import math
import re
import threading

from groups import ConcreteGroup
from isomorphism import are_isomorphic
from quotients import quotient_group
import families

__all__ = [
	'CatalogEntry',
	'GroupRegistry',
	'QUOTIENT_SEPARATOR',
	'FAMILY_PREFIXES',
	'MAX_FAMILY_ORDER',
	'DEFAULT_CATALOG',
	'default_registry',
]

logger = logging.getLogger(__name__)

Factory = Callable[[], ConcreteGroup]

QUOTIENT_SEPARATOR = '_quo_'

FAMILY_PREFIXES: dict[str, tuple[Callable[[int], ConcreteGroup], Callable[[int], Optional[int]]]] = {
	'Z': (families.cyclic_group, lambda n: n),
	'S': (families.symmetric_group, lambda n: math.factorial(n) if n <= 10 else None),
	'A': (families.alternating_group, lambda n: max(math.factorial(n) // 2, 1) if n <= 10 else None),
	'D': (lambda m: families.dihedral_group(m // 2), lambda m: m if m % 2 == 0 else None),
	'Dic': (families.dicyclic_group, lambda n: 4 * n),
}
'''
family id prefix → (constructor, order) for the number after the underscore.
the order function returns `None` for numbers that name no group.
'''

MAX_FAMILY_ORDER = 1000
''' family ids for larger groups are not resolved '''

NUMBER = r'0|[1-9][0-9]*'
''' numbers in derived ids: ASCII digits, no leading zeros, so every group has one id '''

DEFAULT_CATALOG: tuple[tuple[str, Factory], ...] = (
	('Z_1', lambda: families.cyclic_group(1)),
	('Z_2', lambda: families.cyclic_group(2)),
	('Z_3', lambda: families.cyclic_group(3)),
	('Z_4', lambda: families.cyclic_group(4)),
	('Z_2_x_Z_2', lambda: families.direct_product(families.cyclic_group(2), families.cyclic_group(2), 'Z_2_x_Z_2')),
	('Z_5', lambda: families.cyclic_group(5)),
	('Z_6', lambda: families.cyclic_group(6)),
	('S_3', lambda: families.symmetric_group(3)),
	('Z_7', lambda: families.cyclic_group(7)),
	('Z_8', lambda: families.cyclic_group(8)),
	('Z_4_x_Z_2', lambda: families.direct_product(families.cyclic_group(4), families.cyclic_group(2), 'Z_4_x_Z_2')),
	('Z_2_x_Z_2_x_Z_2', lambda: families.direct_product(families.klein_four_group(), families.cyclic_group(2), 'Z_2_x_Z_2_x_Z_2')),
	('D_8', lambda: families.dihedral_group(4)),
	('Q_8', families.quaternion_group),
	('Z_9', lambda: families.cyclic_group(9)),
	('Z_3_x_Z_3', lambda: families.direct_product(families.cyclic_group(3), families.cyclic_group(3), 'Z_3_x_Z_3')),
	('Z_10', lambda: families.cyclic_group(10)),
	('D_10', lambda: families.dihedral_group(5)),
	('Z_11', lambda: families.cyclic_group(11)),
	('Z_12', lambda: families.cyclic_group(12)),
	('Z_6_x_Z_2', lambda: families.direct_product(families.cyclic_group(6), families.cyclic_group(2), 'Z_6_x_Z_2')),
	('A_4', lambda: families.alternating_group(4)),
	('D_12', lambda: families.dihedral_group(6)),
	('Dic_3', lambda: families.dicyclic_group(3)),
	('A_5', lambda: families.alternating_group(5)),
)


@dataclass(frozen=True)
class CatalogEntry:
	id: str
	name: str


class GroupRegistry:
	'''
	store of lazily built groups. a group is built at most once; every later
	lookup of the same id returns the same instance.
	'''

	def __init__(self, entries: Iterable[tuple[str, Factory]] = ()):
		self._factories: dict[str, Factory] = {}
		self._visible: dict[str, bool] = {}
		self._groups: dict[str, ConcreteGroup] = {}
		self._lock = threading.RLock()
		for id, factory in entries:
			self.register(id, factory)

	def register(self, id: str, factory: Factory, visible: bool = True):
		'''
		registers (or replaces) the factory for `id`. only visible ids are
		listed by `catalog()`. replacing a factory drops the cached instance.
		'''
		with self._lock:
			self._factories[id] = factory
			self._visible[id] = visible
			self._groups.pop(id, None)

	def __contains__(self, id: str) -> bool:
		return self.get(id) is not None

	def get(self, id: str) -> Optional[ConcreteGroup]:
		''' the group for `id`, building it if needed, or `None` if it can't be resolved '''
		with self._lock:
			if id in self._groups:
				return self._groups[id]
			if id in self._factories:
				group = self._build(id, self._factories[id])
			else:
				group = self._resolve_quotient(id)
				if group is None:
					group = self._resolve_family(id)
			if group is not None:
				self._groups[id] = group
			return group

	def catalog(self) -> list[CatalogEntry]:
		''' visible registered ids, in registration order '''
		with self._lock:
			return [ CatalogEntry(id=id, name=id) for id, visible in self._visible.items() if visible ]

	def find_isomorphic(self, target: ConcreteGroup) -> Optional[ConcreteGroup]:
		''' first catalog group isomorphic to `target`, if any '''
		order = target.order
		for entry in self.catalog():
			candidate = self.get(entry.id)
			if candidate is not None and candidate.order == order and are_isomorphic(target, candidate):
				return candidate
		return None

	# resolution

	def _build(self, id: str, factory: Factory) -> ConcreteGroup:
		logger.debug('building group %s', id)
		try:
			return factory()
		except Exception:
			logger.error('failed to build group %s', id)
			raise

	def _resolve_quotient(self, id: str) -> Optional[ConcreteGroup]:
		base, sep, index = id.rpartition(QUOTIENT_SEPARATOR)
		if not sep or not base or not re.fullmatch(NUMBER, index):
			return None
		parent = self.get(base)
		if parent is None:
			return None
		normal = parent.normal_subgroups()
		i = int(index)
		if i >= len(normal):
			logger.debug('%s: %s has only %d normal subgroups', id, base, len(normal))
			return None
		logger.debug('resolving %s as quotient of %s', id, base)
		return quotient_group(parent, normal[i], id=id)

	def _resolve_family(self, id: str) -> Optional[ConcreteGroup]:
		m = re.fullmatch(rf'([A-Za-z]+)_({NUMBER})', id)
		if not m or m.group(1) not in FAMILY_PREFIXES:
			return None
		constructor, order = FAMILY_PREFIXES[m.group(1)]
		n = int(m.group(2))
		size = order(n)
		if size is None or not 0 < size <= MAX_FAMILY_ORDER:
			return None
		try:
			group = constructor(n)
		except ValueError:
			return None
		logger.debug('resolved %s from its family', id)
		return group


def default_registry() -> GroupRegistry:
	''' a fresh registry seeded with the standard catalog '''
	return GroupRegistry(DEFAULT_CATALOG)
