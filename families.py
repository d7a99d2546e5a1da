'''
constructors for the standard families of finite groups.

permutation groups use `Permutation` as carrier, with the canonical image
string as element id and cycle notation as label. the rest use small tuples
or ints as carrier.
'''

from typing import Optional

from groups import ConcreteGroup
from permutation import Permutation

__all__ = [
	'cyclic_group',
	'symmetric_group',
	'alternating_group',
	'dihedral_group',
	'dicyclic_group',
	'quaternion_group',
	'klein_four_group',
	'direct_product',
	'permutation_group',
]


def _check_size(n: int, minimum: int, what: str):
	if not isinstance(n, int):
		raise TypeError(f'{what} parameter must be an int, not {type(n).__name__}')
	if n < minimum:
		raise ValueError(f'{what} parameter must be at least {minimum}, got {n}')

def permutation_group(id: str, display_name: str, n: int, generators: list[Permutation], **kwargs) -> ConcreteGroup:
	''' the group generated by permutations of n points '''
	return ConcreteGroup(
		id, display_name, generators,
		Permutation.multiply, Permutation.inverse, Permutation.identity(n),
		identify=str, label=Permutation.format, **kwargs,
	)


# ABELIAN
# -------

def cyclic_group(n: int) -> ConcreteGroup:
	''' integers mod n under addition (Z_n) '''
	_check_size(n, 1, 'cyclic group')
	return ConcreteGroup(
		f'Z_{n}', f'Z_{{{n}}}', [1 % n],
		lambda a, b: (a + b) % n, lambda a: -a % n, 0,
	)

def klein_four_group() -> ConcreteGroup:
	''' the Klein four-group V_4 = {e, a, b, ab} '''
	names = { (0, 0): 'e', (1, 0): 'a', (0, 1): 'b', (1, 1): 'ab' }
	return ConcreteGroup(
		'V_4', 'V_4', [(1, 0), (0, 1)],
		lambda x, y: (x[0] ^ y[0], x[1] ^ y[1]), lambda x: x, (0, 0),
		identify=names.__getitem__, label=names.__getitem__,
	)


# PERMUTATION GROUPS
# ------------------

def symmetric_group(n: int) -> ConcreteGroup:
	''' all permutations of n points (S_n), generated by (1 2) and (1 2 … n) '''
	_check_size(n, 1, 'symmetric group')
	generators = []
	if n >= 2:
		generators = [ Permutation.from_cycles(n, [[1, 2]]), Permutation.from_cycles(n, [range(1, n + 1)]) ]
	return permutation_group(f'S_{n}', f'S_{{{n}}}', n, generators)

def alternating_group(n: int) -> ConcreteGroup:
	''' even permutations of n points (A_n), generated by the 3-cycles (1 2 k) '''
	_check_size(n, 1, 'alternating group')
	generators = [ Permutation.from_cycles(n, [[1, 2, k]]) for k in range(3, n + 1) ]
	return permutation_group(f'A_{n}', f'A_{{{n}}}', n, generators)

def dihedral_group(n: int) -> ConcreteGroup:
	''' symmetries of the regular n-gon, of order 2n (D_2n) '''
	_check_size(n, 3, 'dihedral group')
	rotation = Permutation.from_cycles(n, [range(1, n + 1)])
	reflection = Permutation.from_cycles(n, [ [k, n + 1 - k] for k in range(1, n // 2 + 1) if k != n + 1 - k ])
	return permutation_group(f'D_{2 * n}', f'D_{{{2 * n}}}', n, [rotation, reflection])

def dicyclic_group(n: int) -> ConcreteGroup:
	'''
	dicyclic group of order 4n, `⟨a, x | a^2n = 1, x² = aⁿ, x a x⁻¹ = a⁻¹⟩`,
	as its left regular permutation representation.

	every element has normal form `a^k x^j` (0 ≤ k < 2n, j ∈ {0, 1}), which is
	point `k + 2n·j`. since a permutation maps the identity point to the
	element it represents, labels are read off the image of point 0.
	'''
	_check_size(n, 1, 'dicyclic group')
	m = 2 * n
	point = lambda k, j: k % m + m * j
	a = Permutation(point(k + 1, j) for j in range(2) for k in range(m))
	# x · a^k = a^-k x, and x² = aⁿ
	x = Permutation(point(-k, 1) if j == 0 else point(n - k, 0) for j in range(2) for k in range(m))

	def label(p: Permutation) -> str:
		j, k = divmod(p(0), m)
		power = '' if k == 0 else ('a' if k == 1 else f'a^{{{k}}}')
		result = power + ('x' if j else '')
		return result or 'e'

	return ConcreteGroup(
		f'Dic_{n}', f'Dic_{{{n}}}', [a, x],
		Permutation.multiply, Permutation.inverse, Permutation.identity(2 * m),
		identify=str, label=label,
	)


# QUATERNIONS
# -----------

def _unit_product(u: str, v: str) -> tuple[int, str]:
	if u == '1':
		return 1, v
	if v == '1':
		return 1, u
	if u == v:
		return -1, '1'
	w, = {'i', 'j', 'k'} - {u, v}
	return (1 if u + v in ('ij', 'jk', 'ki') else -1), w

def quaternion_group() -> ConcreteGroup:
	''' the quaternion units {±1, ±i, ±j, ±k} (Q_8) '''
	def multiply(x: tuple[int, str], y: tuple[int, str]) -> tuple[int, str]:
		sign, unit = _unit_product(x[1], y[1])
		return x[0] * y[0] * sign, unit
	def invert(x: tuple[int, str]) -> tuple[int, str]:
		return x if x[1] == '1' else (-x[0], x[1])
	name = lambda x: ('-' if x[0] < 0 else '') + x[1]
	return ConcreteGroup(
		'Q_8', 'Q_8', [(1, 'i'), (1, 'j')],
		multiply, invert, (1, '1'),
		identify=name, label=name,
	)


# PRODUCTS
# --------

def direct_product(g: ConcreteGroup, h: ConcreteGroup, id: Optional[str] = None, display_name: Optional[str] = None) -> ConcreteGroup:
	'''
	direct product of two groups, with pairs of element ids as carrier and
	componentwise multiplication.
	'''
	generators = [ (x, h.identity) for x in g.generators ] + [ (g.identity, y) for y in h.generators ]
	return ConcreteGroup(
		id if id is not None else f'{g.id}_x_{h.id}',
		display_name if display_name is not None else f'{g.display_name} \\times {h.display_name}',
		generators,
		lambda p, q: (g.multiply(p[0], q[0]), h.multiply(p[1], q[1])),
		lambda p: (g.invert(p[0]), h.invert(p[1])),
		(g.identity, h.identity),
		identify=repr,
		label=lambda p: f'({g.label(p[0])}, {h.label(p[1])})',
	)
