from typing import Iterator
import collections
import itertools
import math
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from permutation import Permutation
from groups import ConcreteGroup, generate_closure
import subgroups as algorithms
from families import *
from lattice import build_lattice
from isomorphism import are_isomorphic, find_isomorphism, greedy_generators, invariants_match, order_profile
from quotients import quotient_group
from registry import GroupRegistry, default_registry

registry = default_registry()

CATALOG = [ entry.id for entry in registry.catalog() ]

def triples(g: ConcreteGroup, limit=2000) -> Iterator[tuple[str, str, str]]:
	''' all triples for small groups, an evenly spread sample otherwise '''
	ids = list(g)
	total = len(ids) ** 3
	step = max(1, total // limit)
	for k in range(0, total, step):
		a, rest = divmod(k, len(ids) ** 2)
		b, c = divmod(rest, len(ids))
		yield ids[a], ids[b], ids[c]

def verify_axioms(g: ConcreteGroup):
	e = g.identity
	assert g.elements[0].id == e
	for x in g:
		assert g.multiply(e, x) == x and g.multiply(x, e) == x
		assert g.multiply(x, g.invert(x)) == e and g.multiply(g.invert(x), x) == e
		assert g.invert(g.invert(x)) == x
	for a, b, c in triples(g):
		assert g.multiply(g.multiply(a, b), c) == g.multiply(a, g.multiply(b, c))

def verify_subgroup(g: ConcreteGroup, s):
	assert g.identity in s.elements
	for a in s.elements:
		assert g.invert(a) in s.elements
		for b in s.elements:
			assert g.multiply(a, b) in s.elements
	assert s.order == len(s.elements) and s.order * s.index == g.order

def verify_isomorphism(g1: ConcreteGroup, g2: ConcreteGroup, phi: dict[str, str]):
	assert sorted(phi) == sorted(g1) and sorted(phi.values()) == sorted(g2)
	for a in g1:
		for b in g1:
			assert phi[g1.multiply(a, b)] == g2.multiply(phi[a], phi[b])


# PERMUTATIONS
# ------------

def test_permutation_basics():
	e = Permutation.identity(4)
	assert e.value == (0, 1, 2, 3) and str(e) == '0,1,2,3'
	assert e.order() == 1 and e.cycles() == [] and e.format() == '(1)'

	p = Permutation.from_cycles(4, [[1, 2, 3]])
	assert p.value == (1, 2, 0, 3)
	assert p.cycles() == [[1, 2, 3]] and p.format() == '(1 2 3)'
	assert p.order() == 3 and p.sign() == 0

	q = Permutation.from_cycles(5, [[1, 2], [3, 4, 5]])
	assert q.order() == 6 and q.cycle_type() == (3, 2) and q.sign() == 1
	assert list(q.cycles_iter()) == [[0, 1], [2, 3, 4]]
	assert Permutation.from_cycles(4, [[4, 1]]).cycle_type() == (2, 1, 1)
	assert Permutation.identity(0).order() == 1 and Permutation.identity(0).sign() == 0

def test_permutation_composition_is_right_to_left():
	a = Permutation.from_cycles(3, [[1, 2]])
	b = Permutation.from_cycles(3, [[2, 3]])
	ab = a * b
	for i in range(3):
		assert ab(i) == a(b(i))
	assert ab == a.multiply(b)
	assert ab != b * a

def test_permutation_inverse():
	for p in itertools.permutations(range(5)):
		p = Permutation(p)
		assert str(p.inverse().inverse()) == str(p)
		assert p * p.inverse() == Permutation.identity(5)
		assert p.inverse().order() == p.order()
		assert Permutation.from_cycles(5, p.cycles()) == p

def test_permutation_errors():
	with pytest.raises(ValueError):
		Permutation.identity(3) * Permutation.identity(4)
	with pytest.raises(ValueError):
		Permutation([0, 0, 1])
	with pytest.raises(ValueError):
		Permutation.from_cycles(3, [[1, 4]])
	with pytest.raises(ValueError):
		Permutation.from_cycles(3, [[1, 2], [2, 3]])
	with pytest.raises(TypeError):
		Permutation.identity(3).multiply((0, 1, 2))


# GROUP ABSTRACTION
# -----------------

def test_closure():
	add12 = lambda a, b: (a + b) % 12
	assert len(generate_closure([1], add12, 0)) == 12
	assert len(generate_closure([2, 3], add12, 0)) == 12
	assert sorted(generate_closure([2], add12, 0)) == [0, 2, 4, 6, 8, 10]
	assert generate_closure([5], add12, 0)[0] == 0
	assert generate_closure([], add12, 0) == [0]

def test_custom_carrier():
	# units mod 8 under multiplication: {1, 3, 5, 7}, the Klein group
	g = ConcreteGroup('U_8', 'U(8)', [3, 5], lambda a, b: a * b % 8, lambda a: a, 1)
	assert g.order == 4 and g.identity == '1'
	assert sorted(g) == ['1', '3', '5', '7']
	assert g.multiply('3', '5') == '7'
	assert g.invert('7') == '7'
	assert are_isomorphic(g, klein_four_group())
	verify_axioms(g)

def test_unknown_ids():
	g = cyclic_group(4)
	assert g.multiply('1', 'nope') is None
	assert g.invert('nope') is None
	assert g.element_order('nope') is None
	assert g.element('nope') is None
	assert 'nope' not in g and '3' in g

def test_element_orders_are_lazy():
	g = symmetric_group(3)
	assert all(el.order is None for el in g.elements)
	assert g.element_order(g.identity) == 1
	assert all(el.order is None for el in g.elements)
	g.properties()
	assert collections.Counter(el.order for el in g.elements) == {1: 1, 2: 3, 3: 2}

def test_element_order_bound():
	g = cyclic_group(3)
	g._table[1][1] = 1  # break the table: 1 + 1 = 1
	with pytest.raises(RuntimeError):
		g.element_order('1')

def test_memoized():
	g = dihedral_group(4)
	assert g.cayley_table() is g.cayley_table()
	assert g.properties() is g.properties()
	assert g.subgroups() is g.subgroups()
	assert g.conjugacy_classes() is g.conjugacy_classes()

def test_memoized_across_threads(monkeypatch):
	calls = []
	find_all = algorithms.find_all_subgroups
	def counted(table):
		calls.append(1)
		return find_all(table)
	monkeypatch.setattr(algorithms, 'find_all_subgroups', counted)

	g = alternating_group(5)
	barrier = threading.Barrier(8)
	def worker(_):
		barrier.wait()
		return g.properties()
	with ThreadPoolExecutor(max_workers=8) as pool:
		results = list(pool.map(worker, range(8)))
	assert all(r is results[0] for r in results)
	assert len(calls) == 1
	assert results[0].is_simple and g.subgroups() is g.subgroups()

def test_cayley_table():
	g = cyclic_group(5)
	t = g.cayley_table()
	assert t.elements == ('0', '1', '2', '3', '4')
	assert t.product('3', '4') == '2'
	assert list(t.rows())[1] == ('1', '2', '3', '4', '0')
	with pytest.raises(TypeError):
		t.table['0']['0'] = '1'

@pytest.mark.parametrize('id', CATALOG)
def test_axioms(id):
	verify_axioms(registry.get(id))

@pytest.mark.parametrize('id', CATALOG)
def test_lagrange(id):
	g = registry.get(id)
	for x in g:
		assert g.order % g.element_order(x) == 0
	for s in g.subgroups():
		assert g.order % s.order == 0

@pytest.mark.parametrize('id', CATALOG)
def test_center(id):
	g = registry.get(id)
	center = g.properties().center
	assert g.identity in center
	for z in center:
		for x in g:
			assert g.multiply(z, x) == g.multiply(x, z)


# CATALOG
# -------

EXPECTED = {
	# id: (order, abelian, cyclic, center size, simple)
	'Z_1': (1, True, True, 1, False),
	'Z_2': (2, True, True, 2, True),
	'Z_3': (3, True, True, 3, True),
	'Z_4': (4, True, True, 4, False),
	'Z_2_x_Z_2': (4, True, False, 4, False),
	'Z_5': (5, True, True, 5, True),
	'Z_6': (6, True, True, 6, False),
	'S_3': (6, False, False, 1, False),
	'Z_7': (7, True, True, 7, True),
	'Z_8': (8, True, True, 8, False),
	'Z_4_x_Z_2': (8, True, False, 8, False),
	'Z_2_x_Z_2_x_Z_2': (8, True, False, 8, False),
	'D_8': (8, False, False, 2, False),
	'Q_8': (8, False, False, 2, False),
	'Z_9': (9, True, True, 9, False),
	'Z_3_x_Z_3': (9, True, False, 9, False),
	'Z_10': (10, True, True, 10, False),
	'D_10': (10, False, False, 1, False),
	'Z_11': (11, True, True, 11, True),
	'Z_12': (12, True, True, 12, False),
	'Z_6_x_Z_2': (12, True, False, 12, False),
	'A_4': (12, False, False, 1, False),
	'D_12': (12, False, False, 2, False),
	'Dic_3': (12, False, False, 2, False),
	'A_5': (60, False, False, 1, True),
}

def test_catalog_is_complete():
	assert sorted(CATALOG) == sorted(EXPECTED)

@pytest.mark.parametrize('id', sorted(EXPECTED))
def test_catalog_properties(id):
	order, abelian, cyclic, center, simple = EXPECTED[id]
	props = registry.get(id).properties()
	assert props.order == order
	assert props.is_abelian == abelian
	assert props.is_cyclic == cyclic
	assert len(props.center) == center
	assert props.is_simple == simple

def test_family_orders():
	for n in range(1, 7):
		assert cyclic_group(n).order == n
		assert symmetric_group(n).order == math.factorial(n)
		assert alternating_group(n).order == max(1, math.factorial(n) // 2)
		assert dicyclic_group(n).order == 4 * n
	for n in range(3, 9):
		assert dihedral_group(n).order == 2 * n
	for f, n in [(cyclic_group, 0), (dihedral_group, 2), (dicyclic_group, 0)]:
		with pytest.raises(ValueError):
			f(n)

def test_alternating_is_even():
	g = alternating_group(5)
	perms = [ Permutation(map(int, x.split(','))) for x in g ]
	assert all(p.sign() == 0 for p in perms)
	assert g.element(g.identity).label == '(1)'

def test_dihedral_relations():
	g = registry.get('D_8')
	g.properties()
	r = next(el.id for el in g.elements if el.order == 4)
	r2 = g.multiply(r, r)
	s = next(el.id for el in g.elements if el.order == 2 and el.id != r2)
	e = g.identity
	assert g.multiply(s, s) == e
	assert g.multiply(r2, r2) == e
	assert g.multiply(g.multiply(s, r), s) == g.invert(r)

def test_quaternion_relations():
	g = registry.get('Q_8')
	assert sorted(g) == sorted(['1', '-1', 'i', '-i', 'j', '-j', 'k', '-k'])
	for u in 'ijk':
		assert g.multiply(u, u) == '-1'
	assert g.multiply('i', 'j') == 'k' and g.multiply('j', 'i') == '-k'
	assert g.multiply(g.multiply('i', 'j'), 'k') == '-1'
	assert set(g.properties().center) == {'1', '-1'}

def test_dicyclic():
	g = dicyclic_group(3)
	labels = { el.label for el in g.elements }
	assert labels == {'e', 'a', 'a^{2}', 'a^{3}', 'a^{4}', 'a^{5}', 'x', 'ax', 'a^{2}x', 'a^{3}x', 'a^{4}x', 'a^{5}x'}
	by_label = { el.label: el.id for el in g.elements }
	a, x = by_label['a'], by_label['x']
	assert g.multiply(x, x) == by_label['a^{3}']
	assert g.multiply(g.multiply(x, a), g.invert(x)) == g.invert(a)
	# every element outside ⟨a⟩ has order 4
	g.properties()
	assert all(el.order == 4 for el in g.elements if el.label.endswith('x'))


# SUBGROUPS & CONJUGACY
# ---------------------

SUBGROUP_COUNTS = {
	'Z_1': 1, 'S_3': 6, 'Z_6': 4, 'Z_2_x_Z_2': 5, 'D_8': 10, 'Q_8': 6,
	'A_4': 10, 'Z_12': 6, 'Dic_3': 8, 'A_5': 59,
}

@pytest.mark.parametrize('id', sorted(SUBGROUP_COUNTS))
def test_subgroups(id):
	g = registry.get(id)
	subgroups = g.subgroups()
	assert len(subgroups) == SUBGROUP_COUNTS[id]
	assert len({ s.elements for s in subgroups }) == len(subgroups)
	assert subgroups[0].order == 1 and subgroups[0].name == '1'
	assert subgroups[-1].order == g.order
	for s in subgroups:
		verify_subgroup(g, s)
		assert g.subgroup_generated_by(s.generators) == s

@pytest.mark.parametrize('id', ['S_3', 'Z_6', 'Z_2_x_Z_2', 'D_8', 'Q_8', 'A_4'])
def test_subgroup_intersections(id):
	subgroups = registry.get(id).subgroups()
	listed = { s.elements for s in subgroups }
	for a, b in itertools.combinations(subgroups, 2):
		assert a.elements & b.elements in listed

@pytest.mark.parametrize('id', ['S_3', 'D_8', 'Q_8', 'A_4', 'D_12', 'Dic_3'])
def test_normal_subgroups(id):
	g = registry.get(id)
	for s in g.subgroups():
		conjugation_closed = all(g.conjugate(n, x) in s.elements for n in s.elements for x in g)
		assert s.is_normal == conjugation_closed
	orders = [ s.order for s in g.normal_subgroups() ]
	assert orders == sorted(orders, reverse=True)

def test_normal_subgroup_examples():
	assert [ s.order for s in registry.get('S_3').normal_subgroups() ] == [6, 3, 1]
	assert [ s.order for s in registry.get('A_4').normal_subgroups() ] == [12, 4, 1]
	assert [ s.order for s in registry.get('A_5').normal_subgroups() ] == [60, 1]
	# every subgroup of Q_8 is normal
	assert all(s.is_normal for s in registry.get('Q_8').subgroups())

@pytest.mark.parametrize('id', CATALOG)
def test_conjugacy_classes(id):
	g = registry.get(id)
	classes = g.conjugacy_classes()
	assert classes[0] == (g.identity,)
	assert sorted(x for cls in classes for x in cls) == sorted(g)
	for cls in classes:
		assert g.order % len(cls) == 0
		assert { g.conjugate(cls[0], x) for x in g } == set(cls)
	if g.properties().is_abelian:
		assert len(classes) == g.order

def test_conjugacy_class_sizes():
	sizes = lambda id: sorted(map(len, registry.get(id).conjugacy_classes()))
	assert sizes('S_3') == [1, 2, 3]
	assert sizes('D_8') == [1, 1, 2, 2, 2]
	assert sizes('Q_8') == [1, 1, 2, 2, 2]
	assert sizes('A_4') == [1, 3, 4, 4]
	assert sizes('A_5') == [1, 12, 12, 15, 20]


# LATTICE
# -------

def test_lattice_cyclic_6():
	lattice = build_lattice(cyclic_group(6).subgroups())
	assert [ n.order for n in lattice.nodes ] == [1, 2, 3, 6]
	assert sorted(lattice.links) == [(0, 1), (0, 2), (1, 3), (2, 3)]
	assert (1, 2) not in lattice.links
	assert list(lattice.layers) == [1, 2, 3, 6]
	assert [ n.rank for n in lattice.nodes ] == [0, 1, 1, 2]
	assert lattice.max_rank == 2

def test_lattice_cyclic_8():
	lattice = build_lattice(cyclic_group(8).subgroups())
	assert [ n.order for n in lattice.nodes ] == [1, 2, 4, 8]
	assert sorted(lattice.links) == [(0, 1), (1, 2), (2, 3)]
	assert lattice.max_rank == 3 and len(lattice.layers) == 4

def test_lattice_cyclic_12():
	lattice = build_lattice(cyclic_group(12).subgroups())
	ranks = { n.order: n.rank for n in lattice.nodes }
	assert ranks == {1: 0, 2: 1, 3: 1, 4: 2, 6: 2, 12: 3}
	assert len(lattice.links) == 7

def test_lattice_klein_and_s3():
	lattice = build_lattice(klein_four_group().subgroups())
	assert len(lattice.layers[2]) == 3 and len(lattice.links) == 6

	lattice = build_lattice(symmetric_group(3).subgroups())
	assert { k: len(v) for k, v in lattice.layers.items() } == {1: 1, 2: 3, 3: 1, 6: 1}
	assert sorted(n.rank for n in lattice.nodes) == [0, 1, 1, 1, 1, 2]
	assert lattice.max_rank == 2 and len(lattice.links) == 8

def test_lattice_node_ids():
	subgroups = list(reversed(dihedral_group(4).subgroups()))
	lattice = build_lattice(subgroups)
	for node in lattice.nodes:
		assert subgroups[node.id] is node.subgroup
	orders = [ n.order for n in lattice.nodes ]
	assert orders == sorted(orders)

@pytest.mark.parametrize('id', ['D_8', 'A_4', 'Q_8', 'Dic_3'])
def test_lattice_covering(id):
	lattice = build_lattice(registry.get(id).subgroups())
	nodes = lattice.nodes
	for a, b in lattice.links:
		assert nodes[a].elements < nodes[b].elements
		assert not any(nodes[a].elements < k.elements < nodes[b].elements for k in nodes)
		assert nodes[b].rank > nodes[a].rank


# ISOMORPHISM
# -----------

def test_known_isomorphisms():
	pairs = [
		(direct_product(cyclic_group(2), cyclic_group(2)), klein_four_group()),
		(registry.get('S_3'), dihedral_group(3)),
		(cyclic_group(6), direct_product(cyclic_group(2), cyclic_group(3))),
		(quaternion_group(), dicyclic_group(2)),
		(dicyclic_group(1), cyclic_group(4)),
	]
	for g1, g2 in pairs:
		phi = find_isomorphism(g1, g2)
		assert phi is not None
		verify_isomorphism(g1, g2, phi)
		assert are_isomorphic(g2, g1)

def test_known_non_isomorphisms():
	d8, q8 = registry.get('D_8'), registry.get('Q_8')
	assert order_profile(d8) == {1: 1, 2: 5, 4: 2}
	assert order_profile(q8) == {1: 1, 2: 1, 4: 6}
	assert not are_isomorphic(d8, q8)
	assert not are_isomorphic(cyclic_group(4), klein_four_group())
	assert not are_isomorphic(cyclic_group(8), d8)
	assert not are_isomorphic(d8, registry.get('Z_4_x_Z_2'))
	assert not are_isomorphic(registry.get('A_4'), registry.get('D_12'))

def test_trivial_isomorphism():
	assert find_isomorphism(cyclic_group(1), symmetric_group(1)) == {'0': '0'}

def test_isomorphism_invariants_are_not_enough():
	# Z_4 ⋊ Z_4 and Z_2 x Q_8: both non-abelian of order 16, center of size 4,
	# element orders {1: 1, 2: 3, 4: 12}, yet not isomorphic
	def multiply(p, q):
		return (p[0] + (-1) ** p[1] * q[0]) % 4, (p[1] + q[1]) % 4
	def invert(p):
		return -(-1) ** p[1] * p[0] % 4, -p[1] % 4
	g = ConcreteGroup('Z_4_sdp_Z_4', 'Z_4 \\rtimes Z_4', [(1, 0), (0, 1)], multiply, invert, (0, 0))
	h = direct_product(cyclic_group(2), quaternion_group())
	assert g.order == h.order == 16
	assert invariants_match(g, h)
	assert find_isomorphism(g, h) is None
	assert find_isomorphism(h, g) is None

	h2 = direct_product(quaternion_group(), cyclic_group(2))
	phi = find_isomorphism(h, h2)
	assert phi is not None
	verify_isomorphism(h, h2, phi)

def test_greedy_generators():
	for id in ['Z_6', 'Z_2_x_Z_2_x_Z_2', 'S_3', 'A_5']:
		g = registry.get(id)
		gens = greedy_generators(g)
		assert len(g.subgroup_generated_by(gens).elements) == g.order
	assert len(greedy_generators(registry.get('Z_2_x_Z_2_x_Z_2'))) == 3
	assert greedy_generators(cyclic_group(1)) == []

def test_isomorphism_catalog():
	groups = [ registry.get(id) for id in CATALOG ]
	for g in groups:
		assert are_isomorphic(g, g)
	for g1, g2 in itertools.combinations(groups, 2):
		assert not are_isomorphic(g1, g2)
		assert not are_isomorphic(g2, g1)


# QUOTIENTS
# ---------

def test_quotient_s3():
	g = registry.get('S_3')
	a3 = next(s for s in g.subgroups() if s.order == 3)
	q = quotient_group(g, a3)
	assert q.order == 2 and q.properties().is_cyclic
	assert '/' in q.display_name
	assert all(x in g for x in q)
	assert all(el.label.startswith('[') for el in q.elements)

@pytest.mark.parametrize('id', ['Z_12', 'D_8', 'Q_8', 'A_4', 'D_12', 'Dic_3', 'Z_3_x_Z_3'])
def test_quotient_order_law(id):
	g = registry.get(id)
	for n in g.normal_subgroups():
		q = quotient_group(g, n)
		assert q.order == g.order // n.order
		verify_axioms(q)

def test_quotient_labels():
	g = registry.get('D_8')
	normal = g.normal_subgroups()
	whole, trivial = normal[0], normal[-1]
	assert [ el.label for el in quotient_group(g, whole).elements ] == ['1']
	assert sorted(el.label for el in quotient_group(g, trivial).elements) == sorted(el.label for el in g.elements)
	center = next(s for s in normal if s.order == 2)
	q = quotient_group(g, center)
	assert all(el.label.startswith('[') and el.label.endswith(']') for el in q.elements)
	assert are_isomorphic(q, klein_four_group())

def test_quotient_identifications():
	assert are_isomorphic(quotient_group(registry.get('A_4'), registry.get('A_4').normal_subgroups()[1]), cyclic_group(3))
	q8 = registry.get('Q_8')
	center = next(s for s in q8.normal_subgroups() if s.order == 2)
	assert are_isomorphic(quotient_group(q8, center), klein_four_group())


# REGISTRY
# --------

def test_registry_lookup():
	r = default_registry()
	assert r.get('S_3') is r.get('S_3')
	assert r.get('nope') is None
	assert 'Z_5' in r and 'nope' not in r

def test_registry_quotient_chain():
	r = default_registry()
	q1 = r.get('S_3_quo_1')
	assert q1 is not None and q1.order == 2 and q1.id == 'S_3_quo_1'
	q2 = r.get('S_3_quo_1_quo_1')
	assert q2 is not None and q2.order == 2
	assert '/' in q2.display_name
	assert r.get('S_3_quo_0').order == 1
	assert r.get('S_3_quo_2').order == 6
	assert r.get('S_3_quo_1_quo_0_quo_0').order == 1
	assert r.get('S_3_quo_1_quo_1') is q2

def test_registry_quotient_misses():
	r = default_registry()
	assert r.get('S_3_quo_3') is None
	assert r.get('S_3_quo_1_quo_5') is None
	assert r.get('Nope_quo_0') is None
	assert r.get('S_3_quo_') is None
	assert r.get('S_3_quo_x') is None
	assert r.get('S_3_quo_²') is None
	assert r.get('S_3_quo_٣') is None
	assert r.get('S_3_quo_01') is None
	assert r.get('S_3_quo_1') is r.get('S_3_quo_1')

def test_registry_catalog_visibility():
	r = default_registry()
	size = len(r.catalog())
	r.register('Hidden_Z_5', lambda: cyclic_group(5), visible=False)
	assert r.get('Hidden_Z_5').order == 5
	r.get('S_3_quo_1')
	r.get('Z_13')
	assert len(r.catalog()) == size
	ids = { entry.id for entry in r.catalog() }
	assert 'Hidden_Z_5' not in ids and 'S_3_quo_1' not in ids and 'Z_13' not in ids
	r.register('Static_Z_5', lambda: cyclic_group(5))
	assert 'Static_Z_5' in { entry.id for entry in r.catalog() }

def test_registry_families():
	r = GroupRegistry()
	assert r.get('Z_13').order == 13
	assert r.get('S_4').order == 24
	assert r.get('D_14').order == 14
	assert r.get('Dic_2').order == 8
	for id in ['D_4', 'D_7', 'Z_0', 'S_0', 'S_20', 'X_3']:
		assert r.get(id) is None
	for id in ['Z_007', 'S_04', 'Z_٧', 'Z_²']:
		assert r.get(id) is None
	for id in ['Z_13', 'S_4', 'A_5', 'D_14', 'Dic_2']:
		assert r.get(id).id == id

def test_registry_factory_errors():
	r = GroupRegistry()
	r.register('Broken', lambda: dihedral_group(1))
	with pytest.raises(ValueError):
		r.get('Broken')

def test_registry_find_isomorphic():
	r = default_registry()
	assert r.find_isomorphic(dihedral_group(3)) is r.get('S_3')
	assert r.find_isomorphic(quotient_group(r.get('D_8'), r.get('D_8').normal_subgroups()[-2])).id == 'Z_2_x_Z_2'
	assert r.find_isomorphic(symmetric_group(4)) is None


# CROSS-CHECKS
# ------------

def test_against_sympy():
	from sympy.combinatorics.named_groups import SymmetricGroup, AlternatingGroup, DihedralGroup
	cases = [
		(symmetric_group(4), SymmetricGroup(4)),
		(alternating_group(4), AlternatingGroup(4)),
		(alternating_group(5), AlternatingGroup(5)),
		(dihedral_group(6), DihedralGroup(6)),
	]
	for ours, theirs in cases:
		assert ours.order == theirs.order()
		assert len(ours.properties().center) == theirs.center().order()
		assert len(ours.conjugacy_classes()) == len(theirs.conjugacy_classes())
		assert ours.properties().is_abelian == theirs.is_abelian
