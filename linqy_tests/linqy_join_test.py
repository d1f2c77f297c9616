import suite
from dgen import from_schema
from linqy import Seq, Pair, Q, empty

test = suite.test
assert_that = suite.assert_that

# --- test data schemas ---
employee_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 50}),
    'proj_id': ('pyint', {'min_value': 0, 'max_value': 4}),
    'name': 'first_name'
}

project_schema = {
    'id': ('pyint', {'min_value': 0, 'max_value': 4}),
    'name': 'company'
}

# --- helper data ---
people_data = [
    {'id': 1, 'name': 'alice', 'dept': 'eng'},
    {'id': 2, 'name': 'bob', 'dept': 'sales'},
    {'id': 3, 'name': 'charlie', 'dept': 'eng'}
]

orders_data = [
    {'id': 101, 'customer_id': 1, 'amount': 250},
    {'id': 102, 'customer_id': 1, 'amount': 150},
    {'id': 103, 'customer_id': 2, 'amount': 500},
    {'id': 104, 'customer_id': 4, 'amount': 300}  # no matching person
]


def same_customer(person, order):
    return person['id'] == order['customer_id']


# --- pair join ---

@test("pair_join keeps both sides as pairs")
def test_pair_join_basic():
    result = Q(people_data).pair_join(orders_data, same_customer)
    assert_that(len(result) == 3, "should have 3 matching pairs")
    assert_that(result.all(lambda p: isinstance(p, Pair)), "elements should be pairs")
    ids = result.select(lambda p: (p.left['name'], p.right['id'])).to_vector()
    assert_that(ids == [('alice', 101), ('alice', 102), ('bob', 103)], f"unexpected pairs: {ids}")


@test("join without merge is a pair join")
def test_join_defaults_to_pairs():
    pairs = Q(people_data).join(orders_data, same_customer)
    assert_that(pairs == Q(people_data).pair_join(orders_data, same_customer), "join should dispatch to pair_join")


@test("pairs unpack and compare by value")
def test_pair_record():
    left, right = Pair(1, 'a')
    assert_that((left, right) == (1, 'a'), "pair should unpack to (left, right)")
    assert_that(Pair(1, 'a') == Pair(1, 'a'), "equal fields should compare equal")
    assert_that(Pair(1, 'a') != Pair(1, 'b'), "different fields should differ")
    assert_that(repr(Pair(1, 'a')) == "Pair(left=1, right='a')", f"unexpected repr: {Pair(1, 'a')!r}")


# --- merge join ---

@test("merge_join builds merged records")
def test_merge_join_basic():
    result = Q(people_data).merge_join(
        orders_data,
        lambda p, o: {'name': p['name'], 'amount': o['amount']},
        same_customer
    ).to_vector()
    assert_that(result == [
        {'name': 'alice', 'amount': 250},
        {'name': 'alice', 'amount': 150},
        {'name': 'bob', 'amount': 500}
    ], f"unexpected merge: {result}")


@test("join with merge is a merge join")
def test_join_with_merge():
    merged = Q(people_data).join(orders_data, same_customer, merge=lambda p, o: o['id'])
    assert_that(merged.to_vector() == [101, 102, 103], f"unexpected merge: {merged}")


@test("join with positional merge and predicate is a merge join")
def test_join_positional_merge():
    merge = lambda l, r: (l, r)
    on = lambda l, r: l == r
    result = Seq([1, 2]).join([1, 2], merge, on)
    assert_that(result.to_vector() == [(1, 1), (2, 2)], f"unexpected merge: {result}")
    assert_that(result == Seq([1, 2]).merge_join([1, 2], merge, on), "should match merge_join")

    people = Q(people_data)
    merged = people.join(orders_data, lambda p, o: o['id'], same_customer)
    assert_that(merged.to_vector() == [101, 102, 103], f"unexpected merge: {merged}")


@test("join rejects the wrong number of callables")
def test_join_arity():
    on = lambda l, r: True
    suite.assert_raises(TypeError, lambda: Seq([1]).join([1]))
    suite.assert_raises(TypeError, lambda: Seq([1]).join([1], on, on, on))
    suite.assert_raises(TypeError, lambda: Seq([1]).join([1], on, on, merge=on))


@test("merge join equals pair join followed by select")
def test_merge_equals_pair_select():
    employees = from_schema(employee_schema, seed=11).take(15)
    projects = from_schema(project_schema, seed=12).take(6)
    on = lambda e, p: e['proj_id'] == p['id']
    merge = lambda e, p: (e['name'], p['name'])

    merged = employees.merge_join(projects, merge, on)
    paired = employees.pair_join(projects, on).select(lambda pair: merge(pair.left, pair.right))
    assert_that(merged == paired, "merge join and pair join + select should agree")


@test("join output is left-major, right-minor")
def test_join_order():
    left = Seq(['a', 'b', 'c'])
    right = Seq([1, 2, 3])
    result = left.join(right, lambda l, r: True, merge=lambda l, r: f"{l}{r}").to_vector()
    assert_that(result == ['a1', 'a2', 'a3', 'b1', 'b2', 'b3', 'c1', 'c2', 'c3'], f"wrong order: {result}")


@test("join order matches a lexicographic index enumeration")
def test_join_order_generated():
    employees = from_schema(employee_schema, seed=21).take(12)
    projects = from_schema(project_schema, seed=22).take(5)
    on = lambda e, p: e['proj_id'] == p['id']

    expected = [(i, j) for i, e in enumerate(employees) for j, p in enumerate(projects) if on(e, p)]
    indexed_left = employees.select(lambda e: e)
    actual = Seq(range(len(employees))).join(
        range(len(projects)),
        lambda i, j: on(indexed_left[i], projects[j]),
        merge=lambda i, j: (i, j)
    ).to_vector()
    assert_that(actual == expected, "pairs should be enumerated by (left index, right index)")


@test("join evaluates the predicate for every candidate pair")
def test_join_predicate_calls():
    calls = []
    Seq([1, 2]).pair_join([10, 20, 30], lambda l, r: calls.append((l, r)) or False)
    assert_that(len(calls) == 6, f"expected 6 predicate calls, got {len(calls)}")


@test("join handles no matches")
def test_join_no_matches():
    result = Q([{'id': 1}]).pair_join([{'customer_id': 2}], same_customer)
    assert_that(result == Seq(), "join with no matches should return empty")


@test("join handles empty sequences")
def test_join_empty():
    assert_that(empty().pair_join(orders_data, same_customer) == Seq(), "empty left gives empty result")
    assert_that(Q(people_data).pair_join([], same_customer) == Seq(), "empty right gives empty result")


@test("join accepts a one-shot iterable on the right")
def test_join_generator_right():
    result = Seq([1, 2]).join((x for x in [1, 2, 3]), lambda l, r: l <= r, merge=lambda l, r: (l, r))
    assert_that(result.to_vector() == [(1, 1), (1, 2), (1, 3), (2, 2), (2, 3)], f"unexpected result: {result}")


@test("join propagates predicate errors")
def test_join_error_propagates():
    suite.assert_raises(KeyError, lambda: Q(people_data).pair_join(orders_data, lambda p, o: p['missing']))


if __name__ == "__main__":
    suite.run(title="linqy join test suite")
