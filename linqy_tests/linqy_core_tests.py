import suite
from dgen import from_schema
from linqy import where, select, select_many, distinct, take, skip, order_by, order_by_descending

test = suite.test
assert_that = suite.assert_that

# test data schemas
product_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 50}),
    'name': 'word',
    'price': ('pyfloat', {'min_value': 5.0, 'max_value': 500.0}),
    'category': {'_qen_provider': 'choice', 'from': ['electronics', 'books', 'clothing']},
    'tags': {'_qen_provider': 'maybe_none', 'rate': 0.3,
             'schema': ('words', {'nb': 2})}
}

# helper data
numbers = list(range(1, 11))  # 1 through 10
words = ['apple', 'banana', 'cherry', 'date', 'elderberry']
nested_data = [[1, 2], [3, 4, 5], [], [6]]


# where() tests

@test("where filters elements correctly")
def test_where_basic():
    assert_that(where(numbers, lambda x: x % 2 == 0) == [2, 4, 6, 8, 10], "should filter even numbers")
    assert_that(where(words, lambda s: len(s) > 5) == ['banana', 'cherry', 'elderberry'], "should keep long words")


@test("where handles empty results and absent inputs")
def test_where_degraded():
    assert_that(where(numbers, lambda x: x > 100) == [], "no matches gives []")
    assert_that(where([], lambda x: True) == [], "empty source gives []")
    assert_that(where(None, lambda x: True) == [], "absent source gives []")
    assert_that(where(numbers, None) == [], "absent predicate gives []")


@test("where never mutates or aliases its source")
def test_where_fresh_container():
    source = [1, 2, 3]
    result = where(source, lambda x: True)
    result.append(4)
    assert_that(source == [1, 2, 3], "source should be untouched")
    assert_that(result is not source, "result should be a new list")


# select() tests

@test("select transforms elements")
def test_select_basic():
    assert_that(select(numbers, lambda n: f"N:{n}")[:3] == ['N:1', 'N:2', 'N:3'], "should prefix numbers")
    assert_that(select(numbers, lambda x: x * x)[-1] == 100, "last square should be 100")


@test("select handles absent inputs")
def test_select_degraded():
    assert_that(select([], lambda n: n) == [], "empty source gives []")
    assert_that(select(None, lambda n: n) == [], "absent source gives []")
    assert_that(select(numbers, None) == [], "absent selector gives []")


@test("select extracts fields from generated records")
def test_select_records():
    products = from_schema(product_schema, seed=3).records(8)
    names = select(products, lambda p: p['name'])
    assert_that(len(names) == 8, "should extract 8 names")
    assert_that(all(isinstance(name, str) for name in names), "all names should be strings")


# select_many() tests

@test("select_many flattens sequences")
def test_select_many_basic():
    assert_that(select_many(nested_data, lambda x: x) == [1, 2, 3, 4, 5, 6], "should flatten all sublists")
    sentences = ['hello world', 'linqy rocks', 'functional programming']
    assert_that(len(select_many(sentences, lambda s: s.split())) == 6, "should split into 6 words")


@test("select_many skips absent sub-sequences")
def test_select_many_none_children():
    data = [{'tags': ['a', 'b']}, {'tags': None}, {'tags': ['c']}]
    assert_that(select_many(data, lambda item: item['tags']) == ['a', 'b', 'c'], "None tags are skipped")

    products = from_schema(product_schema, seed=5).records(20)
    expected = [tag for p in products if p['tags'] is not None for tag in p['tags']]
    assert_that(select_many(products, lambda p: p['tags']) == expected, "generated tags should flatten in order")


@test("select_many handles absent inputs")
def test_select_many_degraded():
    assert_that(select_many([], lambda x: x) == [], "empty source gives []")
    assert_that(select_many(None, lambda x: x) == [], "absent source gives []")
    assert_that(select_many(nested_data, None) == [], "absent selector gives []")


# distinct() tests

@test("distinct removes duplicates preserving order")
def test_distinct_basic():
    assert_that(distinct([1, 2, 2, 3, 1, 4, 3]) == [1, 2, 3, 4], "should keep first occurrences")
    assert_that(distinct(['b', 'a', 'b']) == ['b', 'a'], "order of first appearance is kept")


@test("distinct compares unhashable elements by value")
def test_distinct_unhashable():
    data = [[1, 2], [3], [1, 2], {'k': 1}, {'k': 1}, 'x', 'x']
    assert_that(distinct(data) == [[1, 2], [3], {'k': 1}, 'x'], "lists and dicts should dedupe by value")


@test("distinct is idempotent")
def test_distinct_idempotent():
    products = from_schema(product_schema, seed=9).records(25)
    categories = select(products, lambda p: p['category'])
    once = distinct(categories)
    assert_that(distinct(once) == once, "distinct(distinct(s)) should equal distinct(s)")
    assert_that(len(once) <= 3, "there are at most three categories")


@test("distinct handles absent inputs")
def test_distinct_degraded():
    assert_that(distinct([]) == [], "empty source gives []")
    assert_that(distinct(None) == [], "absent source gives []")


# take() / skip() tests

@test("take returns the first n elements")
def test_take_basic():
    assert_that(take(numbers, 3) == [1, 2, 3], "should take 3")
    assert_that(take(numbers, 100) == numbers, "should take everything when n exceeds length")
    assert_that(take(words, 2) == ['apple', 'banana'], "should take 2 words")


@test("take with zero or negative count is empty")
def test_take_non_positive():
    assert_that(take(numbers, 0) == [], "take 0 gives []")
    assert_that(take(numbers, -1) == [], "take -1 gives []")
    assert_that(take(None, 3) == [], "absent source gives []")
    assert_that(take([], 5) == [], "empty source gives []")


@test("take stops reading a one-shot iterator")
def test_take_iterator():
    source = iter(numbers)
    assert_that(take(source, 2) == [1, 2], "should take 2 from the iterator")
    assert_that(next(source) == 3, "the rest of the iterator is left unread")


@test("skip omits the first n elements")
def test_skip_basic():
    assert_that(skip(numbers, 3) == [4, 5, 6, 7, 8, 9, 10], "should skip 3")
    assert_that(skip(words, 2) == ['cherry', 'date', 'elderberry'], "should skip 2 words")


@test("skip edge cases")
def test_skip_edges():
    assert_that(skip(numbers, len(numbers)) == [], "skipping everything gives []")
    assert_that(skip(numbers, 100) == [], "skipping past the end gives []")
    assert_that(skip(numbers, 0) == numbers, "skip 0 returns everything")
    assert_that(skip(numbers, -1) == numbers, "skip -1 returns everything")
    assert_that(skip(numbers, 0) is not numbers, "skip 0 still returns a new list")
    assert_that(skip(None, 3) == [], "absent source gives []")
    assert_that(skip([], 1) == [], "empty source gives []")


@test("take and skip partition the sequence")
def test_take_skip_partition():
    for n in range(0, 13):
        assert_that(take(numbers, n) + skip(numbers, n) == numbers, f"take + skip should rebuild for n={n}")


# order_by() tests

@test("order_by sorts ascending by natural order")
def test_order_by_natural():
    assert_that(order_by([3, 1, 4, 1, 5, 9, 2, 6]) == [1, 1, 2, 3, 4, 5, 6, 9], "should sort numbers")


@test("order_by with key selector")
def test_order_by_key():
    assert_that(order_by(['banana', 'apple', 'cherry'], lambda s: s) == ['apple', 'banana', 'cherry'],
                "should sort words")
    assert_that(order_by(words, len) == ['date', 'apple', 'banana', 'cherry', 'elderberry'],
                "should sort by length keeping ties in order")


@test("order_by_descending with key selector")
def test_order_by_descending():
    assert_that(order_by_descending(['banana', 'apple', 'cherry'], lambda s: s) == ['cherry', 'banana', 'apple'],
                "should sort words descending")
    assert_that(order_by([1, 3, 2], ascending=False) == [3, 2, 1], "ascending=False sorts descending")


@test("order_by is stable in both directions")
def test_order_by_stable():
    items = [('a', 2), ('b', 1), ('c', 2), ('d', 1), ('e', 2)]
    ascending = order_by(items, lambda t: t[1])
    assert_that([t[0] for t in ascending] == ['b', 'd', 'a', 'c', 'e'], "equal keys keep input order ascending")
    descending = order_by_descending(items, lambda t: t[1])
    assert_that([t[0] for t in descending] == ['a', 'c', 'e', 'b', 'd'], "equal keys keep input order descending")

    products = from_schema(product_schema, seed=21).records(30)
    ordered = order_by(products, lambda p: p['category'])
    for category in ['books', 'clothing', 'electronics']:
        expected_ids = [p['id'] for p in products if p['category'] == category]
        actual_ids = [p['id'] for p in ordered if p['category'] == category]
        assert_that(actual_ids == expected_ids, f"{category} should keep input order")


@test("order_by handles absent inputs")
def test_order_by_degraded():
    assert_that(order_by([]) == [], "empty source gives []")
    assert_that(order_by(None) == [], "absent source gives []")
    assert_that(order_by_descending([]) == [], "empty source gives [] descending")
    assert_that(order_by_descending(None) == [], "absent source gives [] descending")
    assert_that(order_by(numbers, None) == [], "absent key selector gives []")


@test("order_by leaves the source untouched")
def test_order_by_no_mutation():
    source = [3, 1, 2]
    order_by(source)
    assert_that(source == [3, 1, 2], "source should not be sorted in place")


if __name__ == "__main__":
    suite.run(title="linqy transformation test suite")
