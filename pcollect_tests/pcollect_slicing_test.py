import suite
from dgen import from_schema
from pcollect import P, make, Collection

test = suite.test
assert_that = suite.assert_that

letters = P(['a', 'b', 'c', 'd', 'e'])


@test("before and after cut at the index")
def test_before_after():
    assert_that(letters.before(2).all() == ('a', 'b'), "before 2")
    assert_that(letters.after(2).all() == ('c', 'd', 'e'), "after 2")


@test("before and after clamp out of range indexes")
def test_before_after_clamp():
    assert_that(letters.before(10) == letters, "before past the end is everything")
    assert_that(letters.after(10).empty(), "after past the end is nothing")
    assert_that(letters.before(-1).empty(), "before a negative index is nothing")
    assert_that(letters.after(-1) == letters, "after a negative index is everything")


@test("split equals before and after, and rejoins to the original")
def test_split():
    for i in range(0, letters.count() + 1):
        left, right = letters.split(i)
        assert_that((left, right) == (letters.before(i), letters.after(i)), f"split at {i}")
        assert_that(left.all() + right.all() == letters.all(), f"halves at {i} should rejoin")


@test("sub-collections do not alias the original")
def test_no_aliasing():
    builder = letters.builder()
    head = letters.before(2)
    builder.set(0, 'z')
    assert_that(head.all() == ('a', 'b'), "changing a builder never reaches a sub-collection")
    assert_that(letters.first() == 'a', "nor the collection it came from")


@test("first_x takes the first n items")
def test_first_x():
    assert_that(letters.first_x(3).all() == ('a', 'b', 'c'), "first 3")
    assert_that(letters.first_x(5) is letters, "whole collection when count <= n")
    assert_that(letters.first_x(50) is letters, "whole collection when n is larger")
    assert_that(letters.first_x(0).empty(), "zero items")


@test("chunk splits into groups of the given size")
def test_chunk():
    chunks = P(range(1, 11)).chunk(4)
    as_tuples = chunks.map(lambda i, c: c.all()).all()
    assert_that(as_tuples == ((1, 2, 3, 4), (5, 6, 7, 8), (9, 10)), f"unexpected chunks: {as_tuples}")
    assert_that(chunks.every(lambda i, c: isinstance(c, Collection)), "each chunk is a collection")


@test("chunk of an exact multiple has no short group")
def test_chunk_exact():
    chunks = P(range(6)).chunk(3)
    assert_that(chunks.count() == 2, "two chunks")
    assert_that(chunks.last().all() == (3, 4, 5), "last chunk is full")


@test("chunk of empty is empty")
def test_chunk_empty():
    assert_that(make().chunk(3).empty(), "no chunks")


@test("chunk rejects non-positive sizes")
def test_chunk_invalid():
    suite.assert_raises(ValueError, lambda: letters.chunk(0), "size 0")
    suite.assert_raises(ValueError, lambda: letters.chunk(-2), "negative size")


@test("chunk preserves every record in order")
def test_chunk_records():
    people = from_schema({'name': 'name', 'city': 'city'}, seed=3).take(11)
    chunks = people.chunk(5)
    flattened = tuple(p for c in chunks for p in c)
    assert_that(chunks.count() == 3, "ceil(11 / 5) chunks")
    assert_that(flattened == people.all(), "flattened chunks equal the original")


if __name__ == "__main__":
    suite.run(title="pcollect slicing test suite")
