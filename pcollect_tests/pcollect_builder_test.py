import suite
from pcollect import P, make, from_numeric, CollectionBuilder, IndexOutOfRangeError, NumericCollection

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


@test("builder append mutates and chains")
def test_append():
    builder = make().builder()
    result = builder.append(1, 2).append(3)
    assert_that(result is builder, "append returns the builder")
    assert_that(builder.all() == (1, 2, 3), "values appended in order")


@test("builder concat appends another collection")
def test_concat():
    builder = P([1]).builder().concat(P([2, 3]))
    assert_that(builder.build().all() == (1, 2, 3), "should concatenate")


@test("building never changes the source collection")
def test_source_untouched():
    source = P([1, 2, 3])
    builder = source.builder()
    builder.append(4).set(0, 9)
    assert_that(source.all() == (1, 2, 3), "source collection is immutable")
    assert_that(builder.build().all() == (9, 2, 3, 4), "builder holds the changes")


@test("built collections are snapshots")
def test_build_snapshot():
    builder = CollectionBuilder([1, 2])
    built = builder.build()
    builder.append(3)
    assert_that(built.all() == (1, 2), "later appends should not leak into a built collection")


@test("pop removes items from the end and returns them in order")
def test_pop():
    builder = P([1, 2, 3, 4, 5]).builder()
    popped = builder.pop(2)
    assert_that(builder.all() == (1, 2, 3), f"builder should keep 1..3: {builder.all()}")
    assert_that(popped.all() == (4, 5), f"popped should be 4, 5: {popped.all()}")


@test("pop defaults to a single item and stops at empty")
def test_pop_edges():
    builder = P(['a', 'b']).builder()
    assert_that(builder.pop().all() == ('b',), "single pop")
    assert_that(builder.pop(5).all() == ('a',), "popping more than held pops everything")
    assert_that(builder.count() == 0 and builder.pop(1).empty(), "nothing left to pop")
    assert_raises(ValueError, lambda: builder.pop(-1), "negative count")


@test("set overwrites inside bounds")
def test_set_in_bounds():
    builder = P([1, 2, 3]).builder().set(1, 20)
    assert_that(builder.all() == (1, 20, 3), "middle item replaced")


@test("set grows the builder and fills the gap with the default")
def test_set_grows():
    builder = P(['a'], default='').builder()
    builder.set(3, 'd')
    assert_that(builder.all() == ('a', '', '', 'd'), f"gap should be filled: {builder.all()}")
    assert_that(builder.set(4, 'e').count() == 5, "setting one past the end appends")


@test("set rejects negative indexes")
def test_set_negative():
    assert_raises(IndexOutOfRangeError, lambda: make().builder().set(-1, 1))


@test("safe_set raises and leaves the builder unchanged when out of range")
def test_safe_set():
    builder = P([1, 2, 3]).builder()
    builder.safe_set(2, 30)
    assert_that(builder.all() == (1, 2, 30), "in range write")
    for index in (3, 10, -1):
        err = assert_raises(IndexOutOfRangeError, lambda: builder.safe_set(index, 0), f"index {index}")
        assert_that(err.index == index and err.count == 3, "error carries index and count")
        assert_that(isinstance(err, IndexError), "is an IndexError")
    assert_that(builder.all() == (1, 2, 30), "builder is unchanged")


@test("numeric builders build numeric collections and fill with zero")
def test_numeric_builder():
    builder = from_numeric([1, 2], dtype='int32').builder()
    built = builder.set(4, 5).build()
    assert_that(isinstance(built, NumericCollection), "should stay numeric")
    assert_that(built.all() == (1, 2, 0, 0, 5), f"gap filled with zero: {built.all()}")
    assert_that(str(built.dtype) == 'int32', "dtype kept")
    assert_that(builder.pop(3).sum() == 5, "popped items are numeric too")


if __name__ == "__main__":
    suite.run(title="pcollect builder test suite")
