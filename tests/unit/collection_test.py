from pytest import mark, raises

from multiorder import Collection, CursorOutOfRangeError, ElementNotFoundError, ErrorKind, OrderingKind, SnapshotState
from multiorder.api import traverse


def test_append_grows_by_one_and_goes_last():
    c = Collection([4, 8])
    c.append(15)
    assert c.size() == 3
    assert len(c) == 3
    assert traverse(c, OrderingKind.INSERTION)[-1] == 15


def test_remove_removes_every_match():
    c = Collection([4, 15, 4, 1, 4])
    c.remove(4)
    assert c.size() == 2
    assert list(c) == [15, 1]
    assert 4 not in c


def test_remove_missing_leaves_collection_unchanged():
    c = Collection([1, 2, 3])
    with raises(ElementNotFoundError) as exc:
        c.remove(999)
    assert exc.value.kind is ErrorKind.NOT_FOUND
    assert exc.value.value == 999
    assert isinstance(exc.value, ValueError)
    assert list(c) == [1, 2, 3]


def test_remove_from_empty_raises():
    with raises(ElementNotFoundError):
        Collection().remove(1)


def test_repeated_insertion_and_removal():
    c = Collection()
    for i in range(100):
        c.append(i)
    for i in range(0, 100, 2):
        c.remove(i)
    assert c.size() == 50
    assert list(c) == list(range(1, 100, 2))


def test_render():
    assert Collection([1, 2, 3]).render() == "1 2 3 "
    assert str(Collection(["apple", "banana"])) == "apple banana "
    assert Collection().render() == ""


def test_repr():
    assert repr(Collection([1, 2])) == "Collection([1, 2])"


def test_iteration_is_a_copy():
    c = Collection([1, 2])
    for value in c:
        c.append(value)
    assert list(c) == [1, 2, 1, 2]


def test_string_and_float_elements():
    words = Collection(["banana", "apple"])
    assert traverse(words, OrderingKind.ASCENDING) == ["apple", "banana"]
    numbers = Collection([3.14, 2.718])
    assert traverse(numbers, OrderingKind.ASCENDING) == [2.718, 3.14]


@mark.parametrize("kind", list(OrderingKind))
def test_begin_equals_end_only_when_empty(kind):
    c = Collection()
    assert c.begin(kind) == c.end(kind)
    c.append(1)
    assert not (c.begin(kind) == c.end(kind))


@mark.parametrize("kind", list(OrderingKind))
def test_end_never_dereferences(kind):
    for items in ([], [1, 2, 3]):
        c = Collection(items)
        with raises(CursorOutOfRangeError):
            c.end(kind).dereference()
    with raises(CursorOutOfRangeError):
        Collection().begin(kind).dereference()


@mark.parametrize(
    "begin, end, expected",
    [
        ("begin_insertion", "end_insertion", [7, 15, 6, 1, 2]),
        ("begin_reverse", "end_reverse", [2, 1, 6, 15, 7]),
        ("begin_ascending", "end_ascending", [1, 2, 6, 7, 15]),
        ("begin_descending", "end_descending", [15, 7, 6, 2, 1]),
        ("begin_side_cross", "end_side_cross", [1, 15, 2, 7, 6]),
        ("begin_middle_out", "end_middle_out", [6, 15, 1, 7, 2]),
    ],
)
def test_per_kind_factories(begin, end, expected):
    c = Collection([7, 15, 6, 1, 2])
    it = getattr(c, begin)()
    stop = getattr(c, end)()
    seen = []
    while it != stop:
        seen.append(it.dereference())
        it.advance()
    assert seen == expected


def test_cursor_survives_later_mutation():
    c = Collection([1])
    it = c.begin_insertion()
    c.append(2)
    c.remove(1)
    assert it.dereference() == 1
    assert len(it.snapshot) == 1


def test_begin_and_end_take_separate_snapshots():
    c = Collection([1, 2])
    it = c.begin_ascending()
    c.append(3)
    end = c.end_ascending()
    assert end.position == 3
    assert it.position == 0


def test_cursors_share_one_snapshot():
    c = Collection([3, 1, 2])
    rng = c.cursors("ascending")
    assert rng.begin.snapshot is rng.end.snapshot
    assert list(rng) == [1, 2, 3]
    assert len(rng) == 3


def test_unknown_kind_raises_value_error():
    with raises(ValueError):
        Collection([1]).begin("sideways")


def test_snapshot_hook_sees_every_snapshot():
    states = []
    c = Collection([2, 1], on_snapshot=states.append)
    c.begin(OrderingKind.DESCENDING)
    c.end(OrderingKind.DESCENDING)
    c.cursors(OrderingKind.INSERTION)
    assert states == [
        SnapshotState(kind=OrderingKind.DESCENDING, size=2, snapshot=(2, 1), at_end=False),
        SnapshotState(kind=OrderingKind.DESCENDING, size=2, snapshot=(2, 1), at_end=True),
        SnapshotState(kind=OrderingKind.INSERTION, size=2, snapshot=(2, 1), at_end=False),
    ]


def test_snapshot_hook_errors_propagate():
    def hook(state):
        raise RuntimeError("boom")

    c = Collection([1], on_snapshot=hook)
    with raises(RuntimeError):
        c.begin_insertion()
