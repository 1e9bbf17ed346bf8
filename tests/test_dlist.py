import pytest

from linkedlists.dlist import DList

INT_SIZE = 4
FLOAT_SIZE = 4
DOUBLE_SIZE = 8


def make(*items, size=INT_SIZE):
    lst = DList(size)
    for item in items:
        lst.append(item)
    return lst


def assert_contents(lst, expected, size=INT_SIZE):
    """Check order both ways, length, element size and link integrity."""
    assert list(lst) == expected
    assert list(reversed(lst)) == expected[::-1]
    assert len(lst) == len(expected)
    assert lst.size() == size
    assert lst.verify() is True


OUT_OF_RANGE = [
    ([], 0),
    ([], 1),
    ([], 2),
    ([None], 1),
    ([None, None], 2),
    ([None, None, None], 3),
]


@pytest.mark.parametrize("size", [INT_SIZE, FLOAT_SIZE, DOUBLE_SIZE, 56])
def test_new_list_is_empty_with_given_size(size):
    lst = DList(size)
    assert_contents(lst, [], size)
    assert (lst.first(), lst.last()) == (None, None)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DList(-1)


def test_append_keeps_both_ends_and_length():
    lst = DList(INT_SIZE)
    for count, value in enumerate((5, 9, 10), start=1):
        lst.append(value)
        assert len(lst) == count
        assert (lst.first(), lst.last()) == (5, value)
    assert_contents(lst, [5, 9, 10])


def test_append_without_data_stores_none():
    lst = DList(INT_SIZE)
    lst.append()
    assert_contents(lst, [None])


def test_prepend_and_get():
    lst = make(5, 6)
    lst.prepend(2)
    assert [lst.get(i) for i in range(3)] == [2, 5, 6]
    assert_contents(lst, [2, 5, 6])


def test_insert_at_beginning_end_and_middle():
    lst = DList(INT_SIZE)
    for pos, value in [(0, 1), (1, 4), (1, 3), (1, 2)]:
        lst.insert(pos, value)
    assert_contents(lst, [1, 2, 3, 4])


@pytest.mark.parametrize("items, pos", [([], 4), ([2, 1], 3), ([2, 1], -1)])
def test_insert_rejects_illegal_position(items, pos):
    lst = make(*items)
    with pytest.raises(IndexError):
        lst.insert(pos, None)
    assert_contents(lst, items)


@pytest.mark.parametrize(
    "access",
    [lambda lst, pos: lst.get(pos), lambda lst, pos: lst.set(pos, 1)],
    ids=["get", "set"],
)
@pytest.mark.parametrize("items, pos", OUT_OF_RANGE)
def test_access_out_of_range_raises(access, items, pos):
    lst = make(*items)
    with pytest.raises(IndexError):
        access(lst, pos)
    assert_contents(lst, items)


def test_get_works_on_long_list_from_both_ends():
    lst = make(*range(10))
    assert [lst.get(i) for i in range(10)] == list(range(10))


def test_set_with_no_data_is_rejected():
    lst = make(5, 6)
    for pos in (0, 1):
        with pytest.raises(ValueError):
            lst.set(pos, None)
    assert_contents(lst, [5, 6])


def test_set_works_with_data():
    lst = make(None, None)
    assert lst.set(0, 5) == 5
    assert lst.set(1, 6) == 6
    lst.prepend(None)
    assert lst.set(0, 2) == 2
    assert_contents(lst, [2, 5, 6])


def test_pop_on_empty_list_raises():
    with pytest.raises(IndexError):
        DList(INT_SIZE).pop()


@pytest.mark.parametrize("items", [[7], [1, 2, 3]])
def test_pop_removes_from_front(items):
    lst = make(*items)
    popped = []
    while len(lst):
        assert lst.get(0) == items[len(popped)]
        popped.append(lst.pop())
        assert lst.verify() is True
    assert popped == items
    assert_contents(lst, [])


def test_remove_on_empty_list_raises():
    with pytest.raises(IndexError):
        DList(INT_SIZE).remove(0)


def test_remove_beginning_end_and_middle():
    lst = make(1, 2, 3, 4, 5)
    for pos, expected in [(0, [2, 3, 4, 5]), (3, [2, 3, 4]), (1, [2, 4])]:
        lst.remove(pos)
        assert_contents(lst, expected)
    with pytest.raises(IndexError):
        lst.remove(2)


@pytest.mark.parametrize("count", [0, 1, 2, 3])
def test_purge_removes_all_elements(count):
    lst = make(*([None] * count))
    assert lst.purge() is lst
    assert_contents(lst, [])
    assert lst.first() is None


@pytest.mark.parametrize("items, a, b", [([], 0, 0), ([5, 10], 1, 2)])
def test_swap_invalid_index_raises(items, a, b):
    with pytest.raises(IndexError):
        make(*items).swap(a, b)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (0, 0, [1, 2, 3, 4, 5]),
        (0, 1, [2, 1, 3, 4, 5]),
        (1, 0, [2, 1, 3, 4, 5]),
        (0, 4, [5, 2, 3, 4, 1]),
        (1, 3, [1, 4, 3, 2, 5]),
        (3, 4, [1, 2, 3, 5, 4]),
    ],
)
def test_swap(a, b, expected):
    lst = make(1, 2, 3, 4, 5)
    lst.swap(a, b)
    assert_contents(lst, expected)


@pytest.mark.parametrize("items, pos", [([], 0), ([None], 1), ([None, None], 2), ([None, None], 3)])
def test_split_illegal_position_raises(items, pos):
    lst = make(*items)
    with pytest.raises(IndexError):
        lst.split(pos)
    assert_contents(lst, items)


@pytest.mark.parametrize(
    "items, pos, left, right",
    [
        ([1], 0, [], [1]),
        ([1, 2], 0, [], [1, 2]),
        ([1, 2, 3], 0, [], [1, 2, 3]),
        ([1, 2], 1, [1], [2]),
        ([1, 2, 3], 1, [1], [2, 3]),
        ([1, 2, 3], 2, [1, 2], [3]),
        ([1, 2, 3, 4], 2, [1, 2], [3, 4]),
    ],
)
def test_split(items, pos, left, right):
    lst = make(*items)
    part = lst.split(pos)
    assert_contents(lst, left)
    assert_contents(part, right)


def test_join_rejects_different_sizes_and_itself():
    small, large = DList(INT_SIZE), DList(INT_SIZE + 2)
    same = make(1, 2)
    for dest, src in [(small, large), (large, small), (same, same)]:
        with pytest.raises(ValueError):
            dest.join(src)
    assert_contents(same, [1, 2])


@pytest.mark.parametrize(
    "left, right, joined",
    [
        ([], [], []),
        ([1], [], [1]),
        ([1, 2], [], [1, 2]),
        ([1, 2, 3], [], [1, 2, 3]),
        ([], [1, 2, 3], [1, 2, 3]),
        ([1], [2], [1, 2]),
        ([1, 2], [3], [1, 2, 3]),
        ([1, 2], [3, 4], [1, 2, 3, 4]),
    ],
)
def test_join(left, right, joined):
    dest, src = make(*left), make(*right)
    assert dest.join(src) is dest
    assert_contents(dest, joined)
    assert_contents(src, [])


@pytest.mark.parametrize(
    "items, size",
    [([], INT_SIZE), ([], FLOAT_SIZE), ([1], INT_SIZE), ([1, 2], INT_SIZE), ([1, 2, 3], INT_SIZE)],
)
def test_copy_is_equal_and_independent(items, size):
    lst = make(*items, size=size)
    duplicate = lst.copy()
    assert_contents(duplicate, items, size)
    duplicate.append(99)
    assert_contents(lst, items, size)


@pytest.mark.parametrize("items, expected", [([], []), ([1, 2, 3, 4], [4, 3, 2, 1])])
def test_reverse(items, expected):
    lst = make(*items)
    lst.reverse()
    assert_contents(lst, expected)


@pytest.mark.parametrize("attr", ["_tail", "_length"])
def test_verify_detects_corruption(attr):
    lst = make(1, 2, 3)
    setattr(lst, attr, lst._head if attr == "_tail" else 2)
    assert lst.verify() is False