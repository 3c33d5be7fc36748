import pytest

from socialnet.utils.conversation import canonical_pair


@pytest.mark.parametrize("a, b", [(1, 2), (2, 1), (10, 9), (123, 45)])
def test_canonical_pair_is_symmetric(a, b):
    assert canonical_pair(a, b) == canonical_pair(b, a)


def test_canonical_pair_orders_ids_as_strings():
    assert canonical_pair(1, 2) == "1_2"
    # "10" sorts before "9"
    assert canonical_pair(9, 10) == "10_9"


def test_canonical_pair_distinguishes_pairs():
    assert canonical_pair(1, 23) != canonical_pair(12, 3)


def test_canonical_pair_rejects_same_user():
    with pytest.raises(ValueError):
        canonical_pair(5, 5)


def test_canonical_pair_rejects_separator_inside_id():
    with pytest.raises(ValueError):
        canonical_pair("1_2", 3)
