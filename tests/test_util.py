import random

from budautomata.util import LOWERCHARS, edit_distance, random_string


def test_edit_distance():
    assert edit_distance("", "") == 0
    assert edit_distance("", "abc") == 3
    assert edit_distance("abc", "") == 3
    assert edit_distance("woof", "woof") == 0
    assert edit_distance("woof", "wolf") == 1
    assert edit_distance("woof", "wood") == 1
    assert edit_distance("woof", "wuff") == 2
    assert edit_distance("woof", "wolfe") == 2
    assert edit_distance("kitten", "sitting") == 3


def test_edit_distance_symmetric():
    rand = random.Random(7)
    for _ in range(50):
        a = random_string(rand.randint(0, 6), "abc", rand)
        b = random_string(rand.randint(0, 6), "abc", rand)
        assert edit_distance(a, b) == edit_distance(b, a)
        assert edit_distance(a, b) <= max(len(a), len(b))


def test_random_string():
    s = random_string(20)
    assert len(s) == 20
    assert all(c in LOWERCHARS for c in s)

    assert random_string(8, rand=random.Random(1)) == random_string(
        8, rand=random.Random(1)
    )
    assert random_string(0) == ""
