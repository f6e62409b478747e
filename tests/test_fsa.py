from io import StringIO

from budautomata.automata.fsa import ANY, DFA, Marker, sort_labels


def _ab_dfa():
    # Accepts "ab" followed by anything
    dfa = DFA(0)
    dfa.add_transition(0, "a", 1)
    dfa.add_transition(1, "b", 2)
    dfa.set_default_transition(2, 2)
    dfa.add_final_state(2)
    return dfa


def test_markers():
    assert repr(ANY) == "<ANY>"
    assert ANY != "a"
    assert "a" != ANY
    assert Marker("ANY") is not ANY


def test_sort_labels():
    assert sort_labels([ANY, "b", "a"]) == ["a", "b", ANY]
    assert sort_labels({"z", "a"}) == ["a", "z"]
    assert sort_labels([ANY]) == [ANY]
    assert sort_labels([]) == []


def test_next_state():
    dfa = _ab_dfa()
    assert dfa.start() == 0
    assert dfa.next_state(0, "a") == 1
    assert dfa.next_state(0, "b") is None
    assert dfa.next_state(2, "q") == 2
    assert dfa.is_final(2)
    assert not dfa.is_final(0)


def test_accept():
    dfa = _ab_dfa()
    assert dfa.accept("ab")
    assert dfa.accept("abxyz")
    assert not dfa.accept("a")
    assert not dfa.accept("ba")
    assert not dfa.accept("")


def test_accept_initial_zero():
    # State 0 is falsy but still a valid state
    dfa = DFA(0)
    dfa.set_default_transition(0, 0)
    dfa.add_final_state(0)
    assert dfa.accept("")
    assert dfa.accept("anything")


def test_all_states():
    dfa = _ab_dfa()
    assert dfa.all_states() == {0, 1, 2}
    assert len(dfa) == 3


def test_equality():
    assert _ab_dfa() == _ab_dfa()
    other = _ab_dfa()
    other.set_default_transition(0, 2)
    assert _ab_dfa() != other


def test_dump():
    out = StringIO()
    _ab_dfa().dump(out)
    text = out.getvalue()
    assert "@ 0" in text
    assert "a -> 1" in text
    assert "* -> 2 ||" in text
