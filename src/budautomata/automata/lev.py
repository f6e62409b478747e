from collections import namedtuple

from budautomata.automata.fsa import ANY, sort_labels
from budautomata.automata.term import Term


class InvalidDistanceError(ValueError):
    """
    Raised when an automaton is created with a maximum edit distance that is
    not a non-negative integer.
    """


class StateMismatchError(TypeError):
    """
    Raised when a state is handed to an automaton that could not have
    produced it, for example a sparse state given to a dense automaton, or a
    dense state built for a term of a different length.
    """


# Sparse state: parallel tuples of active prefix lengths and their distances
SparseState = namedtuple("SparseState", ["positions", "values"])


class LevenshteinAutomaton:
    """
    Base class for automata accepting every string within edit distance
    ``n`` of a term.

    An automaton holds only the term and the distance. All progress lives in
    the state values it produces, which are immutable and hashable so the
    DFA builder can deduplicate them. Subclasses implement ``start``,
    ``step``, ``is_match``, ``can_match`` and ``transitions``.

    Attributes:
        term (Term): The reference term.
        n (int): The maximum edit distance.
    """

    def __init__(self, term, n):
        """
        Initializes the automaton.

        Args:
            term (sequence): The reference term. Converted to a Term.
            n (int): The maximum edit distance.

        Raises:
            InvalidDistanceError: If ``n`` is not a non-negative integer.
        """
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise InvalidDistanceError(
                f"Maximum edit distance must be a non-negative int, not {n!r}"
            )
        self.term = Term(term)
        self.n = n

    def __repr__(self):
        return f"{type(self).__name__}({str(self.term)!r}, {self.n})"

    def start(self):
        """
        Returns the state before any input has been consumed.
        """
        raise NotImplementedError

    def step(self, state, c):
        """
        Returns the state reached from ``state`` by consuming the character
        (or label) ``c``. The given state is not modified.
        """
        raise NotImplementedError

    def is_match(self, state):
        """
        Returns True if the input consumed to reach ``state`` is within the
        maximum edit distance of the whole term.
        """
        raise NotImplementedError

    def can_match(self, state):
        """
        Returns False if no further input can ever lead from ``state`` to a
        matching state. Used to prune searches.
        """
        raise NotImplementedError

    def transitions(self, state):
        """
        Returns the set of term characters worth branching on from
        ``state``. Every other character leads to the same state as ``ANY``.
        """
        raise NotImplementedError

    def distance(self, state):
        """
        Returns the edit distance between the consumed input and the whole
        term, or None if it is greater than ``n``.
        """
        raise NotImplementedError

    def labels(self, state, wildcard=True):
        """
        Returns the transition labels to explore from ``state``, in a
        reproducible order.

        Args:
            state: A state produced by this automaton.
            wildcard (bool, optional): Whether to add the ``ANY`` label
                standing for every character not returned by
                ``transitions``. Defaults to True.

        Returns:
            list: Sorted characters, followed by ``ANY`` if requested.
        """
        labels = set(self.transitions(state))
        if wildcard:
            labels.add(ANY)
        return sort_labels(labels)

    def run(self, string, state=None):
        """
        Feeds every character of ``string`` to the automaton.

        Stops consuming input as soon as the state can no longer match,
        since the result could not become a match anyway.

        Args:
            string (sequence): The input characters.
            state (optional): The state to start from. Defaults to
                ``start()``.

        Returns:
            The state after consuming the input.
        """
        if state is None:
            state = self.start()
        for c in string:
            state = self.step(state, c)
            if not self.can_match(state):
                break
        return state

    def accept(self, string):
        """
        Returns True if ``string`` is within the maximum edit distance of
        the term.

        Example:
            >>> lev = DenseLevenshteinAutomaton("woof", 1)
            >>> lev.accept("wolf"), lev.accept("wolfe")
            (True, False)
        """
        return self.is_match(self.run(string))


class DenseLevenshteinAutomaton(LevenshteinAutomaton):
    """
    Levenshtein automaton whose state is the full row of the edit distance
    table: a tuple of ``len(term) + 1`` distances, where entry ``i`` is the
    distance between the input so far and the first ``i`` characters of the
    term. Entries are capped at ``n + 1``, which keeps the number of distinct
    states finite.

    Each step costs O(len(term)).
    """

    def _check(self, state):
        if isinstance(state, SparseState) or len(state) != len(self.term) + 1:
            raise StateMismatchError(f"{state!r} is not a state of {self!r}")

    def start(self):
        return tuple(range(len(self.term) + 1))

    def step(self, state, c):
        self._check(state)
        term = self.term
        cap = self.n + 1

        new_state = [state[0] + 1]
        for i in range(len(term)):
            cost = 0 if term[i] == c else 1
            new_state.append(
                min(new_state[i] + 1, state[i] + cost, state[i + 1] + 1)
            )
        return tuple(min(d, cap) for d in new_state)

    def is_match(self, state):
        self._check(state)
        return state[-1] <= self.n

    def can_match(self, state):
        self._check(state)
        return min(state) <= self.n

    def transitions(self, state):
        self._check(state)
        n = self.n
        size = len(self.term.alphabet)
        chars = set()
        for c, d in zip(self.term, state):
            if d <= n:
                chars.add(c)
                # Can't grow past the term's alphabet
                if len(chars) == size:
                    break
        return chars

    def distance(self, state):
        if self.is_match(state):
            return state[-1]
        return None


class SparseLevenshteinAutomaton(LevenshteinAutomaton):
    """
    Levenshtein automaton whose state only tracks the band of the edit
    distance row that is within budget.

    A state is a ``SparseState(positions, values)``: ``positions`` are the
    prefix lengths of the term whose distance is at most ``n`` (strictly
    increasing), ``values`` the matching distances. Any position not listed
    is further than ``n`` away. An empty state is dead.

    The band never holds more than ``2 * n + 1`` entries, so each step costs
    O(n) instead of O(len(term)). For the same term, distance and input it
    tracks exactly the entries of the dense row that are ``<= n``.
    """

    def _check(self, state):
        if not isinstance(state, SparseState):
            raise StateMismatchError(f"{state!r} is not a state of {self!r}")

    def start(self):
        active = tuple(range(min(self.n, len(self.term)) + 1))
        return SparseState(active, active)

    def step(self, state, c):
        self._check(state)
        term = self.term
        n = self.n
        positions, values = state

        new_positions = []
        new_values = []
        # Consuming a character from the empty prefix is an insertion
        if positions and positions[0] == 0 and values[0] < n:
            new_positions.append(0)
            new_values.append(values[0] + 1)

        for j, i in enumerate(positions):
            if i == len(term):
                break
            cost = 0 if term[i] == c else 1
            value = values[j] + cost
            if new_positions and new_positions[-1] == i:
                value = min(value, new_values[-1] + 1)
            if j + 1 < len(positions) and positions[j + 1] == i + 1:
                value = min(value, values[j + 1] + 1)
            if value <= n:
                new_positions.append(i + 1)
                new_values.append(value)

        return SparseState(tuple(new_positions), tuple(new_values))

    def is_match(self, state):
        self._check(state)
        return bool(state.positions) and state.positions[-1] == len(self.term)

    def can_match(self, state):
        self._check(state)
        return bool(state.positions)

    def transitions(self, state):
        self._check(state)
        term = self.term
        return {term[i] for i in state.positions if i < len(term)}

    def distance(self, state):
        if self.is_match(state):
            return state.values[-1]
        return None


def levenshtein_automaton(term, n, sparse=False):
    """
    Creates a Levenshtein automaton for a given term and maximum edit
    distance.

    Args:
        term (str): The term to generate the automaton for.
        n (int): The maximum edit distance allowed.
        sparse (bool, optional): Whether to use the banded sparse
            representation instead of the full distance row. Defaults to
            False.

    Returns:
        LevenshteinAutomaton: The automaton.

    Raises:
        InvalidDistanceError: If ``n`` is not a non-negative integer.
    """
    if sparse:
        return SparseLevenshteinAutomaton(term, n)
    return DenseLevenshteinAutomaton(term, n)
