from collections import namedtuple

from loguru import logger

from budautomata.automata.fsa import ANY, DFA
from budautomata.util import now


class StateGraph(namedtuple("StateGraph", ["states", "matching", "transitions"])):
    """
    The reachable state graph of a Levenshtein automaton, as produced by
    :func:`build_dfa`.

    It unpacks as a triple::

        states, matching, transitions = build_dfa(lev)

    Attributes:
        states (dict): Maps each distinct automaton state to its integer id.
            Ids are dense, start at 0 (the start state) and follow depth-first
            visiting order (pre-order).
        matching (list): The sorted ids of the accepting states.
        transitions (list): ``(from_id, to_id, label)`` triples, where the
            label is a character or ``ANY``. Edges are listed in the order
            the walk returns from their destination.
    """

    __slots__ = ()

    def state_for(self, stateid):
        """
        Returns the automaton state that was assigned the given id.

        Raises:
            KeyError: If no state has that id.
        """
        for state, i in self.states.items():
            if i == stateid:
                return state
        raise KeyError(stateid)

    def to_dfa(self):
        """
        Returns the graph as a :class:`~budautomata.automata.fsa.DFA` table.
        Wildcard edges become default transitions, so characters outside the
        term's alphabet follow them.

        Returns:
            DFA: A DFA whose initial state is 0.
        """
        dfa = DFA(0)
        for src, dest, label in self.transitions:
            if label is ANY:
                dfa.set_default_transition(src, dest)
            else:
                dfa.add_transition(src, label, dest)
        for stateid in self.matching:
            dfa.add_final_state(stateid)
        return dfa

    def accept(self, string):
        """
        Returns True if the explored graph accepts ``string``.
        """
        return self.to_dfa().accept(string)


def build_dfa(automaton, wildcard=True, prune=False):
    """
    Explores every state reachable from the automaton's start state.

    The graph is walked depth-first. Levenshtein automata are not trees
    (many inputs lead to the same state) so states are memoized by value, and
    each distinct state is expanded once. A state gets the next id when it
    is first visited, and an edge is recorded once the walk returns from its
    destination, so ids and edge order are the same as a plain recursive
    walk would give. The walk keeps its own stack of frames instead of
    recursing, so long terms cannot exhaust the interpreter stack.

    Args:
        automaton (LevenshteinAutomaton): The automaton to explore. It is
            only read, and is not referenced by the result.
        wildcard (bool, optional): Whether to also follow an ``ANY`` edge
            from every state, standing for all characters that are not in
            ``automaton.transitions(state)``. Defaults to True. Without it
            the graph only describes inputs drawn from the term's alphabet.
        prune (bool, optional): If True, states from which no match is
            reachable (``can_match`` is false) are recorded but not
            expanded. Defaults to False.

    Returns:
        StateGraph: The ``(states, matching, transitions)`` triple.

    Example:
        >>> states, matching, transitions = build_dfa(
        ...     DenseLevenshteinAutomaton("woof", 1))
        >>> states[(0, 1, 2, 3, 4)]
        0
    """
    t = now()
    states = {}
    matching = []
    transitions = []

    def visit(state, edge=None):
        # edge is the (src, label) pair waiting for this state's id
        stateid = states[state] = len(states)
        if automaton.is_match(state):
            matching.append(stateid)
        if prune and not automaton.can_match(state):
            labels = []
        else:
            labels = automaton.labels(state, wildcard=wildcard)
        return state, stateid, iter(labels), edge

    stack = [visit(automaton.start())]
    while stack:
        state, src, labels, edge = stack[-1]
        for label in labels:
            newstate = automaton.step(state, label)
            dest = states.get(newstate)
            if dest is None:
                stack.append(visit(newstate, (src, label)))
                break
            transitions.append((src, dest, label))
        else:
            stack.pop()
            if edge is not None:
                parent, label = edge
                transitions.append((parent, src, label))

    logger.debug(
        "Explored {!r}: {} states, {} matching, {} transitions in {:0.4f}s",
        automaton,
        len(states),
        len(matching),
        len(transitions),
        now() - t,
    )
    return StateGraph(states, matching, transitions)
