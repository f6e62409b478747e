import sys

# Marker constants


class Marker:
    """
    Represents a marker object.

    Markers are used as distinguished transition labels. A marker never
    compares equal to a character, so stepping a Levenshtein automaton with a
    marker behaves exactly like stepping it with a character that does not
    appear in the term.

    Attributes:
        name (str): The name of the marker.

    Example:
        >>> marker = Marker("ANY")
        >>> repr(marker)
        '<ANY>'
    """

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f"<{self.name}>"


ANY = Marker("ANY")


def sort_labels(labels):
    """
    Returns the given transition labels in a reproducible order: literal
    characters sorted, followed by ``ANY`` if it is present.

    Args:
        labels (iterable): Characters, possibly including ``ANY``.

    Returns:
        list: The ordered labels.
    """
    labels = set(labels)
    wildcard = ANY in labels
    labels.discard(ANY)
    ordered = sorted(labels)
    if wildcard:
        ordered.append(ANY)
    return ordered


class DFA:
    """
    Deterministic Finite Automaton (DFA) table.

    States are arbitrary hashable objects (the builder uses integer ids).
    Each state maps labels to exactly one destination state, and may have a
    default destination that is taken for any label without an explicit
    transition; this is how the ``ANY`` wildcard edges of an explored
    Levenshtein graph are stored.

    Attributes:
        initial (object): The initial state of the DFA.
        transitions (dict): Maps source states to dictionaries of
            ``{label: destination}``.
        defaults (dict): Maps source states to their default destination.
        final_states (set): The accepting states.
    """

    def __init__(self, initial):
        self.initial = initial
        self.transitions = {}
        self.defaults = {}
        self.final_states = set()

    def __len__(self):
        return len(self.all_states())

    def __eq__(self, other):
        if not isinstance(other, DFA):
            return NotImplemented
        return (
            self.initial == other.initial
            and self.final_states == other.final_states
            and self.transitions == other.transitions
            and self.defaults == other.defaults
        )

    def dump(self, stream=sys.stdout):
        """
        Prints a textual representation of the DFA to the specified stream.

        The initial state is marked with ``@`` and final destinations with
        ``||``. Default transitions are printed with the label ``*``.

        Args:
            stream (file-like object, optional): The stream to print the
                representation to. Defaults to sys.stdout.
        """
        for src in sorted(self.all_states()):
            beg = "@" if src == self.initial else " "
            print(beg, src, file=stream)
            xs = self.transitions.get(src, {})
            for label in sorted(xs):
                dest = xs[label]
                end = "||" if self.is_final(dest) else ""
                print("   ", label, "->", dest, end, file=stream)
            if src in self.defaults:
                dest = self.defaults[src]
                end = "||" if self.is_final(dest) else ""
                print("    *", "->", dest, end, file=stream)

    def all_states(self):
        """
        Returns a set of all states mentioned by the DFA.

        Returns:
            set: Every source, destination, final and initial state.
        """
        stateset = {self.initial}
        stateset.update(self.final_states)
        stateset.update(self.transitions)
        for trans in self.transitions.values():
            stateset.update(trans.values())
        for src, dest in self.defaults.items():
            stateset.add(src)
            stateset.add(dest)
        return stateset

    def start(self):
        return self.initial

    def add_transition(self, src, label, dest):
        self.transitions.setdefault(src, {})[label] = dest

    def set_default_transition(self, src, dest):
        """
        Sets the destination taken from ``src`` for any label without an
        explicit transition.

        Args:
            src (object): The source state.
            dest (object): The default destination state.
        """
        self.defaults[src] = dest

    def add_final_state(self, state):
        self.final_states.add(state)

    def is_final(self, state):
        return state in self.final_states

    def next_state(self, src, label):
        """
        Returns the next state given the current state and an input label.

        Args:
            src (object): The current state.
            label (object): The input label.

        Returns:
            object: The destination state, the default destination if there
            is no explicit transition for ``label``, or None if there is
            neither.
        """
        trans = self.transitions.get(src, {})
        return trans.get(label, self.defaults.get(src, None))

    def accept(self, string, debug=False):
        """
        Checks if a given string is accepted by the DFA.

        Args:
            string (str): The string to check.
            debug (bool, optional): Whether to print each step. Defaults to
                False.

        Returns:
            bool: True if the string is accepted, False otherwise.
        """
        state = self.start()

        for label in string:
            if debug:
                print("  ", state, "->", label, "->")

            state = self.next_state(state, label)
            if state is None:
                return False

        return self.is_final(state)
