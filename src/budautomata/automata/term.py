from cached_property import cached_property


class Term:
    """
    An immutable, fixed-length sequence of characters used as the reference
    term of a Levenshtein automaton.

    The characters are stored in a tuple, so indexing and length are O(1)
    regardless of how the term was given (a ``str``, any sequence of
    characters, or another Term).

    Attributes:
        chars (tuple): The characters of the term.

    Example:
        >>> t = Term("woof")
        >>> len(t)
        4
        >>> t[1]
        'o'
        >>> t == Term(["w", "o", "o", "f"])
        True
    """

    def __init__(self, chars):
        """
        Initializes a new Term.

        Args:
            chars (sequence): The characters of the term.
        """
        if isinstance(chars, Term):
            chars = chars.chars
        self.__dict__["chars"] = tuple(chars)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __len__(self):
        return len(self.chars)

    def __getitem__(self, i):
        return self.chars[i]

    def __iter__(self):
        return iter(self.chars)

    def __eq__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        return self.chars == other.chars

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self.chars)

    def __repr__(self):
        return f"{type(self).__name__}({str(self)!r})"

    def __str__(self):
        return "".join(self.chars)

    @cached_property
    def alphabet(self):
        """
        The set of distinct characters in the term.

        Returns:
            frozenset: The term's characters.
        """
        return frozenset(self.chars)
