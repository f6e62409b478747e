import random
import time

# Characters used when generating random strings for fuzzing
LOWERCHARS = "abcdefghijklmnopqrstuvwxyz"


now = time.perf_counter


def random_string(size, chars=LOWERCHARS, rand=random):
    """
    Generates a random string drawn from the given characters.

    Parameters:
    - size (int): The length of the string to generate.
    - chars (str): The characters to choose from. Default is lowercase ASCII.
    - rand (random.Random): The random source to use. Passing a seeded
      ``random.Random`` makes the result reproducible.

    Returns:
    - str: The randomly generated string.
    """
    return "".join(rand.choice(chars) for _ in range(size))


def edit_distance(a, b):
    """
    Returns the Levenshtein distance between two sequences, using the
    classic two-row dynamic programming table.

    This is the slow reference implementation the automata are checked
    against. It compares every candidate in full, which is exactly what a
    Levenshtein automaton lets a caller avoid.

    Args:
        a (sequence): The first sequence.
        b (sequence): The second sequence.

    Returns:
        int: The minimum number of single-item insertions, deletions and
        substitutions needed to turn ``a`` into ``b``.

    Example:
        >>> edit_distance("woof", "wolf")
        1
        >>> edit_distance("woof", "wolfe")
        2
    """
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        row = [i]
        for j, cb in enumerate(b, 1):
            cost = 0 if ca == cb else 1
            row.append(min(row[j - 1] + 1, prev[j] + 1, prev[j - 1] + cost))
        prev = row
    return prev[-1]
