import sys
from optparse import OptionParser

from loguru import logger

from budautomata.automata.explore import build_dfa
from budautomata.automata.lev import levenshtein_automaton
from budautomata.util import now

# (term, maximum edit distance)
CASES = [("woof", 1), ("woof", 2), ("banana", 1)]


def time_build(term, n, sparse, repeat):
    """
    Builds the DFA for one case ``repeat`` times.

    Returns:
        tuple: The best time in seconds (None if ``repeat`` is 0) and the
        number of states.
    """
    lev = levenshtein_automaton(term, n, sparse=sparse)
    count = len(build_dfa(lev).states)
    best = None
    for _ in range(repeat):
        t = now()
        build_dfa(lev)
        elapsed = now() - t
        if best is None or elapsed < best:
            best = elapsed
    return best, count


def _parser():
    p = OptionParser(usage="%prog [options] [term:n ...]")
    p.add_option(
        "-r",
        "--repeat",
        dest="repeat",
        type="int",
        help="Number of timed builds per case",
        default=100,
    )
    p.add_option(
        "-s",
        "--sparse",
        dest="sparse",
        action="store_true",
        help="Only time the sparse automaton",
        default=False,
    )
    p.add_option(
        "-d",
        "--dense",
        dest="dense",
        action="store_true",
        help="Only time the dense automaton",
        default=False,
    )
    return p


def main(argv=None):
    parser = _parser()
    options, args = parser.parse_args(argv)
    if options.repeat < 1:
        parser.error("--repeat must be at least 1")

    cases = CASES
    if args:
        cases = []
        for arg in args:
            term, sep, n = arg.rpartition(":")
            if not sep or not n.isdigit():
                parser.error(f"Expected term:n with a non-negative n, got {arg!r}")
            cases.append((term, int(n)))

    kinds = []
    if not options.sparse:
        kinds.append(("dense", False))
    if not options.dense:
        kinds.append(("sparse", True))

    logger.remove()
    logger.add(sys.stderr, level="INFO")
    for term, n in cases:
        for kindname, sparse in kinds:
            best, count = time_build(term, n, sparse, options.repeat)
            logger.info(
                "{}_{} {}: {} states, best {:0.6f}s", term, n, kindname, count, best
            )


if __name__ == "__main__":
    main()
