__version__ = (0, 1, 0)


def versionstring(build=True, extra=True):
    """
    Returns the version number of budautomata as a string.

    Args:
        build (bool): Whether to include the build number in the version string.
        extra (bool): Whether to include alpha/beta/rc etc. tags. Only
            checked if build is True.

    Returns:
        str: The version number of budautomata as a string.
    """
    if build:
        first = 3
    else:
        first = 2

    s = ".".join(str(n) for n in __version__[:first])
    if build and extra:
        s += "".join(str(n) for n in __version__[3:])

    return s
