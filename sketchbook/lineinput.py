"""Reading one line of arbitrary length from a text stream."""

from __future__ import annotations

import sys
from functools import partial
from itertools import takewhile


def read_line(stream=None):
    """Read characters up to a newline or end of input; the newline is consumed but not returned."""
    stream = sys.stdin if stream is None else stream
    characters = iter(partial(stream.read, 1), "")
    return "".join(takewhile(lambda character: character != "\n", characters))


def main(argv=None):
    line = read_line()
    print(line, end="")
    return 0