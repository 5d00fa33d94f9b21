"""Pancake sort that reports every flip it makes."""

from __future__ import annotations

import argparse

EXAMPLE = (2, 1, 2, 4, 5, 7, 6, 9, 10, 2)

_MAXIMUM_FLIP = "Flipped from the maximum: "
_WHOLE_FLIP = "Whole stack flipped: "


def _flips(values):
    """Yield ``(label, stack)`` after every prefix reversal."""
    stack = list(values)
    for size in range(len(stack), 1, -1):
        top = stack[:size]
        peak = top.index(max(top))
        if peak:
            stack[: peak + 1] = reversed(stack[: peak + 1])
            yield _MAXIMUM_FLIP, tuple(stack)
        stack[:size] = reversed(stack[:size])
        yield _WHOLE_FLIP, tuple(stack)


def pancake_sort(values):
    """Return the values sorted in ascending order using only prefix reversals."""
    result = list(values)
    for _, stack in _flips(values):
        result = list(stack)
    return result


def _format_stack(stack):
    return "".join(f"{value} " for value in stack) + "\n---\n"


def format_steps(values):
    """Return the report of the initial stack and every flip of the sort."""
    report = ["---\nInitial list: ", _format_stack(values)]
    for label, stack in _flips(values):
        report += [label, _format_stack(stack)]
    return "".join(report)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Pancake sort a list of integers.")
    parser.add_argument("values", nargs="*", type=int)
    args = parser.parse_args(argv)
    print(format_steps(args.values or EXAMPLE), end="")
    return 0