"""Interpreter for the Brainfuck esoteric language."""

from __future__ import annotations

import argparse
import sys

TAPE_LENGTH = 32768
GOODBYE_PROGRAM = (
    "+++++++++[>++++++++>++++++++++++>+++++++++++>++++<<<<-]>-.>+++..>+.--."
    "<++++++++++.>+++.>----.<<--.--------.+++.------.>-.>+."
)


class BrainfuckError(Exception):
    """Base class for interpreter errors."""


class TapeOverflowError(BrainfuckError):
    """The head moved off either end of the tape."""


class UnbalancedLoopError(BrainfuckError):
    """A loop bracket has no partner."""


def _jump_forward(program, pc):
    depth = 1
    while depth:
        pc += 1
        if pc >= len(program):
            raise UnbalancedLoopError("Error! Malformed loop.")
        if program[pc] == "[":
            depth += 1
        elif program[pc] == "]":
            depth -= 1
    return pc


def _jump_backward(program, pc):
    depth = 1
    while depth:
        pc -= 1
        if pc < 0:
            raise UnbalancedLoopError("Error! Malformed loop.")
        if program[pc] == "]":
            depth += 1
        elif program[pc] == "[":
            depth -= 1
    return pc


def run(program, stdin=None, stdout=None):
    """Run ``program`` reading bytes from ``stdin`` and writing bytes to ``stdout``.

    Cells hold bytes that wrap around; end of input stores 255.
    """
    stdin = sys.stdin.buffer if stdin is None else stdin
    stdout = sys.stdout.buffer if stdout is None else stdout
    tape = bytearray(TAPE_LENGTH)
    head = 0
    pc = 0
    while pc < len(program):
        if not 0 <= head < TAPE_LENGTH:
            raise TapeOverflowError("Error! The head ran off the tape.")
        command = program[pc]
        if command == ">":
            head += 1
        elif command == "<":
            head -= 1
        elif command == "+":
            tape[head] = (tape[head] + 1) & 0xFF
        elif command == "-":
            tape[head] = (tape[head] - 1) & 0xFF
        elif command == ".":
            stdout.write(bytes((tape[head],)))
        elif command == ",":
            data = stdin.read(1)
            tape[head] = data[0] if data else 0xFF
        elif command == "[":
            if tape[head] == 0:
                pc = _jump_forward(program, pc)
        elif command == "]":
            if tape[head] != 0:
                pc = _jump_backward(program, pc)
        pc += 1


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run a Brainfuck program.")
    parser.add_argument("program", nargs="?", default=GOODBYE_PROGRAM)
    args = parser.parse_args(argv)
    sys.stdout.flush()
    out = sys.stdout.buffer
    try:
        run(args.program, sys.stdin.buffer, out)
    except TapeOverflowError as error:
        out.flush()
        print(error)
        return 0
    except UnbalancedLoopError as error:
        out.flush()
        print(f"\n{error}")
        return 1
    out.flush()
    return 0