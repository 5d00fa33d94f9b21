"""Morse code tree: letter lookup, decoding and generation of a decoder script."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

DOT = "."
DASH = "-"
INVALID = "érvénytelen"

LETTERS = "abcdefghijklmnopqrstuvwxyz"
CODES = (
    ".-", "-...", "-.-.", "-..", ".", "..-.", "--.", "....", "..", ".---",
    "-.-", ".-..", "--", "-.", "---", ".--.", "--.-", ".-.", "...", "-",
    "..-", "...-", ".--", "-..-", "-.--", "--..",
)


@dataclass
class MorseNode:
    """One node of the Morse tree; dots branch left, dashes branch right."""

    token: str
    letter: str | None = None
    dot: MorseNode | None = None
    dash: MorseNode | None = None


class MorseTree:
    """Binary tree mapping Morse codes to letters."""

    def __init__(self):
        self.root = MorseNode("0")

    def insert(self, letter, code):
        """Store ``letter`` at the node reached by ``code``; any symbol but a dash counts as a dot."""
        node = self.root
        for symbol in code:
            if symbol == DASH:
                if node.dash is None:
                    node.dash = MorseNode(DASH)
                node = node.dash
            else:
                if node.dot is None:
                    node.dot = MorseNode(DOT)
                node = node.dot
        node.letter = letter

    def code_for(self, letter):
        """Return the code of ``letter``, searching dots before dashes."""
        found = self._search(self.root, letter, "")
        if found is None:
            raise KeyError(letter)
        return found

    @classmethod
    def _search(cls, node, letter, prefix):
        if node is None:
            return None
        if node.letter == letter:
            return prefix
        found = cls._search(node.dot, letter, prefix + DOT)
        if found is not None:
            return found
        return cls._search(node.dash, letter, prefix + DASH)

    def decode(self, code):
        """Follow ``code`` while it matches the tree and return the letter reached.

        Walking stops at the first symbol that has no matching branch.
        """
        node = self.root
        for symbol in code:
            if symbol == DOT:
                step = node.dot
            elif symbol == DASH:
                step = node.dash
            else:
                step = None
            if step is None:
                break
            node = step
        if node.letter is None:
            raise ValueError(f"invalid Morse code: {code!r}")
        return node.letter


def standard_tree():
    """Return a tree holding the 26 lower-case Latin letters."""
    tree = MorseTree()
    for letter, code in zip(LETTERS, CODES):
        tree.insert(letter, code)
    return tree


def _emit(node, level, lines):
    pad = "    " * level
    index = level - 1
    branches = [
        (symbol, child)
        for symbol, child in ((DOT, node.dot), (DASH, node.dash))
        if child is not None
    ]
    for keyword, (symbol, child) in zip(("if", "elif"), branches):
        lines.append(f'{pad}{keyword} de[{index}] == "{symbol}":')
        _emit(child, level + 1, lines)
    body_pad = pad
    if branches:
        lines.append(f"{pad}else:")
        body_pad = pad + "    "
    text = INVALID if node.letter is None else node.letter
    lines.append(f'{body_pad}print({text!r}, end="")')


def render_decoder(tree, word):
    """Return a standalone script whose nested conditions decode ``tree`` and print ``word``."""
    codes = [tree.code_for(letter) for letter in word]
    lines = [
        '"""Prints a word from its Morse-coded letters."""',
        "",
        "",
        "def decode(de):",
        '    de += " "',
    ]
    _emit(tree.root, 1, lines)
    lines += ["", "", "def main():"]
    lines += [f"    decode({code!r})" for code in codes] or ["    pass"]
    lines += ["", "", 'if __name__ == "__main__":', "    main()", ""]
    return "\n".join(lines)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate a Morse decoder script for a word.")
    parser.add_argument("word", nargs="?", default="alma")
    parser.add_argument("-o", "--output", default="morse_decoder.py")
    args = parser.parse_args(argv)
    text = render_decoder(standard_tree(), args.word)
    Path(args.output).write_text(text, encoding="utf-8")
    return 0