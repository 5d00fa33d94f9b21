"""Small programming exercises: Morse code, Brainfuck, an SVG clock, line input, pancake sort, conics and a world map."""

__version__ = "0.1.0"

__all__ = [
    "brainfuck",
    "clock",
    "coast_data_1",
    "coast_data_2",
    "conics",
    "earthmap",
    "lake_data",
    "lineinput",
    "morse",
    "pancake",
]