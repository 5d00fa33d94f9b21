import ast

import pytest

from sketchbook.morse import (
    CODES,
    INVALID,
    LETTERS,
    MorseTree,
    main,
    render_decoder,
    standard_tree,
)


@pytest.fixture
def tree():
    return standard_tree()


@pytest.mark.parametrize(
    "code, letter",
    [(".-", "a"), (".-..", "l"), ("--", "m"), ("....", "h"), ("...-", "v"), ("--..", "z")],
)
def test_decode_known_codes(tree, code, letter):
    assert tree.decode(code) == letter


def test_every_letter_round_trips(tree):
    for letter, code in zip(LETTERS, CODES):
        assert tree.code_for(letter) == code
        assert tree.decode(tree.code_for(letter)) == letter


def test_decode_stops_at_unmatched_symbol(tree):
    assert tree.decode("....-") == tree.decode("....")
    assert tree.decode(".-x") == tree.decode(".-")


@pytest.mark.parametrize("code", ["", "x", "?.-"])
def test_decode_invalid_raises(tree, code):
    with pytest.raises(ValueError):
        tree.decode(code)


def test_unlabelled_node_is_invalid():
    custom = MorseTree()
    custom.insert("x", "-..-")
    assert custom.decode("-..-") == "x"
    with pytest.raises(ValueError):
        custom.decode("-.")


def test_code_for_missing_letter(tree):
    with pytest.raises(KeyError):
        tree.code_for("Q")


def test_render_decoder_calls_in_order(tree):
    text = render_decoder(tree, "alma")
    calls = [line.strip() for line in text.splitlines() if line.strip().startswith("decode(")]
    assert calls == ["decode('.-')", "decode('.-..')", "decode('--')", "decode('.-')"]


def test_render_decoder_is_valid_python(tree):
    text = render_decoder(tree, "alma")
    module = ast.parse(text)
    names = [node.name for node in module.body if isinstance(node, ast.FunctionDef)]
    assert names == ["decode", "main"]
    assert repr(INVALID) in text


def test_render_decoder_mentions_every_letter(tree):
    text = render_decoder(tree, "")
    for letter in LETTERS:
        assert f"print({letter!r}" in text


def test_render_decoder_unknown_letter(tree):
    with pytest.raises(KeyError):
        render_decoder(tree, "a!")


def test_main_writes_file(tmp_path):
    target = tmp_path / "out.py"
    assert main(["--output", str(target)]) == 0
    assert target.read_text(encoding="utf-8") == render_decoder(standard_tree(), "alma")