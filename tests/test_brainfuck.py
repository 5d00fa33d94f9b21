import io

import pytest

from sketchbook.brainfuck import (
    GOODBYE_PROGRAM,
    TAPE_LENGTH,
    BrainfuckError,
    TapeOverflowError,
    UnbalancedLoopError,
    main,
    run,
)


def execute(program, data=b""):
    out = io.BytesIO()
    run(program, io.BytesIO(data), out)
    return out.getvalue()


def test_goodbye_program():
    assert execute(GOODBYE_PROGRAM) == b"Goodbye world!"


@pytest.mark.parametrize("data", [b"abc", b"hello, tape", b""])
def test_echo_program_round_trips(data):
    assert execute(",+[-.,+]", data) == data


def test_cells_wrap_below_zero():
    assert execute("-.") == b"\xff"


def test_cells_wrap_above_255():
    assert execute("-+." ) == execute(".")


def test_last_cell_is_usable():
    assert execute(">" * (TAPE_LENGTH - 1) + "+.") == b"\x01"


def test_head_left_of_tape():
    with pytest.raises(TapeOverflowError):
        execute("<.")


def test_head_right_of_tape():
    with pytest.raises(TapeOverflowError):
        execute(">" * TAPE_LENGTH + ".")


def test_trailing_move_off_tape_is_not_checked():
    assert execute("<") == b""


def test_unclosed_loop():
    with pytest.raises(UnbalancedLoopError):
        execute("[")


def test_unopened_loop_with_nonzero_cell():
    with pytest.raises(UnbalancedLoopError):
        execute("+]")


def test_errors_share_base_class():
    with pytest.raises(BrainfuckError):
        execute("+]")


def test_stray_close_with_zero_cell_is_ignored():
    assert execute("].") == execute(".")


def test_main_default(capsysbinary):
    assert main([]) == 0
    assert capsysbinary.readouterr().out == b"Goodbye world!"


def test_main_tape_error(capsysbinary):
    assert main(["<."]) == 0
    assert b"tape" in capsysbinary.readouterr().out


def test_main_loop_error(capsysbinary):
    assert main(["["]) == 1
    assert b"loop" in capsysbinary.readouterr().out