"""Tests for the command-line entry point in fairdice/__main__.py"""

import io
from unittest.mock import patch

from fairdice.__main__ import (
    EXIT_FAIRNESS_ERROR,
    EXIT_OK,
    EXIT_VALIDATION_ERROR,
    main,
)
from fairdice.errors import FairnessError

DICE = ["2,2,4,4,9,9", "1,1,6,6,8,8", "3,3,5,5,7,7"]


def test_too_few_dice(capsys) -> None:
    assert main(["1,2,3", "4,5,6"]) == EXIT_VALIDATION_ERROR
    err = capsys.readouterr().err
    assert "at least three dice" in err
    assert "Example usage" in err


def test_non_integer_face(capsys) -> None:
    assert main(["1,2,3", "4,five,6", "7,8,9"]) == EXIT_VALIDATION_ERROR
    assert "non-integer" in capsys.readouterr().err


def test_user_exit_is_a_normal_termination(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n"))
    assert main(DICE) == EXIT_OK
    assert "Goodbye" in capsys.readouterr().out


def test_full_game_from_stdin(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n0\n0\n0\n"))
    assert main(DICE) == EXIT_OK
    out = capsys.readouterr().out
    assert "--- Results ---" in out


def test_fairness_error_exit_code(capsys) -> None:
    with patch("fairdice.__main__.GameController") as controller:
        controller.return_value.run.side_effect = FairnessError("HMAC mismatch")
        assert main(DICE) == EXIT_FAIRNESS_ERROR
    assert "Fairness Error: HMAC mismatch" in capsys.readouterr().err


def test_keyboard_interrupt_exits_cleanly(capsys) -> None:
    with patch("fairdice.__main__.GameController") as controller:
        controller.return_value.run.side_effect = KeyboardInterrupt
        assert main(DICE) == EXIT_OK
    assert "interrupted" in capsys.readouterr().out
