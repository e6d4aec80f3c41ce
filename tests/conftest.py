"""
Pytest will auto-discover / import this file called 'conftest.py'.
Fixtures for driving a game without a terminal.
"""

import pytest

from fairdice.dice import Die
from fairdice.fairness import Commitment, calculate_hmac
from fairdice.ui import GameUI


class ScriptedInput:
    """Stands in for input(): hands out prepared lines, then EOF."""

    def __init__(self, lines: list[str]):
        self.lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


class ScriptedUI(GameUI):
    def __init__(self, lines: list[str]):
        self.input = ScriptedInput(lines)
        self.output: list[str] = []
        super().__init__(read_line=self.input, write=self.output.append)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


def make_commitment(modulus: int, secret_value: int, key: bytes = b"k" * 32) -> Commitment:
    return Commitment(modulus, secret_value, key, calculate_hmac(key, secret_value))


def fixed_commits(*secret_values: int):
    """commit() replacement that hands out the given secret values in order."""
    values = list(secret_values)
    issued: list[Commitment] = []

    def commit_fn(modulus: int) -> Commitment:
        key = bytes([len(issued)]) * 32
        commitment = make_commitment(modulus, values.pop(0), key)
        issued.append(commitment)
        return commitment

    commit_fn.issued = issued
    return commit_fn


@pytest.fixture
def efron_dice() -> list[Die]:
    """A beats B, B beats C, C beats A, each with probability 5/9."""
    return [
        Die([2, 2, 4, 4, 9, 9]),
        Die([1, 1, 6, 6, 8, 8]),
        Die([3, 3, 5, 5, 7, 7]),
    ]

