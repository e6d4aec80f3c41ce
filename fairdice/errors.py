import sys

# ==============================================================================
# Configuration errors
# ==============================================================================

EXAMPLE_DICE = "2,2,4,4,9,9 1,1,6,6,8,8 3,3,5,5,7,7"


class ValidationError(Exception):
    """
    Raised when the command-line dice cannot be used to start a game.
    Provides a formatted message including an example of correct usage.
    """
    _invocation_command = "python -m fairdice"

    @staticmethod
    def set_invocation_command(command: str):
        """Sets the command shown in the usage example (e.g. 'py -m fairdice')."""
        ValidationError._invocation_command = command

    @staticmethod
    def detect_invocation_command(executable: str | None = None) -> str:
        executable = (executable if executable is not None else sys.executable).lower()
        interpreter = "py" if "py.exe" in executable else "python"
        return f"{interpreter} -m fairdice"

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        example = f"{ValidationError._invocation_command} {EXAMPLE_DICE}"
        return f"\nArgument Error: {self.message}\n\nExample usage:\n{example}\n"

    @classmethod
    def not_enough_dice(cls, count: int) -> "ValidationError":
        return cls(f"Please specify at least three dice (got {count}).")

    @classmethod
    def non_integer_value(cls, token: str, position: int) -> "ValidationError":
        return cls(f"Die {position} has a non-integer face value '{token}'. All dice faces must be integers.")

    @classmethod
    def empty_die(cls, position: int) -> "ValidationError":
        return cls(f"Die {position} has no faces.")


# ==============================================================================
# Protocol integrity errors
# ==============================================================================

class FairnessError(Exception):
    """The revealed key and value do not match the HMAC shown before the user's move."""

    def __str__(self) -> str:
        return f"Fairness Error: {super().__str__()}"
