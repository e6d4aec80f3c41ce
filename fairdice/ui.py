from typing import Callable

EXIT_CHOICE = "x"
HELP_CHOICE = "?"


class ExitRequested(Exception):
    """The user asked to leave the game (or input ran out)."""


class GameUI:
    def __init__(self, read_line: Callable[[str], str] = input, write: Callable[[str], None] = print):
        self._read_line = read_line
        self._write = write

    def display_message(self, text: str):
        self._write(text)

    def display_hmac(self, modulus: int, hmac_hex: str):
        self._write(f"I selected a random value in the range 0..{modulus - 1} (HMAC={hmac_hex}).")

    def display_key_and_move(self, key_hex: str, move: int, name: str = "My selection"):
        self._write(f"{name}: {move} (KEY={key_hex}).")

    def get_user_choice(self, prompt: str, options: list[str], on_help: Callable[[], None]) -> int:
        """
        Reads lines until one names a valid option and returns its index.
        '?' shows help and asks the same question again; 'x' raises ExitRequested.
        """
        while True:
            self._write(f"\n{prompt}")
            for i, option in enumerate(options):
                self._write(f" {i} - {option}")
            self._write(" X - exit")
            self._write(" ? - help")

            try:
                choice = self._read_line("Your selection: ").strip().lower()
            except EOFError:
                raise ExitRequested() from None

            if choice == EXIT_CHOICE:
                raise ExitRequested()
            if choice == HELP_CHOICE:
                on_help()
                continue

            if choice.isdecimal():
                choice_int = int(choice)
                if 0 <= choice_int < len(options):
                    return choice_int

            self._write(f"Invalid choice. Please enter a number from 0 to {len(options) - 1}, '?', or 'X'.")
