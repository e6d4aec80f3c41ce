import secrets
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Callable

from fairdice.dice import Die
from fairdice.fairness import Commitment, check_reveal, combine, commit
from fairdice.probability import generate_table
from fairdice.ui import ExitRequested, GameUI

# Combined first-move bit that lets the user move first.
USER_FIRST_BIT = 0


class State(StrEnum):
    INIT = "init"
    DETERMINE_FIRST_MOVE = "determine first move"
    SELECT_DICE = "select dice"
    ROLL_USER = "roll user"
    ROLL_OPPONENT = "roll opponent"
    COMPARE = "compare"
    DONE = "done"
    ABORTED = "aborted"


class Player(StrEnum):
    USER = "user"
    OPPONENT = "opponent"


class Outcome(StrEnum):
    USER_WINS = "user wins"
    OPPONENT_WINS = "opponent wins"
    TIE = "tie"
    ABORTED = "aborted"


@dataclass(frozen=True)
class Exchange:
    """Public record of one finished fairness exchange, enough to re-check the HMAC."""
    label: str
    modulus: int
    digest: str
    key_hex: str
    secret_value: int
    user_value: int
    result: int


@dataclass
class GameSession:
    dice: list[Die]
    state: State = State.INIT
    first_mover: Player | None = None
    user_die: Die | None = None
    opponent_die: Die | None = None
    user_roll_index: int | None = None
    opponent_roll_index: int | None = None
    user_face: int | None = None
    opponent_face: int | None = None
    outcome: Outcome | None = None
    exchanges: list[Exchange] = field(default_factory=list)


def compare_faces(user_face: int, opponent_face: int) -> Outcome:
    if user_face > opponent_face:
        return Outcome.USER_WINS
    if user_face < opponent_face:
        return Outcome.OPPONENT_WINS
    return Outcome.TIE

# ==============================================================================
# Fairness exchange driven through the console
# ==============================================================================


class FairInteraction:
    def __init__(
        self,
        ui: GameUI,
        on_help: Callable[[], None],
        commit_fn: Callable[[int], Commitment] = commit,
    ):
        self.ui = ui
        self.on_help = on_help
        self.commit_fn = commit_fn

    def exchange(self, modulus: int, prompt: str, label: str) -> Exchange:
        # One commitment per decision; help and invalid input re-ask against the same HMAC.
        commitment = self.commit_fn(modulus)
        self.ui.display_hmac(modulus, commitment.digest)

        options = [str(i) for i in range(modulus)]
        user_value = self.ui.get_user_choice(prompt, options, self.on_help)

        key, secret_value = commitment.reveal()
        self.ui.display_key_and_move(commitment.key_hex, secret_value)
        check_reveal(commitment)

        result = combine(secret_value, user_value, modulus)
        self.ui.display_message(
            f"The fair number generation result is {secret_value} + {user_value} = {result} (mod {modulus})."
        )
        return Exchange(
            label=label,
            modulus=modulus,
            digest=commitment.digest,
            key_hex=key.hex().upper(),
            secret_value=secret_value,
            user_value=user_value,
            result=result,
        )

# ==============================================================================
# Game controller (state machine)
# ==============================================================================


class GameController:
    def __init__(
        self,
        dice: list[Die],
        ui: GameUI,
        commit_fn: Callable[[int], Commitment] = commit,
        choose_die: Callable[[list[int]], int] | None = None,
    ):
        self.all_dice = list(dice)
        self.ui = ui
        self.interaction = FairInteraction(ui, self.show_help, commit_fn)
        self.choose_die = choose_die if choose_die is not None else secrets.choice
        self._handlers = {
            State.INIT: self._init,
            State.DETERMINE_FIRST_MOVE: self._determine_first_move,
            State.SELECT_DICE: self._select_dice,
            State.ROLL_USER: self._roll_user,
            State.ROLL_OPPONENT: self._roll_opponent,
            State.COMPARE: self._compare,
        }

    def show_help(self):
        self.ui.display_message(generate_table(self.all_dice))

    def run(self) -> GameSession:
        session = GameSession(dice=self.all_dice)
        try:
            while session.state is not State.DONE:
                session.state = self._handlers[session.state](session)
        except ExitRequested:
            session.state = State.ABORTED
            session.outcome = Outcome.ABORTED
            self.ui.display_message("Exiting game. Goodbye!")
        return session

    def _init(self, session: GameSession) -> State:
        self.ui.display_message("--- Welcome to the Non-Transitive Dice Game! ---")
        return State.DETERMINE_FIRST_MOVE

    def _determine_first_move(self, session: GameSession) -> State:
        self.ui.display_message("\nLet's determine who makes the first move.")
        exchange = self.interaction.exchange(2, "Try to guess my selection.", "first move")
        session.exchanges.append(exchange)
        session.first_mover = Player.USER if exchange.result == USER_FIRST_BIT else Player.OPPONENT
        if session.first_mover is Player.USER:
            self.ui.display_message("You make the first move and choose the dice.")
        else:
            self.ui.display_message("I make the first move and choose the dice.")
        return State.SELECT_DICE

    def _select_dice(self, session: GameSession) -> State:
        available = list(range(len(self.all_dice)))
        if session.first_mover is Player.USER:
            session.user_die = self.all_dice[self._take_user_die(available)]
            session.opponent_die = self.all_dice[self._take_opponent_die(available)]
        else:
            session.opponent_die = self.all_dice[self._take_opponent_die(available)]
            session.user_die = self.all_dice[self._take_user_die(available)]

        self.ui.display_message(f"\nYour die: [{session.user_die}]")
        self.ui.display_message(f"My die:   [{session.opponent_die}]")
        return State.ROLL_USER

    def _take_user_die(self, available: list[int]) -> int:
        options = [str(self.all_dice[i]) for i in available]
        choice = self.ui.get_user_choice("Choose your dice:", options, self.show_help)
        return available.pop(choice)

    def _take_opponent_die(self, available: list[int]) -> int:
        index = self.choose_die(available)
        available.remove(index)
        self.ui.display_message(f"I choose the [{self.all_dice[index]}] dice.")
        return index

    def _roll_user(self, session: GameSession) -> State:
        self.ui.display_message("\nIt is your time to roll.")
        exchange = self._roll(session.user_die, "user roll")
        session.exchanges.append(exchange)
        session.user_roll_index = exchange.result
        session.user_face = session.user_die.face(exchange.result)
        self.ui.display_message(f"Your roll result is {session.user_face}.")
        return State.ROLL_OPPONENT

    def _roll_opponent(self, session: GameSession) -> State:
        self.ui.display_message("\nIt is my time to roll.")
        exchange = self._roll(session.opponent_die, "opponent roll")
        session.exchanges.append(exchange)
        session.opponent_roll_index = exchange.result
        session.opponent_face = session.opponent_die.face(exchange.result)
        self.ui.display_message(f"My roll result is {session.opponent_face}.")
        return State.COMPARE

    def _roll(self, die: Die, label: str) -> Exchange:
        num_faces = len(die)
        return self.interaction.exchange(num_faces, f"Add your number modulo {num_faces}.", label)

    def _compare(self, session: GameSession) -> State:
        session.outcome = compare_faces(session.user_face, session.opponent_face)
        self.ui.display_message("\n--- Results ---")
        if session.outcome is Outcome.USER_WINS:
            self.ui.display_message(f"You win! ({session.user_face} > {session.opponent_face})")
        elif session.outcome is Outcome.OPPONENT_WINS:
            self.ui.display_message(f"I win! ({session.opponent_face} > {session.user_face})")
        else:
            self.ui.display_message(f"It's a tie! ({session.user_face} = {session.opponent_face})")
        return State.DONE
