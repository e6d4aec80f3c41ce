import sys

from fairdice.dice import parse_dice
from fairdice.errors import FairnessError, ValidationError
from fairdice.game import GameController
from fairdice.ui import GameUI

EXIT_OK = 0
EXIT_VALIDATION_ERROR = 1
EXIT_FAIRNESS_ERROR = 2


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    ValidationError.set_invocation_command(ValidationError.detect_invocation_command())

    try:
        dice = parse_dice(args)
    except ValidationError as e:
        print(e, file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    controller = GameController(dice, GameUI())
    try:
        controller.run()
    except FairnessError as e:
        print(f"\n{e}", file=sys.stderr)
        return EXIT_FAIRNESS_ERROR
    except KeyboardInterrupt:
        print("\nGame interrupted. Goodbye!")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
