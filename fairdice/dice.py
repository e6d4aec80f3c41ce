from dataclasses import dataclass

from fairdice.errors import ValidationError

MIN_DICE = 3


@dataclass(frozen=True)
class Die:
    faces: tuple[int, ...]

    def __post_init__(self):
        object.__setattr__(self, "faces", tuple(self.faces))
        if not self.faces:
            raise ValueError("A die must have at least one face.")

    def __str__(self) -> str:
        return ",".join(map(str, self.faces))

    def __len__(self) -> int:
        return len(self.faces)

    def face(self, index: int) -> int:
        return self.faces[index]


def parse_die(arg: str, position: int) -> Die:
    faces = []
    for token in arg.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            faces.append(int(token))
        except ValueError:
            raise ValidationError.non_integer_value(token, position) from None
    if not faces:
        raise ValidationError.empty_die(position)
    return Die(faces)


def parse_dice(args: list[str]) -> list[Die]:
    """Turns command-line arguments such as ``2,2,4,4,9,9`` into dice."""
    if len(args) < MIN_DICE:
        raise ValidationError.not_enough_dice(len(args))
    return [parse_die(arg, position) for position, arg in enumerate(args, start=1)]
