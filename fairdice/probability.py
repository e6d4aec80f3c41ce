from tabulate import tabulate

from fairdice.dice import Die

UNDEFINED_CELL = "-"


def calculate_win_probability(die1: Die, die2: Die) -> float:
    wins = sum(1 for f1 in die1.faces for f2 in die2.faces if f1 > f2)
    return wins / (len(die1) * len(die2))


def calculate_probabilities(dice: list[Die]) -> list[list[float | None]]:
    """
    Win percentage of dice[i] against dice[j], rounded to two decimals.
    Ties count as losses. A die never plays against itself, so the diagonal is None.
    """
    matrix = []
    for i, user_die in enumerate(dice):
        row = []
        for j, pc_die in enumerate(dice):
            if i == j:
                row.append(None)
                continue
            row.append(round(calculate_win_probability(user_die, pc_die) * 100, 2))
        matrix.append(row)
    return matrix


def format_cell(percentage: float | None) -> str:
    if percentage is None:
        return UNDEFINED_CELL
    return f"{percentage:.2f}%"

# ==============================================================================
# Help table
# ==============================================================================


def generate_table(all_dice: list[Die]) -> str:
    labels = [str(d) for d in all_dice]
    headers = ["User v PC >"] + labels
    table_data = [
        [label] + [format_cell(cell) for cell in row]
        for label, row in zip(labels, calculate_probabilities(all_dice))
    ]

    intro = (
        "\n--- Win Probability Table ---\n"
        "This table shows the probability of the User's die (rows) winning against the PC's die (columns).\n"
        f"A die never plays against itself ({UNDEFINED_CELL}). Equal faces count as a loss for the row.\n"
    )
    return intro + tabulate(table_data, headers=headers, tablefmt="grid")
