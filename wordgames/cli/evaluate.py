from __future__ import annotations

import orjson
import typer
from rich.console import Console
from rich.text import Text

from ..evaluation import LetterStatus, evaluate, format_statuses
from ..exceptions import ContractViolation
from ..utils import normalize_word

app = typer.Typer()
console = Console()

STYLES = {
    LetterStatus.correct: "bold white on green",
    LetterStatus.present: "bold white on yellow",
    LetterStatus.absent: "white on grey37",
}


def render_tiles(candidate: str, statuses) -> Text:
    tiles = Text()
    for letter, status in zip(candidate, statuses):
        tiles.append(f" {letter} ", style=STYLES[status])
        tiles.append(" ")
    return tiles


@app.command()
def main(
    guess: str,
    target: str,
    as_json: bool = typer.Option(False, "--json", help="Print the statuses as JSON only"),
):
    """Score GUESS against TARGET (correct / present / absent per letter)."""
    guess, target = normalize_word(guess), normalize_word(target)
    try:
        statuses = evaluate(guess, target)
    except ContractViolation as e:
        console.print(f"[red]{e}[/]")
        raise typer.Exit(1)

    if as_json:
        print(orjson.dumps({"guess": guess, "target": target,
                            "statuses": format_statuses(statuses)}).decode())
        return
    console.print(render_tiles(guess, statuses))
    console.print(", ".join(format_statuses(statuses)), highlight=False)


if __name__ == "__main__":
    app()
