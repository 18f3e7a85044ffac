from __future__ import annotations

import pathlib
from typing import Any, Dict, Iterable, List, Optional

import orjson
import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from ..core.env import Settings, load_settings
from ..dictionary import Dictionary, load_dictionary
from ..exceptions import DictionaryTooSmall, PuzzleError
from ..generators import HashtagPuzzle, JackpotPuzzle, get_generator_for_game
from ..generators.base import default_random_source

app = typer.Typer(help="Generate Hashtag and Jackpot puzzles.")
console = Console()


def write_jsonl(path: pathlib.Path, rows: Iterable[Dict[str, Any]]):
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("ab") as f:
        for r in rows:
            f.write(orjson.dumps(r) + b"\n")


def open_dictionary(path: Optional[str]) -> Dictionary:
    try:
        return load_dictionary(path)
    except PuzzleError as e:
        console.print(f"[red]{e}[/]")
        raise typer.Exit(1)


def show_hashtag(puzzle: HashtagPuzzle):
    console.print(puzzle.grid().render(empty="·"), highlight=False)
    table = Table(show_header=True, header_style="bold")
    table.add_column("Role")
    table.add_column("Word")
    for w in puzzle.words:
        table.add_row(w.role.value, w.word)
    console.print(table)
    console.print(f"Rare letters: {puzzle.rare_score} | Attempts: {puzzle.attempts}")


def show_jackpot(puzzle: JackpotPuzzle):
    table = Table(show_header=True, header_style="bold")
    table.add_column("Original")
    table.add_column("Current")
    table.add_column("Valid")
    for w in puzzle.words:
        table.add_row(w.original, w.current, "[green]yes[/]" if w.valid else "no")
    console.print(table)
    console.print(f"Attempts: {puzzle.attempts}")


def run_generation(
    game: str,
    dictionary: Dictionary,
    settings: Settings,
    count: int,
    seed: Optional[int],
    out_path: Optional[str],
    max_attempts: Optional[int],
) -> List[Dict[str, Any]]:
    """Generate `count` puzzles, print them and optionally append them to a JSONL file."""
    if seed is None:
        seed = settings.seed
    rng = default_random_source(seed)
    generator = get_generator_for_game(
        game,
        dictionary,
        rng=rng,
        rare_letters=settings.rare_letters,
        max_attempts=max_attempts or settings.max_attempts,
    )

    records: List[Dict[str, Any]] = []
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            task = progress.add_task(f"Generating {game}...", total=count)
            puzzles = []
            for _ in range(count):
                puzzles.append(generator.generate())
                progress.update(task, advance=1)
    except DictionaryTooSmall as e:
        console.print(f"[red]Dictionary cannot support {game}:[/] {e}")
        raise typer.Exit(2)
    except PuzzleError as e:
        console.print(f"[red]Generation failed:[/] {e}")
        raise typer.Exit(1)

    for i, puzzle in enumerate(puzzles, 1):
        console.rule(f"[bold cyan]{game} #{i}")
        if isinstance(puzzle, HashtagPuzzle):
            show_hashtag(puzzle)
        else:
            show_jackpot(puzzle)
        records.append({
            "game": game,
            "seed": seed,
            "attempts": puzzle.attempts,
            "words": generator.to_records(puzzle),
        })

    if out_path:
        write_jsonl(pathlib.Path(out_path), records)
        console.print(f"[green]Wrote[/] {len(records)} puzzle(s) to {out_path}")
    return records


@app.command()
def hashtag(
    count: int = typer.Option(1, min=1, help="Number of puzzles to generate"),
    seed: Optional[int] = typer.Option(None, help="Seed for reproducible puzzles"),
    out_path: Optional[str] = typer.Option(None, "--out", help="Append puzzles to this JSONL file"),
    dictionary: Optional[str] = typer.Option(None, help="Word list usable across and down"),
    max_attempts: Optional[int] = typer.Option(None, min=1, help="Draws before giving up"),
):
    """Generate `#` crosswords (H1, H2 across; V1, V2 down)."""
    settings = load_settings()
    words = open_dictionary(dictionary or settings.hashtag_dictionary_path)
    run_generation("hashtag", words, settings, count, seed, out_path, max_attempts)


@app.command()
def jackpot(
    words: int = typer.Option(3, "--words", "-n", min=3, max=5, help="Words per puzzle (3-5)"),
    count: int = typer.Option(1, min=1, help="Number of puzzles to generate"),
    seed: Optional[int] = typer.Option(None, help="Seed for reproducible puzzles"),
    out_path: Optional[str] = typer.Option(None, "--out", help="Append puzzles to this JSONL file"),
    dictionary: Optional[str] = typer.Option(None, help="Word list to draw from"),
    max_attempts: Optional[int] = typer.Option(None, min=1, help="Draws before giving up"),
):
    """Generate Jackpot sets: column-scrambled words to swap back into place."""
    settings = load_settings()
    word_list = open_dictionary(dictionary or settings.dictionary_path)
    game = f"jackpot-{words}"
    run_generation(game, word_list, settings, count, seed, out_path, max_attempts)


if __name__ == "__main__":
    app()
