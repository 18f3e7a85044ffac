from __future__ import annotations
import typer
from collections import Counter
from typing import Optional
from rich import print
from rich.table import Table

from ..core.env import load_settings
from ..dictionary import load_dictionary
from ..exceptions import PuzzleError
from ..grid import LINK_INDEX
from ..utils import count_rare_letters

app = typer.Typer()


@app.command()
def main(
    dictionary: Optional[str] = typer.Option(None, help="Word list to inspect (defaults to the configured one)"),
    top: int = typer.Option(10, help="Number of linking-letter buckets to list"),
):
    """Summarize a word list: size, linking-letter buckets, rare letters."""
    settings = load_settings()
    try:
        words = load_dictionary(dictionary or settings.dictionary_path)
    except PuzzleError as e:
        print(f"[red]{e}[/]")
        raise typer.Exit(1)

    buckets = words.partition(LINK_INDEX)
    rare_per_word = [count_rare_letters(w, settings.rare_letters) for w in words]
    rare_letters = Counter(c for w in words for c in w if c in settings.rare_letters)

    print(f"[bold]Words[/]: {len(words)}")
    print(f"[bold]Linking-letter buckets[/] (position {LINK_INDEX}): {len(buckets)}")
    print(f"[bold]Avg rare letters per word[/]: {sum(rare_per_word)/len(words):.2f}")

    table = Table(title="Largest buckets")
    table.add_column("Letter")
    table.add_column("Words", justify="right")
    for letter, members in sorted(buckets.items(), key=lambda kv: -len(kv[1]))[:top]:
        table.add_row(letter, str(len(members)))
    print(table)

    print(f"[bold]Rare letter counts[/]: {dict(rare_letters.most_common())}")


if __name__ == "__main__":
    app()
