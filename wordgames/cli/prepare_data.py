from __future__ import annotations
import pathlib
import typer
from rich import print

from ..utils import WORD_LENGTH, is_valid_word, normalize_word

app = typer.Typer()


def read_raw_words(path: pathlib.Path):
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            # lists often carry extra columns (frequency, tags); keep the first field
            fields = line.replace(",", " ").replace("\t", " ").split()
            if fields and not fields[0].startswith("#"):
                yield fields[0]


@app.command()
def main(raw_path: str,
         out_path: str,
         length: int = typer.Option(WORD_LENGTH, help="Keep only words of this length")):
    """Normalize a raw word list: strip accents, uppercase, filter, dedupe."""
    src = pathlib.Path(raw_path)
    if not src.exists():
        print(f"[red]No such file[/] {src}")
        raise typer.Exit(1)

    seen = {}
    total = 0
    for raw in read_raw_words(src):
        total += 1
        word = normalize_word(raw)
        if is_valid_word(word, length):
            seen.setdefault(word, None)

    out = pathlib.Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8") as f:
        for word in seen:
            f.write(word + "\n")

    print(f"[green]Wrote[/] {len(seen)} words (from {total} entries) to {out}")


if __name__ == "__main__":
    app()
