"""
CLI commands for the word games.

    wordgames generate hashtag --seed 7
    wordgames generate jackpot --words 4 --count 3 --out data/jackpot.jsonl
    wordgames evaluate ALLEY LLAMA
    wordgames explore-data
    wordgames prepare-data raw.txt data/words5.txt
"""

from typing import Optional

import typer

from ..core.env import load_settings
from ..core.log import setup_logging
from . import generate
from .evaluate import main as evaluate_main
from .explore_data import main as explore_data
from .prepare_data import main as prepare_data

app = typer.Typer(help="Hashtag, Jackpot and Wordle puzzle tooling.")


@app.callback()
def main(log_level: Optional[str] = typer.Option(None, help="Override WORDGAMES_LOG_LEVEL")):
    setup_logging(log_level or load_settings().log_level)


app.add_typer(generate.app, name="generate")
app.command("evaluate")(evaluate_main)
app.command("explore-data")(explore_data)
app.command("prepare-data")(prepare_data)

__all__ = [
    "app",
    "evaluate_main",
    "explore_data",
    "prepare_data",
]
