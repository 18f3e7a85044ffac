"""
Puzzle generators for the Hashtag and Jackpot games.

Every generator takes an explicit Dictionary and an injectable random
source, and gives up with ExhaustedSearch after a bounded number of draws.

Usage:
    from wordgames.generators import generate_puzzle

    puzzle = generate_puzzle("hashtag", dictionary, rng=random.Random(7))
    print(puzzle["words"])
"""

from .base import RandomSource, PuzzleGenerator, default_random_source
from .hashtag import HashtagGenerator, HashtagPuzzle, HashtagWord, find_combination
from .jackpot import (
    JackpotGenerator,
    JackpotPuzzle,
    JackpotWord,
    find_jackpot_words,
    restore,
)
from .factory import (
    generate_puzzle,
    get_generator_for_game,
    GAME_PRESETS,
)

__all__ = [
    # Main functions
    "generate_puzzle",
    "get_generator_for_game",
    "find_combination",
    "find_jackpot_words",
    "restore",

    # Generator classes
    "HashtagGenerator",
    "JackpotGenerator",

    # Result types
    "HashtagPuzzle",
    "HashtagWord",
    "JackpotPuzzle",
    "JackpotWord",

    # Base types
    "RandomSource",
    "PuzzleGenerator",
    "default_random_source",

    # Constants
    "GAME_PRESETS",
]
