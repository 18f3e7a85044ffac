from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple

from ..dictionary import Dictionary
from .base import PuzzleGenerator, RandomSource
from .hashtag import HashtagGenerator
from .jackpot import JackpotGenerator


# Game presets for convenience: preset name -> (game, generator kwargs)
GAME_PRESETS: Dict[str, Tuple[str, Dict[str, Any]]] = {
    "hashtag": ("hashtag", {}),
    "jackpot": ("jackpot", {"word_count": 3}),
    "jackpot-3": ("jackpot", {"word_count": 3}),
    "jackpot-4": ("jackpot", {"word_count": 4}),
    "jackpot-5": ("jackpot", {"word_count": 5}),
}


def get_generator_for_game(
    game: str,
    dictionary: Dictionary,
    rng: Optional[RandomSource] = None,
    **kwargs,
) -> PuzzleGenerator:
    """
    Factory function to get the generator for a game.

    Args:
        game: Preset name ("hashtag", "jackpot", "jackpot-4", ...)
        dictionary: Word list the generator draws from
        rng: Random source shared by the generator's draws
        **kwargs: Overrides for the generator parameters

    Returns:
        HashtagGenerator or JackpotGenerator

    Raises:
        ValueError: If the game is unknown
    """
    if game not in GAME_PRESETS:
        raise ValueError(
            f"Unknown game: {game}\n"
            f"Supported: {', '.join(sorted(GAME_PRESETS))}"
        )
    kind, preset = GAME_PRESETS[game]
    params = {**preset, **kwargs}

    if kind == "hashtag":
        return HashtagGenerator(dictionary, rng=rng, **params)
    return JackpotGenerator(dictionary, rng=rng, **params)


def generate_puzzle(
    game: str,
    dictionary: Dictionary,
    rng: Optional[RandomSource] = None,
    **kwargs,
) -> Dict[str, Any]:
    """
    Convenience function to build one puzzle of any game.

    Returns:
        Dict with the game name, the plain word records and the attempt count

    Example:
        >>> puzzle = generate_puzzle("jackpot-4", dictionary)
        >>> [w["current"] for w in puzzle["words"]]
    """
    generator = get_generator_for_game(game, dictionary, rng=rng, **kwargs)
    puzzle = generator.generate()
    records: List[Dict[str, Any]] = generator.to_records(puzzle)
    return {
        "game": game,
        "words": records,
        "attempts": puzzle.attempts,
    }
