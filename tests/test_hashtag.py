"""Tests for the Hashtag (# crossword) generator."""

import random

import pytest

from wordgames.dictionary import Dictionary
from wordgames.exceptions import ContractViolation, DictionaryTooSmall, ExhaustedSearch
from wordgames.generators import (
    GAME_PRESETS,
    HashtagGenerator,
    PuzzleGenerator,
    find_combination,
    generate_puzzle,
    get_generator_for_game,
)
from wordgames.grid import ROLE_ORDER, Role, free_indices, intersections_hold
from wordgames.utils import count_rare_letters, letters_at


def _rare_score(words):
    return (
        count_rare_letters(words[Role.H1])
        + count_rare_letters(words[Role.H2])
        + count_rare_letters(letters_at(words[Role.V1], free_indices()))
        + count_rare_letters(letters_at(words[Role.V2], free_indices()))
    )


def test_forced_draw_returns_known_combination(hashtag_words, scripted):
    rng = scripted([0.0, 0.5, 0.0])  # H1=LOYAL, V1=SOIES, H2=BECHE
    puzzle = HashtagGenerator(hashtag_words, rng=rng).generate()

    assert [(w.role, w.word) for w in puzzle.words] == [
        (Role.H1, "LOYAL"),
        (Role.H2, "BECHE"),
        (Role.V1, "SOIES"),
        (Role.V2, "GACHE"),
    ]
    assert sorted(w.role.value for w in puzzle.words) == ["H1", "H2", "V1", "V2"]
    assert intersections_hold(puzzle.by_role())
    assert puzzle.rare_score == 4
    assert puzzle.attempts == 1
    assert rng.calls == 3


def test_forced_draw_grid_round_trip(hashtag_words, scripted):
    puzzle = HashtagGenerator(hashtag_words, rng=scripted([0.0, 0.5, 0.0])).generate()
    assert puzzle.grid().words() == puzzle.by_role()
    assert puzzle.to_dict() == [
        {"word": "LOYAL", "role": "H1"},
        {"word": "BECHE", "role": "H2"},
        {"word": "SOIES", "role": "V1"},
        {"word": "GACHE", "role": "V2"},
    ]


def test_every_v2_candidate_is_tried(scripted):
    d = Dictionary(["LOYAL", "BECHE", "SOIES", "CACHE", "GACHE"])
    # last draw keeps CACHE first; it scores 3, GACHE scores 4
    rng = scripted([0.0, 0.5, 0.0, 0.9])
    puzzle = HashtagGenerator(d, rng=rng, min_rare=4).generate()
    assert puzzle.word(Role.V2) == "GACHE"
    assert puzzle.rare_score == 4


def test_failed_v2_scan_uses_up_an_attempt(scripted):
    d = Dictionary(["LOYAL", "BECHE", "SOIES", "CACHE", "GACHE"])
    rng = scripted([0.0, 0.5, 0.0, 0.9])
    with pytest.raises(ExhaustedSearch) as info:
        HashtagGenerator(d, rng=rng, min_rare=5, max_attempts=1).generate()
    assert info.value.attempts == 1


@pytest.mark.parametrize("seed", range(20))
def test_generated_combinations_hold_invariants(hashtag_words, seed):
    noisy = Dictionary(list(hashtag_words) + ["CANOE", "MOTET", "RISES", "LUTES"])
    puzzle = HashtagGenerator(noisy, rng=random.Random(seed)).generate()
    words = puzzle.by_role()

    assert [w.role for w in puzzle.words] == list(ROLE_ORDER)
    assert len(set(words.values())) == 4
    assert intersections_hold(words)
    assert puzzle.grid().words() == words
    assert _rare_score(words) == puzzle.rare_score >= 3


def test_bland_dictionary_exhausts_search():
    d = Dictionary(["CANOE", "MOTET", "RISES", "LUTES"])
    with pytest.raises(ExhaustedSearch) as info:
        HashtagGenerator(d, rng=random.Random(0), max_attempts=50).generate()
    assert info.value.attempts == 50


def test_too_few_words_is_dictionary_too_small():
    d = Dictionary(["LOYAL", "BECHE", "SOIES"])
    with pytest.raises(DictionaryTooSmall):
        HashtagGenerator(d, rng=random.Random(0)).generate()


def test_unlinkable_dictionary_is_dictionary_too_small():
    # every second letter is A, every fourth letter is I: no V1 can lead to an H2
    d = Dictionary(["LAPIN", "MARIN", "SAPIN", "RAVIN"])
    with pytest.raises(DictionaryTooSmall):
        HashtagGenerator(d, rng=random.Random(0)).generate()


def test_invalid_parameters():
    with pytest.raises(ContractViolation):
        HashtagGenerator(Dictionary(["LOYAL"]), max_attempts=0)
    with pytest.raises(ContractViolation):
        HashtagGenerator(Dictionary(["ABCD"], word_length=4))


def test_factory_and_wrapper(hashtag_words, scripted):
    puzzle = generate_puzzle("hashtag", hashtag_words, rng=scripted([0.0, 0.5, 0.0]))
    assert puzzle["game"] == "hashtag"
    assert [w["role"] for w in puzzle["words"]] == ["H1", "H2", "V1", "V2"]
    assert puzzle["attempts"] == 1

    records = find_combination(hashtag_words, rng=scripted([0.0, 0.5, 0.0]))
    assert records[3] == {"word": "GACHE", "role": "V2"}


def test_factory_rejects_unknown_game(hashtag_words):
    with pytest.raises(ValueError):
        generate_puzzle("crossword", hashtag_words)


@pytest.mark.parametrize("game", sorted(GAME_PRESETS))
def test_factory_returns_puzzle_generators(game, jackpot_words):
    generator = get_generator_for_game(game, jackpot_words, rng=random.Random(0))
    assert isinstance(generator, PuzzleGenerator)
