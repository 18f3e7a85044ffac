import pytest

from wordgames.core.env import KNOWN_KEYS, Settings, load_settings
from wordgames.exceptions import ContractViolation
from wordgames.generators.base import DEFAULT_MAX_ATTEMPTS
from wordgames.utils import RARE_LETTERS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in KNOWN_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults_without_env_file(tmp_path):
    settings = load_settings(str(tmp_path / "missing.env"))
    assert settings == Settings()
    assert settings.max_attempts == DEFAULT_MAX_ATTEMPTS
    assert settings.rare_letters == RARE_LETTERS


def test_values_from_env_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "WORDGAMES_DICTIONARY=words.txt\n"
        "WORDGAMES_MAX_ATTEMPTS=50\n"
        "WORDGAMES_RARE_LETTERS=xyz\n"
        "WORDGAMES_SEED=7\n"
        "WORDGAMES_LOG_LEVEL=debug\n"
    )
    # load_dotenv writes into os.environ, so register the keys for undo
    for key in KNOWN_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    settings = load_settings(str(env_file))
    assert settings.dictionary_path == "words.txt"
    assert settings.hashtag_dictionary_path == "words.txt"
    assert settings.max_attempts == 50
    assert settings.rare_letters == frozenset("XYZ")
    assert settings.seed == 7
    assert settings.log_level == "DEBUG"


def test_process_environment_wins_over_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("WORDGAMES_SEED=7\n")
    monkeypatch.setenv("WORDGAMES_SEED", "11")
    assert load_settings(str(env_file)).seed == 11


def test_separate_hashtag_dictionary(tmp_path, monkeypatch):
    monkeypatch.setenv("WORDGAMES_DICTIONARY", "all.txt")
    monkeypatch.setenv("WORDGAMES_HASHTAG_DICTIONARY", "grid.txt")
    settings = load_settings(str(tmp_path / "missing.env"))
    assert settings.dictionary_path == "all.txt"
    assert settings.hashtag_dictionary_path == "grid.txt"


@pytest.mark.parametrize("value", ["lots", "0", "-3"])
def test_bad_max_attempts(tmp_path, monkeypatch, value):
    monkeypatch.setenv("WORDGAMES_MAX_ATTEMPTS", value)
    with pytest.raises(ContractViolation):
        load_settings(str(tmp_path / "missing.env"))


@pytest.mark.parametrize("value", ["P, G", "p g", "P,G;"])
def test_rare_letters_ignore_separators(tmp_path, monkeypatch, value):
    monkeypatch.setenv("WORDGAMES_RARE_LETTERS", value)
    assert load_settings(str(tmp_path / "missing.env")).rare_letters == frozenset("PG")


def test_rare_letters_without_any_letter_fall_back(tmp_path, monkeypatch):
    monkeypatch.setenv("WORDGAMES_RARE_LETTERS", ", ;")
    assert load_settings(str(tmp_path / "missing.env")).rare_letters == RARE_LETTERS
