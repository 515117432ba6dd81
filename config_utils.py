import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("console", "json")


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class AppConfig:
    shuffle: bool = True
    seed: int | None = None
    sample_deck: bool = True
    theme: str = "minty"
    title: str = "Flashify"
    animate: bool = True
    log_level: str = "INFO"
    log_format: str = "console"


def _get_bool(env, name, default):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"{name} must be a boolean (true/false), got {raw!r}")


def _get_choice(env, name, default, choices, normalize):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    value = normalize(raw.strip())
    if value not in choices:
        raise ConfigError(f"{name} must be one of {', '.join(choices)}, got {raw!r}")
    return value


def load_config(env=None) -> AppConfig:
    """Read FLASHCARD_* settings from the environment (and .env)."""
    env = os.environ if env is None else env

    seed = env.get("FLASHCARD_SEED")
    if seed is not None and seed.strip() != "":
        try:
            seed = int(seed.strip())
        except ValueError:
            raise ConfigError(f"FLASHCARD_SEED must be an integer, got {seed!r}") from None
    else:
        seed = None

    return AppConfig(
        shuffle=_get_bool(env, "FLASHCARD_SHUFFLE", True),
        seed=seed,
        sample_deck=_get_bool(env, "FLASHCARD_SAMPLE_DECK", True),
        theme=(env.get("FLASHCARD_THEME") or "minty").strip(),
        title=(env.get("FLASHCARD_TITLE") or "Flashify").strip(),
        animate=_get_bool(env, "FLASHCARD_ANIMATE", True),
        log_level=_get_choice(env, "FLASHCARD_LOG_LEVEL", "INFO", LOG_LEVELS, str.upper),
        log_format=_get_choice(env, "FLASHCARD_LOG_FORMAT", "console", LOG_FORMATS, str.lower),
    )
