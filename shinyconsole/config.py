import os

from dotenv import load_dotenv

from .console import error_console
from .palettes import PALETTES
from .segmenter import Scope

# Load environment variables from .env file
load_dotenv()

# Configuration Defaults
DEFAULT_CONFIG = {
    "SHINY_DEFAULT_SCOPE": "characters",
    "SHINY_RANDOMIZE": "false",
    "SHINY_DEFAULT_PALETTE": "rainbow",
    "SHINY_RANDOM_SEED": "",
}


def get_setting(key: str, default: str) -> str:
    """Get setting with priority: Env Var > Default"""
    env_val = os.getenv(key)
    if env_val:
        return env_val.strip()
    return default


def get_int_setting(key: str, default: int | None) -> int | None:
    """Get integer setting with priority: Env Var > Default"""
    value = get_setting(key, "" if default is None else str(default))
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        error_console.print(
            f"[yellow]Warning: Invalid integer value for {key}: {value}, using default {default}[/yellow]"
        )
        return default


def get_bool_setting(key: str, default: bool) -> bool:
    """Get boolean setting with priority: Env Var > Default"""
    value = get_setting(key, str(default).lower())
    return value.lower() in ("true", "1", "yes", "on")


def get_choice_setting(key: str, default: str, choices: list[str]) -> str:
    """Get a setting restricted to a fixed set of names (case-insensitive)"""
    value = get_setting(key, default).lower().replace("-", "_")
    if value in choices:
        return value
    error_console.print(
        f"[yellow]Warning: Invalid value for {key}: {value}, using default {default}[/yellow]"
    )
    return default


# Initialize Configuration
DEFAULT_SCOPE = Scope(
    get_choice_setting(
        "SHINY_DEFAULT_SCOPE",
        DEFAULT_CONFIG["SHINY_DEFAULT_SCOPE"],
        [scope.value for scope in Scope],
    )
)
DEFAULT_PALETTE = get_choice_setting(
    "SHINY_DEFAULT_PALETTE",
    DEFAULT_CONFIG["SHINY_DEFAULT_PALETTE"],
    [info["name"] for info in PALETTES],
)
RANDOMIZE = get_bool_setting("SHINY_RANDOMIZE", False)

# None means the random source is seeded from the OS
RANDOM_SEED = get_int_setting("SHINY_RANDOM_SEED", None)
