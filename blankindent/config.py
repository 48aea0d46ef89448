import os
from typing import Dict, Optional

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt, field_validator

# Default tab width for leading tab expansion
DEFAULT_TAB_WIDTH = 2

# Files above this size are refused (1 MiB)
MAX_SIZE = 1 << 20

ENV_PREFIX = "BLANKINDENT_"


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    debug: StrictBool = False
    tab_width: StrictInt = DEFAULT_TAB_WIDTH
    max_size: StrictInt = MAX_SIZE

    @field_validator("tab_width")
    @classmethod
    def tab_width_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("tab_width must be at least 1")
        return v

    @field_validator("max_size")
    @classmethod
    def max_size_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("max_size must be non-negative")
        return v


def load_env_defaults(env_path: Optional[str] = None) -> Dict[str, str]:
    """
    Collect BLANKINDENT_* settings from a .env file and the process environment.
    The process environment overrides the .env file.
    """
    if env_path is None:
        env_path = os.path.join(os.getcwd(), ".env")
    values = {}
    if os.path.isfile(env_path):
        for key, value in dotenv_values(env_path).items():
            if key.startswith(ENV_PREFIX) and value is not None:
                values[key[len(ENV_PREFIX):]] = value
    for key, value in os.environ.items():
        if key.startswith(ENV_PREFIX):
            values[key[len(ENV_PREFIX):]] = value
    return values


def _env_int(env: Dict[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}")


def build_config(
    debug: bool = False,
    tab_width: Optional[int] = None,
    env: Optional[Dict[str, str]] = None,
) -> Config:
    """Build the per-process configuration; explicit arguments beat env defaults."""
    if env is None:
        env = {}
    if tab_width is None:
        tab_width = _env_int(env, "TAB_WIDTH", DEFAULT_TAB_WIDTH)
    max_size = _env_int(env, "MAX_SIZE", MAX_SIZE)
    return Config(debug=debug, tab_width=tab_width, max_size=max_size)
