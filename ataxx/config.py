import os
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv

from ataxx.ai.constants import DEFAULT_DIFFICULTY, MAX_DIFFICULTY, MAX_SESSIONS, MIN_DIFFICULTY

load_dotenv()


@dataclass(frozen=True)
class Settings:
    default_difficulty: int = DEFAULT_DIFFICULTY
    cors_origins: Optional[List[str]] = None
    log_level: str = "INFO"
    ai_seed: Optional[int] = None
    max_sessions: int = MAX_SESSIONS


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Read settings from the environment.

    Raises:
        ValueError: If ATAXX_DEFAULT_DIFFICULTY is outside 1..10 or
            ATAXX_MAX_SESSIONS is not positive.
    """
    origins = os.getenv("ATAXX_CORS_ORIGINS", "*")
    seed = os.getenv("ATAXX_AI_SEED")

    difficulty = int(os.getenv("ATAXX_DEFAULT_DIFFICULTY", DEFAULT_DIFFICULTY))
    if not MIN_DIFFICULTY <= difficulty <= MAX_DIFFICULTY:
        raise ValueError(
            f"ATAXX_DEFAULT_DIFFICULTY must be between {MIN_DIFFICULTY} and {MAX_DIFFICULTY}, got {difficulty}")

    max_sessions = int(os.getenv("ATAXX_MAX_SESSIONS", MAX_SESSIONS))
    if max_sessions < 1:
        raise ValueError(f"ATAXX_MAX_SESSIONS must be positive, got {max_sessions}")

    return Settings(
        default_difficulty=difficulty,
        cors_origins=[origin.strip() for origin in origins.split(",") if origin.strip()],
        log_level=os.getenv("ATAXX_LOG_LEVEL", "INFO").upper(),
        ai_seed=int(seed) if seed else None,
        max_sessions=max_sessions,
    )
