from __future__ import annotations
import logging
import os
from dataclasses import dataclass


_TRUTHY = {"1", "true", "yes", "on"}

DEFAULT_PROMPT = "lis> "
DEFAULT_LOG_LEVEL = "WARNING"


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def get_prompt() -> str:
    return os.environ.get("LIS_PROMPT", DEFAULT_PROMPT)


def get_log_level() -> int:
    raw = os.environ.get("LIS_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING


@dataclass(frozen=True)
class EvalOptions:
    """Switches for the two scoping/mutation behaviours that can be changed.

    closures:     define-func captures its defining environment and calls run
                  in a child of it, instead of a child of the caller's env.
    evaluate_set: set! evaluates its value expression before storing it,
                  instead of storing the raw expression.
    """

    closures: bool = False
    evaluate_set: bool = False

    @classmethod
    def from_env(cls) -> EvalOptions:
        return cls(
            closures=flag_from_env("LIS_CLOSURES"),
            evaluate_set=flag_from_env("LIS_EVAL_SET"),
        )


DEFAULT_OPTIONS = EvalOptions()
