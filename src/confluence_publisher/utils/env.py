"""Helpers for reading flags from the environment."""

import os

TRUTHY_VALUES = ("true", "1", "yes", "y", "on")


def is_env_truthy(env_var_name: str, default: str = "") -> bool:
    """Check if an environment variable is set to a truthy value.

    Args:
        env_var_name: Name of the environment variable to check
        default: Value to assume when the variable is not set

    Returns:
        True if the value is one of "true", "1", "yes", "y" or "on" (case-insensitive)
    """
    return os.getenv(env_var_name, default).strip().lower() in TRUTHY_VALUES
