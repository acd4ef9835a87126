"""Library settings — init kwargs and env vars in one frozen object.

Priority chain (highest to lowest):
  1. Init kwargs  — passed by the embedding application
  2. Env vars     — ``SLLIST_*`` prefix
  3. Code defaults

The process-wide instance is built lazily by :func:`get_settings` and
cached; :func:`reset_settings` drops the cache so the environment is
read again.
"""

from __future__ import annotations

import functools

from pydantic import Field
from pydantic_settings import BaseSettings


class SllistSettings(BaseSettings):
    """Runtime switches for sllist.

    Attributes:
        debug_checks: Verify that positions passed to ``insert_after`` and
            ``erase_after`` belong to the receiving list. Costs a walk of
            the chain per call.
        verbose: Default for :func:`sllist.config.logging.configure_logging`.
        log_json: Default for :func:`sllist.config.logging.configure_logging`.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SLLIST_",
    }

    debug_checks: bool = Field(default=False, description="Check position ownership")

    # --- configure_logging defaults ---
    verbose: bool = False
    log_json: bool = False


@functools.cache
def get_settings() -> SllistSettings:
    """Return the cached process-wide settings."""
    return SllistSettings()


def reset_settings() -> None:
    """Forget the cached settings; the next lookup re-reads the environment."""
    get_settings.cache_clear()
