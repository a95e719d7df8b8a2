from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class SelectorConfig:
    log_level: str = "WARNING"
    kind_separator: str = "="  # CLI steps, e.g. "class=item"

    @classmethod
    def from_env(cls) -> SelectorConfig:
        """Build a config from SELECTOR_BUILDER_* environment variables."""
        defaults = cls()
        return cls(
            log_level=os.environ.get("SELECTOR_BUILDER_LOG_LEVEL", defaults.log_level),
            kind_separator=os.environ.get(
                "SELECTOR_BUILDER_KIND_SEPARATOR", defaults.kind_separator
            ),
        )
