from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes"}


@dataclass(frozen=True)
class ObjkitConfig:
    log_level: str = "WARNING"
    match_fields_by_name: bool = False  # default decode mode for `objkit roundtrip`

    @classmethod
    def from_env(cls) -> ObjkitConfig:
        """Create config from ``OBJKIT_*`` environment variables.

        Unset variables keep their defaults.
        """
        defaults = cls()
        by_name = os.environ.get("OBJKIT_MATCH_FIELDS_BY_NAME")
        return cls(
            log_level=os.environ.get("OBJKIT_LOG_LEVEL", defaults.log_level),
            match_fields_by_name=(
                by_name.strip().lower() in _TRUTHY
                if by_name is not None
                else defaults.match_fields_by_name
            ),
        )
