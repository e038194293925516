from __future__ import annotations

import os
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class SaplingConfig:
    encoding: str = "utf-8"
    indent: str = "  "
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> SaplingConfig:
        """Build a config from defaults overridden by ``SAPLING_*`` variables."""
        config = cls()
        env_map = {
            "SAPLING_ENCODING": "encoding",
            "SAPLING_INDENT": "indent",
            "SAPLING_LOG_LEVEL": "log_level",
        }
        overrides = {
            attr: os.environ[key] for key, attr in env_map.items() if key in os.environ
        }
        if "log_level" in overrides:
            overrides["log_level"] = overrides["log_level"].upper()
        return replace(config, **overrides)
