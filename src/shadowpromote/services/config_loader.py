"""Configuration loader for shadowpromote."""

from pathlib import Path
from typing import Any, Dict

import yaml

from shadowpromote.errors import PromoteError


class ConfigLoader:
    """Loads operator defaults from the working directory's YAML file."""

    FILE_NAME = ".shadowpromote.yml"

    SUPPORTED_KEYS = {
        "timeout": (int, float),
        "password_file": (str,),
        "request_id": (int,),
        "verbose": (bool,),
        "log_file": (str,),
    }

    def load(self, directory: str) -> Dict[str, Any]:
        path = Path(directory) / self.FILE_NAME
        if not path.exists():
            return {}

        try:
            parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (yaml.YAMLError, OSError) as exc:
            raise PromoteError(f"Invalid config file '{path}': {exc}") from exc

        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            raise PromoteError(f"Config file '{path}' must contain a YAML mapping at the root.")

        unknown = sorted(set(parsed.keys()) - set(self.SUPPORTED_KEYS))
        if unknown:
            unknown_list = ", ".join(str(key) for key in unknown)
            raise PromoteError(f"Unknown configuration keys: {unknown_list}")

        for key, value in parsed.items():
            self._check_type(key, value)
        return parsed

    def _check_type(self, key: str, value: Any):
        if value is None:
            return
        allowed = self.SUPPORTED_KEYS[key]
        # YAML booleans are ints in Python; only `verbose` accepts one.
        if (isinstance(value, bool) and bool not in allowed) or not isinstance(value, allowed):
            expected = " or ".join(kind.__name__ for kind in allowed)
            raise PromoteError(
                f"Configuration key '{key}' must be {expected}, got {type(value).__name__}."
            )
