from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional
import os

import yaml
from dotenv import load_dotenv

from .brainfuck import TAPE_SIZE, EofPolicy
from .loader import READ_MAX_LEN

# Environment overrides, applied after the YAML file
ENV_VARS = {
    "tape_size": "BFI_TAPE_SIZE",
    "eof_policy": "BFI_EOF_POLICY",
    "max_source_bytes": "BFI_MAX_SOURCE_BYTES",
}


class ConfigError(ValueError):
    pass


@dataclass
class InterpreterConfig:
    tape_size: int = TAPE_SIZE
    eof_policy: EofPolicy = EofPolicy.UNCHANGED
    max_source_bytes: int = READ_MAX_LEN

    def updated(self, **changes: Any) -> "InterpreterConfig":
        """Return a copy with raw values coerced and applied; None values are skipped."""
        coerced = {k: _coerce(k, v) for k, v in changes.items() if v is not None}
        return replace(self, **coerced)


def _coerce(key: str, value: Any) -> Any:
    if key == "eof_policy":
        if isinstance(value, EofPolicy):
            return value
        try:
            return EofPolicy(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in EofPolicy)
            raise ConfigError(f"eof_policy must be one of {choices}, got {value!r}") from None

    if isinstance(value, bool):
        raise ConfigError(f"{key} must be an integer, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{key} must be an integer, got {value!r}") from None
    if number < 1:
        raise ConfigError(f"{key} must be positive, got {number}")
    return number


def _load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping, got {type(data).__name__}")

    known = {f.name for f in fields(InterpreterConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"{path}: unknown setting(s): {', '.join(map(str, unknown))}")
    return data


def load_config(path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> InterpreterConfig:
    """Build the interpreter configuration.

    Precedence, lowest first: built-in defaults, the YAML file at `path`,
    then BFI_* environment variables (a .env file in the working directory
    is loaded into the process environment first).
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    cfg = InterpreterConfig()
    if path:
        cfg = cfg.updated(**_load_yaml(path))

    overrides = {key: environ.get(var) or None for key, var in ENV_VARS.items()}
    return cfg.updated(**overrides)
