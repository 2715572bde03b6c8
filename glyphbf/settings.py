"""Run settings: alphabet, tape limit and end-of-input policy.

Resolved from, in increasing priority: built-in defaults, a YAML config file,
GLYPHBF_* environment variables, and explicit overrides (command-line flags).
"""

import os
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

from .alphabet import DEFAULT_SYMBOLS, Alphabet
from .brainfuck import DEFAULT_TAPE_LIMIT, EOF_POLICIES, EOF_ZERO
from .errors import ConfigError

ENV_PREFIX = "GLYPHBF_"
ENV_CONFIG = ENV_PREFIX + "CONFIG"


@dataclass
class Settings:
    alphabet: Union[str, List[str]] = DEFAULT_SYMBOLS
    tape_limit: int = DEFAULT_TAPE_LIMIT
    eof: str = EOF_ZERO

    def resolve_alphabet(self) -> Alphabet:
        if isinstance(self.alphabet, (list, tuple)):
            return Alphabet.from_symbols(str(s) for s in self.alphabet)
        return Alphabet.from_string(self.alphabet)


SETTING_NAMES = tuple(f.name for f in fields(Settings))


def _coerce_tape_limit(value: Any, source: str) -> int:
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ConfigError(f"{source}: tape_limit must be a positive integer, got {value!r}")
    try:
        limit = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{source}: tape_limit must be a positive integer, got {value!r}") from None
    if limit < 1:
        raise ConfigError(f"{source}: tape_limit must be a positive integer, got {value!r}")
    return limit


def _coerce_eof(value: Any, source: str) -> str:
    policy = str(value).strip().lower()
    if policy not in EOF_POLICIES:
        raise ConfigError(f"{source}: eof must be one of {', '.join(EOF_POLICIES)}, got {value!r}")
    return policy


def _coerce_alphabet(value: Any, source: str) -> Union[str, List[str]]:
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    raise ConfigError(f"{source}: alphabet must be a string or a list of symbols, got {value!r}")


_COERCE = {
    "alphabet": _coerce_alphabet,
    "tape_limit": _coerce_tape_limit,
    "eof": _coerce_eof,
}


def load_config_file(path: str) -> Dict[str, Any]:
    """Read settings from a YAML mapping such as:

        alphabet: ["👍", "👎", "👉", "👈", "✍️", "📣", "🔁", "🔚"]
        tape_limit: 65536
        eof: unchanged
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"cannot parse config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping of settings, got {type(data).__name__}")

    unknown = sorted(str(k) for k in data if k not in SETTING_NAMES)
    if unknown:
        raise ConfigError(f"{path}: unknown setting(s): {', '.join(unknown)}")
    return {k: _COERCE[k](v, path) for k, v in data.items()}


def _from_environ(environ: Mapping[str, str]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for name in SETTING_NAMES:
        key = ENV_PREFIX + name.upper()
        raw = environ.get(key)
        if raw is not None and raw != "":
            values[name] = _COERCE[name](raw, key)
    return values


def load_settings(config_path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None,
                  overrides: Optional[Mapping[str, Any]] = None) -> Settings:
    """Merge defaults, config file, environment and overrides into Settings.
    Overrides whose value is None are ignored (flag not given).
    """
    environ = os.environ if environ is None else environ
    config_path = config_path or environ.get(ENV_CONFIG) or None

    values: Dict[str, Any] = {}
    if config_path:
        values.update(load_config_file(config_path))
    values.update(_from_environ(environ))
    for name, value in (overrides or {}).items():
        if value is None:
            continue
        if name not in _COERCE:
            raise ConfigError(f"unknown setting {name!r}")
        values[name] = _COERCE[name](value, "--" + name.replace("_", "-"))
    return Settings(**values)
