"""Configuration File Package"""

import sys
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional

from gitfluff.errors import ConfigError

CONFIG_FILENAMES = (".gitfluff.toml", ".fluff.toml")
VALID_SEPARATIONS = {"warning", "error"}


def _known_keys(cls, data: dict, section: str) -> dict:
    """Drop keys the dataclass doesn't know, warning about each one."""
    valid_keys = {f.name for f in fields(cls)}
    for key in data:
        if key not in valid_keys:
            print(f"Config warning: unknown key '{key}' in {section}, ignoring", file=sys.stderr)
    return {k: v for k, v in data.items() if k in valid_keys}


def _expect(value, kind: type, name: str):
    if value is not None and not isinstance(value, kind):
        raise ConfigError(f"`{name}` must be a {kind.__name__}, got {type(value).__name__}")
    return value


@dataclass
class MessageRuleConfig:
    pattern: str
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> 'MessageRuleConfig':
        data = _known_keys(cls, data, "[rules.message]")
        if "pattern" not in data:
            raise ConfigError("`rules.message` requires a `pattern`")
        return cls(
            pattern=_expect(data["pattern"], str, "rules.message.pattern"),
            description=_expect(data.get("description"), str, "rules.message.description"),
        )


@dataclass
class ExcludeRuleConfig:
    pattern: str
    message: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> 'ExcludeRuleConfig':
        data = _known_keys(cls, data, "[[rules.excludes]]")
        if "pattern" not in data:
            raise ConfigError("every `rules.excludes` entry requires a `pattern`")
        return cls(
            pattern=_expect(data["pattern"], str, "rules.excludes.pattern"),
            message=_expect(data.get("message"), str, "rules.excludes.message"),
        )


@dataclass
class CleanupRuleConfig:
    find: str
    replace: str = ""
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> 'CleanupRuleConfig':
        data = _known_keys(cls, data, "[[rules.cleanup]]")
        if "find" not in data or "replace" not in data:
            raise ConfigError("every `rules.cleanup` entry requires `find` and `replace`")
        return cls(
            find=_expect(data["find"], str, "rules.cleanup.find"),
            replace=_expect(data["replace"], str, "rules.cleanup.replace"),
            description=_expect(data.get("description"), str, "rules.cleanup.description"),
        )


@dataclass
class RulesConfig:
    """The `[rules]` table. `None` means "not set in the file"."""
    message: Optional[MessageRuleConfig] = None
    excludes: list[ExcludeRuleConfig] = field(default_factory=list)
    cleanup: list[CleanupRuleConfig] = field(default_factory=list)
    single_line: Optional[bool] = None
    require_body: Optional[bool] = None
    exit_nonzero_on_rewrite: Optional[bool] = None
    separation: Optional[str] = None
    autofix: Optional[bool] = None

    def validate(self) -> None:
        if self.single_line and self.require_body:
            raise ConfigError("configuration cannot enable both `single_line` and `require_body` rules")
        if self.separation is not None and self.separation not in VALID_SEPARATIONS:
            raise ConfigError(
                f"`rules.separation` must be one of {sorted(VALID_SEPARATIONS)}, got '{self.separation}'"
            )

    @classmethod
    def from_dict(cls, data: dict) -> 'RulesConfig':
        data = _known_keys(cls, data, "[rules]")
        message = _expect(data.get("message"), dict, "rules.message")
        excludes = _expect(data.get("excludes", []), list, "rules.excludes")
        cleanup = _expect(data.get("cleanup", []), list, "rules.cleanup")
        for entry in [*excludes, *cleanup]:
            _expect(entry, dict, "rules entry")

        rules = cls(
            message=MessageRuleConfig.from_dict(message) if message is not None else None,
            excludes=[ExcludeRuleConfig.from_dict(e) for e in excludes],
            cleanup=[CleanupRuleConfig.from_dict(c) for c in cleanup],
            single_line=_expect(data.get("single_line"), bool, "rules.single_line"),
            require_body=_expect(data.get("require_body"), bool, "rules.require_body"),
            exit_nonzero_on_rewrite=_expect(
                data.get("exit_nonzero_on_rewrite"), bool, "rules.exit_nonzero_on_rewrite"
            ),
            separation=_expect(data.get("separation"), str, "rules.separation"),
            autofix=_expect(data.get("autofix"), bool, "rules.autofix"),
        )
        rules.validate()
        return rules


@dataclass
class FileConfig:
    """Contents of a `.gitfluff.toml` file."""
    preset: Optional[str] = None
    write: Optional[bool] = None
    rules: RulesConfig = field(default_factory=RulesConfig)

    @classmethod
    def from_dict(cls, data: dict) -> 'FileConfig':
        data = _known_keys(cls, data, "config")
        rules = _expect(data.get("rules", {}), dict, "rules")
        return cls(
            preset=_expect(data.get("preset"), str, "preset"),
            write=_expect(data.get("write"), bool, "write"),
            rules=RulesConfig.from_dict(rules),
        )


def find_config(start_dir: Path) -> Optional[Path]:
    """Walk up from start_dir to the filesystem root looking for a config file."""
    for directory in (start_dir, *start_dir.parents):
        for name in CONFIG_FILENAMES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
    return None


def read_config(path: Path) -> FileConfig:
    try:
        raw = path.read_text(encoding='utf-8')
    except OSError as e:
        raise ConfigError(f"failed to read config at {path}") from e
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"invalid config at {path}") from e
    try:
        return FileConfig.from_dict(data)
    except ConfigError as e:
        raise ConfigError(f"invalid config at {path}") from e


def load_config(explicit_path: Optional[Path], start_dir: Path) -> Optional[tuple[Path, FileConfig]]:
    """Load an explicit config path, or the nearest discovered one."""
    path = explicit_path or find_config(start_dir)
    if path is None:
        return None
    return path, read_config(path)


__all__ = [
    "FileConfig",
    "RulesConfig",
    "MessageRuleConfig",
    "ExcludeRuleConfig",
    "CleanupRuleConfig",
    "CONFIG_FILENAMES",
    "find_config",
    "read_config",
    "load_config",
]
