"""Configuration parsing for tag cloud runs."""

import codecs
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from .render import DEFAULT_STYLESHEETS, RENDERERS

# Fields holding file paths; relative values resolve against where they came from
PATH_FIELDS = ("input", "output")


@dataclass
class CloudConfig:
    """Settings for one tag cloud run.

    ``input`` and ``output`` are kept as given. Values read from a config
    file are relative to that file's directory, values set from the command
    line are relative to the working directory; ``path_for`` applies the
    right base.
    """

    input: str | None = None
    output: str | None = None
    count: int | None = None  # None = ask interactively
    format: str = "html"
    encoding: str = "utf-8"
    title: str | None = None
    stylesheets: list[str] = field(default_factory=lambda: list(DEFAULT_STYLESHEETS))
    base_dir: Path = field(default_factory=Path.cwd)
    _path_bases: dict[str, Path] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self.validate()

    @classmethod
    def settable_keys(cls) -> set[str]:
        """Names of the fields a config file or ``--set`` may assign."""
        return {f.name for f in fields(cls) if f.init} - {"base_dir"}

    @classmethod
    def from_dict(cls, data: dict[str, Any], base_dir: Path | None = None) -> "CloudConfig":
        """Create CloudConfig from a YAML dict."""
        unknown = sorted(set(data) - cls.settable_keys())
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

        values = dict(data)
        if "stylesheets" in values and isinstance(values["stylesheets"], str):
            values["stylesheets"] = [values["stylesheets"]]
        return cls(**values, base_dir=base_dir or Path.cwd())

    @classmethod
    def from_yaml(cls, path: Path) -> "CloudConfig":
        """Load run configuration from a YAML file.

        Relative input and output paths are resolved against the directory
        containing the YAML file.
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")

        return cls.from_dict(data, base_dir=path.parent.resolve())

    def validate(self) -> None:
        """Check field values.

        Raises:
            ValueError: If the format or encoding is unknown or the count is
                not an integer.
        """
        if self.format not in RENDERERS:
            raise ValueError(
                f"Unknown output format: {self.format}. Expected one of {', '.join(RENDERERS)}"
            )
        count = self.count
        if count is not None and (isinstance(count, bool) or not isinstance(count, int)):
            raise ValueError(f"count must be an integer, got {count!r}")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding: {self.encoding}") from None

    def override(self, overrides: dict[str, Any]) -> None:
        """Override config values from the command line.

        String values are converted to the field's type. Paths set here are
        relative to the working directory, not the config file.
        """
        known = self.settable_keys()
        for key, value in overrides.items():
            if key not in known:
                raise ValueError(f"Unknown config key: {key}")
            setattr(self, key, _coerce(key, value))
            if key in PATH_FIELDS:
                self._path_bases[key] = Path.cwd()
        self.validate()

    def resolve_path(self, value: str | Path, base: Path | None = None) -> Path:
        """Make ``value`` absolute relative to ``base`` (default: config directory)."""
        path = Path(value)
        if not path.is_absolute():
            path = (base or self.base_dir) / path
        return path

    def path_for(self, key: str) -> Path | None:
        """Return the absolute path held in the ``input`` or ``output`` field."""
        value = getattr(self, key)
        if value is None:
            return None
        return self.resolve_path(value, self._path_bases.get(key))


def _coerce(key: str, value: Any) -> Any:
    """Convert a command line value to the type of config field ``key``."""
    if not isinstance(value, str):
        return str(value) if key in ("input", "output", "title", "encoding", "format") else value

    if key == "count":
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"count must be an integer, got {value!r}") from None
    if key == "stylesheets":
        return [href.strip() for href in value.split(",") if href.strip()]
    return value


def parse_key_value_args(args: list[str]) -> dict[str, str]:
    """Split ``key=value`` arguments into a dict of raw strings.

    Raises:
        ValueError: If an argument has no ``=``.
    """
    result: dict[str, str] = {}
    for arg in args:
        key, sep, value = arg.partition("=")
        if not sep:
            raise ValueError(f"Invalid format: {arg}. Expected key=value")
        result[key] = value
    return result
