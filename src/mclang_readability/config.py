from __future__ import annotations

import codecs
import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class ReadabilityConfig:
    """Configuration options for archive reading and report output."""

    language_suffixes: List[str] = field(default_factory=lambda: [".lang"])
    encoding: str = "utf-8"
    preview_chars: int = 1000
    text_filename: str = "extracted_text.txt"
    report_filename: str = "language_analysis.txt"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise ValueError(f"Unknown log_level '{self.log_level}'.")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding '{self.encoding}'.") from exc

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(ReadabilityConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    suffixes = kwargs.get("language_suffixes")
    if isinstance(suffixes, str):
        kwargs["language_suffixes"] = [suffixes]
    return kwargs


def config_from_dict(data: Mapping[str, Any] | None) -> ReadabilityConfig:
    """Build a ReadabilityConfig from a dictionary-like input."""
    if data is None:
        return ReadabilityConfig()
    return ReadabilityConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> ReadabilityConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ReadabilityConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return ReadabilityConfig()
    return config_from_yaml(path)
