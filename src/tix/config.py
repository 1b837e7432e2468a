"""Configuration for tix.

Defaults describe the format as shipped; a YAML file can override
them::

    palette:
      - "#F48771"
      - "#4EC9B0"
    archive_suffix: ".done"
    language_id: tix
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from tix.colors.palette import CONTEXT_COLORS
from tix.errors import ConfigError


@dataclass(frozen=True)
class TixConfig:
    """Settings shared by the workspace and the CLI.

    Parameters
    ----------
    palette:
        Colors assigned to contexts, in order.
    archive_suffix:
        Appended to a document's path to name its archive sidecar.
    language_id:
        Language id of documents the workspace annotates.
    """

    palette: tuple[str, ...] = field(default=CONTEXT_COLORS)
    archive_suffix: str = ".archive"
    language_id: str = "tix"

    @classmethod
    def from_mapping(cls, data: dict[str, Any], path: str | None = None) -> "TixConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown setting(s): {', '.join(unknown)}", path)

        values: dict[str, Any] = dict(data)
        if "palette" in values:
            palette = values["palette"]
            if not isinstance(palette, list) or not palette or not all(isinstance(c, str) for c in palette):
                raise ConfigError("palette must be a non-empty list of color strings", path)
            values["palette"] = tuple(palette)
        for name in ("archive_suffix", "language_id"):
            if name in values and not isinstance(values[name], str):
                raise ConfigError(f"{name} must be a string", path)
        return cls(**values)

    def archive_path(self, document_path: str | Path) -> Path:
        return Path(f"{document_path}{self.archive_suffix}")


def load_config(path: str | Path) -> TixConfig:
    """Load a ``TixConfig`` from a YAML file.

    Raises
    ------
    ConfigError
        If the file is missing, unreadable, not YAML, or not a mapping.
    """
    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read configuration: {exc.strerror or exc}", str(config_path)) from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML: {exc}", str(config_path)) from exc
    if data is None:
        return TixConfig()
    if not isinstance(data, dict):
        raise ConfigError("configuration must be a mapping", str(config_path))
    return TixConfig.from_mapping(data, str(config_path))
