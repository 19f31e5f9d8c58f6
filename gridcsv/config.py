"""
Configuration model and YAML I/O for gridcsv.

``CodecConfig`` holds every per-document choice of the codec.  It is a
Pydantic model so that a hand-edited YAML file is validated on load, and
so that the escape-marker rules are enforced wherever a config is built.

Key functions:
- load_config(path) -> CodecConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
- config_for_path(path, mode=None) -> CodecConfig: Default config whose
  mode comes from the file extension (or the explicit *mode*).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from gridcsv.cells import DelimiterMode
from gridcsv.detect import detect_mode
from gridcsv.exceptions import ConfigValidationError
from gridcsv.transforms.escape import DEFAULT_ESCAPE_MARKER, validate_marker

logger = logging.getLogger(__name__)

_NEWLINES = {"lf": "\n", "crlf": "\r\n"}


class CodecConfig(BaseModel):
    """Settings for one export or import.

    The same config must be used for both directions of a round trip.
    """

    mode: DelimiterMode = Field(
        DelimiterMode.CSV, description="Field delimiter: 'csv' (comma) or 'tab'"
    )
    line_terminator: Literal["lf", "crlf"] = Field(
        "crlf", description="Line terminator written after every row"
    )
    escape_marker: str = Field(
        DEFAULT_ESCAPE_MARKER, description="Prefix of every escape token"
    )
    escape_csv_delimiter: bool = Field(
        False,
        description=(
            "If True, commas inside CSV fields are escaped too. Off by default "
            "so output matches the established format"
        ),
    )

    @field_validator("escape_marker")
    @classmethod
    def _check_marker(cls, value: str) -> str:
        return validate_marker(value)

    @property
    def newline(self) -> str:
        return _NEWLINES[self.line_terminator]


def load_config(path: str | Path) -> CodecConfig:
    """Load and validate a codec config YAML file.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded config from %s", path)
    return CodecConfig.model_validate(raw)


def save_config(config: CodecConfig, path: str | Path) -> None:
    """Serialize a CodecConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# gridcsv codec configuration\n")
        f.write("# Use the same settings to read back what was written.\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)


def config_for_path(
    path: str | Path,
    mode: DelimiterMode | str | None = None,
) -> CodecConfig:
    """Build a default config for *path*.

    Args:
        path: Document path; its extension picks the mode when *mode* is
            ``None``.
        mode: Explicit delimiter mode, overriding the extension.

    Raises:
        UnknownFormatError: If *mode* is ``None`` and the extension is not
            recognised.
    """
    if mode is None:
        mode = detect_mode(path)
    return CodecConfig(mode=DelimiterMode(mode))
