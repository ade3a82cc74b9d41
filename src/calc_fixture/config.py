"""Pydantic models for .calc-fixture.yaml configuration."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from calc_fixture.errors import ConfigError

DEFAULT_CONFIG_FILE = ".calc-fixture.yaml"


class ArithmeticSettings(BaseModel):
    """Settings for the integer utilities."""

    integer_bits: int | None = Field(
        default=None,
        description="Wrap integer results to this signed width (None for Python ints)",
    )

    @field_validator("integer_bits")
    @classmethod
    def validate_integer_bits(cls, v: int | None) -> int | None:
        """Ensure the width is a positive bit count."""
        if v is not None and v <= 0:
            raise ValueError(f"integer_bits must be positive, got {v}")
        return v


class DemoSettings(BaseModel):
    """Inputs used by the demonstration routine."""

    message: str = Field(default="Hello, MCP Server!")
    numbers: list[int] = Field(default_factory=lambda: [1, 2, 3, 4, 5])
    append_value: int = Field(default=6)
    addends: tuple[int, int] = Field(default=(10, 20))
    factors: tuple[int, int] = Field(default=(6, 7))
    calculator_operands: tuple[float, float] = Field(default=(2.5, 1.5))
    completion_text: str = Field(default="Testing completion")
    completion_length: int = Field(default=7, ge=0)


class FixtureConfig(BaseModel):
    """Complete configuration for .calc-fixture.yaml."""

    arithmetic: ArithmeticSettings = Field(default_factory=ArithmeticSettings)
    demo: DemoSettings = Field(default_factory=DemoSettings)

    @classmethod
    def load(cls, path: str | Path) -> "FixtureConfig":
        """Load configuration from a YAML file.

        A missing file yields the default configuration.

        Raises:
            ConfigError: If the file cannot be read as UTF-8 YAML or fails validation
        """
        path = Path(path)
        if not path.exists():
            return cls()

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigError(f"{path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping at the top of {path}")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    def save(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(
                self.model_dump(mode="json"),
                f,
                default_flow_style=False,
                sort_keys=False,
            )
