"""Configuration for cargo-testdox."""

from collections.abc import Mapping
from typing import Literal, Self

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "CARGO_TESTDOX_"


class TestdoxConfig(BaseModel):
    """Configuration, read from ``CARGO_TESTDOX_*`` environment variables."""

    __test__ = False

    model_config = ConfigDict(frozen=True)

    cargo: str = Field(default="cargo", description="Cargo executable to run")
    color: Literal["auto", "always", "never"] = Field(
        default="auto", description="Colorize the report"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Log level for diagnostics on stderr"
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> Self:
        """Build configuration from environment variables.

        ``NO_COLOR`` (any non-empty value) overrides ``CARGO_TESTDOX_COLOR``.
        """
        values: dict[str, str] = {}
        if cargo := environ.get(f"{ENV_PREFIX}CARGO"):
            values["cargo"] = cargo
        if color := environ.get(f"{ENV_PREFIX}COLOR"):
            values["color"] = color.lower()
        if environ.get("NO_COLOR"):
            values["color"] = "never"
        if log_level := environ.get(f"{ENV_PREFIX}LOG"):
            values["log_level"] = log_level.upper()
        return cls.model_validate(values)

    def use_color(self, is_tty: bool) -> bool:
        """Whether to colorize output written to a stream."""
        if self.color == "auto":
            return is_tty
        return self.color == "always"
