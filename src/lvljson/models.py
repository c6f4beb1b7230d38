"""Pydantic models for conversion options and results."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator


class ConvertOptions(BaseModel):
    """Settings shared by every file in a conversion run."""

    model_config = ConfigDict(frozen=True)

    pack: bool = False
    input_suffix: str = ".lvl"
    output_suffix: str = ".json"

    @field_validator("input_suffix", "output_suffix")
    @classmethod
    def suffix_has_dot(cls, v: str) -> str:
        """Ensure suffixes look like file extensions."""

        if not v.startswith(".") or len(v) < 2:
            raise ValueError("Suffix must start with '.' and name an extension")
        return v


class ConversionResult(BaseModel):
    """Outcome of converting one input file."""

    input: Path
    output: Path
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def __str__(self) -> str:
        return self.error if self.error else f"wrote {self.output}"


__all__ = ["ConversionResult", "ConvertOptions"]
