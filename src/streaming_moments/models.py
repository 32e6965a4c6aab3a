"""Pydantic models for validation and reporting."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SamplePair(BaseModel):
    """Validated joint observation read from a text row."""

    model_config = ConfigDict(extra="forbid")

    x: float
    y: float


class MomentSnapshot(BaseModel):
    """Derived statistics of an accumulator at one point in the stream."""

    # Non-finite values are reported as-is, so allow them on output.
    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")

    count: int = Field(ge=0, description="Number of accumulated pairs")
    mean_x: float = Field(description="Running mean of X")
    mean_y: float = Field(description="Running mean of Y")
    sample_covariance: float = Field(description="Unbiased sample covariance")
    sample_variance_x: float = Field(description="Unbiased sample variance of X")
    sample_variance_y: float = Field(description="Unbiased sample variance of Y")
