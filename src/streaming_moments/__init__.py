"""Single-pass mean, variance and covariance estimators for paired streams."""

from .config import LoggingConfig, MomentSettings, ReaderConfig
from .covariance import PairwiseMomentAccumulator
from .logging_utils import JsonFormatter, configure_logging
from .mean import RunningMean
from .models import MomentSnapshot, SamplePair
from .stream import PairParseError, accumulate_lines, parse_pair

__all__ = [
    "PairwiseMomentAccumulator",
    "RunningMean",
    "MomentSnapshot",
    "SamplePair",
    "LoggingConfig",
    "ReaderConfig",
    "MomentSettings",
    "JsonFormatter",
    "configure_logging",
    "PairParseError",
    "accumulate_lines",
    "parse_pair",
]
