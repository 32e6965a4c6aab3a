"""Feed delimited text rows of ``(x, y)`` pairs into an accumulator."""

from __future__ import annotations

import logging
from typing import Iterable

from pydantic import ValidationError

from .config import ReaderConfig
from .covariance import PairwiseMomentAccumulator
from .models import SamplePair


class PairParseError(ValueError):
    """Raised when a text row does not hold exactly two numeric fields."""

    def __init__(self, message: str, line_number: int = 0) -> None:
        super().__init__(f"line {line_number}: {message}" if line_number else message)
        self.line_number = line_number


def parse_pair(line: str, delimiter: str = ",", line_number: int = 0) -> SamplePair:
    """Parse one row into a validated pair."""

    fields = [part.strip() for part in line.split(delimiter)]
    if len(fields) != 2:
        raise PairParseError(f"expected 2 fields, found {len(fields)}", line_number)
    try:
        return SamplePair.model_validate({"x": fields[0], "y": fields[1]})
    except ValidationError as exc:
        raise PairParseError(f"non-numeric field in {line.strip()!r}", line_number) from exc


def accumulate_lines(
    lines: Iterable[str],
    config: ReaderConfig | None = None,
    accumulator: PairwiseMomentAccumulator | None = None,
    logger: logging.Logger | None = None,
) -> PairwiseMomentAccumulator:
    """Accumulate every data row of ``lines``.

    Blank rows and rows starting with ``#`` are ignored. With
    ``config.skip_header`` the first remaining row is dropped. Malformed rows
    raise :class:`PairParseError` unless ``config.skip_invalid`` is set, in
    which case they are logged and skipped.
    """

    config = config or ReaderConfig()
    accumulator = accumulator if accumulator is not None else PairwiseMomentAccumulator()
    logger = logger or logging.getLogger(__name__)

    header_pending = config.skip_header
    skipped = 0
    for line_number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if header_pending:
            header_pending = False
            continue
        try:
            pair = parse_pair(stripped, config.delimiter, line_number)
        except PairParseError as exc:
            if not config.skip_invalid:
                raise
            skipped += 1
            logger.warning("pair_skipped", extra={"line_number": line_number, "reason": str(exc)})
            continue
        accumulator.add(pair.x, pair.y)
        if config.report_every and len(accumulator) % config.report_every == 0:
            logger.info(
                "pairs_accumulated",
                extra={
                    "count": len(accumulator),
                    "mean_x": accumulator.mean_x(),
                    "mean_y": accumulator.mean_y(),
                },
            )

    logger.debug("stream_finished", extra={"count": len(accumulator), "skipped": skipped})
    return accumulator
