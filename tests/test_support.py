import os
import re
from collections.abc import Sequence
from contextlib import contextmanager
from unittest import mock

from colflow.core.bounds import BLANK_LINE, FIT_TOLERANCE_PX
from colflow.core.models import LayoutMetrics, LayoutResult, MarginsPx, Page
from colflow.layout import column_offsets, flow, tokenize
from colflow.measure import MeasurementCache

# =============================================================================
# Test Constants
# =============================================================================

SAMPLE_TEXT = (
    "The quick brown fox jumps over the lazy dog.\n\n"
    "Pack my box with five dozen liquor jugs. "
    "Sphinx of black quartz, judge my vow!\n"
    "Supercalifragilisticexpialidocious words still have to fit somewhere."
)


# =============================================================================
# Measurement Helpers
# =============================================================================


class CharMeasurer:
    """One pixel per character, regardless of family or size."""

    def __init__(self) -> None:
        self.calls = 0

    def measure(self, text: str, font_family: str, font_size_px: float) -> float:
        self.calls += 1
        return float(len(text))


class ConstantMeasurer:
    def __init__(self, value: float) -> None:
        self.value = value

    def measure(self, text: str, font_family: str, font_size_px: float) -> float:
        return self.value


# =============================================================================
# Layout Helpers
# =============================================================================


def make_metrics(
    widths: Sequence[float] = (10.0,),
    *,
    column_height: float = 100.0,
    line_height: float = 10.0,
    font_size: float = 10.0,
    gap: float = 0.0,
) -> LayoutMetrics:
    widths = tuple(float(width) for width in widths)
    return LayoutMetrics(
        page_width_px=sum(widths) + gap * max(len(widths) - 1, 0),
        page_height_px=column_height,
        margins_px=MarginsPx(top=0.0, right=0.0, bottom=0.0, left=0.0),
        column_widths_px=widths,
        column_offsets_px=column_offsets(widths, gap),
        column_height_px=column_height,
        gap_px=gap,
        font_size_px=font_size,
        line_height_px=line_height,
    )


def run_flow(
    text: str,
    metrics: LayoutMetrics,
    *,
    columns: int = 1,
    measurer=None,
) -> tuple[Page, ...]:
    cache = MeasurementCache(measurer or CharMeasurer(), "Test Sans", metrics.font_size_px)
    return flow(tokenize(text), metrics, columns, cache)


def page_lines(pages: Sequence[Page]) -> list[list[list[str]]]:
    return [[list(column.lines) for column in page.columns] for page in pages]


def all_lines(pages: Sequence[Page]) -> list[str]:
    return [line for page in pages for column in page.columns for line in column.lines]


def visible_characters(text: str) -> str:
    return re.sub(r"\s", "", text.replace(BLANK_LINE, ""))


def overflowing_lines(result: LayoutResult, measurer, font_family: str) -> list[str]:
    """Lines wider than their column under ``measurer``."""
    metrics = result.metrics
    cache = MeasurementCache(measurer, font_family, metrics.font_size_px)
    offenders: list[str] = []
    for page in result.pages:
        for index, column in enumerate(page.columns):
            width = metrics.column_widths_px[min(index, len(metrics.column_widths_px) - 1)]
            for line in column.lines:
                if line == BLANK_LINE:
                    continue
                if cache.width(line) > width + FIT_TOLERANCE_PX:
                    offenders.append(line)
    return offenders


def overfull_columns(result: LayoutResult) -> int:
    metrics = result.metrics
    limit = metrics.column_height_px + FIT_TOLERANCE_PX
    return sum(
        1
        for page in result.pages
        for column in page.columns
        if len(column.lines) > 1 and len(column.lines) * metrics.line_height_px > limit
    )


# =============================================================================
# Environment Helpers
# =============================================================================


@contextmanager
def temp_env(overrides: dict[str, str], *, clear: bool = False):
    with mock.patch.dict(os.environ, overrides, clear=clear):
        yield
