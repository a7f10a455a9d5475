"""Tests over the real-world layout corpus in tests/testdata/openhours."""

import pytest
from datetime import datetime, timedelta
from pathlib import Path

from openhours.parser.splitter import Splitter


TESTDATA_FILE = Path(__file__).parent / "testdata" / "openhours"


def _load_layouts() -> list[str]:
    """One layout per line, blank lines skipped."""
    lines = TESTDATA_FILE.read_text(encoding="utf-8").splitlines()
    return [line for line in lines if line.strip()]


LAYOUTS = _load_layouts()


class TestLayoutCorpus:
    """Every corpus layout parses, and split/match agree at any hour of the week."""

    def test_corpus_is_not_empty(self):
        assert len(LAYOUTS) > 20

    @pytest.mark.parametrize("layout", LAYOUTS)
    def test_layout_parses(self, layout, wednesday_evening):
        result = Splitter(wednesday_evening).split(layout)
        assert len(result.boundaries) % 2 == 0
        assert result.boundaries, f"no boundaries for {layout!r}"

    @pytest.mark.parametrize("layout", LAYOUTS)
    def test_split_and_match_agree_through_the_week(self, layout):
        start = datetime(2024, 1, 15, 0, 0)
        for hours in range(0, 7 * 24, 5):
            reference = start + timedelta(hours=hours, minutes=17)
            splitter = Splitter(reference)
            assert splitter.match(layout) == splitter.split(layout).matched
