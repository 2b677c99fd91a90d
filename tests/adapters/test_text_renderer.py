"""Tests for the plain-text timeline renderer."""

import pytest

from travel_timeline.adapters.rendering import TextTimelineRenderer
from travel_timeline.adapters.rendering.text_renderer import format_date
from travel_timeline.domain.models import TimelineView
from travel_timeline.timeline import build_timeline


class TestTextTimelineRenderer:
    """Test suite for TextTimelineRenderer."""

    @pytest.fixture
    def view(self, partitioner, sample_entries):
        return build_timeline(sample_entries, partitioner)

    def test_empty_timeline(self):
        assert TextTimelineRenderer().render(TimelineView()) == "No travels recorded yet."

    def test_journey_headers(self, view):
        output = TextTimelineRenderer().render(view)

        assert "Journey through United States, Japan, Singapore (32 days total)" in output
        assert "Journey through France, Singapore (15 days total)" in output

    def test_away_entry_line(self, view):
        output = TextTimelineRenderer().render(view)

        assert "  Jan 15, 2023  New York, United States  18 days (exit Feb 2, 2023)  #1" in output

    def test_home_entry_has_no_duration(self, view):
        lines = TextTimelineRenderer(show_ids=False).render(view).splitlines()

        assert "  Feb 16, 2023  Singapore, Singapore  [Home]" in lines

    def test_journeys_separated_by_blank_line(self, view):
        lines = TextTimelineRenderer().render(view).splitlines()

        assert lines.count("") == 1


def test_format_date():
    assert format_date("2023-05-01") == "May 1, 2023"
