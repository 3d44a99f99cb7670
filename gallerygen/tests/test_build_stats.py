"""Tests for BuildStats class."""

import time
import pytest
from gallerygen.build_stats import BuildStats


class TestBuildStats:
    """Tests for BuildStats class."""

    def test_elapsed_seconds(self):
        """Test elapsed time calculation."""
        stats = BuildStats()
        stats.start_time = time.time() - 10

        assert stats.elapsed_seconds >= 10
        assert stats.elapsed_seconds < 12

    def test_rate_per_second(self):
        """Test rate calculation."""
        stats = BuildStats()
        stats.start_time = time.time() - 10
        stats.discovered = 100

        rate = stats.rate_per_second

        assert rate >= 9
        assert rate <= 11

    def test_record_error(self):
        """Test errors are counted and kept."""
        stats = BuildStats()

        stats.record_error("Error creating thumbnail for images/a.jpg: boom")

        assert stats.thumbnail_errors == 1
        assert stats.error_details == ["Error creating thumbnail for images/a.jpg: boom"]
