"""Tests for apply, refresh and outcome log interpretation."""

from __future__ import annotations

import pytest
from tfexporter.interpret import (
    ApplyStats,
    classify_outcome,
    detect_refresh_drift,
    is_run_successful,
    load_apply_stats,
    load_refresh_drift,
    parse_apply_summary,
)
from tfexporter.interpret.transcript import strip_ansi

APPLY_LOG = """\
aws_s3_bucket.logs: Creating...
aws_s3_bucket.logs: Creation complete after 2s [id=logs]
aws_instance.web: Modifying... [id=i-0abc]
aws_instance.web: Modifications complete after 5s [id=i-0abc]

Apply complete! Resources: 2 added, 1 changed, 0 destroyed.
"""

REFRESH_NO_CHANGES = """\
aws_s3_bucket.logs: Refreshing state... [id=logs]

No changes. Your infrastructure still matches the configuration.
"""

REFRESH_DRIFT = """\
aws_s3_bucket.logs: Refreshing state... [id=logs]
aws_instance.web: Refreshing state... [id=i-0abc]

Note: Objects have changed outside of Terraform
"""


class TestParseApplySummary:
    """Tests for the Apply complete! summary parser."""

    def test_standard_summary(self):
        stats = parse_apply_summary(
            ["Apply complete! Resources: 2 added, 1 changed, 0 destroyed."]
        )

        assert (stats.added, stats.changed, stats.destroyed, stats.imported) == (2, 1, 0, 0)
        assert stats.completed is True

    def test_full_transcript(self):
        stats = parse_apply_summary(APPLY_LOG.splitlines())

        assert stats.added == 2
        assert stats.changed == 1
        assert stats.destroyed == 0

    def test_imported_clause(self):
        stats = parse_apply_summary(
            ["Apply complete! Resources: 3 imported, 0 added, 0 changed, 1 destroyed."]
        )

        assert stats.imported == 3
        assert stats.destroyed == 1

    def test_no_marker_is_all_zero(self):
        stats = parse_apply_summary(
            ["aws_instance.web: Creating...", "Error: creating EC2 Instance: UnauthorizedOperation"]
        )

        assert stats == ApplyStats()
        assert stats.completed is False

    def test_completed_with_no_changes(self):
        """A finished no-op apply is distinguishable from an unfinished one."""
        stats = parse_apply_summary(["Apply complete! Resources: 0 added, 0 changed, 0 destroyed."])

        assert stats.completed is True
        assert stats.added == 0

    def test_unparseable_segments_skipped(self):
        stats = parse_apply_summary(
            ["Apply complete! Resources: many added, 4 changed, 2 replaced, 1 destroyed"]
        )

        assert stats.added == 0
        assert stats.changed == 4
        assert stats.destroyed == 1

    def test_marker_without_colon(self):
        stats = parse_apply_summary(["Apply complete!"])

        assert stats == ApplyStats()

    def test_prefixed_line(self):
        """Colons before the marker, e.g. CI timestamps, are ignored."""
        stats = parse_apply_summary(
            ["2024-05-01T10:00:00.000Z Apply complete! Resources: 5 added, 0 changed, 0 destroyed."]
        )

        assert stats.added == 5

    def test_colored_output(self):
        line = "\x1b[0m\x1b[1m\x1b[32mApply complete! Resources: 1 added, 0 changed, 0 destroyed.\x1b[0m"

        stats = parse_apply_summary([line])

        assert stats.added == 1

    def test_load_from_file(self, write_log):
        path = write_log(APPLY_LOG, name="apply.log")

        stats = load_apply_stats(path)

        assert stats.added == 2

    def test_load_missing_file(self, tmp_path):
        assert load_apply_stats(tmp_path / "apply.log") == ApplyStats()


class TestRefreshDrift:
    """Tests for refresh log drift detection."""

    def test_no_changes_phrase_wins(self):
        """The explicit confirmation overrides earlier refresh lines."""
        assert detect_refresh_drift(REFRESH_NO_CHANGES) is False

    def test_refreshing_without_confirmation_is_drift(self):
        assert detect_refresh_drift(REFRESH_DRIFT) is True

    def test_neither_marker(self):
        assert detect_refresh_drift("Terraform has been successfully initialized!") is False

    def test_empty_text(self):
        assert detect_refresh_drift("") is False

    def test_load_from_file(self, write_log):
        assert load_refresh_drift(write_log(REFRESH_DRIFT, name="refresh.log")) is True

    def test_missing_file_is_not_drift(self, tmp_path):
        assert load_refresh_drift(tmp_path / "refresh.log") is False


class TestOutcome:
    """Tests for run outcome classification."""

    def test_clean_transcript(self):
        assert is_run_successful(APPLY_LOG.splitlines()) is True

    def test_empty_transcript(self):
        assert is_run_successful([]) is True

    @pytest.mark.parametrize(
        "line",
        [
            "Error: Invalid reference",
            "│ Error: creating S3 Bucket (logs): BucketAlreadyExists",
            "\x1b[31m│\x1b[0m \x1b[1m\x1b[31mError: \x1b[0m\x1b[0m\x1b[1mUnsupported argument",
        ],
    )
    def test_error_markers(self, line):
        assert is_run_successful(["Initializing...", line, "done"]) is False

    def test_lowercase_error_is_not_a_marker(self):
        assert is_run_successful(["no error: all good"]) is True

    def test_classify_file(self, write_log):
        path = write_log("Plan: 1 to add\n\nError: Missing required argument\n")

        assert classify_outcome(path) is False

    def test_classify_clean_file(self, write_log):
        assert classify_outcome(write_log(APPLY_LOG)) is True

    def test_unopenable_file_is_failure(self, tmp_path):
        assert classify_outcome(tmp_path / "missing.log") is False


class TestTranscript:
    def test_strip_ansi(self):
        assert strip_ansi("\x1b[1m\x1b[32mok\x1b[0m") == "ok"
