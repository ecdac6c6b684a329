"""
Tests for the DataFrame views behind aggregation and CSV export.

Run: pytest tests/test_frames.py -v
"""

from headcount.frames import SCHOOL_COLUMNS, interim_frame, salary_flags_frame, schools_frame


class TestFrames:

    def test_schools_frame_columns(self, schools):
        df = schools_frame(schools)
        assert list(df.columns) == SCHOOL_COLUMNS
        assert len(df) == 33
        assert df.loc[0, "variance"] == 17
        assert df.loc[0, "status"] == "over"

    def test_empty_schools_frame_keeps_columns(self):
        df = schools_frame([])
        assert df.empty
        assert list(df.columns) == SCHOOL_COLUMNS

    def test_interim_frame_joins_deployments(self, assignments):
        df = interim_frame(assignments)
        assert df.loc[2, "deployments"] == "Training"
        assert df.loc[4, "deployments"] == "Scottsdale, SF"

    def test_salary_flags_frame_has_delta(self, flags):
        df = salary_flags_frame(flags)
        assert int(df["delta"].sum()) == 285_000
