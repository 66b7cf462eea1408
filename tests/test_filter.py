"""
Tests for per-column substring filtering.
"""
import pandas as pd

from csv_viewer.core import ColumnFilterHelper, Dataset, FilterState, apply_column_filters


class TestApplyColumnFilters:
    """Tests for apply_column_filters function."""

    def setup_method(self):
        """Set up test fixtures."""
        self.dataset = Dataset.from_records([
            {"name": "Alice", "city": "Paris", "age": "30"},
            {"name": "BOB", "city": "Berlin", "age": "25"},
            {"name": "Alfred", "city": "Boston", "age": "41"},
            {"name": "Carla", "city": "paris", "age": "30"},
        ])
        self.df = self.dataset.dataframe

    def test_case_insensitive_substring(self):
        """Test filter {name: 'al'} keeps Alice and Alfred in order."""
        result = apply_column_filters(self.df, {"name": "al"})

        assert list(result["name"]) == ["Alice", "Alfred"]

    def test_scenario_from_three_rows(self):
        """Test the Alice/BOB/Alfred scenario."""
        df = Dataset.from_records([
            {"name": "Alice"}, {"name": "BOB"}, {"name": "Alfred"}
        ]).dataframe

        result = apply_column_filters(df, {"name": "al"})

        assert list(result["name"]) == ["Alice", "Alfred"]

    def test_uppercase_needle(self):
        """Test that the needle is case-insensitive too."""
        result = apply_column_filters(self.df, {"name": "BO"})

        assert list(result["name"]) == ["BOB"]

    def test_filters_combine_with_and(self):
        """Test that every active filter must match."""
        result = apply_column_filters(self.df, {"city": "paris", "age": "30"})

        assert list(result["name"]) == ["Alice", "Carla"]

        result = apply_column_filters(self.df, {"city": "paris", "name": "car"})
        assert list(result["name"]) == ["Carla"]

    def test_empty_filters_are_identity(self):
        """Test that no filters returns the whole dataset in order."""
        assert apply_column_filters(self.df, {}) is self.df

        result = apply_column_filters(self.df, {"name": "", "city": ""})
        pd.testing.assert_frame_equal(result, self.df)

    def test_result_is_ordered_subsequence(self):
        """Test that filtering never reorders or duplicates rows."""
        for needle in ["a", "b", "o", "r", "zzz"]:
            result = apply_column_filters(self.df, {"name": needle})

            index = list(result.index)
            assert index == sorted(set(index))
            assert set(index) <= set(self.df.index)

    def test_no_match(self):
        """Test a filter that matches nothing."""
        result = apply_column_filters(self.df, {"name": "zzz"})

        assert result.empty
        assert list(result.columns) == list(self.df.columns)

    def test_unknown_column_is_ignored(self):
        """Test that filters on columns not in the dataset impose nothing."""
        result = apply_column_filters(self.df, {"missing": "x"})

        assert len(result) == len(self.df)

    def test_needle_is_literal(self):
        """Test that regex metacharacters are matched literally."""
        df = Dataset.from_records([
            {"code": "a.c"}, {"code": "abc"}, {"code": "(x)"}
        ]).dataframe

        assert list(apply_column_filters(df, {"code": "a.c"})["code"]) == ["a.c"]
        assert list(apply_column_filters(df, {"code": "("})["code"]) == ["(x)"]

    def test_missing_values_are_empty_strings(self):
        """Test that absent values never match a non-empty needle."""
        df = Dataset.from_records(
            [{"name": "Alice", "tag": "x"}, {"name": "Bob"}],
            headers=["name", "tag"]
        ).dataframe

        result = apply_column_filters(df, {"tag": "x"})

        assert list(result["name"]) == ["Alice"]

    def test_input_not_mutated(self):
        """Test that filtering leaves the input frame untouched."""
        before = self.df.copy()

        apply_column_filters(self.df, {"name": "al"})

        pd.testing.assert_frame_equal(self.df, before)


class TestColumnFilterHelper:
    """Tests for ColumnFilterHelper masks."""

    def test_get_filter_mask(self):
        """Test single column mask."""
        df = pd.DataFrame({"a": ["xAy", "b", "A"]})

        mask = ColumnFilterHelper.get_filter_mask(df, "a", "a")

        assert list(mask) == [True, False, True]

    def test_empty_needle_matches_all(self):
        """Test that an empty needle matches every row."""
        df = pd.DataFrame({"a": ["x", "y"]})

        mask = ColumnFilterHelper.get_filter_mask(df, "a", "")

        assert mask.all()

    def test_matching_mask_and(self):
        """Test combined mask."""
        df = pd.DataFrame({"a": ["x", "x", "y"], "b": ["1", "2", "1"]})

        mask = ColumnFilterHelper.matching_mask(df, {"a": "x", "b": "1"})

        assert list(mask) == [True, False, False]


class TestFilterState:
    """Tests for FilterState model."""

    def test_active_filters_skip_empty(self):
        """Test that empty texts are not active."""
        fs = FilterState()
        fs.set_filter("name", "al")
        fs.set_filter("city", "")

        assert fs.active_filters() == {"name": "al"}
        assert fs.is_active
        assert fs.get_filter("city") == ""
        assert fs.get_filter("unknown") == ""

    def test_clear(self):
        """Test clearing filters."""
        fs = FilterState({"name": "al"})
        fs.clear()

        assert fs.column_filters == {}
        assert not fs.is_active
