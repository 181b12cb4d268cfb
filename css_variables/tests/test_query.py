"""Tests for the query pipeline."""

import pytest

from ..core.models import Section, Variable
from ..core.query import (
    available_categories,
    build_sections,
    filter_by_category,
    group_by_category,
    remove_duplicates,
    search,
    sort_categories,
)

@pytest.fixture
def variables():
    return [
        Variable('--app-color-foreground', '#111', 'Color'),
        Variable('--app-color-primary', '#36f', 'Color'),
        Variable('--app-color-foreground-primary', 'var(--app-color-primary)', 'Color'),
        Variable('--app-spacing-sm', '4px', 'Spacing'),
        Variable('--font-body', 'Inter', 'Other'),
        Variable('--app-color-primary', 'red', 'Color'),
    ]

class TestCategoryFilter:
    """Tests for filter_by_category."""

    def test_all_passes_through(self, variables):
        assert filter_by_category(variables, 'All') == variables

    def test_exact_match(self, variables):
        result = filter_by_category(variables, 'Spacing')
        assert [v.name for v in result] == ['--app-spacing-sm']

    def test_case_sensitive(self, variables):
        assert filter_by_category(variables, 'spacing') == []

class TestSearch:
    """Tests for search."""

    @pytest.mark.parametrize('query', ['', '   ', None])
    def test_blank_query(self, variables, query):
        assert search(variables, query) == variables

    def test_conjunctive_terms(self, variables):
        result = search(variables, 'foreground primary')
        assert [v.name for v in result] == ['--app-color-foreground-primary']

    def test_terms_match_value(self, variables):
        result = search(variables, 'spacing 4PX')
        assert [v.name for v in result] == ['--app-spacing-sm']

    def test_term_spanning_name_and_value(self, variables):
        """Test that name and value are joined with a space."""
        assert [v.name for v in search(variables, 'body inter')] == ['--font-body']
        assert search(variables, 'body-inter') == []

    def test_no_match(self, variables):
        assert search(variables, 'primary missing') == []

class TestRemoveDuplicates:
    """Tests for remove_duplicates."""

    def test_first_wins(self):
        variables = [Variable('--a', '1'), Variable('--b', '2'), Variable('--a', '3')]
        assert remove_duplicates(variables) == [Variable('--a', '1'), Variable('--b', '2')]

    def test_last_wins(self):
        variables = [Variable('--a', '1'), Variable('--b', '2'), Variable('--a', '3')]
        assert remove_duplicates(variables, keep='last') == [Variable('--b', '2'), Variable('--a', '3')]

    def test_invalid_keep(self):
        with pytest.raises(ValueError):
            remove_duplicates([], keep='middle')

class TestGrouping:
    """Tests for grouping and sorting."""

    def test_group_keeps_order(self, variables):
        grouped = group_by_category(variables)
        assert list(grouped) == ['Color', 'Spacing', 'Other']
        assert [v.value for v in grouped['Color']] == ['#111', '#36f', 'var(--app-color-primary)', 'red']

    def test_missing_category_is_other(self):
        grouped = group_by_category([Variable('--x', '1')])
        assert list(grouped) == ['Other']

    def test_sort_categories(self):
        assert sort_categories(['Zeta', 'All', 'Other', 'Alpha']) == ['Alpha', 'Zeta', 'Other', 'All']

    def test_sort_without_trailing_labels(self):
        assert sort_categories(['b', 'C', 'a']) == ['C', 'a', 'b']

    def test_available_categories(self, variables):
        assert available_categories(variables) == ['All', 'Color', 'Other', 'Spacing']

    def test_available_categories_without_prefix(self):
        assert available_categories([Variable('--a', '1', 'All')]) == ['All']

class TestBuildSections:
    """Tests for the composed pipeline."""

    def test_full_pipeline(self, variables):
        sections = build_sections(variables)
        assert [s.category for s in sections] == ['Color', 'Spacing', 'Other']
        names = [v.name for v in sections[0].variables]
        assert names.count('--app-color-primary') == 1
        assert sections[0].variables[1] == Variable('--app-color-primary', '#36f', 'Color')

    def test_category_then_search(self, variables):
        sections = build_sections(variables, 'Color', 'primary')
        assert sections == [Section('Color', (
            Variable('--app-color-primary', '#36f', 'Color'),
            Variable('--app-color-foreground-primary', 'var(--app-color-primary)', 'Color'),
        ))]

    def test_search_before_dedupe(self, variables):
        """Test that a later duplicate survives when the first one is filtered out."""
        sections = build_sections(variables, 'All', 'red')
        assert sections == [Section('Color', (Variable('--app-color-primary', 'red', 'Color'),))]

    def test_empty(self):
        assert build_sections([]) == []
