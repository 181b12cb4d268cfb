"""Tests for variable extraction and categorization."""

import re
import pytest

from ..core.categorizer import categorize
from ..core.extractor import RegexVariableExtractor, VariableExtractor, extract
from ..core.models import Variable

class TestExtract:
    """Tests for extract."""

    def test_simple_declarations(self):
        """Test the basic two-variable example."""
        assert extract("--a: #fff; --b: 10px;", "") == [
            Variable('--a', '#fff', 'All'),
            Variable('--b', '10px', 'All'),
        ]

    def test_document_order_and_duplicates(self, sample_css):
        """Test that order is kept and duplicates are not resolved."""
        names = [v.name for v in extract(sample_css)]
        assert names == [
            '--app-color-primary',
            '--app-color-foreground',
            '--app-color-accent',
            '--app-spacing-sm',
            '--app-spacing-md',
            '--font-body',
            '--app-color-primary',
        ]

    def test_names_and_values_are_clean(self, sample_css):
        """Test name form and whitespace trimming."""
        for variable in extract(sample_css):
            assert re.match(r'^--[A-Za-z0-9-]+$', variable.name)
            assert variable.value == variable.value.strip()

    def test_value_whitespace_trimmed(self):
        variables = extract("--gap :   1rem   ;")
        assert variables == [Variable('--gap', '1rem', 'All')]

    def test_missing_trailing_semicolon(self):
        """Test a declaration closing the block without a semicolon."""
        variables = extract(":root { --last: red }")
        assert variables[0].name == '--last'
        assert variables[0].value == 'red }'

    def test_prefix_categories(self, sample_css):
        """Test categories computed with the batch prefix."""
        categories = [v.category for v in extract(sample_css, '--app-')]
        assert categories == ['Color', 'Color', 'Color', 'Spacing', 'Spacing', 'Other', 'Color']

    def test_var_reference_is_not_a_declaration(self):
        variables = extract("a { color: var(--text); } --text: #000;")
        assert [v.name for v in variables] == ['--text']

    @pytest.mark.parametrize('css', ['', 'body { color: red; }', 'a { margin: 0 }', '--: x;'])
    def test_no_matches(self, css):
        """Test that input without declarations gives an empty list."""
        assert extract(css) == []

    def test_none_input(self):
        assert extract(None) == []

    def test_extractor_interface(self):
        """Test that the regex extractor implements the interface."""
        extractor = RegexVariableExtractor()
        assert isinstance(extractor, VariableExtractor)
        assert extractor.extract("--x: 1;", "--x") == [Variable('--x', '1', 'Other')]

class TestCategorize:
    """Tests for categorize."""

    def test_prefix_word(self):
        assert categorize('--app-color-bg', '--app-') == 'Color'

    def test_not_prefixed(self):
        assert categorize('--other-x', '--app-') == 'Other'

    def test_name_equals_prefix(self):
        assert categorize('--app-', '--app-') == 'Other'

    def test_non_alphanumeric_after_prefix(self):
        assert categorize('--app--color', '--app-') == 'Other'

    @pytest.mark.parametrize('prefix', ['', '   ', None])
    def test_blank_prefix(self, prefix):
        assert categorize('--anything', prefix) == 'All'

    def test_prefix_is_trimmed(self):
        assert categorize('--app-size-lg', '  --app-  ') == 'Size'

    def test_only_first_letter_capitalized(self):
        assert categorize('--app-fontSize', '--app-') == 'FontSize'

    def test_digits_in_word(self):
        assert categorize('--app-h1-size', '--app-') == 'H1'

    def test_deterministic(self):
        assert categorize('--app-color-bg', '--app-') == categorize('--app-color-bg', '--app-')
