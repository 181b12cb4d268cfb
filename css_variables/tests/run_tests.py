#!/usr/bin/env python
"""Test runner for CSS Variables."""

import sys
import pytest
from pathlib import Path

def main():
    """Run tests with coverage reporting."""
    tests_dir = Path(__file__).parent
    project_root = tests_dir.parent.parent

    # Make the package importable without installing it
    sys.path.insert(0, str(project_root))

    args = [
        '--verbose',
        '--cov=css_variables',
        '--cov-report=term-missing',
        '--cov-report=xml',
        '--junitxml=test-results.xml',
        '--timeout=30',
        '-n', 'auto',
        str(tests_dir)
    ]

    return pytest.main(args)

if __name__ == '__main__':
    sys.exit(main())
