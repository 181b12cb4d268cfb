"""Custom property extraction from raw CSS text."""

import re
import logging
from abc import ABC, abstractmethod
from typing import List

from .categorizer import categorize
from .models import Variable

logger = logging.getLogger(__name__)

# --name: value; with the trailing semicolon optional
DECLARATION_PATTERN = re.compile(r'(--[a-zA-Z0-9-]+)\s*:\s*([^;]+);?')

class VariableExtractor(ABC):
    """Turns stylesheet text into an ordered list of variables."""

    @abstractmethod
    def extract(self, css_text: str, filter_prefix: str = '') -> List[Variable]:
        """Extract variables in document order."""
        pass

class RegexVariableExtractor(VariableExtractor):
    """Pattern scan for ``--name: value;`` declarations.

    Matches are returned in document order without de-duplication, so a
    name declared twice appears twice. Comments, nesting and semicolons
    inside strings or functions are not understood.
    """

    def __init__(self, pattern: re.Pattern = DECLARATION_PATTERN):
        self.pattern = pattern

    def extract(self, css_text: str, filter_prefix: str = '') -> List[Variable]:
        """Extract variables from CSS text.

        Args:
            css_text: Raw stylesheet
            filter_prefix: Prefix handed to the categorizer for every variable

        Returns:
            Variables in document order, empty when nothing matches
        """
        variables = []
        for match in self.pattern.finditer(css_text or ''):
            name = match.group(1).strip()
            value = match.group(2).strip()
            variables.append(Variable(name, value, categorize(name, filter_prefix)))

        logger.debug(f"Extracted {len(variables)} variables")
        return variables

_default_extractor = RegexVariableExtractor()

def extract(css_text: str, filter_prefix: str = '') -> List[Variable]:
    """Extract variables with the default regex extractor."""
    return _default_extractor.extract(css_text, filter_prefix)

__all__ = ['DECLARATION_PATTERN', 'VariableExtractor', 'RegexVariableExtractor', 'extract']
