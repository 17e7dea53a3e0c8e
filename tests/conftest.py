"""
Shared fixtures for Naamrot tests.
"""

import pytest

from naamrot.rules.loader import get_ruleset
from naamrot.rules.models import Ruleset
from naamrot.stages.runner import WordPartTransformer

DEFAULT_SUFFIXES = (
    "SHAN", "MENT", "TION", "ING", "ED", "ER", "LY",
    "NESS", "ABLE", "IBLE", "OUS", "IVE", "AL", "ITY",
)


@pytest.fixture(scope="session")
def default_ruleset() -> Ruleset:
    return get_ruleset("default")


@pytest.fixture(scope="session")
def bare_ruleset() -> Ruleset:
    """Bundled ruleset with no exception table."""
    return get_ruleset("bare")


@pytest.fixture
def rules_only() -> Ruleset:
    """In-code ruleset: default suffix table, no exceptions."""
    return Ruleset(name="rules_only", protected_suffixes=DEFAULT_SUFFIXES)


@pytest.fixture
def transformer(rules_only) -> WordPartTransformer:
    return WordPartTransformer(rules_only)
