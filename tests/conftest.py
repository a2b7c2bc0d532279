"""Shared fixtures for chain_identifier tests."""

import pytest

from chain_identifier.registry.loader import MetadataLoader
from chain_identifier.registry.registry import Registry


@pytest.fixture(scope="session")
def registry():
    """Registry built from the bundled metadata, independent of the process singleton."""
    return Registry.build(MetadataLoader())
