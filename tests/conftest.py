"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from recipenorm.main import app

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow running")


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def client():
    """Test client for the FastAPI application."""
    return TestClient(app)


# =============================================================================
# Recipe Text Fixtures
# =============================================================================


@pytest.fixture
def scraped_ingredient_lines():
    """Ingredient lines as they typically arrive from a JSON-LD import."""
    return [
        "1-2 cups water",
        "(optional)",
        "10 ml / 6 g active dry yeast",
        "Salt to taste",
        "¾ cup butter (softened)",
        "Optional Toppings: 1 cup berries",
    ]


@pytest.fixture
def scraped_instructions():
    """Instruction steps with imperial measurements and scraping artifacts."""
    return [
        "  Preheat oven to 350°F. ",
        "",
        "Whisk ½ cup   milk with the eggs.",
        "In118 ml of milk, dissolve the yeast.",
    ]
