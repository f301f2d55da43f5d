"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

from pathlib import Path
from typing import Any, Dict

import pytest

from horsekick_service.config import Settings
from horsekick_service.sanitizer.pipeline import SanitizationPipeline
from horsekick_service.scoring.model import PoissonRateModel


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with the historical defaults spelled out.

    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            custom = test_settings.model_copy(update={"YEAR_MAX": 1900})
    """
    return Settings(
        # === Application ===
        APP_NAME="Horse-Kick Prediction Service (Test)",
        APP_VERSION="0.1.0",
        ENVIRONMENT="development",
        DEBUG=True,
        LOG_LEVEL="DEBUG",

        # === Model ===
        MODEL_PATH="",

        # === Sanitization ===
        YEAR_MIN=1701,
        YEAR_MAX=1919,
        VALID_CORPS=["G", "I", "II", "III", "IV"],
        REQUIRED_COLUMNS=["year", "corps"],
        WARN_ON_DROPPED_ROWS=True,

        # === Monitoring ===
        PROMETHEUS_ENABLED=False,
    )


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def quiet_pipeline(test_settings: Settings) -> SanitizationPipeline:
    """Pipeline that drops rows without emitting Python warnings."""
    settings = test_settings.model_copy(update={"WARN_ON_DROPPED_ROWS": False})
    return SanitizationPipeline.from_settings(settings)


@pytest.fixture
def mixed_rows() -> list[Dict[str, Any]]:
    """Batch with one valid row, one year too early, one unknown corps."""
    return [
        {"year": 1600, "corps": "I", "dummy": 0},
        {"year": 1800, "corps": "II", "dummy": 1},
        {"year": 1900, "corps": "XVI", "dummy": 2},
    ]


@pytest.fixture
def simple_model() -> PoissonRateModel:
    """Model with round coefficients for hand-checked predictions."""
    return PoissonRateModel(
        version="test-v1",
        intercept=0.0,
        year_coefficient=0.0,
        corps_effects={"G": 0.0, "I": 1.0},
        baseline_corps="G",
    )
