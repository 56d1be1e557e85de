# tests/conftest.py

"""
Pytest Fixtures - Shared test configurations and data for the engine, the
controller and the API
"""

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from ttscore.config import Settings
from ttscore.main import app
from ttscore.models.enumerations import GroupKey, Locale
from ttscore.models.score import Subject
from ttscore.scoring.aggregator import ScoreGroup
from ttscore.scoring.session import compute_result
from ttscore.services.score_app import RecordingNotifier, ScoringApp


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture(scope="module")
def client():
    """Create a TestClient for FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# DOMAIN FIXTURES
# =============================================================================

@pytest.fixture
def sample_subject():
    return Subject(name="Jane  O'Brien!!", age="21", gender="female")


@pytest.fixture
def good_result(sample_subject):
    """Both groups all 20 → 20.0 / good."""
    return compute_result(
        sample_subject,
        ScoreGroup.from_values(GroupKey.MOVEMENT, [20] * 6),
        ScoreGroup.from_values(GroupKey.OUTCOME, [20] * 6),
    )


@pytest.fixture
def fair_result(sample_subject):
    """30s and 0s → total 15.0 / fair."""
    return compute_result(
        sample_subject,
        ScoreGroup.from_values(GroupKey.MOVEMENT, [30] * 6),
        ScoreGroup.from_values(GroupKey.OUTCOME, [0] * 6),
    )


@pytest.fixture
def export_settings():
    """Export settings independent of any local .env."""
    return Settings(
        _env_file=None,
        EXPORT_LAYOUT_WIDTH_PX=1024,
        EXPORT_SCALE=2,
        EXPORT_PAGE_MODE="paginate",
    )


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def scoring_app(notifier):
    return ScoringApp(notifier=notifier, locale=Locale.ID)


@pytest.fixture
def filled_app(scoring_app):
    """Controller with subject and both groups entered (all 20s)."""
    scoring_app.set_subject(name="Budi Santoso", age="17", gender="male")
    for slot in range(1, 7):
        scoring_app.on_input(f"movement_{slot}", "20")
        scoring_app.on_input(f"outcome_{slot}", "20")
    return scoring_app


# =============================================================================
# EXPORT STUBS
# =============================================================================

class FailingRasterizer:
    def rasterize(self, summary):
        raise RuntimeError("canvas unavailable")


class EmptyRasterizer:
    def rasterize(self, summary):
        return Image.new("RGB", (0, 0))


@pytest.fixture
def failing_rasterizer():
    return FailingRasterizer()


@pytest.fixture
def empty_rasterizer():
    return EmptyRasterizer()
