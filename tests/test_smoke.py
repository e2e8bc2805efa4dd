"""
Smoke test - verifies test infrastructure is working.
Run: pytest tests/test_smoke.py -v
"""


def test_import_app():
    """Verify app package can be imported."""
    from face_detection_backend.core.config import get_settings

    settings = get_settings()
    assert settings is not None
    assert hasattr(settings, "database_url")


def test_application_routes_registered():
    from face_detection_backend.main import app

    paths = {route.path for route in app.routes}
    assert "/api/auth/login" in paths
    assert "/api/cameras" in paths
    assert "/api/alerts" in paths
    assert "/health" in paths


def test_pytest_runs():
    """Basic sanity check that pytest executes tests."""
    assert True
