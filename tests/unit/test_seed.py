"""
Tests for the database seeding script.
"""
import pytest

from face_detection_backend.scripts.seed import SAMPLE_CAMERAS, seed_database


@pytest.mark.asyncio
async def test_seed_creates_admin_and_sample_cameras(app_env, monkeypatch):
    monkeypatch.setenv("ADMIN_USERNAME", "operator")
    monkeypatch.setenv("ADMIN_PASSWORD", "s3cret")

    assert await seed_database() is True

    from face_detection_backend.di.container import get_container
    from face_detection_backend.domain.repositories import CameraRepository, UserRepository

    container = get_container()
    admin = await container.get(UserRepository).find_by_username("operator")
    assert admin is not None

    cameras = await container.get(CameraRepository).find_by_owner(admin.id)
    assert sorted(c.name for c in cameras) == sorted(s["name"] for s in SAMPLE_CAMERAS)
    disabled = [c.name for c in cameras if not c.enabled]
    assert disabled == ["Parking Lot Camera"]


@pytest.mark.asyncio
async def test_seed_is_skipped_when_admin_exists(app_env):
    assert await seed_database() is True
    assert await seed_database() is False

    from face_detection_backend.di.container import get_container
    from face_detection_backend.domain.repositories import CameraRepository

    assert await get_container().get(CameraRepository).count() == len(SAMPLE_CAMERAS)
