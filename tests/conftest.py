"""Fixtures communes: fichiers temporaires et contrôleur."""

import pytest

from filestamp.services.timestamp_controller import TimestampController


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("contenu initial")
    return path


@pytest.fixture
def controller():
    return TimestampController()
