from __future__ import annotations

import pytest

from voicerss_tts.tests.fakes import FakeGet


@pytest.fixture
def fake_voicerss(monkeypatch: pytest.MonkeyPatch):
    """Install a canned VoiceRSS response and return the recording fake."""

    def install(response) -> FakeGet:
        fake = FakeGet(response)
        monkeypatch.setattr("voicerss_tts.client.requests.get", fake)
        return fake

    return install
