import asyncio
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

import speech


def test_transcribe_uses_configured_model(monkeypatch, tmp_path):
    audio = tmp_path / "voice.ogg"
    audio.write_bytes(b"data")
    monkeypatch.setattr(speech.settings, "TRANSCRIBE_MODEL", "test-model")

    client = MagicMock()
    client.audio.transcriptions.create.return_value = SimpleNamespace(text="  hello bot \n")

    assert asyncio.run(speech.transcribe(audio, client=client)) == "hello bot"
    kwargs = client.audio.transcriptions.create.call_args.kwargs
    assert kwargs["model"] == "test-model"


def test_transcribe_requires_api_key(monkeypatch, tmp_path):
    audio = tmp_path / "voice.ogg"
    audio.write_bytes(b"data")
    monkeypatch.setattr(speech.settings, "OPENAI_API_KEY", "")

    with pytest.raises(RuntimeError):
        asyncio.run(speech.transcribe(audio))
