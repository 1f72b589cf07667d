"""Shared fixtures for pronounce tests."""

import os

import pytest
from pydub import AudioSegment

from pronounce import config


class FakeWeb:
    """Stands in for the dictionary site, the downloader and the merger."""

    def __init__(self):
        self.urls = {}
        self.lookups = []
        self.downloads = []
        self.written = []
        self.merges = []

    def get_audio_urls(self, word):
        self.lookups.append(word)
        return list(self.urls.get(word, []))

    def download_audio(self, url, path):
        with open(path, "wb") as f:
            f.write(b"clip")
        self.downloads.append((url, os.path.basename(path)))
        self.written.append(path)
        return path

    def merge_audio(self, paths, output_path):
        self.merges.append([os.path.basename(p) for p in paths])
        with open(output_path, "wb") as f:
            f.write(b"merged")
        return output_path


@pytest.fixture
def fake_web(monkeypatch):
    monkeypatch.setattr(config, "AUDIO_FORMAT", "mp3")
    monkeypatch.setattr(config, "CONNECTOR_WORD", "or")

    web = FakeWeb()
    monkeypatch.setattr("pronounce.speak.get_audio_urls", web.get_audio_urls)
    monkeypatch.setattr("pronounce.speak.download_audio", web.download_audio)
    monkeypatch.setattr("pronounce.speak.merge_audio", web.merge_audio)
    return web


@pytest.fixture
def silent_wav(tmp_path):
    """Factory writing a silent WAV of the given length (ms)."""
    def make(name, duration_ms):
        path = tmp_path / name
        AudioSegment.silent(duration=duration_ms).export(str(path), format="wav").close()
        return str(path)
    return make
