import logging
import os
from typing import List
from urllib.parse import urlparse

from pronounce import config
from pronounce.audio import download_audio, merge_audio
from pronounce.dictionary import get_audio_urls
from pronounce.errors import NoAudioFound

logger = logging.getLogger(__name__)


def split_words(text: str) -> List[str]:
    return text.split()


def select_pronunciations(urls: List[str], speak_all: bool) -> List[str]:
    """All pronunciations, or only the first one (if any)."""
    return list(urls) if speak_all else urls[:1]


def _clip_path(workdir: str, name: str, url: str) -> str:
    # Clips keep the extension the site serves them with
    ext = os.path.splitext(urlparse(url).path)[1] or ".mp3"
    return os.path.join(workdir, f"{name}{ext}")


def _download_connector(workdir: str, i: int, j: int) -> List[str]:
    """Download the first "or" clip, or nothing if the word has no audio."""
    urls = get_audio_urls(config.CONNECTOR_WORD)
    if not urls:
        return []
    path = _clip_path(workdir, f"tmp_{i}_{config.CONNECTOR_WORD}_{j}", urls[0])
    return [download_audio(urls[0], path)]


def collect_audio(words: List[str], speak_all: bool, workdir: str) -> List[str]:
    """
    Download the clips for `words` into `workdir`, in playback order.

    Alternate pronunciations of one word are separated by a connector
    clip. Words are processed one after another.
    """
    audio_files = []

    for i, word in enumerate(words):
        pronunciations = select_pronunciations(get_audio_urls(word.lower()), speak_all)

        for j, url in enumerate(pronunciations):
            audio_files.append(download_audio(url, _clip_path(workdir, f"tmp_{i}_{j}", url)))

            if len(pronunciations) > 1 and j < len(pronunciations) - 1:
                audio_files.extend(_download_connector(workdir, i, j))

    return audio_files


def speak(text: str, speak_all: bool, workdir: str) -> str:
    """
    Full pipeline for one phrase. Returns the merged file inside `workdir`.

    Raises NoAudioFound before any merge when nothing was downloaded.
    """
    words = split_words(text)
    logger.info("Words: %s, Speak all: %s", words, speak_all)

    audio_files = collect_audio(words, speak_all, workdir)
    if not audio_files:
        logger.info("No audio files found.")
        raise NoAudioFound()

    output = os.path.join(workdir, f"output.{config.AUDIO_FORMAT}")
    return merge_audio(audio_files, output)
