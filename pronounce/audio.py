"""Download pronunciation clips and concatenate them with pydub."""

import logging
import os
from typing import List

import requests
from pydub import AudioSegment
from pydub.exceptions import CouldntDecodeError, CouldntEncodeError

from pronounce import config
from pronounce.errors import DownloadError, MergeError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def download_audio(url: str, path: str) -> str:
    """Stream `url` into `path`, overwriting it. Returns `path` once closed."""
    try:
        with requests.get(url, headers=config.HEADERS, stream=True,
                          timeout=config.HTTP_TIMEOUT) as r:
            r.raise_for_status()
            with open(path, "wb") as f:
                for chunk in r.iter_content(chunk_size=CHUNK_SIZE):
                    f.write(chunk)
    except requests.RequestException as e:
        raise DownloadError(f"{url}: {e}") from e
    logger.debug("Downloaded %s -> %s", url, path)
    return path


def _format_of(path: str) -> str:
    return os.path.splitext(path)[1].lstrip(".").lower() or config.AUDIO_FORMAT


def merge_audio(paths: List[str], output_path: str) -> str:
    """
    Concatenate `paths` in order into `output_path`.

    Inputs are probed by ffmpeg; the output format follows the output
    extension. Inputs are left on disk.
    """
    if not paths:
        raise ValueError("merge_audio() needs at least one input file")

    try:
        merged = AudioSegment.empty()
        for p in paths:
            merged += AudioSegment.from_file(p)
        merged.export(output_path, format=_format_of(output_path)).close()
    except (CouldntDecodeError, CouldntEncodeError, OSError) as e:
        raise MergeError(str(e)) from e

    logger.info("Merged %d file(s) into %s", len(paths), output_path)
    return output_path
