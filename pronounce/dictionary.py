import logging
from collections import Counter
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import quote

import requests
from bs4 import BeautifulSoup

from pronounce import config
from pronounce.errors import FetchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PronunciationCandidate:
    origin: str
    src: str

    @property
    def prefix(self) -> str:
        # e.g. "L02" for "L02/L0211700.mp3"
        return self.src.split("/")[0]

    @property
    def url(self) -> str:
        return f"{self.origin}/{self.src}"


def page_url(word: str) -> str:
    return config.DICTIONARY_URL.format(word=quote(word.lower()))


def fetch_page(word: str) -> str:
    """Returns the raw HTML of the dictionary entry page for `word`."""
    url = page_url(word)
    try:
        r = requests.get(url, headers=config.HEADERS, timeout=config.HTTP_TIMEOUT)
        r.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(f"{url}: {e}") from e
    return r.text


def collect_candidates(html: str) -> List[PronunciationCandidate]:
    doc = BeautifulSoup(html, "html.parser")

    candidates = []
    for el in doc.select("[data-audiosrc][data-audioorigin]"):
        origin = el.get("data-audioorigin")
        src = el.get("data-audiosrc")
        if origin and src:
            candidates.append(PronunciationCandidate(origin=origin, src=src))
    return candidates


def dominant_prefix(candidates: List[PronunciationCandidate]) -> Optional[str]:
    """
    The folder prefix shared by most candidates. On a tie the prefix seen
    first on the page wins.
    """
    if not candidates:
        return None
    counts = Counter(c.prefix for c in candidates)
    return counts.most_common(1)[0][0]


def extract_audio_urls(html: str) -> List[str]:
    """
    Pronunciation URLs of the dominant group, in page order.
    Filters out "lateral" and other unrelated readings.
    """
    candidates = collect_candidates(html)
    prefix = dominant_prefix(candidates)
    if prefix is None:
        return []
    return [c.url for c in candidates if c.src.startswith(prefix)]


def get_audio_urls(word: str) -> List[str]:
    word = word.lower()
    urls = extract_audio_urls(fetch_page(word))
    logger.info("Word: %s, Audio URLs: %s", word, urls)
    return urls
