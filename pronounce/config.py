import os
from dotenv import load_dotenv

# Load env from the project root
load_dotenv(os.path.join(os.path.dirname(__file__), '..', '.env'))

DICTIONARY_URL = os.getenv("DICTIONARY_URL", "https://www.dictionary.com/browse/{word}")
USER_AGENT = os.getenv("USER_AGENT", "Mozilla/5.0")
HEADERS = {
    "User-Agent": USER_AGENT
}

# Seconds; 0 means wait forever
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "15")) or None

CONNECTOR_WORD = os.getenv("CONNECTOR_WORD", "or")
AUDIO_FORMAT = os.getenv("AUDIO_FORMAT", "mp3")

PUBLIC_DIR = os.getenv("PUBLIC_DIR", os.path.join(os.path.dirname(__file__), "public"))
TMP_DIR = os.getenv("TMP_DIR") or None

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
