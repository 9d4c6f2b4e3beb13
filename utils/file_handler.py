import logging
import random
from pathlib import Path
from typing import List, Optional

log = logging.getLogger(__name__)

PARAGRAPH_WORDS = 120

_WORDS_FILE = Path("assets/texts/words.txt")

_FALLBACK_WORDS = (
    "the of and to in is you that it he was for on are as with his they at be "
    "this have from or one had by word but not what all were we when your can "
    "said there use an each which she do how their if will up other about out "
    "many then them these so some her would make like him into time has look "
    "two more write go see number no way could people my than first water been "
    "call who oil its now find long down day did get come made may part over "
    "new sound take only little work know place year live me back give most "
    "very after thing our just name good sentence man think say great where "
    "help through much before line right too mean old any same tell boy follow "
    "came want show also around form three small set put end does another well "
    "large must big even such because turn here why ask went men read need land "
    "different home us move try kind hand picture again change off play spell "
    "air away animal house point page letter mother answer found study still "
    "learn should world high every near add food between own below country plant"
).split()


def _clean_words(text: str) -> List[str]:
    return [w for w in text.replace("\r\n", "\n").split() if w]


def load_corpus() -> List[str]:
    """Words from assets/texts/words.txt, or the built-in list if it is missing or unreadable."""
    try:
        if _WORDS_FILE.exists():
            words = _clean_words(_WORDS_FILE.read_text(encoding="utf-8"))
            if words:
                return words
            log.warning("Corpus file %s is empty, using built-in words", _WORDS_FILE)
    except (OSError, UnicodeDecodeError) as e:
        log.warning("Failed to read corpus %s: %s", _WORDS_FILE, e)
    return list(_FALLBACK_WORDS)


def generate_paragraph(word_count: int = PARAGRAPH_WORDS,
                       rng: Optional[random.Random] = None,
                       words: Optional[List[str]] = None) -> str:
    rng = rng or random
    pool = words if words else load_corpus()
    return " ".join(rng.choice(pool) for _ in range(max(1, word_count)))
