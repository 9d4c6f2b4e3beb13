import itertools
import os

import pytest

from services.typing_engine import TypingSession

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def fixed_paragraphs(*texts):
    """Generator stand-in that hands out the given paragraphs in turn, repeating the last."""
    it = itertools.chain(texts, itertools.repeat(texts[-1]))
    return lambda: next(it)


@pytest.fixture
def type_keys():
    def _type(session, keys):
        for k in keys:
            session.on_keystroke(k)
    return _type


@pytest.fixture
def make_session():
    def _make(*texts, round_seconds=60):
        s = TypingSession(fixed_paragraphs(*texts), round_seconds=round_seconds)
        s.start_round()
        return s
    return _make


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication
    return QApplication.instance() or QApplication([])
