from typing import Dict, List

from app.state import CharClass, KeystrokeRecord, RoundMetrics


def split_words(chars: List[str]) -> List[str]:
    """Join characters and split on single spaces, dropping empty tokens."""
    return [w for w in "".join(chars).split(" ") if w != ""]


def correct_words(typed: List[str], expected: List[str]) -> List[str]:
    """Expected words matched exactly by the typed word at the same ordinal."""
    return [w for i, w in enumerate(expected) if i < len(typed) and typed[i] == w]


def compute_metrics(records: Dict[int, KeystrokeRecord]) -> RoundMetrics:
    """
    Word-boundary snapshot of the round.
    wpm and cpm are both the raw count of correct words; they are not
    normalised by elapsed time.
    """
    ordered = [records[pos] for pos in sorted(records)]
    typed = split_words([r.typed_char for r in ordered])
    expected = split_words([r.expected_char for r in ordered])
    correct = len(correct_words(typed, expected))
    accuracy = correct * 100 // len(expected) if expected else 0
    return RoundMetrics(wpm=correct, cpm=correct, accuracy=accuracy)


def classify(paragraph: str, cursor: int, records: Dict[int, KeystrokeRecord]) -> List[CharClass]:
    out: List[CharClass] = []
    for pos in range(len(paragraph)):
        if pos == cursor:
            out.append(CharClass.CURRENT)
        elif pos > cursor:
            out.append(CharClass.PENDING)
        else:
            rec = records.get(pos)
            ok = rec is not None and rec.matches
            out.append(CharClass.CORRECT if ok else CharClass.INCORRECT)
    return out
