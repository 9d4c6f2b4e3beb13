from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

ROUND_SECONDS = 60


class RoundPhase(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


class CharClass(str, Enum):
    CURRENT = "current"
    PENDING = "pending"
    CORRECT = "correct"
    INCORRECT = "incorrect"


@dataclass
class KeystrokeRecord:
    typed_char: str
    expected_char: str

    @property
    def matches(self) -> bool:
        return self.typed_char == self.expected_char


@dataclass(frozen=True)
class RoundMetrics:
    wpm: int = 0
    cpm: int = 0
    accuracy: int = 0


@dataclass
class ViewState:
    """Everything the typing view needs for one repaint."""
    paragraph: str = ""
    cursor: int = 0
    classes: List[CharClass] = field(default_factory=list)
    metrics: RoundMetrics = field(default_factory=RoundMetrics)
    seconds_left: int = ROUND_SECONDS
    phase: RoundPhase = RoundPhase.IDLE
    history: List[Tuple[int, RoundMetrics]] = field(default_factory=list)

    @property
    def is_running(self) -> bool:
        return self.phase is RoundPhase.RUNNING
