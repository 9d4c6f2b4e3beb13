import logging
from typing import Callable, Dict, List, Tuple

from app.calculation import classify, compute_metrics
from app.state import (
    ROUND_SECONDS,
    CharClass,
    KeystrokeRecord,
    RoundMetrics,
    RoundPhase,
    ViewState,
)
from app.validation import BACKSPACE, is_supported_key
from utils.file_handler import generate_paragraph

log = logging.getLogger(__name__)


class TypingSession:
    """
    One timed typing round: idle -> running -> ended -> idle (via reset_round).

    The session never schedules anything itself. The owner starts a
    one-second clock once `is_running` turns true and feeds `tick()`.
    """

    def __init__(self,
                 generate: Callable[[], str] = generate_paragraph,
                 round_seconds: int = ROUND_SECONDS):
        self._generate = generate
        self.round_seconds = round_seconds
        self.paragraph = ""
        self.cursor = 0
        self.records: Dict[int, KeystrokeRecord] = {}
        self.seconds_left = round_seconds
        self.metrics = RoundMetrics()
        self.history: List[Tuple[int, RoundMetrics]] = []
        self.phase = RoundPhase.IDLE

    @property
    def is_running(self) -> bool:
        return self.phase is RoundPhase.RUNNING

    @property
    def is_ended(self) -> bool:
        return self.phase is RoundPhase.ENDED

    def _init_round(self):
        self.paragraph = self._generate() or ""
        self.cursor = 0
        self.records.clear()
        self.seconds_left = self.round_seconds
        self.metrics = RoundMetrics()
        self.history.clear()
        self.phase = RoundPhase.IDLE

    def start_round(self) -> bool:
        if self.phase is not RoundPhase.IDLE:
            log.debug("start_round ignored while %s", self.phase.value)
            return False
        self._init_round()
        log.info("Round ready: %d chars", len(self.paragraph))
        return True

    def reset_round(self) -> bool:
        if self.phase is not RoundPhase.ENDED:
            log.debug("reset_round ignored while %s", self.phase.value)
            return False
        self._init_round()
        log.info("Round reset")
        return True

    def on_keystroke(self, key: str) -> bool:
        """Apply one key. Returns True when the key was accepted."""
        if not is_supported_key(key) or self.is_ended:
            return False

        if self.phase is RoundPhase.IDLE:
            self.phase = RoundPhase.RUNNING
            log.info("Round started")

        if key == BACKSPACE:
            if self.cursor > 0:
                self.cursor -= 1
                rec = self.records.get(self.cursor)
                if rec is not None:
                    rec.typed_char = ""
            return True

        # past the final character nothing is recorded, but a space still scores
        if self.cursor < len(self.paragraph):
            self.records[self.cursor] = KeystrokeRecord(key, self.paragraph[self.cursor])
            self.cursor += 1

        if key == " ":
            self.metrics = compute_metrics(self.records)
            self.history.append((self.round_seconds - self.seconds_left, self.metrics))
        return True

    def tick(self) -> bool:
        """One second elapsed. Returns True only on the tick that ends the round."""
        if not self.is_running:
            return False
        self.seconds_left = max(0, self.seconds_left - 1)
        if self.seconds_left == 0:
            self.phase = RoundPhase.ENDED
            log.info("Time's up: wpm=%d cpm=%d accuracy=%d%%",
                     self.metrics.wpm, self.metrics.cpm, self.metrics.accuracy)
            return True
        return False

    def classify(self) -> List[CharClass]:
        return classify(self.paragraph, self.cursor, self.records)

    def view_state(self) -> ViewState:
        return ViewState(
            paragraph=self.paragraph,
            cursor=self.cursor,
            classes=self.classify(),
            metrics=self.metrics,
            seconds_left=self.seconds_left,
            phase=self.phase,
            history=list(self.history),
        )
