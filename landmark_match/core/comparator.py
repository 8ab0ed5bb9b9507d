"""Two-slot face comparator.

Holds the mapped landmark points of a reference face and a candidate face.
Each write goes through a pure transition function; once both slots are
filled the pair is scored. Either slot may be filled first, and a write
replaces whatever the slot held before.
"""

import logging
import threading
from dataclasses import dataclass, field, replace
from typing import Callable, Optional, Sequence, Tuple, Union

from ..config import SAME_PERSON_THRESHOLD
from ..models.types import AbsolutePoint, ComparisonResult
from .scoring import score, validate_threshold

logger = logging.getLogger(__name__)

REFERENCE = "reference"
CANDIDATE = "candidate"
SLOT_NAMES = (REFERENCE, CANDIDATE)

@dataclass(frozen=True)
class Empty:
    pass

@dataclass(frozen=True)
class Filled:
    points: Tuple[AbsolutePoint, ...]

SlotState = Union[Empty, Filled]

@dataclass(frozen=True)
class ComparatorState:
    reference: SlotState = field(default_factory=Empty)
    candidate: SlotState = field(default_factory=Empty)

    @property
    def is_ready(self) -> bool:
        return isinstance(self.reference, Filled) and isinstance(self.candidate, Filled)

def transition(state: ComparatorState, slot: str, points: Sequence[AbsolutePoint]) -> ComparatorState:
    """Return a new state with the named slot filled with points.

    Raises:
        ValueError: If slot is not one of SLOT_NAMES.
    """
    if slot not in SLOT_NAMES:
        raise ValueError(f"Unknown slot '{slot}', expected one of {SLOT_NAMES}")
    return replace(state, **{slot: Filled(tuple(points))})

class FaceComparator:
    """Scores a reference face against a candidate face once both are set.

    Slot contents are private. Results are returned from set_slot and
    passed to on_result when given.
    """

    def __init__(
        self,
        threshold: float = SAME_PERSON_THRESHOLD,
        on_result: Optional[Callable[[ComparisonResult], None]] = None
    ):
        self.threshold = validate_threshold(threshold)
        self.on_result = on_result
        self._state = ComparatorState()
        self._lock = threading.Lock()

    @property
    def is_ready(self) -> bool:
        with self._lock:
            return self._state.is_ready

    def set_slot(self, slot: str, points: Sequence[AbsolutePoint]) -> Optional[ComparisonResult]:
        """Fill a slot and score the pair if both slots are filled.

        Args:
            slot: "reference" or "candidate".
            points: Canvas points for the face.

        Returns:
            Comparison result if both slots are filled, otherwise None.

        Raises:
            ValueError: If slot is unknown.
            LengthMismatchError: If the filled slots differ in length.
            EmptyPointSetError: If both filled slots are empty.
            InvalidPointSetError: If a point is not a finite (x, y) pair.
        """
        with self._lock:
            self._state = transition(self._state, slot, points)
            logger.info(f"Slot '{slot}' filled with {len(points)} points")
            if not self._state.is_ready:
                return None
            result = score(
                self._state.reference.points,
                self._state.candidate.points,
                self.threshold
            )

        if self.on_result is not None:
            self.on_result(result)
        return result

    def reset(self):
        """Empty both slots so the comparator can run another comparison."""
        with self._lock:
            self._state = ComparatorState()
