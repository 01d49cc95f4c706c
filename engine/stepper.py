"""
stepper.py — Step-by-Step Replay
================================
Walks back and forth over a search trace.  Steps come either from a live
step generator (pulled one at a time, only when asked for) or from a
trace the Recorder already ran; either way every Step seen is kept so
prev / goto can revisit it.

State machine:
    IDLE     →  start() / load()                     →  PAUSED
    PAUSED   →  shows the final step, or runs dry    →  FINISHED
    FINISHED →  moves back                           →  PAUSED
    any      →  reset()                              →  IDLE

No timers: a request moves the cursor and returns.  One request at a time.
"""

from enum import Enum
from typing import Callable, Iterator, List, Optional

from algorithms.step import Step


class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    FINISHED = "finished"


class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        steps       : Every Step seen so far.
        current_idx : Index into `steps` on display, -1 before the first.
        on_step     : Called with each Step as it comes on display.
    """

    def __init__(self, on_step: Optional[Callable[[Step], None]] = None):
        self.on_step = on_step
        self.reset()

    def reset(self) -> None:
        self._source:     Optional[Iterator[Step]] = None
        self.steps:       List[Step]               = []
        self.current_idx: int                      = -1
        self.state:       StepperState             = StepperState.IDLE

    def start(self, generator: Iterator[Step]) -> None:
        """Replay a live step generator; step 0 is pulled right away."""
        self.reset()
        self._source = generator
        self.state = StepperState.PAUSED
        if self._pull_until(0):
            self._show(0)

    def load(self, steps: List[Step]) -> None:
        """Replay a recorded trace."""
        self.reset()
        self.steps = list(steps)
        self.state = StepperState.PAUSED
        if self.steps:
            self._show(0)

    # -- navigation --
    def next_step(self) -> bool:
        """Move forward one step.  False, and FINISHED, when there is none."""
        if not self._pull_until(self.current_idx + 1):
            self.state = StepperState.FINISHED
            return False
        self._show(self.current_idx + 1)
        return True

    def prev_step(self) -> bool:
        """Move back one step.  False at the first step."""
        if self.current_idx <= 0:
            return False
        self._show(self.current_idx - 1)
        return True

    def goto_step(self, idx: int) -> bool:
        if idx < 0 or not self._pull_until(idx):
            return False
        self._show(idx)
        return True

    def rewind(self) -> None:
        if self.steps:
            self._show(0)

    def jump_to_end(self) -> None:
        while self._pull():
            pass
        if self.steps:
            self._show(len(self.steps) - 1)
        self.state = StepperState.FINISHED

    # -- read-only --
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def total_steps_fetched(self) -> int:
        return len(self.steps)

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    # -- internal --
    def _pull(self) -> bool:
        if self._source is None:
            return False
        step = next(self._source, None)
        if step is None:
            self._source = None
            return False
        self.steps.append(step)
        return True

    def _pull_until(self, idx: int) -> bool:
        """Make sure steps[idx] exists, pulling as needed."""
        while idx >= len(self.steps):
            if not self._pull():
                return False
        return True

    def _show(self, idx: int) -> None:
        self.current_idx = idx
        step = self.steps[idx]
        self.state = StepperState.FINISHED if step.is_final else StepperState.PAUSED
        if self.on_step:
            self.on_step(step)
