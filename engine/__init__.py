"""
engine/
-------
Run, replay and session layer.

    from engine import Stepper, Recorder, RunMetrics, Session, SessionRegistry
"""

from engine.stepper  import Stepper, StepperState
from engine.recorder import Recorder, RunMetrics
from engine.session  import Session, SessionRegistry

__all__ = [
    "Stepper",
    "StepperState",
    "Recorder",
    "RunMetrics",
    "Session",
    "SessionRegistry",
]
