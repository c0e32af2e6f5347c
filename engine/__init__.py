"""
engine/
-------
Recording, playback & session layer.

    from engine import Recorder, StepPlayer, CodeCursor, Session
"""

from engine.code_cursor import CodeCursor
from engine.recorder    import Recorder, RunMetrics
from engine.stepper     import StepPlayer
from engine.session     import (
    Session, SessionStore, Mode, PreconditionError, UnknownNodeError, HELP_TEXT, DEFAULT_VIEW,
)

__all__ = [
    "CodeCursor",
    "Recorder",
    "RunMetrics",
    "StepPlayer",
    "Session",
    "SessionStore",
    "Mode",
    "PreconditionError",
    "UnknownNodeError",
    "HELP_TEXT",
    "DEFAULT_VIEW",
]
