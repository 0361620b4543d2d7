"""
Playback State Machine

Single active track playback:

    Idle        --toggle(X)-->  Playing(X)
    Playing(X)  --toggle(X)-->  Paused(X)
    Paused(X)   --toggle(X)-->  Playing(X)
    Playing(Y) / Paused(Y)  --toggle(X), X != Y-->  Playing(X)

The media layer reports native play, pause and end events. Those are
upstream signals rather than user intents: pause/end move Playing(X) to
Paused(X) and are ignored for any track that is not the active one.
"""

from typing import Callable, List

import structlog

from ..models.state_models import PlaybackState, PlaybackStatus

logger = structlog.get_logger(__name__)

PlaybackListener = Callable[[PlaybackState], None]


class PlaybackStateMachine:
    """Guarantees that at most one track is ever in the playing state."""

    def __init__(self):
        self._state = PlaybackState()
        self._listeners: List[PlaybackListener] = []
        self.logger = logger.bind(component="PlaybackStateMachine")

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def status(self) -> PlaybackStatus:
        return self._state.status

    def add_listener(self, listener: PlaybackListener) -> None:
        self._listeners.append(listener)

    def is_playing(self, track_id: str) -> bool:
        return self._state.is_playing and self._state.active_track_id == track_id

    def is_active(self, track_id: str) -> bool:
        return self._state.active_track_id == track_id

    # User intents

    def toggle(self, track_id: str) -> PlaybackState:
        """Play/pause button on track_id."""
        if self._state.active_track_id == track_id:
            return self._transition(PlaybackState(track_id, not self._state.is_playing), "toggle")
        return self._transition(PlaybackState(track_id, True), "toggle")

    # Media layer signals

    def on_playback_started(self, track_id: str) -> PlaybackState:
        """Native controls started track_id; any other track is abandoned."""
        return self._transition(PlaybackState(track_id, True), "media_started")

    def on_playback_paused(self, track_id: str) -> PlaybackState:
        """Native controls paused track_id."""
        return self._pause_if_active(track_id, "media_paused")

    def on_playback_ended(self, track_id: str) -> PlaybackState:
        """track_id played to the end."""
        return self._pause_if_active(track_id, "media_ended")

    def _pause_if_active(self, track_id: str, trigger: str) -> PlaybackState:
        if not self.is_playing(track_id):
            self.logger.debug("Ignoring media signal", track_id=track_id, trigger=trigger)
            return self._state
        return self._transition(PlaybackState(track_id, False), trigger)

    def _transition(self, new_state: PlaybackState, trigger: str) -> PlaybackState:
        old_state = self._state
        if new_state == old_state:
            return old_state

        self._state = new_state
        self.logger.debug(
            "Playback transition",
            trigger=trigger,
            from_status=old_state.status.value,
            from_track=old_state.active_track_id,
            to_status=new_state.status.value,
            to_track=new_state.active_track_id
        )
        for listener in list(self._listeners):
            try:
                listener(new_state)
            except Exception as e:
                self.logger.error(
                    "Playback listener failed",
                    error=str(e),
                    error_type=type(e).__name__
                )
        return new_state
