"""Discrete participant updates.

Each update knows which field it replaces, so callers never address
participant fields by name.
"""

from dataclasses import dataclass

from .models import Participant


@dataclass(frozen=True)
class SetName:
    """Rename a participant."""

    value: str

    def apply(self, participant: Participant) -> Participant:
        return participant.model_copy(update={"name": self.value})


@dataclass(frozen=True)
class SetAvatar:
    """Replace a participant's avatar (URL or data URI)."""

    value: str

    def apply(self, participant: Participant) -> Participant:
        return participant.model_copy(update={"avatar": self.value})


ParticipantUpdate = SetName | SetAvatar
