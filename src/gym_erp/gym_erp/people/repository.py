from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Attendee


class PeopleRepository(Protocol):
    def list_member_attendees(self) -> Sequence[Attendee]:
        """Active members holding at least one active membership."""

        raise NotImplementedError

    def get_member_attendee(self, member_id: int) -> Optional[Attendee]:
        raise NotImplementedError

    def list_staff_attendees(self) -> Sequence[Attendee]:
        """Active staff; the window starts at the joining date."""

        raise NotImplementedError

    def get_staff_attendee(self, staff_id: int) -> Optional[Attendee]:
        raise NotImplementedError
