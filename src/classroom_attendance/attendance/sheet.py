from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence

from ..classes.model import RosterEntry
from ..core.enums import SheetState
from ..core.exceptions import NotFoundError, ValidationError


@dataclass
class SheetEntry:
    student_id: str
    name: str
    present: bool = False


class AttendanceSheet:
    """In-memory roster a teacher edits before saving one day's attendance.

    IDLE -> ROSTER_LOADED -> EDITING -> SAVING -> ROSTER_LOADED, and back to
    IDLE on ``discard()``. Every entry starts absent; marks saved earlier the
    same day are not pre-filled, each save is a fresh capture.
    """

    def __init__(self, class_id: str, roster: Sequence[RosterEntry]):
        self.class_id = class_id
        self._entries: Dict[str, SheetEntry] = {
            r.student_id: SheetEntry(student_id=r.student_id, name=r.name) for r in roster
        }
        self.state = SheetState.ROSTER_LOADED

    @property
    def entries(self) -> List[SheetEntry]:
        return list(self._entries.values())

    def _entry(self, student_id: str) -> SheetEntry:
        if self.state not in (SheetState.ROSTER_LOADED, SheetState.EDITING):
            raise ValidationError(f"Attendance sheet is not editable ({self.state.value})")
        entry = self._entries.get(str(student_id))
        if entry is None:
            raise NotFoundError("Student is not on this class roster")
        return entry

    def toggle(self, student_id: str) -> bool:
        entry = self._entry(student_id)
        entry.present = not entry.present
        self.state = SheetState.EDITING
        return entry.present

    def mark(self, student_id: str, present: bool) -> None:
        self._entry(student_id).present = bool(present)
        self.state = SheetState.EDITING

    def presence_map(self) -> Dict[str, bool]:
        return {e.student_id: e.present for e in self._entries.values()}

    def begin_save(self) -> None:
        if self.state not in (SheetState.ROSTER_LOADED, SheetState.EDITING):
            raise ValidationError(f"Attendance sheet cannot be saved ({self.state.value})")
        self.state = SheetState.SAVING

    def finish_save(self) -> None:
        self.state = SheetState.ROSTER_LOADED

    def abort_save(self) -> None:
        self.state = SheetState.EDITING

    def discard(self) -> None:
        self._entries.clear()
        self.state = SheetState.IDLE
