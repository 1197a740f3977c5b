from __future__ import annotations

from datetime import date, time
from typing import Mapping, Optional

import structlog

from ..common.datetime_utils import today_local
from ..common.validators import require_choice
from ..core.enums import AttendanceState, AttendanceStatus, AutoMarkOutcome, Population
from ..core.exceptions import NotFoundError, ValidationError
from .ledgers.base import DailyLedger
from .model import AutoMarkResult, DailySheet, MarkResult, Rejection, SheetRow
from .status import compute_status
from .window import check_markable, ensure_markable

logger = structlog.get_logger(__name__)


class AttendanceService:
    """Daily attendance reconciliation for members and staff.

    ``today`` is accepted by every operation so callers (and tests) decide
    what "now" means; it defaults to the local date.
    """

    def __init__(self, ledgers: Mapping[Population, DailyLedger]):
        self._ledgers = dict(ledgers)

    def _ledger(self, population: Population | str) -> DailyLedger:
        population = require_choice(population, Population, "population")
        ledger = self._ledgers.get(population)
        if ledger is None:
            raise ValidationError(f"Attendance is not tracked for {population.value}")
        return ledger

    def daily_sheet(self, population: Population | str, target_date: date) -> DailySheet:
        ledger = self._ledger(population)
        attendees = list(ledger.list_attendees())
        records = ledger.records_for(target_date, [a.entity_id for a in attendees]) if attendees else {}

        rows = []
        for a in attendees:
            record = records.get(a.entity_id)
            state = compute_status(a, target_date, record)
            # Records dated before the window are ignored along with the state.
            shown = record if state != AttendanceState.NOT_APPLICABLE else None
            rows.append(
                SheetRow(
                    entity_id=a.entity_id,
                    name=a.name,
                    window_start=a.window_start,
                    window_end=a.window_end,
                    state=state,
                    attendance_id=shown.attendance_id if shown else None,
                    notes=shown.notes if shown else None,
                )
            )
        rows.sort(key=lambda r: r.name.lower())

        counts = {s.value: 0 for s in AttendanceState}
        for r in rows:
            counts[r.state.value] += 1

        return DailySheet(population=ledger.population, work_date=target_date, rows=rows, counts=counts)

    def mark_attendance(
        self,
        population: Population | str,
        entity_id: int,
        target_date: date,
        status: AttendanceStatus | str,
        *,
        today: Optional[date] = None,
        in_time: Optional[time] = None,
    ) -> MarkResult:
        ledger = self._ledger(population)
        status = require_choice(status, AttendanceStatus, "status")
        today = today or today_local()

        attendee = ledger.get_attendee(int(entity_id))
        if not attendee:
            raise NotFoundError(f"{ledger.label.capitalize()} not found")

        ensure_markable(attendee.window_start, target_date, today=today, pre_window_reason=ledger.pre_window_reason)

        ledger.write_mark(attendee, target_date, status, in_time=in_time)

        message = f"Marked {attendee.name} as {status.value}"
        logger.info(
            "attendance.marked",
            population=ledger.population.value,
            entity_id=attendee.entity_id,
            date=target_date.isoformat(),
            status=status.value,
        )
        return MarkResult(entity_id=attendee.entity_id, work_date=target_date, status=status, message=message)

    def auto_mark_absent(
        self,
        population: Population | str,
        target_date: date,
        *,
        today: Optional[date] = None,
    ) -> AutoMarkResult:
        ledger = self._ledger(population)
        today = today or today_local()
        sheet = self.daily_sheet(ledger.population, target_date)

        unmarked = [r for r in sheet.rows if r.state == AttendanceState.NOT_MARKED]
        if not unmarked:
            return AutoMarkResult(
                population=ledger.population,
                work_date=target_date,
                outcome=AutoMarkOutcome.NO_UNMARKED,
                marked=0,
                message="No unmarked attendance to update",
            )

        eligible: list[int] = []
        rejected: list[Rejection] = []
        for r in unmarked:
            reason = check_markable(r.window_start, target_date, today=today, pre_window_reason=ledger.pre_window_reason)
            if reason:
                rejected.append(Rejection(entity_id=r.entity_id, name=r.name, reason=reason))
            else:
                eligible.append(r.entity_id)

        if not eligible:
            return AutoMarkResult(
                population=ledger.population,
                work_date=target_date,
                outcome=AutoMarkOutcome.NO_ELIGIBLE,
                marked=0,
                message="No eligible attendance to update",
                rejected=rejected,
            )

        marked = ledger.write_absent_batch(target_date, eligible)
        logger.info(
            "attendance.auto_marked_absent",
            population=ledger.population.value,
            date=target_date.isoformat(),
            candidates=len(eligible),
            marked=marked,
            rejected=len(rejected),
        )
        return AutoMarkResult(
            population=ledger.population,
            work_date=target_date,
            outcome=AutoMarkOutcome.MARKED,
            marked=marked,
            message=f"Marked {marked} {ledger.plural_label} as absent",
            rejected=rejected,
        )
