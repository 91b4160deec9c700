import datetime
from typing import Optional


class CalibrationCalendar:
    def next_date_after(self, reference: datetime.datetime, hour: int, minute: int,
                        second: int) -> Optional[datetime.datetime]:
        """Earliest instant strictly after reference at hour:minute:second, None when there is none."""
        raise NotImplementedError


class LocalCalendar(CalibrationCalendar):
    """Wall clock calendar working on naive local datetimes."""

    def next_date_after(self, reference: datetime.datetime, hour: int, minute: int,
                        second: int) -> Optional[datetime.datetime]:
        try:
            candidate = reference.replace(hour=hour, minute=minute, second=second, microsecond=0)
            if candidate <= reference:
                candidate = candidate + datetime.timedelta(days=1)
        except (ValueError, OverflowError):
            return None
        return candidate
