from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from pump_data.mysentry_types import GlucoseTrend, SensorReading


@dataclass(frozen=True, eq=False)
class PumpStatus:
    pump_date: datetime
    battery_remaining_percent: int
    iob: float
    reservoir_remaining: float
    glucose_trend: GlucoseTrend
    glucose: SensorReading
    previous_glucose: SensorReading
    glucose_date: Optional[datetime]
    sensor_age_hours: int
    sensor_remaining_hours: int
    next_sensor_calibration: Optional[datetime]
    rx_data: bytes = field(repr=False)

    # Bytes the vendor never documented, kept for diagnostic logging
    @property
    def byte_11(self) -> bytes:
        return self.rx_data[11:12]

    @property
    def bytes_15_17(self) -> bytes:
        return self.rx_data[15:18]

    @property
    def bytes_25_26(self) -> bytes:
        return self.rx_data[25:27]

    @property
    def byte_27(self) -> bytes:
        return self.rx_data[27:28]

    def __eq__(self, other):
        if not isinstance(other, PumpStatus):
            return NotImplemented
        return self.pump_date == other.pump_date and self.glucose_date == other.glucose_date

    def __hash__(self):
        return hash((self.pump_date, self.glucose_date))
