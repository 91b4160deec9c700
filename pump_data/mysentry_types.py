from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pump_data.errors import MalformedTrendError

TREND_MASK = 0b1110


class GlucoseTrend(Enum):
    FLAT = 0b0000
    UP = 0b0010
    UP_UP = 0b0100
    DOWN = 0b0110
    DOWN_DOWN = 0b1000

    @classmethod
    def from_byte(cls, byte: int) -> "GlucoseTrend":
        try:
            return cls(byte & TREND_MASK)
        except ValueError:
            raise MalformedTrendError(
                "Unknown glucose trend bits {0:#06b} in byte {1:#04x}".format(byte & TREND_MASK, byte)) from None


class SensorState(Enum):
    OFF = "Off"
    METER_BG_NOW = "MeterBGNow"
    WEAK_SIGNAL = "WeakSignal"
    CAL_ERROR = "CalError"
    WARMUP = "Warmup"
    ENDED = "Ended"
    HIGH_BG = "HighBG"  # above 400 mg/dL
    LOST = "Lost"
    UNKNOWN = "Unknown"
    ACTIVE = "Active"


SENSOR_SENTINELS = {
    0: SensorState.OFF,
    2: SensorState.METER_BG_NOW,
    4: SensorState.WEAK_SIGNAL,
    6: SensorState.CAL_ERROR,
    8: SensorState.WARMUP,
    10: SensorState.ENDED,
    14: SensorState.HIGH_BG,
    20: SensorState.LOST,
}

HIGHEST_SENTINEL = 20


@dataclass(frozen=True)
class SensorReading:
    state: SensorState
    glucose: Optional[int] = None

    @classmethod
    def from_glucose(cls, value: int) -> "SensorReading":
        if value < 0:
            raise ValueError("Glucose value must not be negative: {0}".format(value))
        if value in SENSOR_SENTINELS:
            return cls(SENSOR_SENTINELS[value])
        if value <= HIGHEST_SENTINEL:
            return cls(SensorState.UNKNOWN)
        return cls(SensorState.ACTIVE, glucose=value)

    @property
    def is_active(self) -> bool:
        return self.state is SensorState.ACTIVE

    def __str__(self) -> str:
        if self.is_active:
            return "{0}({1})".format(self.state.value, self.glucose)
        return self.state.value
