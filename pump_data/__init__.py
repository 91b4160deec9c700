from .errors import MySentryDecodeError, MalformedLengthError, MalformedTrendError, MalformedPumpDateError, \
    InvalidPackedDateError
from .mysentry_types import GlucoseTrend, SensorState, SensorReading
from .mysentry_pump_status import PumpStatus
from .calibration_calendar import CalibrationCalendar, LocalCalendar
from .mysentry_decoder import PumpStatusDecoder
from .export import status_to_dict

__all__ = ["MySentryDecodeError", "MalformedLengthError", "MalformedTrendError", "MalformedPumpDateError",
           "InvalidPackedDateError", "GlucoseTrend", "SensorState", "SensorReading", "PumpStatus",
           "CalibrationCalendar", "LocalCalendar", "PumpStatusDecoder", "status_to_dict"]
