import logging
from typing import Optional

from pump_data.calibration_calendar import CalibrationCalendar, LocalCalendar
from pump_data.errors import MalformedLengthError, MalformedPumpDateError, InvalidPackedDateError
from pump_data.field_extractor import big_endian_uint, sign_stitched_glucose
from pump_data.mysentry_pump_status import PumpStatus
from pump_data.mysentry_types import GlucoseTrend, SensorReading, SensorState
from pump_data.packed_date import decode_packed_date

logger = logging.getLogger('app')

MESSAGE_LENGTH = 36

RESERVOIR_SIGNIFICANT_DIGIT = 0.1
IOB_SIGNIFICANT_DIGIT = 0.025

# The calibration minute is not part of the message
NEXT_CALIBRATION_MINUTE = 13

TREND_OFFSET = 1
PUMP_DATE = slice(2, 8)
GLUCOSE_OFFSET = 9
PREVIOUS_GLUCOSE_OFFSET = 10
RESERVOIR = slice(12, 14)
BATTERY_OFFSET = 14
SENSOR_AGE_OFFSET = 18
SENSOR_REMAINING_OFFSET = 19
NEXT_CALIBRATION_HOUR_OFFSET = 20
IOB = slice(22, 24)
GLUCOSE_OVERFLOW_OFFSET = 24
GLUCOSE_DATE = slice(28, 34)


class PumpStatusDecoder:
    """
    Decodes the status message a pump broadcasts to paired MySentry devices.

    Layout of the 36 byte body (offsets):

        00 01 020304050607 08 09 10 11 1213 14 151617 18 19 20 21 2223 24 2526 27 282930313233 3435
        se tr pump date    01 bh ph    resv bt        st sr nx    iob  bl       sensor date   0000

    Pump and sensor dates are packed as hour, minute, second, year - 2000, month, day.
    """

    def __init__(self, calendar: Optional[CalibrationCalendar] = None):
        self._calendar = calendar if calendar is not None else LocalCalendar()

    def decode(self, rx_data: bytes) -> PumpStatus:
        rx_data = bytes(rx_data)
        if len(rx_data) != MESSAGE_LENGTH:
            raise MalformedLengthError(
                "MySentry status message must be {0} bytes, got {1}".format(MESSAGE_LENGTH, len(rx_data)))

        glucose_trend = GlucoseTrend.from_byte(rx_data[TREND_OFFSET])

        try:
            pump_date = decode_packed_date(rx_data[PUMP_DATE])
        except InvalidPackedDateError as ex:
            raise MalformedPumpDateError(str(ex)) from ex

        reservoir_remaining = big_endian_uint(rx_data[RESERVOIR]) * RESERVOIR_SIGNIFICANT_DIGIT
        iob = big_endian_uint(rx_data[IOB]) * IOB_SIGNIFICANT_DIGIT
        battery_remaining_percent = int(round(rx_data[BATTERY_OFFSET] / 4.0 * 100))

        overflow = rx_data[GLUCOSE_OVERFLOW_OFFSET]
        glucose = SensorReading.from_glucose(sign_stitched_glucose(rx_data[GLUCOSE_OFFSET], overflow, 7))
        previous_glucose = SensorReading.from_glucose(
            sign_stitched_glucose(rx_data[PREVIOUS_GLUCOSE_OFFSET], overflow, 6))

        glucose_date = None
        if glucose.state is not SensorState.OFF:
            try:
                glucose_date = decode_packed_date(rx_data[GLUCOSE_DATE])
            except InvalidPackedDateError as ex:
                logger.debug("Ignoring sensor glucose date: {0}".format(ex))

        next_calibration_hour = rx_data[NEXT_CALIBRATION_HOUR_OFFSET]
        next_sensor_calibration = self._calendar.next_date_after(
            pump_date, hour=next_calibration_hour, minute=NEXT_CALIBRATION_MINUTE, second=0)
        if next_sensor_calibration is None:
            logger.debug("No next sensor calibration for hour {0}".format(next_calibration_hour))

        return PumpStatus(
            pump_date=pump_date,
            battery_remaining_percent=battery_remaining_percent,
            iob=iob,
            reservoir_remaining=reservoir_remaining,
            glucose_trend=glucose_trend,
            glucose=glucose,
            previous_glucose=previous_glucose,
            glucose_date=glucose_date,
            sensor_age_hours=rx_data[SENSOR_AGE_OFFSET],
            sensor_remaining_hours=rx_data[SENSOR_REMAINING_OFFSET],
            next_sensor_calibration=next_sensor_calibration,
            rx_data=rx_data,
        )
