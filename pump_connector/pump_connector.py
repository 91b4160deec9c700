import logging
import datetime
from typing import Optional

logger = logging.getLogger('app')

from homeassistant_uploader import HomeAssistantUploader
from pump_connector.helper import get_datetime_now
from pump_data import MySentryDecodeError, PumpStatus, PumpStatusDecoder, SensorReading, status_to_dict

TIMESTAMP_FORMAT = "%H:%M:%S %d.%m.%Y"


class PumpConnector:
    def __init__(self, connector: HomeAssistantUploader, decoder: Optional[PumpStatusDecoder] = None):
        self._ha_connector = connector
        self._decoder = decoder if decoder is not None else PumpStatusDecoder()

        self._connection_timestamp = get_datetime_now()
        self._last_status = None

    def process_message(self, rx_data: bytes) -> Optional[PumpStatus]:
        try:
            status = self._decoder.decode(rx_data)
        except MySentryDecodeError as ex:
            logger.warning("Dropping MySentry message {0}: {1}".format(bytes(rx_data).hex(), ex))
            self._ha_connector.update_status("Invalid data.")
            self.reset_all_states()
            self._reset_timestamp_after_fail()
            self._ha_connector.update_timestamp(state=self._connection_timestamp.strftime(TIMESTAMP_FORMAT))
            return None

        if status == self._last_status:
            logger.info("Pump status from {0} already uploaded".format(status.pump_date))
            return status

        logger.info("Decoded pump status: {0}".format(status_to_dict(status)))
        self._update_states(status)
        self._connection_timestamp = status.pump_date
        self._last_status = status
        self._ha_connector.update_timestamp(state=self._connection_timestamp.strftime(TIMESTAMP_FORMAT))
        return status

    def _update_states(self, status: PumpStatus) -> None:
        self._ha_connector.update_status("Connected.")

        self._ha_connector.update_bgl(state=self._glucose_state(status.glucose))
        self._ha_connector.update_previous_bgl(state=self._glucose_state(status.previous_glucose))
        self._ha_connector.update_sensor_state(state=status.glucose.state.value)
        self._ha_connector.update_trend(state=status.glucose_trend.name)
        self._ha_connector.update_active_insulin(state=round(status.iob, 3))
        self._ha_connector.update_pump_battery_level(state=status.battery_remaining_percent)
        self._ha_connector.update_insulin_units_remaining(state=round(status.reservoir_remaining, 1))
        self._ha_connector.update_sensor_age(state=status.sensor_age_hours)
        self._ha_connector.update_sensor_remaining(state=status.sensor_remaining_hours)
        self._ha_connector.update_next_calibration(state=self._format_optional(status.next_sensor_calibration))
        self._ha_connector.update_event(state=self._sensor_event(status.glucose))

    def reset_all_states(self) -> None:
        self._ha_connector.update_bgl(state="")
        self._ha_connector.update_previous_bgl(state="")
        self._ha_connector.update_sensor_state(state="")
        self._ha_connector.update_trend(state="")
        self._ha_connector.update_active_insulin(state="")
        self._ha_connector.update_pump_battery_level(state="")
        self._ha_connector.update_insulin_units_remaining(state="")
        self._ha_connector.update_sensor_age(state="")
        self._ha_connector.update_sensor_remaining(state="")
        self._ha_connector.update_next_calibration(state="")
        self._ha_connector.update_event(state="")
        self._last_status = None

    @staticmethod
    def _glucose_state(reading: SensorReading):
        if reading.is_active:
            return reading.glucose
        return ""

    @staticmethod
    def _sensor_event(reading: SensorReading) -> str:
        if reading.is_active:
            return ""  # Reset message
        return "Sensor: {0}".format(reading.state.value)

    @staticmethod
    def _format_optional(timestamp: Optional[datetime.datetime]) -> str:
        if timestamp is None:
            return ""
        return timestamp.strftime(TIMESTAMP_FORMAT)

    def _reset_timestamp_after_fail(self):
        self._connection_timestamp = get_datetime_now()
