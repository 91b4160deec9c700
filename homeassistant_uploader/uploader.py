import logging

import pydantic

from homeassistant_api import Client, State

logger = logging.getLogger('app')


class HomeAssistantUploader:
    def __init__(self, token, ip, port):
        self._token = token
        self._api_url = "http://" + str(ip) + ":" + str(port) + "/api"

        assert token is not None
        assert ip is not None
        assert port is not None

        self._client = Client(self._api_url, token)

    def _update_state(self, entity_id, state):
        try:
            self._client.set_state(State(entity_id=entity_id, state=str(state)))
        except pydantic.ValidationError as ex:
            logger.warning("Home Assistant rejected state of {0}: {1}".format(entity_id, ex))

    def update_bgl(self, state):
        self._update_state(entity_id="sensor.minimed_bgl", state=state)

    def update_previous_bgl(self, state):
        self._update_state(entity_id="sensor.minimed_previous_bgl", state=state)

    def update_sensor_state(self, state):
        self._update_state(entity_id="sensor.minimed_sensor_state", state=state)

    def update_trend(self, state):
        self._update_state(entity_id="sensor.minimed_trend", state=state)

    def update_active_insulin(self, state):
        self._update_state(entity_id="sensor.minimed_active_insulin", state=state)

    def update_pump_battery_level(self, state):
        self._update_state(entity_id="sensor.minimed_pump_battery_level", state=state)

    def update_insulin_units_remaining(self, state):
        self._update_state(entity_id="sensor.minimed_insulin_units_remaining", state=state)

    def update_sensor_age(self, state):
        self._update_state(entity_id="sensor.minimed_sensor_age_hours", state=state)

    def update_sensor_remaining(self, state):
        self._update_state(entity_id="sensor.minimed_sensor_remaining_hours", state=state)

    def update_next_calibration(self, state):
        self._update_state(entity_id="sensor.minimed_next_calibration", state=state)

    def update_status(self, state):
        self._update_state(entity_id="sensor.minimed_status", state=state)

    def update_timestamp(self, state):
        self._update_state(entity_id="sensor.minimed_update_timestamp", state=state)

    def update_event(self, state):
        self._update_state(entity_id="sensor.minimed_message", state=state)
