import datetime

from pump_data.mysentry_pump_status import PumpStatus

DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def _format_date(value: datetime.datetime) -> str:
    # naive datetimes are local wall clock time
    return value.astimezone().strftime(DATE_FORMAT)


def status_to_dict(status: PumpStatus) -> dict:
    result = {
        "glucoseTrend": status.glucose_trend.name,
        "pumpDate": _format_date(status.pump_date),
        "reservoirRemaining": status.reservoir_remaining,
        "iob": status.iob,
    }

    if status.glucose.is_active:
        result["glucose"] = status.glucose.glucose
    if status.glucose_date is not None:
        result["glucoseDate"] = _format_date(status.glucose_date)
    result["sensorStatus"] = str(status.glucose)

    if status.previous_glucose.is_active:
        result["lastGlucose"] = status.previous_glucose.glucose
    result["lastSensorStatus"] = str(status.previous_glucose)

    result["sensorAgeHours"] = status.sensor_age_hours
    result["sensorRemainingHours"] = status.sensor_remaining_hours
    if status.next_sensor_calibration is not None:
        result["nextSensorCalibration"] = _format_date(status.next_sensor_calibration)

    result["batteryRemainingPercent"] = status.battery_remaining_percent

    # byte1 has always carried offset 11
    result["byte1"] = status.byte_11.hex()
    result["byte11"] = status.byte_11.hex()
    result["byte1517"] = status.bytes_15_17.hex()
    result["byte2526"] = status.bytes_25_26.hex()
    result["byte27"] = status.byte_27.hex()

    return result
