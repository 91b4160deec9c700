import datetime

from pump_data.errors import InvalidPackedDateError

PACKED_DATE_LENGTH = 6
YEAR_OFFSET = 2000


def decode_packed_date(data: bytes) -> datetime.datetime:
    # hour, minute, second, year - 2000, month, day
    if len(data) != PACKED_DATE_LENGTH:
        raise InvalidPackedDateError("Packed date needs {0} bytes, got {1}".format(PACKED_DATE_LENGTH, len(data)))

    hour, minute, second, year, month, day = data
    try:
        return datetime.datetime(YEAR_OFFSET + year, month, day, hour, minute, second)
    except ValueError as ex:
        raise InvalidPackedDateError("Invalid packed date {0}: {1}".format(bytes(data).hex(), ex)) from ex
