import datetime


def get_datetime_now() -> datetime.datetime:
    return datetime.datetime.now()
