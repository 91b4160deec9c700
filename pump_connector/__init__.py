from .pump_connector import PumpConnector
from pump_data import PumpStatus, PumpStatusDecoder

__all__ = ["PumpConnector", "PumpStatus", "PumpStatusDecoder"]
