import os
import sys
import logging
import logging.handlers as handlers

logging.basicConfig(format='%(asctime)s %(levelname)s %(message)s', level=logging.INFO)

logger = logging.getLogger('app')

logHandler = handlers.RotatingFileHandler('log.txt', maxBytes=1000000, backupCount=2)
formatter = logging.Formatter('%(asctime)s %(levelname)s %(message)s')
logHandler.setFormatter(formatter)
logger.addHandler(logHandler)

from homeassistant_uploader import HomeAssistantUploader
from pump_connector import PumpConnector


def read_messages(stream):
    for line in stream:
        line = "".join(line.split())
        if not line:
            continue
        yield bytes.fromhex(line)


def run(pump_connector: PumpConnector, stream) -> None:
    lines = iter(stream)
    while True:
        try:
            for rx_data in read_messages(lines):
                try:
                    pump_connector.process_message(rx_data)
                except Exception as ex:
                    logger.error(ex)
            return
        except ValueError as ex:
            logger.error(ex)


if __name__ == '__main__':
    TOKEN = os.getenv("HOMEASSISTANT_TOKEN")
    IP = os.getenv("HOMEASSISTANT_IP")
    PORT = os.getenv("HOMEASSISTANT_PORT")

    home_assistant_uploader = HomeAssistantUploader(token=TOKEN, ip=IP, port=PORT)
    pump_connector = PumpConnector(connector=home_assistant_uploader)

    if len(sys.argv) > 1:
        with open(sys.argv[1]) as capture:
            run(pump_connector, capture)
    else:
        run(pump_connector, sys.stdin)
