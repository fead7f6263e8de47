import logging

from LedgerApp.app import app

logger = logging.getLogger(__name__)


def logging_initiate():
    if logger.handlers:
        return

    logger.setLevel(app.config.get('LOG_LEVEL', 'DEBUG'))

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(logging.DEBUG)

    format = logging.Formatter('[%(asctime)s] p%(process)s {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s','%m-%d %H:%M:%S')
    stream_handler.setFormatter(format)

    logger.addHandler(stream_handler)

    logger.debug('Ledger: Logging started for Stream logging')
