import logging
from loggersimple import Logger, Handler

if __name__ == "__main__":
    with Logger(heartbeat_interval_ms=10000) as client:
        client.log_success("Logging example started")

        logger = logging.getLogger(__name__)
        logger.setLevel(logging.DEBUG)
        logger.addHandler(Handler(client))

        logger.info("This is a Logger-Simple logging test")
        logger.error("Errors are sent with level 'error'")
