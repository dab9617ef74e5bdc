import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
HANDLER_NAME = "book_bench"


def config_logging(level=logging.INFO):
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Calling twice only updates the level.
    for handler in root_logger.handlers:
        if handler.get_name() == HANDLER_NAME:
            handler.setLevel(level)
            return

    sh = logging.StreamHandler()
    sh.set_name(HANDLER_NAME)
    sh.setLevel(level)
    sh.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(sh)


def reset_logging():
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()
