"""Utilities pertaining to logging."""


import logging


# We put the time of a log message first for sorting purposes, and the
# message text last so a log line can be split into its parts easily.
_MESSAGE_FORMAT = \
    '%(asctime)s,%(msecs)03d %(levelname)-8s %(name)s %(message)s'
_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def configure_root_logger(level=logging.INFO):
    logging.basicConfig(
        format=_MESSAGE_FORMAT, datefmt=_DATE_FORMAT, level=level)
