import logging

LOGGER = logging.getLogger("gyrocube")
