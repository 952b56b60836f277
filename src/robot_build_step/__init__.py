"""Robot Framework build step: command assembly and console artifact resolution."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
