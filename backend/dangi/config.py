"""Engine policy constants and logging setup."""
import logging
import os
from typing import Optional

# Balances within this distance of zero count as settled.
SETTLED_TOLERANCE = 0.01
# Allowed gap between an expense amount and the sum of its shares.
SPLIT_TOLERANCE = 0.01

DEFAULT_CURRENCY = "IRR"
# Toman amounts are rounded to the nearest 100.
IRR_ROUNDING_STEP = 100

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for an application embedding the engine."""
    level = level or os.getenv("DANGI_LOG_LEVEL", "INFO")
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
