"""
strictpass.log

Logging setup for the CLI and the HTTP API, and the audit logger that
policy.check_password writes password-change decisions to.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# accept/reject decisions for password changes
audit_logger = logging.getLogger("strictpass.audit")


def configure_logging(level="INFO") -> None:
    """Send strictpass logs to stdout. Safe to call more than once."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    logging.getLogger("strictpass").setLevel(level)
