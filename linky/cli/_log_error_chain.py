"""Log a classified error together with its causes."""

import logging


def _log_error_chain(error: BaseException, logger: logging.Logger) -> None:
    """Log ``error`` and then each underlying cause, indented by depth."""
    logger.warning("error: %s", error)
    seen = {id(error)}
    cause = error.__cause__
    depth = 1
    while cause is not None and id(cause) not in seen:
        seen.add(id(cause))
        logger.warning("%scaused by: %s", "  " * depth, cause)
        cause = cause.__cause__
        depth += 1
