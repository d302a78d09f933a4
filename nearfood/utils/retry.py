import logging
import time

logger = logging.getLogger(__name__)

NETWORK_ERROR_MARKERS = ("failed to fetch", "network", "connection", "timeout", "timed out")


def is_network_error(exc: BaseException) -> bool:
    if isinstance(exc, (ConnectionError, TimeoutError)):
        return True
    message = str(exc).lower()
    return any(marker in message for marker in NETWORK_ERROR_MARKERS)


def with_retry(fn, max_retries: int = 2, retry_delay: float = 1.0, retry_on=is_network_error, sleep=time.sleep):
    """Call ``fn`` and retry it while it fails with a network error.

    Attempt ``n`` (0-based) waits ``retry_delay * (n + 1)`` seconds before
    the next try. Non-network errors propagate immediately; after the last
    attempt the final error is re-raised.
    """
    for attempt in range(max_retries + 1):
        try:
            return fn()
        except Exception as exc:
            if not retry_on(exc) or attempt >= max_retries:
                raise
            logger.warning("Retrying after network error (attempt %d): %s", attempt + 1, exc)
            sleep(retry_delay * (attempt + 1))
