import logging

from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

# stdlib logger: tenacity's before_sleep_log calls logger.log(level, msg)
logger = logging.getLogger(__name__)


def retry_async(
    exceptions: tuple[type[BaseException], ...],
    max_attempts: int = 3,
    min_wait: float = 1.0,
    max_wait: float = 10.0,
):
    """
    Decorator for async functions to add retry logic with exponential backoff.

    Only ``exceptions`` are retried; anything else propagates on first failure.
    """
    return retry(
        reraise=True,
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=1, min=min_wait, max=max_wait),
        retry=retry_if_exception_type(exceptions),
        before_sleep=before_sleep_log(logger, logging.WARNING),
    )
