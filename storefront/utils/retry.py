# storefront/utils/retry.py
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type
import redis

from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def _log_retry(retry_state):
    exc = retry_state.outcome.exception()
    logger.warning(
        f"{retry_state.fn.__name__} failed ({exc!r}), "
        f"attempt {retry_state.attempt_number}, retrying"
    )


def transient_retry(exc_types, attempts: int = 3, min_wait: float = 0.2, max_wait: float = 2):
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=min_wait, min=min_wait, max=max_wait),
        retry=retry_if_exception_type(exc_types),
        before_sleep=_log_retry,
    )


def redis_retry():
    # lock calls run inside a request, keep the whole retry under ~1s
    return transient_retry(redis.RedisError, attempts=3, min_wait=0.2, max_wait=0.5)
