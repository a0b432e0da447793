from unittest.mock import MagicMock

import pytest
import redis

from storefront.services.lock_service import LockService


@pytest.fixture()
def svc():
    # from_url does not connect, the client is swapped before any command runs
    service = LockService(url="redis://localhost:6379/0")
    service.redis = MagicMock()
    return service


def test_acquire_uses_set_nx_with_ttl(svc):
    svc.redis.set.return_value = True

    assert svc.acquire_checkout_lock("user-1", "token-a", ttl=30) is True
    svc.redis.set.assert_called_once_with(name="checkout:user-1:lock", value="token-a", nx=True, ex=30)


def test_acquire_when_already_held(svc):
    svc.redis.set.return_value = None

    assert svc.acquire_checkout_lock("user-1", "token-a", ttl=30) is False


def test_release_only_by_owner(svc):
    svc.redis.eval.return_value = 0

    assert svc.release_checkout_lock("user-1", "someone-else") is False
    args = svc.redis.eval.call_args.args
    assert args[1:] == (1, "checkout:user-1:lock", "someone-else")


def test_transient_redis_error_is_retried(svc):
    svc.redis.set.side_effect = [redis.ConnectionError("reset"), True]

    assert svc.acquire_checkout_lock("user-1", "token-a", ttl=30) is True
    assert svc.redis.set.call_count == 2


def test_gives_up_after_three_attempts(svc):
    svc.redis.eval.side_effect = redis.ConnectionError("down")

    with pytest.raises(redis.ConnectionError):
        svc.release_checkout_lock("user-1", "token-a")
    assert svc.redis.eval.call_count == 3
