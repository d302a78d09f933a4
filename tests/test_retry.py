import pytest
from nearfood.utils.retry import with_retry, is_network_error


def test_network_errors_are_detected():
    assert is_network_error(ConnectionError('reset'))
    assert is_network_error(TimeoutError())
    assert is_network_error(RuntimeError('Failed to fetch'))
    assert not is_network_error(ValueError('bad amount'))


def test_retries_until_success_with_growing_delay():
    calls = []
    sleeps = []

    def flaky():
        calls.append(1)
        if len(calls) < 3:
            raise ConnectionError('connection refused')
        return 'ok'

    assert with_retry(flaky, max_retries=2, retry_delay=0.5, sleep=sleeps.append) == 'ok'
    assert len(calls) == 3
    assert sleeps == [0.5, 1.0]


def test_reraises_last_error_after_final_attempt():
    calls = []

    def down():
        calls.append(1)
        raise TimeoutError(f'timed out #{len(calls)}')

    with pytest.raises(TimeoutError, match='#3'):
        with_retry(down, max_retries=2, sleep=lambda s: None)
    assert len(calls) == 3


def test_other_errors_are_not_retried():
    calls = []

    def broken():
        calls.append(1)
        raise ValueError('bad input')

    with pytest.raises(ValueError):
        with_retry(broken, sleep=lambda s: None)
    assert calls == [1]
