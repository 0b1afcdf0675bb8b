"""
Integration tests for deadlock retry.

Verifica que el retry automático de deadlocks funciona correctamente:
- Detecta MySQL 1213/1205, PostgreSQL 40001/40P01 y SQLite "database is locked"
- Reintenta automáticamente con exponential backoff
- Logging apropiado en cada retry
- Se rinde después del max_attempts
"""

import time
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from reservation_engine.api.dependencies import build_use_cases
from reservation_engine.infrastructure.db.retry import (
    is_deadlock_error,
    retry_on_deadlock,
    with_deadlock_retry,
)


def _operational_error(message: str) -> OperationalError:
    return OperationalError("statement", "params", message, connection_invalidated=False)


class TestDeadlockDetection:
    """Tests para verificar detección de deadlocks"""

    @pytest.mark.parametrize(
        "message",
        [
            "(asyncmy.errors.OperationalError) (1213, 'Deadlock found when trying to get lock')",
            "(asyncmy.errors.OperationalError) (1205, 'Lock wait timeout exceeded')",
            "(asyncpg.exceptions.SerializationError) SQLSTATE 40001 could not serialize access",
            "(asyncpg.exceptions.DeadlockDetectedError) SQLSTATE 40P01 deadlock detected",
            "(sqlite3.OperationalError) database is locked",
        ],
    )
    def test_detects_transient_lock_errors(self, message):
        assert is_deadlock_error(_operational_error(message)), f"No detectado: {message}"

    def test_ignore_non_deadlock_errors(self):
        # Error genérico
        assert not is_deadlock_error(Exception("Generic error (1213)"))

        # OperationalError pero no deadlock
        other = _operational_error(
            "(asyncmy.errors.OperationalError) (2013, 'Lost connection to MySQL server')"
        )
        assert not is_deadlock_error(other)


class TestRetryLogic:
    async def test_retry_succeeds_on_first_attempt(self):
        call_count = 0

        async def successful_func():
            nonlocal call_count
            call_count += 1
            return "success"

        result = await retry_on_deadlock(successful_func, max_attempts=3)

        assert result == "success"
        assert call_count == 1, "No debería haber retries si tiene éxito"

    async def test_retry_on_deadlock_until_success(self):
        call_count = 0

        async def func_fails_twice_then_succeeds():
            nonlocal call_count
            call_count += 1
            if call_count <= 2:
                raise _operational_error("(1213, 'Deadlock found')")
            return "success_after_retries"

        result = await retry_on_deadlock(
            func_fails_twice_then_succeeds, max_attempts=3, base_delay=0.01
        )

        assert result == "success_after_retries"
        assert call_count == 3

    async def test_retry_fails_after_max_attempts(self):
        call_count = 0

        async def always_fails():
            nonlocal call_count
            call_count += 1
            raise _operational_error("SQLSTATE 40P01 deadlock detected")

        with pytest.raises(OperationalError):
            await retry_on_deadlock(always_fails, max_attempts=3, base_delay=0.01)

        assert call_count == 3, "Debería haber intentado max_attempts veces"

    async def test_non_deadlock_error_not_retried(self):
        call_count = 0

        async def raises_non_deadlock_error():
            nonlocal call_count
            call_count += 1
            raise ValueError("Not a deadlock")

        with pytest.raises(ValueError, match="Not a deadlock"):
            await retry_on_deadlock(raises_non_deadlock_error, max_attempts=3)

        assert call_count == 1

    @pytest.mark.slow
    async def test_exponential_backoff(self):
        """Delays de 0.1s y 0.2s entre intentos."""
        call_times = []

        async def func_always_fails():
            call_times.append(time.monotonic())
            raise _operational_error("(1213, 'Deadlock')")

        with pytest.raises(OperationalError):
            await retry_on_deadlock(func_always_fails, max_attempts=3, base_delay=0.1)

        assert len(call_times) == 3
        delay1 = call_times[1] - call_times[0]
        delay2 = call_times[2] - call_times[1]
        assert 0.08 < delay1 < 0.18, f"Primer delay {delay1:.3f}s no está cerca de 0.1s"
        assert 0.18 < delay2 < 0.30, f"Segundo delay {delay2:.3f}s no está cerca de 0.2s"

    async def test_logs_warning_on_retry(self):
        with patch("reservation_engine.infrastructure.db.retry.logger") as mock_logger:
            call_count = 0

            async def func_fails_once():
                nonlocal call_count
                call_count += 1
                if call_count == 1:
                    raise _operational_error("(1213, 'Deadlock')")
                return "success"

            await retry_on_deadlock(func_fails_once, max_attempts=3, base_delay=0.01)

            assert mock_logger.warning.called, "No se hizo logging del retry"
            message = mock_logger.warning.call_args[0][0]
            assert "deadlock" in message.lower()


class TestDecorator:
    async def test_decorator_basic_usage(self):
        call_count = 0

        @with_deadlock_retry(max_attempts=3, base_delay=0.01)
        async def decorated_func():
            nonlocal call_count
            call_count += 1
            if call_count == 1:
                raise _operational_error("database is locked")
            return "decorated_success"

        assert await decorated_func() == "decorated_success"
        assert call_count == 2


class TestCreateReservationRetry:
    async def test_persist_step_is_retried(self, settings, adapters, make_command):
        attempts = []
        original_lock = adapters["reservation_repo"].lock_resources

        async def lock_with_one_deadlock(resource_ids):
            attempts.append(list(resource_ids))
            if len(attempts) == 1:
                raise _operational_error("(1213, 'Deadlock found')")
            await original_lock(resource_ids)

        adapters["reservation_repo"].lock_resources = lock_with_one_deadlock

        async def fast_retry(func):
            return await retry_on_deadlock(func, max_attempts=3, base_delay=0.001)

        use_cases = build_use_cases(settings=settings, retry_policy=fast_retry, **adapters)

        reservation = await use_cases["create_reservation"].execute(make_command())

        assert len(attempts) == 2
        assert len(adapters["reservation_repo"].reservations) == 1
        assert reservation.total_amount == 20000
