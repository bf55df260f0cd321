"""Polling until a resource reaches a desired status."""

from __future__ import annotations

import enum
import logging
import random
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

log = logging.getLogger(__name__)

_MAX_ATTEMPTS = 1024
_BASE_DELAY = 15.0
_OFFSET_STEPS = 200
_OFFSET_MAX_MS = 5000
_STEP_MULT_MS = _OFFSET_MAX_MS // _OFFSET_STEPS


class WaiterState(enum.Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    RETRY = "retry"


class WaitTimeoutError(TimeoutError):
    """Raised when the desired status is not reached in time."""


@dataclass(frozen=True)
class Acceptor:
    """Maps an observed status at ``argument`` to a waiter state."""

    argument: str
    expected: Any
    state: WaiterState = WaiterState.FAILURE

    def matches(self, status: Any) -> bool:
        """True if status equals the expected value; a list must match in every element."""
        if isinstance(status, (list, tuple)):
            return bool(status) and all(s == self.expected for s in status)
        return status == self.expected


def make_acceptors(status_path: str, success_status: Any, failure_states, *args: Acceptor) -> list[Acceptor]:
    """Build acceptors: success first, then one per failure status, then extras."""
    acceptors = [Acceptor(status_path, success_status, WaiterState.SUCCESS)]
    acceptors.extend(Acceptor(status_path, s, WaiterState.FAILURE) for s in failure_states)
    acceptors.extend(args)
    return acceptors


def make_waiter_delay() -> Callable[[int], float]:
    """Return a delay function giving between 15 and 20 seconds per attempt."""
    offsets = random.sample(range(_OFFSET_STEPS), _OFFSET_STEPS)

    def delay(attempt: int) -> float:
        step = random.randrange(_OFFSET_STEPS)
        return _BASE_DELAY + (_STEP_MULT_MS * offsets[step]) / 1000.0

    return delay


def wait(
    name: str,
    msg: str,
    acceptors: list[Acceptor],
    get_status: Callable[[], Any],
    timeout: float,
    troubleshoot: Optional[Callable[[str], None]],
) -> None:
    """Poll ``get_status`` until an acceptor reports success.

    Raises WaitTimeoutError when ``timeout`` seconds pass, RuntimeError when a
    failure status is reached or ``get_status`` fails. ``troubleshoot`` is
    called with the desired status before any error is raised.
    """
    desired = str(acceptors[0].expected)
    msg = f'{msg} to reach "{desired}" status'
    name = "_".join(["wait", name, desired])

    def fail(exc: Exception) -> Exception:
        if troubleshoot is not None:
            troubleshoot(desired)
        return exc

    start = time.monotonic()
    deadline = start + timeout
    delay = make_waiter_delay()
    log.debug("start %s", msg)

    for attempt in range(1, _MAX_ATTEMPTS + 1):
        if time.monotonic() >= deadline:
            raise fail(WaitTimeoutError(f"{msg}: timed out ({name})"))
        log.debug(msg)
        try:
            status = get_status()
        except Exception as exc:
            raise fail(RuntimeError(f"{msg}: {exc}")) from exc

        for acceptor in acceptors:
            if not acceptor.matches(status):
                continue
            if acceptor.state is WaiterState.SUCCESS:
                log.debug("done after %.1fs of %s", time.monotonic() - start, msg)
                return
            if acceptor.state is WaiterState.FAILURE:
                raise fail(RuntimeError(f"{msg}: reached failure status {status!r}"))
            break

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            continue
        time.sleep(min(delay(attempt), remaining))

    raise fail(WaitTimeoutError(f"{msg}: exceeded {_MAX_ATTEMPTS} attempts ({name})"))