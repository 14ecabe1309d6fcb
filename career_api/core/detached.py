import logging
from typing import Any, Callable

from fastapi import BackgroundTasks

logger = logging.getLogger(__name__)


def log_detached_failure(exc: BaseException) -> None:
    logger.error("Detached task failed: %s", exc, exc_info=exc)


def spawn_detached(
    tasks: BackgroundTasks,
    fn: Callable[..., Any],
    *args: Any,
    on_error: Callable[[BaseException], None] = log_detached_failure,
) -> None:
    """Run fn(*args) after the response has been sent.

    The caller never sees the outcome. A failure is handed to on_error and
    goes no further, which is how a paid session can end up with no analysis.
    """

    def runner() -> None:
        try:
            fn(*args)
        except Exception as e:
            on_error(e)

    tasks.add_task(runner)
