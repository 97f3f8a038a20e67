"""Error boundary handling for CLI commands.

Well-known exceptions are shown as a single `Error: ...` line with exit
status 1. With `--debug` they propagate with a full stack trace. All other
exceptions bubble up normally.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any

import click

from ai_skills.errors import AiSkillsError

logger = logging.getLogger(__name__)

WELL_KNOWN_ERRORS: tuple[type[Exception], ...] = (
    AiSkillsError,
    OSError,
    ValueError,
)


def _debug_enabled() -> bool:
    ctx = click.get_current_context(silent=True)
    if ctx is None:
        return False
    obj = ctx.find_root().obj
    return bool(getattr(obj, "debug", False))


def cli_error_boundary[T: Callable[..., Any]](func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except WELL_KNOWN_ERRORS as e:
            if _debug_enabled():
                raise
            logger.debug("Command failed", exc_info=True)
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
