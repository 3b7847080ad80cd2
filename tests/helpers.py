"""Shared helpers for the aiterate test suite."""

import asyncio

import pytest
from kungfu import Error, Ok


async def later(value, delay=0.0):
    """Awaitable that settles to `value` after `delay` seconds."""
    if delay:
        await asyncio.sleep(delay)
    return value


async def explode(exc):
    """Awaitable that fails with `exc`."""
    await asyncio.sleep(0)
    raise exc


def error_of(result):
    """Extract the error from a Result, failing the test on Ok."""
    match result:
        case Error(e):
            return e
        case Ok(v):
            pytest.fail(f"expected Error, got Ok({v!r})")
