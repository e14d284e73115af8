"""Shared test fixtures for tsdown-action tests."""

import io
from pathlib import Path

import pytest
from rich.console import Console
from structlog.typing import FilteringBoundLogger

from tsdown_action import TsdownAction
from tsdown_action.process import (
    ExecutableReference,
    FakeProcessLauncher,
    StaticResolver,
)
from tsdown_action.utils import create_action_logger

LOCAL_CLI = Path("/project/node_modules/tsdown/dist/cli.mjs")


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def log_stream() -> io.StringIO:
    """Stream receiving all records from the ``logger`` fixture."""
    return io.StringIO()


@pytest.fixture
def logger(log_stream: io.StringIO) -> FilteringBoundLogger:
    """Debug-level text logger writing to ``log_stream``."""
    return create_action_logger(debug=True, stream=log_stream)


@pytest.fixture
def fake_launcher() -> FakeProcessLauncher:
    return FakeProcessLauncher()


@pytest.fixture
def local_resolver() -> StaticResolver:
    """Resolver that pretends tsdown is installed under /project."""
    return StaticResolver(
        ExecutableReference(
            program="node",
            prefix=(str(LOCAL_CLI),),
            source="local",
            path=LOCAL_CLI,
        )
    )


@pytest.fixture
def action(
    logger: FilteringBoundLogger,
    local_resolver: StaticResolver,
    fake_launcher: FakeProcessLauncher,
) -> TsdownAction:
    """TsdownAction wired to fakes; nothing is spawned."""
    return TsdownAction(logger, resolver=local_resolver, launcher=fake_launcher)


@pytest.fixture
def console() -> Console:
    return Console(
        width=200,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )
