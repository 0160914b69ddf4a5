"""Tests for shared/background.py."""

import asyncio
import logging

import pytest

from shared.background import BackgroundTasks


class TestBackgroundTasks:
    @pytest.mark.asyncio
    async def test_spawn_does_not_wait(self):
        """spawn should return before the coroutine finishes."""
        tasks = BackgroundTasks()
        release = asyncio.Event()
        done = []

        async def job():
            await release.wait()
            done.append(True)

        tasks.spawn(job(), name="job")
        assert done == []
        assert tasks.pending == 1

        release.set()
        await tasks.drain()
        assert done == [True]
        assert tasks.pending == 0

    @pytest.mark.asyncio
    async def test_failure_is_logged_not_raised(self, caplog):
        """A failing task should be logged and drained without raising."""
        tasks = BackgroundTasks()

        async def boom():
            raise RuntimeError("kaboom")

        with caplog.at_level(logging.ERROR, logger="shared.background"):
            tasks.spawn(boom(), name="boom")
            await tasks.drain()
            await asyncio.sleep(0)

        assert tasks.pending == 0
        assert any("boom" in record.getMessage() for record in caplog.records)

    @pytest.mark.asyncio
    async def test_drain_with_nothing_pending(self):
        """drain should return immediately when idle."""
        tasks = BackgroundTasks()
        await tasks.drain()
        assert tasks.pending == 0
