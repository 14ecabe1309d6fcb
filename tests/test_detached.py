import asyncio

from fastapi import BackgroundTasks

from career_api.core.detached import spawn_detached


def test_runs_after_scheduling_with_arguments():
    seen = []
    tasks = BackgroundTasks()
    spawn_detached(tasks, lambda a, b: seen.append((a, b)), 1, "x")
    assert seen == []

    asyncio.run(tasks())
    assert seen == [(1, "x")]


def test_failure_goes_to_on_error_only():
    errors = []

    def boom():
        raise RuntimeError("upstream down")

    tasks = BackgroundTasks()
    spawn_detached(tasks, boom, on_error=errors.append)
    asyncio.run(tasks())

    assert len(errors) == 1
    assert str(errors[0]) == "upstream down"
