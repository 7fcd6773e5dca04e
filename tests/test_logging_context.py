"""Tests for logging context propagation."""

import threading

import pytest

from feedfilter.logging.context import (
    clear_log_context,
    get_log_context,
    log_context,
    pop_log_context,
    push_log_context,
)


@pytest.fixture(autouse=True)
def clean_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


def test_empty_context():
    assert get_log_context() == {}


def test_push_and_pop():
    token = push_log_context(run_id="abc123", item_count=3)
    assert get_log_context() == {"run_id": "abc123", "item_count": 3}

    pop_log_context(token)
    assert get_log_context() == {}


def test_nested_push_merges_and_restores():
    outer = push_log_context(run_id="abc123")
    inner = push_log_context(component="pipeline", run_id="def456")
    assert get_log_context() == {"run_id": "def456", "component": "pipeline"}

    pop_log_context(inner)
    assert get_log_context() == {"run_id": "abc123"}
    pop_log_context(outer)


def test_get_log_context_returns_copy():
    with log_context(run_id="abc123"):
        context = get_log_context()
        context["run_id"] = "changed"
        assert get_log_context() == {"run_id": "abc123"}


def test_context_manager_restores_on_exception():
    with pytest.raises(RuntimeError):
        with log_context(run_id="abc123"):
            raise RuntimeError("boom")

    assert get_log_context() == {}


def test_new_threads_do_not_inherit_context():
    seen = {}

    def worker():
        seen["context"] = get_log_context()

    with log_context(run_id="abc123"):
        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

    assert seen["context"] == {}
