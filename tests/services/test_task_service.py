"""Unit tests for TaskListService.

Covers the task lifecycle (add/toggle/delete/clear), the read-only queries,
persistence after each mutation, change notification and the behaviour
when the storage backend rejects writes.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from vibelist.adapters import InMemoryKeyValueRepository
from vibelist.models import (
    ListView,
    StorageOutcome,
    Task,
    TaskValidationError,
    ValidationReason,
)
from vibelist.services.persistent_store import PersistentStore
from vibelist.services.task_service import TaskListService, pluralize_tasks


def _seeded_service(tasks: list[Task]) -> tuple[TaskListService, MagicMock]:
    """Service over a store preloaded with *tasks*, with save() spied on."""
    store = PersistentStore(InMemoryKeyValueRepository())
    store.save(tasks)
    store.save = MagicMock(wraps=store.save)
    return TaskListService(store), store.save


# ---------------------------------------------------------------------------
# add_task
# ---------------------------------------------------------------------------


class TestAddTask:
    def test_returns_created_task(self, service):
        task = service.add_task("Buy milk")

        assert task.text == "Buy milk"
        assert task.completed is False
        assert task.created_at == 1_700_000_000_000
        assert task.id.startswith("1700000000000-")

    def test_trims_surrounding_whitespace(self, service):
        task = service.add_task("   Walk dog \n")
        assert task.text == "Walk dog"

    def test_newest_first(self, service):
        a = service.add_task("a")
        b = service.add_task("b")

        assert [t.id for t in service.all_tasks()] == [b.id, a.id]

    @pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
    def test_blank_text_rejected(self, service, store, raw):
        service.add_task("keep me")
        store.save = MagicMock()

        with pytest.raises(TaskValidationError) as exc_info:
            service.add_task(raw)

        assert exc_info.value.reason is ValidationReason.EMPTY_TEXT
        assert len(service.all_tasks()) == 1
        store.save.assert_not_called()

    def test_ids_are_unique(self, store):
        # Same timestamp every time, so uniqueness comes from the random token
        service = TaskListService(store, clock=lambda: 42)
        ids = [service.add_task(f"task {i}").id for i in range(200)]
        assert len(set(ids)) == len(ids)

    def test_uses_injected_id_factory(self, store, clock):
        service = TaskListService(store, clock=clock, id_factory=lambda ts: f"id-{ts}")
        assert service.add_task("x").id == "id-1700000000000"

    def test_persists_after_add(self, service, store):
        task = service.add_task("Buy milk")
        assert [t.id for t in store.load()] == [task.id]


# ---------------------------------------------------------------------------
# toggle_task / delete_task
# ---------------------------------------------------------------------------


class TestToggleTask:
    def test_flips_completed_both_ways(self, service):
        task = service.add_task("Buy milk")

        assert service.toggle_task(task.id).completed is True
        assert service.toggle_task(task.id).completed is False

    def test_persists_flag(self, service, store):
        task = service.add_task("Buy milk")
        service.toggle_task(task.id)

        assert store.load()[0].completed is True

    def test_unknown_id_is_noop(self, service, store):
        service.add_task("Buy milk")
        before = service.all_tasks()
        store.save = MagicMock()

        assert service.toggle_task("missing") is None
        assert service.all_tasks() == before
        store.save.assert_not_called()

    def test_does_not_reorder(self, service):
        a = service.add_task("a")
        b = service.add_task("b")
        service.toggle_task(a.id)

        assert [t.id for t in service.all_tasks()] == [b.id, a.id]


class TestDeleteTask:
    def test_removes_task(self, service, store):
        a = service.add_task("a")
        b = service.add_task("b")

        removed = service.delete_task(a.id)

        assert removed.id == a.id
        assert [t.id for t in service.all_tasks()] == [b.id]
        assert [t.id for t in store.load()] == [b.id]

    def test_unknown_id_is_noop(self, service, store):
        service.add_task("a")
        before = service.all_tasks()
        store.save = MagicMock()

        assert service.delete_task("missing") is None
        assert service.all_tasks() == before
        store.save.assert_not_called()


# ---------------------------------------------------------------------------
# clear_completed
# ---------------------------------------------------------------------------


class TestClearCompleted:
    def test_batch_clear_writes_once(self):
        service, save = _seeded_service(
            [
                Task(id="1", text="one", completed=True),
                Task(id="2", text="two", completed=False),
                Task(id="3", text="three", completed=True),
            ]
        )

        removed = service.clear_completed()

        assert [t.id for t in removed] == ["1", "3"]
        assert [t.id for t in service.all_tasks()] == ["2"]
        save.assert_called_once()

    def test_nothing_completed_keeps_list(self):
        service, _ = _seeded_service([Task(id="1", text="one")])

        assert service.clear_completed() == []
        assert [t.id for t in service.all_tasks()] == ["1"]


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


class TestQueries:
    def test_empty_service(self, service):
        assert service.all_tasks() == ()
        assert service.remaining_count() == 0
        assert service.has_completed() is False
        assert service.is_empty() is True

    def test_all_tasks_returns_copies(self, service):
        task = service.add_task("Buy milk")
        snapshot = service.all_tasks()
        snapshot[0].completed = True

        assert service.get_task(task.id).completed is False
        assert isinstance(snapshot, tuple)

    def test_get_task(self, service):
        task = service.add_task("Buy milk")

        assert service.get_task(task.id) == task
        assert service.get_task("missing") is None

    @pytest.mark.parametrize(
        ("count", "expected"), [(0, "0 tasks"), (1, "1 task"), (2, "2 tasks")]
    )
    def test_count_wording(self, service, count, expected):
        for i in range(count):
            service.add_task(f"task {i}")

        assert pluralize_tasks(service.remaining_count()) == expected
        assert service.remaining_label() == f"{expected} remaining"

    def test_view_snapshot(self, service):
        a = service.add_task("a")
        service.add_task("b")
        service.toggle_task(a.id)

        view = service.view()

        assert isinstance(view, ListView)
        assert [t.text for t in view.tasks] == ["b", "a"]
        assert view.remaining_count == 1
        assert view.remaining_label == "1 task remaining"
        assert view.is_empty is False
        assert view.show_clear_completed is True


# ---------------------------------------------------------------------------
# Startup and storage interaction
# ---------------------------------------------------------------------------


class TestStartup:
    def test_loads_store_exactly_once(self):
        store = MagicMock()
        store.load.return_value = [Task(id="1", text="one")]

        service = TaskListService(store)
        service.all_tasks()
        service.remaining_count()

        store.load.assert_called_once_with()

    def test_restores_previous_session(self, store, clock):
        first = TaskListService(store, clock=clock)
        a = first.add_task("Buy milk")
        b = first.add_task("Walk dog")
        first.toggle_task(a.id)

        second = TaskListService(store)

        assert second.all_tasks() == first.all_tasks()
        assert [t.id for t in second.all_tasks()] == [b.id, a.id]

    def test_corrupt_storage_starts_empty(self, repository):
        repository.set_item("vibelist_tasks", "{not json")

        service = TaskListService(PersistentStore(repository))

        assert service.all_tasks() == ()


class TestWriteFailures:
    def test_in_memory_state_stays_authoritative(self):
        store = PersistentStore(InMemoryKeyValueRepository(quota_bytes=10))
        service = TaskListService(store)

        task = service.add_task("This will not fit in ten bytes")
        service.toggle_task(task.id)

        assert service.get_task(task.id).completed is True
        assert service.remaining_count() == 0
        assert service.last_save_result.outcome is StorageOutcome.WRITE_FAILED

    def test_successful_write_reported(self, service):
        service.add_task("Buy milk")
        assert service.last_save_result.ok


# ---------------------------------------------------------------------------
# Change notification
# ---------------------------------------------------------------------------


class TestSubscribe:
    def test_subscribe_sends_current_view(self, service):
        service.add_task("a")
        listener = MagicMock()

        service.subscribe(listener)

        listener.assert_called_once()
        assert listener.call_args[0][0].remaining_count == 1

    def test_listener_notified_after_mutations(self, service):
        listener = MagicMock()
        service.subscribe(listener)
        listener.reset_mock()

        task = service.add_task("a")
        service.toggle_task(task.id)
        service.toggle_task("missing")
        service.delete_task(task.id)

        assert listener.call_count == 3
        assert listener.call_args[0][0].is_empty is True

    def test_unsubscribe_stops_notifications(self, service):
        listener = MagicMock()
        service.subscribe(listener)
        service.unsubscribe(listener)
        listener.reset_mock()

        service.add_task("a")

        listener.assert_not_called()


# ---------------------------------------------------------------------------
# End-to-end scenario
# ---------------------------------------------------------------------------


def test_buy_milk_walk_dog_scenario(service):
    milk = service.add_task("Buy milk")
    service.add_task("Walk dog")
    service.toggle_task(milk.id)

    tasks = service.all_tasks()
    assert service.remaining_count() == 1
    assert service.has_completed() is True
    assert [t.text for t in tasks] == ["Walk dog", "Buy milk"]
    assert tasks[1].completed is True


def test_clear_with_nothing_completed_does_not_notify(service):
    service.add_task("a")
    listener = MagicMock()
    service.subscribe(listener)
    listener.reset_mock()

    service.clear_completed()

    listener.assert_not_called()
