import logging
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from slotforge.errors import InvalidArgumentError, SlotOutOfRangeError
from slotforge.models import ContainerType
from slotforge.services.event_registry import EventRegistry


def h1(_):
    pass


def h2(_):
    pass


@pytest.fixture
def chest(factory):
    return factory.create(None, "Chest", 27)


def test_click_without_slots_binds_every_slot(registry, chest):
    registry.set_click(chest, h1)
    assert all(registry.resolve_click(chest, i) is h1 for i in range(chest.size))
    assert registry.bound_slots(chest) == tuple(range(27))


def test_click_with_slots_binds_only_those(registry, chest):
    registry.set_click(chest, h1, 2, 5)
    assert registry.resolve_click(chest, 2) is h1
    assert registry.resolve_click(chest, 5) is h1
    assert registry.resolve_click(chest, 0) is None


def test_last_write_wins_and_keeps_other_slots(registry, chest):
    registry.set_click(chest, h1, 2, 5)
    registry.set_click(chest, h2, 2)
    assert registry.resolve_click(chest, 2) is h2
    assert registry.resolve_click(chest, 5) is h1


def test_repeat_registration_mutates_existing_entry(registry, chest):
    registry.set_click(chest, h1, 1)
    registry.set_drag(chest, h2)
    registry.set_click(chest, h2, 3)
    assert registry.resolve_click(chest, 1) is h1
    assert registry.resolve_click(chest, 3) is h2
    assert registry.resolve_drag(chest) is h2
    assert len(registry) == 1


def test_out_of_range_slot_fails_without_partial_mutation(registry, chest):
    with pytest.raises(SlotOutOfRangeError) as exc:
        registry.set_click(chest, h1, 3, 27)
    assert exc.value.context == {"slot": 27, "size": 27}
    assert registry.resolve_click(chest, 3) is None
    assert not registry.is_registered(chest)
    with pytest.raises(SlotOutOfRangeError):
        registry.set_click(chest, h1, -1)


def test_invalid_handler_rejected(registry, chest):
    with pytest.raises(InvalidArgumentError):
        registry.set_click(chest, None)
    with pytest.raises(InvalidArgumentError):
        registry.set_close(chest, "not callable")


def test_resolve_never_raises(registry, chest):
    assert registry.resolve_click(chest, 999) is None
    assert registry.resolve_click(chest, -5) is None
    registry.set_click(chest, h1)
    assert registry.resolve_click(chest, 999) is None
    assert registry.resolve_drag(chest) is None
    assert registry.resolve_close(chest) is None


def test_drag_and_close_replace(registry, chest):
    registry.set_drag(chest, h1)
    registry.set_drag(chest, h2)
    registry.set_close(chest, h1)
    registry.set_close(chest, h2)
    assert registry.resolve_drag(chest) is h2
    assert registry.resolve_close(chest) is h2


def test_identical_surfaces_are_isolated(registry, factory):
    a = factory.create(None, "Same", 27)
    b = factory.create(None, "Same", 27)
    registry.set_click(a, h1)
    registry.set_close(b, h2)
    assert registry.resolve_click(b, 0) is None
    assert registry.resolve_close(a) is None
    assert len(registry) == 2


def test_release_clears_everything_and_is_idempotent(registry, chest):
    registry.set_click(chest, h1)
    registry.set_drag(chest, h1)
    registry.set_close(chest, h1)
    assert registry.release(chest) is True
    assert all(registry.resolve_click(chest, i) is None for i in range(chest.size))
    assert registry.resolve_drag(chest) is None
    assert registry.resolve_close(chest) is None
    assert registry.release(chest) is False
    assert len(registry) == 0


def test_release_unknown_surface_is_safe(registry, factory):
    assert registry.release(factory.create(None, "x", ContainerType.HOPPER)) is False


def test_entry_dropped_when_all_handlers_removed(registry, chest):
    registry.set_click(chest, h1, 1, 2)
    registry.set_close(chest, h2)
    registry.remove_click(chest, 1)
    assert registry.bound_slots(chest) == (2,)
    registry.remove_click(chest)
    assert registry.is_registered(chest)
    registry.remove_close(chest)
    assert not registry.is_registered(chest)
    registry.remove_drag(chest)  # unknown surface, no-op
    assert len(registry) == 0


def test_surfaces_snapshot_and_clear(registry, factory):
    a = factory.create(None, "a", 9)
    b = factory.create(None, "b", 9)
    registry.set_drag(a, h1)
    registry.set_drag(b, h1)
    snapshot = registry.surfaces()
    assert any(s is a for s in snapshot) and any(s is b for s in snapshot)
    registry.clear()
    assert len(registry) == 0


def test_growth_warning_logged_once(factory, caplog):
    reg = EventRegistry(warn_threshold=2)
    surfaces = [factory.create(None, str(i), 9) for i in range(4)]
    with caplog.at_level(logging.WARNING, logger="slotforge.services.event_registry"):
        for s in surfaces:
            reg.set_close(s, h1)
    warnings = [r for r in caplog.records if "without release" in r.getMessage()]
    assert len(warnings) == 1


def test_concurrent_registration_builds_single_entry(registry, chest):
    barrier = threading.Barrier(8)

    def bind(slot):
        barrier.wait()
        registry.set_click(chest, h1, slot)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(bind, range(8)))
    assert len(registry) == 1
    assert registry.bound_slots(chest) == tuple(range(8))


def test_concurrent_register_and_resolve(registry, factory):
    surfaces = [factory.create(None, str(i), 54) for i in range(20)]
    errors = []

    def writer():
        for s in surfaces:
            registry.set_click(s, h1)

    def reader():
        try:
            for _ in range(50):
                for s in surfaces:
                    handler = registry.resolve_click(s, 53)
                    assert handler in (None, h1)
        except AssertionError as exc:  # pragma: no cover - only on failure
            errors.append(exc)

    threads = [threading.Thread(target=writer)] + [threading.Thread(target=reader) for _ in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert not errors
    assert all(registry.resolve_click(s, 53) is h1 for s in surfaces)


def test_resolve_click_ignores_bool_and_non_int_slots(registry, chest):
    registry.set_click(chest, h1, 0, 1)
    assert registry.resolve_click(chest, True) is None
    assert registry.resolve_click(chest, False) is None
    assert registry.resolve_click(chest, "1") is None
    assert registry.resolve_click(chest, 1.0) is None
    assert registry.resolve_click(chest, 1) is h1
    with pytest.raises(InvalidArgumentError):
        registry.set_click(chest, h2, True)
