import copy
import threading

import pytest

from reqkit.singleton import Singleton


def _make_class(name):
    class Counted(Singleton):
        constructed = 0

        def __init__(self):
            type(self).constructed += 1

    Counted.__name__ = name
    return Counted


def test_get_instance_returns_same_object():
    cls = _make_class("Registry")
    first = Singleton.get_instance.__func__(cls)
    second = Singleton.get_instance.__func__(cls)
    assert first is second
    assert cls.constructed == 1


def test_subclasses_have_separate_instances():
    first_cls = _make_class("First")
    second_cls = _make_class("Second")
    first = Singleton.get_instance.__func__(first_cls)
    second = Singleton.get_instance.__func__(second_cls)
    assert first is not second
    assert isinstance(first, first_cls)
    assert isinstance(second, second_cls)


def test_exit_instance_releases_for_good():
    cls = _make_class("Released")
    Singleton.get_instance.__func__(cls)
    Singleton.exit_instance.__func__(cls)
    assert Singleton.get_instance.__func__(cls) is None
    assert cls.constructed == 1


def test_exit_instance_twice_is_harmless():
    cls = _make_class("Twice")
    Singleton.get_instance.__func__(cls)
    Singleton.exit_instance.__func__(cls)
    Singleton.exit_instance.__func__(cls)
    assert Singleton.get_instance.__func__(cls) is None


def test_exit_before_get_raises():
    cls = _make_class("Unused")
    with pytest.raises(RuntimeError):
        Singleton.exit_instance.__func__(cls)


def test_failed_construction_can_be_retried():
    class Flaky(Singleton):
        attempts = 0

        def __init__(self):
            type(self).attempts += 1
            if type(self).attempts == 1:
                raise OSError("not ready")

    with pytest.raises(OSError):
        Singleton.get_instance.__func__(Flaky)
    instance = Singleton.get_instance.__func__(Flaky)
    assert isinstance(instance, Flaky)
    assert Flaky.attempts == 2


def test_instances_cannot_be_copied():
    cls = _make_class("Uncopyable")
    instance = Singleton.get_instance.__func__(cls)
    with pytest.raises(TypeError):
        copy.copy(instance)
    with pytest.raises(TypeError):
        copy.deepcopy(instance)


def test_concurrent_get_instance_constructs_once():
    cls = _make_class("Shared")
    barrier = threading.Barrier(8)
    seen = []
    lock = threading.Lock()

    def fetch():
        barrier.wait()
        instance = Singleton.get_instance.__func__(cls)
        with lock:
            seen.append(instance)

    threads = [threading.Thread(target=fetch) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(seen) == 8
    assert all(item is seen[0] for item in seen)
    assert cls.constructed == 1
    assert Singleton.get_instance.__func__(cls) is seen[0]