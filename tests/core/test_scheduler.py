import pytest

from superboids.core.scheduler import Scheduler, Stage


def _recorder(log, name):
    def system(world):
        log.append(name)

    system.__name__ = name
    return system


def test_after_dependency_orders_systems(world):
    log = []
    s = Scheduler()
    s.add_system(Stage.SIMULATION, _recorder(log, "b"), after="a")
    s.add_system(Stage.SIMULATION, _recorder(log, "a"))

    s.run_stage(Stage.SIMULATION, world)

    assert log == ["a", "b"]


def test_before_dependency_orders_systems(world):
    log = []
    s = Scheduler()
    s.add_system(Stage.INPUT, _recorder(log, "late"))
    s.add_system(Stage.INPUT, _recorder(log, "early"), before="late")

    s.run_stage(Stage.INPUT, world)

    assert log == ["early", "late"]


def test_stages_are_isolated(world):
    log = []
    s = Scheduler()
    s.add_system(Stage.SIMULATION, _recorder(log, "sim"))
    s.add_system(Stage.RENDER, _recorder(log, "draw"))

    s.run_stage(Stage.RENDER, world)

    assert log == ["draw"]


def test_cycle_raises(world):
    s = Scheduler()
    s.add_system(Stage.SIMULATION, _recorder([], "a"), after="b")
    s.add_system(Stage.SIMULATION, _recorder([], "b"), after="a")

    with pytest.raises(RuntimeError, match="Cycle"):
        s.compile()


def test_cannot_add_after_compile(world):
    s = Scheduler()
    s.compile()

    with pytest.raises(RuntimeError):
        s.add_system(Stage.SIMULATION, _recorder([], "a"))

