"""Tests for buffered replay of a step trace."""

from algorithms import bfs_steps
from engine import Stepper, StepperState
from graph import GraphStore


def test_start_loads_first_step(chain_store: GraphStore):
    stepper = Stepper()
    assert stepper.state == StepperState.IDLE
    assert stepper.current_step is None

    stepper.start(bfs_steps(chain_store, "A", "D"))

    assert stepper.state == StepperState.PAUSED
    assert stepper.current_step.step_number == 0
    assert stepper.total_steps_fetched == 1


def test_next_pulls_lazily_and_finishes(chain_store: GraphStore):
    stepper = Stepper()
    stepper.start(bfs_steps(chain_store, "A", "D"))

    while stepper.next_step():
        pass

    assert stepper.is_finished
    assert stepper.current_step.is_final
    assert stepper.current_step.path == ["A", "D"]
    assert stepper.next_step() is False


def test_prev_and_rewind(chain_store: GraphStore):
    stepper = Stepper()
    stepper.start(bfs_steps(chain_store, "A", "D"))

    assert stepper.prev_step() is False
    stepper.next_step()
    stepper.next_step()
    assert stepper.prev_step() is True
    assert stepper.current_idx == 1

    stepper.rewind()
    assert stepper.current_idx == 0


def test_goto_and_jump_to_end(chain_store: GraphStore):
    seen = []
    stepper = Stepper(on_step=seen.append)
    stepper.load(list(bfs_steps(chain_store, "A", "D")))

    assert stepper.goto_step(3) is True
    assert stepper.current_step.step_number == 3
    assert stepper.goto_step(999) is False
    assert stepper.goto_step(-1) is False

    stepper.jump_to_end()
    assert stepper.is_finished
    assert seen[-1].is_final


def test_load_single_final_step_is_finished(store: GraphStore):
    stepper = Stepper()
    stepper.load(list(bfs_steps(store, "A", "B")))
    assert stepper.is_finished
    assert stepper.total_steps_fetched == 1


def test_reset(chain_store: GraphStore):
    stepper = Stepper()
    stepper.start(bfs_steps(chain_store, "A", "D"))
    stepper.reset()
    assert stepper.state == StepperState.IDLE
    assert stepper.next_step() is False
