import pytest
from gyrocube import CellLocation, Move, PuzzleController, PuzzleState, RotateDirection

def test_initial_status():
    ctrl = PuzzleController(seed=1)
    assert ctrl.is_solved
    assert ctrl.get_status() == "Solved | outer +1 | middle +0 UP | moves 0 | pending 0"
    assert ctrl.pending_move() is None

def test_requests_go_through_queue():
    """A request is accepted while idle and only committed once its delay has elapsed."""
    ctrl = PuzzleController()
    assert ctrl.request_rotate(CellLocation.LEFT, RotateDirection.YZ)
    assert ctrl.is_solved
    assert ctrl.pending_move().move == Move.turn(CellLocation.LEFT, RotateDirection.YZ)

    #Busy with the pending turn
    assert not ctrl.request_rotate(CellLocation.RIGHT, RotateDirection.YZ)
    assert not ctrl.undo_move()

    ctrl.queue.flush()
    assert not ctrl.is_solved
    assert ctrl.turn_count == 1
    assert ctrl.get_status().startswith("Unsolved")

def test_illegal_requests_rejected():
    ctrl = PuzzleController()
    assert not ctrl.request_rotate(CellLocation.IN, RotateDirection.YZ)
    assert not ctrl.request_rotate(CellLocation.UP, RotateDirection.YZ)
    assert not ctrl.request_rotate_puzzle(RotateDirection.XY)
    assert not ctrl.request_gyro(CellLocation.IN)
    assert not ctrl.request_gyro_outer()
    assert not ctrl.request_gyro_middle(2)
    assert not ctrl.queue.busy
    assert ctrl.snapshot() == PuzzleState()

def test_gyro_request_queues_whole_plan():
    """A gyro gesture queues every docking step before the gyro itself."""
    ctrl = PuzzleController()
    assert ctrl.request_gyro(CellLocation.FRONT)
    assert len(ctrl.queue) == 2
    assert ctrl.queue.flush() == [Move.gyro_middle(0), Move.gyro(CellLocation.FRONT)]
    assert ctrl.state.config == (1, 1, CellLocation.FRONT)
    assert ctrl.turn_count == 2

def test_update_drives_queue():
    ctrl = PuzzleController(speed=4.0)
    assert ctrl.request_gyro_middle(+1)
    committed = [ctrl.update(0.1) for _ in range(3)]
    assert committed == [None, None, Move.gyro_middle(+1)]
    assert ctrl.state.middle_slice_pos == 1

def test_undo_redo():
    ctrl = PuzzleController()
    ctrl.request_gyro(CellLocation.UP)
    ctrl.queue.flush()
    after = ctrl.snapshot()

    assert ctrl.undo_move()
    assert ctrl.snapshot() == PuzzleState()
    assert not ctrl.undo_move()

    assert ctrl.redo_move()
    assert ctrl.snapshot() == after
    assert not ctrl.redo_move()

def test_snapshot_is_a_copy():
    ctrl = PuzzleController()
    snap = ctrl.snapshot()
    snap.middle_slice_pos = 2
    snap.top_cell.colors = snap.bottom_cell.colors
    assert ctrl.state == PuzzleState()

def test_scramble_and_reset():
    a, b = PuzzleController(seed=3), PuzzleController(seed=3)
    assert a.scramble_puzzle(0) == b.scramble_puzzle(0)
    assert a.snapshot() == b.snapshot()
    assert not a.is_solved and a.turn_count == 0

    with pytest.raises(ValueError): a.scramble_puzzle(12)

    a.reset_puzzle()
    assert a.is_solved and a.snapshot() == PuzzleState()
    assert not a.undo_move()

def test_scramble_starts_from_fresh_puzzle():
    """Scrambling discards pending moves and history, so undoing it returns to solved."""
    ctrl = PuzzleController(seed=8)
    ctrl.request_rotate(CellLocation.RIGHT, RotateDirection.XY)
    ctrl.queue.flush()
    ctrl.request_gyro(CellLocation.LEFT)
    ctrl.scramble_puzzle(2)
    assert not ctrl.queue.busy

    assert ctrl.undo_move()
    assert ctrl.snapshot() == PuzzleState()
    assert not ctrl.undo_move()

def test_scramble_ignores_earlier_moves():
    """Same-seed controllers scramble identically whatever was done before."""
    a, b = PuzzleController(seed=3), PuzzleController(seed=3)
    b.request_gyro(CellLocation.LEFT)
    b.queue.flush()
    assert b.request_gyro_middle(-1)

    assert a.scramble_puzzle(0) == b.scramble_puzzle(0)
    assert a.snapshot() == b.snapshot()
    assert a.turn_count == b.turn_count == 0

def test_bad_scramble_depth_leaves_puzzle_alone():
    ctrl = PuzzleController()
    ctrl.request_gyro(CellLocation.UP)
    with pytest.raises(ValueError): ctrl.scramble_puzzle(12)
    assert ctrl.queue.busy
    assert ctrl.snapshot() == PuzzleState()
