from gyrocube import CellLocation, Move, MoveEngine, MoveQueue, History, PuzzleState, RotateDirection

def new_queue(speed: float = 4.0) -> MoveQueue: return MoveQueue(History(MoveEngine(PuzzleState())), speed)

def test_commit_after_delay():
    """A move is committed only once its progress passes its length."""
    q = new_queue()
    lx = Move.turn(CellLocation.LEFT, RotateDirection.YZ)
    q.push([lx])
    assert q.busy and q.current().move == lx

    assert q.update(0.1) is None
    assert q.history.engine.state.is_solved
    assert abs(q.current().fraction - 0.4) < 1e-9

    assert q.update(0.2) == lx
    assert not q.busy and q.current() is None
    assert not q.history.engine.state.is_solved
    assert q.history.turn_count == 1

def test_one_commit_per_update():
    q = new_queue()
    q.push([Move.gyro_middle(0), Move.gyro(CellLocation.FRONT)])
    assert q.update(10) == Move.gyro_middle(0)
    assert len(q) == 1
    assert q.current().progress == 0
    assert q.update(10) == Move.gyro(CellLocation.FRONT)
    assert q.update(10) is None

def test_gyro_takes_longer_than_turn():
    q = new_queue(speed=1.0)
    q.push([Move.gyro(CellLocation.LEFT)])
    assert q.update(3.5) is None
    assert q.update(1.0) == Move.gyro(CellLocation.LEFT)

def test_flush_and_discard():
    q = new_queue()
    steps = [Move.gyro_middle(+1), Move.gyro_middle(+1), Move.gyro_outer()]
    q.push(steps)
    assert q.flush() == steps
    assert q.history.engine.state.config == (-1, -2, CellLocation.UP)

    q.push([Move.gyro_outer()])
    assert q.discard() == 1
    assert not q.busy
    assert q.history.engine.state.config == (-1, -2, CellLocation.UP)

def test_move_handlers():
    """Committed moves are reported with the resulting state."""
    q = new_queue()
    seen = []
    def cb(st, mv): seen.append((st.config, mv))

    q.register_handler(cb)
    q.push([Move.gyro(CellLocation.UP)])
    q.flush()
    assert seen == [((1, 1, CellLocation.UP), Move.gyro(CellLocation.UP))]

    q.unregister_handler(cb)
    q.push([Move.gyro(CellLocation.DOWN)])
    q.flush()
    assert len(seen) == 1
