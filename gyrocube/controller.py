import logging, typing, random
from . import log
from .state import CellLocation, PuzzleState
from .move import Move, RotateDirection
from .engine import MoveEngine
from .planner import GyroPlanner
from .history import History, scramble_families
from .move_queue import MoveQueue, PendingMove, DEFAULT_SPEED

class PuzzleController:
    """
    Owns one puzzle and everything operating on it. Input requests go through
    the move queue (one gesture at a time), shell commands act immediately.
    """

    state: PuzzleState
    engine: MoveEngine
    planner: GyroPlanner
    history: History
    queue: MoveQueue

    _rng: random.Random

    def __init__(self, seed: typing.Optional[int] = None, speed: float = DEFAULT_SPEED):
        self.state = PuzzleState()
        self.engine = MoveEngine(self.state)
        self.planner = GyroPlanner(self.engine)
        self.history = History(self.engine)
        self.queue = MoveQueue(self.history, speed)
        self._rng = random.Random(seed)

    @property
    def turn_count(self) -> int: return self.history.turn_count
    @property
    def is_solved(self) -> bool: return self.state.is_solved

    def snapshot(self) -> PuzzleState: return self.state.copy()
    def pending_move(self) -> typing.Optional[PendingMove]: return self.queue.current()

    def update(self, dt: float) -> typing.Optional[Move]: return self.queue.update(dt)

    def request_rotate(self, cell: CellLocation, direction: RotateDirection) -> bool:
        return self._request([Move.turn(cell, direction)])

    def request_gyro(self, cell: CellLocation) -> bool:
        return self._request(self.planner.plan(cell))

    def request_rotate_puzzle(self, direction: RotateDirection) -> bool:
        return self._request([Move.rotate(direction)])

    def request_gyro_outer(self) -> bool:
        return self._request([Move.gyro_outer()])

    def request_gyro_middle(self, location: int) -> bool:
        return self._request([Move.gyro_middle(location)])

    def reset_puzzle(self):
        self.queue.discard()
        self.state.reset()
        self.history.clear()
        log.LOGGER.log(logging.INFO, "puzzle reset")

    def scramble_puzzle(self, n: int) -> typing.List[Move]:
        """Replaces the puzzle with a freshly scrambled one"""
        #Rejects a bad depth before the puzzle is touched
        scramble_families(n)
        self.reset_puzzle()
        return self.history.scramble(n, self._rng.randrange(1 << 32))

    def undo_move(self) -> bool:
        if self.queue.busy: return False
        return self.history.undo()

    def redo_move(self) -> bool:
        if self.queue.busy: return False
        return self.history.redo()

    def get_status(self) -> str:
        o, m, d = self.state.config
        return f"{'Solved' if self.state.is_solved else 'Unsolved'} | outer {o:+d} | middle {m:+d} {d.name} | moves {self.turn_count} | pending {len(self.queue)}"

    def _request(self, moves: typing.List[Move]) -> bool:
        if self.queue.busy or len(moves) == 0: return False

        #Later steps are checked against the configuration the earlier ones leave behind
        scratch = MoveEngine(self.state.copy())
        for move in moves:
            if not scratch.can_apply(move): return False
            scratch.apply(move)

        self.queue.push(moves)
        log.LOGGER.log(logging.DEBUG, f"queued {' '.join(str(m) for m in moves)}")
        return True
