import logging, typing, collections, dataclasses
from . import log
from .state import PuzzleState
from .move import Move
from .history import History

DEFAULT_SPEED = 4.0

@dataclasses.dataclass
class PendingMove:
    move: Move
    length: float
    progress: float = 0

    @property
    def fraction(self) -> float: return min(self.progress / self.length, 1) if self.length > 0 else 1
    @property
    def is_done(self) -> bool: return self.progress > self.length

class MoveQueue:
    """
    FIFO of requested moves waiting for their presentation delay to elapse.
    The head is committed through the history once its progress passes its
    length, then reported to every registered move handler.
    """

    history: History
    speed: float

    _pending: typing.Deque[PendingMove]
    _handlers: typing.List[typing.Callable[[PuzzleState, Move], None]]

    def __init__(self, history: History, speed: float = DEFAULT_SPEED):
        self.history = history
        self.speed = speed

        self._pending = collections.deque()
        self._handlers = []

    @property
    def busy(self) -> bool: return len(self._pending) > 0

    def __len__(self): return len(self._pending)

    def register_handler(self, cb: typing.Callable[[PuzzleState, Move], None]): self._handlers.append(cb)
    def unregister_handler(self, cb: typing.Callable[[PuzzleState, Move], None]): self._handlers.remove(cb)

    def push(self, moves: typing.Iterable[Move]):
        for move in moves: self._pending.append(PendingMove(move, move.anim_length))

    def current(self) -> typing.Optional[PendingMove]: return self._pending[0] if self.busy else None

    def update(self, dt: float) -> typing.Optional[Move]:
        """Advances the head by dt, returns the move committed by this update (if any)"""
        if not self.busy: return None

        head = self._pending[0]
        head.progress += dt * self.speed
        if not head.is_done: return None
        return self._commit()

    def flush(self) -> typing.List[Move]:
        committed = []
        while self.busy: committed.append(self._commit())
        return committed

    def discard(self) -> int:
        cnt = len(self._pending)
        if cnt > 0: log.LOGGER.log(logging.DEBUG, f"discarding {cnt} pending moves")
        self._pending.clear()
        return cnt

    def _commit(self) -> Move:
        move = self._pending.popleft().move

        #Earlier steps of the same gesture may have changed the configuration
        assert self.history.engine.can_apply(move), f"queued move {move} became illegal at {self.history.engine.state.config}"
        self.history.apply_move(move)

        for h in self._handlers: h(self.history.engine.state, move)
        return move
