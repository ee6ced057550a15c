import logging, typing, enum, dataclasses, random
from . import log
from .state import CellLocation
from .move import Move, MoveKind, RotateDirection
from .engine import MoveEngine

class MoveFamily(enum.Enum):
    FREE_TURN = enum.auto()
    SLICE_TURN = enum.auto()
    FREE_GYRO = enum.auto()
    PERIMETER_GYRO = enum.auto()
    OUTER_GYRO = enum.auto()
    MIDDLE = enum.auto()

    @property
    def moves(self) -> typing.List[Move]:
        if self == MoveFamily.FREE_TURN: return [Move.turn(c, d) for c in (CellLocation.LEFT, CellLocation.RIGHT) for d in RotateDirection]
        if self == MoveFamily.SLICE_TURN: return [Move.turn(c, d) for c in (CellLocation.IN, CellLocation.OUT) for d in (RotateDirection.YZ, RotateDirection.ZY)]
        if self == MoveFamily.FREE_GYRO: return [Move.gyro(CellLocation.LEFT), Move.gyro(CellLocation.RIGHT)]
        if self == MoveFamily.PERIMETER_GYRO: return [Move.gyro(c) for c in CellLocation if c.is_perimeter]
        if self == MoveFamily.OUTER_GYRO: return [Move.gyro_outer()]
        if self == MoveFamily.MIDDLE: return [Move.gyro_middle(l) for l in (-1, 0, +1)]
        assert False

FULL_SCRAMBLE_LENGTH = 50
MAX_SCRAMBLE_DEPTH = 8

#Highest depth -> move families a scramble of that depth draws from
SCRAMBLE_TIERS: typing.List[typing.Tuple[int, typing.FrozenSet[MoveFamily]]] = [
    (2, frozenset({MoveFamily.FREE_TURN})),
    (4, frozenset({MoveFamily.FREE_TURN, MoveFamily.SLICE_TURN})),
    (6, frozenset({MoveFamily.FREE_TURN, MoveFamily.SLICE_TURN, MoveFamily.FREE_GYRO})),
    (MAX_SCRAMBLE_DEPTH, frozenset(MoveFamily))
]

def scramble_families(n: int) -> typing.FrozenSet[MoveFamily]:
    if n == 0: return frozenset(MoveFamily)
    if not 1 <= n <= MAX_SCRAMBLE_DEPTH: raise ValueError(f"scramble depth must be between 0 and {MAX_SCRAMBLE_DEPTH}, got {n}")
    return next(fams for depth, fams in SCRAMBLE_TIERS if n <= depth)

def is_redundant(prev: typing.Optional[Move], move: Move) -> bool:
    """Whether move directly simplifies against the move before it"""
    if prev is None: return False
    if move == prev.inverse: return True
    return move.kind == MoveKind.TURN and prev.kind == MoveKind.TURN and move.cell == prev.cell and move.direction.axis == prev.direction.axis

@dataclasses.dataclass
class HistoryEntry:
    moves: typing.List[Move]
    scramble: bool = False

    def __str__(self): return ("scramble " if self.scramble else "") + " ".join(str(m) for m in self.moves)

class History:
    """
    Undo/redo record of the moves committed to a puzzle.

    Every committed primitive is its own entry; a scramble is stored as a
    single entry, so undoing it restores the state from before the scramble.
    """

    engine: MoveEngine

    _undo: typing.List[HistoryEntry]
    _redo: typing.List[HistoryEntry]

    def __init__(self, engine: MoveEngine):
        self.engine = engine
        self._undo = []
        self._redo = []

    @property
    def can_undo(self) -> bool: return len(self._undo) > 0
    @property
    def can_redo(self) -> bool: return len(self._redo) > 0

    @property
    def turn_count(self) -> int:
        """Number of moves made since the last reset or scramble"""
        cnt = 0
        for entry in reversed(self._undo):
            if entry.scramble: break
            cnt += 1
        return cnt

    def apply_move(self, move: Move):
        self.engine.apply(move)
        self._undo.append(HistoryEntry([move]))
        self._redo.clear()

    def undo(self) -> bool:
        if not self.can_undo: return False

        entry = self._undo.pop()
        for move in reversed(entry.moves): self.engine.apply(move.inverse)
        self._redo.append(entry)

        log.LOGGER.log(logging.DEBUG, f"undo {entry}")
        return True

    def redo(self) -> bool:
        if not self.can_redo: return False

        entry = self._redo.pop()
        for move in entry.moves: self.engine.apply(move)
        self._undo.append(entry)

        log.LOGGER.log(logging.DEBUG, f"redo {entry}")
        return True

    def clear(self):
        self._undo.clear()
        self._redo.clear()

    def scramble(self, n: int, seed: typing.Optional[int] = None) -> typing.List[Move]:
        """
        Scrambles the puzzle from its current state. n == 0 is a full scramble,
        1 <= n <= 8 makes n moves drawn from the families of that difficulty tier.
        """
        families = scramble_families(n)
        length = FULL_SCRAMBLE_LENGTH if n == 0 else n
        pool = [m for fam in MoveFamily if fam in families for m in fam.moves]
        rng = random.Random(seed)

        moves: typing.List[Move] = []
        for _ in range(length):
            prev = moves[-1] if len(moves) > 0 else None
            cands = [m for m in pool if self.engine.can_apply(m) and not is_redundant(prev, m)]
            assert len(cands) > 0, f"no scramble move possible at {self.engine.state.config}"

            move = rng.choice(cands)
            self.engine.apply(move)
            moves.append(move)

        self._undo.append(HistoryEntry(moves, scramble=True))
        self._redo.clear()

        log.LOGGER.log(logging.INFO, f"scrambled with {len(moves)} moves (depth {n}, seed {seed})")
        log.LOGGER.log(logging.DEBUG, f"scramble sequence: {' '.join(str(m) for m in moves)}")
        return moves
