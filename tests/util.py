import random, typing
from gyrocube import CellLocation, Move, MoveEngine, PuzzleState, RotateDirection, MoveFamily, state

ALL_MOVES: typing.List[Move] = [m for fam in MoveFamily for m in fam.moves] + [Move.rotate(d) for d in RotateDirection]
GYRO_TARGETS = [CellLocation.LEFT, CellLocation.RIGHT, CellLocation.UP, CellLocation.DOWN, CellLocation.FRONT, CellLocation.BACK]

def all_configs() -> typing.List[typing.Tuple[int, int, CellLocation]]:
    """Every valid (outer, middle, orientation) configuration"""
    return [(o, m, d) for o in (-1, +1) for m in state.middle_slice_positions(o) for d in (CellLocation.UP, CellLocation.FRONT)]

def engine_at(config, scrambled: bool = False) -> MoveEngine:
    st = PuzzleState()
    st.outer_slice_pos, st.middle_slice_pos, st.middle_slice_dir = config
    eng = MoveEngine(st)
    if scrambled:
        #Turns of the free cells never touch the configuration
        rng = random.Random(1234)
        for _ in range(10): eng.rotate_cell(rng.choice([CellLocation.LEFT, CellLocation.RIGHT]), rng.choice(list(RotateDirection)))
    return eng

def legal_moves(eng: MoveEngine) -> typing.List[Move]: return [m for m in ALL_MOVES if eng.can_apply(m)]

def random_walk(eng: MoveEngine, n: int, seed: int, apply=None) -> typing.List[Move]:
    rng = random.Random(seed)
    moves = []
    for _ in range(n):
        move = rng.choice(legal_moves(eng))
        (apply or eng.apply)(move)
        moves.append(move)
    return moves
