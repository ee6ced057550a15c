import logging, typing
from . import log
from .state import CellLocation
from .move import Move
from .engine import MoveEngine

class GyroPlanner:
    """
    Turns a "gyro this cell" gesture into the ordered primitives that perform it.

    Left/Right gyrate directly. A perimeter cell (Up/Down/Front/Back) can only be
    gyrated once the middle slice sits at the inner dock or over the free cell
    next to the outer slice, oriented along the cell's axis, so the plan first
    moves the middle slice there:

    1. at -outer: gyro the outer slice across, which leaves the middle slice
       next to the new outer side
    2. at 2*outer: step the middle slice back over the free cell
    3. orientation mismatch: walk to the inner dock and flip it there
    4. gyro the cell

    The plan is worked out against a copy of the configuration variables only;
    pieces never affect legality.
    """

    engine: MoveEngine

    def __init__(self, engine: MoveEngine): self.engine = engine

    def plan(self, cell: CellLocation) -> typing.List[Move]:
        if cell.is_free: return [Move.gyro(cell)]
        if not cell.is_perimeter: return []

        o, m, d = self.engine.state.config
        steps = []

        if m == -o:
            steps.append(Move.gyro_outer())
            o = -o
        elif m == 2 * o:
            steps.append(Move.gyro_middle(-o))
            m = o

        if d != cell.docking_dir:
            if m != 0:
                steps.append(Move.gyro_middle(-m))
                m = 0
            steps.append(Move.gyro_middle(0))

        steps.append(Move.gyro(cell))
        log.LOGGER.log(logging.DEBUG, f"plan {cell.name}: {' '.join(str(s) for s in steps)}")
        return steps
