import logging, typing
from . import log, state
from .state import CellLocation, PuzzleState, X
from .move import Move, MoveKind, RotateDirection

#Middle slice position (mod 4) -> (x, w) ring slot it docks beside
MIDDLE_DOCKS = {0: (0, +1), 1: (+1, 0), 2: (0, -1), 3: (-1, 0)}

class MoveEngine:
    """
    Sole mutator of a PuzzleState. Every mutator asserts its can_* predicate;
    callers are expected to have checked it first.
    """

    state: PuzzleState

    def __init__(self, st: PuzzleState): self.state = st

    def can_rotate_cell(self, cell: CellLocation, direction: RotateDirection) -> bool:
        st = self.state
        if cell.is_free: return True
        if cell == CellLocation.IN: return direction.axis == X and st.middle_slice_pos != 0
        if cell == CellLocation.OUT: return direction.axis == X and st.middle_slice_pos != 2 * st.outer_slice_pos
        return False

    def can_rotate_puzzle(self, direction: RotateDirection) -> bool: return direction.axis == X

    def can_gyro_cell(self, cell: CellLocation) -> bool:
        st = self.state
        if cell.is_free: return True
        if not cell.is_perimeter: return False
        return st.middle_slice_dir == cell.docking_dir and st.middle_slice_pos in (0, st.outer_slice_pos)

    def can_gyro_outer(self) -> bool: return self.state.middle_slice_pos != 0

    def can_gyro_middle(self, location: int) -> bool:
        st = self.state
        if location == 0: return st.middle_slice_pos == 0
        if location not in (-1, +1): return False
        return st.middle_slice_pos + location in state.middle_slice_positions(st.outer_slice_pos)

    def can_apply(self, move: Move) -> bool:
        if move.kind == MoveKind.TURN: return self.can_rotate_cell(move.cell, move.direction)
        if move.kind == MoveKind.ROTATE: return self.can_rotate_puzzle(move.direction)
        if move.kind == MoveKind.GYRO: return self.can_gyro_cell(move.cell)
        if move.kind == MoveKind.GYRO_OUTER: return self.can_gyro_outer()
        if move.kind == MoveKind.GYRO_MIDDLE: return self.can_gyro_middle(move.location)
        return False

    def rotate_cell(self, cell: CellLocation, direction: RotateDirection):
        assert self.can_rotate_cell(cell, direction), f"illegal turn {cell.name} {direction.name} at {self.state.config}"
        self._move_pieces(Move.turn(cell, direction))

    def rotate_puzzle(self, direction: RotateDirection):
        assert self.can_rotate_puzzle(direction), f"illegal puzzle rotation {direction.name}"
        self._move_pieces(Move.rotate(direction))

        #The floating slice turns with the rest of the puzzle
        self._flip_middle_dir()

    def gyro_cell(self, cell: CellLocation):
        st = self.state
        assert self.can_gyro_cell(cell), f"illegal gyro {cell.name} at {st.config}"
        mv = Move.gyro(cell)
        self._move_pieces(mv)

        if cell.is_free:
            #The outer slice reseats on the other side, the middle slice stays beside the same ring slot
            x, w = MIDDLE_DOCKS[st.middle_slice_pos % 4]
            nx, _, _, nw = state.transform(mv.rot_matrix, (x, 0, 0, w))
            slot = next(k for k, d in MIDDLE_DOCKS.items() if d == (nx, nw))
            st.outer_slice_pos = -st.outer_slice_pos
            st.middle_slice_pos = next(m for m in state.middle_slice_positions(st.outer_slice_pos) if m % 4 == slot)
        else:
            st.middle_slice_pos = st.outer_slice_pos if st.middle_slice_pos == 0 else 0

    def gyro_outer_slice(self):
        st = self.state
        assert self.can_gyro_outer(), f"illegal outer gyro at {st.config}"

        #A middle slice docked on the outer slice travels with it
        if st.middle_slice_pos == 2 * st.outer_slice_pos: st.middle_slice_pos = -st.middle_slice_pos
        st.outer_slice_pos = -st.outer_slice_pos

    def gyro_middle_slice(self, location: int):
        st = self.state
        assert self.can_gyro_middle(location), f"illegal middle slice move {location:+d} at {st.config}"
        if location == 0: self._flip_middle_dir()
        else: st.middle_slice_pos += location

    def apply(self, move: Move):
        if move.kind == MoveKind.TURN: self.rotate_cell(move.cell, move.direction)
        elif move.kind == MoveKind.ROTATE: self.rotate_puzzle(move.direction)
        elif move.kind == MoveKind.GYRO: self.gyro_cell(move.cell)
        elif move.kind == MoveKind.GYRO_OUTER: self.gyro_outer_slice()
        elif move.kind == MoveKind.GYRO_MIDDLE: self.gyro_middle_slice(move.location)
        else: assert False, f"unknown move kind {move.kind}"

        log.LOGGER.log(logging.DEBUG, f"apply {move} -> {self.state.config}")

    def _flip_middle_dir(self):
        st = self.state
        st.middle_slice_dir = CellLocation.FRONT if st.middle_slice_dir == CellLocation.UP else CellLocation.UP

    def _move_pieces(self, move: Move):
        rot_mat: state.Matrix = move.rot_matrix

        #Snapshot every carried piece first, slots are overwritten in place
        carried: typing.List[typing.Tuple[state.Vec4, tuple]] = [(pos, p.colors) for pos, p in self.state if move.carries(pos)]
        for pos, colors in carried:
            npos = state.transform(rot_mat, pos)
            target = self.state[npos]
            assert target.shape == len(colors)

            faced = {}
            for (a, s), col in zip(state.sticker_axes(pos), colors):
                nd = state.transform(rot_mat, state.unit(a, s))
                faced[next(i for i in range(4) if nd[i] != 0)] = col
            target.colors = tuple(faced[a] for a, _ in state.sticker_axes(npos))
