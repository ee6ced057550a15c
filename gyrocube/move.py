import typing, enum, dataclasses
from . import state
from .state import CellLocation, X, Y, Z, W

class RotateDirection(enum.Enum):
    YZ = 0
    ZY = 1
    ZX = 2
    XZ = 3
    XY = 4
    YX = 5

    @property
    def axis(self) -> int: return self.value // 2
    @property
    def plane(self) -> typing.Tuple[int, int]: return tuple("XYZ".index(c) for c in self.name)
    @property
    def inverse(self) -> "RotateDirection": return RotateDirection[self.name[::-1]]

    def __str__(self): return "xyz"[self.axis] + ("'" if self.value % 2 else "")

class MoveKind(enum.Enum):
    TURN = enum.auto()
    ROTATE = enum.auto()
    GYRO = enum.auto()
    GYRO_OUTER = enum.auto()
    GYRO_MIDDLE = enum.auto()

def cell_frame(cell: CellLocation) -> typing.Optional[typing.List[typing.Tuple[int, int]]]:
    """4D (axis, sign) each physical x/y/z axis of a turnable cell stands for"""
    if cell == CellLocation.LEFT: return [(W, +1), (Y, +1), (Z, +1)]
    if cell == CellLocation.RIGHT: return [(W, -1), (Y, +1), (Z, +1)]
    if cell in (CellLocation.IN, CellLocation.OUT): return [(X, +1), (Y, +1), (Z, +1)]
    return None

@dataclasses.dataclass(frozen=True)
class Move:
    kind: MoveKind
    cell: typing.Optional[CellLocation] = None
    direction: typing.Optional[RotateDirection] = None
    location: int = 0

    @staticmethod
    def turn(cell: CellLocation, direction: RotateDirection) -> "Move": return Move(MoveKind.TURN, cell=cell, direction=direction)
    @staticmethod
    def rotate(direction: RotateDirection) -> "Move": return Move(MoveKind.ROTATE, direction=direction)
    @staticmethod
    def gyro(cell: CellLocation) -> "Move": return Move(MoveKind.GYRO, cell=cell)
    @staticmethod
    def gyro_outer() -> "Move": return Move(MoveKind.GYRO_OUTER)
    @staticmethod
    def gyro_middle(location: int) -> "Move": return Move(MoveKind.GYRO_MIDDLE, location=location)

    @property
    def inverse(self) -> "Move":
        if self.kind == MoveKind.TURN: return Move.turn(self.cell, self.direction.inverse)
        if self.kind == MoveKind.ROTATE: return Move.rotate(self.direction.inverse)
        if self.kind == MoveKind.GYRO: return Move.gyro(self.cell.opposite)
        if self.kind == MoveKind.GYRO_OUTER: return self
        if self.kind == MoveKind.GYRO_MIDDLE: return Move.gyro_middle(-self.location)
        assert False

    @property
    def anim_length(self) -> float:
        """Presentation delay, in animation units, before the move is committed"""
        if self.kind == MoveKind.GYRO: return 4.0 if self.cell.is_free else 3.0
        if self.kind == MoveKind.GYRO_OUTER: return 2.0
        return 1.0

    @property
    def rot_matrix(self) -> typing.Optional[state.Matrix]:
        """4D rotation the move applies to the pieces it carries, None if no piece moves"""
        if self.kind == MoveKind.TURN:
            frame = cell_frame(self.cell)
            assert frame is not None, f"{self.cell.name} cannot be turned"
            (a, sa), (b, sb) = (frame[i] for i in self.direction.plane)
            return state.plane_rotation(a, sa, b, sb)
        if self.kind == MoveKind.ROTATE:
            a, b = self.direction.plane
            return state.plane_rotation(a, 1, b, 1)
        if self.kind == MoveKind.GYRO:
            #The gyrated cell is brought into the inner position
            return state.plane_rotation(self.cell.axis, self.cell.sign, W, +1)
        return None

    def carries(self, pos: state.Vec4) -> bool:
        """Whether the piece at pos moves with this move"""
        if self.kind == MoveKind.TURN: return self.cell.contains(pos)
        return self.kind in (MoveKind.ROTATE, MoveKind.GYRO)

    def __str__(self):
        if self.kind == MoveKind.TURN: return f"{self.cell}{self.direction}"
        if self.kind == MoveKind.ROTATE: return f"*{self.direction}"
        if self.kind == MoveKind.GYRO: return f"{self.cell}!"
        if self.kind == MoveKind.GYRO_OUTER: return "O!"
        return f"M{self.location:+d}" if self.location else "M~"
