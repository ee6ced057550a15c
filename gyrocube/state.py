import typing, enum, copy, collections

Vec4 = typing.Tuple[int, int, int, int]
Matrix = typing.List[typing.List[int]]

X, Y, Z, W = range(4)

class Color(enum.Enum):
    RED = 'R'
    ORANGE = 'O'
    WHITE = 'W'
    YELLOW = 'Y'
    GREEN = 'G'
    BLUE = 'B'
    PINK = 'P'
    PURPLE = 'V'

class CellLocation(enum.Enum):
    IN = enum.auto()
    OUT = enum.auto()
    RIGHT = enum.auto()
    LEFT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    FRONT = enum.auto()
    BACK = enum.auto()

    @property
    def direction(self) -> Vec4: return {
        CellLocation.RIGHT: (+1,  0,  0,  0),
        CellLocation.LEFT:  (-1,  0,  0,  0),
        CellLocation.UP:    ( 0, +1,  0,  0),
        CellLocation.DOWN:  ( 0, -1,  0,  0),
        CellLocation.FRONT: ( 0,  0, +1,  0),
        CellLocation.BACK:  ( 0,  0, -1,  0),
        CellLocation.IN:    ( 0,  0,  0, +1),
        CellLocation.OUT:   ( 0,  0,  0, -1)
    }[self]

    @property
    def color(self) -> Color: return {
        CellLocation.RIGHT: Color.RED,
        CellLocation.LEFT: Color.ORANGE,
        CellLocation.UP: Color.WHITE,
        CellLocation.DOWN: Color.YELLOW,
        CellLocation.FRONT: Color.GREEN,
        CellLocation.BACK: Color.BLUE,
        CellLocation.IN: Color.PINK,
        CellLocation.OUT: Color.PURPLE
    }[self]

    @property
    def opposite(self) -> "CellLocation": return {
        CellLocation.RIGHT: CellLocation.LEFT,
        CellLocation.LEFT: CellLocation.RIGHT,
        CellLocation.UP: CellLocation.DOWN,
        CellLocation.DOWN: CellLocation.UP,
        CellLocation.FRONT: CellLocation.BACK,
        CellLocation.BACK: CellLocation.FRONT,
        CellLocation.IN: CellLocation.OUT,
        CellLocation.OUT: CellLocation.IN
    }[self]

    @property
    def axis(self) -> int: return next(i for i, c in enumerate(self.direction) if c != 0)
    @property
    def sign(self) -> int: return self.direction[self.axis]

    @property
    def is_free(self) -> bool: return self in (CellLocation.LEFT, CellLocation.RIGHT)
    @property
    def is_perimeter(self) -> bool: return self.axis in (Y, Z)

    @property
    def docking_dir(self) -> typing.Optional["CellLocation"]:
        """Middle slice orientation a gyro of this perimeter cell needs"""
        if self.axis == Y: return CellLocation.UP
        if self.axis == Z: return CellLocation.FRONT
        return None

    def contains(self, pos: Vec4) -> bool: return sum(p * d for p, d in zip(pos, self.direction)) == 1

    @staticmethod
    def from_direction(direction: Vec4) -> "CellLocation": return next(c for c in CellLocation if c.direction == tuple(direction))

    def __str__(self): return self.name[0]

def unit(axis: int, sign: int = 1) -> Vec4: return tuple(sign if i == axis else 0 for i in range(4))

def sticker_axes(pos: Vec4) -> typing.List[typing.Tuple[int, int]]:
    """(axis, sign) of every sticker a piece at this position carries, in axis order"""
    return [(i, c) for i, c in enumerate(pos) if c != 0]

def plane_rotation(a_axis: int, a_sign: int, b_axis: int, b_sign: int) -> Matrix:
    """Quarter turn taking a_sign*e_a onto b_sign*e_b (and b_sign*e_b onto -a_sign*e_a)"""
    s = a_sign * b_sign
    assert a_axis != b_axis
    mat = [[1 if i == j else 0 for j in range(4)] for i in range(4)]
    mat[a_axis] = list(unit(b_axis, s))
    mat[b_axis] = list(unit(a_axis, -s))
    return mat

def transform(mat: Matrix, vec: Vec4) -> Vec4: return tuple(sum(mat[oi][ni] * vec[oi] for oi in range(4)) for ni in range(4))

def mat_mul(a: Matrix, b: Matrix) -> Matrix: return [list(transform(b, tuple(row))) for row in a]

IDENTITY: Matrix = [[1 if i == j else 0 for j in range(4)] for i in range(4)]

#Whole-puzzle frames reachable by reorienting about the long axis
SOLVED_FRAMES: typing.List[Matrix] = [IDENTITY]
for _ in range(3): SOLVED_FRAMES.append(mat_mul(SOLVED_FRAMES[-1], plane_rotation(Y, 1, Z, 1)))

#Container name -> array shape
CONTAINERS: typing.Dict[str, typing.Tuple[int, ...]] = {
    "left_cell": (3, 3, 3),
    "right_cell": (3, 3, 3),
    "inner_slice": (3, 3),
    "outer_slice": (3, 3),
    "top_cell": (),
    "bottom_cell": (),
    "front_cell": (3,),
    "back_cell": (3,)
}

def slot_position(container: str, idx: typing.Tuple[int, ...]) -> Vec4:
    """4D position of the slot at idx in the named container"""
    if container == "left_cell":
        i, j, k = idx
        return (-1, j-1, k-1, i-1)
    if container == "right_cell":
        i, j, k = idx
        return (+1, j-1, k-1, 1-i)
    if container == "inner_slice":
        j, k = idx
        return (0, j-1, k-1, +1)
    if container == "outer_slice":
        j, k = idx
        return (0, j-1, k-1, -1)
    if container == "top_cell": return (0, +1, 0, 0)
    if container == "bottom_cell": return (0, -1, 0, 0)
    if container == "front_cell": return (0, idx[0]-1, +1, 0)
    if container == "back_cell": return (0, idx[0]-1, -1, 0)
    assert False, f"unknown container {container}"

def _indices(shape: typing.Tuple[int, ...]) -> typing.Iterator[typing.Tuple[int, ...]]:
    if not shape:
        yield ()
        return
    for i in range(shape[0]):
        for rest in _indices(shape[1:]): yield (i,) + rest

#4D position -> (container, index); the only place slot offsets are worked out
SLOTS: typing.Dict[Vec4, typing.Tuple[str, typing.Tuple[int, ...]]] = {
    slot_position(name, idx): (name, idx) for name, shape in CONTAINERS.items() for idx in _indices(shape)
}
assert len(SLOTS) == 80 and (0, 0, 0, 0) not in SLOTS

def middle_slice_positions(outer_slice_pos: int) -> typing.Tuple[int, ...]:
    """Middle slice positions reachable while the outer slice sits on the given side"""
    return (-outer_slice_pos, 0, outer_slice_pos, 2 * outer_slice_pos)

def solved_colors(pos: Vec4) -> typing.Tuple[Color, ...]:
    return tuple(CellLocation.from_direction(unit(a, s)).color for a, s in sticker_axes(pos))

class Piece:
    colors: typing.Tuple[Color, ...]

    def __init__(self, *colors: Color):
        assert 1 <= len(colors) <= 4
        self.colors = tuple(colors)

    @property
    def shape(self) -> int: return len(self.colors)

    @property
    def a(self) -> Color: return self.colors[0]
    @property
    def b(self) -> Color: return self.colors[1]
    @property
    def c(self) -> Color: return self.colors[2]
    @property
    def d(self) -> Color: return self.colors[3]

    def __eq__(self, other): return isinstance(other, Piece) and self.colors == other.colors
    def __repr__(self): return f"Piece({str(self)})"
    def __str__(self): return "".join(c.value for c in self.colors)

class PuzzleState:
    left_cell: typing.List[typing.List[typing.List[Piece]]]
    right_cell: typing.List[typing.List[typing.List[Piece]]]
    inner_slice: typing.List[typing.List[Piece]]
    outer_slice: typing.List[typing.List[Piece]]
    top_cell: Piece
    bottom_cell: Piece
    front_cell: typing.List[Piece]
    back_cell: typing.List[Piece]

    outer_slice_pos: int
    middle_slice_pos: int
    middle_slice_dir: CellLocation

    def __init__(self):
        def build(name, shape, prefix=()):
            if len(prefix) == len(shape): return Piece(*solved_colors(slot_position(name, prefix)))
            return [build(name, shape, prefix + (i,)) for i in range(shape[len(prefix)])]

        for name, shape in CONTAINERS.items(): setattr(self, name, build(name, shape))
        self.outer_slice_pos, self.middle_slice_pos, self.middle_slice_dir = 1, 0, CellLocation.UP

    def reset(self):
        for pos, piece in self: piece.colors = solved_colors(pos)
        self.outer_slice_pos, self.middle_slice_pos, self.middle_slice_dir = 1, 0, CellLocation.UP

    def copy(self) -> "PuzzleState": return copy.deepcopy(self)

    @property
    def config(self) -> typing.Tuple[int, int, CellLocation]: return self.outer_slice_pos, self.middle_slice_pos, self.middle_slice_dir

    @property
    def is_solved(self) -> bool:
        def solved_in(frame: Matrix) -> bool:
            return all(
                col == CellLocation.from_direction(transform(frame, unit(a, s))).color
                for pos, piece in self for (a, s), col in zip(sticker_axes(pos), piece.colors)
            )
        return any(solved_in(frame) for frame in SOLVED_FRAMES)

    def color_counts(self) -> typing.Dict[int, typing.Counter]:
        """Color multiset of every piece shape class"""
        counts = collections.defaultdict(collections.Counter)
        for _, piece in self: counts[piece.shape].update(piece.colors)
        return dict(counts)

    def __getitem__(self, pos: Vec4) -> Piece:
        name, idx = SLOTS[tuple(pos)]
        obj = getattr(self, name)
        for i in idx: obj = obj[i]
        return obj

    def __iter__(self) -> typing.Iterator[typing.Tuple[Vec4, Piece]]:
        for pos in SLOTS: yield pos, self[pos]

    def __eq__(self, other):
        if not isinstance(other, PuzzleState): return NotImplemented
        return self.config == other.config and all(piece == other[pos] for pos, piece in self)

    def __str__(self):
        s = ""
        for name in CONTAINERS:
            if len(s) > 0: s += " "
            s += "".join(str(self[slot_position(name, idx)]) + "," for idx in _indices(CONTAINERS[name])).rstrip(",")
        return s + f" | o={self.outer_slice_pos:+d} m={self.middle_slice_pos:+d} {self.middle_slice_dir.name}"
