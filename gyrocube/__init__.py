from .log import LOGGER
from .state import Color, CellLocation, Piece, PuzzleState
from .move import RotateDirection, MoveKind, Move
from .engine import MoveEngine
from .planner import GyroPlanner
from .history import History, HistoryEntry, MoveFamily, SCRAMBLE_TIERS
from .move_queue import MoveQueue, PendingMove
from .controller import PuzzleController
