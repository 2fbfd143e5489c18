"""Convert a generated maze into wall rectangles in screen coordinates."""
from dataclasses import dataclass, field
from typing import List, Tuple

from maze_grid import MazeConfigError, MazeGrid

Color = Tuple[int, int, int]

WALL_THICKNESS = 5.0
BORDER_THICKNESS = 2.0
GOAL_FRACTION = 0.7
BALL_RADIUS_FRACTION = 0.25

WALL_COLOR: Color = (0, 128, 128)  # teal
BORDER_COLOR: Color = (128, 128, 128)
GOAL_COLOR: Color = (0, 128, 0)  # green
BALL_COLOR: Color = (173, 216, 230)  # lightblue

LABEL_WALL = "wall"
LABEL_BORDER = "border"
LABEL_GOAL = "goal"
LABEL_BALL = "ball"


@dataclass(frozen=True)
class WallRect:
    """Axis-aligned rectangle given by its centre and size."""

    x: float
    y: float
    width: float
    height: float
    label: str = LABEL_WALL
    color: Color = WALL_COLOR


@dataclass(frozen=True)
class BallSpec:
    x: float
    y: float
    radius: float
    label: str = LABEL_BALL
    color: Color = BALL_COLOR


@dataclass
class MazeLayout:
    walls: List[WallRect]
    goal: WallRect
    ball: BallSpec
    borders: List[WallRect] = field(default_factory=list)

    def static_rects(self) -> List[WallRect]:
        return self.borders + self.walls + [self.goal]


def unit_lengths(width: float, height: float, rows: int, columns: int) -> Tuple[float, float]:
    """Return the cell width and height for a ``width`` x ``height`` viewport."""
    if width <= 0 or height <= 0:
        raise MazeConfigError(f"viewport must be positive (got {width}x{height})")
    if rows <= 0 or columns <= 0:
        raise MazeConfigError(f"rows and columns must be positive (got {rows}x{columns})")
    return width / columns, height / rows


def border_walls(width: float, height: float, thickness: float = BORDER_THICKNESS) -> List[WallRect]:
    """Frame around the viewport; these stay static after a win."""
    kw = dict(label=LABEL_BORDER, color=BORDER_COLOR)
    return [
        WallRect(width / 2, 0, width, thickness, **kw),
        WallRect(width / 2, height, width, thickness, **kw),
        WallRect(0, height / 2, thickness, height, **kw),
        WallRect(width, height / 2, thickness, height, **kw),
    ]


def build_layout(
    grid: MazeGrid,
    unit_x: float,
    unit_y: float,
    wall_thickness: float = WALL_THICKNESS,
    goal_fraction: float = GOAL_FRACTION,
    with_borders: bool = True,
) -> MazeLayout:
    """Map the passage matrices of ``grid`` to walls, goal and ball.

    One wall is emitted per closed passage. A closed horizontal passage at
    ``(r, c)`` lies on the edge below cell ``(r, c)``; a closed vertical
    passage lies on the edge to its right.
    """
    if unit_x <= 0 or unit_y <= 0:
        raise MazeConfigError(f"unit lengths must be positive (got {unit_x}, {unit_y})")
    if wall_thickness <= 0:
        raise MazeConfigError("wall_thickness must be positive")
    if not 0 < goal_fraction <= 1:
        raise MazeConfigError("goal_fraction must be in (0, 1]")

    walls: List[WallRect] = []
    for r, row in enumerate(grid.horizontals):
        for c, is_open in enumerate(row):
            if is_open:
                continue
            walls.append(
                WallRect(
                    c * unit_x + unit_x / 2,
                    r * unit_y + unit_y,
                    unit_x,
                    wall_thickness,
                )
            )

    for r, row in enumerate(grid.verticals):
        for c, is_open in enumerate(row):
            if is_open:
                continue
            walls.append(
                WallRect(
                    c * unit_x + unit_x,
                    r * unit_y + unit_y / 2,
                    wall_thickness,
                    unit_y,
                )
            )

    width = unit_x * grid.columns
    height = unit_y * grid.rows
    goal = WallRect(
        width - unit_x / 2,
        height - unit_y / 2,
        unit_x * goal_fraction,
        unit_y * goal_fraction,
        label=LABEL_GOAL,
        color=GOAL_COLOR,
    )
    ball = BallSpec(
        unit_x / 2,
        unit_y / 2,
        min(unit_x, unit_y) * BALL_RADIUS_FRACTION,
    )
    borders = border_walls(width, height) if with_borders else []
    return MazeLayout(walls=walls, goal=goal, ball=ball, borders=borders)
