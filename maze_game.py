import argparse
import os
from typing import Dict, Iterable, Optional, Tuple

import numpy as np
import pygame

from config_util import load_game_config
from maze_generator import generate_maze, print_maze
from maze_geometry import (
    LABEL_BALL,
    LABEL_GOAL,
    MazeLayout,
    build_layout,
    unit_lengths,
)
from maze_grid import MazeConfigError, MazeGrid
from physics_world import LabelPair, PhysicsWorld

BACKGROUND_COLOR = (0, 0, 0)
TEXT_COLOR = (255, 255, 255)
WIN_COLOR = (50, 205, 50)

# key code -> unit direction (screen coordinates, y grows downward)
KEY_DIRECTIONS: Dict[int, Tuple[int, int]] = {
    pygame.K_w: (0, -1),
    pygame.K_d: (1, 0),
    pygame.K_s: (0, 1),
    pygame.K_a: (-1, 0),
}

WIN_LABELS = frozenset((LABEL_BALL, LABEL_GOAL))


class MazeSession:
    """Reacts to key-up and collision events for one maze.

    ``world`` must provide ``ball_velocity()``, ``set_ball_velocity(x, y)``,
    ``set_gravity(x, y)`` and ``release_walls()``.
    """

    def __init__(self, world, velocity_step: float = 5.0, win_gravity: float = 1.0):
        self.world = world
        self.velocity_step = velocity_step
        self.win_gravity = win_gravity
        self.intro_visible = True
        self.winner_visible = False

    def handle_key_up(self, key: int) -> bool:
        """Nudge the ball for W/A/S/D; return False for any other key."""
        self.intro_visible = False
        direction = KEY_DIRECTIONS.get(key)
        if direction is None:
            return False
        vx, vy = self.world.ball_velocity()
        dx, dy = direction
        self.world.set_ball_velocity(
            vx + dx * self.velocity_step, vy + dy * self.velocity_step
        )
        return True

    def handle_collisions(self, pairs: Iterable[LabelPair]) -> bool:
        """Fire the win effect for every ball/goal pair; return True if any did."""
        won = False
        for label_a, label_b in pairs:
            if {label_a, label_b} == WIN_LABELS:
                self.win()
                won = True
        return won

    def win(self) -> None:
        # safe to repeat: walls already released stay dynamic
        self.winner_visible = True
        self.world.set_gravity(0.0, self.win_gravity)
        self.world.release_walls()


def build_session(
    config: dict, rng: np.random.Generator | None = None
) -> Tuple[MazeGrid, MazeLayout, PhysicsWorld, MazeSession]:
    """Generate a maze from ``config`` and wire it into a physics world."""
    if rng is None:
        rng = np.random.default_rng(config["seed"])
    grid = generate_maze(config["rows"], config["columns"], rng=rng)
    unit_x, unit_y = unit_lengths(
        config["width"], config["height"], grid.rows, grid.columns
    )
    layout = build_layout(
        grid,
        unit_x,
        unit_y,
        wall_thickness=config["wall_thickness"],
        goal_fraction=config["goal_fraction"],
    )
    world = PhysicsWorld(layout, substeps=config["substeps"])
    session = MazeSession(
        world,
        velocity_step=config["velocity_step"],
        win_gravity=config["win_gravity"],
    )
    return grid, layout, world, session


def draw_world(screen: pygame.Surface, world: PhysicsWorld) -> None:
    for body in world.rect_bodies:
        for shape in body.shapes:
            points = [
                (p.x, p.y)
                for p in (
                    v.rotated(body.angle) + body.position
                    for v in shape.get_vertices()
                )
            ]
            pygame.draw.polygon(screen, body.color, points)
    ball = world.ball
    pygame.draw.circle(
        screen,
        ball.color,
        (int(ball.position.x), int(ball.position.y)),
        int(ball.radius),
    )


def draw_overlay(
    screen: pygame.Surface,
    session: MazeSession,
    font: pygame.font.Font,
    font_big: pygame.font.Font,
) -> None:
    width, height = screen.get_size()
    if session.intro_visible:
        text = font.render(
            "Use W A S D to roll the ball to the green square", True, TEXT_COLOR
        )
        screen.blit(text, text.get_rect(center=(width // 2, height // 2)))
    if session.winner_visible:
        text = font_big.render("You won!", True, WIN_COLOR)
        screen.blit(text, text.get_rect(center=(width // 2, height // 3)))


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Roll a ball through a random maze")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument("--rows", type=int, default=None, help="Number of cell rows")
    parser.add_argument("--columns", type=int, default=None, help="Number of cell columns")
    parser.add_argument("--width", type=int, default=None, help="Window width in pixels")
    parser.add_argument("--height", type=int, default=None, help="Window height in pixels")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Print the maze as text and exit without opening a window",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list] = None) -> None:
    args = parse_args(argv)
    if args.config is not None and not os.path.exists(args.config):
        raise SystemExit(f"config file not found: {args.config}")
    try:
        config = load_game_config(
            args.config,
            rows=args.rows,
            columns=args.columns,
            width=args.width,
            height=args.height,
            seed=args.seed,
        )
        grid, layout, world, session = build_session(config)
    except MazeConfigError as e:
        raise SystemExit(f"invalid configuration: {e}")

    print(f"Maze {grid.columns}x{grid.rows} (seed={config['seed']}), {len(layout.walls)} walls")
    if args.ascii:
        print_maze(grid)
        return

    pygame.init()
    screen = pygame.display.set_mode((config["width"], config["height"]))
    pygame.display.set_caption("Maze")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, 28)
    font_big = pygame.font.SysFont(None, 72)

    running = True
    announced = False
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYUP:
                session.handle_key_up(event.key)

        if session.handle_collisions(world.step()) and not announced:
            print("You won!")
            announced = True

        screen.fill(BACKGROUND_COLOR)
        draw_world(screen, world)
        draw_overlay(screen, session, font, font_big)
        pygame.display.flip()
        clock.tick(config["fps"])

    pygame.quit()


if __name__ == "__main__":
    main()
