"""pymunk world holding the maze walls, the goal and the player's ball."""
from typing import List, Set, Tuple

import pymunk

from maze_geometry import LABEL_WALL, BallSpec, MazeLayout, WallRect

LabelPair = Tuple[str, str]

BALL_MASS = 1.0
WALL_MASS = 1.0
FRICTION = 0.1
ELASTICITY = 0.0
# fraction of velocity kept per frame
DAMPING = 0.99


class PhysicsWorld:
    """Simulation of one maze layout.

    Time is measured in frames: velocities are in world units per frame and
    :meth:`step` advances exactly one frame, split into ``substeps`` pymunk
    steps.
    """

    def __init__(self, layout: MazeLayout, substeps: int = 4):
        self.space = pymunk.Space()
        self.space.gravity = (0.0, 0.0)
        self.space.damping = DAMPING
        self.substeps = max(1, int(substeps))
        self.rect_bodies: List[pymunk.Body] = []
        for rect in layout.static_rects():
            self._add_rect(rect)
        self.ball = self._add_ball(layout.ball)
        self.ball_shape = next(iter(self.ball.shapes))
        self._touching: Set[pymunk.Shape] = set()

    def _add_rect(self, rect: WallRect) -> pymunk.Body:
        body = pymunk.Body(body_type=pymunk.Body.STATIC)
        body.position = (rect.x, rect.y)
        body.label = rect.label
        body.color = rect.color
        shape = pymunk.Poly.create_box(body, (rect.width, rect.height))
        # only takes effect once the body becomes dynamic
        shape.mass = WALL_MASS
        shape.friction = FRICTION
        shape.elasticity = ELASTICITY
        self.space.add(body, shape)
        self.rect_bodies.append(body)
        return body

    def _add_ball(self, spec: BallSpec) -> pymunk.Body:
        moment = pymunk.moment_for_circle(BALL_MASS, 0, spec.radius)
        body = pymunk.Body(BALL_MASS, moment)
        body.position = (spec.x, spec.y)
        body.label = spec.label
        body.color = spec.color
        body.radius = spec.radius
        shape = pymunk.Circle(body, spec.radius)
        shape.friction = FRICTION
        shape.elasticity = ELASTICITY
        self.space.add(body, shape)
        return body

    @property
    def gravity(self) -> Tuple[float, float]:
        g = self.space.gravity
        return g.x, g.y

    def set_gravity(self, x: float, y: float) -> None:
        self.space.gravity = (x, y)

    def ball_velocity(self) -> Tuple[float, float]:
        v = self.ball.velocity
        return v.x, v.y

    def set_ball_velocity(self, x: float, y: float) -> None:
        self.ball.velocity = (x, y)

    def release_walls(self) -> int:
        """Turn every static wall into a dynamic body and return how many changed."""
        released = 0
        for body in self.rect_bodies:
            if body.label == LABEL_WALL and body.body_type == pymunk.Body.STATIC:
                body.body_type = pymunk.Body.DYNAMIC
                released += 1
        return released

    def _collect_touching(self, touching: Set[pymunk.Shape]) -> None:
        def visit(arbiter: pymunk.Arbiter) -> None:
            for shape in arbiter.shapes:
                if shape is not self.ball_shape:
                    touching.add(shape)

        self.ball.each_arbiter(visit)

    def step(self) -> List[LabelPair]:
        """Advance one frame and return label pairs that started touching."""
        dt = 1.0 / self.substeps
        touching: Set[pymunk.Shape] = set()
        for _ in range(self.substeps):
            self.space.step(dt)
            self._collect_touching(touching)
        started = touching - self._touching
        self._touching = touching
        return [(self.ball.label, shape.body.label) for shape in started]
