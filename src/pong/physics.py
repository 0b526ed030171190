"""
Fixed-timestep physics for the paddle and the ball
"""

from src.pong import constants
from src.pong.clock import BaseClock, ticks_elapsed
from src.models.pong import GameState, PaddleDirection, direction_sign
from src.logger.logger import logger


class PhysicsState:
    """
    Advances a GameState in steps of at least 16 clock milliseconds.

    Positions are screen pixels, velocities pixels per second. Integration is
    explicit Euler without sub-stepping, so a fast enough ball can tunnel
    through a wall.
    """

    def __init__(self, state: GameState, clock: BaseClock):
        self.state = state
        self.clock = clock

    def update(self) -> float:
        """
        Wait for the next physics step, then advance to the current clock
        reading. Returns the delta-time used, in seconds.
        """
        self.wait_for_next_step()
        return self.advance(self.clock.ticks())

    def wait_for_next_step(self):
        """
        Block in short slices until at least one physics step has elapsed
        since the last recorded tick
        """
        while (
            ticks_elapsed(self.clock.ticks(), self.state.ticks_count)
            < constants.PHYSICS_STEP_MILLISECONDS
        ):
            self.clock.wait(constants.GATE_SLICE_MILLISECONDS)

    def advance(self, now_ms: int) -> float:
        """
        Record `now_ms` as the latest tick and step by the elapsed time,
        clamped to MAX_DELTA_TIME
        """
        elapsed = max(ticks_elapsed(now_ms, self.state.ticks_count), 0)
        delta_time = min(elapsed / 1000.0, constants.MAX_DELTA_TIME)
        self.state.ticks_count = now_ms
        self.step(delta_time)
        return delta_time

    def step(self, delta_time: float):
        """Integrate paddle and ball, then resolve loss and bounces."""
        logger.debug(f"Physics step of {delta_time:.3f}s")
        self.move_paddle(delta_time)
        self.move_ball(delta_time)

        if self.has_ball_passed_paddle():
            if self.state.is_running:
                logger.info("Ball went past the paddle, game over")
            self.state.is_running = False

        vel_ball = self.state.vel_ball
        if self.has_ball_hit_paddle():
            logger.debug("Ball hit the paddle")
            vel_ball.x *= -1
        if self.has_ball_hit_right_wall():
            vel_ball.x *= -1
        if self.has_ball_hit_top_wall():
            vel_ball.y *= -1
        if self.has_ball_hit_bottom_wall():
            vel_ball.y *= -1

    def move_paddle(self, delta_time: float):
        """
        Moves the paddle vertically and keeps it between the walls
        """
        if self.state.dir_paddle == PaddleDirection.STOP:
            return
        pos_paddle = self.state.pos_paddle
        pos_paddle.y += (
            direction_sign(self.state.dir_paddle) * constants.PADDLE_SPEED * delta_time
        )
        lower_bound, upper_bound = self.state.paddle_bounds()
        # min first, so the lower bound wins when the bounds cross
        pos_paddle.y = max(min(pos_paddle.y, upper_bound), lower_bound)

    def move_ball(self, delta_time: float):
        pos_ball = self.state.pos_ball
        pos_ball.x += self.state.vel_ball.x * delta_time
        pos_ball.y += self.state.vel_ball.y * delta_time

    def has_ball_passed_paddle(self) -> bool:
        """
        Check if the ball has left the screen on the paddle's side
        """
        return self.state.pos_ball.x <= 0

    def has_ball_hit_paddle(self) -> bool:
        """
        Check if the ball is moving left inside the paddle's collision band
        and overlaps it vertically
        """
        pos_ball = self.state.pos_ball
        close_enough = (
            abs(self.state.pos_paddle.y - pos_ball.y) <= constants.PADDLE_HEIGHT / 2
        )
        in_band = (
            constants.PADDLE_COLLISION_MIN_X
            <= pos_ball.x
            <= constants.PADDLE_COLLISION_MAX_X
        )
        return close_enough and in_band and self.state.vel_ball.x < 0

    def has_ball_hit_right_wall(self) -> bool:
        """
        Check if the ball has hit the right wall
        """
        return (
            self.state.pos_ball.x >= self.state.window_width - constants.THICKNESS
            and self.state.vel_ball.x > 0
        )

    def has_ball_hit_top_wall(self) -> bool:
        """
        Check if the ball has hit the top wall
        """
        return self.state.pos_ball.y <= constants.THICKNESS and self.state.vel_ball.y < 0

    def has_ball_hit_bottom_wall(self) -> bool:
        """
        Check if the ball has hit the bottom wall
        """
        return (
            self.state.pos_ball.y >= self.state.window_height - constants.THICKNESS
            and self.state.vel_ball.y > 0
        )
