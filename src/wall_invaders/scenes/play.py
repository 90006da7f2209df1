"""
Play state: the per-tick simulation.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from mini_arcade_core.scenes.systems.system_pipeline import SystemPipeline

from wall_invaders.config import GameConfig, LevelParams, rebase_score, resolve_level
from wall_invaders.constants import (
    GRAVITY,
    INVADER_HIT_DIVISOR,
    INVADER_RANK_SPACING,
    INVADER_SPAN,
    JUMP_VELOCITY,
    ROCKET_NOSE_OFFSET,
    SOUND_BANG,
    SOUND_EXPLOSION,
    SOUND_SHOOT,
    WALL_OFFSET_Y,
    WALL_SPAN,
    Key,
)
from wall_invaders.entities import (
    Bomb,
    Bounds,
    Invader,
    Rocket,
    Ship,
    ShipController,
    WallBlock,
)
from wall_invaders.scenes.game_over import GameOverState
from wall_invaders.scenes.level_intro import LevelIntroState
from wall_invaders.scenes.pause import PauseState
from wall_invaders.utils import logger

if TYPE_CHECKING:
    from wall_invaders.game import Game


@dataclass
class PlayWorld:  # pylint: disable=too-many-instance-attributes
    """
    Everything the play state owns for one level.
    """

    bounds: Bounds
    screen_height: float
    params: LevelParams
    ship: Ship
    controller: ShipController = field(default_factory=ShipController)
    invaders: list[Invader] = field(default_factory=list)
    rockets: list[Rocket] = field(default_factory=list)
    bombs: list[Bomb] = field(default_factory=list)
    wall_blocks: list[WallBlock] = field(default_factory=list)

    invader_velocity: tuple[float, float] = (0.0, 0.0)
    invader_next_velocity: tuple[float, float] = (0.0, 0.0)
    invader_current_velocity: float = 0.0
    invaders_dropping: bool = False
    invader_current_drop_distance: float = 0.0

    last_rocket_time: float | None = None
    hard_loss: bool = False


@dataclass
class PlayTickContext:
    """
    Play Tick Context
    """

    game: Game
    world: PlayWorld
    dt: float
    finished: bool = False

    @property
    def config(self) -> GameConfig:
        return self.game.config


@dataclass
class PlaySystem:
    """
    Base for the play systems. Once the level has ended this tick the
    remaining systems are skipped.
    """

    name: str = "wall_invaders_system"
    order: int = 0

    def enabled(self, ctx: PlayTickContext) -> bool:
        return not ctx.finished

    def step(self, ctx: PlayTickContext):
        raise NotImplementedError


@dataclass(frozen=True)
class PlaySnapshot:  # pylint: disable=too-many-instance-attributes
    """
    Read-only copy of the play world for drawing.
    """

    bounds: Bounds
    ship: Ship
    ship_pose: str
    invaders: tuple[Invader, ...]
    rockets: tuple[Rocket, ...]
    bombs: tuple[Bomb, ...]
    wall_blocks: tuple[WallBlock, ...]
    score: int
    lives: int
    level: int
    debug_mode: bool


def fire_rocket(game: Game, world: PlayWorld) -> bool:
    """
    Launch a rocket from the ship's nose if the fire rate allows it.

    Each rocket costs ``rocket_cost`` points.

    :return: Whether a rocket was fired
    :rtype: bool
    """
    world.controller.throwing = True

    now = game.clock()
    if (
        world.last_rocket_time is not None
        and now - world.last_rocket_time <= game.config.fire_interval_ms
    ):
        return False

    ship = world.ship
    world.rockets.append(
        Rocket(ship.x, ship.y - ROCKET_NOSE_OFFSET, game.config.rocket_velocity)
    )
    world.last_rocket_time = now
    game.score -= game.config.rocket_cost
    game.play_sound(SOUND_SHOOT)
    return True


@dataclass
class ShipSystem(PlaySystem):
    """
    Walk, jump and fire from the pressed keys, then keep the ship in bounds.
    """

    name: str = "wall_invaders_ship"
    order: int = 10

    def step(self, ctx: PlayTickContext):
        w = ctx.world
        ship = w.ship
        ctl = w.controller
        keys = ctx.game.pressed_keys

        ctl.walking = False
        ctl.throwing = False
        if Key.LEFT in keys:
            ship.x -= w.params.ship_speed * ctx.dt
            ctl.walking = True
        if Key.RIGHT in keys:
            ship.x += w.params.ship_speed * ctx.dt
            ctl.walking = True

        if ctl.jump_requested:
            ctl.jump_requested = False
            if not ctl.airborne:
                ctl.airborne = True
                ship.vertical_velocity = JUMP_VELOCITY

        if Key.SPACE in keys:
            fire_rocket(ctx.game, w)

        # jump physics run per tick, not per second
        if ctl.airborne:
            ship.y -= ship.vertical_velocity
            ship.vertical_velocity -= GRAVITY
            if ship.y >= w.bounds.bottom:
                ship.y = w.bounds.bottom
                ship.vertical_velocity = 0.0
                ctl.airborne = False

        ship.x = max(w.bounds.left, min(w.bounds.right, ship.x))
        ctl.advance_pace(ctx.dt)


@dataclass
class ProjectileSystem(PlaySystem):
    """Moves bombs and rockets and drops the ones that left the screen."""

    name: str = "wall_invaders_projectiles"
    order: int = 20

    def step(self, ctx: PlayTickContext):
        w = ctx.world

        for bomb in w.bombs:
            bomb.y += ctx.dt * bomb.velocity
        w.bombs = [b for b in w.bombs if b.y <= w.screen_height]

        for rocket in w.rockets:
            rocket.y -= ctx.dt * rocket.velocity
        w.rockets = [r for r in w.rockets if r.y >= 0]


@dataclass
class SwarmSystem(PlaySystem):
    """
    Move the invaders as one formation:
    - Move horizontally while every invader stays in bounds
    - If any would cross a side -> stop, drop, then reverse and speed up
    """

    name: str = "wall_invaders_swarm"
    order: int = 30

    def step(self, ctx: PlayTickContext):
        w = ctx.world
        vx, vy = w.invader_velocity

        # 1) predict if we hit a side this tick
        hit_left = hit_right = False
        for invader in w.invaders:
            next_x = invader.x + vx * ctx.dt
            if next_x < w.bounds.left:
                hit_left = True
            elif next_x > w.bounds.right:
                hit_right = True

        # 2) move only if nobody crosses; y stays put and there is no
        # bottom-of-area loss
        if not (hit_left or hit_right):
            for invader in w.invaders:
                invader.x += vx * ctx.dt

        # 3) finish a drop
        if w.invaders_dropping:
            w.invader_current_drop_distance += vy * ctx.dt
            if w.invader_current_drop_distance >= ctx.config.invader_drop_distance:
                w.invaders_dropping = False
                w.invader_velocity = w.invader_next_velocity
                w.invader_current_drop_distance = 0.0

        # 4) start a drop and queue the reversed direction
        if hit_left or hit_right:
            w.invader_current_velocity += ctx.config.invader_acceleration
            speed = w.invader_current_velocity
            w.invader_velocity = (0.0, speed)
            w.invaders_dropping = True
            w.invader_next_velocity = (speed if hit_left else -speed, 0.0)
            logger.debug(f"Swarm bounced {'left' if hit_left else 'right'}, speed {speed}")


def front_invaders(invaders: list[Invader]) -> dict[int, Invader]:
    """Map each file to its surviving invader with the highest rank."""
    front: dict[int, Invader] = {}
    for invader in invaders:
        cur = front.get(invader.file)
        if cur is None or invader.rank > cur.rank:
            front[invader.file] = invader
    return front


@dataclass
class BombDropSystem(PlaySystem):
    """
    Gives every front invader one chance per tick to drop a bomb.
    """

    name: str = "wall_invaders_bomb_drop"
    order: int = 40

    def step(self, ctx: PlayTickContext):
        w = ctx.world
        rng = ctx.game.rng
        params = w.params
        front = front_invaders(w.invaders)

        chance = params.bomb_rate * ctx.dt
        for file in range(ctx.config.invader_files):
            invader = front.get(file)
            if invader is None:
                continue
            if chance > rng.random():
                velocity = params.bomb_min_velocity + rng.random() * (
                    params.bomb_max_velocity - params.bomb_min_velocity
                )
                w.bombs.append(Bomb(invader.x, invader.bottom, velocity))


def rocket_hits_invader(rocket: Rocket, invader: Invader) -> bool:
    return (
        invader.x - invader.width <= rocket.x <= invader.x + invader.width
        and (invader.y - invader.height) / INVADER_HIT_DIVISOR
        <= rocket.y
        <= (invader.y + invader.height) / INVADER_HIT_DIVISOR
    )


@dataclass
class RocketInvaderCollisionSystem(PlaySystem):
    """Each invader is destroyed by the first rocket that hits it."""

    name: str = "wall_invaders_rocket_invader_collision"
    order: int = 50

    def step(self, ctx: PlayTickContext):
        w = ctx.world
        if not w.rockets or not w.invaders:
            return

        survivors: list[Invader] = []
        for invader in w.invaders:
            hit = False
            for i, rocket in enumerate(w.rockets):
                if rocket_hits_invader(rocket, invader):
                    del w.rockets[i]
                    hit = True
                    break

            if not hit:
                survivors.append(invader)
                continue

            ctx.game.score += ctx.config.points_per_invader
            ctx.game.play_sound(SOUND_BANG)
            logger.debug(
                f"Invader rank {invader.rank} file {invader.file} down, "
                f"score {ctx.game.score}"
            )

        w.invaders = survivors


@dataclass
class BombShipCollisionSystem(PlaySystem):
    """Bombs caught by the ship count towards ``lives``."""

    name: str = "wall_invaders_bomb_ship_collision"
    order: int = 60

    def step(self, ctx: PlayTickContext):
        w = ctx.world
        ship_collider = w.ship.collider
        remaining: list[Bomb] = []
        for bomb in w.bombs:
            if ship_collider.intersects(bomb.collider):
                ctx.game.lives += 1
                ctx.game.play_sound(SOUND_EXPLOSION)
                continue
            remaining.append(bomb)
        w.bombs = remaining


@dataclass
class BombWallCollisionSystem(PlaySystem):
    """A bomb knocks out the first wall block it lands in."""

    name: str = "wall_invaders_bomb_wall_collision"
    order: int = 70

    def step(self, ctx: PlayTickContext):
        w = ctx.world
        if not w.bombs or not w.wall_blocks:
            return

        remaining: list[Bomb] = []
        for bomb in w.bombs:
            for i, block in enumerate(w.wall_blocks):
                if block.collider.intersects(bomb.collider):
                    del w.wall_blocks[i]
                    ctx.game.score -= ctx.config.wall_penalty
                    ctx.game.play_sound(SOUND_EXPLOSION)
                    break
            else:
                remaining.append(bomb)
        w.bombs = remaining


@dataclass
class InvaderShipCollisionSystem(PlaySystem):
    """Touching an invader ends the session."""

    name: str = "wall_invaders_invader_ship_collision"
    order: int = 80

    def step(self, ctx: PlayTickContext):
        w = ctx.world
        for invader in w.invaders:
            if invader.overlaps(w.ship):
                ctx.game.lives = 0
                ctx.game.play_sound(SOUND_EXPLOSION)
                w.hard_loss = True
                logger.debug(f"Ship hit by invader rank {invader.rank} file {invader.file}")
                break


@dataclass
class OutcomeSystem(PlaySystem):
    """
    Ends the level on failure, else on victory. Failure is checked first.
    """

    name: str = "wall_invaders_outcome"
    order: int = 90

    def step(self, ctx: PlayTickContext):
        game = ctx.game
        w = ctx.world
        target = ctx.config.winning_score
        remaining = len(w.invaders)

        # kept as separate predicates; they differ at the boundaries
        failed = (
            w.hard_loss
            or game.score <= 0
            or (game.score < target and remaining == 0)
            or remaining * ctx.config.points_per_invader <= target - game.score
        )
        if failed:
            logger.debug(f"Level {game.level} lost with score {game.score}")
            ctx.finished = True
            game.replace_state(GameOverState())
            return

        if game.score >= target:
            logger.debug(f"Level {game.level} cleared with score {game.score}")
            game.level += 1
            game.score = rebase_score(game.level)
            ctx.finished = True
            game.replace_state(LevelIntroState(game.level))


def default_systems() -> list[PlaySystem]:
    return [
        ShipSystem(),
        ProjectileSystem(),
        SwarmSystem(),
        BombDropSystem(),
        RocketInvaderCollisionSystem(),
        BombShipCollisionSystem(),
        BombWallCollisionSystem(),
        InvaderShipCollisionSystem(),
        OutcomeSystem(),
    ]


class PlayState:
    """
    One level of play.
    """

    world: PlayWorld

    def __init__(self, config: GameConfig, level: int):
        """
        :param config: Game settings
        :type config: GameConfig

        :param level: Level being played
        :type level: int
        """
        self.config = config
        self.level = level
        self.systems: SystemPipeline[PlayTickContext] = SystemPipeline()
        self.systems.extend(default_systems())

    def enter(self, game: Game) -> None:
        params = resolve_level(self.config, self.level)
        bounds = game.bounds

        self.world = PlayWorld(
            bounds=bounds,
            screen_height=game.height,
            params=params,
            ship=Ship(x=game.width / 2, y=bounds.bottom),
            invader_velocity=(-params.invader_velocity, 0.0),
            invader_current_velocity=params.invader_velocity,
        )

        ranks, files = self.config.invader_ranks, self.config.invader_files
        for rank in range(ranks):
            for file in range(files):
                self.world.invaders.append(
                    Invader(
                        x=game.width / 2 + (files / 2 - file) * INVADER_SPAN / files,
                        y=bounds.top + rank * INVADER_RANK_SPACING,
                        rank=rank,
                        file=file,
                    )
                )

        wall_files = self.config.wall_files
        for rank in range(self.config.wall_ranks):
            for file in range(wall_files):
                block = WallBlock(
                    x=game.width / 2 + (wall_files / 2 - file) * WALL_SPAN / wall_files,
                    y=bounds.bottom + WALL_OFFSET_Y,
                )
                block.y += rank * block.height
                self.world.wall_blocks.append(block)

        logger.debug(
            f"Level {self.level}: {len(self.world.invaders)} invaders, "
            f"{len(self.world.wall_blocks)} wall blocks"
        )

    def update(self, game: Game, dt: float) -> None:
        ctx = PlayTickContext(game=game, world=self.world, dt=dt)
        self.systems.step(ctx)

    def draw(self, game: Game, dt: float) -> None:
        game.renderer.draw_play(game, self.snapshot(game))

    def on_key_down(self, game: Game, key: Key) -> None:
        if key == Key.SPACE:
            self.fire_rocket(game)
        elif key == Key.UP:
            self.world.controller.jump_requested = True
        elif key == Key.P:
            game.push_state(PauseState())

    def fire_rocket(self, game: Game) -> bool:
        return fire_rocket(game, self.world)

    def snapshot(self, game: Game) -> PlaySnapshot:
        w = self.world
        return PlaySnapshot(
            bounds=w.bounds,
            ship=replace(w.ship),
            ship_pose=w.controller.pose(game.pressed_keys),
            invaders=tuple(replace(i) for i in w.invaders),
            rockets=tuple(replace(r) for r in w.rockets),
            bombs=tuple(replace(b) for b in w.bombs),
            wall_blocks=tuple(replace(b) for b in w.wall_blocks),
            score=game.score,
            lives=game.lives,
            level=game.level,
            debug_mode=self.config.debug_mode,
        )
