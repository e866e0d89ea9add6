"""Sprites of the game world: generic objects, the player and the background."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

PLAYER_IMAGE = "player/player_blue.png"
PLAYER_START = (100.0, 595.0)
PLAYER_SCALE = 2.5

RUN_FRAME_LEFT = 160
RUN_FRAME_WIDTH = 50
RUN_FRAME_HEIGHT = 46
RUN_ROW_HEIGHT = 44
RUN_FRAMES_PER_ROW = 5
RUN_STEP = 0.4
RUN_CYCLE = 8

JUMP_FRAME_SHIFT = 50
JUMP_HEIGHT_GROWTH = 6
JUMP_STEP = 10
JUMP_RISE_FRAMES = 20
JUMP_TOTAL_FRAMES = 40
JUMP_EARLY_FRAMES = 15
JUMP_ROW_EARLY = 100
JUMP_ROW_LATE = 153

REVERSE_SHIFT = 23
REVERSE_RESTART = 231
REVERSE_MIN = 2

SCREEN_WIDTH = 1332
MOUNTAIN_WIDTH = 2432


@dataclass
class Rect:
    """An integer rectangle selecting a frame of a sprite sheet."""

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0


@dataclass
class GameObject:
    """An animated sprite at a position on screen."""

    image: str
    x: float
    y: float
    rect: Rect
    velocity: float = 0.0
    scale: float = 1.0
    elapsed: float = 0.0

    def tick(self, dt: float, period: float) -> bool:
        """Advance the animation clock; return True when a frame is due."""
        self.elapsed += dt
        if self.elapsed >= period:
            self.elapsed = 0.0
            return True
        return False

    def step_frame(self, limit: int, shift: int) -> None:
        """Move the frame right by ``shift``, wrapping to 0 past ``limit``."""
        if self.rect.left < limit:
            self.rect.left += shift
        else:
            self.rect.left = 0

    def step_frame_reverse(self) -> None:
        """Move the frame left, wrapping to the last frame of the sheet."""
        if self.rect.left >= REVERSE_MIN:
            self.rect.left -= REVERSE_SHIFT
        else:
            self.rect.left = REVERSE_RESTART


def _player_rect() -> Rect:
    return Rect(RUN_FRAME_LEFT, 0, RUN_FRAME_WIDTH, RUN_FRAME_HEIGHT)


@dataclass
class Player:
    """The runner: position, jump state, animation and score."""

    image: str = PLAYER_IMAGE
    x: float = PLAYER_START[0]
    y: float = PLAYER_START[1]
    rect: Rect = field(default_factory=_player_rect)
    scale: float = PLAYER_SCALE
    seconds: float = 0.0
    jumping: bool = False
    jump_count: int = 0
    win: bool = False
    lose: bool = False
    score: int = 0
    run_frame: int = 0

    def start_jump(self) -> bool:
        """Begin a jump unless one is under way; return whether it started."""
        if self.jumping:
            return False
        self.jumping = True
        self.rect.left += JUMP_FRAME_SHIFT
        self.rect.top += JUMP_FRAME_SHIFT
        self.rect.height += JUMP_HEIGHT_GROWTH
        return True

    def update_jump(self) -> None:
        """Move one frame along the jump arc, landing when it is done."""
        if self.jumping and self.jump_count < JUMP_RISE_FRAMES:
            self.y -= JUMP_STEP
            self.jump_count += 1
        elif self.jumping and self.jump_count < JUMP_TOTAL_FRAMES:
            self.y += JUMP_STEP
            self.jump_count += 1
        else:
            if self.jumping:
                self.rect.left -= JUMP_FRAME_SHIFT
                self.rect.top = 0
                self.rect.height -= JUMP_HEIGHT_GROWTH
            self.jumping = False
            self.jump_count = 0

    def animate_run(self) -> None:
        """Advance the running animation by one frame."""
        if self.seconds <= RUN_CYCLE:
            self.seconds = round(self.seconds + RUN_STEP, 1)
            self.run_frame += 1
            if self.run_frame == RUN_FRAMES_PER_ROW:
                self.rect.top += RUN_ROW_HEIGHT
                self.run_frame = 0
        else:
            self.run_frame = 0
            self.rect.top = 0
            self.seconds = 0.0

    def animate_jump(self) -> None:
        """Pick the jump frame matching the progress of the jump."""
        if self.jump_count < JUMP_EARLY_FRAMES:
            self.rect.top = JUMP_ROW_EARLY
        else:
            self.rect.top = JUMP_ROW_LATE

    def animate(self) -> None:
        """Advance whichever animation fits the player's state."""
        if self.jumping:
            self.animate_jump()
        else:
            self.animate_run()


@dataclass
class ScrollingPair:
    """Two copies of a layer that scroll left and take turns wrapping."""

    first: GameObject
    second: GameObject
    wrap_to: float
    reset_at: float
    speed: float

    def scroll(self) -> None:
        if self.first.x == self.reset_at:
            self.second.x = self.wrap_to
        elif self.second.x == self.reset_at:
            self.first.x = self.wrap_to
        self.first.x -= self.speed
        self.second.x -= self.speed

    def __iter__(self) -> Iterator[GameObject]:
        yield self.first
        yield self.second


@dataclass
class ParallaxBackground:
    """The sky and the four scrolling layers drawn behind the game."""

    sky: GameObject
    clouds: ScrollingPair
    mountains: ScrollingPair
    grass: ScrollingPair
    balloons: ScrollingPair

    def scroll(self) -> None:
        """Move every layer one step left at its own speed."""
        self.mountains.scroll()
        self.grass.scroll()
        self.balloons.scroll()
        self.clouds.scroll()

    def __iter__(self) -> Iterator[GameObject]:
        """Layers in drawing order, back to front."""
        yield self.sky
        yield from self.clouds
        yield from self.mountains
        yield from self.grass
        yield from self.balloons


def _layer(image: str, x: float, y: float, width: int, height: int) -> GameObject:
    return GameObject(image=image, x=x, y=y, rect=Rect(0, 0, width, height))


def _pair(image: str, y: float, width: int, height: int, wrap_to: float,
          reset_at: float, speed: float) -> ScrollingPair:
    return ScrollingPair(
        first=_layer(image, 0, y, width, height),
        second=_layer(image, wrap_to, y, width, height),
        wrap_to=wrap_to,
        reset_at=reset_at,
        speed=speed,
    )


def create_background() -> ParallaxBackground:
    """Build the background layers at their starting positions."""
    return ParallaxBackground(
        sky=_layer("bg/bg.jpg", 0, 0, SCREEN_WIDTH, 850),
        clouds=_pair("bg/cloud.png", 0, SCREEN_WIDTH, 362, SCREEN_WIDTH, 0, 0.5),
        mountains=_pair("bg/moutain.png", 450, MOUNTAIN_WIDTH, 240,
                        MOUNTAIN_WIDTH, 0, 1),
        grass=_pair("bg/grass.png", 0, SCREEN_WIDTH, 850, SCREEN_WIDTH, -3, 5),
        balloons=_pair("bg/balloon.png", 0, SCREEN_WIDTH, 850, SCREEN_WIDTH, 0, 2),
    )