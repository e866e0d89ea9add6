"""Coins, monsters and bombs scrolling towards the player."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .entities import (
    GameObject,
    Player,
    PLAYER_START,
    RUN_FRAME_HEIGHT,
    RUN_FRAME_LEFT,
    Rect,
)
from .mapdata import Tile, remove_tile, tile_positions, win_position

SPAWN_X = 1400
COLUMN_STEP = 50

PIECE_IMAGE = "object/piece.png"
PIECE_TOP = 470
PIECE_ROW_STEP = 80
PIECE_SIZE = (150, 117)
PIECE_SCALE = 0.3
PIECE_SPEED = 5
PIECE_PERIOD = 0.1
PIECE_FRAME_LIMIT = 750
PIECE_FRAME_SHIFT = 150

MONSTER_IMAGE = "object/little_monster.png"
MONSTER_TOP = 500
MONSTER_ROW_STEP = 70
MONSTER_FIRST_FRAME = 254
MONSTER_SIZE = (23, 23)
MONSTER_SCALE = 2.0
MONSTER_PERIOD = 0.05

BOMB_IMAGE = "object/bomb.png"
BOMB_TOP = 470
BOMB_ROW_STEP = 80
BOMB_SIZE = (29, 25)
BOMB_SCALE = 2.5
BOMB_PERIOD = 0.14
BOMB_FRAME_LIMIT = 87
BOMB_FRAME_SHIFT = 29

MIN_VELOCITY = 7
MAX_VELOCITY = 14

WIN_SHIFT = 5


def _spawn(lines: Sequence[str], tile: Tile, image: str, top: int, row_step: int,
           frame: Rect, scale: float, rng: Optional[random.Random]) -> List[GameObject]:
    objects = []
    for col, row in tile_positions(lines, tile):
        velocity = 0.0 if rng is None else float(rng.randint(MIN_VELOCITY, MAX_VELOCITY))
        objects.append(GameObject(
            image=image,
            x=float(SPAWN_X + col * COLUMN_STEP),
            y=float(top + row * row_step),
            rect=Rect(frame.left, frame.top, frame.width, frame.height),
            velocity=velocity,
            scale=scale,
        ))
    return objects


def create_pieces(lines: Sequence[str]) -> List[GameObject]:
    """Coins for every piece tile of the map."""
    return _spawn(lines, Tile.PIECE, PIECE_IMAGE, PIECE_TOP, PIECE_ROW_STEP,
                  Rect(0, 0, *PIECE_SIZE), PIECE_SCALE, None)


def create_monsters(lines: Sequence[str], rng: Optional[random.Random] = None) -> List[GameObject]:
    """Monsters for every monster tile, each with a random speed."""
    return _spawn(lines, Tile.MONSTER, MONSTER_IMAGE, MONSTER_TOP, MONSTER_ROW_STEP,
                  Rect(MONSTER_FIRST_FRAME, 0, *MONSTER_SIZE), MONSTER_SCALE,
                  rng or random.Random())


def create_bombs(lines: Sequence[str], rng: Optional[random.Random] = None) -> List[GameObject]:
    """Bombs for every bomb tile, each with a random speed."""
    return _spawn(lines, Tile.BOMB, BOMB_IMAGE, BOMB_TOP, BOMB_ROW_STEP,
                  Rect(0, 0, *BOMB_SIZE), BOMB_SCALE, rng or random.Random())


def _inside(obj: GameObject, left: float, width: float, top: float, bottom: float) -> bool:
    return left <= obj.x <= left + width and top <= obj.y <= bottom


def piece_hits(player: Player, obj: GameObject) -> bool:
    """Whether the player touches a coin."""
    return _inside(obj, player.x, player.rect.width + 20,
                   player.y - 10, player.y + player.rect.height + 20)


def monster_hits(player: Player, obj: GameObject) -> bool:
    """Whether the player touches a monster."""
    return _inside(obj, player.x + 10, player.rect.width + 20,
                   player.y - 10, player.y + player.rect.height + 50)


def bomb_hits(player: Player, obj: GameObject) -> bool:
    """Whether the player touches a bomb."""
    return _inside(obj, player.x, player.rect.width + 10,
                   player.y - 30, player.y + player.rect.height + 50)


@dataclass
class World:
    """The level's moving objects and the map they were read from."""

    lines: List[str]
    pieces: List[GameObject] = field(default_factory=list)
    monsters: List[GameObject] = field(default_factory=list)
    bombs: List[GameObject] = field(default_factory=list)
    win_x: float = 0.0

    @classmethod
    def from_map(cls, lines: Sequence[str], rng: Optional[random.Random] = None) -> "World":
        """Populate a world from map lines; the lines are copied."""
        rng = rng or random.Random()
        own_lines = list(lines)
        return cls(
            lines=own_lines,
            pieces=create_pieces(own_lines),
            monsters=create_monsters(own_lines, rng),
            bombs=create_bombs(own_lines, rng),
            win_x=float(win_position(own_lines)),
        )

    def advance(self, dt: float) -> None:
        """Move every object one frame left and step their animations."""
        for monster in self.monsters:
            monster.x -= monster.velocity
            if monster.tick(dt, MONSTER_PERIOD):
                monster.step_frame_reverse()
        for bomb in self.bombs:
            bomb.x -= bomb.velocity
            if bomb.tick(dt, BOMB_PERIOD):
                bomb.step_frame(BOMB_FRAME_LIMIT, BOMB_FRAME_SHIFT)
        for piece in self.pieces:
            piece.x -= PIECE_SPEED
            if piece.tick(dt, PIECE_PERIOD):
                piece.step_frame(PIECE_FRAME_LIMIT, PIECE_FRAME_SHIFT)

    def collect_pieces(self, player: Player) -> int:
        """Pick up touched coins, add them to the score; return how many."""
        collected = 0
        index = 0
        while index < len(self.pieces):
            if piece_hits(player, self.pieces[index]):
                del self.pieces[index]
                remove_tile(self.lines, index, Tile.PIECE)
                player.score += 1
                collected += 1
            # The coin that slid into this slot waits for the next frame.
            index += 1
        return collected

    def hits_hazard(self, player: Player) -> bool:
        """Whether the player touches any monster or bomb."""
        return (any(monster_hits(player, m) for m in self.monsters)
                or any(bomb_hits(player, b) for b in self.bombs))

    def check_win(self, player: Player) -> bool:
        """Mark the player as winner once the finish line is reached."""
        won = player.x >= self.win_x
        if won:
            player.win = True
            player.jumping = False
            player.rect.left = RUN_FRAME_LEFT
            player.rect.height = RUN_FRAME_HEIGHT
            player.y = PLAYER_START[1]
        self.win_x -= WIN_SHIFT
        return won