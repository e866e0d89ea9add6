"""Drawing, window handling and sound on top of pygame."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from os import PathLike
from typing import Any, Dict, Iterator, Optional, Tuple, Union

import pygame

from .entities import ParallaxBackground, Player, Rect
from .scores import int_to_str

WINDOW_SIZE = (1332, 850)
WINDOW_TITLE = "My Runner"
FRAME_RATE = 60

FONT_FILE = "american_font.ttf"
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

SCORE_POS = (65, 20)
SCORE_SIZE = 45
SCORE_ICON = "object/piece.png"
SCORE_ICON_POS = (5, 30)
SCORE_ICON_RECT = Rect(0, 0, 150, 117)
SCORE_ICON_SCALE = 0.3

PIECE_SOUND = "music/piece.wav"
JUMP_SOUND = "music/jump.wav"
BACKGROUND_MUSIC = "music/background.ogg"
PIECE_VOLUME = 0.5
JUMP_VOLUME = 0.2
MUSIC_VOLUME = 0.5

Color = Tuple[int, int, int]


class WindowClosed(Exception):
    """Raised when the user closes the game window."""


def is_close_event(event: Any) -> bool:
    """Whether the event asks to close the window."""
    return event.type == pygame.QUIT


def is_escape(event: Any) -> bool:
    """Whether the event is a press of the Escape key."""
    return event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE


def open_window() -> pygame.Surface:
    """Open the game window and return its surface."""
    pygame.init()
    surface = pygame.display.set_mode(WINDOW_SIZE)
    pygame.display.set_caption(WINDOW_TITLE)
    return surface


class Renderer:
    """Draws sprites and text onto a surface, loading assets on demand."""

    def __init__(self, surface: pygame.Surface, asset_dir: Union[str, PathLike]) -> None:
        pygame.font.init()
        self.surface = surface
        self.asset_dir = os.fspath(asset_dir)
        self._images: Dict[str, pygame.Surface] = {}
        self._fonts: Dict[int, pygame.font.Font] = {}
        self._clock = pygame.time.Clock()

    def image(self, path: str) -> pygame.Surface:
        """Load an image relative to the asset directory, once."""
        if path not in self._images:
            self._images[path] = pygame.image.load(os.path.join(self.asset_dir, path))
        return self._images[path]

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            path = os.path.join(self.asset_dir, FONT_FILE)
            self._fonts[size] = pygame.font.Font(path if os.path.isfile(path) else None, size)
        return self._fonts[size]

    def _blit_frame(self, image: str, rect: Rect, pos: Tuple[float, float],
                    scale: float) -> pygame.Rect:
        sheet = self.image(image)
        frame = pygame.Rect(rect.left, rect.top, rect.width, rect.height).clip(sheet.get_rect())
        x, y = math.floor(pos[0]), math.floor(pos[1])
        if frame.width <= 0 or frame.height <= 0:
            return pygame.Rect(x, y, 0, 0)
        part = sheet.subsurface(frame)
        if scale != 1:
            size = (max(1, round(frame.width * scale)), max(1, round(frame.height * scale)))
            part = pygame.transform.scale(part, size)
        return self.surface.blit(part, (x, y))

    def draw_object(self, obj: Any, scale: Optional[float] = None) -> pygame.Rect:
        """Draw the current frame of a sprite; return the area covered."""
        return self._blit_frame(obj.image, obj.rect, (obj.x, obj.y),
                                obj.scale if scale is None else scale)

    def draw_text(self, text: str, color: Color, size: int,
                  pos: Tuple[float, float]) -> pygame.Rect:
        """Draw a line of text; return the area covered."""
        rendered = self._font(size).render(text, True, color)
        return self.surface.blit(rendered, (math.floor(pos[0]), math.floor(pos[1])))

    def draw_background(self, background: ParallaxBackground) -> None:
        """Draw every background layer, then scroll them one step."""
        for layer in background:
            self.draw_object(layer)
        background.scroll()

    def draw_player(self, player: Player) -> pygame.Rect:
        """Advance the player's animation and draw it."""
        player.animate()
        return self.draw_object(player)

    def draw_score(self, score: int) -> pygame.Rect:
        """Draw the score with its coin icon; return the text's area."""
        area = self.draw_text(int_to_str(score), BLACK, SCORE_SIZE, SCORE_POS)
        self._blit_frame(SCORE_ICON, SCORE_ICON_RECT, SCORE_ICON_POS, SCORE_ICON_SCALE)
        return area

    def clear(self) -> None:
        """Fill the surface with black."""
        self.surface.fill(BLACK)

    def present(self) -> None:
        """Show the frame and hold the frame rate."""
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()
        self._clock.tick(FRAME_RATE)

    def poll_events(self) -> Iterator[Any]:
        """Yield pending events; raise WindowClosed when asked to close."""
        for event in pygame.event.get():
            if is_close_event(event):
                raise WindowClosed()
            yield event


def _ensure_mixer() -> None:
    if not pygame.mixer.get_init():
        pygame.mixer.init()


@dataclass
class Sounds:
    """The short effects played during a run."""

    piece: Any
    jump: Any

    @classmethod
    def load(cls, asset_dir: Union[str, PathLike]) -> "Sounds":
        """Load the effects from the asset directory."""
        _ensure_mixer()
        base = os.fspath(asset_dir)
        piece = pygame.mixer.Sound(os.path.join(base, PIECE_SOUND))
        piece.set_volume(PIECE_VOLUME)
        jump = pygame.mixer.Sound(os.path.join(base, JUMP_SOUND))
        jump.set_volume(JUMP_VOLUME)
        return cls(piece=piece, jump=jump)

    def play_piece(self) -> None:
        """Play the coin pick-up sound."""
        self.piece.play()

    def play_jump(self) -> None:
        """Play the jump sound."""
        self.jump.play()


def start_background_music(asset_dir: Union[str, PathLike]) -> None:
    """Start the looping background music."""
    _ensure_mixer()
    pygame.mixer.music.load(os.path.join(os.fspath(asset_dir), BACKGROUND_MUSIC))
    pygame.mixer.music.set_volume(MUSIC_VOLUME)
    pygame.mixer.music.play(loops=-1)