"""Home, skin and difficulty menus shown before a run."""

from __future__ import annotations

import os
from typing import Any, Iterable, List, Sequence, Tuple

import pygame

from .entities import GameObject, Player, Rect
from .render import BLACK, WHITE, WindowClosed, is_escape
from .scores import read_high_score

Point = Tuple[float, float]
TextSpec = Tuple[str, Tuple[int, int, int], int, Tuple[float, float]]

HIGH_SCORE_FILE = "high_score.txt"
MISSING_HIGH_SCORE = "0"

PLAY, SKIN, LEAVE = 1, 2, 3
BUTTON_IMAGES = ("btn/play_btn.png", "btn/skin_btn.png", "btn/leave_btn.png")
BUTTON_ORIGINS = ((325, 690), (575, 690), (825, 690))
BUTTON_FRAME = 256
BUTTON_SCALE = 0.6
BUTTON_HIT_SIZE = (150, 256)

MENU_LABELS = "Play" + " " * 30 + "Skin" + " " * 29 + "Leave"
HOME_TEXTS: Tuple[TextSpec, ...] = (
    ("My Runner", BLACK, 140, (450, 100)),
    (MENU_LABELS, WHITE, 45, (370, 630)),
)
HIGH_SCORE_VALUE_STYLE = (WHITE, 40, (1230, 23))
HIGH_SCORE_LABEL: TextSpec = ("High Score: ", WHITE, 45, (1050, 20))

SKIN_IMAGES = {
    1: "player/player_blue.png",
    2: "player/player_red.png",
    3: "player/player_purple.png",
    4: "player/player_orange.png",
}
DEFAULT_SKIN = 1
SKIN_PREVIEWS = (
    ("player/player_red.png", (250, 595)),
    ("player/player_purple.png", (400, 595)),
    ("player/player_orange.png", (550, 595)),
)
SKIN_HIT_SIZE = (100, 100)
SKIN_TEXTS: Tuple[TextSpec, ...] = (
    ("Skin", BLACK, 90, (600, 200)),
    ("Blue", WHITE, 25, (160, 550)),
    ("Red", WHITE, 25, (310, 550)),
    ("Purple", WHITE, 25, (450, 550)),
    ("Gold", WHITE, 25, (610, 550)),
)
CURSOR_IMAGE = "btn/cursor.png"
CURSOR_STEP = 152
CURSOR_Y = 500
CURSOR_FRAME = (356, 204)
CURSOR_SCALE = 0.1

SKULL_IMAGE = "btn/skull.png"
SKULL_ORIGINS = ((420, 410), (600, 385), (800, 365))
SKULL_SCALES = (0.15, 0.2, 0.25)
SKULL_FRAME = 436
SKULL_HIT_SIZE = (109, 109)
DIFFICULTY_TEXTS: Tuple[TextSpec, ...] = (
    ("Difficulty", BLACK, 90, (500, 100)),
    ("Easy", WHITE, 25, (430, 500)),
    ("Normal", WHITE, 25, (610, 500)),
    ("Hard", WHITE, 25, (830, 500)),
)
DIFFICULTY_MAPS = {1: "map/map_easy.txt", 2: "map/map_normal.txt"}
HARD_MAP = "map/map_hard.txt"


def button_at(pos: Point, origins: Iterable[Point], size: Sequence[float]) -> int:
    """Number (from 1) of the first button containing ``pos``, or 0."""
    x, y = pos
    width, height = size
    for number, (left, top) in enumerate(origins, 1):
        if left <= x <= left + width and top <= y <= top + height:
            return number
    return 0


def skin_at(pos: Point, origins: Iterable[Point], current: int) -> int:
    """Skin under ``pos``, or ``current`` when none is hit."""
    return button_at(pos, origins, SKIN_HIT_SIZE) or current


def difficulty_map(choice: int) -> str:
    """Map file, relative to the asset directory, for a difficulty choice."""
    return DIFFICULTY_MAPS.get(choice, HARD_MAP)


def skin_image(skin: int) -> str:
    """Sprite sheet of a skin number."""
    try:
        return SKIN_IMAGES[skin]
    except KeyError:
        raise ValueError(f"unknown skin: {skin}") from None


def high_score_path(asset_dir: Any) -> str:
    """Location of the high-score file inside the asset directory."""
    return os.path.join(os.fspath(asset_dir), HIGH_SCORE_FILE)


def _high_score_text(asset_dir: Any) -> str:
    try:
        return read_high_score(high_score_path(asset_dir)).strip()
    except OSError:
        return MISSING_HIGH_SCORE


def _clicked(event: Any, origins: Iterable[Point], size: Sequence[float]) -> int:
    if event.type == pygame.MOUSEBUTTONDOWN:
        return button_at(event.pos, origins, size)
    return 0


def _draw_texts(renderer: Any, texts: Iterable[TextSpec]) -> None:
    for text, color, size, pos in texts:
        renderer.draw_text(text, color, size, pos)


def _draw_scene(renderer: Any, background: Any, player: Player) -> None:
    renderer.draw_background(background)
    renderer.draw_player(player)


def wait_while_paused(renderer: Any) -> None:
    """Hold the game until Escape is pressed again."""
    paused = True
    while paused:
        for event in renderer.poll_events():
            if is_escape(event):
                paused = False
        if paused:
            renderer.present()


def home_menu(renderer: Any, background: Any, player: Player) -> int:
    """Show the home screen until Play is clicked; return the chosen skin.

    Clicking Leave raises WindowClosed.
    """
    buttons = [
        GameObject(image=image, x=float(x), y=float(y),
                   rect=Rect(0, 0, BUTTON_FRAME, BUTTON_FRAME), scale=BUTTON_SCALE)
        for image, (x, y) in zip(BUTTON_IMAGES, BUTTON_ORIGINS)
    ]
    origins = [(button.x, button.y) for button in buttons]
    texts = HOME_TEXTS + (
        (_high_score_text(renderer.asset_dir), *HIGH_SCORE_VALUE_STYLE),
        HIGH_SCORE_LABEL,
    )
    choice = 0
    skin = DEFAULT_SKIN
    while choice != PLAY:
        renderer.clear()
        _draw_scene(renderer, background, player)
        for button in buttons:
            renderer.draw_object(button)
        _draw_texts(renderer, texts)
        renderer.present()
        if choice == SKIN:
            skin = skin_menu(renderer, background, player, skin)
            player.image = skin_image(skin)
            choice = 0
        for event in renderer.poll_events():
            choice = _clicked(event, origins, BUTTON_HIT_SIZE)
        if choice == LEAVE:
            raise WindowClosed()
    return skin


def skin_menu(renderer: Any, background: Any, player: Player, skin: int) -> int:
    """Let the player pick a skin until Escape; return the skin number."""
    previews = [Player(image=image, x=float(x), y=float(y)) for image, (x, y) in SKIN_PREVIEWS]
    cursor = GameObject(image=CURSOR_IMAGE, x=float(CURSOR_STEP * skin), y=float(CURSOR_Y),
                        rect=Rect(0, 0, *CURSOR_FRAME), scale=CURSOR_SCALE)
    player.image = skin_image(DEFAULT_SKIN)
    show_previews = False
    go_back = False
    while not go_back:
        renderer.clear()
        renderer.draw_background(background)
        _draw_texts(renderer, SKIN_TEXTS)
        renderer.draw_player(player)
        if show_previews:
            for preview in previews:
                renderer.draw_player(preview)
        elif player.rect.top == 0:
            show_previews = True
        cursor.x = float(CURSOR_STEP * skin)
        renderer.draw_object(cursor)
        origins: List[Point] = [(player.x, player.y)]
        origins.extend((preview.x, preview.y) for preview in previews)
        for event in renderer.poll_events():
            if is_escape(event):
                go_back = True
            if event.type == pygame.MOUSEBUTTONDOWN:
                skin = skin_at(event.pos, origins, skin)
        renderer.present()
    return skin


def difficulty_menu(renderer: Any, background: Any, player: Player) -> str:
    """Ask for a difficulty; return the path of the matching map file."""
    skulls = [
        GameObject(image=SKULL_IMAGE, x=float(x), y=float(y),
                   rect=Rect(0, 0, SKULL_FRAME, SKULL_FRAME), scale=scale)
        for (x, y), scale in zip(SKULL_ORIGINS, SKULL_SCALES)
    ]
    origins = [(skull.x, skull.y) for skull in skulls]
    choice = 0
    while choice == 0:
        renderer.clear()
        _draw_scene(renderer, background, player)
        for skull in skulls:
            renderer.draw_object(skull)
        _draw_texts(renderer, DIFFICULTY_TEXTS)
        renderer.present()
        for event in renderer.poll_events():
            choice = _clicked(event, origins, SKULL_HIT_SIZE)
    return os.path.join(os.fspath(renderer.asset_dir), difficulty_map(choice))