"""Command-line entry point and the main game loop."""

from __future__ import annotations

import sys
import time
from typing import Any, List, Optional, Sequence

import pygame

from .entities import ParallaxBackground, Player, create_background
from .mapdata import MapError, load_map
from .menus import difficulty_menu, high_score_path, home_menu, wait_while_paused
from .printf import my_printf
from .render import (
    WHITE,
    Renderer,
    Sounds,
    WindowClosed,
    is_escape,
    open_window,
    start_background_music,
)
from .scores import parse_int, read_high_score, update_high_score
from .world import World

ASSET_DIR = "assets"
END_TEXT_SIZE = 60
END_TEXT_POS = (550, 500)
LOSE_TEXT = "You  lose  !"
WIN_TEXT = "You  Won  !"


def usage_text() -> str:
    """The help shown for ``-h``."""
    return (
        "Finite runner created with pygame.\n\n"
        "USAGE\n  skyrunner [map.txt]\n\n"
        "OPTIONS\n -h      print the usage and quit.\n\n"
        "USER INTERACTIONS\n"
        " SPACE_KEY      jump.\n"
        " MOUSE_CLICK    click on the buttons.\n"
        " ESCAPE_KEY     come back in menu / pause in game.\n"
    )


def _is_space(event: Any) -> bool:
    return event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE


def _handle_events(renderer: Any, player: Player, sounds: Sounds) -> None:
    for event in renderer.poll_events():
        if not player.jumping and _is_space(event) and player.start_jump():
            sounds.play_jump()
        if player.jump_count == 0:
            player.update_jump()
        if is_escape(event):
            wait_while_paused(renderer)


def _draw_world(renderer: Any, background: ParallaxBackground, world: World,
                player: Player) -> None:
    renderer.draw_background(background)
    for obj in (*world.pieces, *world.monsters, *world.bombs):
        renderer.draw_object(obj)
    renderer.draw_player(player)
    renderer.draw_score(player.score)


def _drain(renderer: Any) -> None:
    for _ in renderer.poll_events():
        pass


def _lose_screen(renderer: Any, background: ParallaxBackground) -> None:
    while True:
        renderer.draw_background(background)
        renderer.draw_text(LOSE_TEXT, WHITE, END_TEXT_SIZE, END_TEXT_POS)
        renderer.present()
        _drain(renderer)


def _win_screen(renderer: Any, background: ParallaxBackground, player: Player) -> None:
    while True:
        renderer.clear()
        renderer.draw_background(background)
        renderer.draw_player(player)
        renderer.draw_text(WIN_TEXT, WHITE, END_TEXT_SIZE, END_TEXT_POS)
        renderer.draw_score(player.score)
        renderer.present()
        _drain(renderer)


def run_game(renderer: Any, lines: Sequence[str], background: ParallaxBackground,
             player: Player, sounds: Sounds) -> int:
    """Play a level until the window is closed; return the final score."""
    world = World.from_map(lines)
    last = time.monotonic()
    try:
        while True:
            renderer.clear()
            _handle_events(renderer, player, sounds)
            player.update_jump()
            if world.hits_hazard(player):
                player.lose = True
                _lose_screen(renderer, background)
            now = time.monotonic()
            world.advance(now - last)
            last = now
            _draw_world(renderer, background, world, player)
            for _ in range(world.collect_pieces(player)):
                sounds.play_piece()
            world.check_win(player)
            if player.win:
                _win_screen(renderer, background, player)
            renderer.present()
    except WindowClosed:
        return player.score


def _save_high_score(score: int, path: str) -> None:
    try:
        best = parse_int(read_high_score(path))
        update_high_score(score, best, path)
    except OSError as exc:
        print(f"cannot update high score: {exc}", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game; a single argument names a map file or asks for help."""
    args: List[str] = sys.argv[1:] if argv is None else list(argv)
    lines: Optional[List[str]] = None
    if len(args) == 1:
        if args[0].startswith("-h"):
            my_printf("%s", usage_text())
            return 0
        try:
            lines = load_map(args[0])
        except MapError as exc:
            print(exc, file=sys.stderr)
            return 1
    try:
        renderer = Renderer(open_window(), ASSET_DIR)
        start_background_music(ASSET_DIR)
        sounds = Sounds.load(ASSET_DIR)
        background = create_background()
        player = Player()
        try:
            home_menu(renderer, background, player)
            if lines is None:
                lines = load_map(difficulty_menu(renderer, background, player))
            score = run_game(renderer, lines, background, player, sounds)
        except WindowClosed:
            score = player.score
        _save_high_score(score, high_score_path(ASSET_DIR))
    except MapError as exc:
        print(exc, file=sys.stderr)
        return 1
    finally:
        pygame.quit()
    return 0