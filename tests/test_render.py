import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from unittest import mock  # noqa: E402

import pygame  # noqa: E402
import pytest  # noqa: E402

from skyrunner.entities import RUN_STEP, GameObject, Player, Rect, create_background  # noqa: E402
from skyrunner.render import (  # noqa: E402
    SCORE_POS,
    Renderer,
    Sounds,
    WindowClosed,
    is_close_event,
    is_escape,
    open_window,
    start_background_music,
)

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


@pytest.fixture(autouse=True, scope="module")
def _pygame():
    pygame.init()
    yield
    pygame.quit()


def _save(asset_dir, rel, size, color):
    path = asset_dir / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    surf = pygame.Surface(size)
    surf.fill(color)
    pygame.image.save(surf, str(path))


@pytest.fixture
def renderer(tmp_path):
    return Renderer(pygame.Surface((1332, 850)), tmp_path)


def test_close_and_escape_events():
    assert is_close_event(pygame.event.Event(pygame.QUIT))
    assert not is_close_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert is_escape(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert not is_escape(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))


def test_open_window():
    surface = open_window()
    assert surface.get_size() == (1332, 850)
    assert pygame.display.get_caption()[0] == "My Runner"


def test_image_cached(tmp_path, renderer):
    _save(tmp_path, "a.png", (4, 4), RED)
    first = renderer.image("a.png")
    assert first.get_size() == (4, 4)
    assert first.get_at((1, 1)) == RED
    assert renderer.image("a.png") is first


def test_missing_image_raises(renderer):
    with pytest.raises(FileNotFoundError):
        renderer.image("missing.png")


def test_draw_object_uses_frame_and_scale(tmp_path, renderer):
    sheet = pygame.Surface((4, 2))
    sheet.fill(RED, pygame.Rect(0, 0, 2, 2))
    sheet.fill(BLUE, pygame.Rect(2, 0, 2, 2))
    pygame.image.save(sheet, str(tmp_path / "sheet.png"))
    obj = GameObject(image="sheet.png", x=10, y=10, rect=Rect(2, 0, 2, 2))
    area = renderer.draw_object(obj, 2)
    assert area.size == (4, 4)
    assert renderer.surface.get_at((13, 13)) == BLUE
    obj.rect.left = 0
    renderer.draw_object(obj, 1)
    assert renderer.surface.get_at((10, 10)) == RED


def test_draw_text_positions_text(renderer):
    area = renderer.draw_text("Hello", (255, 255, 255), 25, (30, 40))
    assert area.topleft == (30, 40)
    assert area.width > 0


def test_draw_player_animates(tmp_path, renderer):
    _save(tmp_path, "player/player_blue.png", (300, 300), RED)
    player = Player()
    renderer.draw_player(player)
    assert player.seconds == pytest.approx(RUN_STEP)
    assert renderer.surface.get_at((int(player.x), int(player.y))) == RED


def test_draw_background_scrolls(tmp_path, renderer):
    _save(tmp_path, "bg/bg.jpg", (1332, 850), (0, 255, 0))
    _save(tmp_path, "bg/cloud.png", (1332, 362), (0, 255, 0))
    _save(tmp_path, "bg/moutain.png", (2432, 240), (0, 255, 0))
    _save(tmp_path, "bg/grass.png", (1332, 850), (0, 255, 0))
    _save(tmp_path, "bg/balloon.png", (1332, 850), RED)
    background = create_background()
    renderer.draw_background(background)
    assert renderer.surface.get_at((0, 0)) == RED
    assert background.mountains.first.x == -background.mountains.speed


def test_draw_score_places_text(tmp_path, renderer):
    _save(tmp_path, "object/piece.png", (150, 117), RED)
    area = renderer.draw_score(12)
    assert area.topleft == SCORE_POS


def test_poll_events_raises_on_close(renderer):
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    with pytest.raises(WindowClosed):
        list(renderer.poll_events())


def test_poll_events_yields_other_events(renderer):
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    events = list(renderer.poll_events())
    assert any(e.type == pygame.KEYDOWN and e.key == pygame.K_SPACE for e in events)


def test_sounds_play():
    piece, jump = mock.Mock(), mock.Mock()
    sounds = Sounds(piece=piece, jump=jump)
    sounds.play_piece()
    sounds.play_jump()
    sounds.play_jump()
    assert piece.play.call_count == 1
    assert jump.play.call_count == 2


def test_sounds_load_sets_volumes(tmp_path):
    with mock.patch("pygame.mixer.get_init", return_value=True), \
            mock.patch("pygame.mixer.Sound") as sound_cls:
        sounds = Sounds.load(tmp_path)
    paths = [c.args[0] for c in sound_cls.call_args_list]
    assert paths == [os.path.join(str(tmp_path), "music/piece.wav"),
                     os.path.join(str(tmp_path), "music/jump.wav")]
    assert sounds.piece.set_volume.call_args_list[0] == mock.call(0.5)


def test_start_background_music(tmp_path):
    with mock.patch("pygame.mixer.get_init", return_value=True), \
            mock.patch("pygame.mixer.music") as music:
        start_background_music(tmp_path)
    music.load.assert_called_once_with(os.path.join(str(tmp_path), "music/background.ogg"))
    music.play.assert_called_once_with(loops=-1)
    assert music.set_volume.call_args == mock.call(0.5)