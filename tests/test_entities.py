import pytest

from skyrunner.entities import (
    GameObject,
    ParallaxBackground,
    Player,
    Rect,
    create_background,
)


def make_object(left=0):
    return GameObject(image="object/bomb.png", x=0, y=0, rect=Rect(left, 0, 29, 25))


def test_tick_waits_for_period_then_resets():
    obj = make_object()
    assert obj.tick(0.1, 0.14) is False
    assert obj.tick(0.05, 0.14) is True
    assert obj.elapsed == 0.0


def test_step_frame_advances_and_wraps():
    obj = make_object(0)
    obj.step_frame(87, 29)
    assert obj.rect.left == 29
    obj.rect.left = 87
    obj.step_frame(87, 29)
    assert obj.rect.left == 0


@pytest.mark.parametrize("start", [254, 1, 0])
def test_step_frame_reverse(start):
    obj = make_object(start)
    obj.step_frame_reverse()
    if start >= 2:
        assert obj.rect.left == start - 23
    else:
        assert obj.rect.left == 231


def test_player_defaults():
    player = Player()
    assert player.rect == Rect(160, 0, 50, 46)
    assert (player.x, player.y) == (100, 595)
    assert player.score == 0
    assert not player.jumping


def test_start_jump_only_once():
    player = Player()
    assert player.start_jump() is True
    first = Rect(player.rect.left, player.rect.top, player.rect.width, player.rect.height)
    assert player.start_jump() is False
    assert player.rect == first
    assert player.rect.left == 160 + 50
    assert player.rect.top == 50


def test_jump_arc_returns_to_ground():
    player = Player()
    start_y = player.y
    player.start_jump()
    heights = []
    for _ in range(40):
        player.update_jump()
        heights.append(player.y)
    assert min(heights) < start_y
    assert heights[-1] == start_y
    assert player.jumping
    player.update_jump()
    assert not player.jumping
    assert player.jump_count == 0
    assert player.rect == Rect(160, 0, 50, 46)


def test_update_jump_idle_does_not_move():
    player = Player()
    player.update_jump()
    assert player.y == 595
    assert player.rect == Rect(160, 0, 50, 46)


def test_animate_jump_rows():
    player = Player()
    player.start_jump()
    player.animate()
    assert player.rect.top == 100
    for _ in range(15):
        player.update_jump()
    player.animate()
    assert player.rect.top == 153


def test_animate_run_row_changes_after_five_frames():
    player = Player()
    for _ in range(4):
        player.animate()
    assert player.rect.top == 0
    player.animate()
    assert player.rect.top == 44


def test_animate_run_cycle_resets():
    player = Player()
    tops = []
    for _ in range(200):
        player.animate_run()
        tops.append(player.rect.top)
        if player.seconds == 0.0:
            break
    assert player.seconds == 0.0
    assert player.rect.top == 0
    assert max(tops) > 0
    assert all(top % 44 == 0 for top in tops)


def test_background_draw_order():
    bg = create_background()
    layers = list(bg)
    assert len(layers) == 9
    assert layers[0].image == "bg/bg.jpg"
    assert [layer.image for layer in layers[1:3]] == ["bg/cloud.png"] * 2
    assert [layer.image for layer in layers[3:5]] == ["bg/moutain.png"] * 2
    assert layers[3].y == 450


def test_scroll_moves_each_layer_by_its_speed():
    bg = create_background()
    pairs = [bg.mountains, bg.grass, bg.balloons, bg.clouds]
    before = [(p.first.x, p.second.x) for p in pairs]
    bg.scroll()
    for pair, (a, b) in zip(pairs, before):
        assert pair.first.x < a
        assert pair.second.x == b - pair.speed


def test_grass_wraps_when_second_copy_reaches_reset():
    bg = create_background()
    for _ in range(1000):
        if bg.grass.second.x == -3:
            break
        bg.scroll()
    assert bg.grass.second.x == -3
    bg.scroll()
    assert bg.grass.first.x == 1332 - bg.grass.speed


def test_layers_stay_in_bounds_over_time():
    bg = create_background()
    assert isinstance(bg, ParallaxBackground)
    for _ in range(6000):
        bg.scroll()
        for pair in (bg.mountains, bg.grass, bg.balloons, bg.clouds):
            for layer in pair:
                assert -pair.wrap_to <= layer.x <= pair.wrap_to
    assert bg.sky.x == 0