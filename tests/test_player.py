import pytest

from spaceinvaders.bullet import SCREEN_WIDTH
from spaceinvaders.events import Key, KeyEvent
from spaceinvaders.graphics import Color
from spaceinvaders.player import Player


class RecordingGraphics:
    def __init__(self):
        self.calls = []

    def draw_rect(self, rect, color, filled=True):
        self.calls.append(("rect", rect, color, filled))

    def draw_line(self, x1, y1, x2, y2, color):
        self.calls.append(("line", (x1, y1, x2, y2), color))


@pytest.fixture
def player():
    p = Player(RecordingGraphics())
    p.position.x = 400.0
    p.position.y = 550.0
    return p


def press(key):
    return KeyEvent(key=key, pressed=True)


def release(key):
    return KeyEvent(key=key, pressed=False)


def test_starts_with_three_lives(player):
    assert player.lives == 3
    assert player.is_destroyed is False


def test_take_damage_until_destroyed(player):
    player.take_damage()
    player.take_damage()
    assert player.is_destroyed is False
    player.take_damage()
    assert player.is_destroyed is True


def test_destroy_sets_lives_to_zero(player):
    player.destroy()
    assert player.lives == 0
    assert player.is_destroyed


@pytest.mark.parametrize("key", [Key.LEFT, Key.A])
def test_left_keys_move_left(player, key):
    player.handle_event(press(key))
    player.update(0.1)
    assert player.position.x < 400.0
    assert player.velocity.x == -Player.move_speed


@pytest.mark.parametrize("key", [Key.RIGHT, Key.D])
def test_right_keys_move_right(player, key):
    player.handle_event(press(key))
    player.update(0.1)
    assert player.position.x > 400.0
    assert player.velocity.x == Player.move_speed


def test_right_wins_when_both_held(player):
    player.handle_event(press(Key.LEFT))
    player.handle_event(press(Key.RIGHT))
    player.update(0.1)
    assert player.position.x > 400.0


def test_release_stops_movement(player):
    player.handle_event(press(Key.LEFT))
    player.update(0.1)
    player.handle_event(release(Key.LEFT))
    x = player.position.x
    player.update(0.1)
    assert player.position.x == x
    assert player.velocity.x == 0.0


def test_other_keys_are_ignored(player):
    player.handle_event(press(Key.OTHER))
    player.handle_event(press(Key.R))
    player.update(0.1)
    assert player.position.x == 400.0
    assert player.bullets == []


def test_clamped_to_left_edge(player):
    player.handle_event(press(Key.LEFT))
    player.update(10.0)
    assert player.position.x == Player.width * 0.5


def test_clamped_to_right_edge(player):
    player.handle_event(press(Key.RIGHT))
    player.update(10.0)
    assert player.position.x == SCREEN_WIDTH - Player.width * 0.5


def test_space_fires_one_upward_bullet(player):
    player.handle_event(press(Key.SPACE))
    player.update(0.0)
    assert len(player.bullets) == 1
    bullet = player.bullets[0]
    assert bullet.velocity.y == -500.0
    assert bullet.velocity.x == 0.0
    assert bullet.position.y < player.position.y
    assert player.shoot_cooldown == pytest.approx(0.2)


def test_only_one_bullet_at_a_time(player):
    player.handle_event(press(Key.SPACE))
    for _ in range(20):
        player.update(0.05)
        assert len(player.bullets) <= 1


def test_bullets_removed_after_leaving_screen(player):
    player.handle_event(press(Key.SPACE))
    player.update(0.0)
    player.handle_event(release(Key.SPACE))
    for _ in range(60):
        player.update(0.05)
    assert player.bullets == []


def test_reset_restores_state(player):
    player.handle_event(press(Key.SPACE))
    player.update(0.0)
    player.take_damage()
    player.position.x = 100.0
    player.reset()
    assert player.lives == 3
    assert (player.position.x, player.position.y) == (400.0, 550.0)
    assert player.bullets == []
    assert player.shoot_cooldown == 0.0


def test_bounds_centred_on_position(player):
    bounds = player.bounds
    assert bounds.w == Player.width
    assert bounds.h == Player.height
    assert bounds.x + bounds.w / 2 == player.position.x
    assert bounds.y + bounds.h / 2 == player.position.y


def test_render_draws_body_and_two_lines(player):
    player.render()
    calls = player.graphics.calls
    rects = [c for c in calls if c[0] == "rect"]
    lines = [c for c in calls if c[0] == "line"]
    assert rects == [("rect", player.bounds, Color(0, 255, 0), True)]
    assert len(lines) == 2
    apexes = {line[1][:2] for line in lines}
    assert apexes == {(player.position.x, player.bounds.y - Player.height * 0.5)}


def test_render_includes_bullets(player):
    player.handle_event(press(Key.SPACE))
    player.update(0.0)
    player.render()
    rects = [c for c in player.graphics.calls if c[0] == "rect"]
    assert len(rects) == 2
    assert rects[1][1] == player.bullets[0].bounds