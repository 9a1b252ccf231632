import itertools
import random

import pytest

from shboot.engine import (
    MoveKeys,
    move_bullet,
    move_enemy,
    move_player,
    prune_bullets,
    resolve_collisions,
)
from shboot.entities import create_bullet, create_enemy, create_player
from shboot.state import GameState

WIDTH, HEIGHT = 1080, 720

ALL_KEYS = [MoveKeys(*combo) for combo in itertools.product([False, True], repeat=4)]


# ----------------------------
# Motion
# ----------------------------

def test_player_moves_per_axis_without_normalizing():
    player = create_player(500, 300)
    move_player(player, MoveKeys(down=True, right=True), 0.1, WIDTH, HEIGHT)
    assert player.origin == pytest.approx((520.0, 320.0))
    assert player.direction == (1.0, 1.0)


def test_player_direction_resets_when_idle():
    player = create_player(500, 300)
    move_player(player, MoveKeys(up=True), 0.1, WIDTH, HEIGHT)
    assert player.direction == (0.0, -1.0)
    move_player(player, MoveKeys(), 0.1, WIDTH, HEIGHT)
    assert player.direction == (0.0, 0.0)


def test_opposing_keys_cancel_and_last_write_wins():
    player = create_player(500, 300)
    move_player(player, MoveKeys(up=True, down=True), 0.1, WIDTH, HEIGHT)
    assert player.origin == pytest.approx((500.0, 300.0))
    assert player.direction == (0.0, 1.0)


def test_player_clamped_at_edges():
    player = create_player(35, 35)
    move_player(player, MoveKeys(up=True, left=True), 1.0, WIDTH, HEIGHT)
    assert player.origin == (30.0, 30.0)

    player = create_player(WIDTH - 35, HEIGHT - 35)
    move_player(player, MoveKeys(down=True, right=True), 1.0, WIDTH, HEIGHT)
    assert player.origin == (WIDTH - 30.0, HEIGHT - 30.0)


@pytest.mark.parametrize("seed", range(10))
def test_player_always_inside_screen(seed):
    rng = random.Random(seed)
    player = create_player(rng.uniform(0, WIDTH), rng.uniform(0, HEIGHT))
    for _ in range(100):
        keys = rng.choice(ALL_KEYS)
        move_player(player, keys, rng.uniform(0.0, 0.5), WIDTH, HEIGHT)
        x, y = player.origin
        r = player.radius
        assert r <= x <= WIDTH - r
        assert r <= y <= HEIGHT - r


def test_player_pulled_back_after_window_shrinks():
    player = create_player(1000, 700)
    move_player(player, MoveKeys(), 0.01, 800, 600)
    assert player.origin == (770.0, 570.0)


def test_enemy_homes_toward_player():
    player = create_player(0, 0)
    enemy = create_enemy(100, 0)
    move_enemy(enemy, player, 1.0)
    assert enemy.direction == pytest.approx((1.0, 0.0))
    assert enemy.origin == pytest.approx((80.0, 0.0))


def test_enemy_is_not_clamped():
    player = create_player(500, 300)
    enemy = create_enemy(-500, 300)
    move_enemy(enemy, player, 1.0)
    assert enemy.origin == pytest.approx((-480.0, 300.0))


def test_enemy_on_top_of_player_stays_put():
    player = create_player(500, 300)
    enemy = create_enemy(500, 300)
    move_enemy(enemy, player, 1.0)
    assert enemy.direction == (0.0, 0.0)
    assert enemy.origin == (500.0, 300.0)


def test_bullet_flies_along_direction():
    player = create_player(100, 100)
    bullet = create_bullet(player, (0.0, 1.0))
    move_bullet(bullet, 0.5)
    assert bullet.origin == pytest.approx((100.0, 230.0))


# ----------------------------
# Pruning
# ----------------------------

def _bullet_at(x, y):
    bullet = create_bullet(create_player(0, 0), (1.0, 0.0))
    bullet.origin = (x, y)
    return bullet


def test_offscreen_bullets_pruned():
    kept = _bullet_at(WIDTH, HEIGHT)
    bullets = [
        _bullet_at(WIDTH + 1, 100),
        _bullet_at(0, 100),
        _bullet_at(100, -5),
        _bullet_at(100, HEIGHT + 0.5),
        kept,
    ]
    assert prune_bullets(bullets, WIDTH, HEIGHT) == [kept]


# ----------------------------
# Collisions
# ----------------------------

def test_bullet_kills_enemy():
    player = create_player(100, 100)
    enemy = create_enemy(600, 300)
    bullet = _bullet_at(605, 300)
    enemies, bullets = [enemy], [bullet]
    state = GameState(high_score=0)

    result = resolve_collisions(player, enemies, bullets, state)

    assert result.kills == 1
    assert result.hits == 0
    assert enemies == [] and bullets == []
    assert state.score == 1
    assert state.high_score == 1


def test_enemy_touching_player_costs_one_life():
    player = create_player(100, 100)
    enemies = [create_enemy(120, 100)]
    state = GameState()

    result = resolve_collisions(player, enemies, [], state)

    assert result.hits == 1
    assert not result.died
    assert player.health == 4
    assert enemies == []


def test_player_hit_takes_precedence_over_bullet():
    player = create_player(100, 100)
    enemy = create_enemy(140, 100)
    bullet = _bullet_at(150, 100)
    enemies, bullets = [enemy], [bullet]
    state = GameState()

    result = resolve_collisions(player, enemies, bullets, state)

    assert result.hits == 1
    assert result.kills == 0
    assert player.health == 4
    assert enemies == []
    assert bullets == [bullet]
    assert state.score == 0


def test_one_bullet_kills_one_enemy():
    player = create_player(100, 100)
    first = create_enemy(600, 300)
    second = create_enemy(610, 300)
    bullet = _bullet_at(605, 300)
    enemies, bullets = [first, second], [bullet]
    state = GameState()

    result = resolve_collisions(player, enemies, bullets, state)

    assert result.kills == 1
    assert enemies == [second]
    assert bullets == []


def test_adjacent_removals_are_not_skipped():
    player = create_player(100, 100)
    enemies = [create_enemy(600, 300), create_enemy(800, 300), create_enemy(120, 100)]
    bullets = [_bullet_at(600, 300), _bullet_at(800, 300)]
    state = GameState()

    result = resolve_collisions(player, enemies, bullets, state)

    assert result.kills == 2
    assert result.hits == 1
    assert enemies == [] and bullets == []
    assert state.score == 2
    assert player.health == 4


def test_death_stops_the_pass():
    player = create_player(100, 100)
    player.health = 1
    late = create_enemy(600, 300)
    enemies = [create_enemy(110, 100), create_enemy(90, 100), late]
    bullets = [_bullet_at(600, 300)]
    state = GameState()

    result = resolve_collisions(player, enemies, bullets, state)

    assert result.died
    assert result.hits == 1
    assert player.health == 0
    # enemies after the fatal hit are left for the caller's reset
    assert len(enemies) == 2
    assert late in enemies
    assert len(bullets) == 1
    assert state.score == 0


def test_kill_bonus_can_absorb_later_hit():
    player = create_player(100, 100)
    player.health = 1
    enemies = [create_enemy(600, 300), create_enemy(110, 100)]
    bullets = [_bullet_at(600, 300)]
    state = GameState(score=9)

    result = resolve_collisions(player, enemies, bullets, state)

    assert state.score == 10
    assert not result.died
    assert player.health == 1
