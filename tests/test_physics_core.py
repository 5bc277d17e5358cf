from flappy_dragon.data_models import Player, Obstacle
from flappy_dragon.physics_core import PhysicsCore


def test_spawn_obstacle_draws_gap_from_fixed_range(core, rng):
    obstacle = core.spawn_obstacle(80, 0)
    assert rng.calls == [(10, 40)]
    assert obstacle == Obstacle(x=80, gap_y=25, size=20)


def test_spawn_obstacle_sized_by_score(core):
    assert core.spawn_obstacle(100, 1).size == 19
    assert core.spawn_obstacle(100, 18).size == 2
    assert core.spawn_obstacle(100, 40).size == 2


def test_default_rng_stays_in_range():
    core = PhysicsCore(seed=1234)
    gaps = [core.spawn_obstacle(80, 0).gap_y for _ in range(500)]
    assert min(gaps) >= 10
    assert max(gaps) < 40


def test_seeded_cores_generate_the_same_obstacles():
    first = PhysicsCore(seed=7)
    second = PhysicsCore(seed=7)
    assert [first.spawn_obstacle(80, s) for s in range(10)] == \
        [second.spawn_obstacle(80, s) for s in range(10)]


def test_new_player_is_at_start_position(core):
    assert core.new_player() == Player(x=5.0, y=25.0, velocity=0.0)


def test_out_of_bounds_only_past_screen_height(core):
    assert not core.out_of_bounds(Player(y=50.0))
    assert not core.out_of_bounds(Player(y=50.9))
    assert core.out_of_bounds(Player(y=51.0))


def test_check_collision_combines_bounds_and_obstacle(core):
    obstacle = Obstacle(x=80, gap_y=25, size=20)
    assert not core.check_collision(Player(x=10.0, y=25.0), obstacle)
    assert core.check_collision(Player(x=10.0, y=52.0), obstacle)
    assert core.check_collision(Player(x=80.0, y=2.0), obstacle)

