import pytest

from floppyviz.disk import ANIMATION_STEPS, FloppyDisk


@pytest.fixture
def disk():
    return FloppyDisk()


def test_default_status_text(disk):
    assert disk.status_text() == "Track: 0  Side: 0  Sector: 0  Read  DD"


def test_status_text_reflects_state(disk):
    disk.track = 12
    disk.side = 1
    disk.write_operation = True
    disk.double_density = False
    text = disk.status_text()
    assert "Track: 12" in text
    assert "Side: 1" in text
    assert text.endswith("Write  SD")


def test_num_tracks_depends_on_density(disk):
    assert disk.num_tracks() == 80
    disk.double_density = False
    assert disk.num_tracks() == 40


def test_intervals_at_base_speed(disk):
    assert disk.track_interval() == 1000
    assert disk.side_interval() == disk.track_interval() // 2


@pytest.mark.parametrize("speed", [0.01, 0.05, 0.1, 0.25, 0.5, 2.0])
def test_intervals_scale_with_speed(disk, speed):
    disk.set_animation_speed(speed)
    assert disk.animation_speed == speed
    assert disk.track_interval() == int(1000 / speed)
    assert disk.side_interval() == disk.track_interval() // 2


@pytest.mark.parametrize("speed", [0, -1.0])
def test_non_positive_speed_is_ignored(disk, speed):
    disk.set_animation_speed(2.0)
    disk.set_animation_speed(speed)
    assert disk.animation_speed == 2.0


def test_animate_head_does_nothing_when_stopped(disk):
    disk.animate_head()
    assert disk.animation_step == 0
    assert disk.track == 0


def test_animate_head_reaches_innermost_track_and_turns(disk):
    disk.start_head_animation()
    tracks = []
    for _ in range(ANIMATION_STEPS - 1):
        disk.animate_head()
        tracks.append(disk.track)
    assert tracks == sorted(tracks)
    assert disk.track == disk.num_tracks() - 1
    assert disk.animation_direction_up is False


def test_animate_head_bounces_back(disk):
    disk.start_head_animation()
    for _ in range(2 * (ANIMATION_STEPS - 1)):
        disk.animate_head()
    assert disk.animation_step == 0
    assert disk.track == 0
    assert disk.animation_direction_up is True


def test_single_density_maps_to_forty_tracks(disk):
    disk.double_density = False
    disk.start_head_animation()
    for _ in range(ANIMATION_STEPS - 1):
        disk.animate_head()
        assert 0 <= disk.track < disk.num_tracks()
    assert disk.track == disk.num_tracks() - 1


def test_animate_head_sets_sector_from_rotation(disk):
    disk.start_head_animation()
    disk.rotation_angle = 359.9
    disk.animate_head()
    assert disk.current_sector == disk.sector_count - 1
    disk.rotation_angle = 720.0
    disk.animate_head()
    assert disk.current_sector == 0


def test_stop_keeps_position_and_resumes(disk):
    disk.start_head_animation()
    for _ in range(5):
        disk.animate_head()
    step = disk.animation_step
    disk.stop_head_animation()
    assert disk.head_animating is False
    disk.animate_head()
    assert disk.animation_step == step
    disk.start_head_animation()
    disk.animate_head()
    assert disk.animation_step == step + 1


def test_reset_head_animation(disk):
    disk.start_head_animation()
    for _ in range(ANIMATION_STEPS):
        disk.animate_head()
    disk.animate_side()
    disk.reset_head_animation()
    assert disk.head_animating is False
    assert disk.animation_step == 0
    assert disk.animation_direction_up is True
    assert (disk.track, disk.side) == (0, 0)


def test_animate_side_toggles(disk):
    disk.start_head_animation()
    disk.animate_side()
    assert disk.side == 1
    disk.animate_side()
    assert disk.side == 0


def test_animate_side_single_sided_or_stopped(disk):
    disk.animate_side()
    assert disk.side == 0
    disk.start_head_animation()
    disk.double_sided = False
    disk.animate_side()
    assert disk.side == 0


def test_set_current_sector_range(disk):
    disk.set_current_sector(5)
    assert disk.current_sector == 5
    disk.set_current_sector(-1)
    assert disk.current_sector == 5
    disk.set_current_sector(disk.sector_count)
    assert disk.current_sector == 5
    disk.current_sector = disk.sector_count - 1
    assert disk.current_sector == disk.sector_count - 1


def test_sector_count_is_at_least_one(disk):
    disk.sector_count = 0
    assert disk.sector_count == 1
    disk.sector_count = -4
    assert disk.sector_count == 1
    disk.sector_count = 9
    assert disk.sector_count == 9


@pytest.mark.parametrize("alpha, expected", [(2.0, 1.0), (-0.5, 0.0), (0.25, 0.25)])
def test_envelope_transparency_is_clamped(disk, alpha, expected):
    disk.envelope_transparency = alpha
    assert disk.envelope_transparency == expected