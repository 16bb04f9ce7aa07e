"""
Unit tests for the day/night driver.
"""

import pytest
from systems.day_night import DayNightDriver, advance_time_of_day, DEFAULT_SPEED
from world.time.environment_light import EnvironmentLight


SPEED = 1.0 / 60.0


class TestAdvanceTimeOfDay:
    """Tests for the advance-and-wrap helper."""

    def test_default_speed_is_one_day_per_minute(self):
        """Test the default speed is 1/60."""
        assert DEFAULT_SPEED == pytest.approx(1.0 / 60.0)

    def test_linear_accumulation(self):
        """Test 30 seconds from midnight reaches half a day."""
        assert advance_time_of_day(0.0, SPEED, 30.0) == pytest.approx(0.5)

    def test_wraparound(self):
        """Test that 0.95 + 6/60 wraps to 0.05."""
        assert advance_time_of_day(0.95, SPEED, 6.0) == pytest.approx(0.05)

    def test_multiple_wraps(self):
        """Test that a frame longer than several days still lands in range."""
        result = advance_time_of_day(0.0, SPEED, 185.0)
        assert result == pytest.approx(5.0 / 60.0)

    def test_zero_frametime_is_identity(self):
        """Test that an empty frame leaves time unchanged."""
        assert advance_time_of_day(0.4, SPEED, 0.0) == pytest.approx(0.4)

    def test_exact_day_boundary_wraps_to_zero(self):
        """Test that landing exactly on 1.0 becomes 0.0."""
        assert advance_time_of_day(0.5, 0.25, 2.0) == 0.0

    @pytest.mark.parametrize("start", [0.0, 0.25, 0.5, 0.999])
    @pytest.mark.parametrize("elapsed", [0.0, 0.016, 1.0, 59.9, 60.0, 1234.5])
    def test_result_always_in_unit_interval(self, start, elapsed):
        """Test that the result stays in [0, 1)."""
        result = advance_time_of_day(start, SPEED, elapsed)
        assert 0.0 <= result < 1.0


class TestDayNightDriverResolution:
    """Tests for lazy EnvironmentLight lookup."""

    def test_driver_starts_unresolved(self, driver):
        """Test that a new driver has no environment."""
        assert driver.resolved is False
        assert driver.environment is None

    def test_update_without_light_is_noop(self, driver, entity):
        """Test that repeated updates do nothing while the light is absent."""
        for _ in range(5):
            driver.update(0.5)

        assert driver.resolved is False
        assert driver.resolve_environment() is None
        assert list(entity) == []

    def test_resolves_light_attached_later(self, driver, entity, environment_light):
        """Test that a light attached after the driver is picked up."""
        driver.update(1.0)
        assert driver.resolved is False

        entity.add_component(environment_light)
        driver.update(0.0)

        assert driver.resolved is True
        assert driver.environment is environment_light

    def test_first_resolution_initializes_light(self, driver, entity):
        """Test that first resolution resets time and fixes it."""
        light = EnvironmentLight(current_time=0.6, fixed_time=False)
        entity.add_component(light)

        assert driver.resolve_environment() is light
        assert light.current_time == 0.0
        assert light.fixed_time is True

    def test_initialization_runs_once(self, driver, entity):
        """Test that later resolutions never reset the light again."""
        light = EnvironmentLight()
        entity.add_component(light)
        driver.update(30.0)
        assert light.current_time == pytest.approx(0.5)

        light.fixed_time = False
        driver.resolve_environment()
        driver.update(0.0)

        assert light.current_time == pytest.approx(0.5)
        assert light.fixed_time is False

    def test_resolution_is_per_driver(self, scene):
        """Test that drivers on different entities do not share a light."""
        first = scene.create_entity("first")
        second = scene.create_entity("second")
        first_light = first.add_component(EnvironmentLight())
        d1 = DayNightDriver(first)
        d2 = DayNightDriver(second)

        d1.update(6.0)
        d2.update(6.0)

        assert d1.environment is first_light
        assert d2.environment is None
        assert first_light.current_time == pytest.approx(0.1)


class TestDayNightDriverUpdate:
    """Tests for advancing the light's time of day."""

    def test_first_update_advances_from_midnight(self, driver, entity):
        """Test that the first update resets to 0 then advances."""
        light = entity.add_component(EnvironmentLight(current_time=0.9))
        driver.update(30.0)
        assert light.current_time == pytest.approx(0.5)

    def test_wraparound_through_driver(self, driver, entity):
        """Test wraparound from 0.95 with a 6 second frame."""
        light = entity.add_component(EnvironmentLight())
        driver.resolve_environment()
        light.current_time = 0.95

        driver.update(6.0)

        assert light.current_time == pytest.approx(0.05)

    def test_many_small_frames_accumulate(self, driver, entity):
        """Test that 60 frames of 1/60s advance by 1/60 of a day."""
        light = entity.add_component(EnvironmentLight())
        for _ in range(60):
            driver.update(1.0 / 60.0)
        assert light.current_time == pytest.approx(1.0 / 60.0)

    def test_custom_speed(self, entity):
        """Test that a custom speed is used."""
        light = entity.add_component(EnvironmentLight())
        driver = DayNightDriver(entity, speed=1.0 / 120.0)
        driver.update(30.0)
        assert light.current_time == pytest.approx(0.25)


class TestDayNightDriverBinding:
    """Tests for connecting the driver to a frame signal."""

    def test_bind_drives_updates(self, driver, entity, scene):
        """Test that a bound driver advances on each frame."""
        light = entity.add_component(EnvironmentLight())
        driver.bind(scene.frame.updated)

        scene.update(15.0)
        scene.update(15.0)

        assert light.current_time == pytest.approx(0.5)

    def test_bind_twice_does_not_double_connect(self, driver, scene):
        """Test that binding to the same signal twice connects once."""
        driver.bind(scene.frame.updated)
        driver.bind(scene.frame.updated)
        assert len(scene.frame.updated) == 1

    def test_rebind_moves_to_new_signal(self, driver, scene):
        """Test that binding elsewhere disconnects the old signal."""
        from engine.scene import FrameSignal
        other = FrameSignal()

        driver.bind(scene.frame.updated)
        driver.bind(other)

        assert len(scene.frame.updated) == 0
        assert len(other) == 1

    def test_unbind_stops_updates(self, driver, entity, scene):
        """Test that an unbound driver no longer advances."""
        light = entity.add_component(EnvironmentLight())
        driver.bind(scene.frame.updated)
        scene.update(6.0)
        driver.unbind()
        scene.update(6.0)

        assert light.current_time == pytest.approx(0.1)

    def test_light_attached_mid_run(self, driver, entity, scene):
        """Test the light is driven from the frame it is attached on."""
        driver.bind(scene.frame.updated)
        scene.update(10.0)

        light = entity.add_component(EnvironmentLight(clock=lambda: 0.75))
        scene.update(6.0)

        # Driver runs first: reset to 0, fix time, advance 6/60.
        # The light's own handler then leaves fixed time alone.
        assert light.fixed_time is True
        assert light.current_time == pytest.approx(0.1)
