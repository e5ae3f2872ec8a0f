"""Tests for driving wheels from a rota Scheduler."""

import pytest

from rota import Scheduler

from rota_wheel import Animation, Wheel, make_wheel_ticker, spin_to_completion


class TestSpinToCompletion:
    def test_runs_for_duration(self):
        wheel = Wheel(animation=Animation(duration=10, stop_angle=90))
        scheduler = Scheduler()
        frames = spin_to_completion(wheel, scheduler)
        assert frames == 10
        assert not wheel.is_spinning
        assert wheel.rotation_angle == pytest.approx(450)
        assert scheduler.clock.frame_number == 10

    def test_removes_its_ticker(self):
        wheel = Wheel(animation=Animation(duration=3))
        scheduler = Scheduler()
        spin_to_completion(wheel, scheduler)
        scheduler.run(5)
        wheel.rotation_angle = 0
        wheel.start_animation()
        scheduler.run(5)
        assert wheel.rotation_angle == 0

    def test_limit_covers_repeat_legs(self):
        wheel = Wheel(animation=Animation(duration=4, repeat=2))
        assert spin_to_completion(wheel, Scheduler()) == 12

    def test_explicit_limit(self):
        wheel = Wheel(animation=Animation(duration=10))
        assert spin_to_completion(wheel, Scheduler(), limit=4) == 4
        assert wheel.is_spinning

    def test_continues_a_run_in_progress(self):
        wheel = Wheel(animation=Animation(duration=6, easing="linear"))
        wheel.start_animation()
        wheel.tick()
        wheel.tick()
        assert spin_to_completion(wheel, Scheduler()) == 4
        assert wheel.rotation_angle == pytest.approx(360)

    def test_hooks_fire(self):
        events = []
        scheduler = Scheduler()
        scheduler.on_start(lambda ctx: events.append("start"))
        scheduler.on_stop(lambda ctx: events.append("stop"))
        spin_to_completion(Wheel(animation=Animation(duration=2)), scheduler)
        assert events == ["start", "stop"]


class TestWheelTicker:
    def test_ticker_advances_wheel(self):
        wheel = Wheel(animation=Animation(duration=10, easing="linear"))
        scheduler = Scheduler()
        scheduler.add_ticker(make_wheel_ticker(wheel))
        wheel.start_animation()
        scheduler.run(5)
        assert wheel.rotation_angle == pytest.approx(180)

    def test_idle_wheel_ignores_frames(self):
        wheel = Wheel(rotation_angle=15)
        scheduler = Scheduler()
        scheduler.add_ticker(make_wheel_ticker(wheel))
        scheduler.run(3)
        assert wheel.rotation_angle == 15

    def test_two_wheels_run_independently(self):
        fast = Wheel(animation=Animation(duration=2, easing="linear"))
        slow = Wheel(animation=Animation(duration=8, easing="linear"))
        scheduler = Scheduler()
        scheduler.add_ticker(make_wheel_ticker(fast))
        scheduler.add_ticker(make_wheel_ticker(slow))
        fast.start_animation()
        slow.start_animation()
        scheduler.run(4)
        assert not fast.is_spinning
        assert fast.rotation_angle == pytest.approx(360)
        assert slow.is_spinning
        assert slow.rotation_angle == pytest.approx(180)
