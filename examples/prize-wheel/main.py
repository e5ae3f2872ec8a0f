"""Prize Wheel - Interactive spin-to-win demo.

Exercises rota, rota-easing, and rota-wheel.

Controls:
  Space   Spin to a random prize
  S       Stop the spin where it is
  1-4     Select easing curve
  +/-     Adjust spin duration
  I       Insert a bonus segment
  D       Delete the last segment
  Esc     Quit
"""
from __future__ import annotations

import logging
import random
import sys

import pygame

from rota import Scheduler
from rota_wheel import ConfigurationError, OutOfRangeError, make_wheel_ticker, wheel_from_config

from game.prizes import WHEEL_OPTIONS, make_on_click, make_on_finished, pick_stop_angle
from ui.constants import BG_COLOR, EASING_NAMES, FPS, SCREEN_H, SCREEN_W, SPIN_FPS, SPIN_SECONDS
from ui.status import draw_sidebar, draw_status_bar
from ui.wheel_view import WheelView

_logger = logging.getLogger("prize_wheel")


class GameState:
    """Holds the wheel, its scheduler, and the stats shown in the sidebar."""

    def __init__(self) -> None:
        self.rng = random.Random(42)
        self.view = WheelView()
        self.wheel = wheel_from_config(WHEEL_OPTIONS, renderer=self.view)

        self.scheduler = Scheduler(fps=SPIN_FPS)
        self.scheduler.add_ticker(make_wheel_ticker(self.wheel))

        self.selected_easing = EASING_NAMES[0]
        self.last_prize: str | None = None
        self.spins_done = 0
        self.clicks = 0
        self.bonus_count = 0

        anim = self.wheel.animation
        anim.duration = self.scheduler.clock.frames_for(SPIN_SECONDS)
        anim.sound_trigger = "pin"
        anim.callback_finished = make_on_finished(self._record_prize)
        anim.callback_sound = make_on_click(self._count_click)

        self.wheel.draw()

    def _record_prize(self, prize: str) -> None:
        self.last_prize = prize
        self.spins_done += 1

    def _count_click(self) -> None:
        self.clicks += 1

    def spin(self) -> None:
        anim = self.wheel.animation
        anim.easing = self.selected_easing
        anim.stop_angle = pick_stop_angle(self.wheel, self.rng)
        self.wheel.start_animation()
        _logger.info(
            "spin to %s over %d frames with %s",
            anim.stop_angle, anim.duration, anim.easing,
        )

    def change_duration(self, delta: int) -> None:
        anim = self.wheel.animation
        anim.duration = min(max(anim.duration + delta, 60), 600)

    def insert_bonus(self) -> None:
        self.bonus_count += 1
        self.wheel.insert_segment({"text": f"Bonus {self.bonus_count}", "fillStyle": "#f0a0ff"})
        self.wheel.draw()

    def delete_last(self) -> None:
        try:
            self.wheel.delete_segment(self.wheel.num_segments)
        except OutOfRangeError:
            _logger.warning("no segments left to delete")
            return
        self.wheel.draw()

    @property
    def indicated(self) -> str:
        segment = self.wheel.indicated_segment()
        return segment.text if segment is not None else "-"


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Prize Wheel - rota-wheel demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = GameState()

    tick_interval = 1.0 / SPIN_FPS
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False

                elif event.key == pygame.K_SPACE:
                    try:
                        state.spin()
                    except ConfigurationError as exc:
                        _logger.warning("cannot spin: %s", exc)

                elif event.key == pygame.K_s:
                    state.wheel.stop_animation()

                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    state.change_duration(60)

                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    state.change_duration(-60)

                elif event.key == pygame.K_i:
                    state.insert_bonus()

                elif event.key == pygame.K_d:
                    state.delete_last()

                elif pygame.K_1 <= event.key <= pygame.K_4:
                    state.selected_easing = EASING_NAMES[event.key - pygame.K_1]

        # --- Tick ---
        while accumulator >= tick_interval:
            state.scheduler.step()
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(BG_COLOR)
        state.view.draw(screen, font)
        draw_sidebar(
            screen,
            font,
            indicated=state.indicated,
            last_prize=state.last_prize,
            spins_done=state.spins_done,
            clicks=state.clicks,
            duration=state.wheel.animation.duration,
            duration_s=state.scheduler.clock.seconds_for(state.wheel.animation.duration),
            selected_easing=state.selected_easing,
            spinning=state.wheel.is_spinning,
        )
        draw_status_bar(screen, font)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
