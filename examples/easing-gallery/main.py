"""Easing Gallery — Interactive easing curve visualizer.

Shows linear plus the in, out and in-out variants of one easing family,
each with its curve and an orb driven by a tick_ease.Tween.

Controls:
  1-7     Select easing family
  Space   Launch wave
  A       Toggle auto-wave
  +/-     Adjust tween duration
  C       Clear all orbs
  Esc     Quit
"""
from __future__ import annotations

import sys

import pygame

from game.components import Orb
from game.spawner import lane_easings, launch_wave
from ui.constants import (
    BG_COLOR,
    DEFAULT_DURATION,
    DURATION_STEP,
    FAMILY_KEYS,
    FPS,
    MAX_DURATION,
    MIN_DURATION,
    SCREEN_H,
    SCREEN_W,
    TPS,
)
from ui.lanes import draw_lanes
from ui.status import draw_sidebar, draw_status_bar

# Ticks a finished orb stays on its track
LINGER_TICKS = 15

FAMILY_KEYCODES = [
    pygame.K_1,
    pygame.K_2,
    pygame.K_3,
    pygame.K_4,
    pygame.K_5,
    pygame.K_6,
    pygame.K_7,
]


class GalleryState:
    """Holds all orbs and gallery settings."""

    def __init__(self) -> None:
        self.orbs: list[Orb] = []
        self.family = FAMILY_KEYS[0]
        self.duration = DEFAULT_DURATION  # ticks
        self.wave_count = 0
        self.complete_count = 0
        self.auto_wave = False
        self.ticks_to_wave = 0

    @property
    def easings(self):
        return lane_easings(self.family)

    def launch_wave(self) -> None:
        launch_wave(self.orbs, self.family, self.duration)
        self.wave_count += 1

    def toggle_auto_wave(self) -> None:
        self.auto_wave = not self.auto_wave
        self.ticks_to_wave = 0

    def clear_orbs(self) -> None:
        self.orbs.clear()

    def step(self) -> None:
        """Advance one tick: move orbs, retire finished ones, fire auto-waves."""
        for orb in self.orbs:
            if orb.tween.is_complete:
                orb.linger += 1
                continue
            orb.tween.advance()
            if orb.tween.is_complete:
                self.complete_count += 1

        self.orbs = [orb for orb in self.orbs if orb.linger <= LINGER_TICKS]

        if self.auto_wave:
            if self.ticks_to_wave <= 0:
                self.launch_wave()
                self.ticks_to_wave = self.duration
            self.ticks_to_wave -= 1


def main() -> None:
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Easing Gallery — tick-ease demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = GalleryState()

    tick_interval = 1.0 / TPS
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
                    state.launch_wave()

                elif event.key == pygame.K_a:
                    state.toggle_auto_wave()

                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    state.duration = min(state.duration + DURATION_STEP, MAX_DURATION)

                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    state.duration = max(state.duration - DURATION_STEP, MIN_DURATION)

                elif event.key == pygame.K_c:
                    state.clear_orbs()

                elif event.key in FAMILY_KEYCODES:
                    state.family = FAMILY_KEYS[FAMILY_KEYCODES.index(event.key)]
                    state.clear_orbs()

        # --- Tick ---
        while accumulator >= tick_interval:
            state.step()
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_lanes(screen, state.orbs, state.easings, font)
        draw_sidebar(
            screen,
            font,
            wave_count=state.wave_count,
            complete_count=state.complete_count,
            duration=state.duration,
            tps=TPS,
            auto_wave=state.auto_wave,
            family=state.family,
        )
        draw_status_bar(screen, font)

        pygame.display.flip()

    pygame.quit()
    print(f"Gallery: {state.wave_count} waves, {state.complete_count} orbs completed")
    sys.exit()


if __name__ == "__main__":
    main()
