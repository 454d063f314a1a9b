"""
tick-stopwatch Countdown
Round timer demo: a stopwatch counts down each round, the loop ticks once per frame.
"""

import sys
from datetime import timedelta

import pygame

from tick_stopwatch import Loop, LoopConfig, Stopwatch, make_stopwatch_system

# --- Configuration ---
WIDTH, HEIGHT = 640, 360
FPS = 60
TITLE = "tick-stopwatch Countdown"

ROUND_LENGTH = timedelta(seconds=10)
BREAK_LENGTH = timedelta(seconds=3)

# Colors
BG_COLOR = (26, 26, 46)
HUD_COLOR = (200, 200, 220)
BAR_BG = (60, 60, 90)
ROUND_COLOR = (0, 255, 100)
BREAK_COLOR = (255, 160, 0)
PAUSED_COLOR = (120, 120, 140)


def seconds_left(sw: Stopwatch, tps: int) -> float:
    return sw.remaining_ticks / tps


def draw_bar(screen, sw: Stopwatch, color) -> None:
    outer = pygame.Rect(40, HEIGHT // 2 - 20, WIDTH - 80, 40)
    pygame.draw.rect(screen, BAR_BG, outer)
    inner = outer.copy()
    inner.width = int(outer.width * (1.0 - sw.progress))
    pygame.draw.rect(screen, color, inner)


def main():
    config = LoopConfig(tps=FPS)
    config.apply_logging()

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 16)

    loop = Loop.from_config(config)
    round_timer = loop.stopwatch(ROUND_LENGTH)
    break_timer = loop.stopwatch(BREAK_LENGTH)
    round_number = 1
    # started after the step, so it does not count the tick that ended the other one
    up_next: Stopwatch | None = None

    def on_done(ctx, sw):
        nonlocal round_number, up_next
        sw.stop()
        if sw is round_timer:
            up_next = break_timer
        else:
            round_number += 1
            up_next = round_timer
        up_next.reset()

    loop.add_system(make_stopwatch_system([round_timer, break_timer], on_done))
    round_timer.start()

    running = True
    while running:
        pg_clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    current = round_timer if not round_timer.is_done() else break_timer
                    if current.active:
                        current.stop()
                    else:
                        current.start()
                elif event.key == pygame.K_r:
                    break_timer.stop()
                    round_timer.reset()
                    round_timer.start()

        # --- Update ---
        loop.step()
        if up_next is not None:
            up_next.start()
            up_next = None

        # --- Draw ---
        screen.fill(BG_COLOR)
        on_break = round_timer.is_done()
        current = break_timer if on_break else round_timer
        if not current.active:
            color = PAUSED_COLOR
        else:
            color = BREAK_COLOR if on_break else ROUND_COLOR
        draw_bar(screen, current, color)

        label = "BREAK" if on_break else f"ROUND {round_number}"
        pause_str = "  [PAUSED]" if not current.active else ""
        hud_lines = [
            f"{label}   {seconds_left(current, loop.tps):5.2f}s   tick {loop.clock.tick_number}{pause_str}",
            "Space=Pause/Resume  R=Restart round  Esc=Quit",
        ]
        for i, line in enumerate(hud_lines):
            surf = font.render(line, True, HUD_COLOR)
            screen.blit(surf, (10, 8 + i * 22))

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
