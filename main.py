
import logging
import sys
import pygame
from tetris_config import CONFIG
from tetris_input import FallTimer, key_event
from tetris_layout import compute_dims
from tetris_overlay import GameOverOverlay
from tetris_reducer import reduce
from tetris_render import RenderAssets
from tetris_state import initial_state, snapshot

log = logging.getLogger(__name__)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font)
    overlay = GameOverOverlay(font, big_font)
    clock = pygame.time.Clock()
    timer = FallTimer()

    state = initial_state()
    log.info("new game, first piece %s", state.falling.name)

    while True:
        dt = clock.tick(60)
        events = []
        for e in pygame.event.get():
            if e.type == pygame.QUIT or (e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE):
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                ev = key_event(e.key)
                if ev: events.append(ev)
        events.extend(timer.update(dt, state.level))

        for ev in events:
            was_over = state.game_end
            state = reduce(state, ev)
            if was_over and not state.game_end:
                timer.reset()

        snap = snapshot(state)
        overlay.update(snap.game_end)
        render.draw(screen, snap)
        overlay.draw(screen, dims)
        pygame.display.flip()


if __name__ == '__main__':
    main()
