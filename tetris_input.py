
"""Key bindings and the fall timer that feed the reducer's event stream"""
from typing import List, Optional
import pygame
from tetris_reducer import LEFT, RIGHT, DOWN, ROTATE, RESTART, TICK
from tetris_scoring import tick_interval_ms

KEY_EVENTS = {
    pygame.K_a: LEFT, pygame.K_LEFT: LEFT,
    pygame.K_d: RIGHT, pygame.K_RIGHT: RIGHT,
    pygame.K_s: DOWN, pygame.K_DOWN: DOWN,
    pygame.K_w: ROTATE, pygame.K_UP: ROTATE,
    pygame.K_SPACE: RESTART,
}

def key_event(key: int) -> Optional[str]:
    return KEY_EVENTS.get(key)

class FallTimer:
    """Accumulates frame time and emits one tick per elapsed fall interval."""
    def __init__(self):
        self.acc = 0
    def reset(self):
        self.acc = 0
    def update(self, dt: int, level: int) -> List[str]:
        self.acc += dt
        interval = tick_interval_ms(level)
        ticks = []
        while self.acc >= interval:
            self.acc -= interval
            ticks.append(TICK)
        return ticks
