
"""
Rendering helpers for the pygame front end.

The renderer only ever sees a RenderSnapshot:
- Pre-render one cell Surface per colour name and blit it.
- Pre-render the static background (grid + panel frame) once per Dims.
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional
from tetris_config import GRID_WIDTH, GRID_HEIGHT
from tetris_layout import Dims, PREVIEW_CELLS
from tetris_piece import COLOURS
from tetris_state import RenderSnapshot

LOCKED_COLOUR = "cyan"
TEXT = (200,210,240)

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    next_label: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(GRID_WIDTH+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(GRID_HEIGHT+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        frame = pygame.Rect(d.preview_x-6, d.preview_y-6, d.cell*PREVIEW_CELLS+12, d.cell*PREVIEW_CELLS+12)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for name in COLOURS:
            s = pygame.Surface((c-2, c-2))
            s.fill(pygame.Color(name))
            self.cell_surf[name] = s

    def draw_cell(self, screen: pygame.Surface, colour: str, bx: int, by: int):
        if not (0 <= bx < GRID_WIDTH and 0 <= by < GRID_HEIGHT):
            return
        rx = self.dims.board_x + bx*self.dims.cell + 1
        ry = self.dims.board_y + by*self.dims.cell + 1
        screen.blit(self.cell_surf[colour], (rx, ry))

    def draw(self, screen: pygame.Surface, snap: RenderSnapshot):
        screen.blit(self.bg, (0,0))
        for y, row in enumerate(snap.grid):
            for x, v in enumerate(row):
                if v == 1: self.draw_cell(screen, LOCKED_COLOUR, x, y)
        if not snap.game_end:
            for x, y in snap.falling_cells:
                self.draw_cell(screen, snap.falling_colour, x, y)
        self.draw_panel_hud(screen, snap)

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, snap: RenderSnapshot):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
        if snap.score != self.hud.score:
            self.hud.score = snap.score
            self.hud.score_s = f.render(f"Score: {snap.score}", True, TEXT)
        if snap.level != self.hud.level:
            self.hud.level = snap.level
            self.hud.level_s = f.render(f"Level: {snap.level}", True, TEXT)
        if snap.removed_rows != self.hud.lines:
            self.hud.lines = snap.removed_rows
            self.hud.lines_s = f.render(f"Lines: {snap.removed_rows}", True, TEXT)
        if self.hud.next_label is None:
            self.hud.next_label = f.render("Next:", True, TEXT)
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 36))
        screen.blit(self.hud.level_s, (d.panel_x + 12, d.panel_y + 56))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 76))
        screen.blit(self.hud.next_label, (d.panel_x + 12, d.preview_y - 24))
        for y, row in enumerate(snap.next_shape):
            for x, v in enumerate(row):
                if v == 1:
                    screen.blit(self.cell_surf[snap.next_colour],
                                (d.preview_x + x*d.cell + 1, d.preview_y + y*d.cell + 1))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, TEXT),
                f.render("A/D Move", True, (165,175,215)),
                f.render("S Down", True, (165,175,215)),
                f.render("W Rotate", True, (165,175,215)),
                f.render("Space Restart", True, (165,175,215)),
            ]
        y = d.preview_y + d.cell*PREVIEW_CELLS + 24
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20
