
import pygame
from tetris_layout import Dims

class GameOverOverlay:
    def __init__(self, font: pygame.font.Font, big_font: pygame.font.Font):
        self.active=False
        self.title=big_font.render("GAME OVER", True, (255,220,220))
        self.hint=font.render("Space to restart", True, (200,210,235))

    def update(self, game_end: bool): self.active=game_end

    def draw(self, screen: pygame.Surface, dims: Dims):
        if not self.active: return
        s=pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA); s.fill((20,25,40,200))
        screen.blit(s,(dims.board_x,dims.board_y))
        cx=dims.board_x+dims.board_w//2; cy=dims.board_y+dims.board_h//2
        screen.blit(self.title, self.title.get_rect(center=(cx,cy-16)))
        screen.blit(self.hint, self.hint.get_rect(center=(cx,cy+20)))
