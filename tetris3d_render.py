"""
Rendering helpers for the layered 3D well view.

The well is drawn as one top-down panel per horizontal layer.

Optimizations:
- Pre-render cell Surfaces per color (solid + landing shadow outline) and blit them.
- Pre-render static background (layer grids + panel frame) once per Dims.
- Cache HUD text surfaces; re-render only when values change.
- Cache a BOARD SURFACE with all *locked* elements; rebuild it only after a lock.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional

from tetris3d_block import Block, Color
from tetris3d_board import Board
from tetris3d_layout import Dims

COLORS: Dict[Color, Tuple[int,int,int]] = {
    Color.RED: (188,45,30),
    Color.GREEN: (106,176,47),
    Color.BLUE: (55,162,181),
    Color.YELLOW: (233,208,2),
}

@dataclass
class HudCache:
    score: int = -1
    best: int = -1
    levels: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    best_s: Optional[pygame.Surface] = None
    levels_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        # Locked elements only, same size as the whole window so cell_pos() applies directly
        self.board_surface = pygame.Surface((dims.total_w, dims.total_h), pygame.SRCALPHA)
        self._board: Optional[Board] = None
        self._board_revision = -1

    # ---------- Static background (layer grids + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for z in range(d.layers):
            lx, ly = d.layer_origin(z)
            pygame.draw.rect(self.bg, (16,20,44), (lx, ly, d.layer_w, d.layer_h))
            for x in range(d.cols+1):
                X = lx + x*d.cell
                pygame.draw.line(self.bg, grid_col, (X, ly), (X, ly + d.layer_h))
            for y in range(d.rows+1):
                Y = ly + y*d.cell
                pygame.draw.line(self.bg, grid_col, (lx, Y), (lx + d.layer_w, Y))
            label = self.font.render(str(z), True, (90,100,150))
            self.bg.blit(label, (lx + 2, ly + 1))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.total_h - 2*d.margin)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)

    # ---------- Small cell sprites (solid + shadow outline) ----------
    def _make_cells(self):
        self.cell_surf: Dict[Color, pygame.Surface] = {}
        self.shadow_surf: Dict[Color, pygame.Surface] = {}
        c = self.dims.cell
        for color, rgb in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(rgb)
            self.cell_surf[color] = s
            g = pygame.Surface((c-8, c-8), pygame.SRCALPHA)
            pygame.draw.rect(g, rgb, (0,0,c-8,c-8), 2)
            self.shadow_surf[color] = g

    def redraw_static(self, screen: pygame.Surface):
        screen.blit(self.bg, (0,0))

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, board: Board):
        """Rebuilds the "locked elements" surface from board contents."""
        self.board_surface.fill((0,0,0,0))
        for x in range(board.width):
            for y in range(board.depth):
                for z in range(board.height):
                    e = board.element_at(x, y, z)
                    if e is not None:
                        px, py = self.dims.cell_pos(x, y, z)
                        self.board_surface.blit(self.cell_surf[e.color], (px+1, py+1))

    def sync_board(self, board: Board) -> bool:
        """Rebuild the board surface if the board was replaced or changed since the last sync."""
        if board is self._board and board.revision == self._board_revision:
            return False
        self._board = board
        self._board_revision = board.revision
        self.rebuild_board_surface(board)
        return True

    def blit_board_surface(self, screen: pygame.Surface):
        screen.blit(self.board_surface, (0,0))

    # ---------- Active block and its landing shadow ----------
    def draw_block(self, screen: pygame.Surface, block: Block, shadow: bool = False):
        d = self.dims
        for x, y, z, e in block.world_cells():
            # above the ceiling or outside the well: not visible yet
            if not (0 <= x < d.cols and 0 <= y < d.rows and 0 <= z < d.layers):
                continue
            px, py = d.cell_pos(x, y, z)
            if shadow:
                screen.blit(self.shadow_surf[e.color], (px+4, py+4))
            else:
                screen.blit(self.cell_surf[e.color], (px+1, py+1))

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, score: int, best: int, levels: int):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris 3D", True, (197,202,233))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, (200,210,240))
        if best != self.hud.best:
            self.hud.best = best
            self.hud.best_s = f.render(f"High score: {best}", True, (200,210,240))
        if levels != self.hud.levels:
            self.hud.levels = levels
            self.hud.levels_s = f.render(f"Levels: {levels}", True, (200,210,240))
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        if self.hud.score_s: screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        if self.hud.best_s: screen.blit(self.hud.best_s, (d.panel_x + 12, d.panel_y + 68))
        if self.hud.levels_s: screen.blit(self.hud.levels_s, (d.panel_x + 12, d.panel_y + 92))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, (200,210,240)),
                f.render("←/→ Move width", True, (165,175,215)),
                f.render("↑/↓ Move depth", True, (165,175,215)),
                f.render("A/S/D Rotate X/Y/Z", True, (165,175,215)),
                f.render("Space Drop", True, (165,175,215)),
                f.render("R Restart • Esc Quit", True, (165,175,215)),
            ]
        y = d.panel_y + 140
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

    def draw_game_over(self, screen: pygame.Surface, font: pygame.font.Font, record: bool):
        d = self.dims
        text = "NEW HIGH SCORE! (R to Restart)" if record else "GAME OVER (R to Restart)"
        msg = font.render(text, True, (255,220,220))
        rect = msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
        backing = rect.inflate(24, 16)
        pygame.draw.rect(screen, (20,25,40), backing)
        screen.blit(msg, rect)
