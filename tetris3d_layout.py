# tetris3d_layout.py
from dataclasses import dataclass
from typing import Mapping, Tuple

from tetris3d_config import CONFIG


@dataclass
class Dims:
    cell: int
    margin: int
    gap: int
    panel_w: int
    cols: int           # board width
    rows: int           # board depth
    layers: int         # board height
    per_row: int
    layer_w: int
    layer_h: int
    grid_rows: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int

    def layer_origin(self, z: int) -> Tuple[int, int]:
        """Top-left pixel of layer z; layer 0 sits bottom-left, higher layers go right then up."""
        col = z % self.per_row
        row = self.grid_rows - 1 - z // self.per_row
        return (self.board_x + col * (self.layer_w + self.gap),
                self.board_y + row * (self.layer_h + self.gap))

    def cell_pos(self, x: int, y: int, z: int) -> Tuple[int, int]:
        """Top-left pixel of board cell (x, y, z); +depth points up on screen."""
        lx, ly = self.layer_origin(z)
        return (lx + x * self.cell, ly + (self.rows - 1 - y) * self.cell)


def compute_dims(config: Mapping = CONFIG) -> Dims:
    cell = int(config["CELL_SIZE"])
    margin = 16
    gap = 12
    panel_w = 220

    cols, rows, layers = int(config["WIDTH"]), int(config["DEPTH"]), int(config["HEIGHT"])
    per_row = max(1, min(int(config["LAYERS_PER_ROW"]), layers))
    grid_rows = -(-layers // per_row)

    layer_w = cols * cell
    layer_h = rows * cell
    board_w = per_row * layer_w + (per_row - 1) * gap
    board_h = grid_rows * layer_h + (grid_rows - 1) * gap

    total_w = margin + board_w + margin + panel_w + margin
    total_h = margin + max(board_h, 360) + margin

    board_x = margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    return Dims(
        cell=cell, margin=margin, gap=gap, panel_w=panel_w,
        cols=cols, rows=rows, layers=layers, per_row=per_row,
        layer_w=layer_w, layer_h=layer_h, grid_rows=grid_rows,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y
    )
