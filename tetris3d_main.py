import sys

import pygame

from tetris3d_config import CONFIG
from tetris3d_highscore import HighScore
from tetris3d_input import InputLatch
from tetris3d_layout import compute_dims
from tetris3d_log import get_logger, setup_logging
from tetris3d_logic import GameLogic
from tetris3d_render import RenderAssets

logger = get_logger(__name__)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    setup_logging(CONFIG["LOG_LEVEL"])
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims(CONFIG)
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris 3D")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 36)

    render = RenderAssets(dims, font)
    clock = pygame.time.Clock()

    high_score = HighScore(CONFIG["HIGHSCORE_PATH"])
    logic = GameLogic(config=CONFIG)
    latch = InputLatch()
    logger.info("Started %dx%dx%d well, high score %d",
                logic.width, logic.depth, logic.height, high_score.best)

    record = False
    reported = False

    while True:
        clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); return
            if e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    pygame.quit(); return
                if e.key == pygame.K_r and logic.is_over:
                    logic.new_game()
                    latch.take()
                    record = reported = False
                    logger.info("Restarted")
                    continue
                latch.feed(e.key)

        logic.push(latch.take())
        logic.tick()

        if logic.is_over and not reported:
            record = high_score.submit(logic.score)
            reported = True

        # Rebuild the locked-element cache only after a lock, a reduction or a restart
        render.sync_board(logic.board)

        render.redraw_static(screen)
        render.blit_board_surface(screen)
        if not logic.is_over:
            render.draw_block(screen, logic.board.drop_position(logic.block), shadow=True)
            render.draw_block(screen, logic.block)
        render.draw_panel_hud(screen, logic.score, max(high_score.best, logic.score), logic.levels_cleared)
        if logic.is_over:
            render.draw_game_over(screen, big_font, record)
        pygame.display.flip()


if __name__ == '__main__':
    main()
    sys.exit()
