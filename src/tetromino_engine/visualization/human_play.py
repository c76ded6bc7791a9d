from __future__ import annotations

import argparse
from typing import Dict

import pygame

from tetromino_engine.game import Command, RandomShapeSource, load_game, save_game
from .renderer import Renderer


KEY_TO_COMMAND: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_UP: Command.MOVE_UP,
    pygame.K_DOWN: Command.MOVE_DOWN,
    pygame.K_x: Command.ROTATE,
    pygame.K_SPACE: Command.ROTATE,
    pygame.K_RETURN: Command.LOCK,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--save-file", type=str, default="tetromino_save.json")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell-size", type=int, default=28)
    return p


def run() -> None:
    args = build_parser().parse_args()
    game = load_game(args.save_file, shape_source=RandomShapeSource(args.seed))
    renderer = Renderer(cell_size=args.cell_size)

    pygame.init()
    try:
        clock = pygame.time.Clock()
        screen = pygame.display.set_mode(renderer.window_size(game.snapshot()))
        pygame.display.set_caption("Tetromino Engine - Human Play")

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_s:
                        save_game(args.save_file, game)
                        print(f"Saved game to {args.save_file}")
                    else:
                        # Keys outside the map never reach the engine
                        command = KEY_TO_COMMAND.get(event.key)
                        if command is not None:
                            game.step(command)

            renderer.draw(screen, game.snapshot())
            clock.tick(60)
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
