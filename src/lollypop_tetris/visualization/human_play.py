from __future__ import annotations

import argparse
import logging
from functools import partial
from pathlib import Path
from typing import Dict, Optional, Sequence

import pygame

from lollypop_tetris.game import Command, GameConfig, ScoringRules, TetrisGame
from .audio import SoundBoard
from .effects import EffectDispatcher, open_bonus_image
from .renderer import Renderer

logger = logging.getLogger(__name__)


KEY_TO_COMMAND: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE,
    pygame.K_SPACE: Command.HARD_DROP,
}


def run(
    config: Optional[GameConfig] = None,
    rules: Optional[ScoringRules] = None,
    resource_dir: Path = Path("resource"),
) -> None:
    config = config or GameConfig()
    pygame.init()
    try:
        clock = pygame.time.Clock()
        screen = pygame.display.set_mode(
            (config.width * config.cell_size, config.height * config.cell_size)
        )
        pygame.display.set_caption("Lollypop Tetris")

        renderer = Renderer(cell_size=config.cell_size)
        dispatcher = EffectDispatcher(
            sounds=SoundBoard(resource_dir),
            bonus_action=partial(open_bonus_image, resource_dir),
        )
        game = TetrisGame(config, rules, now_ms=pygame.time.get_ticks())

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        command = KEY_TO_COMMAND.get(event.key)
                        if command is not None:
                            game.apply(command)

            dispatcher.dispatch(game.tick(pygame.time.get_ticks()))
            renderer.draw(screen, game.get_state(), show_hint=game.show_hint)
            clock.tick(60)
    finally:
        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    defaults = GameConfig()
    scoring = ScoringRules()
    p = argparse.ArgumentParser(prog="lollypop-tetris")
    p.add_argument("--width", type=int, default=defaults.width)
    p.add_argument("--height", type=int, default=defaults.height)
    p.add_argument("--cell-size", type=int, default=defaults.cell_size)
    p.add_argument("--freeze-seconds", type=float, default=defaults.freeze_duration_ms / 1000)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--base-interval-ms", type=int, default=scoring.base_fall_interval_ms)
    p.add_argument("--points-per-line", type=int, default=scoring.points_per_line)
    p.add_argument("--speed-factor", type=float, default=scoring.speed_factor)
    p.add_argument("--min-interval-ms", type=int, default=None)
    p.add_argument("--resource-dir", type=Path, default=Path("resource"))
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    return p


def main(argv: Optional[Sequence[str]] = None) -> None:
    p = build_parser()
    args = p.parse_args(argv)
    logging.basicConfig(level=args.log_level)
    try:
        config = GameConfig(
            width=args.width,
            height=args.height,
            cell_size=args.cell_size,
            freeze_duration_ms=int(args.freeze_seconds * 1000),
            random_seed=args.seed,
        )
        rules = ScoringRules(
            points_per_line=args.points_per_line,
            base_fall_interval_ms=args.base_interval_ms,
            speed_factor=args.speed_factor,
            min_fall_interval_ms=args.min_interval_ms,
        )
    except ValueError as exc:
        p.error(str(exc))
    logger.info("Starting %dx%d board", config.width, config.height)
    run(config, rules, args.resource_dir)


if __name__ == "__main__":  # pragma: no cover
    main()
