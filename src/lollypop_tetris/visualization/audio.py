from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Tuple

import pygame

from lollypop_tetris.game import Effect

logger = logging.getLogger(__name__)


# The start jingle plays over the death sound as the freeze begins
SOUND_FILES: Dict[Effect, Tuple[str, ...]] = {
    Effect.LINE_CLEARED: ("atk.ogg",),
    Effect.GAME_OVER: ("death.ogg", "random.mp3"),
}


class SoundBoard:
    """Loads the sounds for each effect; anything missing is skipped."""

    def __init__(self, resource_dir: Path) -> None:
        self.sounds: Dict[Effect, List[pygame.mixer.Sound]] = {}
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as exc:
            logger.warning("Audio disabled: %s", exc)
            return
        loaded: Dict[str, pygame.mixer.Sound] = {}
        for effect, names in SOUND_FILES.items():
            for name in names:
                if name not in loaded:
                    path = Path(resource_dir) / name
                    try:
                        loaded[name] = pygame.mixer.Sound(str(path))
                    except (pygame.error, FileNotFoundError) as exc:
                        logger.warning("Could not load %s: %s", path, exc)
                        continue
                self.sounds.setdefault(effect, []).append(loaded[name])

    def play(self, effect: Effect) -> None:
        for sound in self.sounds.get(effect, ()):
            sound.play()
