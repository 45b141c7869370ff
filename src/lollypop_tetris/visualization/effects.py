from __future__ import annotations

import logging
import webbrowser
from pathlib import Path
from typing import Callable, Iterable, Optional, Protocol

from lollypop_tetris.game import Effect

logger = logging.getLogger(__name__)

BONUS_IMAGE = "buuh.png"


class SoundPlayer(Protocol):
    def play(self, effect: Effect) -> None: ...


class EffectDispatcher:
    """Routes engine effects to sounds and the one-shot bonus action."""

    def __init__(
        self,
        sounds: Optional[SoundPlayer] = None,
        bonus_action: Optional[Callable[[], None]] = None,
    ) -> None:
        self.sounds = sounds
        self.bonus_action = bonus_action

    def dispatch(self, effects: Iterable[Effect]) -> None:
        for effect in effects:
            if effect is Effect.BONUS_CONTENT:
                if self.bonus_action is not None:
                    self.bonus_action()
                continue
            if self.sounds is not None:
                self.sounds.play(effect)


def open_bonus_image(resource_dir: Path) -> None:
    image = Path(resource_dir).resolve() / BONUS_IMAGE
    if not image.is_file():
        logger.warning("Bonus image not found: %s", image)
        return
    if not webbrowser.open(image.as_uri()):
        logger.warning("No viewer available to open %s", image)
