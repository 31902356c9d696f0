"""The game window, its main loop and the command-line entry point."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .loader import load_cub  # noqa: E402
from .model import Config, CubError, Face  # noqa: E402
from .player import Key, Keys, update_player  # noqa: E402
from .render import Frame, Texture, render_frame  # noqa: E402

TITLE = "cub3D"
_FPS = 60

_KEYMAP = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_ESCAPE: Key.ESCAPE,
}


def _load_textures(config: Config) -> dict[Face, Texture]:
    return {face: Texture.load(config.textures[face]) for face in Face}


def _frame_to_rgb(frame: Frame) -> np.ndarray:
    pixels = frame.pixels
    rgb = np.stack(
        ((pixels >> 16) & 0xFF, (pixels >> 8) & 0xFF, pixels & 0xFF), axis=-1
    ).astype(np.uint8)
    return rgb.swapaxes(0, 1)


@dataclass
class Game:
    """A loaded scene, its textures, the held keys and the frame being drawn."""

    config: Config
    textures: dict[Face, Texture]
    keys: Keys = field(default_factory=Keys)
    frame: Frame = field(default_factory=Frame)

    def tick(self) -> Frame:
        """Advance the player one step for the held keys and redraw the frame."""
        update_player(self.config.player, self.config.map, self.keys)
        return render_frame(self.frame, self.config, self.textures)

    def _handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.QUIT:
            return True
        if event.type == pygame.KEYDOWN:
            key = _KEYMAP.get(event.key)
            return key is not None and self.keys.press(key)
        if event.type == pygame.KEYUP:
            key = _KEYMAP.get(event.key)
            if key is not None:
                self.keys.release(key)
        return False

    def run(self) -> None:
        """Open the window and run the game until it is closed."""
        try:
            pygame.init()
            screen = pygame.display.set_mode((self.frame.width, self.frame.height))
        except pygame.error as exc:
            pygame.quit()
            raise CubError("mlx error: Failed to create a new window") from exc
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        try:
            while not any(self._handle_event(event) for event in pygame.event.get()):
                pygame.surfarray.blit_array(screen, _frame_to_rgb(self.tick()))
                pygame.display.flip()
                clock.tick(_FPS)
            print("Window closed: exiting...")
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the scene file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: ./cub3D <map>.cub", file=sys.stderr)
        return 1
    try:
        config = load_cub(args[0])
        game = Game(config, _load_textures(config))
        game.run()
    except CubError as exc:
        print(exc, file=sys.stderr)
        return -1
    return 0


if __name__ == "__main__":
    sys.exit(main())