"""The wireframe viewer window and its command-line entry point."""

from __future__ import annotations

import sys
from array import array
from typing import Optional, Sequence

import pygame

from wirefdf.events import Key, handle_key
from wirefdf.mapfile import parse_map
from wirefdf.model import TITLE, WIN_HEIGHT, WIN_WIDTH, Camera, FdfError, HeightMap
from wirefdf.render import Image, render_map

_KEYS = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_EQUALS: Key.EQUAL,
    pygame.K_MINUS: Key.MINUS,
    pygame.K_w: Key.W,
    pygame.K_s: Key.S,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_q: Key.Q,
    pygame.K_e: Key.E,
    pygame.K_r: Key.R,
}


def _to_surface(image: Image) -> pygame.Surface:
    data = array("I", image.pixels)
    if sys.byteorder == "little":
        data.byteswap()
    return pygame.image.frombuffer(data.tobytes(), (image.width, image.height), "RGBA")


def _show(screen: pygame.Surface, image: Image) -> None:
    screen.fill((0, 0, 0))
    screen.blit(_to_surface(image), (0, 0))
    pygame.display.flip()


def run_window(height_map: HeightMap, camera: Camera) -> None:
    """Open the viewer window and run it until it is closed."""
    print("Initializing display...")
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
        pygame.display.set_caption(TITLE)
        image = Image(WIN_WIDTH, WIN_HEIGHT)
        clock = pygame.time.Clock()
        print("Rendering map...")
        render_map(image, height_map, camera)
        _show(screen, image)
        print("Starting event loop...")
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key in _KEYS:
                    running = handle_key(camera, height_map, _KEYS[event.key]) and running
                    render_map(image, height_map, camera)
                    _show(screen, image)
            clock.tick(60)
        print("Event loop ended")
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the map named on the command line and display it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: wirefdf <map.fdf>")
        return 1
    try:
        height_map = parse_map(args[0])
    except FdfError as exc:
        print(exc, file=sys.stderr)
        return 1
    camera = Camera()
    camera.x_offset = float(height_map.width // 2)
    camera.y_offset = float(height_map.height // 2)
    try:
        run_window(height_map, camera)
    except pygame.error as exc:
        print(f"Error: display initialization failed ({exc})", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())