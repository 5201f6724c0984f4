# renderer/canvas.py
import numpy as np
import pygame
from PIL import Image

from core.color import Color


class Canvas:
    """
    The output surface: a height x width x 3 uint8 pixel buffer that starts
    out filled with the background color.

    The canvas does no locking of its own; the renderer serializes writes.
    """
    def __init__(self, width: int, height: int, background_color: Color = Color.BLACK):
        self.width = width
        self.height = height
        self.background_color = background_color
        self.pixels = np.empty((height, width, 3), dtype=np.uint8)
        self.clear()

    def clear(self) -> None:
        self.pixels[:, :] = self.background_color.to_rgb()

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        self.pixels[y, x] = color.to_rgb()

    def get_pixel(self, x: int, y: int) -> tuple:
        r, g, b = self.pixels[y, x]
        return int(r), int(g), int(b)

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.pixels)

    def write(self, path: str) -> None:
        """Encode the canvas to `path`; the format follows the file extension."""
        self.to_image().save(path)

    def display(self, caption: str = "Ray Tracer") -> None:
        """
        Show the canvas in a pygame window and block until it is closed.
        """
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(caption)
            # surfarray is indexed [x, y], the buffer is [y, x]
            surface = pygame.surfarray.make_surface(self.pixels.swapaxes(0, 1))
            screen.blit(surface, (0, 0))
            pygame.display.flip()

            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        running = False
                clock.tick(30)
        finally:
            pygame.quit()
