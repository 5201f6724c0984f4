# renderer/raytracer.py
import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

from tqdm import tqdm

from camera.camera import Camera
from core.color import Color
from geometry.world import closest_intersection
from renderer.canvas import Canvas
from renderer.errors import RenderError, ShadingError
from renderer.scene import Scene
from renderer.shading import ShadingEngine

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 4


class Renderer:
    """
    Drives the pixel loop for a scene and owns the canvas it paints.

    Rows are rendered one after another; the pixels of a row are spread over
    a fixed pool of worker threads. Workers only read the scene. The canvas
    is the single shared mutable resource and every write to it happens
    under `draw_lock`, held for one pixel at a time.
    """
    def __init__(self, scene: Scene, workers: int = DEFAULT_WORKERS):
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.scene = scene
        self.workers = workers
        self.camera = Camera.for_scene(scene)
        self.engine = ShadingEngine.for_scene(scene)
        self.canvas = Canvas(scene.width, scene.height, scene.background_color)
        self.draw_lock = threading.Lock()
        self.failures: List[Tuple[int, int, ShadingError]] = []

    def render(self, progress_bar: bool = False) -> None:
        """
        Render every pixel into the canvas, blocking until the image is done.

        A pixel that fails to shade keeps the background color and is logged;
        once all pixels have been attempted a RenderError lists the failures.
        """
        scene = self.scene
        width, height = scene.width, scene.height
        self.failures = []
        logger.info("Rendering %dx%d: %d surfaces, %d lights, %d workers",
                    width, height, len(scene.surfaces), len(scene.lights), self.workers)
        start = time.perf_counter()

        bar = tqdm(total=width * height, unit="px", desc="Rendering") if progress_bar else None
        try:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                for y in range(height):
                    # list() waits for the row and re-raises anything unexpected
                    list(pool.map(self._render_pixel, range(width), [y] * width))
                    if bar is not None:
                        bar.update(width)
        finally:
            if bar is not None:
                bar.close()

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        if self.failures:
            self.failures.sort(key=lambda f: (f[1], f[0]))
            raise RenderError(self.failures, total=width * height) from self.failures[0][2]

    def _render_pixel(self, x: int, y: int) -> None:
        try:
            color = self._trace_pixel(x, y)
        except ShadingError as e:
            logger.error("Pixel (%d, %d) failed: %s", x, y, e)
            with self.draw_lock:
                self.failures.append((x, y, e))
            return

        if color is not None:
            with self.draw_lock:
                self.canvas.set_pixel(x, y, color)

    def _trace_pixel(self, x: int, y: int) -> Optional[Color]:
        """Color for one pixel, or None when the primary ray hits nothing."""
        try:
            ray = self.camera.get_ray(x, y)
            hit = closest_intersection(ray, self.scene.surfaces)
            if hit is None:
                return None
            return self.engine.shade(ray, hit.surface, hit.distance, 1)
        except ShadingError:
            raise
        except Exception as e:
            # a fault in a surface or light stays local to its pixel
            raise ShadingError(f"{type(e).__name__}: {e}") from e

    def display(self) -> None:
        self.canvas.display()

    def write(self, path: str) -> None:
        self.canvas.write(path)
        logger.info("Wrote %s", path)
