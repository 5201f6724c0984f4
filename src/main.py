# main.py
import argparse
import logging
import sys

from core.color import Color
from core.vector import Vector3
from geometry.plane import Plane
from geometry.sphere import Sphere
from lights.directional import DirectionalLight
from lights.spherical import SphericalLight
from materials.diffuse import Diffuse
from materials.presets import ReflectivePresets, RefractivePresets
from renderer.errors import RayTracerError
from renderer.raytracer import DEFAULT_WORKERS, Renderer
from renderer.scene import DEFAULT_FOV, DEFAULT_SIZE, Scene
from renderer.scene_loader import build_scene, load_scene


def create_world(width: int = DEFAULT_SIZE, height: int = DEFAULT_SIZE,
                 fov: float = DEFAULT_FOV) -> Scene:
    """
    Built-in demo: a grey floor, a mirror ball, a glass ball and a
    matte ball, lit by a sun and a reddish point light.
    """
    surfaces = [
        Plane(Vector3(0, -2, 0), Vector3(0, 1, 0), Color(200, 200, 200), Diffuse(albedo=0.5)),
        Sphere(Vector3(-2.2, 0, -6), 1.5, Color(230, 230, 230), ReflectivePresets.polished()),
        Sphere(Vector3(1.8, -0.5, -4.5), 1.2, Color.WHITE, RefractivePresets.glass()),
        Sphere(Vector3(0.5, 1.5, -9), 2.0, Color(60, 120, 220), Diffuse(albedo=0.4)),
    ]
    lights = [
        DirectionalLight(Vector3(-0.25, -1, -1), Color.WHITE, intensity=8.0),
        SphericalLight(Vector3(-3, 4, -2), Color(255, 90, 90), intensity=6000.0),
    ]
    return Scene(surfaces, width=width, height=height, fov=fov,
                 background_color="skyblue", lights=lights)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a scene with the Whitted ray tracer.")
    parser.add_argument("scene", nargs="?", help="JSON scene file (default: built-in demo scene)")
    parser.add_argument("-o", "--output", default="render.png", help="output image path")
    parser.add_argument("--width", type=int, help="image width in pixels")
    parser.add_argument("--height", type=int, help="image height in pixels")
    parser.add_argument("--fov", type=float, help="horizontal field of view in degrees")
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS,
                        help="render threads (default: %(default)s)")
    parser.add_argument("--progress", action="store_true", help="show a progress bar")
    parser.add_argument("--display", action="store_true", help="show the result in a window")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    overrides = {"width": args.width, "height": args.height, "fov": args.fov}
    try:
        if args.scene:
            scene = build_scene(load_scene(args.scene), **overrides)
        else:
            scene = create_world(**{k: v for k, v in overrides.items() if v is not None})

        renderer = Renderer(scene, workers=args.workers)
        print(f"Rendering {scene.width}x{scene.height} image with {args.workers} workers...")
        renderer.render(progress_bar=args.progress)
        renderer.write(args.output)
        print(f"Saved {args.output}")
    except (RayTracerError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.display:
        renderer.display()
    return 0


if __name__ == "__main__":
    sys.exit(main())
