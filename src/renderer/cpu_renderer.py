# renderer/cpu_renderer.py
import logging
import os
import random
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from camera.camera import Camera
from core.vector import Color
from renderer.integrator import ray_color
from renderer.scene import Scene
from renderer.tone_mapping import gamma_correct_image

logger = logging.getLogger(__name__)

BLACK = Color(0.0, 0.0, 0.0)


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return int(value)


@dataclass
class RenderSettings:
    samples_per_pixel: int = 10
    max_depth: int = 10
    workers: int = 1
    seed: Optional[int] = None
    rows_per_chunk: int = 4
    report_progress: bool = True

    def __post_init__(self):
        if self.samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {self.max_depth}")
        if self.workers < 0:
            raise ValueError(f"workers must not be negative, got {self.workers}")
        if self.rows_per_chunk < 1:
            raise ValueError(f"rows_per_chunk must be at least 1, got {self.rows_per_chunk}")

    @classmethod
    def from_env(cls, **overrides) -> "RenderSettings":
        """Settings from RT_SAMPLES, RT_MAX_DEPTH, RT_WORKERS and RT_SEED."""
        values = {
            "samples_per_pixel": _env_int("RT_SAMPLES", cls.samples_per_pixel),
            "max_depth": _env_int("RT_MAX_DEPTH", cls.max_depth),
            "workers": _env_int("RT_WORKERS", cls.workers),
            "seed": _env_int("RT_SEED", None),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def resolved_workers(self) -> int:
        return self.workers or os.cpu_count() or 1


def row_seeds(seed: Optional[int], height: int) -> List[int]:
    """
    One independent RNG seed per image row.

    With a fixed seed the result depends only on (seed, row), so the image is
    the same whatever order rows are rendered in.
    """
    children = np.random.SeedSequence(seed).spawn(height)
    return [int(child.generate_state(1, dtype=np.uint64)[0]) for child in children]


def render_rows(scene: Scene, camera: Camera, settings: RenderSettings,
                start: int, seeds: List[int]) -> Tuple[int, np.ndarray]:
    """
    Average linear radiance of rows start .. start + len(seeds).

    Runs in worker processes; returns the first row index with a
    (rows, width, 3) float array.
    """
    width = camera.image_width
    spp = settings.samples_per_pixel
    pixels = np.zeros((len(seeds), width, 3), dtype=np.float64)

    for offset, row_seed in enumerate(seeds):
        j = start + offset
        rng = random.Random(row_seed)
        for i in range(width):
            total = BLACK
            for _ in range(spp):
                ray = camera.get_ray(i, j, rng)
                sample = ray_color(ray, scene.world, scene.background, settings.max_depth, rng)
                # A single numerically broken path must not poison the pixel
                if not sample.is_finite():
                    sample = BLACK
                total = total + sample
            pixels[offset, i] = (total.x / spp, total.y / spp, total.z / spp)

    return start, pixels


# Per-process render job, set once by _init_worker in each pool process
_worker_job = {}


def _init_worker(scene: Scene, camera: Camera, settings: RenderSettings):
    _worker_job["scene"] = scene
    _worker_job["camera"] = camera
    _worker_job["settings"] = settings


def _render_chunk(start: int, seeds: List[int]) -> Tuple[int, np.ndarray]:
    job = _worker_job
    return render_rows(job["scene"], job["camera"], job["settings"], start, seeds)


class Renderer:
    """
    Renders a scene through a camera into an 8-bit RGB image.

    Rows are grouped in chunks and rendered independently, inline for a
    single worker or on a process pool otherwise. The scene, camera and
    settings are never modified.
    """
    def __init__(self, settings: Optional[RenderSettings] = None):
        self.settings = settings if settings is not None else RenderSettings()

    def render_linear(self, scene: Scene, camera: Camera) -> np.ndarray:
        """Averaged linear radiance as a (height, width, 3) float array."""
        settings = self.settings
        height = camera.image_height
        width = camera.image_width
        seeds = row_seeds(settings.seed, height)
        chunks = [
            (start, seeds[start:start + settings.rows_per_chunk])
            for start in range(0, height, settings.rows_per_chunk)
        ]

        image = np.zeros((height, width, 3), dtype=np.float64)
        workers = settings.resolved_workers()
        logger.info("Rendering %dx%d, %d samples per pixel, max depth %d, %d worker(s)",
                    width, height, settings.samples_per_pixel, settings.max_depth, workers)
        start_time = time.time()
        remaining = height

        if workers == 1:
            for start, chunk_seeds in chunks:
                start, pixels = render_rows(scene, camera, settings, start, chunk_seeds)
                image[start:start + len(pixels)] = pixels
                remaining -= len(pixels)
                self._report(remaining)
        else:
            # The scene is pickled once per process, not once per chunk
            with ProcessPoolExecutor(max_workers=workers, initializer=_init_worker,
                                     initargs=(scene, camera, settings)) as exe:
                futures = [
                    exe.submit(_render_chunk, start, chunk_seeds)
                    for start, chunk_seeds in chunks
                ]
                for future in as_completed(futures):
                    start, pixels = future.result()
                    image[start:start + len(pixels)] = pixels
                    remaining -= len(pixels)
                    self._report(remaining)

        logger.info("Render finished in %.2fs", time.time() - start_time)
        return image

    def render(self, scene: Scene, camera: Camera) -> np.ndarray:
        """Gamma-corrected (height, width, 3) uint8 image."""
        return gamma_correct_image(self.render_linear(scene, camera))

    def _report(self, remaining: int):
        if self.settings.report_progress:
            logger.info("Scanlines remaining: %d", remaining)
