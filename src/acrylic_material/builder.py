"""Fluent API for assembling an acrylic material configuration.

Example::

    image = (
        AcrylicMaterial.with_background("background.png")
        .use_defaults()
        .generate()
    )

Every method returns a new builder; the configuration it wraps is frozen.
"""
from __future__ import annotations

from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import replace
from typing import Optional

from .buffer import PixelBuffer
from .config import (
    DEFAULT_SATURATION,
    DEFAULT_SCALE_FACTOR,
    DEFAULT_STACK_RADIUS,
    AcrylicConfig,
    BlurConfig,
    resolve_noise,
    resolve_tint,
    validate_scale_factor,
)
from .errors import InvalidArgument
from .io import BufferSource, resolve_buffer
from .noise import default_noise_texture
from .pipeline import CompletionHook, Pipeline, PipelineOutcome
from .utils import ColorLike


class AcrylicMaterial:
    def __init__(self, config: Optional[AcrylicConfig] = None, *, pipeline: Optional[Pipeline] = None) -> None:
        self._config = config if config is not None else AcrylicConfig()
        self._pipeline = pipeline if pipeline is not None else Pipeline()

    @classmethod
    def with_background(cls, source: BufferSource) -> "AcrylicMaterial":
        return cls().background(source)

    @property
    def config(self) -> AcrylicConfig:
        return self._config

    def _with(self, **changes) -> "AcrylicMaterial":
        return AcrylicMaterial(replace(self._config, **changes), pipeline=self._pipeline)

    def background(self, source: BufferSource) -> "AcrylicMaterial":
        """Set the image to blur. Raises :class:`InvalidArgument` if it cannot be decoded."""

        if source is None:
            raise InvalidArgument("background source must not be None")
        return self._with(background=resolve_buffer(source))

    def scale_by(self, scale_factor: float) -> "AcrylicMaterial":
        """Downscale the background by ``scale_factor`` in ``(0, 1]`` before blurring."""

        return self._with(scale_factor=validate_scale_factor(float(scale_factor)))

    def gaussian_blur(self, radius: float) -> "AcrylicMaterial":
        """Use a Gaussian blur; ``radius`` must lie in ``(0, 25]``."""

        return self._with(blur=BlurConfig.gaussian(radius))

    def stack_blur(self, radius: float) -> "AcrylicMaterial":
        """Use a stack blur; ``radius`` must be an integer ``>= 1``."""

        return self._with(blur=BlurConfig.stack(radius))

    def saturation(self, saturation: float) -> "AcrylicMaterial":
        return self._with(saturation=float(saturation))

    def tint_color(self, color: Optional[ColorLike]) -> "AcrylicMaterial":
        """Add a solid colour layer above the blur.

        Keep the alpha below 255 or the tint hides every layer beneath it.
        """

        return self._with(tint=resolve_tint(color))

    def noise(self, source: Optional[BufferSource]) -> "AcrylicMaterial":
        """Set the topmost noise texture; unreadable sources are skipped with a warning."""

        return self._with(noise=None if source is None else resolve_noise(source))

    def use_defaults(self) -> "AcrylicMaterial":
        return (
            self.scale_by(DEFAULT_SCALE_FACTOR)
            .stack_blur(DEFAULT_STACK_RADIUS)
            .saturation(DEFAULT_SATURATION)
            .noise(default_noise_texture())
        )

    def on_complete(self, hook: Optional[CompletionHook]) -> "AcrylicMaterial":
        pipeline = Pipeline(strict_layers=self._pipeline.strict_layers, on_complete=hook)
        return AcrylicMaterial(self._config, pipeline=pipeline)

    def strict_layers(self, strict: bool = True) -> "AcrylicMaterial":
        pipeline = Pipeline(strict_layers=strict, on_complete=self._pipeline.on_complete)
        return AcrylicMaterial(self._config, pipeline=pipeline)

    def build(self) -> AcrylicConfig:
        return self._config

    def run(self) -> PipelineOutcome:
        return self._pipeline.run(self._config)

    def generate(self) -> PixelBuffer:
        """Run the pipeline and return the composited image, raising on failure."""

        return self.run().unwrap()

    def generate_async(self, executor: Optional[Executor] = None) -> "Future[PixelBuffer]":
        """Run :meth:`generate` on a worker thread."""

        if executor is not None:
            return executor.submit(self.generate)
        pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="acrylic")
        try:
            return pool.submit(self.generate)
        finally:
            pool.shutdown(wait=False)

    def __repr__(self) -> str:
        return f"AcrylicMaterial({self._config!r})"


__all__ = ["AcrylicMaterial"]
