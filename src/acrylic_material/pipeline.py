"""High-level acrylic material generation pipeline."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from .blur import create_blur
from .buffer import PixelBuffer, scale
from .compositor import Layer, SolidColor, composite
from .config import AcrylicConfig
from .errors import AcrylicError
from .saturation import saturate

LOGGER = logging.getLogger(__name__)


class PipelineState(str, Enum):
    CONFIGURING = "configuring"
    VALIDATING = "validating"
    SCALING = "scaling"
    BLURRING = "blurring"
    SATURATING = "saturating"
    COMPOSITING = "compositing"
    DONE = "done"
    FAILED = "failed"


@dataclass
class PipelineOutcome:
    """Terminal result of one pipeline run: an image or an error, never both."""

    state: PipelineState
    image: Optional[PixelBuffer] = None
    error: Optional[AcrylicError] = None
    failed_stage: Optional[PipelineState] = None
    states: List[PipelineState] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.state is PipelineState.DONE

    def unwrap(self) -> PixelBuffer:
        if self.error is not None:
            raise self.error
        assert self.image is not None
        return self.image


CompletionHook = Callable[[PipelineOutcome, float], None]


class Pipeline:
    """Runs scale, blur, saturate and composite for one configuration.

    ``on_complete`` is called with the outcome and the elapsed seconds after
    every run; without it the elapsed time is logged.
    """

    def __init__(self, *, strict_layers: bool = False, on_complete: Optional[CompletionHook] = None) -> None:
        self.strict_layers = strict_layers
        self.on_complete = on_complete

    def run(self, config: AcrylicConfig) -> PipelineOutcome:
        start = time.perf_counter()
        outcome = _PipelineRun(config, self.strict_layers).execute()
        elapsed = time.perf_counter() - start
        if self.on_complete is not None:
            self.on_complete(outcome, elapsed)
        else:
            LOGGER.info("generate() took %d ms (%s)", round(elapsed * 1000), outcome.state.value)
        return outcome


class _PipelineRun:
    def __init__(self, config: AcrylicConfig, strict_layers: bool) -> None:
        self.cfg = config
        self.strict_layers = strict_layers
        self.states: List[PipelineState] = [PipelineState.CONFIGURING]

    def execute(self) -> PipelineOutcome:
        try:
            self._enter(PipelineState.VALIDATING)
            self.cfg.validate()
            assert self.cfg.background is not None and self.cfg.blur is not None

            self._enter(PipelineState.SCALING)
            image = scale(self.cfg.background, self.cfg.scale_factor)

            self._enter(PipelineState.BLURRING)
            image = create_blur(self.cfg.blur.algorithm).apply(image, self.cfg.blur.radius)

            self._enter(PipelineState.SATURATING)
            image = saturate(image, self.cfg.saturation)

            self._enter(PipelineState.COMPOSITING)
            layers: List[Layer] = [image]
            if self.cfg.tint is not None:
                layers.append(SolidColor(self.cfg.tint))
            if self.cfg.noise is not None:
                layers.append(self.cfg.noise)
            result = composite(layers, strict=self.strict_layers)
        except AcrylicError as exc:
            failed_stage = self.states[-1]
            LOGGER.error("Acrylic generation failed while %s: %s", failed_stage.value, exc)
            self._enter(PipelineState.FAILED)
            return PipelineOutcome(
                state=PipelineState.FAILED,
                error=exc,
                failed_stage=failed_stage,
                states=self.states,
            )

        self._enter(PipelineState.DONE)
        return PipelineOutcome(state=PipelineState.DONE, image=result, states=self.states)

    def _enter(self, state: PipelineState) -> None:
        LOGGER.debug("pipeline -> %s", state.value)
        self.states.append(state)


def run_pipeline(config: AcrylicConfig, *, strict_layers: bool = False) -> PixelBuffer:
    """Run a pipeline once and return the image, raising on failure."""

    return Pipeline(strict_layers=strict_layers).run(config).unwrap()


__all__ = ["PipelineState", "PipelineOutcome", "CompletionHook", "Pipeline", "run_pipeline"]
