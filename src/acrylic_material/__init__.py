"""Acrylic material (frosted glass) image generator."""

from .blur import BlurAlgorithm, BlurAlgorithmKind, GaussianBlur, StackBlur, create_blur
from .buffer import PixelBuffer, scale
from .builder import AcrylicMaterial
from .compositor import Layer, SolidColor, composite
from .config import AcrylicConfig, BlurConfig
from .errors import AcrylicError, BlurFailed, DimensionMismatch, InvalidArgument, MissingConfiguration
from .io import load_buffer, save_buffer
from .noise import default_noise_texture
from .pipeline import Pipeline, PipelineOutcome, PipelineState, run_pipeline
from .saturation import saturate

__all__ = [
    "AcrylicMaterial",
    "AcrylicConfig",
    "BlurConfig",
    "BlurAlgorithm",
    "BlurAlgorithmKind",
    "GaussianBlur",
    "StackBlur",
    "create_blur",
    "PixelBuffer",
    "scale",
    "saturate",
    "Layer",
    "SolidColor",
    "composite",
    "Pipeline",
    "PipelineOutcome",
    "PipelineState",
    "run_pipeline",
    "default_noise_texture",
    "load_buffer",
    "save_buffer",
    "AcrylicError",
    "BlurFailed",
    "DimensionMismatch",
    "InvalidArgument",
    "MissingConfiguration",
]
