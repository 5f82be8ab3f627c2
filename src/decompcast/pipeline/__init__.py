"""Functional pipeline for classical decomposition forecasting."""

from decompcast.pipeline.runner import decompose, run_pipeline
from decompcast.pipeline.stages import STAGES, PipelineStage

__all__ = [
    "decompose",
    "run_pipeline",
    "STAGES",
    "PipelineStage",
]
