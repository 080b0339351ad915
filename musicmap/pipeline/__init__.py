"""Pipeline orchestration — workers, aggregator and run result."""

from musicmap.pipeline.aggregator import END_OF_STREAM, StrengthAggregator
from musicmap.pipeline.orchestrator import RecommendationPipeline

__all__ = ["END_OF_STREAM", "RecommendationPipeline", "StrengthAggregator"]
