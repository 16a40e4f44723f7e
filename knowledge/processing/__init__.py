"""Document processing - analysis, normalization and metadata synthesis."""

from knowledge.processing.analyzer import Analyzer
from knowledge.processing.normalizer import normalize
from knowledge.processing.pipeline import ProcessPipeline
from knowledge.processing.synthesizer import MetadataSynthesizer

__all__ = [
    "Analyzer",
    "MetadataSynthesizer",
    "ProcessPipeline",
    "normalize",
]
