"""Knowledge base - markdown corpus analysis, normalization and search."""

__version__ = "0.1.0"


# Lazy imports to avoid circular dependencies
def __getattr__(name: str):
    if name == "ProcessPipeline":
        from knowledge.processing.pipeline import ProcessPipeline

        return ProcessPipeline
    if name == "SearchEngine":
        from knowledge.corpus.search import SearchEngine

        return SearchEngine
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["ProcessPipeline", "SearchEngine", "__version__"]
