"""layerforge -- scaffolding for layered Go projects."""

__version__ = "0.1.0"
