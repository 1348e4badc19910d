"""Event probes with composable JSON match conditions and a per-scene probe registry."""

__version__ = "0.1.0"

__all__ = ["conditions", "parser", "probe", "registry"]