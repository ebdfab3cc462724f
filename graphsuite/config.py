"""Configuration defaults for graphsuite components."""

from dataclasses import dataclass


@dataclass
class GraphSuiteConfig:
    """Library-wide defaults.

    Algorithms take explicit ``infinity`` arguments; these values are only
    the defaults used when callers omit them.
    """

    # Sentinel returned for unreachable vertices
    infinity: float = float("inf")

    # Persistence format used when a path has no recognized suffix
    default_format: str = "json"

    # Attribute added to highlighted edges in DOT output
    highlight_color: str = "red"

    # Initial level of the package logger
    log_level: str = "INFO"

    # Format string for the package log handler
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def format_for_suffix(self, suffix: str) -> str:
        """Map a file suffix to a persistence format name."""
        suffix = suffix.lower().lstrip(".")
        if suffix in ("yaml", "yml"):
            return "yaml"
        if suffix == "json":
            return "json"
        return self.default_format


# Global configuration instance
CONFIG = GraphSuiteConfig()
