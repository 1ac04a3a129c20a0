from .settings import CollectorConfig, OutputFormat

__all__ = ["CollectorConfig", "OutputFormat"]
