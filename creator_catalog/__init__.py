"""Creator-friendly song catalog: license classification, validation and album grouping."""

__version__ = "0.1.0"
