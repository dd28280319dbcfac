"""docfill: blank-space detection, filling and export for legal documents."""

__version__ = "0.1.0"
