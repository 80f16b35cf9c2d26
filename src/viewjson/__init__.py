"""viewjson - address and search JSON / JSONL documents."""

__version__ = "0.1.0"
