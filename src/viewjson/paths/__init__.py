"""Path mini-language: parsing, formatting and lookup."""
