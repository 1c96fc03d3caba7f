"""Application services and their persistence ports."""
