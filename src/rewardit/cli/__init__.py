"""Command-line interface for rewardit."""
