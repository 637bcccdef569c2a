"""Command line interface for inspecting meld slots."""
