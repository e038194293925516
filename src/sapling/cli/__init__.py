from sapling.cli.main import cli

__all__ = ["cli"]
