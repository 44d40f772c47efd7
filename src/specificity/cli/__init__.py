from specificity.cli.main import cli

__all__ = ["cli"]
