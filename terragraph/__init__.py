"""terragraph: dependency graphs for Terragrunt projects."""

__version__ = "0.1.0"
