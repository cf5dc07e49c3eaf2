"""Pipeforge - build and check software-delivery pipelines as stage graphs."""

__version__ = "0.1.0"
