"""Command line interface (`address-extractor`, `python -m address_extractor.cli`)."""

from .main import main

__all__ = ["main"]
