"""Vehicle rental model in two variants, plus a factorial helper and a type test."""

__version__ = "0.1.0"