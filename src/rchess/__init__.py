"""rchess — chess position state: FEN codec and reversible move application."""

__version__ = "0.1.0"
