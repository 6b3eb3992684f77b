"""SeaBattle console game: board engine, targeting AI and console shell."""

__version__ = "0.1.0"
