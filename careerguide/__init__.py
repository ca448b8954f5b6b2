"""Console career guide: profiles, career catalogue search and ranked recommendations."""

__version__ = "0.1.0"