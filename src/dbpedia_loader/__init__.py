"""Load DBpedia short abstracts into an OpenSearchServer index."""

__version__ = "0.1.0"
