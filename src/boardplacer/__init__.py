"""boardplacer - place issues and pull requests on GitHub Projects boards."""

__version__ = "0.1.0"
