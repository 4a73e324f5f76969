"""repo-lens: language breakdown of a source repository, served over HTTP."""

__version__ = "1.0.0"
