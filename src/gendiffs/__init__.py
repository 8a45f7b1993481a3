"""gendiffs - release diff generator.

Generates pairwise ``git diff --binary`` artifacts between the release tags of
an upstream repository and publishes them to a dedicated branch.
"""

__version__ = "1.0.0"
__author__ = "gendiffs maintainers"

__all__ = ["__version__"]
