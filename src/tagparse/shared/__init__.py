# Where: tagparse.shared.__init__
# What: Provide a concise import surface for shared dataclasses.
# Why: Keep parser output types importable without pulling in extraction code.

"""Shared dataclasses exposed at the package level."""

from .parsed_tags import ParsedTags

__all__ = ["ParsedTags"]
