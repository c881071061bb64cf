# Where: tagparse.extraction.__init__
# What: Expose the tag field reader and raw value helpers.
# Why: Provide a cohesive import surface for ingestion code.

from ._tag_utils import TagContainer, raw_field_values
from .field_reader import TagFieldReader

__all__ = ["TagContainer", "TagFieldReader", "raw_field_values"]
