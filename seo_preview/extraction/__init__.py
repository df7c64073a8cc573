"""Metadata extraction package.

Provides `extract`, which turns an HTML document into a `MetadataRecord`,
and `MetadataExtractor`, the fetch-then-extract module used by the analyzer.
"""

from .extractor import extract, MetadataExtractor, META_FIELDS
