"""
Models for the indexing pipeline.

Exports: SourceDocument, IndexReport, SkippedFile
"""

from .index_report import IndexReport, SkippedFile
from .source_document import SourceDocument

__all__ = ["IndexReport", "SkippedFile", "SourceDocument"]
