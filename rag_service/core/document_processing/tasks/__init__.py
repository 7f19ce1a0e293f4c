"""
Task modules for document processing pipeline.

Exports: ChunkingTask, chunk_text, TextExtractionTask, PdfTextExtractor, TextExtractor,
S3DownloadTask, IndexingTask
"""

from .chunking_task import ChunkingTask, chunk_text
from .indexing_task import IndexingTask
from .parsing_task import PdfTextExtractor, TextExtractionTask, TextExtractor
from .s3_download_task import S3DownloadTask

__all__ = [
    "ChunkingTask",
    "chunk_text",
    "TextExtractionTask",
    "TextExtractor",
    "PdfTextExtractor",
    "S3DownloadTask",
    "IndexingTask",
]
