"""
Document actions for pdf-actions

This module exposes the PDF Services operations (create, generate, export,
OCR, linearize, images, protect, unprotect and compress) through a single
adapter, with typed requests and validated options.
"""

from .adapter import DocumentOperationAdapter
from ..structures import Credentials, FileAsset, ProtectDocumentOptions
from .operations import (
    OPERATION_KINDS,
    CompressDocument,
    CreateDocument,
    ExportDocument,
    GenerateDocument,
    ImageDocument,
    LinearizeDocument,
    OcrDocument,
    OperationRequest,
    ProtectDocument,
    UnprotectDocument,
)

__all__ = [
    'DocumentOperationAdapter',
    'OPERATION_KINDS',
    'OperationRequest',
    'CreateDocument',
    'GenerateDocument',
    'ExportDocument',
    'OcrDocument',
    'LinearizeDocument',
    'ImageDocument',
    'ProtectDocument',
    'UnprotectDocument',
    'CompressDocument',
    'Credentials',
    'FileAsset',
    'ProtectDocumentOptions',
]
