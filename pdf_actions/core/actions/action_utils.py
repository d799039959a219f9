"""
Utility functions for document action inputs and outputs
"""

import io
import re
import zipfile
from pathlib import Path
from typing import List

from ..exceptions import InvalidArgumentError

# Media types accepted by PDF Services as operation input. Anything else is rejected.
MIME_TYPES = {
    ".bmp": "image/bmp",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".gif": "image/gif",
    ".jpeg": "image/jpeg",
    ".jpg": "image/jpeg",
    ".png": "image/png",
    ".ppt": "application/vnd.ms-powerpoint",
    ".pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    ".rtf": "text/rtf",
    ".tif": "image/tiff",
    ".tiff": "image/tiff",
    ".txt": "text/plain",
    ".xls": "application/vnd.ms-excel",
    ".xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ".pdf": "application/pdf",
}


def get_mime_type(file_name: str) -> str:
    """
    Infer the MIME type of a file from its extension

    Args:
        file_name: Filename including extension

    Returns:
        MIME type string

    Raises:
        InvalidArgumentError: If the extension is missing or not a supported input type
    """
    if not file_name or not file_name.strip():
        raise InvalidArgumentError("Filename must be specified")

    suffix = Path(file_name.strip()).suffix.lower()
    if suffix in MIME_TYPES:
        return MIME_TYPES[suffix]

    raise InvalidArgumentError(f"Unable to determine MIME type of {file_name}")


def derive_output_filename(file_name: str, extension: str, suffix: str = "") -> str:
    """
    Build an output filename from the input filename

    Args:
        file_name: Original filename
        extension: Extension of the output, with or without leading dot
        suffix: Optional marker appended to the stem (e.g. "_ocr")

    Returns:
        Sanitized filename with the new extension
    """
    stem = Path(file_name).stem
    sanitized = re.sub(r'[^\w\-_.]', '_', stem)
    sanitized = re.sub(r'_+', '_', sanitized).strip('_') or "document"
    return f"{sanitized}{suffix}.{extension.lstrip('.')}"


def bundle_page_images(images: List[bytes], extension: str) -> bytes:
    """
    Pack per-page images into a single ZIP archive

    Pages are named page_<n>.<extension>, numbered from 1 in the order given.
    """
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for index, image in enumerate(images, 1):
            archive.writestr(f"page_{index}.{extension}", image)
    return buffer.getvalue()
