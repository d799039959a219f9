"""
Closed enumerations for every string option the actions accept, and the
lookup tables used to parse them.

Matching is case-insensitive. Anything outside a table raises
InvalidArgumentError naming the offending value.
"""

from enum import Enum
from typing import Dict, Iterable, List, Optional, Type, TypeVar

from .exceptions import InvalidArgumentError

E = TypeVar("E", bound=Enum)


class OutputFormat(Enum):
    DOCX = "docx"
    PDF = "pdf"


class ExportTargetFormat(Enum):
    DOC = "doc"
    RTF = "rtf"
    DOCX = "docx"
    PPTX = "pptx"
    XLSX = "xlsx"


class ImageTargetFormat(Enum):
    PNG = "png"
    JPEG = "jpeg"


class ContentEncryption(Enum):
    ALL_CONTENT = "ALL_CONTENT"
    ALL_CONTENT_EXCEPT_METADATA = "ALL_CONTENT_EXCEPT_METADATA"


class EncryptionAlgorithm(Enum):
    AES_128 = "AES_128"
    AES_256 = "AES_256"


class Permission(Enum):
    COPY_CONTENT = "COPY_CONTENT"
    EDIT_CONTENT = "EDIT_CONTENT"
    EDIT_ANNOTATIONS = "EDIT_ANNOTATIONS"
    PRINT_LOW_QUALITY = "PRINT_LOW_QUALITY"
    PRINT_HIGH_QUALITY = "PRINT_HIGH_QUALITY"
    EDIT_DOCUMENT_ASSEMBLY = "EDIT_DOCUMENT_ASSEMBLY"
    EDIT_FILL_AND_SIGN_FORM_FIELDS = "EDIT_FILL_AND_SIGN_FORM_FIELDS"


def _table(enum_cls: Type[E]) -> Dict[str, E]:
    return {member.value.lower(): member for member in enum_cls}


OUTPUT_FORMATS = _table(OutputFormat)
EXPORT_TARGET_FORMATS = _table(ExportTargetFormat)
IMAGE_TARGET_FORMATS = _table(ImageTargetFormat)
CONTENT_ENCRYPTIONS = _table(ContentEncryption)
ENCRYPTION_ALGORITHMS = _table(EncryptionAlgorithm)
PERMISSIONS = _table(Permission)


def _lookup(table: Dict[str, E], value: Optional[str], label: str) -> E:
    key = value.lower() if isinstance(value, str) else None
    if key not in table:
        raise InvalidArgumentError(f"Invalid {label} of {value}")
    return table[key]


def parse_output_format(value: str) -> OutputFormat:
    return _lookup(OUTPUT_FORMATS, value, "output format")


def parse_export_target_format(value: str) -> ExportTargetFormat:
    return _lookup(EXPORT_TARGET_FORMATS, value, "target format")


def parse_image_target_format(value: str) -> ImageTargetFormat:
    return _lookup(IMAGE_TARGET_FORMATS, value, "target format")


def parse_content_encryption(value: Optional[str]) -> ContentEncryption:
    """Parse content encryption, defaulting to ALL_CONTENT when blank"""
    if value is None or not value.strip():
        return ContentEncryption.ALL_CONTENT
    return _lookup(CONTENT_ENCRYPTIONS, value, "content encryption")


def parse_encryption_algorithm(value: str) -> EncryptionAlgorithm:
    return _lookup(ENCRYPTION_ALGORITHMS, value, "encryption algorithm")


def parse_permission(value: str) -> Permission:
    return _lookup(PERMISSIONS, value, "permission")


def parse_permissions(values: Optional[Iterable[str]]) -> List[Permission]:
    """
    Parse a permission list

    Duplicates are dropped, first occurrence wins. An empty or missing list
    means no permissions are granted.
    """
    permissions: List[Permission] = []
    for value in values or []:
        permission = parse_permission(value)
        if permission not in permissions:
            permissions.append(permission)
    return permissions
