"""
Operation requests handled by DocumentOperationAdapter.

Each request type is one variant of the operation kinds the adapter can run.
It carries its source document and typed options. Raw strings coming from a
caller are parsed by the ``from_strings`` / ``from_options`` factories, so an
instance that exists has already passed validation.
"""

import json
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional, Tuple

from ..exceptions import InvalidArgumentError
from ..formats import (
    ContentEncryption,
    EncryptionAlgorithm,
    ExportTargetFormat,
    ImageTargetFormat,
    OutputFormat,
    Permission,
    parse_content_encryption,
    parse_encryption_algorithm,
    parse_export_target_format,
    parse_image_target_format,
    parse_output_format,
    parse_permissions,
)
from ..structures import FileAsset, ProtectDocumentOptions
from .action_utils import get_mime_type


@dataclass(frozen=True)
class OperationRequest:
    source: FileAsset

    kind: ClassVar[str] = ""

    def __post_init__(self):
        if not isinstance(self.source, FileAsset):
            raise InvalidArgumentError("Source must be a FileAsset")
        # Fails fast on an unknown extension
        get_mime_type(self.source.file_name)

    @property
    def mime_type(self) -> str:
        return get_mime_type(self.source.file_name)

    @property
    def output_extension(self) -> str:
        return "pdf"


@dataclass(frozen=True)
class CreateDocument(OperationRequest):
    """Create a PDF from an Office document or image"""
    kind: ClassVar[str] = "create"


@dataclass(frozen=True)
class GenerateDocument(OperationRequest):
    """Merge JSON data into a Word template"""
    json_data: Dict[str, Any] = field(default_factory=dict, hash=False)
    output_format: OutputFormat = OutputFormat.PDF

    kind: ClassVar[str] = "generate"

    @classmethod
    def from_strings(cls, template: FileAsset, json_data: str,
                     output_format: str) -> "GenerateDocument":
        try:
            payload = json.loads(json_data)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"Invalid JSON data: {e}") from e
        if not isinstance(payload, dict):
            raise InvalidArgumentError("JSON data must be a JSON object")
        return cls(template, payload, parse_output_format(output_format))

    @property
    def output_extension(self) -> str:
        return self.output_format.value


@dataclass(frozen=True)
class ExportDocument(OperationRequest):
    """Convert a PDF into a non-PDF format"""
    target_format: ExportTargetFormat = ExportTargetFormat.DOCX

    kind: ClassVar[str] = "export"

    @classmethod
    def from_strings(cls, source: FileAsset, target_format: str) -> "ExportDocument":
        return cls(source, parse_export_target_format(target_format))

    @property
    def output_extension(self) -> str:
        return self.target_format.value


@dataclass(frozen=True)
class OcrDocument(OperationRequest):
    """Add a searchable text layer to a PDF"""
    kind: ClassVar[str] = "ocr"


@dataclass(frozen=True)
class LinearizeDocument(OperationRequest):
    """Optimize a PDF for fast web view"""
    kind: ClassVar[str] = "linearize"


@dataclass(frozen=True)
class ImageDocument(OperationRequest):
    """Render every page of a PDF as an image, returned as a ZIP archive"""
    target_format: ImageTargetFormat = ImageTargetFormat.PNG

    kind: ClassVar[str] = "images"

    @classmethod
    def from_strings(cls, source: FileAsset, target_format: str) -> "ImageDocument":
        return cls(source, parse_image_target_format(target_format))

    @property
    def output_extension(self) -> str:
        return "zip"


@dataclass(frozen=True)
class ProtectDocument(OperationRequest):
    """Password protect a PDF and restrict its permissions"""
    owner_password: str = ""
    encryption_algorithm: Optional[EncryptionAlgorithm] = None
    user_password: Optional[str] = None
    content_encryption: ContentEncryption = ContentEncryption.ALL_CONTENT
    permissions: Tuple[Permission, ...] = ()

    kind: ClassVar[str] = "protect"

    def __post_init__(self):
        super().__post_init__()
        if self.encryption_algorithm is None:
            raise InvalidArgumentError("Encryption Algorithm must be specified")
        if not self.owner_password:
            raise InvalidArgumentError("Owner password must be specified")

    @classmethod
    def from_options(cls, source: FileAsset,
                     options: ProtectDocumentOptions) -> "ProtectDocument":
        if not options.encryption_algorithm:
            raise InvalidArgumentError("Encryption Algorithm must be specified")
        if not options.owner_password:
            raise InvalidArgumentError("Owner password must be specified")

        return cls(
            source,
            owner_password=options.owner_password,
            encryption_algorithm=parse_encryption_algorithm(options.encryption_algorithm),
            user_password=options.user_password or None,
            content_encryption=parse_content_encryption(options.content_encryption),
            permissions=tuple(parse_permissions(options.permissions)),
        )


@dataclass(frozen=True)
class UnprotectDocument(OperationRequest):
    """Remove password protection from a PDF"""
    password: str = ""

    kind: ClassVar[str] = "unprotect"

    def __post_init__(self):
        super().__post_init__()
        if not self.password:
            raise InvalidArgumentError("Password must be specified")


@dataclass(frozen=True)
class CompressDocument(OperationRequest):
    """Reduce the file size of a PDF"""
    kind: ClassVar[str] = "compress"


OPERATION_KINDS = {
    request_cls.kind: request_cls
    for request_cls in (
        CreateDocument,
        GenerateDocument,
        ExportDocument,
        OcrDocument,
        LinearizeDocument,
        ImageDocument,
        ProtectDocument,
        UnprotectDocument,
        CompressDocument,
    )
}
