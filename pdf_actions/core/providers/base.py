"""
Contract between the document actions and the remote document-processing
provider.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from ..formats import (
    ContentEncryption,
    EncryptionAlgorithm,
    ExportTargetFormat,
    ImageTargetFormat,
    OutputFormat,
    Permission,
)
from ..structures import Credentials


@dataclass
class ExecutionSession:
    """
    Authenticated provider handle, valid for a single action call.

    Attributes:
        client_id: Client id the session was opened with
        handle: Provider specific client object
        metadata: Extra provider details for logging
    """
    client_id: str
    handle: Any = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    closed: bool = False


class DocumentProvider(ABC):
    """
    Remote document-processing provider

    Every operation takes the raw input bytes and their MIME type and returns
    the output buffers produced by the provider. Provider errors are raised
    as-is.
    """

    name = "provider"

    @abstractmethod
    def open_session(self, credentials: Credentials) -> ExecutionSession:
        """Build an authenticated session for exactly one call"""

    def close_session(self, session: ExecutionSession) -> None:
        session.handle = None
        session.closed = True

    @abstractmethod
    def create_pdf(self, session: ExecutionSession, data: bytes,
                   mime_type: str) -> List[bytes]:
        ...

    @abstractmethod
    def merge_document(self, session: ExecutionSession, data: bytes, mime_type: str,
                       json_data: Dict[str, Any],
                       output_format: OutputFormat) -> List[bytes]:
        ...

    @abstractmethod
    def export_pdf(self, session: ExecutionSession, data: bytes, mime_type: str,
                   target_format: ExportTargetFormat) -> List[bytes]:
        ...

    @abstractmethod
    def ocr_pdf(self, session: ExecutionSession, data: bytes,
                mime_type: str) -> List[bytes]:
        ...

    @abstractmethod
    def linearize_pdf(self, session: ExecutionSession, data: bytes,
                      mime_type: str) -> List[bytes]:
        ...

    @abstractmethod
    def export_pdf_to_images(self, session: ExecutionSession, data: bytes, mime_type: str,
                             target_format: ImageTargetFormat) -> List[bytes]:
        """Returns either one ZIP archive or one buffer per page"""

    @abstractmethod
    def protect_pdf(self, session: ExecutionSession, data: bytes, mime_type: str,
                    owner_password: str,
                    encryption_algorithm: EncryptionAlgorithm,
                    user_password: Optional[str],
                    content_encryption: ContentEncryption,
                    permissions: Sequence[Permission]) -> List[bytes]:
        ...

    @abstractmethod
    def remove_protection(self, session: ExecutionSession, data: bytes, mime_type: str,
                          password: str) -> List[bytes]:
        ...

    @abstractmethod
    def compress_pdf(self, session: ExecutionSession, data: bytes,
                     mime_type: str) -> List[bytes]:
        ...
