"""
Value types passed into the document actions.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .exceptions import InvalidArgumentError


@dataclass(frozen=True)
class FileAsset:
    """Binary data of a file together with its filename (including extension).

    The filename is only used to infer the MIME type sent to the provider.
    """
    file_data: bytes
    file_name: str

    @classmethod
    def create(cls, file_data: bytes, file_name: str) -> "FileAsset":
        return cls(file_data=bytes(file_data), file_name=file_name)

    @property
    def size(self) -> int:
        return len(self.file_data)


@dataclass(frozen=True)
class Credentials:
    """Provider client id and secret"""
    client_id: str
    client_secret: str = field(repr=False)

    def __post_init__(self):
        if not self.client_id or not self.client_id.strip():
            raise InvalidArgumentError("Client id must be specified")
        if not self.client_secret or not self.client_secret.strip():
            raise InvalidArgumentError("Client secret must be specified")


@dataclass
class ProtectDocumentOptions:
    """
    PDF document protection options as received from the caller.

    Values are raw strings; they are parsed into closed enumerations when a
    ProtectDocument request is built.

    Attributes:
        owner_password: Owner password (mandatory)
        encryption_algorithm: AES_128 or AES_256 (mandatory)
        user_password: Password required to open the document
        content_encryption: ALL_CONTENT (default) or ALL_CONTENT_EXCEPT_METADATA
        permissions: Any of COPY_CONTENT, EDIT_CONTENT, EDIT_ANNOTATIONS,
            PRINT_LOW_QUALITY, PRINT_HIGH_QUALITY, EDIT_DOCUMENT_ASSEMBLY and
            EDIT_FILL_AND_SIGN_FORM_FIELDS
    """
    owner_password: Optional[str] = None
    encryption_algorithm: Optional[str] = None
    user_password: Optional[str] = None
    content_encryption: str = "ALL_CONTENT"
    permissions: Optional[List[str]] = None
