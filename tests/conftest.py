from typing import Any, Dict, List, Optional

import pytest
from loguru import logger

from pdf_actions.core.actions import DocumentOperationAdapter, FileAsset
from pdf_actions.core.providers.base import DocumentProvider, ExecutionSession

PDF_BYTES = b"%PDF-1.7\n1 0 obj << /Type /Catalog >> endobj\n%%EOF\n"
DOCX_BYTES = b"PK\x03\x04word/document.xml sample"


class FakeProvider(DocumentProvider):
    """In-memory provider recording every call"""

    name = "fake"

    def __init__(self, outputs: Optional[List[bytes]] = None, error: Optional[Exception] = None):
        self.outputs = outputs
        self.error = error
        self.sessions: List[ExecutionSession] = []
        self.calls: List[Dict[str, Any]] = []

    def open_session(self, credentials):
        session = ExecutionSession(client_id=credentials.client_id, handle=object())
        self.sessions.append(session)
        return session

    def _record(self, operation, session, data, mime_type, **options):
        assert not session.closed
        self.calls.append({
            "operation": operation,
            "session": session,
            "data": data,
            "mime_type": mime_type,
            **options,
        })
        if self.error is not None:
            raise self.error
        if self.outputs is not None:
            return list(self.outputs)
        return [b"%PDF-1.7 " + operation.encode() + b" " + data[:16]]

    def create_pdf(self, session, data, mime_type):
        return self._record("create_pdf", session, data, mime_type)

    def merge_document(self, session, data, mime_type, json_data, output_format):
        return self._record("merge_document", session, data, mime_type,
                            json_data=json_data, output_format=output_format)

    def export_pdf(self, session, data, mime_type, target_format):
        return self._record("export_pdf", session, data, mime_type, target_format=target_format)

    def ocr_pdf(self, session, data, mime_type):
        return self._record("ocr_pdf", session, data, mime_type)

    def linearize_pdf(self, session, data, mime_type):
        return self._record("linearize_pdf", session, data, mime_type)

    def export_pdf_to_images(self, session, data, mime_type, target_format):
        return self._record("export_pdf_to_images", session, data, mime_type,
                            target_format=target_format)

    def protect_pdf(self, session, data, mime_type, owner_password, encryption_algorithm,
                    user_password, content_encryption, permissions):
        return self._record("protect_pdf", session, data, mime_type,
                            owner_password=owner_password,
                            encryption_algorithm=encryption_algorithm,
                            user_password=user_password,
                            content_encryption=content_encryption,
                            permissions=list(permissions))

    def remove_protection(self, session, data, mime_type, password):
        return self._record("remove_protection", session, data, mime_type, password=password)

    def compress_pdf(self, session, data, mime_type):
        return self._record("compress_pdf", session, data, mime_type)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger.remove()


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def adapter(provider):
    return DocumentOperationAdapter(provider=provider)


@pytest.fixture
def pdf_asset():
    return FileAsset.create(PDF_BYTES, "sample.pdf")


@pytest.fixture
def docx_asset():
    return FileAsset.create(DOCX_BYTES, "sample.docx")
