"""
Document operation adapter

Runs one operation request against a document-processing provider. Every
call opens its own session, sends one remote operation and returns the
resulting bytes. Nothing is shared between calls.
"""

import time
from typing import Callable, Dict, List, Optional, Type

from loguru import logger

from ..exceptions import EmptyResultError
from ..providers import DocumentProvider, ExecutionSession, get_default_provider
from ..structures import Credentials, FileAsset, ProtectDocumentOptions
from .action_utils import bundle_page_images
from .operations import (
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


class DocumentOperationAdapter:
    """
    Single entry point for the document actions.

    ``execute`` takes any OperationRequest variant. The named methods
    (``create_document``, ``export_document``, ...) accept the raw strings a
    calling platform passes and build the request first, so invalid input
    is rejected before a session is opened.
    """

    def __init__(self, provider: Optional[DocumentProvider] = None):
        self._provider = provider

    @property
    def provider(self) -> DocumentProvider:
        if self._provider is None:
            self._provider = get_default_provider()
        return self._provider

    def execute(self, credentials: Credentials, request: OperationRequest) -> bytes:
        """
        Run one operation request

        Args:
            credentials: Provider client id and secret
            request: Validated operation request

        Returns:
            Bytes of the produced document (a ZIP archive for ImageDocument)
        """
        handler = self._handler_for(type(request))
        source = request.source

        logger.info(f"Running {request.kind} on {source.file_name} ({source.size} bytes)")
        start_time = time.time()

        session = self.provider.open_session(credentials)
        try:
            outputs = handler(self, session, request)
        except Exception as e:
            logger.error(f"{request.kind} failed for {source.file_name}: {e}")
            raise
        finally:
            self.provider.close_session(session)

        if not outputs:
            raise EmptyResultError(f"Provider returned no output for {request.kind}")

        if isinstance(request, ImageDocument) and len(outputs) > 1:
            result = bundle_page_images(outputs, request.target_format.value)
        else:
            result = outputs[0]

        logger.info(
            f"Completed {request.kind} for {source.file_name}: {len(result)} bytes "
            f"in {time.time() - start_time:.2f}s"
        )
        return result

    # Named actions

    def create_document(self, client_id: str, client_secret: str,
                        file_asset: FileAsset) -> bytes:
        """Create a PDF document from Microsoft Office documents and image files"""
        credentials = Credentials(client_id, client_secret)
        return self.execute(credentials, CreateDocument(file_asset))

    def generate_document(self, client_id: str, client_secret: str,
                          template_document: FileAsset, json_data: str,
                          output_format: str) -> bytes:
        """Assemble a Word or PDF document by merging JSON data into a Word template"""
        request = GenerateDocument.from_strings(template_document, json_data, output_format)
        return self.execute(Credentials(client_id, client_secret), request)

    def export_document(self, client_id: str, client_secret: str,
                        file_asset: FileAsset, target_format: str) -> bytes:
        """Convert a PDF to doc, rtf, docx, pptx or xlsx"""
        request = ExportDocument.from_strings(file_asset, target_format)
        return self.execute(Credentials(client_id, client_secret), request)

    def ocr_document(self, client_id: str, client_secret: str,
                     file_asset: FileAsset) -> bytes:
        credentials = Credentials(client_id, client_secret)
        return self.execute(credentials, OcrDocument(file_asset))

    def linearize_document(self, client_id: str, client_secret: str,
                           file_asset: FileAsset) -> bytes:
        credentials = Credentials(client_id, client_secret)
        return self.execute(credentials, LinearizeDocument(file_asset))

    def image_document(self, client_id: str, client_secret: str,
                       file_asset: FileAsset, target_format: str) -> bytes:
        """Convert all pages of a PDF to png or jpeg images, returned as a ZIP archive"""
        request = ImageDocument.from_strings(file_asset, target_format)
        return self.execute(Credentials(client_id, client_secret), request)

    def protect_document(self, client_id: str, client_secret: str,
                         file_asset: FileAsset, options: ProtectDocumentOptions) -> bytes:
        request = ProtectDocument.from_options(file_asset, options)
        return self.execute(Credentials(client_id, client_secret), request)

    def unprotect_document(self, client_id: str, client_secret: str,
                           file_asset: FileAsset, password: str) -> bytes:
        request = UnprotectDocument(file_asset, password=password)
        return self.execute(Credentials(client_id, client_secret), request)

    def compress_document(self, client_id: str, client_secret: str,
                          file_asset: FileAsset) -> bytes:
        credentials = Credentials(client_id, client_secret)
        return self.execute(credentials, CompressDocument(file_asset))

    # Dispatch

    def _run_create(self, session: ExecutionSession, request: CreateDocument) -> List[bytes]:
        return self.provider.create_pdf(session, request.source.file_data, request.mime_type)

    def _run_generate(self, session: ExecutionSession, request: GenerateDocument) -> List[bytes]:
        return self.provider.merge_document(
            session, request.source.file_data, request.mime_type,
            request.json_data, request.output_format
        )

    def _run_export(self, session: ExecutionSession, request: ExportDocument) -> List[bytes]:
        return self.provider.export_pdf(
            session, request.source.file_data, request.mime_type, request.target_format
        )

    def _run_ocr(self, session: ExecutionSession, request: OcrDocument) -> List[bytes]:
        return self.provider.ocr_pdf(session, request.source.file_data, request.mime_type)

    def _run_linearize(self, session: ExecutionSession, request: LinearizeDocument) -> List[bytes]:
        return self.provider.linearize_pdf(session, request.source.file_data, request.mime_type)

    def _run_images(self, session: ExecutionSession, request: ImageDocument) -> List[bytes]:
        return self.provider.export_pdf_to_images(
            session, request.source.file_data, request.mime_type, request.target_format
        )

    def _run_protect(self, session: ExecutionSession, request: ProtectDocument) -> List[bytes]:
        return self.provider.protect_pdf(
            session, request.source.file_data, request.mime_type,
            owner_password=request.owner_password,
            encryption_algorithm=request.encryption_algorithm,
            user_password=request.user_password,
            content_encryption=request.content_encryption,
            permissions=list(request.permissions)
        )

    def _run_unprotect(self, session: ExecutionSession, request: UnprotectDocument) -> List[bytes]:
        return self.provider.remove_protection(
            session, request.source.file_data, request.mime_type, request.password
        )

    def _run_compress(self, session: ExecutionSession, request: CompressDocument) -> List[bytes]:
        return self.provider.compress_pdf(session, request.source.file_data, request.mime_type)

    _HANDLERS: Dict[Type[OperationRequest], Callable] = {
        CreateDocument: _run_create,
        GenerateDocument: _run_generate,
        ExportDocument: _run_export,
        OcrDocument: _run_ocr,
        LinearizeDocument: _run_linearize,
        ImageDocument: _run_images,
        ProtectDocument: _run_protect,
        UnprotectDocument: _run_unprotect,
        CompressDocument: _run_compress,
    }

    def _handler_for(self, request_type: Type[OperationRequest]) -> Callable:
        try:
            return self._HANDLERS[request_type]
        except KeyError:
            raise TypeError(f"Unsupported operation request: {request_type.__name__}") from None
