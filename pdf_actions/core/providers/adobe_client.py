"""
Adobe PDF Services provider

Runs document operations through the Adobe PDF Services SDK
(``pdfservices-sdk``). Each call uploads the input as a cloud asset, submits
one job, waits for its result and downloads the produced asset(s).
"""

from typing import Any, Callable, Dict, List, Optional, Sequence

from adobe.pdfservices.operation.auth.service_principal_credentials import ServicePrincipalCredentials
from adobe.pdfservices.operation.config.client_config import ClientConfig
from adobe.pdfservices.operation.pdf_services import PDFServices
from adobe.pdfservices.operation.pdf_services_media_type import PDFServicesMediaType
from adobe.pdfservices.operation.pdfjobs.jobs.compress_pdf_job import CompressPDFJob
from adobe.pdfservices.operation.pdfjobs.jobs.create_pdf_job import CreatePDFJob
from adobe.pdfservices.operation.pdfjobs.jobs.document_merge_job import DocumentMergeJob
from adobe.pdfservices.operation.pdfjobs.jobs.export_pdf_job import ExportPDFJob
from adobe.pdfservices.operation.pdfjobs.jobs.export_pdf_to_images_job import ExportPDFtoImagesJob
from adobe.pdfservices.operation.pdfjobs.jobs.linearize_pdf_job import LinearizePDFJob
from adobe.pdfservices.operation.pdfjobs.jobs.ocr_pdf_job import OCRPDFJob
from adobe.pdfservices.operation.pdfjobs.jobs.protect_pdf_job import ProtectPDFJob
from adobe.pdfservices.operation.pdfjobs.jobs.remove_protection_job import RemoveProtectionJob
from adobe.pdfservices.operation.pdfjobs.params.documentmerge.document_merge_params import DocumentMergeParams
from adobe.pdfservices.operation.pdfjobs.params.documentmerge.output_format import OutputFormat as AdobeOutputFormat
from adobe.pdfservices.operation.pdfjobs.params.export_pdf.export_pdf_params import ExportPDFParams
from adobe.pdfservices.operation.pdfjobs.params.export_pdf.export_pdf_target_format import ExportPDFTargetFormat
from adobe.pdfservices.operation.pdfjobs.params.pdf_to_image.export_pdf_to_images_output_type import ExportPDFToImagesOutputType
from adobe.pdfservices.operation.pdfjobs.params.pdf_to_image.export_pdf_to_images_params import ExportPDFtoImagesParams
from adobe.pdfservices.operation.pdfjobs.params.pdf_to_image.export_pdf_to_images_target_format import ExportPDFToImagesTargetFormat
from adobe.pdfservices.operation.pdfjobs.params.protect_pdf.content_encryption import ContentEncryption as AdobeContentEncryption
from adobe.pdfservices.operation.pdfjobs.params.protect_pdf.encryption_algorithm import EncryptionAlgorithm as AdobeEncryptionAlgorithm
from adobe.pdfservices.operation.pdfjobs.params.protect_pdf.password_protect_params import PasswordProtectParams
from adobe.pdfservices.operation.pdfjobs.params.protect_pdf.permission import Permission as AdobePermission
from adobe.pdfservices.operation.pdfjobs.params.protect_pdf.permissions import Permissions as AdobePermissions
from adobe.pdfservices.operation.pdfjobs.params.remove_protection.remove_protection_params import RemoveProtectionParams
from adobe.pdfservices.operation.pdfjobs.result.compress_pdf_result import CompressPDFResult
from adobe.pdfservices.operation.pdfjobs.result.create_pdf_result import CreatePDFResult
from adobe.pdfservices.operation.pdfjobs.result.document_merge_result import DocumentMergePDFResult
from adobe.pdfservices.operation.pdfjobs.result.export_pdf_result import ExportPDFResult
from adobe.pdfservices.operation.pdfjobs.result.export_pdf_to_images_result import ExportPDFtoImagesResult
from adobe.pdfservices.operation.pdfjobs.result.linearize_pdf_result import LinearizePDFResult
from adobe.pdfservices.operation.pdfjobs.result.ocr_pdf_result import OCRPDFResult
from adobe.pdfservices.operation.pdfjobs.result.protect_pdf_result import ProtectPDFResult
from adobe.pdfservices.operation.pdfjobs.result.remove_protection_result import RemoveProtectionResult
from loguru import logger

from ...config.settings import PDF_SERVICES_CONNECT_TIMEOUT, PDF_SERVICES_READ_TIMEOUT
from ..exceptions import InvalidArgumentError
from ..formats import (
    ContentEncryption,
    EncryptionAlgorithm,
    ExportTargetFormat,
    ImageTargetFormat,
    OutputFormat,
    Permission,
)
from ..structures import Credentials
from .base import DocumentProvider, ExecutionSession


class AdobePDFServicesProvider(DocumentProvider):
    """
    Document provider backed by Adobe PDF Services

    This provider handles session creation from service principal
    credentials, asset upload, job submission and result download. Retries,
    polling and transport errors are left to the SDK.
    """

    name = "adobe-pdf-services"

    def __init__(
        self,
        connect_timeout: int = PDF_SERVICES_CONNECT_TIMEOUT,
        read_timeout: int = PDF_SERVICES_READ_TIMEOUT
    ):
        """
        Initialize Adobe PDF Services provider

        Args:
            connect_timeout: SDK connect timeout in milliseconds
            read_timeout: SDK read timeout in milliseconds
        """
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout

    def open_session(self, credentials: Credentials) -> ExecutionSession:
        service_credentials = ServicePrincipalCredentials(
            client_id=credentials.client_id,
            client_secret=credentials.client_secret
        )
        client_config = ClientConfig(
            connect_timeout=self.connect_timeout,
            read_timeout=self.read_timeout
        )
        pdf_services = PDFServices(credentials=service_credentials, client_config=client_config)
        return ExecutionSession(
            client_id=credentials.client_id,
            handle=pdf_services,
            metadata={"provider": self.name}
        )

    def create_pdf(self, session, data, mime_type):
        return self._run(session, data, mime_type, CreatePDFJob, CreatePDFResult)

    def merge_document(self, session, data, mime_type, json_data: Dict[str, Any],
                       output_format: OutputFormat):
        params = DocumentMergeParams(
            json_data_for_merge=json_data,
            output_format=_to_adobe(AdobeOutputFormat, output_format)
        )
        return self._run(session, data, mime_type,
                         lambda asset: DocumentMergeJob(asset, params),
                         DocumentMergePDFResult)

    def export_pdf(self, session, data, mime_type, target_format: ExportTargetFormat):
        params = ExportPDFParams(target_format=_to_adobe(ExportPDFTargetFormat, target_format))
        return self._run(session, data, mime_type,
                         lambda asset: ExportPDFJob(asset, params),
                         ExportPDFResult)

    def ocr_pdf(self, session, data, mime_type):
        return self._run(session, data, mime_type, OCRPDFJob, OCRPDFResult)

    def linearize_pdf(self, session, data, mime_type):
        return self._run(session, data, mime_type, LinearizePDFJob, LinearizePDFResult)

    def export_pdf_to_images(self, session, data, mime_type, target_format: ImageTargetFormat):
        params = ExportPDFtoImagesParams(
            export_pdf_to_images_target_format=_to_adobe(ExportPDFToImagesTargetFormat, target_format),
            export_pdf_to_images_output_type=ExportPDFToImagesOutputType.ZIP_OF_PAGE_IMAGES
        )
        return self._run(session, data, mime_type,
                         lambda asset: ExportPDFtoImagesJob(asset, params),
                         ExportPDFtoImagesResult,
                         multiple=True)

    def protect_pdf(self, session, data, mime_type, owner_password: str,
                    encryption_algorithm: EncryptionAlgorithm,
                    user_password: Optional[str],
                    content_encryption: ContentEncryption,
                    permissions: Sequence[Permission]):
        adobe_permissions = None
        if permissions:
            adobe_permissions = AdobePermissions()
            for permission in permissions:
                adobe_permissions.add_permission(_to_adobe(AdobePermission, permission))

        params = PasswordProtectParams(
            owner_password=owner_password,
            user_password=user_password,
            encryption_algorithm=_to_adobe(AdobeEncryptionAlgorithm, encryption_algorithm),
            content_encryption=_to_adobe(AdobeContentEncryption, content_encryption),
            permissions=adobe_permissions
        )
        return self._run(session, data, mime_type,
                         lambda asset: ProtectPDFJob(asset, params),
                         ProtectPDFResult)

    def remove_protection(self, session, data, mime_type, password: str):
        params = RemoveProtectionParams(password=password)
        return self._run(session, data, mime_type,
                         lambda asset: RemoveProtectionJob(asset, params),
                         RemoveProtectionResult)

    def compress_pdf(self, session, data, mime_type):
        return self._run(session, data, mime_type, CompressPDFJob, CompressPDFResult)

    def _run(
        self,
        session: ExecutionSession,
        data: bytes,
        mime_type: str,
        job_factory: Callable[[Any], Any],
        result_type: type,
        multiple: bool = False
    ) -> List[bytes]:
        """
        Upload input, submit one job and download its output asset(s)

        Args:
            session: Session opened by open_session
            data: Input document bytes
            mime_type: MIME type of the input
            job_factory: Builds the SDK job from the uploaded asset
            result_type: SDK result class for the job
            multiple: Whether the job result holds a list of assets

        Returns:
            List of output buffers
        """
        pdf_services: PDFServices = session.handle

        input_asset = pdf_services.upload(input_stream=data, mime_type=_media_type(mime_type))
        location = pdf_services.submit(job_factory(input_asset))
        logger.debug(f"Submitted {result_type.__name__} job: {location}")

        response = pdf_services.get_job_result(location, result_type)
        result = response.get_result()
        assets = result.get_assets() if multiple else [result.get_asset()]

        return [pdf_services.get_content(asset).get_input_stream() for asset in assets]


def _to_adobe(adobe_enum, member):
    """Translate a local enum member to the SDK enum member of the same name"""
    return getattr(adobe_enum, member.name)


def _media_type(mime_type: str) -> PDFServicesMediaType:
    try:
        return PDFServicesMediaType(mime_type)
    except ValueError as e:
        raise InvalidArgumentError(f"Unsupported media type of {mime_type}") from e
