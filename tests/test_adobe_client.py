import pytest

from pdf_actions.core.actions.action_utils import MIME_TYPES
from pdf_actions.core.exceptions import InvalidArgumentError
from pdf_actions.core.formats import (
    ContentEncryption,
    EncryptionAlgorithm,
    ExportTargetFormat,
    ImageTargetFormat,
    OutputFormat,
    Permission,
)
from pdf_actions.core.providers import adobe_client as adobe
from pdf_actions.core.providers import get_default_provider
from pdf_actions.core.providers.base import ExecutionSession


def test_default_provider_is_adobe():
    provider = get_default_provider()
    assert isinstance(provider, adobe.AdobePDFServicesProvider)
    assert provider.name == "adobe-pdf-services"


@pytest.mark.parametrize("mime_type", sorted(set(MIME_TYPES.values())))
def test_every_input_mime_type_is_a_sdk_media_type(mime_type):
    media_type = adobe._media_type(mime_type)
    assert isinstance(media_type, adobe.PDFServicesMediaType)
    assert media_type.value == mime_type


def test_unknown_media_type_is_invalid_argument():
    with pytest.raises(InvalidArgumentError, match="audio/mpeg"):
        adobe._media_type("audio/mpeg")


@pytest.mark.parametrize("local_enum, sdk_enum", [
    (OutputFormat, adobe.AdobeOutputFormat),
    (ExportTargetFormat, adobe.ExportPDFTargetFormat),
    (ImageTargetFormat, adobe.ExportPDFToImagesTargetFormat),
    (ContentEncryption, adobe.AdobeContentEncryption),
    (EncryptionAlgorithm, adobe.AdobeEncryptionAlgorithm),
    (Permission, adobe.AdobePermission),
])
def test_every_option_maps_to_sdk_member(local_enum, sdk_enum):
    for member in local_enum:
        assert adobe._to_adobe(sdk_enum, member) is getattr(sdk_enum, member.name)


class FakeAsset:
    def __init__(self, content):
        self.content = content

    def get_input_stream(self):
        return self.content


class FakeResult:
    def __init__(self, assets):
        self.assets = assets

    def get_asset(self):
        return self.assets[0]

    def get_assets(self):
        return self.assets


class FakeResponse:
    def __init__(self, result):
        self.result = result

    def get_result(self):
        return self.result


class FakePDFServices:
    def __init__(self, outputs):
        self.outputs = outputs
        self.uploads = []
        self.jobs = []

    def upload(self, input_stream, mime_type):
        self.uploads.append((input_stream, mime_type))
        return "input-asset"

    def submit(self, job):
        self.jobs.append(job)
        return "location"

    def get_job_result(self, location, result_type):
        return FakeResponse(FakeResult([FakeAsset(content) for content in self.outputs]))

    def get_content(self, asset):
        return asset


@pytest.fixture
def fake_services(monkeypatch):
    monkeypatch.setattr(adobe, "_media_type", lambda mime_type: mime_type)
    return FakePDFServices([b"%PDF-compressed"])


def test_run_uploads_submits_and_downloads(monkeypatch, fake_services):
    monkeypatch.setattr(adobe, "CompressPDFJob", lambda asset: ("compress", asset))
    provider = adobe.AdobePDFServicesProvider()
    session = ExecutionSession(client_id="client-id", handle=fake_services)

    outputs = provider.compress_pdf(session, b"%PDF-input", "application/pdf")

    assert outputs == [b"%PDF-compressed"]
    assert fake_services.uploads == [(b"%PDF-input", "application/pdf")]
    assert fake_services.jobs == [("compress", "input-asset")]


def test_images_collects_every_asset(monkeypatch, fake_services):
    fake_services.outputs = [b"zip-archive"]
    monkeypatch.setattr(adobe, "ExportPDFtoImagesJob", lambda asset, params: ("images", asset, params))
    provider = adobe.AdobePDFServicesProvider()
    session = ExecutionSession(client_id="client-id", handle=fake_services)

    outputs = provider.export_pdf_to_images(session, b"%PDF-input", "application/pdf",
                                            ImageTargetFormat.PNG)

    assert outputs == [b"zip-archive"]
    assert fake_services.jobs[0][0] == "images"
