import io
import zipfile

import pytest
from click.testing import CliRunner

from pdf_actions.cli import cli
from pdf_actions.core.actions import DocumentOperationAdapter
from pdf_actions.core.formats import EncryptionAlgorithm, ExportTargetFormat, Permission
from tests.conftest import DOCX_BYTES, PDF_BYTES, FakeProvider

CREDENTIAL_ARGS = ["--client-id", "client-id", "--client-secret", "client-secret"]


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def workdir(tmp_path):
    (tmp_path / "sample.pdf").write_bytes(PDF_BYTES)
    (tmp_path / "sample.docx").write_bytes(DOCX_BYTES)
    return tmp_path


def invoke(runner, workdir, provider, args):
    adapter = DocumentOperationAdapter(provider=provider)
    return runner.invoke(
        cli,
        ["--log-dir", str(workdir / "logs"), *args],
        obj={"adapter": adapter},
    )


def test_create_writes_derived_output(runner, workdir):
    provider = FakeProvider()
    result = invoke(runner, workdir, provider,
                    ["create", str(workdir / "sample.docx"), *CREDENTIAL_ARGS])

    assert result.exit_code == 0, result.output
    output = workdir / "sample_create.pdf"
    assert output.exists()
    assert output.read_bytes().startswith(b"%PDF")
    assert provider.calls[0]["operation"] == "create_pdf"


def test_export_with_explicit_output(runner, workdir):
    provider = FakeProvider()
    output = workdir / "out" / "statement.xlsx"
    result = invoke(runner, workdir, provider,
                    ["export", str(workdir / "sample.pdf"), "-f", "XLSX", "-o", str(output),
                     *CREDENTIAL_ARGS])

    assert result.exit_code == 0, result.output
    assert output.exists()
    assert provider.calls[0]["target_format"] is ExportTargetFormat.XLSX


def test_export_rejects_invalid_target_format(runner, workdir):
    provider = FakeProvider()
    result = invoke(runner, workdir, provider,
                    ["export", str(workdir / "sample.pdf"), "-f", "txt", *CREDENTIAL_ARGS])

    assert result.exit_code == 2
    assert "Invalid target format of txt" in result.output
    assert provider.sessions == []


def test_missing_credentials_are_a_usage_error(runner, workdir):
    provider = FakeProvider()
    result = invoke(runner, workdir, provider,
                    ["compress", str(workdir / "sample.pdf"),
                     "--client-id", "", "--client-secret", ""])

    assert result.exit_code == 2
    assert provider.sessions == []


def test_generate_from_data_file(runner, workdir):
    provider = FakeProvider()
    data_file = workdir / "data.json"
    data_file.write_text('{"name": "Ada"}', encoding="utf-8")

    result = invoke(runner, workdir, provider,
                    ["generate", str(workdir / "sample.docx"), "--data-file", str(data_file),
                     "--output-format", "docx", *CREDENTIAL_ARGS])

    assert result.exit_code == 0, result.output
    assert (workdir / "sample_generate.docx").exists()
    assert provider.calls[0]["json_data"] == {"name": "Ada"}


def test_generate_requires_data(runner, workdir):
    result = invoke(runner, workdir, FakeProvider(),
                    ["generate", str(workdir / "sample.docx"), *CREDENTIAL_ARGS])
    assert result.exit_code == 2


def test_images_writes_zip(runner, workdir):
    provider = FakeProvider(outputs=[b"page-1", b"page-2"])
    result = invoke(runner, workdir, provider,
                    ["images", str(workdir / "sample.pdf"), "-f", "jpeg", *CREDENTIAL_ARGS])

    assert result.exit_code == 0, result.output
    with zipfile.ZipFile(io.BytesIO((workdir / "sample_images.zip").read_bytes())) as archive:
        assert archive.namelist() == ["page_1.jpeg", "page_2.jpeg"]


def test_protect(runner, workdir):
    provider = FakeProvider()
    result = invoke(runner, workdir, provider,
                    ["protect", str(workdir / "sample.pdf"),
                     "--owner-password", "owner", "--encryption-algorithm", "aes_256",
                     "--permission", "PRINT_HIGH_QUALITY", "--permission", "copy_content",
                     *CREDENTIAL_ARGS])

    assert result.exit_code == 0, result.output
    call = provider.calls[0]
    assert call["encryption_algorithm"] is EncryptionAlgorithm.AES_256
    assert call["permissions"] == [Permission.PRINT_HIGH_QUALITY, Permission.COPY_CONTENT]


def test_protect_without_algorithm_fails(runner, workdir):
    provider = FakeProvider()
    result = invoke(runner, workdir, provider,
                    ["protect", str(workdir / "sample.pdf"), "--owner-password", "owner",
                     *CREDENTIAL_ARGS])

    assert result.exit_code == 2
    assert "Encryption Algorithm must be specified" in result.output
    assert provider.sessions == []


def test_unprotect_ocr_linearize(runner, workdir):
    provider = FakeProvider()
    for args in (["unprotect", "--password", "secret"], ["ocr"], ["linearize"]):
        result = invoke(runner, workdir, provider,
                        [args[0], str(workdir / "sample.pdf"), *args[1:], *CREDENTIAL_ARGS])
        assert result.exit_code == 0, result.output

    assert [call["operation"] for call in provider.calls] == [
        "remove_protection", "ocr_pdf", "linearize_pdf",
    ]
    assert (workdir / "sample_unprotect.pdf").exists()


def test_provider_failure_exits_with_error(runner, workdir):
    provider = FakeProvider(error=RuntimeError("service unavailable"))
    result = invoke(runner, workdir, provider,
                    ["compress", str(workdir / "sample.pdf"), *CREDENTIAL_ARGS])

    assert result.exit_code == 1
    assert "compress failed: service unavailable" in result.output


def test_check_credentials(runner, workdir, monkeypatch):
    from pdf_actions import cli as cli_module

    monkeypatch.setattr(cli_module, "check_credentials",
                        lambda credentials, token_url=None: (True, "Credentials accepted"))
    result = invoke(runner, workdir, FakeProvider(), ["check-credentials", *CREDENTIAL_ARGS])
    assert result.exit_code == 0
    assert "OK: Credentials accepted" in result.output

    monkeypatch.setattr(cli_module, "check_credentials",
                        lambda credentials, token_url=None: (False, "Token endpoint returned status 401"))
    result = invoke(runner, workdir, FakeProvider(), ["check-credentials", *CREDENTIAL_ARGS])
    assert result.exit_code == 1


def test_status_shows_configuration(runner, workdir):
    result = invoke(runner, workdir, FakeProvider(), ["status"])

    assert result.exit_code == 0, result.output
    assert '"read_timeout"' in result.output
    assert '"client_secret_set"' in result.output
