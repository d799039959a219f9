#!/usr/bin/env python3
"""
Command line interface for the PDF Services document actions.
Each command reads one input file, runs one action and writes the result.
"""

import json
import time
from pathlib import Path
from typing import Callable, Optional

import click
from loguru import logger

from .config.settings import LOG_DIR, PDF_SERVICES_CLIENT_ID, PDF_SERVICES_CLIENT_SECRET, get_config
from .core.actions import (
    CompressDocument,
    CreateDocument,
    Credentials,
    DocumentOperationAdapter,
    ExportDocument,
    FileAsset,
    GenerateDocument,
    ImageDocument,
    LinearizeDocument,
    OcrDocument,
    OperationRequest,
    ProtectDocument,
    ProtectDocumentOptions,
    UnprotectDocument,
)
from .core.actions.action_utils import derive_output_filename
from .core.exceptions import InvalidArgumentError
from .core.providers.connection import check_credentials
from .core.utils.logging_config import create_operation_context, initialize_logging


def credential_options(func):
    """Add --client-id / --client-secret, defaulting to the configured credentials"""
    func = click.option('--client-secret', default=PDF_SERVICES_CLIENT_SECRET,
                        help='PDF Services client secret (default: PDF_SERVICES_CLIENT_SECRET)')(func)
    func = click.option('--client-id', default=PDF_SERVICES_CLIENT_ID,
                        help='PDF Services client id (default: PDF_SERVICES_CLIENT_ID)')(func)
    return func


def io_options(func):
    """Add the input file argument and --output option"""
    func = click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
                        help='Output file (default: derived from the input filename)')(func)
    func = click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))(func)
    return func


def _run_action(
    ctx: click.Context,
    client_id: Optional[str],
    client_secret: Optional[str],
    input_file: Path,
    output: Optional[Path],
    build_request: Callable[[FileAsset], OperationRequest]
) -> Path:
    """Build the request, execute it and write the result"""
    adapter: DocumentOperationAdapter = ctx.obj['adapter']
    source = FileAsset.create(input_file.read_bytes(), input_file.name)

    try:
        credentials = Credentials(client_id or "", client_secret or "")
        request = build_request(source)
    except InvalidArgumentError as e:
        raise click.UsageError(str(e), ctx=ctx) from e

    start_time = time.time()
    try:
        result = adapter.execute(credentials, request)
    except InvalidArgumentError as e:
        raise click.UsageError(str(e), ctx=ctx) from e
    except Exception as e:
        raise click.ClickException(f"{request.kind} failed: {e}") from e

    if output is None:
        output = input_file.parent / derive_output_filename(
            input_file.name, request.output_extension, suffix=f"_{request.kind}"
        )
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(result)

    logger.info(f"Duration: {time.time() - start_time:.2f} seconds")
    click.echo(f"{request.kind}: {input_file.name} -> {output} ({len(result)} bytes)")
    return output


@click.group()
@click.option('--log-dir', type=click.Path(file_okay=False, path_type=Path), default=LOG_DIR,
              help='Directory for log files')
@click.option('--log-level', default=None, help='Log level (default: LOG_LEVEL)')
@click.pass_context
def cli(ctx, log_dir, log_level):
    """Adobe PDF Services document actions"""
    ctx.ensure_object(dict)
    ctx.obj.setdefault('adapter', DocumentOperationAdapter())
    initialize_logging(log_dir, log_level)


@cli.command()
@io_options
@credential_options
@click.pass_context
@create_operation_context("Create Document")
def create(ctx, input_file, output, client_id, client_secret):
    """Create a PDF from an Office document or image"""
    _run_action(ctx, client_id, client_secret, input_file, output, CreateDocument)


@cli.command()
@io_options
@click.option('--data', 'json_data', help='JSON data to merge into the template')
@click.option('--data-file', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='File containing the JSON data')
@click.option('--output-format', default='pdf', show_default=True, help='docx or pdf')
@credential_options
@click.pass_context
@create_operation_context("Generate Document")
def generate(ctx, input_file, output, json_data, data_file, output_format, client_id, client_secret):
    """Merge JSON data into a Word template"""
    if json_data is None and data_file is None:
        raise click.UsageError("Either --data or --data-file must be given", ctx=ctx)
    if data_file is not None:
        json_data = data_file.read_text(encoding='utf-8')

    _run_action(ctx, client_id, client_secret, input_file, output,
                lambda source: GenerateDocument.from_strings(source, json_data, output_format))


@cli.command()
@io_options
@click.option('--target-format', '-f', required=True, help='doc, rtf, docx, pptx or xlsx')
@credential_options
@click.pass_context
@create_operation_context("Export Document")
def export(ctx, input_file, output, target_format, client_id, client_secret):
    """Convert a PDF to a non-PDF format"""
    _run_action(ctx, client_id, client_secret, input_file, output,
                lambda source: ExportDocument.from_strings(source, target_format))


@cli.command()
@io_options
@credential_options
@click.pass_context
@create_operation_context("OCR Document")
def ocr(ctx, input_file, output, client_id, client_secret):
    """Add a searchable text layer to a PDF"""
    _run_action(ctx, client_id, client_secret, input_file, output, OcrDocument)


@cli.command()
@io_options
@credential_options
@click.pass_context
@create_operation_context("Linearize Document")
def linearize(ctx, input_file, output, client_id, client_secret):
    """Optimize a PDF for fast web view"""
    _run_action(ctx, client_id, client_secret, input_file, output, LinearizeDocument)


@cli.command()
@io_options
@click.option('--target-format', '-f', default='png', show_default=True, help='png or jpeg')
@credential_options
@click.pass_context
@create_operation_context("Image Document")
def images(ctx, input_file, output, target_format, client_id, client_secret):
    """Convert every page of a PDF to an image (ZIP archive)"""
    _run_action(ctx, client_id, client_secret, input_file, output,
                lambda source: ImageDocument.from_strings(source, target_format))


@cli.command()
@io_options
@click.option('--owner-password', help='Owner password (required)')
@click.option('--user-password', help='Password required to open the document')
@click.option('--encryption-algorithm', help='AES_128 or AES_256 (required)')
@click.option('--content-encryption', default='ALL_CONTENT', show_default=True,
              help='ALL_CONTENT or ALL_CONTENT_EXCEPT_METADATA')
@click.option('--permission', 'permissions', multiple=True,
              help='Permission to grant, may be repeated (e.g. PRINT_HIGH_QUALITY)')
@credential_options
@click.pass_context
@create_operation_context("Protect Document")
def protect(ctx, input_file, output, owner_password, user_password, encryption_algorithm,
            content_encryption, permissions, client_id, client_secret):
    """Password protect a PDF"""
    options = ProtectDocumentOptions(
        owner_password=owner_password,
        encryption_algorithm=encryption_algorithm,
        user_password=user_password,
        content_encryption=content_encryption,
        permissions=list(permissions)
    )
    _run_action(ctx, client_id, client_secret, input_file, output,
                lambda source: ProtectDocument.from_options(source, options))


@cli.command()
@io_options
@click.option('--password', required=True, help='Password of the protected document')
@credential_options
@click.pass_context
@create_operation_context("Unprotect Document")
def unprotect(ctx, input_file, output, password, client_id, client_secret):
    """Remove password protection from a PDF"""
    _run_action(ctx, client_id, client_secret, input_file, output,
                lambda source: UnprotectDocument(source, password=password))


@cli.command()
@io_options
@credential_options
@click.pass_context
@create_operation_context("Compress Document")
def compress(ctx, input_file, output, client_id, client_secret):
    """Reduce the file size of a PDF"""
    _run_action(ctx, client_id, client_secret, input_file, output, CompressDocument)


@cli.command('check-credentials')
@credential_options
@click.option('--token-url', default=None, help='Token endpoint override')
@click.pass_context
def check_credentials_command(ctx, client_id, client_secret, token_url):
    """Check that the client id and secret are accepted"""
    try:
        credentials = Credentials(client_id or "", client_secret or "")
    except InvalidArgumentError as e:
        raise click.UsageError(str(e), ctx=ctx) from e

    success, message = check_credentials(credentials, token_url=token_url)
    if success:
        click.echo(f"OK: {message}")
    else:
        click.echo(f"FAILED: {message}", err=True)
        ctx.exit(1)


@cli.command()
def status():
    """Show the active configuration"""
    config = get_config()
    config["pdf_services"]["client_secret_set"] = bool(PDF_SERVICES_CLIENT_SECRET)

    click.echo("PDF Services Actions Status")
    click.echo("=" * 40)
    click.echo(json.dumps(config, indent=2, default=str))


if __name__ == "__main__":
    cli()
