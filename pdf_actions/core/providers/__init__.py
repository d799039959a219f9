"""
Document-processing providers.

The Adobe provider imports the PDF Services SDK, so it is only loaded when
a default provider is requested.
"""

from .base import DocumentProvider, ExecutionSession


def get_default_provider() -> DocumentProvider:
    """Build the Adobe PDF Services provider"""
    from .adobe_client import AdobePDFServicesProvider
    return AdobePDFServicesProvider()


__all__ = [
    'DocumentProvider',
    'ExecutionSession',
    'get_default_provider',
]
