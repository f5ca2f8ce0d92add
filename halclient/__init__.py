from .exceptions import HalClientException, InvalidArgument, InvalidDocument, MissingURITemplateVariables
from .resource import Resource
from .link import Link
from .connection import Connection, Response
from .entry_point import EntryPoint

__all__ = (
    'EntryPoint',
    'Link',
    'Resource',
    'Connection',
    'Response',
    'HalClientException',
    'InvalidArgument',
    'InvalidDocument',
    'MissingURITemplateVariables',
    'collection',
    'curie',
    'schema',
    'signals',
    'uri_template'
)
