from .client import Client
from .exceptions import PotionClientError, DeclarationError, InvalidAttribute, TypeMismatch, UnresolvedEndpoint, \
    PermissionDenied, UnknownResource
from .resource import Resource, Permissions

__all__ = (
    'Client',
    'Resource',
    'Permissions',
    'PotionClientError',
    'DeclarationError',
    'InvalidAttribute',
    'TypeMismatch',
    'UnresolvedEndpoint',
    'PermissionDenied',
    'UnknownResource',
    'fields',
    'routes',
    'schema',
    'signals'
)
