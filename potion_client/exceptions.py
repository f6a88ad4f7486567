class PotionClientError(Exception):
    """
    Base class for all errors raised by resources. Errors raised by the HTTP client are never wrapped in one of these.
    """
    message = 'Resource error'

    def as_dict(self):
        return {
            'error': self.__class__.__name__,
            'message': str(self) or self.message
        }


class DeclarationError(PotionClientError, ValueError):
    message = 'Invalid field declaration'

    def __init__(self, resource, name, reason):
        super(DeclarationError, self).__init__('{}.{}: {}'.format(resource.__name__, name, reason))
        self.resource = resource
        self.name = name
        self.reason = reason

    def as_dict(self):
        dct = super(DeclarationError, self).as_dict()
        dct['field'] = self.name
        return dct


class InvalidAttribute(PotionClientError, ValueError):
    message = 'Invalid attribute value'

    def __init__(self, name, value):
        super(InvalidAttribute, self).__init__('Invalid value for "{}": {!r}'.format(name, value))
        self.name = name
        self.value = value

    def as_dict(self):
        dct = super(InvalidAttribute, self).as_dict()
        dct['field'] = self.name
        return dct


class TypeMismatch(PotionClientError, TypeError):
    message = 'Wrong resource type'

    def __init__(self, name, expected, value):
        super(TypeMismatch, self).__init__('"{}" expects a "{}" resource, got {!r}'.format(name, expected, value))
        self.name = name
        self.expected = expected
        self.value = value

    def as_dict(self):
        dct = super(TypeMismatch, self).as_dict()
        dct['field'] = self.name
        dct['expected'] = self.expected
        return dct


class UnresolvedEndpoint(PotionClientError, ValueError):
    message = 'Endpoint cannot be resolved'

    def __init__(self, template, placeholder=None, reason=None):
        if reason is None:
            reason = 'no value for ":{}"'.format(placeholder)
        super(UnresolvedEndpoint, self).__init__('{}: {}'.format(template, reason))
        self.template = template
        self.placeholder = placeholder

    def as_dict(self):
        dct = super(UnresolvedEndpoint, self).as_dict()
        dct['endpoint'] = self.template
        if self.placeholder is not None:
            dct['placeholder'] = self.placeholder
        return dct


class PermissionDenied(PotionClientError):
    message = 'Operation not permitted'

    def __init__(self, resource, operation):
        super(PermissionDenied, self).__init__('"{}" resources are not {}'.format(resource.meta.name, operation))
        self.resource = resource
        self.operation = operation

    def as_dict(self):
        dct = super(PermissionDenied, self).as_dict()
        dct['item'] = {
            "$type": self.resource.meta.name
        }
        dct['operation'] = self.operation
        return dct


class UnknownResource(PotionClientError, LookupError):
    message = 'Resource cannot be found'

    def __init__(self, name):
        super(UnknownResource, self).__init__('Resource named "{}" is not registered'.format(name))
        self.name = name

    def as_dict(self):
        dct = super(UnknownResource, self).as_dict()
        dct['item'] = {
            "$type": self.name
        }
        return dct
