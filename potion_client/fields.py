from datetime import datetime
import logging
import re

import aniso8601

from potion_client.exceptions import DeclarationError, InvalidAttribute, TypeMismatch
from potion_client.reference import ResourceReference, ResourceBound
from potion_client.utils import DATETIME_FORMAT, format_datetime

log = logging.getLogger(__name__)

RESERVED_NAMES = ('client', '_fields')

_missing = object()


def _check_name(resource, name):
    existing = getattr(resource, name, _missing)
    if name in RESERVED_NAMES or not (existing is _missing or isinstance(existing, (Raw, Reference))):
        raise DeclarationError(resource, name, 'name is already used by {}'.format(resource.__name__))


class Raw(ResourceBound):
    """
    This is the base class for all field types. A field is installed as a data descriptor on the resource class it is
    bound to and stores its value in the ``_fields`` mapping of each resource item. ``None`` means the value is absent.

    >>> class Book(Resource):
    ...     class Schema:
    ...         title = fields.Raw()
    ...         isbn = fields.Raw(io="r")

    :param io: one of "r" (read), "w" (write) or "rw", default: "rw"; an attribute that cannot be read or written
        raises :class:`AttributeError` on access, just like a missing property would
    :param description: optional description
    """
    name = None

    def __init__(self, io="rw", description=None):
        self.io = io
        self.description = description

    @property
    def io(self):
        return self._io

    @io.setter
    def io(self, value):
        io = ''
        if 'r' in value:
            io += 'r'
        if 'w' in value:
            io += 'w'
        if not io:
            raise ValueError('io must contain "r" or "w", got {!r}'.format(value))
        self._io = io

    @property
    def readable(self):
        return 'r' in self._io

    @property
    def writable(self):
        return 'w' in self._io

    def install(self, resource, name):
        """
        Bind the field to ``resource`` and make it available as the ``name`` attribute on the resource class.

        :raises DeclarationError: if ``name`` would replace an attribute that is not a field, such as a method
        """
        _check_name(resource, name)
        self.name = name
        field = self.bind(resource)
        setattr(resource, name, field)
        return field

    def convert(self, value):
        """
        Convert an assigned or received JSON value to its stored Python representation.
        """
        if value is not None:
            return self.converter(value)
        return value

    def format(self, value):
        """
        Format a stored Python value for output in JSON.
        """
        if value is not None:
            return self.formatter(value)
        return value

    def converter(self, value):
        return value

    def formatter(self, value):
        return value

    def __get__(self, instance, owner):
        if instance is None:
            return self
        if not self.readable:
            raise AttributeError("'{}' attribute of '{}' is write-only".format(self.name, owner.__name__))
        return instance._fields.get(self.name)

    def __set__(self, instance, value):
        if not self.writable:
            raise AttributeError("'{}' attribute of '{}' is read-only".format(self.name, type(instance).__name__))
        instance._fields[self.name] = self.convert(value)

    def __repr__(self):
        return '{}(name={}, io={})'.format(self.__class__.__name__, repr(self.name), repr(self.io))


class DateTime(Raw):
    """
    A field for ISO8601-formatted date-time strings with second precision and a literal ``Z`` suffix:

    ::

        "2011-12-12T12:00:00Z"

    Strings are converted to :class:`datetime.datetime` with UTC timezone; :class:`datetime.datetime` values are
    stored as is. The stored value is returned unmodified when read.

    :raises InvalidAttribute: if a value is neither a datetime nor a string in the above format
    """
    DATETIME_REGEX = re.compile(r'^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$')

    def converter(self, value):
        if isinstance(value, datetime):
            return value

        if isinstance(value, str) and self.DATETIME_REGEX.match(value):
            try:
                parsed = aniso8601.parse_datetime(value)
            except ValueError:
                pass
            else:
                # aniso8601 accepts 24:00:00 as midnight
                if parsed.strftime(DATETIME_FORMAT) == value:
                    return parsed
        raise InvalidAttribute(self.name, value)

    def formatter(self, value):
        return format_datetime(value)


class ToOne(Raw):
    """
    A foreign key to another resource. The field name must end in ``_id``; the field itself holds the id scalar and
    a second attribute --- the name with the ``_id`` suffix stripped --- gives access to the referenced item:

    - reading it fetches the item with :meth:`Resource.find` on every access;
    - assigning an item of the target resource stores the item's ``id``.

    Resource references can be one of the following:

    - :class:`Resource` class
    - a string with a resource name
    - a string with a module name and class name of a resource
    - ``"self"`` --- which resolves to the resource this field is bound to

    When no reference is given, the resource named like the stripped attribute is used, e.g. ``"user"`` for
    ``user_id``. The target is looked up on every use, so a resource registered later under the same name
    replaces the earlier one. A ``"self"`` reference inherited by a subclass refers to that subclass.

    :param resource: a resource reference
    :raises DeclarationError: when installed under a name that does not end in ``_id``
    """
    SUFFIX = '_id'

    def __init__(self, resource=None, **kwargs):
        self._target_value = resource
        super(ToOne, self).__init__(**kwargs)

    @property
    def reference_name(self):
        return self.name[:-len(self.SUFFIX)]

    def install(self, resource, name):
        if not name.endswith(self.SUFFIX) or len(name) == len(self.SUFFIX):
            raise DeclarationError(resource, name, 'reference attributes must end in "{}"'.format(self.SUFFIX))
        _check_name(resource, name[:-len(self.SUFFIX)])
        field = super(ToOne, self).install(resource, name)
        setattr(resource, field.reference_name, Reference(field))
        return field

    def rebind(self, resource):
        if self._target_value == 'self':
            return self.__class__('self', io=self.io, description=self.description).bind(resource)
        return self

    @property
    def target_reference(self):
        return ResourceReference(self._target_value or self.reference_name)

    @property
    def target(self):
        return self.target_reference.resolve(self.resource)

    @property
    def target_name(self):
        """
        The name of the target resource, resolving the reference only when it is not given by name.
        """
        value = self.target_reference.value
        if isinstance(value, str) and value != 'self':
            return value
        return self.target.meta.name

    def __repr__(self):
        return '{}({}, name={}, io={})'.format(self.__class__.__name__,
                                               repr(self._target_value),
                                               repr(self.name),
                                               repr(self.io))


class Reference(object):
    """
    The item accessor paired with a :class:`ToOne` field. Nothing is stored here; the value always lives in the
    ``_id`` field.
    """

    def __init__(self, field):
        self.field = field

    def __get__(self, instance, owner):
        if instance is None:
            return self

        field = self.field
        if not field.readable:
            raise AttributeError("'{}' attribute of '{}' is write-only".format(field.reference_name, owner.__name__))

        id = instance._fields.get(field.name)
        if id is None:
            return None

        log.debug('Resolving %s.%s (%s=%r)', owner.__name__, field.reference_name, field.name, id)
        return field.target.find(instance.client, id)

    def __set__(self, instance, item):
        field = self.field
        if not field.writable:
            raise AttributeError("'{}' attribute of '{}' is read-only".format(field.reference_name,
                                                                             type(instance).__name__))

        if item is None:
            instance._fields[field.name] = None
            return

        from potion_client.resource import Resource
        if not isinstance(item, Resource):
            raise TypeMismatch(field.reference_name, field.target_name, item)

        target = field.target
        if item.meta.name != target.meta.name:
            raise TypeMismatch(field.reference_name, target.meta.name, item)

        instance._fields[field.name] = item.id

    def __repr__(self):
        return 'Reference({})'.format(repr(self.field))
