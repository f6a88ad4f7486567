from collections import namedtuple
import logging

from potion_client import fields, signals
from potion_client.exceptions import PermissionDenied
from potion_client.routes import EndpointTemplate
from potion_client.schema import FieldSet, _is_field
from potion_client.utils import AttributeDict, to_json

log = logging.getLogger(__name__)

Permissions = namedtuple('Permissions', ('creatable', 'updatable'))


class ResourceMeta(type):
    """
    Collects the ``Meta`` and ``Schema`` declarations of a resource class.

    ``Meta`` attributes are inherited from base classes, except for the permission flags, which are read from the
    class's own ``Meta`` only. Every resource class is registered by ``meta.name`` so that references can name it.
    """
    registry = {}

    def __new__(mcs, name, bases, members):
        class_ = super(ResourceMeta, mcs).__new__(mcs, name, bases, members)
        class_.meta = meta = AttributeDict()

        for base in bases:
            if isinstance(getattr(base, 'meta', None), AttributeDict):
                meta.update(base.meta)

        changes = {}
        if 'Meta' in members:
            changes = {k: v for k, v in members['Meta'].__dict__.items() if not k.startswith('__')}
            meta.update(changes)

        if not changes.get('name', None):
            meta['name'] = name.lower()

        class_.permissions = Permissions(*(bool(changes.get(flag, False)) for flag in Permissions._fields))
        meta.update(class_.permissions._asdict())

        class_.schema = FieldSet()
        for base in bases:
            if isinstance(getattr(base, 'schema', None), FieldSet):
                class_.schema = class_.schema.extend(base.schema.fields)

        for key, field in list(class_.schema.fields.items()):
            bound = field.bind(class_)
            if bound is not field:
                class_._declare(key, bound)

        if 'Schema' in members:
            for key, field in members['Schema'].__dict__.items():
                if _is_field(field):
                    class_._declare(key, field)

        mcs.registry[meta.name] = class_
        return class_


class Resource(object, metaclass=ResourceMeta):
    """
    A local item mirroring an item of a remote REST resource.

    A resource is configured using the `Schema` and `Meta` attributes, or with the declaration class methods
    (:meth:`attributes`, :meth:`date_accessor`, :meth:`reference_accessor` and so on).

    :class:`Meta` class attributes:

    =====================  ==============================  ==============================================================================
    Attribute name         Default                         Description
    =====================  ==============================  ==============================================================================
    name                   ---                             Name of the resource; defaults to the lower-case class name. Also used
                                                           as the type tag when checking references.
    endpoint               ``None``                        Path template with ``:placeholder`` segments, e.g. ``'/bills/:id'``.
    create_endpoint        ``None``                        Path template used to create items; defaults to `endpoint`.
    default_endpoint       ``'/{name}'``                   Path used to create items when no `endpoint` is set. ``{name}`` is
                                                           replaced with the resource name.
    default_item_endpoint  ``'/{name}/:id'``               Path used to read and update items when no `endpoint` is set.
    creatable              ``False``                       Whether new items may be saved. Not inherited.
    updatable              ``False``                       Whether existing items may be saved. Not inherited.
    =====================  ==============================  ==============================================================================

    Usage example:

    .. code-block:: python

        class Bill(Resource):
            class Schema:
                amount = fields.Raw()
                paid_at = fields.DateTime()
                merchant_id = fields.ToOne('merchant', io="r")

            class Meta:
                endpoint = '/bills/:id'
                create_endpoint = '/bills'
                creatable = True

        bill = Bill(client, amount=10).save()  # POST '/bills'
        bill = Bill.find(client, 42)
        bill.merchant  # fetches '/merchants/<merchant_id>'

    .. attribute:: client

        The HTTP client used for all requests made on behalf of this item.

    .. attribute:: meta

        A :class:`AttributeDict` of configuration attributes collected from the :class:`Meta` attributes.

    .. attribute:: schema

        A :class:`FieldSet` containing the fields of this resource, including inherited fields.

    .. attribute:: permissions

        A :class:`Permissions` tuple of this resource's own permission flags.

    """
    meta = None
    schema = None
    permissions = None

    class Schema:
        id = fields.Raw()
        uri = fields.Raw()

    class Meta:
        name = None
        endpoint = None
        create_endpoint = None
        default_endpoint = '/{name}'
        default_item_endpoint = '/{name}/:id'

    def __init__(self, client=None, **properties):
        self.client = client
        self._fields = {}

        for key, value in properties.items():
            if key not in self.schema and not isinstance(getattr(type(self), key, None), fields.Reference):
                raise TypeError("{}() got an unexpected keyword argument '{}'".format(type(self).__name__, key))
            setattr(self, key, value)

    @classmethod
    def _declare(cls, name, field):
        cls.schema.fields[name] = field.install(cls, name)

    @classmethod
    def attributes(cls, *names):
        """
        Declare plain attributes that are read and written as is.
        """
        for name in names:
            cls._declare(name, fields.Raw())

    @classmethod
    def date_writer(cls, *names):
        for name in names:
            cls._declare(name, fields.DateTime(io="w"))

    @classmethod
    def date_accessor(cls, *names):
        for name in names:
            cls._declare(name, fields.DateTime())

    @classmethod
    def reference_writer(cls, *names, resource=None):
        for name in names:
            cls._declare(name, fields.ToOne(resource, io="w"))

    @classmethod
    def reference_reader(cls, *names, resource=None):
        for name in names:
            cls._declare(name, fields.ToOne(resource, io="r"))

    @classmethod
    def reference_accessor(cls, *names, resource=None):
        for name in names:
            cls._declare(name, fields.ToOne(resource))

    @classmethod
    def is_creatable(cls):
        return cls.permissions.creatable

    @classmethod
    def is_updatable(cls):
        return cls.permissions.updatable

    @classmethod
    def endpoint(cls, item=False):
        """
        :param bool item: whether the endpoint should address a single item rather than create one
        :return: the :class:`EndpointTemplate` of this resource
        """
        template = cls.meta.endpoint
        if not item and cls.meta.create_endpoint is not None:
            template = cls.meta.create_endpoint
        if template is None:
            template = cls.meta.default_item_endpoint if item else cls.meta.default_endpoint
            template = template.format(name=cls.meta.name)
        return EndpointTemplate(template)

    @property
    def persisted(self):
        return self._fields.get('id') is not None

    @classmethod
    def from_hash(cls, client, properties):
        """
        Create an item from its wire representation. Unknown properties are ignored.

        :param client: HTTP client
        :param dict properties: JSON object
        """
        item = cls(client)
        item._merge(properties)
        return item

    def to_hash(self):
        """
        :return: a dictionary with the stored value of every field that is set; dates are not formatted
        """
        return self.schema.raw(self._fields)

    def to_json(self, **kwargs):
        return to_json(self.schema.format(self._fields), **kwargs)

    def _merge(self, properties):
        if properties:
            self._fields.update(self.schema.convert(properties))

    @classmethod
    def find(cls, client, *args, **kwargs):
        """
        Read a single item. Arguments are substituted into the endpoint's placeholders in order of appearance.

        :param client: HTTP client
        :raises UnresolvedEndpoint: if the arguments do not match the endpoint
        """
        path = cls.endpoint(item=True).expand(*args, **kwargs)
        log.debug('Reading %s from %s', cls.meta.name, path)
        return cls.from_hash(client, client.get(path))

    def save(self):
        """
        Create the item if it is not persisted, otherwise update it. The server response is merged into the item.

        :raises PermissionDenied: if the resource is not creatable or updatable respectively
        :raises UnresolvedEndpoint: if the endpoint refers to a field that is not set
        :return: the item itself
        """
        resource = type(self)

        if self.persisted:
            if not resource.is_updatable():
                raise PermissionDenied(resource, 'updatable')

            path = resource.endpoint(item=True).resolve(self._fields)
            signals.before_update.send(resource, item=self)

            log.debug('Updating %s at %s', resource.meta.name, path)
            self._merge(self.client.put(path, self.to_hash()))
            signals.after_update.send(resource, item=self)
        else:
            if not resource.is_creatable():
                raise PermissionDenied(resource, 'creatable')

            path = resource.endpoint().resolve(self._fields)
            signals.before_create.send(resource, item=self)

            log.debug('Creating %s at %s', resource.meta.name, path)
            self._merge(self.client.post(path, self.to_hash()))
            signals.after_create.send(resource, item=self)
        return self

    def __repr__(self):
        return '<{} {}>'.format(type(self).__name__, self.to_hash())
