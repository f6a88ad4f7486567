from importlib import import_module
import inspect

from potion_client.exceptions import UnknownResource


class ResourceReference(object):
    """
    A lazy reference to a :class:`Resource` class.

    The value can be one of:

    - a :class:`Resource` class
    - a string with a resource name, as registered through ``Meta.name``
    - a string with a module name and class name of a resource
    - ``"self"`` --- which resolves to the resource the reference is bound to
    """

    def __init__(self, value):
        self.value = value

    def resolve(self, binding=None):
        """
        Attempt to resolve the reference value and return the matching :class:`Resource`.

        :raises UnknownResource: if no resource matches the value
        """
        name = self.value

        if name == 'self':
            return binding

        from .resource import Resource, ResourceMeta
        if inspect.isclass(name) and issubclass(name, Resource):
            return name

        if name in ResourceMeta.registry:
            return ResourceMeta.registry[name]

        try:
            module_name, class_name = name.rsplit('.', 1)
            return getattr(import_module(module_name), class_name)
        except (ValueError, ImportError, AttributeError):
            raise UnknownResource(name)

    def __repr__(self):
        return "<ResourceReference '{}'>".format(self.value)


class ResourceBound(object):
    """
    An object that belongs to a resource class. Subclasses of that resource share the binding unless
    :meth:`rebind` returns a copy for them.
    """
    resource = None

    def bind(self, resource):
        if self.resource is None:
            self.resource = resource
        elif self.resource != resource:
            return self.rebind(resource)
        return self

    def rebind(self, resource):
        return self
