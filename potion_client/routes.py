import re
from urllib.parse import quote

from potion_client.exceptions import UnresolvedEndpoint

PLACEHOLDER_REGEX = re.compile(r':(\w+)')


class EndpointTemplate(object):
    """
    A path with named ``:placeholder`` segments, such as ``/merchants/:merchant_id/bills/:id``.

    Placeholders are substituted in order of appearance, either from positional arguments (:meth:`expand`) or
    from a mapping of item values (:meth:`resolve`). Values are converted with :func:`str` and percent-encoded.

    :param str template: the path template
    """

    def __init__(self, template):
        self.template = template
        self.placeholders = tuple(PLACEHOLDER_REGEX.findall(template))

    def expand(self, *args, **kwargs):
        """
        Assign positional arguments to placeholders in order of appearance; keyword arguments fill placeholders by
        name.

        :raises UnresolvedEndpoint: if a placeholder has no value or there are more arguments than placeholders
        """
        values = dict(kwargs)
        unassigned = [name for name in self.placeholders if name not in values]

        if len(args) > len(unassigned):
            raise UnresolvedEndpoint(self.template, reason='expected at most {} arguments, got {}'.format(
                len(unassigned), len(args)))

        values.update(zip(unassigned, args))
        return self.resolve(values)

    def resolve(self, values):
        """
        :param dict values: a mapping of placeholder names to values
        :raises UnresolvedEndpoint: if a placeholder has no value or the value is ``None``
        """
        def replace(match):
            name = match.group(1)
            value = values.get(name)
            if value is None:
                raise UnresolvedEndpoint(self.template, name)
            return quote(str(value), safe='')

        return PLACEHOLDER_REGEX.sub(replace, self.template)

    def __eq__(self, other):
        return isinstance(other, EndpointTemplate) and self.template == other.template

    def __hash__(self):
        return hash(self.template)

    def __repr__(self):
        return "<EndpointTemplate '{}'>".format(self.template)
