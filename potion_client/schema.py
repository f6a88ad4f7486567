from potion_client.fields import Raw


class FieldSet(object):
    """
    A collection of named fields belonging to a resource. Used for converting between the wire representation of an
    item --- a flat JSON object --- and the values stored on a resource item.

    :param dict fields: a dictionary of {name: field} pairs
    """

    def __init__(self, fields=None):
        self.fields = dict(fields or {})

    def __contains__(self, name):
        return name in self.fields

    def __iter__(self):
        return iter(self.fields)

    def extend(self, fields):
        """
        :return: a new :class:`FieldSet` with the fields of this set and ``fields``
        """
        merged = dict(self.fields)
        merged.update(fields)
        return FieldSet(merged)

    def raw(self, values):
        """
        :param dict values: stored values of an item
        :return: the stored values of all fields in this set that are not ``None``
        """
        return {key: values[key] for key in self.fields if values.get(key) is not None}

    def format(self, values):
        """
        Like :meth:`raw`, but with every value formatted for JSON output by its field.
        """
        return {key: self.fields[key].format(value) for key, value in self.raw(values).items()}

    def convert(self, instance):
        """
        Converts a deserialized JSON object into stored values. Properties without a matching field are ignored.

        :param dict instance: JSON object
        """
        return {key: self.fields[key].convert(value) for key, value in instance.items() if key in self.fields}


def _is_field(value):
    return isinstance(value, Raw)
