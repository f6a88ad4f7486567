from datetime import datetime, timezone
import json

DATETIME_FORMAT = '%Y-%m-%dT%H:%M:%SZ'


class AttributeDict(dict):
    __getattr__ = dict.__getitem__
    __setattr__ = dict.__setitem__


def format_datetime(value):
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(DATETIME_FORMAT)


class ResourceJSONEncoder(json.JSONEncoder):
    """
    Encodes :class:`datetime.datetime` values in the wire format, ``YYYY-MM-DDTHH:MM:SSZ``.
    """

    def default(self, o):
        if isinstance(o, datetime):
            return format_datetime(o)
        return super(ResourceJSONEncoder, self).default(o)


def to_json(value, **kwargs):
    return json.dumps(value, cls=ResourceJSONEncoder, **kwargs)
