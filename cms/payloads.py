"""Conversions between the admin UI's JSON shape and the stored model shape.

The admin UI speaks camelCase and, for a few About page collections, uses
its own field names. Models use snake_case storage names. All renaming
happens here so the contract can be read in one place.
"""
import re

_CAMEL_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')


def to_snake(key):
    return _CAMEL_BOUNDARY.sub('_', key).lower()


def to_camel(key):
    head, *rest = key.split('_')
    return head + ''.join(word.capitalize() for word in rest)


class FieldMap:
    """Bidirectional rename table: admin form field name <-> stored field name.

    Both sides are given in the JSON (camelCase) spelling, e.g.
    ``FieldMap(yearRange='period', company='organization')``.
    """

    def __init__(self, **renames):
        self.form_to_stored = dict(renames)
        self.stored_to_form = {stored: form for form, stored in renames.items()}

    def stored_name(self, form_name):
        return self.form_to_stored.get(form_name, form_name)

    def form_name(self, stored_name):
        return self.stored_to_form.get(stored_name, stored_name)

    def to_storage(self, payload):
        """Rename form-shaped keys and convert them to snake_case model names."""
        return {to_snake(self.stored_name(key)): value for key, value in payload.items()}

    def __repr__(self):
        return f'FieldMap({self.form_to_stored!r})'


NO_RENAMES = FieldMap()
JOURNEY_FIELDS = FieldMap(yearRange='period', company='organization')
EDUCATION_FIELDS = FieldMap(degree='qualification')


def serialize(instance, **extra):
    """Flatten a model instance into a camelCase dict; foreign keys appear as ``<name>Id``."""
    data = {to_camel(field.attname): field.value_from_object(instance)
            for field in instance._meta.concrete_fields}
    data.update(extra)
    return data
