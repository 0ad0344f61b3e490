from collections import namedtuple
from typing import Mapping, Optional, Type

from marshmallow import Schema, post_load
from marshmallow.fields import Field
from toolz import merge, valfilter

from folds.general.functional.option import not_none


def required(cls: Type[Field],
             name: Optional[str] = None,
             **kwargs) -> Field:
    return cls(
        **merge(
            kwargs,
            valfilter(not_none, {'data_key': name}),
            {'required': True}
        )
    )


def build(name: str,
          fields: Mapping[str, Field]):
    """Create a namedtuple type and a marshmallow schema that loads into it.

    Args:
        name: Name of the namedtuple; the schema is called ``{name}Schema``.
        fields: Marshmallow fields keyed by attribute name.

    Returns:
        A ``(namedtuple type, schema type)`` pair.
    """
    cls = namedtuple(name, fields.keys())

    @post_load
    def to_namedtuple(_, data, **kwargs):
        return cls(**data)

    schema: Type[Schema] = type(
        f'{name}Schema',
        (Schema,),
        {**fields, '_to_namedtuple': to_namedtuple}
    )

    return cls, schema
