"""Detection of attributes whose values are assigned by the storage backend."""

from typing import List
from strict_records.schema.model import EntitySchema


def generated_fields(schema: EntitySchema) -> List[str]:
    """
    Names of backend-generated attributes, in declared order.

    An attribute counts once no matter how many of primary key, generated
    default and version counter it is flagged as.

    Args:
        schema: Schema of the record type

    Returns:
        List of attribute names (empty if the type has none)
    """
    names: List[str] = []
    seen = set()
    for attr in schema.attributes:
        if attr.is_generated and attr.name not in seen:
            seen.add(attr.name)
            names.append(attr.name)
    return names
