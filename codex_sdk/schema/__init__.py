"""
Schema tooling

Introspection loading, operation document generation, Python type module
generation and document validation.
"""

from .introspection import IntrospectionSchema, SchemaError, fetch_schema, load_schema, save_schema
from .query_builder import (
    get_leaf_args,
    get_leaf_type,
    parse_variables,
    render_operation,
    transform_args_to_input_wrapper,
    type_object_to_string,
)
from .generator import generate_operations, load_operations, stale_operations, write_operations
from .type_generator import is_types_module_stale, render_types_module, write_types_module
