"""
Document validation

Parses operation documents with graphql-core and validates them against the
introspection schema, so shipped and generated documents are known to only
reference fields and types the API actually exposes.
"""

from typing import List, Optional

from graphql import DocumentNode, GraphQLError, GraphQLSchema, OperationDefinitionNode, parse, validate

from .introspection import IntrospectionSchema


class DocumentError(Exception):
    """Document is not valid GraphQL"""
    pass


def parse_document(source: str) -> DocumentNode:
    """Parse GraphQL source

    Raises:
        DocumentError: Syntax error in the document
    """
    try:
        return parse(source)
    except GraphQLError as e:
        raise DocumentError(f"Invalid GraphQL document: {e.message}") from e


def validate_document(schema, source: str) -> List[str]:
    """Validate a document against a schema

    Args:
        schema: IntrospectionSchema or graphql-core GraphQLSchema
        source: GraphQL document text

    Returns:
        Error messages; empty when the document is valid
    """
    if isinstance(schema, IntrospectionSchema):
        schema = schema.to_graphql_schema()
    if not isinstance(schema, GraphQLSchema):
        raise TypeError(f"Expected a schema, got {type(schema).__name__}")

    try:
        document = parse(source)
    except GraphQLError as e:
        return [e.message]
    return [error.message for error in validate(schema, document)]


def operation_definitions(source: str) -> List[OperationDefinitionNode]:
    document = parse_document(source)
    return [d for d in document.definitions if isinstance(d, OperationDefinitionNode)]


def operation_name(source: str) -> Optional[str]:
    """Name of the single operation in a document

    Raises:
        DocumentError: Document holds no operation or more than one
    """
    operations = operation_definitions(source)
    if len(operations) != 1:
        raise DocumentError(f"Expected exactly one operation, found {len(operations)}")
    name = operations[0].name
    return name.value if name else None


def operation_type(source: str) -> str:
    """query, mutation or subscription"""
    operations = operation_definitions(source)
    if len(operations) != 1:
        raise DocumentError(f"Expected exactly one operation, found {len(operations)}")
    return operations[0].operation.value
