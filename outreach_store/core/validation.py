"""
Local evaluation of the $jsonSchema validators attached to the store.

Only the keywords the store's validators use are accepted:
- bsonType (a single alias or a list of aliases)
- required
- properties
- enum
- minLength
- description (ignored)

The descriptor that is sent to MongoDB is evaluated here with jsonschema, so
documents can be checked before a round trip and test fixtures can be built
from it. bsonType is not a JSON Schema keyword; it is registered on an
extended Draft 2020-12 validator and resolved through a type checker that
knows the BSON aliases.
"""
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from bson import Decimal128, ObjectId
from bson.datetime_ms import DatetimeMS
from jsonschema import Draft202012Validator, ValidationError, validators
from jsonschema.exceptions import SchemaError

from outreach_store.core.exceptions import ValidationSpecError


def _is_int(checker, instance) -> bool:
    # bool is an int subclass in Python but a distinct BSON type
    return isinstance(instance, int) and not isinstance(instance, bool)


def _is_double(checker, instance) -> bool:
    return isinstance(instance, float)


def _is_number(checker, instance) -> bool:
    return _is_int(checker, instance) or isinstance(instance, (float, Decimal128))


# bsonType alias -> type check. pymongo encodes DatetimeMS as a BSON date.
BSON_TYPE_CHECKS = {
    "string": lambda checker, instance: isinstance(instance, str),
    "date": lambda checker, instance: isinstance(instance, (datetime, DatetimeMS)),
    "int": _is_int,
    "long": _is_int,
    "double": _is_double,
    "decimal": lambda checker, instance: isinstance(instance, Decimal128),
    "number": _is_number,
    "bool": lambda checker, instance: isinstance(instance, bool),
    "object": lambda checker, instance: isinstance(instance, Mapping),
    "array": lambda checker, instance: isinstance(instance, (list, tuple)),
    "null": lambda checker, instance: instance is None,
    "objectId": lambda checker, instance: isinstance(instance, ObjectId),
}

BSON_TYPE_CHECKER = Draft202012Validator.TYPE_CHECKER.redefine_many(BSON_TYPE_CHECKS)

FIELD_KEYWORDS = {"bsonType", "enum", "minLength", "description"}
TOP_LEVEL_KEYWORDS = {"bsonType", "required", "properties", "description"}


def _type_names(bson_type: Any) -> list[str]:
    if isinstance(bson_type, str):
        return [bson_type]
    if isinstance(bson_type, (list, tuple)) and bson_type:
        return list(bson_type)
    return []


def _bson_type(validator, bson_type, instance, schema):
    type_names = _type_names(bson_type)
    if not any(validator.is_type(instance, name) for name in type_names):
        yield ValidationError(
            f"must be of type {' or '.join(type_names)}, got {type(instance).__name__}"
        )


def _required(validator, required, instance, schema):
    if not validator.is_type(instance, "object"):
        return
    for field in required:
        if field not in instance:
            yield ValidationError(f"missing required field '{field}'")


BsonSchemaValidator = validators.extend(
    Draft202012Validator,
    validators={"bsonType": _bson_type, "required": _required},
    type_checker=BSON_TYPE_CHECKER,
)


def check_schema(schema: Mapping[str, Any]) -> None:
    """
    Verify that a validator descriptor is well formed.

    The descriptor is first checked against the Draft 2020-12 meta-schema,
    then against the rules MongoDB applies to $jsonSchema validators.

    Args:
        schema: A $jsonSchema descriptor for one collection

    Raises:
        ValidationSpecError: If the descriptor cannot be evaluated
    """
    if not isinstance(schema, Mapping):
        raise ValidationSpecError("Validator must be a mapping")

    try:
        BsonSchemaValidator.check_schema(schema)
    except SchemaError as e:
        raise ValidationSpecError(f"Invalid validator at {e.json_path}: {e.message}") from e

    unknown = set(schema) - TOP_LEVEL_KEYWORDS
    if unknown:
        raise ValidationSpecError(f"Unsupported validator keywords: {sorted(unknown)}")

    if schema.get("bsonType") != "object":
        raise ValidationSpecError("Top-level bsonType must be 'object'")

    properties = schema.get("properties", {})
    for field in schema.get("required", []):
        if field not in properties:
            raise ValidationSpecError(f"Required field '{field}' has no property definition")

    for field, rules in properties.items():
        if not isinstance(rules, Mapping):
            raise ValidationSpecError(f"Property '{field}' must be a mapping")

        unknown = set(rules) - FIELD_KEYWORDS
        if unknown:
            raise ValidationSpecError(f"Property '{field}' uses unsupported keywords: {sorted(unknown)}")

        type_names = _type_names(rules.get("bsonType"))
        if not type_names:
            raise ValidationSpecError(f"Property '{field}' needs a bsonType")
        for name in type_names:
            if name not in BSON_TYPE_CHECKS:
                raise ValidationSpecError(f"Property '{field}' has unknown bsonType '{name}'")

        # The meta-schema allows an empty enum; MongoDB does not
        if "enum" in rules and not rules["enum"]:
            raise ValidationSpecError(f"Property '{field}' enum must be a non-empty list")


def _describe(error: ValidationError) -> str:
    if not error.path:
        if error.validator == "bsonType":
            return "document must be an object"
        return error.message

    field = ".".join(str(part) for part in error.path)
    if error.validator == "enum":
        return f"field '{field}' must be one of {list(error.validator_value)}, got {error.instance!r}"
    if error.validator == "minLength":
        return f"field '{field}' must be at least {error.validator_value} character(s) long"
    return f"field '{field}' {error.message}"


def validate_document(schema: Mapping[str, Any], document: Any) -> list[str]:
    """
    Evaluate a document against a validator descriptor.

    Args:
        schema: A $jsonSchema descriptor for one collection
        document: Candidate document

    Returns:
        List of human-readable violations (empty when the document is valid)
    """
    check_schema(schema)

    validator = BsonSchemaValidator(schema)
    return [_describe(error) for error in validator.iter_errors(document)]
