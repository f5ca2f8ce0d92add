from jsonschema import Draft4Validator

from halclient.exceptions import InvalidDocument

LINK_SCHEMA = {
    "type": "object",
    "properties": {
        "href": {"type": "string"},
        "templated": {"type": "boolean"},
        "type": {"type": "string"},
        "deprecation": {"type": "string"},
        "name": {"type": "string"},
        "profile": {"type": "string"},
        "title": {"type": "string"},
        "hreflang": {"type": "string"}
    },
    "required": ["href"]
}

LINKS_SCHEMA = {
    "type": "object",
    "additionalProperties": {
        "oneOf": [
            LINK_SCHEMA,
            {
                "type": "array",
                "items": LINK_SCHEMA
            }
        ]
    }
}

_validator = Draft4Validator(LINKS_SCHEMA)


def validate_links(links):
    """
    Validate the ``_links`` section of a HAL representation.

    :raises InvalidDocument: listing every violation of :data:`LINKS_SCHEMA`
    """
    errors = sorted(_validator.iter_errors(links), key=lambda error: [str(part) for part in error.absolute_path])
    if errors:
        raise InvalidDocument('Invalid _links section', errors)
