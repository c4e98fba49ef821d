"""
Keyword Emission Tests

Verifies the JSON-schema keywords built from resolved constraint values and
the root object's required array.
"""

from apispec_jsonschema.keywords import constraint_keywords, required_properties
from apispec_jsonschema.models import FieldDescriptor


def field_from(path, type_=None, optional=True, constraints=()):
    return FieldDescriptor.model_validate({
        "path": path,
        "type": type_,
        "optional": optional,
        "attributes": {
            "validationConstraints": [
                {"name": name, "configuration": config} for name, config in constraints
            ]
        },
    })


class TestConstraintKeywords:
    """Tests for constraint_keywords."""

    def test_string_keywords(self):
        field = field_from(
            "name",
            "string",
            constraints=[
                ("org.hibernate.validator.constraints.Length", {"min": 2, "max": 10}),
                ("javax.validation.constraints.Pattern", {"regexp": "^[a-z]+$"}),
            ],
        )

        assert constraint_keywords(field) == {
            "minLength": 2,
            "maxLength": 10,
            "pattern": "^[a-z]+$",
        }

    def test_absent_values_omitted(self):
        field = field_from(
            "name", "STRING", constraints=[("javax.validation.constraints.NotBlank", {})]
        )
        assert constraint_keywords(field) == {"minLength": 1}

    def test_numeric_keywords(self):
        field = field_from(
            "count",
            "number",
            constraints=[
                ("javax.validation.constraints.Min", {"value": 5}),
                ("javax.validation.constraints.Size", {"min": 3, "max": 8}),
            ],
        )
        assert constraint_keywords(field) == {"minimum": 5, "maximum": 8}

    def test_array_keywords(self):
        field = field_from(
            "tags",
            "array",
            constraints=[
                ("jakarta.validation.constraints.Size", {"min": 1, "max": 4}),
                ("jakarta.validation.constraints.Pattern", {"regexp": "x"}),
            ],
        )
        assert constraint_keywords(field) == {"minItems": 1, "maxItems": 4}

    def test_explicit_type_overrides_field_type(self):
        field = field_from(
            "tags",
            "varies",
            constraints=[("javax.validation.constraints.Size", {"max": 2})],
        )

        assert constraint_keywords(field) == {}
        assert constraint_keywords(field, "array") == {"maxItems": 2}
        assert constraint_keywords(field, "integer") == {"maximum": 2}


def test_required_properties():
    fields = [
        field_from("id", optional=False),
        field_from("nickname", optional=True),
        field_from(
            "email",
            optional=True,
            constraints=[("jakarta.validation.constraints.NotEmpty", {})],
        ),
        field_from("address.street", optional=False),
        field_from("items[]", optional=False),
        field_from("id", optional=False),
    ]

    assert required_properties(fields) == ["id", "email"]
