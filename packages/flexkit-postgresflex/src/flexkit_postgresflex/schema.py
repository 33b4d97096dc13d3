"""Declarative schema of the Postgres Flex database resource.

``database_schema()`` describes every attribute of :class:`DatabaseModel`:
whether the caller must set it or the resource computes it, whether a change
requires replacing the database, and which validators apply.  The driver uses
the ``requires_replace`` markers to plan replacements; the resource itself
uses :func:`validate_model` before creating anything remotely.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from flexkit_core.diagnostics import Severity
from flexkit_core.errors import CoreErrorCode
from flexkit_core.validate import (
    AttributeValidator,
    no_separator_validator,
    uuid_validator,
)

from flexkit_postgresflex.errors import ResourceDiagnostic
from flexkit_postgresflex.models import DatabaseModel


class AttributeSchema(BaseModel):
    """Metadata for a single string attribute."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    description: str
    required: bool = False
    computed: bool = False
    requires_replace: bool = False
    use_state_for_unknown: bool = False
    validators: list[AttributeValidator] = []


class ResourceSchema(BaseModel):
    """Metadata for a whole resource type."""

    description: str
    attributes: dict[str, AttributeSchema]

    def replace_attributes(self) -> list[str]:
        """Names of attributes whose change forces a replacement."""
        return [name for name, attr in self.attributes.items() if attr.requires_replace]


def database_schema() -> ResourceSchema:
    """Return the schema of the ``postgresflex_database`` resource."""
    return ResourceSchema(
        description=(
            "Postgres Flex database resource schema. Must have a `region` "
            "specified in the provider configuration."
        ),
        attributes={
            "id": AttributeSchema(
                description=(
                    "Internal resource ID. It is structured as "
                    '"`project_id`,`instance_id`,`database_id`".'
                ),
                computed=True,
                use_state_for_unknown=True,
            ),
            "database_id": AttributeSchema(
                description="Database ID.",
                computed=True,
                use_state_for_unknown=True,
                validators=[no_separator_validator()],
            ),
            "instance_id": AttributeSchema(
                description="ID of the Postgres Flex instance.",
                required=True,
                requires_replace=True,
                use_state_for_unknown=True,
                validators=[uuid_validator(), no_separator_validator()],
            ),
            "project_id": AttributeSchema(
                description="Project ID to which the instance is associated.",
                required=True,
                requires_replace=True,
                use_state_for_unknown=True,
                validators=[uuid_validator(), no_separator_validator()],
            ),
            "name": AttributeSchema(
                description="Database name.",
                required=True,
                requires_replace=True,
            ),
            "owner": AttributeSchema(
                description="Username of the database owner.",
                required=True,
                requires_replace=True,
            ),
        },
    )


def validate_model(
    model: DatabaseModel, schema: ResourceSchema | None = None
) -> list[ResourceDiagnostic]:
    """Check *model* against *schema* and return one diagnostic per problem.

    Required attributes must be set (not None); every validator of every
    attribute is applied to the attribute's value.
    """
    schema = schema or database_schema()
    diagnostics: list[ResourceDiagnostic] = []

    for name, attr in schema.attributes.items():
        value = getattr(model, name)

        if attr.required and value is None:
            diagnostics.append(
                ResourceDiagnostic(
                    severity=Severity.ERROR,
                    summary="Invalid attribute value",
                    detail=f"Attribute {name} is required",
                    code=CoreErrorCode.E_VALIDATION_REQUIRED,
                    attribute=name,
                )
            )
            continue

        for validator in attr.validators:
            message = validator.check(name, value)
            if message is not None:
                diagnostics.append(
                    ResourceDiagnostic(
                        severity=Severity.ERROR,
                        summary="Invalid attribute value",
                        detail=message,
                        code=validator.code,
                        attribute=name,
                    )
                )

    return diagnostics
