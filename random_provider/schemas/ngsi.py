"""
NGSI v1 query context models.

The context broker forwards ``queryContext`` requests to this provider when a
registration uses legacy forwarding. Request models are lenient: absent or
null sequences are treated as empty and entity fields pass through unchanged.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer


class EntityRef(BaseModel):
    """Entity requested by the broker."""
    model_config = ConfigDict(extra="allow")

    id: Optional[Any] = Field(None, description="Entity identifier")
    type: Optional[Any] = Field(None, description="Entity type")


class QueryContextRequest(BaseModel):
    """Body of an NGSI v1 queryContext request."""
    model_config = ConfigDict(extra="allow")

    entities: List[EntityRef] = Field(default_factory=list, description="Entities to report on")
    attributes: List[Any] = Field(default_factory=list, description="Attribute names to report")

    @field_validator("entities", "attributes", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return [] if v is None else v


class ContextAttribute(BaseModel):
    name: Any = Field(..., description="Attribute name")
    type: Any = Field(None, description="Attribute type, title cased")
    value: Any = Field(None, description="Attribute value")


class ContextElement(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    attributes: List[ContextAttribute] = Field(default_factory=list)
    id: Optional[Any] = None
    is_pattern: str = Field("false", alias="isPattern")
    type: Optional[Any] = None

    @model_serializer(mode="wrap")
    def drop_unset_identity(self, handler):
        # id and type are echoed only when the request entity carried them
        data = handler(self)
        for name in ("id", "type"):
            if name not in self.model_fields_set:
                data.pop(name, None)
        return data


class StatusCode(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    code: str = "200"
    reason_phrase: str = Field("OK", alias="reasonPhrase")


class ContextElementResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    context_element: ContextElement = Field(..., alias="contextElement")
    status_code: StatusCode = Field(default_factory=StatusCode, alias="statusCode")


class QueryContextResponse(BaseModel):
    """Envelope returned for a queryContext request, one entry per entity."""
    model_config = ConfigDict(populate_by_name=True)

    context_responses: List[ContextElementResponse] = Field(
        default_factory=list, alias="contextResponses"
    )
