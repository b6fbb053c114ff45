"""Formatting of NGSI v1 responses to a context query."""
from typing import Any, Callable

from random_provider.schemas.ngsi import (
    ContextAttribute,
    ContextElement,
    ContextElementResponse,
    QueryContextRequest,
    QueryContextResponse,
)

AttributeFormatter = Callable[[Any, QueryContextRequest], ContextAttribute]


def format_as_v1_response(body: QueryContextRequest, formatter: AttributeFormatter) -> QueryContextResponse:
    """
    Build a queryContext response with one entry per requested entity.

    Entities and attributes keep their request order. Each attribute object
    is produced by ``formatter(attribute_name, body)``.
    """
    response = QueryContextResponse()

    for entity in body.entities:
        element = ContextElement(**entity.model_dump(include={"id", "type"}, exclude_unset=True))
        for attr in body.attributes:
            element.attributes.append(formatter(attr, body))
        response.context_responses.append(ContextElementResponse(context_element=element))

    return response
