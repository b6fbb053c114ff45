"""Random Provider Service - answers health checks and context queries with random values"""
import logging

from random_provider.domain.services.ngsi_formatter import format_as_v1_response
from random_provider.schemas.ngsi import ContextAttribute, QueryContextRequest, QueryContextResponse
from random_provider.schemas.responses import RandomHealthResponse
from random_provider.utils.random_values import RandomValueGenerator
from random_provider.utils.text import to_title_case

logger = logging.getLogger(__name__)


class RandomProviderService:
    def __init__(self, generator: RandomValueGenerator):
        self.generator = generator

    async def health_check(self) -> RandomHealthResponse:
        """Return one sample value of each supported type."""
        logger.debug("🎲 Random API is available - responding with some random values")
        return RandomHealthResponse(
            boolean=self.generator.generate("boolean"),
            number=self.generator.generate("number"),
            structured_value=self.generator.generate("structuredValue"),
            text=self.generator.generate("text"),
        )

    async def query_context(self, body: QueryContextRequest, type_tag: str) -> QueryContextResponse:
        """Answer a queryContext request; every attribute gets a fresh value of ``type_tag``."""
        attribute_type = to_title_case(type_tag)

        def format_attribute(attr, request: QueryContextRequest) -> ContextAttribute:
            return ContextAttribute(
                name=attr,
                type=attribute_type,
                value=self.generator.generate(type_tag),
            )

        response = format_as_v1_response(body, format_attribute)
        logger.info(
            f"📦 queryContext type={type_tag}: {len(body.entities)} entities x {len(body.attributes)} attributes"
        )
        return response
