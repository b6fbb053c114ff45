from __future__ import annotations
import random

from fastapi import Depends

from random_provider.domain.services.random_provider_service import RandomProviderService
from random_provider.domain.value_type import RandomSource
from random_provider.utils.random_values import RandomValueGenerator

# Process-wide unseeded source; tests override get_random_source
_random_source = random.Random()


def get_random_source() -> RandomSource:
    return _random_source


# Service dependencies
def get_value_generator(rng: RandomSource = Depends(get_random_source)) -> RandomValueGenerator:
    return RandomValueGenerator(rng)

def get_random_provider_service(
    generator: RandomValueGenerator = Depends(get_value_generator),
) -> RandomProviderService:
    return RandomProviderService(generator)
