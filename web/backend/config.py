import os
from functools import lru_cache

from kdp_cover.config.print_spec import KDP_PRINT_SPEC, PrintSpec, load_print_spec
from kdp_cover.cover.geometry import SpineGeometryCalculator

PRINT_SPEC_ENV = "KDP_PRINT_SPEC_PATH"


@lru_cache(maxsize=1)
def get_print_spec() -> PrintSpec:
    path = os.getenv(PRINT_SPEC_ENV)
    return load_print_spec(path) if path else KDP_PRINT_SPEC


def get_calculator() -> SpineGeometryCalculator:
    return SpineGeometryCalculator(get_print_spec())
