"""
Dependency wiring for the responding bounded context.

Builds the use cases from settings and the default infrastructure
adapters via constructor injection.
"""

from typing import Optional

from faultline.application.responding.build_error_body import ErrorBodyBuilder
from faultline.core.config import Settings, settings
from faultline.infrastructure.responding.accept_negotiator import AcceptNegotiator
from faultline.infrastructure.responding.html_page_renderer import (
    HTMLErrorPageRenderer,
)


def get_error_body_builder(config: Optional[Settings] = None) -> ErrorBodyBuilder:
    """Build ErrorBodyBuilder with the configured environment."""
    config = config or settings
    return ErrorBodyBuilder(
        environment=config.environment,
        negotiator=AcceptNegotiator(),
        renderer=HTMLErrorPageRenderer(),
        page_format=config.page_format,
    )
