"""
Demonstration driver.

Runs the same client code against every configured factory. Result lines go
to the reporter; the banner announcing each factory goes to the log.
"""

from typing import Any, Optional

import structlog

from .client import Client
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .errors import ConfigurationError
from .factories.registry import create_factory
from .logging.config import configure_logging
from .pricing import PriceFormat
from .reporting import BaseReporter

logger = structlog.get_logger(__name__)

FIRST_BANNER = "Client: Testing client code with the first factory type:"
NEXT_BANNER = "Client: Testing the same client code with the second factory type:"


def load_demo_config(config_dir: Optional[str] = None,
                     overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    """
    Load and validate the demo configuration.

    Raises:
        ConfigurationError: if the merged configuration is invalid
    """
    config = ConfigLoader.create(config_dir).merge_config(overrides)

    errors = ConfigValidator.validate_config(config)
    if errors:
        raise ConfigurationError(
            "Invalid configuration: " + "; ".join(
                f"{err.field}: {err.message} (got: {err.value})" for err in errors
            ),
            errors=errors,
        )
    return config


def run_demo(reporter: Optional[BaseReporter] = None,
             config: Optional[dict[str, Any]] = None) -> None:
    """Run the client against each configured factory in turn."""
    if config is None:
        config = load_demo_config()

    price_format = PriceFormat(config["output"]["price_format"])
    client = Client(reporter=reporter)

    for index, name in enumerate(config["demo"]["factories"]):
        logger.info(FIRST_BANNER if index == 0 else NEXT_BANNER, factory=name)
        client.run(create_factory(name, price_format=price_format))


def main() -> int:
    """Console entry point. Takes no arguments; failures propagate."""
    config = load_demo_config()
    configure_logging(
        level=config["logging"]["level"],
        format_json=config["logging"]["format_json"],
        include_timestamp=config["logging"]["include_timestamp"],
    )
    run_demo(config=config)
    return 0
