"""Default configuration parameters for the car factory demo."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OutputParams:
    """Result line rendering."""
    price_format: str = "plain"          # plain, currency, raw


@dataclass(frozen=True)
class LoggingParams:
    """Log output settings, logs always go to stderr."""
    level: str = "WARNING"
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class DemoParams:
    """Factories the demo runs the client against, in order."""
    factories: tuple[str, ...] = ("mazda", "ford")


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    output: OutputParams
    logging: LoggingParams
    demo: DemoParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        output=OutputParams(),
        logging=LoggingParams(),
        demo=DemoParams(),
    )
