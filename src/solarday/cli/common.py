"""Shared click plumbing for the solarday commands."""

from datetime import date
import logging

import click
from pydantic import ValidationError
import yaml

from ..core.calendar import parse_iso_date
from ..errors import InvalidDateError, SolarDayError
from ..model.observer import ObserverConfig, load_observer
from ..model.presets import get_preset

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ExitOneCommand(click.Command):
    """Command that exits with status 1 (not click's 2) on argument errors."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise


class IsoDate(click.ParamType):
    """YYYY-MM-DD parameter."""

    name = "date"

    def convert(self, value, param, ctx):
        if isinstance(value, date):
            return value
        try:
            return parse_iso_date(value)
        except InvalidDateError as e:
            self.fail(str(e), param, ctx)


ISO_DATE = IsoDate()


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def fail(message: str) -> None:
    """Report an error on stderr and exit 1."""
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(1)


def resolve_observer(preset=None, config=None, **overrides) -> ObserverConfig:
    """Merge --preset, then --config, then flags that were given.

    Any lookup, parse or validation failure is reported through ``fail``.
    """
    try:
        base = get_preset(preset) if preset else ObserverConfig()
        if config:
            file_cfg = load_observer(config)
            base = base.model_copy(update=file_cfg.model_dump(exclude_unset=True))
        given = {k: v for k, v in overrides.items() if v is not None}
        return ObserverConfig(**{**base.model_dump(), **given})
    except KeyError as e:
        fail(e.args[0])
    except yaml.YAMLError as e:
        fail(f"Cannot read {config}:\n{e}")
    except ValidationError as e:
        fail(f"Invalid observer configuration:\n{e}")
    except SolarDayError as e:
        fail(str(e))
