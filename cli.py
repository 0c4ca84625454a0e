import pathlib
from typing import Any, Dict, Mapping, TextIO

from logging_utils import configure_logging, get_logger

import click
import yaml

from context_state import ContextState
from runtime import EvalError, String
from yamlmodule import DUPLICATE_KEY_POLICIES, ConversionError, new_module


DEFAULT_CONFIG_PATH = "yamlbridge.yaml"
DEFAULT_DUPLICATE_KEYS = "last"


def _validate_config_shape(config: Mapping[str, Any]) -> None:
    if not isinstance(config, Mapping):
        raise click.ClickException("Config file must contain a YAML mapping")

    decode_section = config.get("decode")
    if decode_section is None:
        return

    if not isinstance(decode_section, Mapping):
        raise click.ClickException("Config 'decode' section must be a mapping")

    duplicate_keys = decode_section.get("duplicate_keys", DEFAULT_DUPLICATE_KEYS)
    if duplicate_keys not in DUPLICATE_KEY_POLICIES:
        raise click.ClickException(
            "Config 'decode.duplicate_keys' must be one of: "
            + ", ".join(DUPLICATE_KEY_POLICIES)
        )


def load_config(config_path: str) -> Dict[str, Any]:
    path = pathlib.Path(config_path)
    if not path.exists():
        return {}

    try:
        with path.open("r", encoding="utf-8") as config_file:
            data = yaml.safe_load(config_file) or {}
    except yaml.YAMLError as exc:
        raise click.ClickException(f"Failed to parse config file: {exc}") from exc

    _validate_config_shape(data)

    return data


logger = get_logger(__name__)


def _call(state: ContextState, name: str, arg: Any) -> Any:
    builtin = state.module.attr(name)
    try:
        return builtin(arg)
    except (yaml.YAMLError, ConversionError, EvalError) as exc:
        raise click.ClickException(f"{builtin.name}: {exc}") from exc


@click.group()
@click.option(
    "--config",
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    type=click.Path(exists=False, dir_okay=False, resolve_path=True, path_type=str),
    help="Path to configuration file",
)
@click.option("--verbose", is_flag=True, help="Enable verbose logging output")
@click.option("--quiet", is_flag=True, help="Reduce logging output to errors only")
@click.pass_context
def cli(ctx: click.Context, config: str, verbose: bool, quiet: bool) -> None:
    if verbose and quiet:
        raise click.ClickException("--verbose and --quiet are mutually exclusive")

    configuration = load_config(config)
    configure_logging(verbose=verbose, quiet=quiet)
    logger.debug("Loaded configuration from %s", config)

    duplicate_keys = (configuration.get("decode") or {}).get(
        "duplicate_keys", DEFAULT_DUPLICATE_KEYS
    )
    ctx.obj = ContextState(
        config=configuration,
        verbose=verbose,
        quiet=quiet,
        duplicate_keys=duplicate_keys,
        module=new_module(duplicate_keys=duplicate_keys),
    )


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.pass_obj
def decode(state: ContextState, source: TextIO) -> None:
    """Decode a YAML document and print the resulting value."""

    value = _call(state, "decode", String(source.read()))
    click.echo(repr(value))


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.pass_obj
def encode(state: ContextState, source: TextIO) -> None:
    """Decode a YAML or JSON document and write it back as canonical YAML."""

    value = _call(state, "decode", String(source.read()))
    text = _call(state, "encode", value)
    click.echo(text.value, nl=False)


if __name__ == "__main__":
    cli()
