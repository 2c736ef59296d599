"""CLI main entry point."""

import json
import logging
from pathlib import Path

import click
from click.core import ParameterSource

from .client import ResumeClient
from .config import Config
from .consts import CONFIG_PATH_DEFAULT
from .enums import FieldKind, ItemKind
from .errors import VitaeException
from .form import FormState, apply_assignments, serialize, validate
from .form.inputs import set_item_text, set_scalar_text
from .log import setup as setup_log
from .reporter import MarkdownReporter, kind_label
from .utils import truncate

logger = logging.getLogger(__name__)


def load_config(config_path: str | None, explicit: bool) -> Config:
    """Load configuration, tolerating a missing default config file."""
    if not explicit and not Path(config_path).exists():
        return Config.load()
    return Config.load(config_path)


def prompt_form(state: FormState) -> None:
    """Interactively fill every field of ``state``, current values as defaults."""
    for field in state.fields.values():
        label = f"{field.name}{' *' if field.required else ''} ({kind_label(field)})"
        if field.description:
            click.echo(f"{field.name}: {field.description}")

        if field.kind is FieldKind.UNSUPPORTED or field.item_kind is ItemKind.UNSUPPORTED:
            click.echo(f"Skipping '{field.name}': unsupported type")
            continue

        if field.kind is FieldKind.BOOLEAN:
            state.set_scalar(field.name, click.confirm(label, default=state.get_scalar(field.name)))
        elif field.is_array:
            _prompt_items(state, field, label)
        else:
            text = click.prompt(label, default=state.get_scalar(field.name), show_default=True)
            set_scalar_text(state, field, text)


def _prompt_items(state: FormState, field, label: str) -> None:
    count = click.prompt(
        f"{label} number of items",
        default=len(state.array_items(field.name)),
        type=click.IntRange(min=0),
    )
    while len(state.array_items(field.name)) > count:
        state.remove_last_array_item(field.name)
    while len(state.array_items(field.name)) < count:
        state.append_array_item(field.name)

    for index, value in enumerate(state.array_items(field.name)):
        item_label = f"{field.name}[{index}]"
        if field.item_kind is ItemKind.BOOLEAN:
            state.set_array_item(field.name, index, click.confirm(item_label, default=value))
        elif field.is_enum:
            choices = [str(v) for v in field.enum_values]
            text = click.prompt(
                item_label, type=click.Choice(choices), default=choices[value]
            )
            set_item_text(state, field, index, text)
        else:
            text = click.prompt(item_label, default=value, show_default=True)
            set_item_text(state, field, index, text)


@click.group()
@click.option(
    "--config",
    "-c",
    default=CONFIG_PATH_DEFAULT,
    help="Configuration file path",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx, config: str, verbose: bool):
    """Vitae - résumé viewer and code sample runner."""
    ctx.ensure_object(dict)
    explicit = ctx.get_parameter_source("config") is not ParameterSource.DEFAULT
    try:
        cfg = load_config(config, explicit)
    except VitaeException as e:
        raise click.ClickException(str(e))

    setup_log(cfg.log_file, verbose=verbose)
    ctx.obj["config"] = cfg
    ctx.obj.setdefault("client", None)


def get_client(ctx) -> ResumeClient:
    client = ctx.obj.get("client")
    if client is None:
        client = ResumeClient(ctx.obj["config"].api)
        ctx.obj["client"] = client
    return client


@cli.command(name="resume")
@click.pass_context
def resume(ctx):
    """Print the résumé as Markdown."""
    try:
        data = get_client(ctx).get_resume()
    except VitaeException as e:
        logger.error(f"Failed to load résumé: {e}")
        raise click.ClickException(str(e))
    click.echo(MarkdownReporter().render_resume(data), nl=False)


@cli.command(name="samples")
@click.pass_context
def samples(ctx):
    """List available code samples."""
    try:
        items = get_client(ctx).get_code_samples()
    except VitaeException as e:
        logger.error(f"Failed to load code samples: {e}")
        raise click.ClickException(str(e))

    click.echo("id\tname\tdescription")
    for sample in items:
        click.echo(f"{sample.id}\t{sample.name}\t{truncate(sample.description)}")


@cli.command(name="schema")
@click.argument("sample_id")
@click.pass_context
def schema(ctx, sample_id: str):
    """Describe the input form of a code sample."""
    try:
        sample = get_client(ctx).get_code_sample(sample_id)
    except VitaeException as e:
        raise click.ClickException(str(e))

    fields, error = sample.parse_schema()
    if error is not None:
        raise click.ClickException(str(error))
    click.echo(MarkdownReporter().render_form(sample, fields), nl=False)


@cli.command(name="run")
@click.argument("sample_id")
@click.option(
    "--set",
    "assignments",
    multiple=True,
    metavar="NAME=VALUE",
    help="Set a field value; repeat for each item of an array field",
)
@click.option("--interactive", "-i", is_flag=True, help="Prompt for every field")
@click.option("--dry-run", is_flag=True, help="Print the request payload instead of running")
@click.pass_context
def run(ctx, sample_id: str, assignments: tuple[str, ...], interactive: bool, dry_run: bool):
    """Fill in a code sample's input form and run it."""
    client = get_client(ctx)
    try:
        sample = client.get_code_sample(sample_id)
        fields, error = sample.parse_schema()
        if error is not None:
            raise error

        state = FormState.initialize(fields)
        apply_assignments(state, assignments)
        if interactive:
            prompt_form(state)

        error = validate(fields, state)
        if error is not None:
            raise click.ClickException(f"Validation error: {error.message}")

        payload = serialize(fields, state)
        if dry_run:
            click.echo(
                json.dumps({"sampleId": sample.id, "input": payload}, indent=2, ensure_ascii=False)
            )
            return

        result = client.run_code_sample(sample.id, payload)
    except VitaeException as e:
        logger.error(f"Failed to run code sample {sample_id}: {e}")
        raise click.ClickException(str(e))

    click.echo(MarkdownReporter().render_run_result(result), nl=False)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
