#!/usr/bin/env python3
# jsonconvert/cli.py

import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional, Tuple

import typer

from jsonconvert.config import (
    DEFAULT_CONVERT_OPTIONS,
    DEFAULT_SCHEMA_OPTIONS,
    ConvertOptions,
    SchemaOptions,
    load_options,
)
from jsonconvert.context import VERSION
from jsonconvert.convert.engine import convert as convert_document
from jsonconvert.errors import JsonConvertError
from jsonconvert.schema.builder import build_schema
from jsonconvert.schema.types import is_schema_node
from jsonconvert.utils.io import dump_json, load_any, write_any
from jsonconvert.utils.logger import LOG_DIR_ENV, get_logger, init_logger

logger = get_logger("cli")

app = typer.Typer(help="jsonconvert CLI - infer schemas from example JSON and reshape documents against them")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log builder/engine decisions at DEBUG level"),
    log_dir: Optional[Path] = typer.Option(None, "--log-dir", envvar=LOG_DIR_ENV, help="Also write a rotating jsonconvert.log into this directory"),
):
    """
    Global logging options; they apply to every command.
    """
    if verbose or log_dir is not None:
        init_logger(level=logging.DEBUG if verbose else None, log_dir=log_dir)


def _options(config: Optional[Path]) -> Tuple[SchemaOptions, ConvertOptions]:
    if config is None:
        return DEFAULT_SCHEMA_OPTIONS, DEFAULT_CONVERT_OPTIONS
    try:
        return load_options(config)
    except (JsonConvertError, ValueError) as e:
        raise typer.BadParameter(str(e), param_hint="--config")


def _load(path: Path, hint: str):
    try:
        return load_any(path)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint=hint)


def _emit(data, out: Optional[Path]) -> None:
    if out is None:
        typer.echo(dump_json(data))
        return
    write_any(out, data)
    logger.info("wrote %s", out)


@app.command()
def schema(
    template: Path = typer.Argument(..., exists=True, readable=True, help="Example JSON/YAML document"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write the schema here (.json/.yaml) instead of stdout"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", exists=True, readable=True, help="Options file (JSON/YAML)"),
    title: Optional[str] = typer.Option(None, "--title", help="Schema title"),
    description: Optional[str] = typer.Option(None, "--description", help="Schema description"),
    required_sign: Optional[str] = typer.Option(None, "--required-sign", help="Key prefix marking a required property (default '*')"),
    alias_sign: Optional[str] = typer.Option(None, "--alias-sign", help="Separator between property name and input alias (default '@')"),
    all_required: Optional[bool] = typer.Option(None, "--all-required/--no-all-required", help="Mark every property required"),
):
    """
    Infer a draft-04 schema from an example document.
    """
    schema_opts, _ = _options(config)
    overrides = {
        k: v for k, v in {
            "title": title,
            "description": description,
            "required_sign": required_sign,
            "alias_sign": alias_sign,
            "all_required": all_required,
        }.items() if v is not None
    }
    try:
        schema_opts = replace(schema_opts, **overrides)
        doc = build_schema(_load(template, "TEMPLATE"), schema_opts)
    except JsonConvertError as e:
        raise typer.BadParameter(str(e))
    _emit(doc, out)


@app.command()
def convert(
    input: Path = typer.Argument(..., exists=True, readable=True, help="Document to convert (JSON/YAML)"),
    schema_path: Optional[Path] = typer.Option(None, "--schema", "-s", exists=True, readable=True, help="Schema document (JSON/YAML)"),
    template: Optional[Path] = typer.Option(None, "--template", "-t", exists=True, readable=True, help="Example document to infer the schema from"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write the result here (.json/.yaml) instead of stdout"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", exists=True, readable=True, help="Options file (JSON/YAML)"),
    redundancy: Optional[bool] = typer.Option(None, "--redundancy/--no-redundancy", help="Keep input fields the schema does not declare"),
    remap_enums: Optional[bool] = typer.Option(None, "--remap-enums/--no-remap-enums", help="Apply @enums records during conversion"),
):
    """
    Reshape a document against a schema, or against a schema inferred from --template.
    """
    if (schema_path is None) == (template is None):
        raise typer.BadParameter("pass exactly one of --schema or --template")

    schema_opts, convert_opts = _options(config)
    overrides = {
        k: v for k, v in {"redundancy": redundancy, "remap_enums": remap_enums}.items() if v is not None
    }
    convert_opts = replace(convert_opts, **overrides)

    data = _load(input, "INPUT")
    try:
        if template is not None:
            doc = build_schema(_load(template, "--template"), schema_opts)
        else:
            doc = _load(schema_path, "--schema")
            if not is_schema_node(doc):
                raise typer.BadParameter(f"{schema_path} is not a schema document (missing or unknown 'type')", param_hint="--schema")
        result = convert_document(data, doc, convert_opts)
    except JsonConvertError as e:
        raise typer.BadParameter(str(e))
    _emit(result, out)


@app.command()
def version():
    """Print the library version."""
    typer.echo(VERSION)


if __name__ == "__main__":
    app()
