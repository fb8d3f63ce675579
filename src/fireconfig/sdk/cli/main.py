"""fireconfig CLI entrypoint."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, NoReturn, Optional

import typer

from fireconfig.core.errors import ConfigError, FireconfigError, RemoteConfigError
from fireconfig.core.models import Sha256
from fireconfig.core.utils.io import dump_structured, save_json
from fireconfig.core.utils.logging import get_logger
from fireconfig.sdk.client import RemoteConfigClient
from fireconfig.sdk.config import DEFAULT_CONFIG_PATH, SdkConfig, load_config, merge_cli_overrides

app = typer.Typer(add_completion=False, help="Firebase Remote Config admin CLI")


class Context:
    def __init__(self, config: SdkConfig | None = None) -> None:
        self.config = config or load_config()
        self.verbose = False


# --- utility helpers ---

def _ensure_directory(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def _toml_str(value: object) -> str:
    # JSON string escapes are a subset of TOML basic-string escapes.
    return json.dumps(str(value), ensure_ascii=False)


def _print_output(payload: Any, output_format: str, output_path: Path | None) -> None:
    if output_path and output_format == "json":
        save_json(output_path, payload)
        typer.echo(f"Wrote {output_format} output to {output_path}")
        return
    text = dump_structured(payload, output_format)
    if output_path:
        _ensure_directory(output_path)
        output_path.write_text(text + ("" if text.endswith("\n") else "\n"), encoding="utf-8")
        typer.echo(f"Wrote {output_format} output to {output_path}")
        return
    typer.echo(text)


def _handle_exc(err: Exception) -> NoReturn:
    if isinstance(err, RemoteConfigError):
        detail = f" [{err.error_code.value}]" if err.error_code else ""
        typer.echo(f"Error ({err.code.value}){detail}: {err}", err=True)
    else:
        typer.echo(f"Error: {err}", err=True)
    raise typer.Exit(code=1)


# --- CLI commands ---


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output"),
) -> None:
    if ctx.obj is None:
        try:
            ctx.obj = Context()
        except ConfigError as exc:
            # init must be able to overwrite a broken config file
            if ctx.invoked_subcommand != "init":
                _handle_exc(exc)
            typer.echo(f"Ignoring existing config: {exc}", err=True)
            ctx.obj = Context(SdkConfig())
    ctx.obj.verbose = verbose
    if verbose:
        get_logger(level=logging.DEBUG)


@app.command()
def init(
    ctx: typer.Context,
    project_id: str = typer.Option("", "--project-id", help="Default Firebase project ID"),
    timeout: Optional[int] = typer.Option(None, "--timeout", help="Default request timeout in seconds"),
    default_output_format: str = typer.Option("json", "--default-output-format", help="json|yaml"),
    default_output_dir: Optional[Path] = typer.Option(None, "--default-output-dir", help="Default output directory"),
) -> None:
    context: Context = ctx.obj
    try:
        cfg = merge_cli_overrides(
            context.config,
            project_id=project_id or None,
            timeout=timeout,
            output_format=default_output_format,
        )
    except ConfigError as exc:
        _handle_exc(exc)

    lines = ["[fireconfig]"]
    if cfg.project_id:
        lines.append(f"project_id = {_toml_str(cfg.project_id)}")
    lines.append(f"timeout = {cfg.timeout}")
    lines.append(f"default_output_format = {_toml_str(cfg.default_output_format)}")
    out_dir = default_output_dir or cfg.default_output_dir
    if out_dir:
        lines.append(f"default_output_dir = {_toml_str(out_dir)}")
    _ensure_directory(DEFAULT_CONFIG_PATH)
    DEFAULT_CONFIG_PATH.write_text("\n".join(lines) + "\n", encoding="utf-8")
    typer.echo(f"Wrote TOML config to {DEFAULT_CONFIG_PATH}")


template_app = typer.Typer(help="Remote Config template commands")


@template_app.command("get")
def template_get(
    ctx: typer.Context,
    project_id: Optional[str] = typer.Option(None, "--project-id", help="Firebase project ID"),
    output_format: Optional[str] = typer.Option(None, "--format", help="json|yaml"),
    output_path: Optional[Path] = typer.Option(None, "--output", help="Write the template to a file"),
    timeout: Optional[int] = typer.Option(None, "--timeout", help="Request timeout in seconds"),
) -> None:
    context: Context = ctx.obj
    try:
        cfg = merge_cli_overrides(context.config, project_id=project_id, timeout=timeout, output_format=output_format)
        client = RemoteConfigClient.from_config(cfg)
        template = client.get_template()
    except FireconfigError as exc:
        _handle_exc(exc)

    target = output_path
    if target is None and cfg.default_output_dir:
        target = cfg.default_output_dir / f"{client.project_id}.{cfg.default_output_format}"
    _print_output(template.to_dict(), cfg.default_output_format, target)


hash_app = typer.Typer(help="Password hash options for user import")


@hash_app.command("sha256")
def hash_sha256(
    ctx: typer.Context,
    rounds: int = typer.Option(..., "--rounds", help="Number of hashing rounds (1-8192)"),
    output_format: Optional[str] = typer.Option(None, "--format", help="json|yaml"),
) -> None:
    context: Context = ctx.obj
    try:
        cfg = merge_cli_overrides(context.config, output_format=output_format)
        options = Sha256(rounds=rounds).to_options()
    except (ConfigError, ValueError) as exc:
        _handle_exc(exc)
    _print_output(options, cfg.default_output_format, None)


app.add_typer(template_app, name="template")
app.add_typer(hash_app, name="hash")


if __name__ == "__main__":  # pragma: no cover
    app()
