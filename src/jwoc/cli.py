from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from pathlib import Path
from typing import Annotated, Any, TypeVar

import typer
from pydantic import ValidationError

from jwoc import __version__
from jwoc.client import AsyncJWoCClient
from jwoc.config import ensure_default_config_exists, load_config, parse_document_file
from jwoc.errors import ConfigError, JWoCError
from jwoc.logging_config import configure_logging
from jwoc.models import FormInput, OAuthProvider
from jwoc.utils.console import ConsolePresenter
from jwoc.utils.output import OutputFormat, emit
from jwoc.validation import validate
from jwoc.workflows import RegistrationFlowController, RegistrationStatus

app = typer.Typer(no_args_is_help=True, add_completion=False, help="JWoC mentee registration CLI")
config_app = typer.Typer(no_args_is_help=True, help="Config commands")

app.add_typer(config_app, name="config")


class CLIState:
    def __init__(
        self,
        *,
        profile: str | None,
        config_file: Path | None,
        output: OutputFormat,
    ) -> None:
        self.profile = profile
        self.config_file = config_file
        self.output = output


T = TypeVar("T")


def _run(awaitable: Coroutine[Any, Any, T]) -> T:
    return asyncio.run(awaitable)


def _state(ctx: typer.Context) -> CLIState:
    obj = ctx.obj
    if not isinstance(obj, CLIState):
        raise typer.BadParameter("CLI context was not initialized")
    return obj


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"jwoc {__version__}")
        raise typer.Exit()


_CONFIG_REDACTED = "<redacted>"
_SENSITIVE_CONFIG_KEY_MARKERS = ("cookie", "token", "secret", "password")


def _redact_sensitive_config(value: Any) -> Any:
    if isinstance(value, dict):
        redacted: dict[str, Any] = {}
        for key, item in value.items():
            if any(marker in str(key).lower() for marker in _SENSITIVE_CONFIG_KEY_MARKERS) and item:
                redacted[str(key)] = _CONFIG_REDACTED
            else:
                redacted[str(key)] = _redact_sensitive_config(item)
        return redacted
    if isinstance(value, list):
        return [_redact_sensitive_config(item) for item in value]
    return value


def _load_form(path: Path) -> FormInput:
    payload = parse_document_file(path)
    try:
        return FormInput.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid form file '{path}': {exc}") from exc


@app.callback()
def main(
    ctx: typer.Context,
    profile: Annotated[str | None, typer.Option("--profile", "-p", help="Profile name")] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config-file", "-c", help="Path to profile config file"),
    ] = None,
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = "json",
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log requests and state transitions")] = False,
    json_logs: Annotated[bool, typer.Option("--json-logs", help="Render log lines as JSON")] = False,
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version"),
    ] = None,
) -> None:
    _ = version
    configure_logging("DEBUG" if verbose else "WARNING", json_logs=json_logs)
    ctx.obj = CLIState(profile=profile, config_file=config_file, output=output)


def _make_client(state: CLIState) -> AsyncJWoCClient:
    return AsyncJWoCClient(profile=state.profile, config_path=state.config_file)


def _make_flow(client: AsyncJWoCClient, presenter: ConsolePresenter) -> RegistrationFlowController:
    return RegistrationFlowController(
        client,
        presenter,
        redirect_delay=client.redirect_delay_seconds,
        home_path=client.home_path,
    )


@app.command("login")
def login(
    ctx: typer.Context,
    provider: Annotated[OAuthProvider, typer.Argument(help="OAuth provider")],
    open_browser: Annotated[bool, typer.Option("--open/--no-open", help="Open the URL in a browser")] = False,
) -> None:
    state = _state(ctx)
    presenter = ConsolePresenter(open_browser=open_browser)

    async def run() -> str:
        async with _make_client(state) as client:
            _make_flow(client, presenter).begin_external_login(provider)
            return client.auth.login_url(provider)

    emit({"provider": provider, "url": _run(run())}, output=state.output)


@app.command("whoami")
def whoami(ctx: typer.Context) -> None:
    state = _state(ctx)
    presenter = ConsolePresenter()

    async def run() -> Any:
        async with _make_client(state) as client:
            if not client.has_session_cookie:
                presenter.console.print("no session cookie configured; set JWOC_SESSION_COOKIE after logging in")
            async with _make_flow(client, presenter) as flow:
                return flow.session.identity

    identity = _run(run())
    if identity is None:
        raise typer.Exit(code=1)
    emit(identity, output=state.output)


@app.command("validate")
def validate_form(
    ctx: typer.Context,
    form_file: Annotated[Path, typer.Argument(help="Form as yaml/json/toml", exists=True, dir_okay=False)],
) -> None:
    state = _state(ctx)
    result = validate(_load_form(form_file))
    emit({"ok": result.ok, "errors": result.errors}, output=state.output)
    if not result.ok:
        raise typer.Exit(code=1)


@app.command("register")
def register(
    ctx: typer.Context,
    form_file: Annotated[Path, typer.Argument(help="Form as yaml/json/toml", exists=True, dir_okay=False)],
    wait: Annotated[bool, typer.Option("--wait/--no-wait", help="Stay until the post-success redirect")] = True,
) -> None:
    state = _state(ctx)
    form = _load_form(form_file)
    presenter = ConsolePresenter()

    async def run() -> Any:
        async with _make_client(state) as client:
            async with _make_flow(client, presenter) as flow:
                submission = await flow.submit(form)
                if wait and flow.navigation_pending:
                    try:
                        await asyncio.wait_for(presenter.navigated.wait(), timeout=flow.redirect_delay + 1.0)
                    except TimeoutError:
                        presenter.console.print("no redirect observed")
                return submission

    submission = _run(run())
    emit(submission, output=state.output)
    if submission.status is not RegistrationStatus.SUCCEEDED:
        raise typer.Exit(code=1)


@config_app.command("init")
def config_init(ctx: typer.Context) -> None:
    state = _state(ctx)
    path = ensure_default_config_exists(state.config_file)
    typer.echo(f"config written to {path}")


@config_app.command("info")
def config_info(ctx: typer.Context) -> None:
    state = _state(ctx)
    cfg = load_config(config_path=state.config_file)
    payload = _redact_sensitive_config(cfg.data.model_dump(mode="json"))
    payload["_source"] = cfg.source
    payload["_path"] = str(cfg.path) if cfg.path else None
    emit(payload, output=state.output)


def run() -> None:
    try:
        app()
    except JWoCError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    run()
