"""Click CLI definitions."""

from __future__ import annotations

import click

from mstlang import __version__
from mstlang.backends.base import ServiceError
from mstlang.core.registry import LanguageRegistry
from mstlang.services.language_service import BACKENDS, configure_registry
from mstlang.utils.config import SECRET_KEYS, build_config, mask_secret
from mstlang.utils.logger import setup_logging


def _registry_from_options(
    ctx: click.Context,
    locale: str | None,
    load: bool,
    seed: list[str] | None = None,
) -> tuple[LanguageRegistry, dict]:
    cli_args = dict(ctx.obj or {})
    cli_args["locale"] = locale
    config = build_config(cli_args={k: v for k, v in cli_args.items() if v is not None})
    try:
        registry = configure_registry(config, registry=LanguageRegistry(seed=seed), load=load)
    except ServiceError as e:
        raise click.ClickException(str(e))
    return registry, config


@click.group()
@click.version_option(version=__version__, prog_name="mstlang")
@click.option("--backend", default=None, help=f"Backend ({', '.join(BACKENDS)})")
@click.option("--api-key", default=None, help="Application key (appId)")
@click.option("--client-id", default=None, help="Client id for token authentication")
@click.option("--client-secret", default=None, help="Client secret for token authentication")
@click.option("--base-url", default=None, help="Service base URL override")
@click.option("--timeout", type=float, default=None, help="HTTP timeout in seconds (default: 15)")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Verbose output")
@click.option("--debug", is_flag=True, default=False, help="Debug mode: include source locations in logs")
@click.pass_context
def cli(
    ctx: click.Context,
    backend: str | None,
    api_key: str | None,
    client_id: str | None,
    client_secret: str | None,
    base_url: str | None,
    timeout: float | None,
    verbose: bool,
    debug: bool,
) -> None:
    """mstlang - Microsoft Translator language codes and names."""
    setup_logging(verbose=verbose or debug, debug=debug)
    ctx.obj = {
        "backend": backend,
        "api_key": api_key,
        "client_id": client_id,
        "client_secret": client_secret,
        "base_url": base_url,
        "timeout": timeout,
        "verbose": verbose,
    }


@cli.command("languages")
@click.option("--locale", default=None, help="Code of the language to display names in (default: en)")
@click.option("--load/--no-load", default=True, help="Fetch the full supported list first")
@click.option("--offline", is_flag=True, default=False, help="Print bundled English names, no network")
@click.pass_context
def list_languages(ctx: click.Context, locale: str | None, load: bool, offline: bool) -> None:
    """List languages sorted by their name in a locale."""
    if offline:
        from mstlang.utils.languages import list_languages as bundled_languages

        langs = bundled_languages()
        click.echo("Well-known language codes:")
        for code, name in sorted(langs.items(), key=lambda item: item[1]):
            click.echo(f"  {code or '(auto)':<8} {name}")
        return

    registry, config = _registry_from_options(ctx, locale, load)
    target = registry.get_or_create(config["locale"])
    try:
        by_name = registry.values_by_localized_name(target)
    except ServiceError as e:
        raise click.ClickException(str(e))

    click.echo(f"Languages in {target.code}:")
    for name, lang in by_name.items():
        label = name if not lang.is_auto_detect else lang.get_name(target)
        click.echo(f"  {lang.code or '(auto)':<8} {label}")


@cli.command("supported")
@click.pass_context
def list_supported(ctx: click.Context) -> None:
    """List codes the service can translate."""
    registry, _config = _registry_from_options(ctx, None, load=True, seed=[])
    for lang in registry:
        if not lang.is_auto_detect:
            click.echo(lang.code)


@cli.command("name")
@click.argument("code")
@click.option("--locale", default=None, help="Code of the language to display the name in (default: en)")
@click.pass_context
def show_name(ctx: click.Context, code: str, locale: str | None) -> None:
    """Print the name of CODE in the tongue of a locale."""
    registry, config = _registry_from_options(ctx, locale, load=False)
    try:
        language = registry.lookup(code)
        if language is None:
            registry.load_all_available_languages()
            language = registry.lookup(code)
        if language is None:
            raise click.ClickException(f"The service does not support language code: {code!r}")
        click.echo(language.get_name(registry.get_or_create(config["locale"])))
    except ServiceError as e:
        raise click.ClickException(str(e))


@cli.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    cfg = build_config(cli_args={k: v for k, v in (ctx.obj or {}).items() if v is not None})
    for key, val in sorted(cfg.items()):
        if key in SECRET_KEYS and val:
            val = mask_secret(val)
        click.echo(f"  {key}: {val}")
