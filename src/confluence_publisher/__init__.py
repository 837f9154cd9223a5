import asyncio
import logging
import os
import sys
from importlib.metadata import PackageNotFoundError, version

import click
from dotenv import load_dotenv

from confluence_publisher.utils.env import is_env_truthy
from confluence_publisher.utils.lifecycle import (
    ensure_clean_exit,
    setup_signal_handlers,
)
from confluence_publisher.utils.logging import setup_logging

try:
    __version__ = version("confluence-publisher-mcp")
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0"

# CLI option -> environment variable it overrides
OPTION_ENV_VARS = {
    "confluence_url": "CONFLUENCE_BASE_URL",
    "confluence_username": "CONFLUENCE_USERNAME",
    "confluence_token": "CONFLUENCE_API_TOKEN",
    "confluence_ssl_verify": "CONFLUENCE_SSL_VERIFY",
    "read_only": "READ_ONLY_MODE",
}


def _logging_stream():
    # stdout carries the MCP protocol unless explicitly requested
    return sys.stdout if is_env_truthy("MCP_LOGGING_STDOUT") else sys.stderr


def _logging_level(verbose: int) -> int:
    """Map -v flags, then MCP_VERY_VERBOSE / MCP_VERBOSE, to a logging level."""
    if verbose >= 2 or (not verbose and is_env_truthy("MCP_VERY_VERBOSE")):
        return logging.DEBUG
    if verbose == 1 or is_env_truthy("MCP_VERBOSE"):
        return logging.INFO
    return logging.WARNING


logger = setup_logging(_logging_level(0), _logging_stream())


def _apply_option_overrides(ctx: click.Context) -> None:
    """Copy options given on the command line into the environment."""
    for param_name, env_var in OPTION_ENV_VARS.items():
        source = ctx.get_parameter_source(param_name)
        if source in (
            click.core.ParameterSource.DEFAULT,
            click.core.ParameterSource.DEFAULT_MAP,
            None,
        ):
            continue
        value = ctx.params[param_name]
        os.environ[env_var] = str(value).lower() if isinstance(value, bool) else value
        logger.debug(f"{env_var} set from command line option")


@click.version_option(__version__, prog_name="confluence-publisher")
@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--confluence-url",
    help="Confluence site root URL (e.g., https://your-domain.atlassian.net)",
)
@click.option("--confluence-username", help="Confluence username/email")
@click.option("--confluence-token", help="Confluence API token")
@click.option(
    "--confluence-ssl-verify/--no-confluence-ssl-verify",
    default=True,
    help="Verify SSL certificates (default: verify)",
)
@click.option(
    "--read-only",
    is_flag=True,
    help="Run in read-only mode (disables publish and sync)",
)
@click.pass_context
def main(
    ctx: click.Context,
    verbose: int,
    env_file: str | None,
    confluence_url: str | None,
    confluence_username: str | None,
    confluence_token: str | None,
    confluence_ssl_verify: bool,
    read_only: bool,
) -> None:
    """Confluence Publisher MCP Server - publish, sync, search and export pages

    Serves the publish_markdown, sync_markdown, search_content and
    fetch_latest_articles tools over stdio. Authenticates against
    Confluence Cloud with a username and API token.
    """
    global logger
    level = _logging_level(verbose)
    logger = setup_logging(level, _logging_stream())
    logger.debug(f"Logging level set to: {logging.getLevelName(level)}")

    if env_file:
        logger.debug(f"Loading environment from file: {env_file}")
        load_dotenv(env_file, override=True)
    else:
        logger.debug("Attempting to load environment from default .env file if it exists")
        load_dotenv(override=True)

    # Explicit options win over the environment and .env files
    _apply_option_overrides(ctx)

    from confluence_publisher.servers import main_mcp

    setup_signal_handlers()

    logger.info("Starting Confluence publisher server with STDIO transport.")

    try:
        asyncio.run(main_mcp.run_async(transport="stdio"))
    except (KeyboardInterrupt, SystemExit) as e:
        logger.info(f"Server shutdown initiated: {type(e).__name__}")
    except Exception as e:
        logger.error(f"Server encountered an error: {e}", exc_info=True)
        sys.exit(1)
    finally:
        ensure_clean_exit()


__all__ = ["main", "__version__"]

if __name__ == "__main__":
    main()
