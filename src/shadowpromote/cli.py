import logging
import os

import click
from rich.console import Console
from rich.logging import RichHandler

from .constants import DEFAULT_REQUEST_ID
from .core import ShadowPromoter
from .errors import PromoteError
from .models import Target
from .services.config_loader import ConfigLoader
from .services.credentials import CredentialSource

err_console = Console(stderr=True)

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True, show_level=False, show_path=False)],
)


def _configure_logging(logger, verbose: bool, log_file):
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        logger.addHandler(file_handler)


@click.command()
@click.argument("host")
@click.argument("port")
def main(host, port):
    """Promote a shadow metadata server to master.

    Works only if the 'ha-cluster-managed' personality is used.
    Authentication needed.
    """
    logger = logging.getLogger("shadowpromote")

    try:
        config_values = ConfigLoader().load(os.getcwd())
        target = Target.parse(host, port)
    except PromoteError as exc:
        raise click.ClickException(str(exc)) from exc

    _configure_logging(
        logger,
        verbose=config_values.get("verbose") is True,
        log_file=config_values.get("log_file"),
    )

    try:
        promoter = ShadowPromoter(
            target=target,
            credential_source=CredentialSource(password_file=config_values.get("password_file")),
            timeout=config_values.get("timeout"),
            request_id=config_values.get("request_id", DEFAULT_REQUEST_ID),
        )
        outcome = promoter.run()
    except PromoteError as exc:
        raise click.ClickException(str(exc)) from exc

    if not outcome.succeeded:
        err_console.print(outcome.message, markup=False, highlight=False, soft_wrap=True)
        logger.debug("Promotion outcome: %s %s", outcome.kind.value, outcome.details)

    raise SystemExit(outcome.exit_code)


if __name__ == "__main__":
    main()
