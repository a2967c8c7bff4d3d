#!/usr/bin/env python3
"""Entry point for the arbitrage engine."""

import asyncio
import json
import logging

import click
from prometheus_client import start_http_server

from arbitrage_engine.app.core.config import config
from arbitrage_engine.app.services import ArbitrageEngine


async def run(engine: ArbitrageEngine, runs: int) -> None:
    for _ in range(runs):
        result = await engine.execute()
        click.echo(json.dumps(result.to_dict()))


@click.command()
@click.option("--runs", default=1, show_default=True, type=click.IntRange(min=1), help="Number of sequential executions")
@click.option("--verbose/--quiet", default=None, help="Log processing diagnostics")
@click.option("--timeout", type=int, default=None, help="Timeout in milliseconds")
@click.option("--max-retries", type=int, default=None, help="Maximum number of retries")
@click.option(
    "--metrics-port",
    type=int,
    default=config.prometheus_port,
    show_default=True,
    help="Prometheus metrics port (0 disables)",
)
def main(runs, verbose, timeout, max_retries, metrics_port):
    """Run the arbitrage engine and print each result as a JSON line."""

    # Setup logging
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    logger = logging.getLogger(__name__)

    try:
        engine_config = config.engine_defaults().with_overrides(
            {"verbose": verbose, "timeout": timeout, "max_retries": max_retries}
        )
        logger.debug(f"Engine config: {engine_config}")

        if metrics_port:
            start_http_server(metrics_port)
            logger.info(f"Metrics available at http://localhost:{metrics_port}/metrics")

        engine = ArbitrageEngine(engine_config)
        asyncio.run(run(engine, runs))

    except Exception as e:
        logger.error(f"Engine run failed: {e}")
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()


if __name__ == "__main__":
    main()
