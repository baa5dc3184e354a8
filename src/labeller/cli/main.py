"""CLI entrypoint for labeller — typer app that runs one interactive review session."""

import logging
import sys
from collections import Counter
from contextlib import ExitStack
from pathlib import Path
from typing import TextIO

import structlog
import typer

from labeller.config.domain.config import SessionConfig
from labeller.config.domain.settings import resolve_settings
from labeller.config.infrastructure.observer import StructlogConfigObserver
from labeller.config.infrastructure.yaml_loader import YamlConfigLoader
from labeller.core.errors import LabellerError
from labeller.dataset.domain.example import LabelledExample
from labeller.dataset.domain.repository import ExampleRepository
from labeller.dataset.infrastructure.json_repository import JsonExampleRepository
from labeller.dataset.infrastructure.observer import StructlogDatasetObserver
from labeller.review.application.loop import run_review
from labeller.review.domain.navigator import Navigator
from labeller.review.infrastructure.keys import TerminalKeySource
from labeller.review.infrastructure.observer import StructlogReviewObserver
from labeller.review.infrastructure.rich_display import RichDisplay

app = typer.Typer(add_completion=False)

def _configure_structlog(log_format: str, log_level: str, stream: TextIO) -> None:
    """Configure structlog based on the requested format, level and destination."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer(
            colors=stream.isatty()
        )
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    min_level = logging.getLevelNamesMapping().get(log_level.upper())
    if min_level is None:
        typer.echo(
            f"Invalid log level: {log_level!r}. "
            "Must be one of 'debug', 'info', 'warning', 'error'."
        )
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
    )


def _load_session(config_path: Path | None) -> SessionConfig | None:
    if config_path is None:
        return None
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    return loader.load(path=config_path)


def _print_summary(
    examples: list[LabelledExample], labels: list[str], output_path: Path
) -> None:
    """Print how many examples carry a label, broken down per label."""
    counts = Counter(e.label for e in examples if e.label is not None)
    labelled = sum(counts.values())
    typer.echo(f"Labelled {labelled} / {len(examples)} examples.")

    # Vocabulary order first, then any labels carried over from the input.
    ordered = labels + sorted(name for name in counts if name not in labels)
    width = max(len(name) for name in ordered)
    for name in ordered:
        typer.echo(f"  {name:<{width}}  {counts.get(name, 0)}")
    typer.echo(f"Saved to {output_path}")


@app.command()
def run(
    input_path: Path | None = typer.Option(
        None, "--input", "-i", help="JSON file holding the examples to review"
    ),
    output_path: Path | None = typer.Option(
        None, "--output", "-o", help="JSON file the labelled examples are written to"
    ),
    prelabelled: bool = typer.Option(
        False,
        "--prelabelled",
        "-p",
        help="Input holds labelled examples written by a previous session",
    ),
    labels: list[str] | None = typer.Option(
        None, "--label", "-l", help="Label value; repeat to build the cycle order"
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="YAML session file providing defaults"
    ),
    log_format: str = typer.Option(
        "console", "--log-format", help="Log format: 'console' or 'json'"
    ),
    log_level: str = typer.Option(
        "warning", "--log-level", help="Minimum log level: debug, info, warning, error"
    ),
    log_file: Path | None = typer.Option(
        None,
        "--log-file",
        dir_okay=False,
        writable=True,
        help="Append logs to this file instead of stderr",
    ),
) -> None:
    """Review examples one at a time and assign each a label."""
    try:
        with ExitStack() as stack:
            stream: TextIO = (
                stack.enter_context(log_file.open("a", encoding="utf-8"))
                if log_file is not None
                else sys.stderr
            )
            _configure_structlog(
                log_format=log_format, log_level=log_level, stream=stream
            )

            settings = resolve_settings(
                session=_load_session(config_path=config_path),
                input_path=input_path,
                output_path=output_path,
                prelabelled=prelabelled,
                labels=labels or [],
            )
            if not settings.labels:
                typer.echo("No labels provided, exiting...")
                return

            repository: ExampleRepository = JsonExampleRepository(
                observer=StructlogDatasetObserver()
            )
            examples = repository.load(
                path=settings.input, prelabelled=settings.prelabelled
            )

            review_observer = StructlogReviewObserver()
            navigator = Navigator.create(
                examples=examples, labels=settings.labels, observer=review_observer
            )
            if navigator is None:
                typer.echo("No examples provided, exiting...")
                return

            with RichDisplay() as display:
                run_review(
                    navigator=navigator,
                    display=display,
                    key_source=TerminalKeySource(),
                    observer=review_observer,
                )

            repository.write(path=settings.output, examples=navigator.store.examples)
            _print_summary(
                examples=navigator.store.examples,
                labels=settings.labels,
                output_path=settings.output,
            )

    except KeyboardInterrupt:
        typer.echo("Labelling interrupted.")
        sys.exit(1)
    except LabellerError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except typer.Exit:
        raise
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


if __name__ == "__main__":
    app()
