import json
from pathlib import Path
from typing import List, Optional

import typer
from typing_extensions import Annotated

from docdigest.data.preprocessor import TextNormalizer
from docdigest.summarization import (
    build_frequency_table,
    extract_topics,
    generate_fallback_summary,
    summarize as summarize_text,
)
from docdigest.types.types import DigestError, SummaryRecord
from docdigest.utils import ConfigManager, get_logger, setup_logging

logger = get_logger(__name__)

PAGE_SEPARATOR = "\f"

app = typer.Typer(help="Extractive summaries and topics for text documents.")

config_app = typer.Typer(name="config", help="Configuration management commands")
app.add_typer(config_app)

InputFile = Annotated[
    Path,
    typer.Argument(
        help="UTF-8 text file; form feeds separate pages.",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
]
ConfigOption = Annotated[
    Optional[Path], typer.Option("--config", help="YAML configuration file.")
]
LogLevelOption = Annotated[
    Optional[str], typer.Option("--log-level", help="Logging level, overrides the config.")
]


def _configure(config_file: Optional[Path], log_level: Optional[str]) -> ConfigManager:
    """Load configuration and set up logging; exits with code 1 on bad config."""
    manager = ConfigManager()
    try:
        config = manager.load(config_file)
    except DigestError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    setup_logging(
        level=log_level or config.logging.level,
        log_file=config.logging.log_file,
        json_format=config.logging.json_format,
    )
    return manager


def read_pages(path: Path) -> List[str]:
    """Read a text file, splitting it into pages on form feeds."""
    return path.read_text(encoding="utf-8").split(PAGE_SEPARATOR)


def render(record: SummaryRecord, as_json: bool) -> str:
    if as_json:
        return json.dumps(record.to_dict(), indent=2, ensure_ascii=False)
    return f"{record.title}\n\n{record.formatted_summary}"


@app.command()
def summarize(
    file: InputFile,
    max_key_points: Annotated[
        Optional[int], typer.Option(help="Maximum number of key points.", min=1)
    ] = None,
    max_topics: Annotated[Optional[int], typer.Option(help="Maximum number of topics.", min=0)] = None,
    min_length: Annotated[
        Optional[int], typer.Option(help="Sentences must be longer than this.")
    ] = None,
    max_length: Annotated[
        Optional[int], typer.Option(help="Sentences must be shorter than this.")
    ] = None,
    title: Annotated[Optional[str], typer.Option(help="Document title.")] = None,
    ocr_file: Annotated[
        Optional[Path],
        typer.Option(help="OCR text used when the main text is nearly empty.", exists=True),
    ] = None,
    transcript: Annotated[
        bool, typer.Option("--transcript", help="Treat input as a speech transcript.")
    ] = False,
    fallback: Annotated[
        bool, typer.Option("--fallback", help="Print a placeholder summary instead of failing.")
    ] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print the summary as JSON.")] = False,
    config_file: ConfigOption = None,
    log_level: LogLevelOption = None,
):
    """
    Summarize a text document into key points and topics.
    """
    manager = _configure(config_file, log_level)
    settings = manager.summarizer_config()

    bounds = None
    if min_length is not None or max_length is not None:
        bounds = (
            settings.min_sentence_length if min_length is None else min_length,
            settings.max_sentence_length if max_length is None else max_length,
        )

    try:
        record = summarize_text(
            read_pages(file),
            max_key_points=max_key_points,
            max_topics=max_topics,
            sentence_length_bounds=bounds,
            title=title,
            filename=file.name,
            ocr_pages=read_pages(ocr_file) if ocr_file else None,
            source="transcript" if transcript else "document",
            config=settings,
        )
    except DigestError as e:
        if not fallback:
            logger.debug("Summarization failed", extra={"error": e.to_dict()})
            typer.echo(f"Error: {e.message}", err=True)
            raise typer.Exit(code=1)
        logger.warning("Summarization failed (%s), using fallback summary", e.error_code)
        record = generate_fallback_summary(file.name, file.stat().st_size)

    typer.echo(render(record, as_json))


@app.command()
def topics(
    file: InputFile,
    max_topics: Annotated[Optional[int], typer.Option(help="Maximum number of topics.", min=0)] = None,
    transcript: Annotated[
        bool, typer.Option("--transcript", help="Treat input as a speech transcript.")
    ] = False,
    config_file: ConfigOption = None,
    log_level: LogLevelOption = None,
):
    """Print the main topics of a text document, one per line."""
    manager = _configure(config_file, log_level)
    settings = manager.summarizer_config()
    normalizer = TextNormalizer.for_source("transcript" if transcript else "document")

    try:
        cleaned = normalizer.clean_or_raise(read_pages(file), min_length=1)
    except DigestError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    limit = settings.max_topics if max_topics is None else max_topics
    for topic in extract_topics(build_frequency_table(cleaned), limit):
        typer.echo(topic)


@config_app.command("show")
def config_show(config_file: ConfigOption = None):
    """Print the effective configuration as YAML."""
    manager = _configure(config_file, None)
    typer.echo(manager.to_yaml())


def main() -> None:
    app()


if __name__ == "__main__":
    main()
