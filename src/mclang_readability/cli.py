from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
import yaml

from .archive import ArchiveReadError, NoLanguageFilesError
from .config import ReadabilityConfig, load_config
from .pipeline import AnalysisResult, analyze_archive
from .report import UnscoreableTextError, build_analysis_report, build_summary

app = typer.Typer(help="Minecraft Education language readability CLI.", no_args_is_help=True)


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Analyze a world archive and emit a JSON summary."""
    cfg = _load_and_configure(config)
    result = _analyze(input_path, cfg)
    summary = build_summary(result, preview_chars=cfg.preview_chars)
    typer.echo(json.dumps(summary, indent=2, ensure_ascii=False))
    if result.scores is None:
        # The summary still lists the file; scores stay null.
        typer.echo(str(UnscoreableTextError()), err=True)
        raise typer.Exit(code=1)


@app.command()
def extract(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    output_path: Path | None = typer.Option(
        None, dir_okay=False, help="Write the text here instead of stdout."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Print (or save) the readable text of the largest language file."""
    cfg = _load_and_configure(config)
    result = _analyze(input_path, cfg)
    if output_path is None:
        typer.echo(result.extracted_text)
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(result.extracted_text, encoding="utf-8")
    typer.echo(f"Wrote extracted text to {output_path}")


@app.command()
def report(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    output_path: Path = typer.Option(..., file_okay=False),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Write the extracted text and the full analysis report to a directory."""
    cfg = _load_and_configure(config)
    result = _analyze(input_path, cfg)
    try:
        report_text = build_analysis_report(result)
    except UnscoreableTextError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    output_path.mkdir(parents=True, exist_ok=True)
    text_path = output_path / cfg.text_filename
    report_path = output_path / cfg.report_filename
    text_path.write_text(result.extracted_text, encoding="utf-8")
    report_path.write_text(report_text, encoding="utf-8")
    typer.echo(f"Wrote extracted text to {text_path} and report to {report_path}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ReadabilityConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load_and_configure(config_path: Path | None) -> ReadabilityConfig:
    """Load configuration and apply its log level to the root logger."""
    try:
        cfg = load_config(config_path)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
    logging.basicConfig(
        level=cfg.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return cfg


def _analyze(input_path: Path, cfg: ReadabilityConfig) -> AnalysisResult:
    """Run the archive analysis, translating archive problems into CLI errors."""
    try:
        return analyze_archive(input_path, cfg)
    except ArchiveReadError as exc:
        raise typer.BadParameter(str(exc), param_hint="--input-path") from exc
    except NoLanguageFilesError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    main()
