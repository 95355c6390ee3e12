"""CLI interface for soilcalc."""

import json
from pathlib import Path
from typing import Optional, Type, TypeVar

import click
from pydantic import BaseModel, ValidationError

from soilcalc import __version__
from soilcalc.engine import evaluate, summarize
from soilcalc.layers import build_bore_log, validate_layers
from soilcalc.schemas import BoreLogRequest, EnvironmentDescription, SoilDescription
from soilcalc.settings import get_settings
from soilcalc.suitability import score_suitability
from soilcalc.tables import create_bore_log_dataframe, export_to_csv, export_to_excel

M = TypeVar("M", bound=BaseModel)


def _load_model(path: str, model: Type[M]) -> M:
    """Read a JSON file into ``model``, turning failures into CLI errors."""
    try:
        return model.model_validate_json(Path(path).read_text())
    except ValidationError as e:
        raise click.ClickException(f"Invalid {model.__name__} in {path}:\n{e}") from e


def _load_environment(path: Optional[str]) -> Optional[EnvironmentDescription]:
    return _load_model(path, EnvironmentDescription) if path else None


def _emit(payload: dict, output: Optional[str]) -> None:
    text = json.dumps(payload, indent=2)
    if output:
        Path(output).write_text(text)
        click.echo(f"Results saved to {output}")
    else:
        click.echo(text)


@click.group()
@click.version_option(version=__version__)
def main():
    """Soilcalc - soil suitability and preliminary foundation estimates."""
    pass


@main.command(name="evaluate")
@click.argument("input_file", type=click.Path(exists=True))
@click.option(
    "--environment", "environment_file", type=click.Path(exists=True),
    help="EnvironmentDescription JSON file",
)
@click.option("--output", type=click.Path(), help="Output JSON file path")
def evaluate_command(input_file: str, environment_file: Optional[str], output: Optional[str]):
    """Evaluate a SoilDescription JSON file into a design bundle."""
    soil = _load_model(input_file, SoilDescription)
    bundle = evaluate(soil, _load_environment(environment_file))
    _emit(bundle.model_dump(mode="json"), output)


@main.command(name="summary")
@click.argument("input_file", type=click.Path(exists=True))
@click.option(
    "--environment", "environment_file", type=click.Path(exists=True),
    help="EnvironmentDescription JSON file",
)
def summary_command(input_file: str, environment_file: Optional[str]):
    """Print the condensed design summary."""
    soil = _load_model(input_file, SoilDescription)
    result = summarize(soil, _load_environment(environment_file))
    for message in result.messages:
        click.echo(f"- {message}")


@main.command(name="score")
@click.argument("input_file", type=click.Path(exists=True))
@click.option(
    "--environment", "environment_file", type=click.Path(exists=True),
    help="EnvironmentDescription JSON file",
)
@click.option("--output", type=click.Path(), help="Output JSON file path")
def score_command(input_file: str, environment_file: Optional[str], output: Optional[str]):
    """Score building and agriculture suitability."""
    soil = _load_model(input_file, SoilDescription)
    result = score_suitability(soil, _load_environment(environment_file))
    _emit(result.model_dump(mode="json"), output)


@main.command(name="bore-log")
@click.argument("input_file", type=click.Path(exists=True))
@click.option("--output", type=click.Path(), help="Output .csv or .xlsx file path")
def bore_log_command(input_file: str, output: Optional[str]):
    """Normalise a bore log ({"layers": [...]}) and report layer warnings."""
    request = _load_model(input_file, BoreLogRequest)

    for warning in validate_layers(request.layers):
        click.echo(f"Warning: {warning}", err=True)

    df = create_bore_log_dataframe(build_bore_log(request.layers))
    if not output:
        click.echo(df.to_string(index=False))
        return

    if Path(output).suffix.lower() == ".xlsx":
        export_to_excel(df, output)
    else:
        export_to_csv(df, output)
    click.echo(f"Bore log saved to {output}")


@main.command()
def serve():
    """Start the FastAPI server (JSON API)."""
    import uvicorn

    settings = get_settings()
    click.echo(f"Starting Soilcalc server on http://{settings.host}:{settings.port}")
    uvicorn.run("soilcalc.api:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
