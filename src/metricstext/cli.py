"""Command-line interface for metricstext."""

import json
import logging
import sys
from pathlib import Path

import click
import yaml

from metricstext import __version__
from metricstext.orchestration import SnapshotRenderer
from metricstext.utils.config_validator import validate_snapshot_file

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


@click.group()
@click.version_option(version=__version__, prog_name="metricstext")
def cli():
    """metricstext: render metric snapshots as an indented text tree."""
    pass


@cli.command()
@click.argument("config_file", type=click.Path(exists=True))
@click.option(
    "--format", "-f", type=click.Choice(["yaml", "json"]), default=None,
    help="Snapshot file format (detected from the suffix by default)"
)
@click.option(
    "--root-label", "-r", default=None,
    help="Nest the output under this header, e.g. 'root'"
)
@click.option(
    "--log-level", "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    default="WARNING",
    help="Logging level"
)
def render(config_file: str, format: str, root_label: str, log_level: str):
    """Render a snapshot described by a configuration file."""
    logging.getLogger().setLevel(getattr(logging, log_level))
    
    try:
        if format == "yaml":
            renderer = SnapshotRenderer.from_yaml_file(config_file)
        elif format == "json":
            renderer = SnapshotRenderer.from_json_file(config_file)
        else:
            renderer = SnapshotRenderer.from_file(config_file)
        
        output = renderer.run(root_label=root_label)
        click.echo(output, nl=False)
        
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.option(
    "--output", "-o", default="example_snapshot.yaml",
    help="Output file path"
)
@click.option(
    "--format", "-f", type=click.Choice(["yaml", "json"]), default="yaml",
    help="Configuration file format"
)
def generate_config(output: str, format: str):
    """Generate an example snapshot configuration file."""
    example_config = {
        "observer": {
            "quantiles": [0.0, 0.5, 0.9, 0.95, 0.99, 0.999, 1.0],
            "root_label": "root",
        },
        "observations": [
            {"type": "counter", "name": "configuration_reloads", "value": 2},
            {"type": "counter", "name": "server.msgs_received", "value": 42},
            {"type": "counter", "name": "server.msgs_sent", "value": 13},
            {"type": "gauge", "name": "server.connections", "value": -1},
            {
                "type": "counter",
                "name": "server.requests",
                "labels": {"method": "GET"},
                "value": 7,
            },
            {
                "type": "histogram",
                "name": "connect_time",
                "values": [1334, 1520, 1934, 2210, 5330, 139389],
            },
        ],
    }
    
    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    
    with open(output_path, "w") as f:
        if format == "yaml":
            yaml.dump(example_config, f, default_flow_style=False, sort_keys=False)
        else:
            json.dump(example_config, f, indent=2)
    
    click.echo(f"Generated example configuration at {output_path}")


@cli.command()
@click.argument("config_file", type=click.Path(exists=True))
def validate(config_file: str):
    """Validate a snapshot configuration file without rendering it."""
    click.echo(f"Validating configuration: {config_file}")
    
    try:
        is_valid, errors, _ = validate_snapshot_file(config_file)
        
        if is_valid:
            click.echo(click.style("✓ Configuration is valid", fg="green"))
        else:
            click.echo(click.style(f"✗ Configuration has {len(errors)} errors:", fg="red"))
            for i, error in enumerate(errors[:20], 1):
                click.echo(f"  {i}. {error}")
            if len(errors) > 20:
                click.echo(f"  ... and {len(errors) - 20} more errors")
        
        sys.exit(0 if is_valid else 1)
        
    except Exception as e:
        click.echo(click.style(f"Error validating configuration: {e}", fg="red"))
        sys.exit(1)


if __name__ == "__main__":
    cli()
