"""Replays a snapshot configuration through a TextObserver."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..errors import ConfigurationError
from ..metrics.histogram import MAX_TRACKABLE_VALUE
from ..metrics.models import Key
from ..observer import TextBuilder, TextObserver
from ..render.tree import INDENT
from ..utils.config_validator import SnapshotConfigValidator, load_config_file

logger = logging.getLogger(__name__)


def wrap_with_root_label(rendered: str, root_label: str) -> str:
    """Put ``rendered`` under a ``<root_label>:`` header, one level deeper."""
    lines = [f"{root_label}:\n"]
    lines.extend(f"{INDENT}{line}\n" for line in rendered.splitlines())
    return "".join(lines)


class SnapshotRenderer:
    """Main entry point to render a snapshot described by a configuration."""
    
    def __init__(self, config_data: Dict[str, Any]):
        """Initialize the renderer with snapshot configuration.
        
        Args:
            config_data: Snapshot configuration containing:
                - observer (optional): quantiles, root_label, highest_trackable_value
                - observations: list of counter/gauge/histogram observations
                - output_path (optional): file to write the rendered text to
        """
        self.config = config_data
        self._validate_config()
        
        observer_config = self.config.get("observer") or {}
        self.root_label: Optional[str] = observer_config.get("root_label")
        self.builder = TextBuilder(
            quantiles=observer_config.get("quantiles"),
            highest_trackable_value=observer_config.get(
                "highest_trackable_value", MAX_TRACKABLE_VALUE
            ),
        )
        
        logger.info(f"SnapshotRenderer initialized with {len(self.config['observations'])} observations")
    
    def _validate_config(self) -> None:
        is_valid, errors = SnapshotConfigValidator.validate(self.config)
        if not is_valid:
            raise ConfigurationError(
                f"Invalid snapshot configuration: {'; '.join(errors)}"
            )
    
    def replay(self, observer: TextObserver) -> None:
        """Feed every configured observation into ``observer`` in order."""
        for observation in self.config["observations"]:
            key = Key.from_name(observation["name"], observation.get("labels"))
            obs_type = observation["type"]
            
            if obs_type == "counter":
                observer.observe_counter(key, observation["value"])
            elif obs_type == "gauge":
                observer.observe_gauge(key, observation["value"])
            else:
                observer.observe_histogram(key, observation["values"])
    
    def run(self, root_label: Optional[str] = None) -> str:
        """Render the snapshot.
        
        Args:
            root_label: Header to nest the output under; overrides the
                configured ``observer.root_label``
                
        Returns:
            Rendered snapshot text
        """
        observer = self.builder.build()
        self.replay(observer)
        output = observer.render()
        
        label = root_label or self.root_label
        if label:
            output = wrap_with_root_label(output, label)
        
        output_path = self.config.get("output_path")
        if output_path:
            output_file = Path(output_path)
            output_file.parent.mkdir(parents=True, exist_ok=True)
            with open(output_file, "w") as f:
                f.write(output)
            logger.info(f"Saved rendered snapshot to {output_file}")
        
        return output
    
    @classmethod
    def from_yaml_file(cls, config_path: str) -> "SnapshotRenderer":
        """Create a renderer from a YAML configuration file."""
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f)
        
        return cls(config_data)
    
    @classmethod
    def from_json_file(cls, config_path: str) -> "SnapshotRenderer":
        """Create a renderer from a JSON configuration file."""
        with open(config_path, "r") as f:
            config_data = json.load(f)
        
        return cls(config_data)
    
    @classmethod
    def from_file(cls, config_path: str) -> "SnapshotRenderer":
        """Create a renderer, picking YAML or JSON from the file suffix."""
        return cls(load_config_file(config_path))
