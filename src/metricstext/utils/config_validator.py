"""
Configuration validation for snapshot files.

This module provides validation for:
- Observer configurations (quantiles, root label)
- Individual observations (counters, gauges, histograms)
- Complete snapshot configurations
"""

import json
import logging
import numbers
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

OBSERVATION_TYPES = {"counter", "gauge", "histogram"}


def _is_int(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class ObserverConfigValidator:
    """Validates the ``observer`` section of a snapshot configuration."""
    
    @classmethod
    def validate(cls, config: Dict[str, Any]) -> List[str]:
        errors = []
        
        if not isinstance(config, dict):
            return [f"Observer config must be a mapping, got {type(config).__name__}"]
        
        quantiles = config.get("quantiles")
        if quantiles is not None:
            if not isinstance(quantiles, list) or not quantiles:
                errors.append("Observer quantiles must be a non-empty list")
            else:
                for q in quantiles:
                    if isinstance(q, bool) or not isinstance(q, numbers.Real):
                        errors.append(f"Invalid quantile: {q!r}")
                    elif not 0.0 <= q <= 1.0:
                        errors.append(f"Quantile {q} outside [0.0, 1.0]")
        
        root_label = config.get("root_label")
        if root_label is not None and (not isinstance(root_label, str) or not root_label):
            errors.append(f"Invalid root_label: {root_label!r}")
        
        highest = config.get("highest_trackable_value")
        if highest is not None and (not _is_int(highest) or highest < 1):
            errors.append(f"Invalid highest_trackable_value: {highest!r}")
        
        return errors


class ObservationValidator:
    """Validates a single entry of the ``observations`` list."""
    
    @classmethod
    def validate(cls, index: int, observation: Dict[str, Any]) -> List[str]:
        errors = []
        
        if not isinstance(observation, dict):
            return [f"Observation {index} must be a mapping"]
        
        obs_type = observation.get("type")
        if obs_type not in OBSERVATION_TYPES:
            errors.append(
                f"Observation {index} has invalid type {obs_type!r} "
                f"(must be one of {sorted(OBSERVATION_TYPES)})"
            )
        
        name = observation.get("name")
        if not isinstance(name, str) or not name.split(".")[-1]:
            errors.append(f"Observation {index} has invalid name {name!r}")
        
        labels = observation.get("labels")
        if labels is not None and not isinstance(labels, dict):
            errors.append(f"Observation {index} labels must be a mapping")
        
        if obs_type == "counter":
            value = observation.get("value")
            if not _is_int(value) or value < 0:
                errors.append(f"Observation {index} counter value must be a non-negative integer")
        elif obs_type == "gauge":
            if not _is_int(observation.get("value")):
                errors.append(f"Observation {index} gauge value must be an integer")
        elif obs_type == "histogram":
            values = observation.get("values")
            if not isinstance(values, list):
                errors.append(f"Observation {index} histogram values must be a list")
            elif not all(_is_int(v) and v >= 0 for v in values):
                errors.append(f"Observation {index} histogram values must be non-negative integers")
        
        return errors


class SnapshotConfigValidator:
    """Validates complete snapshot configuration."""
    
    @classmethod
    def validate(cls, config: Dict[str, Any]) -> Tuple[bool, List[str]]:
        """Validate complete snapshot configuration."""
        all_errors = []
        
        if not isinstance(config, dict):
            return False, ["Snapshot configuration must be a mapping"]
        
        if "observations" not in config:
            all_errors.append("Missing top-level field: observations")
            return False, all_errors
        
        all_errors.extend(ObserverConfigValidator.validate(config.get("observer") or {}))
        
        observations = config["observations"]
        if not isinstance(observations, list):
            all_errors.append("observations must be a list")
        else:
            for i, observation in enumerate(observations):
                all_errors.extend(ObservationValidator.validate(i, observation))
        
        output_path = config.get("output_path")
        if output_path is not None and not isinstance(output_path, str):
            all_errors.append(f"Invalid output_path: {output_path!r}")
        
        return len(all_errors) == 0, all_errors


def load_config_file(config_path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file, choosing the parser by suffix."""
    config_file = Path(config_path)
    
    with open(config_file) as f:
        if config_file.suffix in [".yaml", ".yml"]:
            config = yaml.safe_load(f)
        else:
            config = json.load(f)
    
    if config is None:
        raise ConfigurationError(f"Configuration file is empty: {config_path}")
    return config


def validate_snapshot_file(config_path: str) -> Tuple[bool, List[str], Optional[Dict[str, Any]]]:
    """
    Load and validate a snapshot configuration file.
    
    Returns:
        (is_valid, errors, config)
    """
    config = load_config_file(config_path)
    
    is_valid, errors = SnapshotConfigValidator.validate(config)
    
    if not is_valid:
        logger.warning(f"Configuration has {len(errors)} validation errors")
        for error in errors[:10]:
            logger.warning(f"  - {error}")
        if len(errors) > 10:
            logger.warning(f"  ... and {len(errors) - 10} more errors")
    
    return is_valid, errors, config
