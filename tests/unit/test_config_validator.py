"""
Unit tests for snapshot configuration validation.
"""

import pytest
from metricstext.errors import ConfigurationError
from metricstext.utils.config_validator import (
    ObservationValidator,
    ObserverConfigValidator,
    SnapshotConfigValidator,
    load_config_file,
    validate_snapshot_file,
)


class TestObserverConfigValidator:
    """Test observer section validation."""
    
    def test_valid_observer_config(self):
        config = {
            'quantiles': [0.0, 0.5, 0.99, 1.0],
            'root_label': 'root',
            'highest_trackable_value': 3600000,
        }
        assert ObserverConfigValidator.validate(config) == []
    
    def test_empty_observer_config(self):
        assert ObserverConfigValidator.validate({}) == []
    
    def test_invalid_quantiles(self):
        errors = ObserverConfigValidator.validate({'quantiles': [0.5, 1.5, 'p99']})
        assert len(errors) == 2
        assert any('outside' in e for e in errors)
        assert any('Invalid quantile' in e for e in errors)
    
    def test_empty_quantile_list(self):
        errors = ObserverConfigValidator.validate({'quantiles': []})
        assert any('non-empty list' in e for e in errors)
    
    def test_invalid_root_label_and_highest_value(self):
        errors = ObserverConfigValidator.validate({'root_label': '', 'highest_trackable_value': 0})
        assert len(errors) == 2


class TestObservationValidator:
    """Test single observation validation."""
    
    @pytest.mark.parametrize("observation", [
        {'type': 'counter', 'name': 'server.msgs_sent', 'value': 13},
        {'type': 'gauge', 'name': 'pool.size', 'value': -4},
        {'type': 'histogram', 'name': 'connect_time', 'values': [1, 2, 3]},
        {'type': 'counter', 'name': 'requests', 'labels': {'method': 'GET'}, 'value': 0},
    ])
    def test_valid_observations(self, observation):
        assert ObservationValidator.validate(0, observation) == []
    
    def test_unknown_type(self):
        errors = ObservationValidator.validate(3, {'type': 'meter', 'name': 'x'})
        assert errors == [
            "Observation 3 has invalid type 'meter' "
            "(must be one of ['counter', 'gauge', 'histogram'])"
        ]
    
    def test_missing_leaf_name(self):
        errors = ObservationValidator.validate(0, {'type': 'gauge', 'name': 'server.', 'value': 1})
        assert any('invalid name' in e for e in errors)
    
    def test_negative_counter(self):
        errors = ObservationValidator.validate(0, {'type': 'counter', 'name': 'c', 'value': -1})
        assert any('non-negative integer' in e for e in errors)
    
    def test_bad_histogram_values(self):
        errors = ObservationValidator.validate(0, {'type': 'histogram', 'name': 'h', 'values': [1, -2]})
        assert len(errors) == 1
    
    def test_labels_must_be_mapping(self):
        errors = ObservationValidator.validate(
            0, {'type': 'counter', 'name': 'c', 'value': 1, 'labels': ['a']}
        )
        assert any('labels must be a mapping' in e for e in errors)


class TestSnapshotConfigValidator:
    """Test complete snapshot validation."""
    
    def test_valid_snapshot(self):
        config = {
            'observer': {'quantiles': [0.5]},
            'observations': [{'type': 'counter', 'name': 'a', 'value': 1}],
            'output_path': 'out.txt',
        }
        is_valid, errors = SnapshotConfigValidator.validate(config)
        assert is_valid
        assert errors == []
    
    def test_missing_observations(self):
        is_valid, errors = SnapshotConfigValidator.validate({'observer': {}})
        assert not is_valid
        assert errors == ["Missing top-level field: observations"]
    
    def test_errors_are_collected(self):
        config = {
            'observer': {'quantiles': [2.0]},
            'observations': [
                {'type': 'counter', 'name': 'a', 'value': 'x'},
                {'type': 'gauge', 'name': '', 'value': 1},
            ],
        }
        is_valid, errors = SnapshotConfigValidator.validate(config)
        assert not is_valid
        assert len(errors) == 3


class TestConfigFiles:
    """Test loading configuration files."""
    
    def test_load_yaml_keeps_label_order(self, tmp_path):
        path = tmp_path / 'snapshot.yml'
        path.write_text(
            "observations:\n"
            "  - type: counter\n"
            "    name: requests\n"
            "    value: 1\n"
            "    labels:\n"
            "      z: 1\n"
            "      a: 2\n"
        )
        config = load_config_file(str(path))
        assert list(config['observations'][0]['labels']) == ['z', 'a']
    
    def test_empty_file_raises(self, tmp_path):
        path = tmp_path / 'empty.yaml'
        path.write_text("")
        with pytest.raises(ConfigurationError):
            load_config_file(str(path))
    
    def test_validate_snapshot_file(self, tmp_path):
        path = tmp_path / 'snapshot.json'
        path.write_text('{"observations": [{"type": "gauge", "name": "g", "value": 1.5}]}')
        is_valid, errors, config = validate_snapshot_file(str(path))
        assert not is_valid
        assert len(errors) == 1
        assert config['observations'][0]['name'] == 'g'
