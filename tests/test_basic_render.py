"""Basic end-to-end test for the rendering pipeline."""

import json
import tempfile
from pathlib import Path

from metricstext.orchestration import SnapshotRenderer


def test_basic_render():
    """Test that a snapshot with every metric kind renders end-to-end."""
    config = {
        "observer": {
            "quantiles": [0.0, 0.5, 0.9, 0.95, 0.99, 0.999, 1.0],
            "root_label": "root",
        },
        "observations": [
            {"type": "counter", "name": "server.msgs_received", "value": 42},
            {"type": "counter", "name": "server.msgs_sent", "value": 13},
            {"type": "counter", "name": "configuration_reloads", "value": 2},
            {"type": "gauge", "name": "server.connections", "value": -1},
            {
                "type": "histogram",
                "name": "connect_time",
                "values": [1334, 1520, 1934, 2210, 5330, 139389],
            },
        ],
    }
    
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "snapshot.json"
        with open(config_path, "w") as f:
            json.dump(config, f)
        
        renderer = SnapshotRenderer.from_json_file(str(config_path))
        output = renderer.run()
    
    assert output == (
        "root:\n"
        "  configuration_reloads: 2\n"
        "  connect_time count: 6\n"
        "  connect_time min: 1334\n"
        "  connect_time p50: 1934\n"
        "  connect_time p90: 139389\n"
        "  connect_time p95: 139389\n"
        "  connect_time p99: 139389\n"
        "  connect_time p999: 139389\n"
        "  connect_time max: 139389\n"
        "  server:\n"
        "    connections: -1\n"
        "    msgs_received: 42\n"
        "    msgs_sent: 13\n"
    )
