"""Payload shapes returned by the Prometheus HTTP API.

These mirror the documented ``data`` members of the API envelope. They are
passed back to callers verbatim, so they are plain JSON aliases rather than
parsed models.

Reference: https://prometheus.io/docs/prometheus/latest/querying/api/
"""

from typing import Any, Dict, List

# {"status": "success" | "error", "data": ..., "errorType"?, "error"?, "warnings"?, "infos"?}
BackendResponse = Dict[str, Any]

# {"resultType": "vector" | "matrix" | "scalar" | "string", "result": ...}
QueryResult = Dict[str, Any]

# {"activeTargets": [...], "droppedTargets": [...]}
TargetsResult = Dict[str, Any]

# {"<metric>": [{"type": ..., "help": ..., "unit": ...}]}
MetricMetadata = Dict[str, List[Dict[str, Any]]]

# {"startTime", "CWD", "reloadConfigSuccess", "lastConfigTime", ...}
RuntimeInfo = Dict[str, Any]

# {"version", "revision", "branch", "buildUser", "buildDate", "goVersion"}
BuildInfo = Dict[str, Any]

LabelValues = List[str]
Labels = List[str]

SUCCESS_STATUS = "success"
