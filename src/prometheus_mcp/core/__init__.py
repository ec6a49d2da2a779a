"""Core building blocks: error hierarchy, response envelopes and the Prometheus client."""
