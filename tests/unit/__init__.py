"""
Unit tests for the triage gateway.

Test individual components in isolation:
- Result and request models (defaults, validation, serialization)
- Configuration (provider configs, headers)
- Prompt builder (first-line selection, truncation, template sets)
- JSON extraction, parsing and normalization
- Provider clients (stubbed with httpx.MockTransport)
- Fallback orchestrator (mocked providers)
"""
