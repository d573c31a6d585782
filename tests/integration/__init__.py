"""
Integration tests for the triage gateway.

Exercise the gateway assembled by create_gateway end to end, with both
provider backends stubbed at the HTTP transport level.
"""
