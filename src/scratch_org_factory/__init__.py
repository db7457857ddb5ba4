"""Scratch Org Factory - Root Package.

This package orchestrates creation of disposable scratch orgs against a
hub org: it resolves and validates the org definition, requests the org-info
record, waits for provisioning, authorizes the new org, deploys settings and
resets source tracking.

Key Components:
    - domain: Definition validation, feature deprecation, org-info generation
      and the ports for remote platform calls
    - application: Configuration resolver and the creation orchestrator
    - infrastructure: Logging, config aggregation and project resolution
    - config: Application configuration schema and manager

Architecture:
    Remote platform operations are expressed as abstract ports in the domain
    layer. Callers inject concrete implementations, which keeps the
    orchestration logic free of any particular platform SDK.
"""

from ._version import __version__

PACKAGE_NAME = "scratch-org-factory"

__package_name__ = PACKAGE_NAME
