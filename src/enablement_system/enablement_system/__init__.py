"""Enablement System package.

Documentation/feature consistency for the HR suite, organized by feature
modules (features, manuals, consistency, coverage, remediation) with a thin
Flask controller layer over service/repository layers.
"""
