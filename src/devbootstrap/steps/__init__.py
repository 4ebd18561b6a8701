# topmark:header:start
#
#   project      : devbootstrap
#   file         : __init__.py
#   file_relpath : src/devbootstrap/steps/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Provisioning steps and the sequential, fail-fast pipeline that runs them."""

from __future__ import annotations

from devbootstrap.steps.context import BootstrapContext
from devbootstrap.steps.pipeline import build_pipeline, run_pipeline
from devbootstrap.steps.status import StepResult, StepStatus

__all__ = [
    "BootstrapContext",
    "StepResult",
    "StepStatus",
    "build_pipeline",
    "run_pipeline",
]
