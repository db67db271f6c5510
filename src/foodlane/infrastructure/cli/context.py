"""Shared container construction for CLI commands."""

from __future__ import annotations

from foodlane.infrastructure.bootstrap import Container, build_container
from foodlane.infrastructure.config import Settings


def cli_container() -> Container:
    return build_container(Settings.from_env())
