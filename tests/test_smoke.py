"""Smoke tests to verify PEP 420 namespace package resolution.

Each test imports the leaf __init__.py of a warden package to confirm the
implicit namespace package layout works when several source roots share
the ``warden`` prefix.
"""

from __future__ import annotations


def test_foundation_domain_importable() -> None:
    import warden.foundation.domain  # noqa: F401


def test_infra_observability_importable() -> None:
    import warden.infra.observability  # noqa: F401


def test_infra_persistence_importable() -> None:
    import warden.infra.persistence  # noqa: F401


def test_domain_directory_importable() -> None:
    import warden.domain.directory  # noqa: F401


def test_domain_directory_infrastructure_importable() -> None:
    import warden.domain.directory.infrastructure  # noqa: F401


def test_namespace_has_no_init() -> None:
    import warden

    assert getattr(warden, "__file__", None) is None
