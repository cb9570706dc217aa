"""Tests for building the full set of cached repositories."""

from __future__ import annotations

import logging
from dataclasses import fields
from unittest.mock import AsyncMock

import pytest

from cachegraph.cache.factory import (
    AuthoritativeRepositories,
    CachedRepositories,
    build_cached_repositories,
)
from cachegraph.cache.repositories import CachedRepository
from cachegraph.repository import protocols
from cachegraph.repository.errors import InvalidRepositoryError

PROTOCOLS = {
    "user": protocols.UserRepository,
    "organization": protocols.OrganizationRepository,
    "namespace": protocols.NamespaceRepository,
    "project": protocols.ProjectRepository,
    "document": protocols.DocumentRepository,
    "issue": protocols.IssueRepository,
    "comment": protocols.CommentRepository,
    "attachment": protocols.AttachmentRepository,
    "assignment": protocols.AssignmentRepository,
    "label": protocols.LabelRepository,
    "role": protocols.RoleRepository,
    "permission": protocols.PermissionRepository,
    "todo": protocols.TodoRepository,
    "notification": protocols.NotificationRepository,
}


@pytest.fixture
def repos() -> AuthoritativeRepositories:
    return AuthoritativeRepositories(
        **{name: AsyncMock(spec=protocol) for name, protocol in PROTOCOLS.items()}
    )


class TestBuildCachedRepositories:
    """Tests for build_cached_repositories."""

    def test_builds_every_entity(self, fake_redis, repos, tracer) -> None:
        """Each field holds a cached repository over its authoritative one."""
        cached = build_cached_repositories(fake_redis, repos, tracer=tracer)

        assert isinstance(cached, CachedRepositories)
        assert len(fields(cached)) == 14
        for field in fields(cached):
            repository = getattr(cached, field.name)
            assert isinstance(repository, CachedRepository)
            assert repository.resource_type.value == field.name
            assert repository.repo is getattr(repos, field.name)

    def test_shares_client_and_options(self, fake_redis, repos, tracer) -> None:
        """One client, logger and TTL are shared by all repositories."""
        logger = logging.getLogger("tests.factory")

        cached = build_cached_repositories(fake_redis, repos, tracer=tracer, logger=logger, ttl=60)

        for field in fields(cached):
            cache = getattr(cached, field.name).cache
            assert cache.client is fake_redis
            assert cache.logger is logger
            assert cache.tracer is tracer
            assert cache.backend.ttl == 60

    def test_missing_repository(self, fake_redis, repos) -> None:
        """A None authoritative repository is rejected."""
        incomplete = AuthoritativeRepositories(
            **{field.name: getattr(repos, field.name) for field in fields(repos)} | {"todo": None}
        )

        with pytest.raises(InvalidRepositoryError, match="repo"):
            build_cached_repositories(fake_redis, incomplete)

    def test_invalid_option(self, fake_redis, repos) -> None:
        """Invalid shared options fail the whole build."""
        with pytest.raises(InvalidRepositoryError, match="ttl"):
            build_cached_repositories(fake_redis, repos, ttl=0)

    def test_missing_client(self, repos) -> None:
        """A None client is rejected."""
        with pytest.raises(InvalidRepositoryError, match="client"):
            build_cached_repositories(None, repos)

    @pytest.mark.asyncio
    async def test_repositories_share_one_cache(self, fake_redis, repos, tracer, samples) -> None:
        """A document write wipes user entries cached through another repository."""
        cached = build_cached_repositories(fake_redis, repos, tracer=tracer)
        repos.user.get.return_value = samples.user

        await cached.user.get(samples.user.id)
        await cached.document.delete(samples.document.id)
        await cached.user.get(samples.user.id)

        assert repos.user.get.await_count == 2
