"""Unit tests for the query executor."""

from __future__ import annotations

import pytest

from warden.domain.directory.predicates import (
    by_claim,
    by_login,
    by_normalized_email,
    by_role,
)
from warden.domain.directory.principal import Principal
from warden.domain.directory.query import QueryExecutor
from warden.foundation.domain.directory_value_objects import Claim, LoginInfo


def _with_claims(principal_id: str, *claims: Claim) -> Principal:
    return Principal(id=principal_id, claims=list(claims))


@pytest.mark.unit
class TestFindAll:
    def test_returns_matches_in_creation_order(self) -> None:
        admin = Claim("role", "admin-9f2c")
        records = [
            _with_claims("a", admin, Claim("misc", "1")),
            _with_claims("b", admin, Claim("misc", "2"), Claim("misc", "3")),
            _with_claims("c", Claim("misc", "4")),
            _with_claims("d", Claim("misc", "5"), Claim("misc", "6")),
            _with_claims("e", Claim("misc", "7")),
            _with_claims("f"),
            _with_claims("g", admin),
        ]
        result = QueryExecutor(records).find_all(by_claim("role", "admin-9f2c"))
        assert [p.id for p in result] == ["a", "b", "g"]

    def test_not_reordered_by_field_values(self) -> None:
        records = [
            Principal(id="zeta", roles={"ADMIN"}),
            Principal(id="alpha", roles={"ADMIN"}),
            Principal(id="mid", roles={"ADMIN"}),
        ]
        result = QueryExecutor(records).find_all(by_role("ADMIN"))
        assert [p.id for p in result] == ["zeta", "alpha", "mid"]

    def test_no_match_is_empty_list(self) -> None:
        assert QueryExecutor([Principal(id="a")]).find_all(by_role("ADMIN")) == []

    def test_empty_snapshot(self) -> None:
        assert QueryExecutor([]).find_all(by_role("ADMIN")) == []


@pytest.mark.unit
class TestFind:
    def test_returns_first_match(self) -> None:
        records = [
            Principal(id="a", normalized_email="A@TEST"),
            Principal(id="b", normalized_email="B@TEST"),
            Principal(id="c", normalized_email="C@TEST"),
            Principal(id="d", normalized_email="D@TEST"),
        ]
        found = QueryExecutor(records).find(by_normalized_email("B@TEST"))
        assert found is not None
        assert found.id == "b"

    def test_first_of_many(self) -> None:
        records = [Principal(id="a", roles={"R"}), Principal(id="b", roles={"R"})]
        found = QueryExecutor(records).find(by_role("R"))
        assert found is not None
        assert found.id == "a"

    def test_unique_login_owner(self) -> None:
        records = [
            Principal(id="a", logins=[LoginInfo("p", "k1"), LoginInfo("p", "k2")]),
            Principal(id="b", logins=[LoginInfo("p", "k3"), LoginInfo("q", "k4")]),
            Principal(id="c", logins=[LoginInfo("p", "k5")]),
        ]
        found = QueryExecutor(records).find(by_login("q", "k4"))
        assert found is not None
        assert found.id == "b"

    def test_absent_is_none(self) -> None:
        records = [Principal(id="a", logins=[LoginInfo("p", "k1")])]
        assert QueryExecutor(records).find(by_login("p", "missing")) is None

    def test_returns_same_objects(self) -> None:
        record = Principal(id="a", roles={"R"})
        assert QueryExecutor([record]).find(by_role("R")) is record


@pytest.mark.unit
class TestSnapshotSemantics:
    def test_snapshot_taken_at_construction(self) -> None:
        records = [Principal(id="a", roles={"R"})]
        executor = QueryExecutor(records)
        records.append(Principal(id="b", roles={"R"}))
        assert len(executor) == 1
        assert [p.id for p in executor.find_all(by_role("R"))] == ["a"]

    def test_accepts_generators(self) -> None:
        executor = QueryExecutor(Principal(id=str(i)) for i in range(3))
        assert len(executor) == 3

    def test_count(self) -> None:
        records = [Principal(id="a", roles={"R"}), Principal(id="b"), Principal(id="c", roles={"R"})]
        assert QueryExecutor(records).count(by_role("R")) == 2
