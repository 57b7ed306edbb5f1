"""Tests for Policy, dispositions and header names."""

from __future__ import annotations

import pytest

from cspguard.policy.errors import DuplicateDirective, UnknownDirectiveName
from cspguard.policy.model import (
    CONTENT_SECURITY_POLICY,
    CONTENT_SECURITY_POLICY_REPORT_ONLY,
    Disposition,
    Policy,
    header_name_for,
    parse_policies,
)
from cspguard.policy.parser import DuplicatePolicy


class TestHeaderNames:
    def test_enforce(self):
        assert header_name_for(Disposition.enforce) == "Content-Security-Policy"

    def test_report_only(self):
        assert header_name_for(Disposition.report_only) == "Content-Security-Policy-Report-Only"

    def test_accepts_report_disposition_string(self):
        assert header_name_for("report") == CONTENT_SECURITY_POLICY_REPORT_ONLY
        assert header_name_for("enforce") == CONTENT_SECURITY_POLICY

    def test_unknown_disposition(self):
        with pytest.raises(ValueError):
            header_name_for("block")


class TestPolicy:
    def test_default_is_empty_enforce(self):
        policy = Policy()
        assert policy.disposition is Disposition.enforce
        assert len(policy.directives) == 0
        assert policy.serialize() == ""

    def test_parse(self):
        policy = Policy.parse("default-src 'self'; img-src *", Disposition.report_only)
        assert policy.directives.names() == ["default-src", "img-src"]
        assert policy.header_name == CONTENT_SECURITY_POLICY_REPORT_ONLY

    def test_as_header(self):
        policy = Policy.parse("default-src  'self' ;")
        assert policy.as_header() == ("Content-Security-Policy", "default-src 'self'")

    def test_header_follows_disposition_change(self):
        policy = Policy.parse("default-src 'self'")
        policy.disposition = Disposition.report_only
        assert policy.header_name == CONTENT_SECURITY_POLICY_REPORT_ONLY

    def test_parse_duplicates(self):
        with pytest.raises(DuplicateDirective):
            Policy.parse("img-src a; img-src b")
        policy = Policy.parse("img-src a; img-src b", duplicates=DuplicatePolicy.ignore)
        assert policy.serialize() == "img-src a"


class TestParsePolicies:
    def test_single_policy(self):
        policies = parse_policies("default-src 'self'")
        assert len(policies) == 1
        assert policies[0].serialize() == "default-src 'self'"

    def test_comma_separated_policies(self):
        policies = parse_policies(
            "default-src 'self'; img-src *, img-src 'self', script-src 'none'",
            Disposition.report_only,
        )
        assert [p.serialize() for p in policies] == [
            "default-src 'self'; img-src *",
            "img-src 'self'",
            "script-src 'none'",
        ]
        assert all(p.disposition is Disposition.report_only for p in policies)

    def test_blank_policies_skipped(self):
        assert parse_policies(" , ,") == []

    def test_any_bad_policy_fails(self):
        with pytest.raises(UnknownDirectiveName):
            parse_policies("default-src 'self', bogus x")
