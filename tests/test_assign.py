#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for bulk tag assignment.
"""

from pachca_tags.assign import BulkAssigner
from pachca_tags.models import AssignmentRow
from pachca_tags.tags import TagDirectory
from pachca_tags.users import UserDirectory


def make_assigner(client, dry_run=False):
    return BulkAssigner(TagDirectory(client), UserDirectory(client), dry_run=dry_run)


def row(email, tags, line=2):
    return AssignmentRow(line=line, email=email, tags=tags)


def test_existing_tags_first_then_new(client, workspace, capsys):
    results = make_assigner(client).process_rows([row("a@x.com", ["backend", "qa"])])

    user = workspace["users"][0]
    assert user["list_tags"] == ["qa", "backend"]
    assert results == {"total": 1, "processed": 1, "skipped": 0, "success": 1, "failed": 0}
    assert "[OK] a@x.com: tags assigned: qa, backend" in capsys.readouterr().out


def test_email_match_ignores_case(client, workspace):
    make_assigner(client).process_rows([row("bob@x.com", ["design"])])

    assert workspace["users"][1]["list_tags"] == ["design"]


def test_reserved_rows_make_no_api_calls(client, workspace, fake_session):
    rows = [
        row("tags_from_workspace", ["backend", "qa"]),
        row("EXAMPLE@example.com", ["backend"]),
        row("", ["qa"]),
        row("a@x.com", []),
    ]

    results = make_assigner(client).process_rows(rows)

    # only the up-front tag listing
    assert [c[:2] for c in fake_session.calls] == [("GET", "/group_tags")]
    assert results["skipped"] == 4
    assert results["success"] == 0
    assert results["failed"] == 0
    assert results["processed"] == 0


def test_new_tag_created_once_and_reused(client, workspace, fake_session):
    rows = [row("a@x.com", ["lead"]), row("bob@x.com", ["lead", "qa"]), row("carol@x.com", ["lead"])]

    assigner = make_assigner(client)
    results = assigner.process_rows(rows)

    assert len(fake_session.calls_to("POST", "/group_tags")) == 1
    assert assigner.existing_tags["lead"] == 42
    assert results["success"] == 3
    assert workspace["users"][2]["list_tags"] == ["design", "qa", "lead"]


def test_duplicate_conflict_is_resolved_by_name(client, workspace, fake_session):
    # fails the initial listing so "qa" looks new, then reports it as taken
    listings = iter([(500, "boom"), (200, {"data": workspace["tags"]})])
    fake_session.add("GET", "/group_tags", handler=lambda params, body: next(listings))

    assigner = make_assigner(client)
    results = assigner.process_rows([row("a@x.com", ["qa"]), row("bob@x.com", ["qa"])])

    assert len(fake_session.calls_to("POST", "/group_tags")) == 1
    assert assigner.existing_tags == {"qa": 1}
    assert results["success"] == 2


def test_assigning_twice_is_idempotent(client, workspace):
    rows = [row("carol@x.com", ["backend", "design"])]

    make_assigner(client).process_rows(rows)
    first = list(workspace["users"][2]["list_tags"])
    make_assigner(client).process_rows(rows)

    assert first == ["design", "qa", "backend"]
    assert workspace["users"][2]["list_tags"] == first


def test_unknown_user_fails_row_and_continues(client, workspace, capsys):
    results = make_assigner(client).process_rows([row("ghost@x.com", ["qa"]), row("a@x.com", ["design"])])

    assert results["failed"] == 1
    assert results["success"] == 1
    assert workspace["users"][0]["list_tags"] == ["qa", "design"]
    assert "User with email ghost@x.com not found" in capsys.readouterr().err


def test_failed_update_reports_body(client, workspace, fake_session, capsys):
    fake_session.add("PUT", "/users/10", 422, '{"errors":["bad tags"]}')

    results = make_assigner(client).process_rows([row("a@x.com", ["design"])])

    assert results["failed"] == 1
    assert "bad tags" in capsys.readouterr().err


def test_unreadable_user_is_not_overwritten(client, workspace, fake_session):
    fake_session.add("GET", "/users/10", 500, "boom")

    results = make_assigner(client).process_rows([row("a@x.com", ["design"])])

    assert results["failed"] == 1
    assert fake_session.calls_to("PUT") == []


def test_api_error_in_one_row_does_not_stop_batch(client, workspace, fake_session):
    fake_session.add("GET", "/users/10", 200, "not json")

    results = make_assigner(client).process_rows([row("a@x.com", ["design"]), row("bob@x.com", ["qa"])])

    assert results["failed"] == 1
    assert results["success"] == 1
    assert workspace["users"][1]["list_tags"] == ["qa"]


def test_dry_run_makes_no_changes(client, workspace, fake_session, capsys):
    results = make_assigner(client, dry_run=True).process_rows([row("a@x.com", ["lead", "qa"])])

    assert fake_session.calls_to("POST") == []
    assert fake_session.calls_to("PUT") == []
    assert workspace["users"][0]["list_tags"] == ["qa"]
    assert results["success"] == 1
    out = capsys.readouterr().out
    assert "Would create tag 'lead'" in out
    assert "Would assign tags to a@x.com: qa, lead" in out


def test_created_tag_without_id_fails_only_its_row(client, workspace, fake_session):
    fake_session.add("POST", "/group_tags", 201, {"data": None})

    assigner = make_assigner(client)
    results = assigner.process_rows([
        row("a@x.com", ["lead"]),
        row("bob@x.com", ["qa"]),
        row("carol@x.com", ["lead"]),
    ])

    assert results == {"total": 3, "processed": 3, "skipped": 0, "success": 2, "failed": 1}
    assert len(fake_session.calls_to("POST", "/group_tags")) == 1
    assert workspace["users"][0]["list_tags"] == ["qa"]
    assert workspace["users"][1]["list_tags"] == ["qa"]
