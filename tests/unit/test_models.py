# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import dataclasses

import pytest

from viascan.models import FIELD_NAMES, PhaseResult, ProbeResult, ProbeTarget, TriState


def test_tristate_renders_three_distinct_symbols():
    symbols = {str(state) for state in TriState}
    assert symbols == {"-", "t", "f"}
    assert str(TriState.NOT_RUN) == "-"
    assert TriState.NOT_RUN.attempted is False
    assert TriState.SUCCEEDED.attempted is True
    assert TriState.FAILED.attempted is True


def test_default_result_has_nothing_attempted():
    result = ProbeResult.for_target(ProbeTarget(host_header="h.example", origin="o.example"))
    assert result.resolved is TriState.NOT_RUN
    assert result.no_via == PhaseResult()
    assert result.as_row() == ["o.example", "h.example", "-", "-", "-", "0", "0", "", "", "", ""]
    assert len(result.as_row()) == len(FIELD_NAMES)


def test_http_attempts_require_resolution():
    with pytest.raises(ValueError):
        ProbeResult(origin="o", host_header="h", resolved=TriState.FAILED, no_via=PhaseResult.failed())


def test_via_attempt_requires_successful_no_via():
    with pytest.raises(ValueError):
        ProbeResult(
            origin="o",
            host_header="h",
            resolved=TriState.SUCCEEDED,
            no_via=PhaseResult.failed(),
            via=PhaseResult(outcome=TriState.SUCCEEDED, body_size=10),
        )


def test_results_are_immutable():
    result = ProbeResult(origin="o", host_header="h")
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.resolved = TriState.SUCCEEDED  # type: ignore[misc]


def test_flat_field_view_matches_phases():
    result = ProbeResult(
        origin="192.0.2.1",
        host_header="a.example",
        resolved=TriState.SUCCEEDED,
        no_via=PhaseResult(TriState.SUCCEEDED, 100, "gzip", "nginx"),
        via=PhaseResult(TriState.SUCCEEDED, 300, "", "nginx"),
    )
    assert result.no_via_outcome is TriState.SUCCEEDED
    assert result.via_outcome is TriState.SUCCEEDED
    assert (result.no_via_body_size, result.via_body_size) == (100, 300)
    assert (result.no_via_content_encoding, result.via_content_encoding) == ("gzip", "")
    assert (result.no_via_server, result.via_server) == ("nginx", "nginx")
    assert result.as_row() == ["192.0.2.1", "a.example", "t", "t", "t", "100", "300", "gzip", "", "nginx", "nginx"]
