import re

import pytest

from data.diagrams import (
    ADJACENCY,
    DATA_POINTS,
    ErrorGridState,
    MetricPreset,
    StageFrame,
    format_rate,
    next_step,
)


def active_checks_in(html: str) -> set[int]:
    return {
        int(check)
        for active, check in re.findall(r'class="grid-check kind-[zx]( is-active)?"\s+data-check="(\d)"', html)
        if active
    }


# Error grid

def test_single_error_lights_its_checks():
    grid = ErrorGridState().toggle(0)
    assert grid.active_checks() == [0, 1]


def test_two_errors_cancel_on_shared_check():
    grid = ErrorGridState().toggle(0).toggle(1)
    # Check 0 sees both errors (even); checks 1 and 2 see one each
    assert grid.active_checks() == [1, 2]
    assert grid.violation_count() == 2


def test_center_point_touches_every_check():
    grid = ErrorGridState().toggle(4)
    assert grid.active_checks() == [0, 1, 2, 3]


@pytest.mark.parametrize("point", DATA_POINTS)
def test_double_toggle_restores_state(point):
    start = ErrorGridState().toggle(2).toggle(3)
    again = start.toggle(point).toggle(point)
    assert set(again.errors) == set(start.errors)
    assert again.active_checks() == start.active_checks()


def test_active_checks_match_parity_for_every_subset():
    for mask in range(1 << len(DATA_POINTS)):
        points = [p for p in DATA_POINTS if mask & (1 << p)]
        grid = ErrorGridState.from_points(points)
        expected = [
            check for check in range(4)
            if sum(1 for p in points if check in ADJACENCY[p]) % 2 == 1
        ]
        assert grid.active_checks() == expected


def test_caption_reports_stable_or_violations():
    assert ErrorGridState().caption() == "System is stable."
    assert ErrorGridState().toggle(0).caption() == "Detected 2 parity violations."
    # Errors present but every check balanced
    balanced = ErrorGridState.from_points([0, 1, 2, 3])
    assert balanced.active_checks() == []
    assert balanced.caption() == "Detected 0 parity violations."


def test_unknown_point_is_rejected():
    with pytest.raises(ValueError):
        ErrorGridState().toggle(5)
    with pytest.raises(ValueError):
        ErrorGridState.from_points([9])


def test_toggle_query_carries_current_errors():
    grid = ErrorGridState.from_points([3, 1])
    assert grid.toggle_query(4) == "errors=3&errors=1&toggle=4"


def test_error_grid_endpoint_toggles(client):
    response = client.get("/diagrams/error-grid", params={"toggle": 0})
    assert response.status_code == 200
    assert 'data-errors="0"' in response.text
    assert active_checks_in(response.text) == {0, 1}
    assert "Detected 2 parity violations." in response.text


def test_error_grid_endpoint_double_toggle_is_stable(client):
    response = client.get("/diagrams/error-grid", params=[("errors", 0), ("toggle", 0)])
    assert 'data-errors=""' in response.text
    assert active_checks_in(response.text) == set()
    assert "System is stable." in response.text


def test_error_grid_endpoint_rejects_unknown_points(client):
    assert client.get("/diagrams/error-grid", params={"toggle": 7}).status_code == 400
    assert client.get("/diagrams/error-grid", params={"errors": 7}).status_code == 400


# Stage pipeline

def test_steps_cycle_in_order():
    step = 0
    seen = []
    for _ in range(9):
        seen.append(step)
        step = next_step(step)
    assert seen == [0, 1, 2, 3, 0, 1, 2, 3, 0]


def test_stage_frames_highlight_one_stage():
    frames = [StageFrame(step=s) for s in range(4)]
    assert [f.input_active for f in frames] == [True, False, False, False]
    assert [f.transformer_active for f in frames] == [False, True, True, False]
    assert [f.attention_active for f in frames] == [False, True, False, False]
    assert [f.output_active for f in frames] == [False, False, False, True]
    assert [f.first_arrow_lit for f in frames] == [False, True, True, True]
    assert [f.second_arrow_lit for f in frames] == [False, False, False, True]
    assert [f.output_symbol for f in frames] == ["?", "?", "?", "X"]
    assert frames[2].pips() == [False, False, True, False]


def test_stage_frame_rejects_out_of_range_step():
    with pytest.raises(ValueError):
        StageFrame(step=4)


def test_stages_endpoint_carries_next_step(client):
    response = client.get("/diagrams/stages", params={"step": 3})
    assert response.status_code == 200
    assert 'data-step="3"' in response.text
    assert 'id="stage-next" name="step" value="0"' in response.text
    # The frame alone is swapped; the polling wrapper is not re-rendered
    assert 'id="stage-diagram"' not in response.text


def test_stage_widget_polls_on_a_fixed_interval(client):
    html = client.get("/").text
    wrapper = re.search(r'<div id="stage-diagram"[^>]*>', html).group(0)
    assert 'hx-trigger="every 2000ms"' in wrapper
    assert 'hx-include="#stage-next"' in wrapper
    assert 'hx-target="#stage-frame"' in wrapper
    assert 'id="stage-next" name="step" value="1"' in html


def test_stages_endpoint_validates_step(client):
    assert client.get("/diagrams/stages", params={"step": 4}).status_code == 422
    assert client.get("/diagrams/stages", params={"step": -1}).status_code == 422


# Metric chart

@pytest.mark.parametrize(
    "value, expected",
    [(3.5, "3.50%"), (2.9, "2.90%"), (0.01, "0.01%"), (0.0099, "0.0099%"), (0.0041, "0.0041%"), (0.0009, "0.0009%")],
)
def test_format_rate(value, expected):
    assert format_rate(value) == expected


def test_default_preset_is_distance_five():
    metric = MetricPreset()
    assert metric.distance == 5
    assert (metric.baseline, metric.alternative) == (3.6, 2.75)


def test_taller_bar_fills_eighty_percent():
    for distance in MetricPreset.choices():
        metric = MetricPreset(distance=distance)
        assert metric.baseline_height() == pytest.approx(80.0)
        assert 1.0 <= metric.alternative_height() < 80.0


def test_unknown_distance_is_rejected():
    with pytest.raises(ValueError):
        MetricPreset(distance=7)


def test_metric_endpoint_formats_small_values(client):
    response = client.get("/diagrams/metric-chart", params={"distance": 11})
    assert response.status_code == 200
    assert "0.0041%" in response.text
    assert "0.0009%" in response.text


def test_metric_endpoint_formats_large_values(client):
    response = client.get("/diagrams/metric-chart", params={"distance": 3})
    assert "3.50%" in response.text
    assert "2.90%" in response.text
    assert 'data-distance="3"' in response.text


def test_metric_endpoint_rejects_unknown_distance(client):
    assert client.get("/diagrams/metric-chart", params={"distance": 7}).status_code == 400
