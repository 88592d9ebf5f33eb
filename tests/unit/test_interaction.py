"""Unit tests for the gesture state machine."""

from __future__ import annotations

import pytest

from graph_visualizer.models import Scene
from graph_visualizer.services import (
    IDLE,
    Button,
    InteractionState,
    Mode,
    PointerDown,
    PointerDrag,
    PointerUp,
    handle_event,
)


def run(scene, events, state=IDLE):
    redraws = []
    for event in events:
        scene, state, redraw = handle_event(scene, state, event)
        redraws.append(redraw)
    return scene, state, redraws


def edge_gesture(x1, y1, x2, y2):
    return [
        PointerDown(x1, y1, Button.SECONDARY),
        PointerDrag(x2, y2),
        PointerUp(x2, y2),
    ]


@pytest.fixture
def two_nodes(scene):
    scene.add_node(0, 0)
    scene.add_node(100, 0)
    return scene


# ---------- node creation ----------

def test_clicks_on_empty_space_create_numbered_nodes(scene):
    points = [(0, 0), (100, 0), (0, 100), (300, 300)]
    events = []
    for x, y in points:
        events += [PointerDown(x, y), PointerUp(x, y)]

    scene, state, _ = run(scene, events)

    assert [n.label for n in scene.nodes] == ["Node 0", "Node 1", "Node 2", "Node 3"]
    assert [(n.x, n.y) for n in scene.nodes] == points
    assert state == IDLE


def test_click_inside_detection_radius_does_not_create_node(two_nodes):
    scene, state, _ = run(two_nodes, [PointerDown(29, 0)])

    assert len(scene.nodes) == 2
    assert state.mode is Mode.MOVING_NODE
    assert state.selected == 0


def test_secondary_click_on_empty_space_also_creates_node(scene):
    scene, state, _ = run(scene, [PointerDown(10, 10, Button.SECONDARY)])

    assert len(scene.nodes) == 1
    assert state == IDLE


# ---------- moving ----------

def test_press_records_offset_from_centre(two_nodes):
    _, state, _ = run(two_nodes, [PointerDown(105, 3)])

    assert state.selected == 1
    assert state.offset == (5, 3)
    assert state.source is None
    assert state.drag_point is None


def test_move_keeps_node_anchored_under_pointer(two_nodes):
    scene, _, _ = run(two_nodes, [PointerDown(5, 5), PointerDrag(55, 205)])

    node = scene.node(0)
    assert (node.x, node.y) == (50, 200)


def test_move_recomputes_only_incident_edges(scene):
    for x, y in [(0, 0), (100, 0), (0, 100), (200, 200)]:
        scene.add_node(x, y)
    scene, _, _ = run(
        scene,
        edge_gesture(0, 0, 100, 0)
        + edge_gesture(0, 0, 0, 100)
        + edge_gesture(0, 100, 200, 200),
    )
    assert [e.weight for e in scene.edges] == [48, 48, 172]

    scene, state, _ = run(scene, [PointerDown(5, 5), PointerDrag(5, -95), PointerUp(5, -95)])

    assert (scene.node(0).x, scene.node(0).y) == (0, -100)
    assert [e.weight for e in scene.edges] == [89, 148, 172]
    assert state == IDLE


def test_drag_while_idle_is_ignored(two_nodes):
    scene, state, redraws = run(two_nodes, [PointerDrag(50, 50)])

    assert redraws == [False]
    assert state == IDLE
    assert [(n.x, n.y) for n in scene.nodes] == [(0, 0), (100, 0)]


# ---------- edge creation ----------

def test_edge_between_nodes_100_apart_weighs_48(two_nodes):
    scene, state, _ = run(two_nodes, edge_gesture(0, 0, 100, 0))

    assert len(scene.edges) == 1
    edge = scene.edge(0)
    assert (edge.source, edge.target, edge.weight) == (0, 1, 48)
    assert state == IDLE


def test_secondary_press_starts_edge_gesture(two_nodes):
    _, state, _ = run(two_nodes, [PointerDown(2, 1, Button.SECONDARY)])

    assert state.mode is Mode.CREATING_EDGE
    assert state.selected == 0
    assert state.source == 0
    assert state.drag_point == (2, 1)


def test_release_on_source_creates_no_edge(two_nodes):
    scene, state, _ = run(two_nodes, edge_gesture(0, 0, 10, 0))

    assert scene.edges == []
    assert state == IDLE


def test_release_on_empty_space_creates_no_edge(two_nodes):
    scene, _, _ = run(two_nodes, edge_gesture(0, 0, 50, 200))

    assert scene.edges == []
    assert len(scene.nodes) == 2


def test_repeated_gesture_creates_duplicate_edges(two_nodes):
    scene, _, _ = run(two_nodes, edge_gesture(0, 0, 100, 0) + edge_gesture(0, 0, 100, 0))

    assert len(scene.edges) == 2
    assert scene.edge(0) is not scene.edge(1)
    assert scene.edge(0).weight == scene.edge(1).weight == 48


def test_edge_weight_may_be_negative(scene):
    scene.add_node(0, 0)
    scene.add_node(40, 0)

    scene, _, _ = run(scene, edge_gesture(0, 0, 40, 0))

    assert scene.edge(0).weight == -12


def test_overlapping_nodes_first_created_wins(scene):
    scene.add_node(0, 0)
    scene.add_node(35, 0)

    # (20, 0) is closer to the second node but the first one is hit
    _, state, _ = run(scene, [PointerDown(20, 0)])

    assert state.selected == 0


def test_drag_highlights_only_potential_target(two_nodes):
    scene = two_nodes
    scene.add_node(0, 100)

    scene, state, _ = run(scene, [PointerDown(0, 0, Button.SECONDARY), PointerDrag(95, 0)])
    assert [n.highlighted for n in scene.nodes] == [False, True, False]
    assert state.drag_point == (95, 0)

    scene, state, _ = run(scene, [PointerDrag(0, 95)], state)
    assert [n.highlighted for n in scene.nodes] == [False, False, True]

    scene, state, _ = run(scene, [PointerDrag(0, 5)], state)
    assert not any(n.highlighted for n in scene.nodes)

    scene, state, _ = run(scene, [PointerDrag(300, 300)], state)
    assert not any(n.highlighted for n in scene.nodes)
    assert state.mode is Mode.CREATING_EDGE


@pytest.mark.parametrize(
    "events",
    [
        edge_gesture(0, 0, 100, 0),
        edge_gesture(0, 0, 0, 0),
        edge_gesture(0, 0, 500, 500),
        [PointerDown(0, 0), PointerDrag(20, 20), PointerUp(20, 20)],
        [PointerDown(300, 300), PointerUp(300, 300)],
        [PointerUp(0, 0)],
    ],
)
def test_release_always_resets_state_and_highlights(two_nodes, events):
    scene, state, redraws = run(two_nodes, events)

    assert state == IDLE
    assert state.mode is Mode.IDLE
    assert not any(n.highlighted for n in scene.nodes)
    assert redraws[-1] is True


def test_release_clears_highlight_left_by_drag(two_nodes):
    scene, state, _ = run(two_nodes, [PointerDown(0, 0, Button.SECONDARY), PointerDrag(100, 0)])
    assert scene.node(1).highlighted

    scene, state, _ = run(scene, [PointerUp(300, 300)], state)

    assert not scene.node(1).highlighted
    assert scene.edges == []


def test_unknown_event_type_is_rejected():
    with pytest.raises(TypeError):
        handle_event(Scene(), InteractionState(), object())
