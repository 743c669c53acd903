from coachtree.graph import assign_levels, build_graph, find_roots, is_root
from coachtree.ingest import sample_rows
from coachtree.models import Coach, Role, Row


def _row(season, head, coordinator, role="Offensive Coordinator", team="Team"):
    return Row(
        season=season,
        head_coach=head,
        coordinator=coordinator,
        role=role,
        team=team,
        wins=8,
        losses=9,
        ties=0,
    )


def _role(season, role="Head Coach", team="Team"):
    return Role(season=season, team=team, role=role, record="8-9-0")


def _leveled_sample():
    graph = build_graph(sample_rows())
    assign_levels(graph.coaches)
    return graph


def test_sample_levels():
    graph = _leveled_sample()
    levels = {name: coach.level for name, coach in graph.coaches.items()}

    assert levels["Andy Reid"] == 0
    assert levels["Sean McVay"] == 0
    assert levels["Eric Bieniemy"] == 1
    assert levels["Steve Spagnuolo"] == 1
    assert levels["Kevin O'Connell"] == 1
    assert levels["Matt LaFleur"] == 1
    assert levels["Wes Phillips"] == 2
    assert levels["Ed Donatell"] == 2
    assert levels["Nathaniel Hackett"] == 2
    assert levels["Justin Outten"] == 3
    assert levels["Ejiro Evero"] == 3
    assert all(isinstance(level, int) and level >= 0 for level in levels.values())


def test_sample_roots():
    graph = build_graph(sample_rows())

    roots = [coach.name for coach in find_roots(graph.coaches)]

    assert roots == ["Andy Reid", "Sean McVay"]
    assert not is_root(graph.coach("Kevin O'Connell"))


def test_root_detection_rules():
    assert is_root(Coach(name="pure head", roles=[_role(2020), _role(2021)]))
    assert not is_root(Coach(name="pure coordinator", roles=[_role(2020, "Defensive Coordinator")]))
    assert is_root(
        Coach(name="same year", roles=[_role(2020, "Defensive Coordinator"), _role(2020)])
    )
    assert is_root(
        Coach(name="head first", roles=[_role(2022, "Defensive Coordinator"), _role(2019)])
    )
    assert not is_root(
        Coach(name="coordinator first", roles=[_role(2021), _role(2018, "Defensive Coordinator")])
    )
    assert not is_root(Coach(name="no roles"))


def test_first_hop_coordinators_are_level_one():
    graph = _leveled_sample()

    for root in find_roots(graph.coaches):
        assert root.level == 0
        for name in root.coordinator_names:
            assert graph.coaches[name].level == 1


def test_longer_path_raises_level_without_repropagating():
    # X is reached at level 1 from R1 and only later raised to 2 through R2 -> P.
    rows = [
        _row(2020, "R1", "X"),
        _row(2020, "R2", "P"),
        _row(2021, "P", "X"),
        _row(2021, "X", "Y"),
    ]
    graph = build_graph(rows)

    assign_levels(graph.coaches)

    assert [coach.name for coach in find_roots(graph.coaches)] == ["R1", "R2"]
    assert graph.coach("P").level == 1
    assert graph.coach("X").level == 2
    assert graph.coach("Y").level == 2


def test_unreachable_coaches_placed_below_tree():
    coaches = {
        "A": Coach(name="A", roles=[_role(2020)], coordinator_names={"B"}),
        "B": Coach(name="B", roles=[_role(2020, "Offensive Coordinator")], head_coach_names={"A"}),
        "Q": Coach(
            name="Q",
            roles=[_role(2021), _role(2020, "Offensive Coordinator")],
            coordinator_names={"Z"},
        ),
        "Z": Coach(name="Z", roles=[_role(2021, "Defensive Coordinator")], head_coach_names={"Q"}),
    }

    assign_levels(coaches)

    assert coaches["A"].level == 0
    assert coaches["B"].level == 1
    assert coaches["Q"].level == 2
    assert coaches["Z"].level == 3


def test_self_loop_does_not_crash():
    # Known exception to "roots sit at level 0": the root is its own coordinator,
    # so the first BFS hop raises it to level 1.
    graph = build_graph([_row(2020, "Solo Coach", "Solo Coach")])

    assign_levels(graph.coaches)

    coach = graph.coach("Solo Coach")
    assert is_root(coach)
    assert coach.level == 1
