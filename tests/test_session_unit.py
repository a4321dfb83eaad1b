import math

import pytest

from areasolver.session import Session


def test_default_session() -> None:
    session = Session()
    assert session.f_expr == "x^2-2*x"
    assert session.g_expr == "6*x-x^2"
    assert session.xs == [-2.0, 0.0, 1.0, 2.0, 4.0]
    assert session.ys_f == [8.0, 0.0, -1.0, 0.0, 8.0]
    assert session.ys_g == [-16.0, 0.0, 5.0, 8.0, 8.0]
    assert session.intersections == pytest.approx([0.0, 4.0], abs=1e-6)
    assert session.limit_from == pytest.approx(0.0, abs=1e-6)
    assert session.limit_to == pytest.approx(4.0, abs=1e-6)
    assert session.no_intersection is False
    assert session.steps[1]["content"] == "Roots: x = 0.000000, 4.000000"


def test_area_is_recomputed_on_demand() -> None:
    session = Session()
    assert session.area_result()["area"] == pytest.approx(64 / 3, rel=1e-3)

    session.set_limits(4.0, 0.0)
    assert (session.limit_from, session.limit_to) == (0.0, 4.0)
    session.set_limits(0.0, 2.0)
    # ∫₀² (8x - 2x²) dx = 16 - 16/3
    assert session.area_result()["area"] == pytest.approx(32 / 3, rel=1e-6)


def test_identical_expressions_have_no_intersection() -> None:
    session = Session("x", "x")
    assert session.intersections == []
    assert session.no_intersection is True
    assert session.limit_from is None and session.limit_to is None
    assert math.isnan(session.area_result()["area"])
    assert session.steps[1]["content"] == "No intersection points were found."


def test_editing_an_expression_rebuilds_everything() -> None:
    session = Session()
    session.set_g("x^2+1")
    # x^2 - 2x = x^2 + 1  →  x = -0.5
    assert session.g_expr == "x^2+1"
    assert session.intersections == pytest.approx([-0.5], abs=1e-9)
    assert session.limit_from == session.limit_to
    assert session.area_result()["area"] == 0
    assert session.ys_g[0] == 5.0

    session.set_f("x^2+5")
    assert session.no_intersection is True
    assert session.limit_from is None


def test_sample_table_columns() -> None:
    session = Session()
    session.add_column()
    session.add_column(4)
    assert session.xs == [-2.0, 0.0, 1.0, 2.0, 4.0, 0.0, 4.0]
    assert session.ys_f[5:] == [0.0, 8.0]

    session.set_x(0, 3)
    assert session.xs[0] == 3.0
    assert session.ys_f[0] == 3.0
    assert session.ys_g[0] == 9.0
    with pytest.raises(IndexError):
        session.set_x(99, 1.0)


def test_undefined_points_in_table() -> None:
    session = Session("sqrt(x)", "x", [-2, 0, 4])
    assert session.ys_f == [None, 0.0, 2.0]
    assert session.ys_g == [-2.0, 0.0, 4.0]


def test_malformed_expression_never_raises() -> None:
    session = Session("2x +", "x")
    assert session.ys_f == [None] * 5
    assert session.no_intersection is True
    assert session.to_dict()["area"] is None


def test_settings_override_scan_domain() -> None:
    session = Session(settings={"scan_min": -1.0, "scan_max": 1.0, "scan_steps": 20})
    assert session.intersections == pytest.approx([0.0], abs=1e-9)
    assert session.limit_from == session.limit_to


def test_to_dict_snapshot() -> None:
    data = Session().to_dict()
    assert data["f"] == "x^2 - 2x"
    assert data["f_normalized"] == "x^2-2*x"
    assert data["f_latex"] == "x^{ 2 }-2x"
    assert data["no_intersection"] is False
    assert len(data["steps"]) == 2
    assert data["area"] == pytest.approx(64 / 3, rel=1e-3)
    assert "Simpson" in data["area_detail"]


def test_plot_data_from_session() -> None:
    data = Session().plot_data()
    assert len(data["x"]) == 500
    assert data["x"][0] == pytest.approx(-3.0)
    assert data["x"][-1] == pytest.approx(5.0)
    assert data["shade"] is not None


def test_bad_settings_values_fall_back_to_defaults() -> None:
    session = Session(settings={"scan_steps": "many", "f": 3, "xs": 5})
    assert session.f_raw == "x^2 - 2x"
    assert session.xs == [-2.0, 0.0, 1.0, 2.0, 4.0]
    assert session.intersections == pytest.approx([0.0, 4.0], abs=1e-6)
