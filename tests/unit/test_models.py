"""Tests for models."""

import dataclasses

import pytest

from papergrid import Alignment, Border, Ident, RenderPlan


class TestAlignment:
    """Tests for Alignment."""

    def test_values(self) -> None:
        assert Alignment("left") is Alignment.LEFT
        assert Alignment("center") is Alignment.CENTER
        assert Alignment("right") is Alignment.RIGHT


class TestIdent:
    """Tests for Ident."""

    def test_defaults(self) -> None:
        assert Ident() == Ident(0, 0, 0, 0)

    @pytest.mark.parametrize("side", ["top", "bottom", "left", "right"])
    def test_negative_raises(self, side: str) -> None:
        with pytest.raises(ValueError, match=f"{side} ident must be non-negative"):
            Ident(**{side: -1})

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Ident().top = 1  # type: ignore[misc]


class TestBorder:
    """Tests for Border."""

    def test_defaults(self) -> None:
        border = Border()
        assert (border.top, border.bottom, border.left, border.right, border.corner) == (
            "-",
            "-",
            "|",
            "|",
            "+",
        )


class TestRenderPlan:
    """Tests for RenderPlan."""

    def test_default_draws_nothing(self) -> None:
        plan = RenderPlan()
        assert not any(
            [
                plan.top,
                plan.bottom,
                plan.left,
                plan.right,
                plan.left_connection,
                plan.right_connection,
            ]
        )
        assert plan.width == 0
        assert plan.height == 0

    def test_boxed(self) -> None:
        plan = RenderPlan.boxed(width=3, height=2)
        assert plan == RenderPlan(
            top=True,
            bottom=True,
            left=True,
            right=True,
            left_connection=True,
            right_connection=True,
            width=3,
            height=2,
        )

    def test_builders_return_new_plans(self) -> None:
        plan = RenderPlan.boxed()
        trimmed = plan.without_top().without_left().without_left_connection()
        assert plan.top and plan.left and plan.left_connection
        assert not (trimmed.top or trimmed.left or trimmed.left_connection)
        assert trimmed.bottom and trimmed.right and trimmed.right_connection

    def test_with_size(self) -> None:
        plan = RenderPlan.boxed().with_size(4, 5)
        assert (plan.width, plan.height) == (4, 5)

    def test_for_position_origin_is_boxed(self) -> None:
        assert RenderPlan.for_position(0, 0, 3, 1) == RenderPlan.boxed(width=3, height=1)

    def test_for_position_first_row(self) -> None:
        plan = RenderPlan.for_position(0, 1, 3, 1)
        assert plan.top
        assert not plan.left
        assert not plan.left_connection
        assert plan.right_connection

    def test_for_position_first_column(self) -> None:
        plan = RenderPlan.for_position(2, 0, 3, 1)
        assert not plan.top
        assert plan.left
        assert plan.left_connection

    def test_for_position_interior(self) -> None:
        plan = RenderPlan.for_position(1, 1, 7, 2)
        assert plan == RenderPlan(
            bottom=True,
            right=True,
            right_connection=True,
            width=7,
            height=2,
        )
