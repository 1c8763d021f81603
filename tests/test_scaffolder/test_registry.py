"""Tests for the template registry and capability interfaces."""

from __future__ import annotations

import pytest

from layerforge.scaffolder.errors import InvalidInputError
from layerforge.scaffolder.naming import derive_name
from layerforge.scaffolder.registry import (
    MODULE_ORDER,
    TEMPLATE_REGISTRY,
    ArtifactKind,
    ComponentKind,
    crud_capabilities,
    layer_context,
    lookup,
)


pytestmark = pytest.mark.unit


class TestComponentKind:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("controller", ComponentKind.CONTROLLER),
            ("Controller", ComponentKind.CONTROLLER),
            ("REPOSITORY", ComponentKind.REPOSITORY),
            ("UseCase", ComponentKind.USECASE),
            (" usecase ", ComponentKind.USECASE),
        ],
    )
    def test_parse_case_insensitive(self, raw, expected):
        assert ComponentKind.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["service", "model", "", "use-case"])
    def test_parse_unknown(self, raw):
        with pytest.raises(InvalidInputError, match="unknown component kind"):
            ComponentKind.parse(raw)

    def test_artifact_mapping(self):
        assert ComponentKind.CONTROLLER.artifact is ArtifactKind.CONTROLLER
        assert ComponentKind.USECASE.artifact is ArtifactKind.USECASE


class TestRegistry:
    def test_every_kind_registered(self):
        assert set(TEMPLATE_REGISTRY) == set(ArtifactKind)

    def test_module_order(self):
        assert MODULE_ORDER == (
            ArtifactKind.MODEL,
            ArtifactKind.CONTROLLER,
            ArtifactKind.REPOSITORY,
            ArtifactKind.USECASE,
        )

    @pytest.mark.parametrize(
        "kind, directory",
        [
            (ArtifactKind.MODEL, "internal/entity"),
            (ArtifactKind.CONTROLLER, "internal/delivery/http"),
            (ArtifactKind.REPOSITORY, "internal/repository"),
            (ArtifactKind.USECASE, "internal/usecase"),
        ],
    )
    def test_directories(self, kind, directory):
        assert lookup(kind).directory == directory

    def test_file_name_with_suffix(self):
        entry = lookup(ArtifactKind.CONTROLLER)
        assert entry.file_name(derive_name("Order"), "handler", ".go") == "order_handler.go"

    def test_file_name_without_suffix(self):
        entry = lookup(ArtifactKind.MODEL)
        assert entry.file_name(derive_name("Order"), entry.module_suffix, ".go") == "order.go"


class TestCapabilities:
    def test_crud_signatures(self):
        signatures = [c.signature for c in crud_capabilities(derive_name("Order"))]
        assert signatures == [
            "GetAll() ([]entity.Order, error)",
            "GetByID(id uint) (*entity.Order, error)",
            "Create(order *entity.Order) error",
            "Update(order *entity.Order) error",
            "Delete(id uint) error",
        ]

    def test_stub_context_has_no_capabilities(self):
        context = layer_context(derive_name("Order"), crud=False)
        assert context["capabilities"] == []
        assert "ImportPath" not in context

    def test_crud_context(self):
        context = layer_context(derive_name("Order"), crud=True, import_path="shop")
        assert context["Name"] == "Order"
        assert context["LowerName"] == "order"
        assert context["ImportPath"] == "shop"
        assert len(context["capabilities"]) == 5
