"""Tests for jamroutes.routing.builder — filesystem walk to RouteNode tree."""

import logging

import pytest

from jamroutes.errors import DuplicateLayoutError
from jamroutes.ignore import build_ignore
from jamroutes.routing.builder import RouteTreeBuilder, order_siblings
from jamroutes.routing.types import NodeKind, RouteNode
from jamroutes.testing import MemoryFileSystem

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class _RecordingLayouts:
    """Layout provider that records directories instead of writing files."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    async def __call__(self, directory: str) -> str:
        self.calls.append(directory)
        return f"placeholder:{directory}"


def _fs(*files: str) -> MemoryFileSystem:
    fs = MemoryFileSystem()
    for path in files:
        fs.add_file(f"app/routes/{path}")
    return fs


def _builder(fs: MemoryFileSystem, **kwargs: object) -> tuple[RouteTreeBuilder, _RecordingLayouts]:
    layouts = _RecordingLayouts()
    return RouteTreeBuilder(fs, "app", layouts=layouts, **kwargs), layouts  # type: ignore[arg-type]


def _root_children(nodes: list[RouteNode]) -> tuple[RouteNode, ...]:
    assert len(nodes) == 1
    assert nodes[0].kind is NodeKind.LAYOUT
    return nodes[0].children


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


class TestFiles:
    @pytest.mark.asyncio
    async def test_single_page_gets_placeholder_layout(self) -> None:
        builder, layouts = _builder(_fs("page.tsx"))

        nodes = await builder.build("routes")

        assert nodes == [
            RouteNode.layout("placeholder:routes", [RouteNode.page("./routes/page.tsx")]),
        ]
        assert layouts.calls == ["routes"]

    @pytest.mark.asyncio
    async def test_explicit_layout_wraps_page(self) -> None:
        builder, layouts = _builder(_fs("layout.tsx", "page.tsx"))

        nodes = await builder.build("routes")

        assert nodes == [
            RouteNode.layout("./routes/layout.tsx", [RouteNode.page("./routes/page.tsx")]),
        ]
        assert layouts.calls == []

    @pytest.mark.asyncio
    async def test_explicit_layout_without_content(self) -> None:
        builder, _ = _builder(_fs("layout.tsx"))
        nodes = await builder.build("routes")
        assert nodes == [RouteNode.layout("./routes/layout.tsx", [])]

    @pytest.mark.asyncio
    async def test_not_found(self) -> None:
        builder, _ = _builder(_fs("not-found.tsx"))
        children = _root_children(await builder.build("routes"))
        assert children == (RouteNode.not_found("./routes/not-found.tsx"),)

    @pytest.mark.asyncio
    async def test_private_and_unrelated_files_skipped(self) -> None:
        builder, _ = _builder(_fs("_helpers.ts", "utils.ts", "page.tsx", "styles.css"))
        children = _root_children(await builder.build("routes"))
        assert children == (RouteNode.page("./routes/page.tsx"),)

    @pytest.mark.asyncio
    async def test_empty_directory_has_no_layout(self) -> None:
        fs = MemoryFileSystem()
        fs.add_directory("app/routes")
        builder, layouts = _builder(fs)

        assert await builder.build("routes") == []
        assert layouts.calls == []

    @pytest.mark.asyncio
    async def test_custom_extensions(self) -> None:
        builder, _ = _builder(_fs("page.mdx", "page.tsx"), extensions=(".mdx",))
        children = _root_children(await builder.build("routes"))
        assert children == (RouteNode.page("./routes/page.mdx"),)


# ---------------------------------------------------------------------------
# Directories
# ---------------------------------------------------------------------------


class TestDirectories:
    @pytest.mark.asyncio
    async def test_static_directory(self) -> None:
        builder, _ = _builder(_fs("about/page.tsx"))

        (about,) = _root_children(await builder.build("routes"))

        assert about.kind is NodeKind.ROUTE
        assert about.segment == "about"
        assert not about.is_dynamic
        assert about.children == (
            RouteNode.layout("placeholder:routes/about", [RouteNode.page("./routes/about/page.tsx")]),
        )

    @pytest.mark.asyncio
    async def test_parameter_directory(self) -> None:
        builder, _ = _builder(_fs("users/[id]/page.tsx"))

        (users,) = _root_children(await builder.build("routes"))
        (user_id,) = users.children[0].children

        assert user_id.segment == ":id"
        assert user_id.is_dynamic

    @pytest.mark.asyncio
    async def test_catch_all_directory(self) -> None:
        builder, _ = _builder(_fs("files/[...path]/page.tsx"))

        (files,) = _root_children(await builder.build("routes"))
        (splat,) = files.children[0].children

        assert splat.segment == "*path"
        assert splat.is_dynamic
        assert splat.is_catch_all

    @pytest.mark.asyncio
    async def test_route_group_is_spliced(self) -> None:
        builder, layouts = _builder(_fs("_auth/login/page.tsx"))

        nodes = await builder.build("routes")

        # The group's own layout reaches the root level, so the root is
        # not wrapped a second time.
        assert len(nodes) == 1
        assert nodes[0].file == "placeholder:routes/_auth"
        (login,) = nodes[0].children
        assert login.segment == "login"
        assert "routes" not in layouts.calls

    @pytest.mark.asyncio
    async def test_route_group_beside_page(self) -> None:
        builder, _ = _builder(_fs("page.tsx", "_marketing/pricing/page.tsx"))

        nodes = await builder.build("routes")

        # Group layout precedes the page in listing order: "_marketing" < "page.tsx"
        assert [n.kind for n in nodes] == [NodeKind.LAYOUT, NodeKind.PAGE]
        assert all(n.segment != "_marketing" for n in nodes)

    @pytest.mark.asyncio
    async def test_directory_named_like_convention_keeps_name(self) -> None:
        builder, _ = _builder(_fs("page/page.tsx"))
        (node,) = _root_children(await builder.build("routes"))
        assert node.segment == "page"

    @pytest.mark.asyncio
    async def test_directory_without_content(self) -> None:
        builder, _ = _builder(_fs("components/Button.tsx"))
        (components,) = _root_children(await builder.build("routes"))
        assert components.segment == "components"
        assert components.children == ()


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


class TestOrdering:
    @pytest.mark.asyncio
    async def test_static_then_dynamic_then_files(self) -> None:
        builder, _ = _builder(
            _fs(
                "zeta/page.tsx",
                "alpha/page.tsx",
                "[slug]/page.tsx",
                "[...rest]/page.tsx",
                "page.tsx",
                "not-found.tsx",
            )
        )

        children = _root_children(await builder.build("routes"))

        assert [c.segment for c in children] == ["alpha", "zeta", "*rest", ":slug", "*", ""]
        assert [c.kind for c in children[4:]] == [NodeKind.NOT_FOUND, NodeKind.PAGE]

    def test_order_siblings_keeps_file_order(self) -> None:
        page = RouteNode.page("./p.tsx")
        not_found = RouteNode.not_found("./nf.tsx")
        b = RouteNode.directory("b", [])
        a = RouteNode.directory("a", [])
        dyn = RouteNode.directory(":id", [], is_dynamic=True)

        assert order_siblings([page, dyn, b, not_found, a]) == [a, b, dyn, page, not_found]

    def test_catch_all_before_parameter(self) -> None:
        param = RouteNode.directory(":id", [], is_dynamic=True)
        splat = RouteNode.directory("*all", [], is_dynamic=True)
        assert order_siblings([param, splat]) == [splat, param]

    def test_catch_alls_grouped_then_sorted(self) -> None:
        nodes = [
            RouteNode.directory(":b", [], is_dynamic=True),
            RouteNode.directory("*z", [], is_dynamic=True),
            RouteNode.directory(":a", [], is_dynamic=True),
            RouteNode.directory("*a", [], is_dynamic=True),
            RouteNode.directory("static", []),
        ]

        ordered = order_siblings(nodes)

        assert [n.segment for n in ordered] == ["static", "*a", "*z", ":a", ":b"]
        assert [n.is_catch_all for n in ordered] == [False, True, True, False, False]


# ---------------------------------------------------------------------------
# Ignore patterns and layouts
# ---------------------------------------------------------------------------


class TestIgnore:
    @pytest.mark.asyncio
    async def test_ignored_subtree_removed(self) -> None:
        builder, layouts = _builder(
            _fs("visible/page.tsx", "ignored/page.tsx"),
            ignore=build_ignore(["**/ignored/**"]),
        )

        children = _root_children(await builder.build("routes"))

        assert [c.segment for c in children] == ["visible"]
        assert "routes/ignored" not in layouts.calls

    @pytest.mark.asyncio
    async def test_ignore_applies_before_layout_detection(self) -> None:
        builder, layouts = _builder(
            _fs("layout.tsx", "page.tsx"),
            ignore=build_ignore(["routes/layout.tsx"]),
        )

        nodes = await builder.build("routes")

        assert nodes[0].file == "placeholder:routes"
        assert layouts.calls == ["routes"]


class TestDuplicateLayouts:
    @pytest.mark.asyncio
    async def test_last_layout_wins(self, caplog: pytest.LogCaptureFixture) -> None:
        builder, _ = _builder(_fs("layout.js", "layout.tsx", "page.tsx"))

        with caplog.at_level(logging.WARNING, logger="jamroutes.builder"):
            nodes = await builder.build("routes")

        assert nodes[0].file == "./routes/layout.tsx"
        assert "Multiple layout files" in caplog.text

    @pytest.mark.asyncio
    async def test_strict_layouts_raise(self) -> None:
        builder, _ = _builder(_fs("admin/layout.js", "admin/layout.tsx"), strict_layouts=True)

        with pytest.raises(DuplicateLayoutError) as exc_info:
            await builder.build("routes")

        assert exc_info.value.directory == "routes/admin"
