"""Tests for the render entry point."""

import pytest

from dockviz.managers.image.base import ImageNotFoundError, RenderUsageError
from dockviz.managers.image_manager import ImageManager, render_images


def test_render_requires_output_mode(branching_nodes):
    """Test a usage error when no output mode is selected."""
    with pytest.raises(RenderUsageError, match="--dot, --tree, or --short"):
        render_images(branching_nodes, options={"no_trunc": True})


def test_render_tree(branching_nodes):
    """Test the tree output of all roots."""
    output = render_images(branching_nodes, options={"tree": True})
    assert output.startswith("└─root00000000 Virtual Size: 1.0 KB")
    assert len(output.splitlines()) == 4


def test_render_tree_and_dot(branching_nodes):
    """Test tree output is followed by dot output."""
    output = render_images(branching_nodes, options={"tree": True, "dot": True})
    tree_end = output.index("digraph docker {")

    assert "└─root00000000" in output[:tree_end]
    assert output.endswith(" base [style=invisible]\n}\n")


def test_render_short_only_without_tree(branching_nodes):
    """Test short output is used only when neither tree nor dot is requested."""
    assert render_images(branching_nodes, options={"short": True}) == (
        "app: v1, latest\nbase: latest\ntool: 1.0\n"
    )
    assert "digraph" in render_images(branching_nodes, options={"short": True, "dot": True})


def test_render_from_start_image(branching_nodes):
    """Test a start image limits the tree to its subtree."""
    output = render_images(branching_nodes, start="left0000", options={"tree": True})
    assert output == (
        "└─left00000000 Virtual Size: 1.5 KB\n"
        "  └─leaf00000000 Virtual Size: 1.5 KB Tags: tool:1.0\n"
    )


def test_render_start_image_in_dot(branching_nodes):
    """Test the start image is anchored to base in dot output."""
    output = render_images(branching_nodes, start="app:v1", options={"dot": True})
    assert ' base -> "right0000000" [style=invis]\n' in output
    assert "root00000000" not in output


def test_render_start_image_not_found(branching_nodes):
    """Test an unknown start image raises before any output."""
    with pytest.raises(ImageNotFoundError):
        render_images(branching_nodes, start="missing", options={"tree": True})


def test_render_only_labelled(chain_nodes):
    """Test collapsing removes the untagged chain from the tree."""
    output = render_images(chain_nodes, options={"tree": True, "only_labelled": True})
    assert output == (
        "└─root00000000 Virtual Size: 1.0 KB Tags: base:latest\n"
        "  └─cccccccccccc Virtual Size: 4.0 KB Tags: app:v1\n"
    )


def test_build_forest_keeps_nodes(chain_nodes):
    """Test the manager does not modify the image list."""
    manager = ImageManager(chain_nodes)
    manager.build_forest(start="bbbbbbbb", only_labelled=True)

    assert manager.nodes == chain_nodes
