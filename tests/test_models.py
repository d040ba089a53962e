"""
Tests for domain models — wrapper specs, fragments, catalog lookups.
"""

import pytest
from pydantic import ValidationError

from lazyshim.core.models import Catalog, Fragment, WrapperSpec


class TestWrapperSpec:
    def test_executable_defaults_to_name(self):
        assert WrapperSpec(name="git").executable == "git"

    def test_explicit_command(self):
        assert WrapperSpec(name="pip", command="pip3").executable == "pip3"

    def test_candidates_order_and_dedup(self):
        spec = WrapperSpec(name="container", command="docker",
                           alternatives=["podman", "docker"])
        assert spec.candidates == ["docker", "podman"]

    def test_names(self):
        assert WrapperSpec(name="kubectl", aliases=["k"]).names == ["kubectl", "k"]

    def test_invalid_alias(self):
        with pytest.raises(ValidationError):
            WrapperSpec(name="git", aliases=["g;rm"])

    def test_equality(self):
        assert WrapperSpec(name="git") == WrapperSpec(name="git")
        assert WrapperSpec(name="git") != WrapperSpec(name="git", aliases=["g"])


class TestFragment:
    def test_get_wrapper_by_alias(self):
        frag = Fragment(name="k8s", wrappers=[WrapperSpec(name="kubectl", aliases=["k"])])
        assert frag.get_wrapper("k").name == "kubectl"
        assert frag.get_wrapper("helm") is None

    def test_defaults(self):
        frag = Fragment(name="empty")
        assert not frag.lazy
        assert frag.wrappers == []


class TestCatalog:
    def test_duplicate_fragment(self):
        with pytest.raises(ValidationError):
            Catalog(fragments=[Fragment(name="a"), Fragment(name="a")])

    def test_fragment_for(self):
        catalog = Catalog(fragments=[
            Fragment(name="a", wrappers=[WrapperSpec(name="npm")]),
            Fragment(name="b", lazy=True, wrappers=[WrapperSpec(name="cargo")]),
        ])
        assert catalog.fragment_for("cargo").name == "b"
        assert catalog.fragment_for("nope") is None
        assert [f.name for f in catalog.eager_fragments()] == ["a"]
