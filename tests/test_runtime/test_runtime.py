"""Tests for runtime class merging."""

import pytest

from atomicss.compiler import compile_tree
from atomicss.config import AtomicConfig
from atomicss.parser import parse_css
from atomicss.runtime import AtomicGroups, MergeCache, ac, ax, group_key, is_atomic

ATOMIC_MAP = {"_aaaa": "_aaaabbbb", "_bbbb": "_bbbbcccc"}

IS_ENABLED = False


# ---------------------------------------------------------------------------
# ax
# ---------------------------------------------------------------------------


class TestAx:
    @pytest.mark.parametrize(
        "candidates, expected",
        [
            pytest.param([], None, id="empty list"),
            pytest.param([None], None, id="only none"),
            pytest.param([""], None, id="only empty string"),
            pytest.param(["foo", "bar"], "foo bar", id="joins single classes"),
            pytest.param(["foo baz", "bar"], "foo baz bar", id="joins multi classes"),
            pytest.param(["foo", "bar", None], "foo bar", id="removes none"),
            pytest.param([False, "foo", None, "bar"], "foo bar", id="removes falsy"),
            pytest.param(
                [IS_ENABLED and "foo", "bar"], "bar", id="skips conditional class"
            ),
            pytest.param(
                ["_aaaabbbb", "_aaaacccc"], "_aaaacccc", id="last of a single group wins"
            ),
            pytest.param(
                ["_aaaabbbb", "_aaaacccc", "_aaaadddd", "_aaaaeeee"],
                "_aaaaeeee",
                id="last of many single groups wins",
            ),
            pytest.param(
                ["_aaaabbbb _aaaacccc"], "_aaaacccc", id="last of a multi group wins"
            ),
            pytest.param(
                ["_aaaabbbb _aaaacccc _aaaadddd _aaaaeeee"],
                "_aaaaeeee",
                id="last of many multi groups wins",
            ),
            pytest.param(
                ["_aaaabbbb", "_aaaaaaa", "_ddddbbb", "_ddddcccc"],
                "_aaaaaaa _ddddcccc",
                id="short atomic class names",
            ),
            pytest.param(
                ["_aaaabbbb", "_bbbbcccc"],
                "_aaaabbbb _bbbbcccc",
                id="keeps unrelated groups",
            ),
            pytest.param(
                ["hello_there", "hello_world"],
                "hello_there hello_world",
                id="passes non atomic classes",
            ),
            pytest.param(
                ["hello_there", "hello_world", "_aaaabbbb"],
                "hello_there hello_world _aaaabbbb",
                id="non atomic classes next to atomic ones",
            ),
            pytest.param(
                ["_aaaaaaaa", AtomicGroups(ATOMIC_MAP)],
                "_aaaabbbb _bbbbcccc",
                id="nested atomic groups",
            ),
            pytest.param(
                ["_aaaabbbb", ["_bbbbaaaa", "_bbbbcccc"]],
                "_aaaabbbb _bbbbcccc",
                id="nested list",
            ),
            pytest.param(["_aaaabbbb", "foo"], "foo _aaaabbbb", id="non atomic first"),
            pytest.param(["foo", "foo bar", "bar"], "foo bar", id="exact duplicates"),
            pytest.param(
                ["_aaaabbbb", "_ccccdddd", "_aaaaeeee"],
                "_aaaaeeee _ccccdddd",
                id="group keeps first seen position",
            ),
            pytest.param(["_abc", "_abd"], "_abc _abd", id="too short to be atomic"),
            pytest.param(["  foo \n bar  "], "foo bar", id="normalizes whitespace"),
            pytest.param(["single"], "single", id="single class fast path"),
        ],
    )
    def test_merge(self, candidates, expected) -> None:
        assert ax(candidates) == expected

    def test_order_sensitive(self) -> None:
        assert ax(["_aaaabbbb", "_aaaacccc"]) == "_aaaacccc"
        assert ax(["_aaaacccc", "_aaaabbbb"]) == "_aaaabbbb"

    def test_accepts_any_iterable(self) -> None:
        assert ax(c for c in ["_aaaabbbb", "_aaaacccc"]) == "_aaaacccc"

    def test_later_fragment_wins(self) -> None:
        assert ax(["_aaaadddd", AtomicGroups({"_aaaa": "_aaaacccc"})]) == "_aaaacccc"

    def test_later_string_beats_fragment(self) -> None:
        assert ax([AtomicGroups({"_aaaa": "_aaaacccc"}), "_aaaadddd"]) == "_aaaadddd"

    def test_bare_string_is_one_candidate(self) -> None:
        assert ax("foo bar") == "foo bar"
        assert ax("_aaaabbbb _aaaacccc") == "_aaaacccc"
        assert ac("foo _aaaabbbb").classes == ("foo",)

    def test_bare_atomic_groups(self) -> None:
        assert ax(AtomicGroups({"_aaaa": "_aaaacccc"})) == "_aaaacccc"

    @pytest.mark.parametrize("candidates", [None, "", False])
    def test_falsy_argument(self, candidates) -> None:
        assert ax(candidates) is None
        assert ac(candidates) is None


# ---------------------------------------------------------------------------
# Composition and idempotence
# ---------------------------------------------------------------------------


CANDIDATE_SETS = [
    [],
    ["foo"],
    ["_aaaabbbb", "_aaaacccc"],
    ["hello_there", "_aaaabbbb _bbbbcccc", None, "_aaaadddd"],
    ["x y", ["_ccccaaaa", False], "x", "_ccccbbbb"],
]


class TestComposition:
    def test_group_map_composes(self) -> None:
        merged = ac(["_aaaabbbb", "_aaaacccc"])
        assert ax(["_aaaadddd", merged]) == ax(["_aaaadddd", "_aaaabbbb", "_aaaacccc"])

    def test_ac_matches_ax(self) -> None:
        for candidates in CANDIDATE_SETS:
            merged = ac(candidates)
            assert (str(merged) if merged else None) == ax(candidates)

    @pytest.mark.parametrize("candidates", CANDIDATE_SETS)
    def test_idempotent(self, candidates) -> None:
        once = ax(candidates)
        assert ax([once]) == once

    @pytest.mark.parametrize("candidates", CANDIDATE_SETS)
    def test_idempotent_through_group_map(self, candidates) -> None:
        assert ax([ac(candidates)]) == ax(candidates)

    def test_ac_keeps_non_atomic_classes(self) -> None:
        merged = ac(["foo", "_aaaabbbb"])
        assert merged is not None
        assert merged.classes == ("foo",)
        assert dict(merged.groups) == {"_aaaa": "_aaaabbbb"}
        assert ax(["bar", merged]) == "bar foo _aaaabbbb"

    def test_ac_empty(self) -> None:
        assert ac([]) is None
        assert ac([None, False, ""]) is None


# ---------------------------------------------------------------------------
# AtomicGroups
# ---------------------------------------------------------------------------


class TestAtomicGroups:
    def test_str(self) -> None:
        assert str(AtomicGroups(ATOMIC_MAP)) == "_aaaabbbb _bbbbcccc"

    def test_str_puts_classes_first(self) -> None:
        assert str(AtomicGroups(ATOMIC_MAP, ["foo"])) == "foo _aaaabbbb _bbbbcccc"

    def test_groups_are_read_only(self) -> None:
        groups = AtomicGroups(ATOMIC_MAP)
        with pytest.raises(TypeError):
            groups.groups["_aaaa"] = "_aaaazzzz"  # type: ignore[index]

    def test_copies_input(self) -> None:
        source = dict(ATOMIC_MAP)
        groups = AtomicGroups(source)
        source["_aaaa"] = "_aaaazzzz"
        assert groups.groups["_aaaa"] == "_aaaabbbb"

    def test_merge_does_not_mutate_fragment(self) -> None:
        fragment = AtomicGroups(ATOMIC_MAP)
        ax([fragment, "_aaaazzzz"])
        assert fragment.groups["_aaaa"] == "_aaaabbbb"

    def test_equality(self) -> None:
        assert AtomicGroups(ATOMIC_MAP) == AtomicGroups(dict(ATOMIC_MAP))
        assert AtomicGroups(ATOMIC_MAP) != AtomicGroups({"_aaaa": "_aaaabbbb"})

    def test_empty_is_falsy(self) -> None:
        assert not AtomicGroups()
        assert len(AtomicGroups(ATOMIC_MAP, ["x"])) == 3


# ---------------------------------------------------------------------------
# Token shape
# ---------------------------------------------------------------------------


class TestTokenShape:
    def test_is_atomic(self) -> None:
        assert is_atomic("_aaaabbbb")
        assert is_atomic("_aaaa")
        assert not is_atomic("_aaa")
        assert not is_atomic("hello_there")

    def test_group_key(self) -> None:
        assert group_key("_aaaabbbb") == "_aaaa"
        assert group_key("foo") is None

    def test_custom_config(self) -> None:
        config = AtomicConfig(sentinel="c", prefix_width=2)
        assert ax(["cab11", "cab22", "_aaaabbbb"], config=config) == "_aaaabbbb cab22"


# ---------------------------------------------------------------------------
# MergeCache
# ---------------------------------------------------------------------------


class TestMergeCache:
    def test_results_match_uncached(self) -> None:
        cache = MergeCache()
        for candidates in CANDIDATE_SETS:
            assert ax(candidates, cache=cache) == ax(candidates)

    def test_hits(self) -> None:
        cache = MergeCache()
        ax(["_aaaabbbb _aaaacccc"], cache=cache)
        ax(["_aaaabbbb _aaaacccc"], cache=cache)
        assert cache.misses == 1
        assert cache.hits == 1
        assert len(cache) == 1

    def test_clear(self) -> None:
        cache = MergeCache()
        ac(["foo", "bar"], cache=cache)
        assert len(cache) == 2
        cache.clear()
        assert len(cache) == 0

    def test_instances_are_independent(self) -> None:
        first, second = MergeCache(), MergeCache()
        ax(["a b", "c"], cache=first)
        assert len(first) == 2
        assert len(second) == 0

    def test_uses_the_cache_config(self) -> None:
        cache = MergeCache(AtomicConfig(sentinel="c", prefix_width=2))
        assert ax(["cab11", "cab22"], cache=cache) == "cab22"
        assert ac(["cab11", "cab22"], cache=cache).groups == {"cab": "cab22"}

    def test_matching_config_is_accepted(self) -> None:
        config = AtomicConfig(sentinel="c", prefix_width=2)
        cache = MergeCache(config)
        assert ax(["cab11", "cab22"], config=config, cache=cache) == "cab22"

    def test_config_mismatch_raises(self) -> None:
        cache = MergeCache()
        config = AtomicConfig(sentinel="c", prefix_width=2)
        with pytest.raises(ValueError, match="does not match"):
            ax(["cab11", "cab22"], config=config, cache=cache)
        with pytest.raises(ValueError, match="does not match"):
            ac(["cab11", "cab22"], config=config, cache=cache)


# ---------------------------------------------------------------------------
# Compiler output through the merger
# ---------------------------------------------------------------------------


class TestCompiledClassNames:
    def _names(self, source: str) -> list[str]:
        return [r.class_name for r in compile_tree(parse_css(source))]

    def test_later_declaration_wins(self) -> None:
        (blue,) = self._names("color: blue;")
        (red,) = self._names("color: red;")
        assert ax([blue, red]) == red
        assert ax([red, blue]) == blue

    def test_different_properties_survive(self) -> None:
        names = self._names("color: blue; font-size: 12px;")
        assert ax(names) == " ".join(names)

    def test_different_selectors_survive(self) -> None:
        names = self._names("color: blue; div { color: red; } :hover { color: green; }")
        assert ax(names) == " ".join(names)

    def test_component_override(self) -> None:
        base = self._names("color: blue; padding: 4px;")
        override = self._names("color: red;")
        assert ax([" ".join(base), " ".join(override)]) == f"{override[0]} {base[1]}"
