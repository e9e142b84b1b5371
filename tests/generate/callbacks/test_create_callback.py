"""
Unit tests for create_callback.
"""

import pytest

from assembly_toolkit.generate import (
    GenerateCallback,
    GenerateConfig,
    LinkStyle,
    PolicyKind,
    RandomCallback,
    SimpleCallback,
    SolutionCollector,
    create_callback,
)


class TestCreateCallback:
    """Tests for policy construction."""

    def test_create_when_defaults_then_simple(self, two_piece_lexis):
        cb = create_callback(two_piece_lexis)
        assert isinstance(cb, SimpleCallback)
        assert isinstance(cb, GenerateCallback)

    def test_create_when_config_names_random_then_random(self, two_piece_lexis):
        config = GenerateConfig(policy=PolicyKind.RANDOM, seed=1)
        cb = create_callback(two_piece_lexis, config)
        assert isinstance(cb, RandomCallback)
        assert cb.config is config

    @pytest.mark.parametrize(
        "kind, expected",
        [(PolicyKind.SIMPLE, SimpleCallback), ("random", RandomCallback)],
    )
    def test_create_when_kind_given_then_overrides_config(self, two_piece_lexis, kind, expected):
        config = GenerateConfig(policy=PolicyKind.RANDOM)
        assert type(create_callback(two_piece_lexis, config, kind=kind)) is expected

    def test_create_when_unknown_kind_then_raises_error(self, two_piece_lexis):
        with pytest.raises(ValueError):
            create_callback(two_piece_lexis, kind="greedy")

    def test_create_when_collaborators_given_then_shared(self, two_piece_lexis):
        links, collector = LinkStyle(), SolutionCollector()

        simple = create_callback(two_piece_lexis, links=links, collector=collector)
        rand = create_callback(two_piece_lexis, kind=PolicyKind.RANDOM, links=links, collector=collector)

        assert simple.links is links and rand.links is links
        assert simple.collector is collector and rand.collector is collector
