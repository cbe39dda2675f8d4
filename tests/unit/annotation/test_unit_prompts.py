# tests/unit/annotation/test_unit_prompts.py - v1
"""Tests for annotation/prompts.py - annotation policy constants."""

from __future__ import annotations

from typing import get_args

import pytest

from redflags.annotation.prompts import (
    EXAMPLE_INPUT,
    EXAMPLE_OUTPUT,
    HIGHLIGHT_CATEGORIES,
    HighlightCategory,
    SYSTEM_PROMPT,
    highlight_class,
)


class TestHighlightClass:
    @pytest.mark.parametrize("category", ["positive", "negative", "context", "info"])
    def test_known_categories(self, category):
        assert highlight_class(category) == f"highlight-{category}"

    def test_unknown_category(self):
        with pytest.raises(ValueError, match="Unknown highlight category"):
            highlight_class("warning")

    def test_categories_follow_literal_type(self):
        assert HIGHLIGHT_CATEGORIES == get_args(HighlightCategory)
        assert HIGHLIGHT_CATEGORIES == ("positive", "negative", "context", "info")


class TestSystemPrompt:
    def test_names_every_category_and_class(self):
        for category in HIGHLIGHT_CATEGORIES:
            assert f'"{category}"' in SYSTEM_PROMPT
            assert f'"highlight-{category}"' in SYSTEM_PROMPT

    def test_embeds_example_pair(self):
        assert f"<example-input>\n{EXAMPLE_INPUT}\n</example-input>" in SYSTEM_PROMPT
        assert f"<example-output>\n{EXAMPLE_OUTPUT}\n</example-output>" in SYSTEM_PROMPT

    def test_states_policy(self):
        assert "same language as the original input text" in SYSTEM_PROMPT
        assert "Keep the rest of the HTML exactly as is" in SYSTEM_PROMPT
        assert "at least one to three highlights" in SYSTEM_PROMPT

    def test_example_output_only_adds_spans(self):
        # Stripping the highlight spans from the example output gives back the input
        import re

        stripped = re.sub(r"<span data-highlight[^>]*>(.*?)</span>", r"\1", EXAMPLE_OUTPUT)
        assert stripped == EXAMPLE_INPUT

    def test_example_output_uses_matching_classes(self):
        import re

        for data_type, css_class in re.findall(
            r'data-type="(\w+)"[^>]*class="([\w-]+)"', EXAMPLE_OUTPUT
        ):
            assert data_type in HIGHLIGHT_CATEGORIES
            assert css_class == highlight_class(data_type)
