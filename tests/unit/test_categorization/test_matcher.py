"""Unit tests for the keyword-rule category matcher."""

from osfinder.categorization import CategoryRule, build_match_text, match_categories

RULES = [
    CategoryRule(
        keywords=("trello", "kanban"),
        categories=("project-management", "task-management", "productivity"),
    ),
    CategoryRule(
        keywords=("notion", "notes"),
        categories=("note-taking", "knowledge-management", "productivity"),
    ),
    CategoryRule(
        keywords=("api",),
        categories=("api-development", "developer-tools", "testing-qa"),
    ),
]

DEFAULTS = ("developer-tools", "productivity", "business-software")

ALL_LABELS = {
    "project-management",
    "task-management",
    "productivity",
    "note-taking",
    "knowledge-management",
    "api-development",
    "developer-tools",
    "testing-qa",
    "business-software",
}


class TestBuildMatchText:
    def test_joins_and_lowercases(self):
        text = build_match_text("Trello", "Kanban Boards", "Self-hosted")
        assert text == "trello kanban boards self-hosted"

    def test_accepts_label_lists(self):
        assert build_match_text(["Trello", "Asana"], None, None) == "trello asana"

    def test_skips_empty_parts(self):
        assert build_match_text(None, "", "Long text") == "long text"
        assert build_match_text(None, None, None) == ""


class TestMatchCategories:
    def test_first_matching_rule_wins(self):
        # Matches both the trello and notion rules; trello is declared first.
        result = match_categories("trello clone with notes", RULES, ALL_LABELS, DEFAULTS)
        assert result == ["project-management", "task-management", "productivity"]

    def test_fallback_to_defaults_when_nothing_matches(self):
        result = match_categories("a photo gallery", RULES, ALL_LABELS, DEFAULTS)
        assert result == list(DEFAULTS)

    def test_rule_with_too_few_known_labels_is_skipped(self):
        available = ALL_LABELS - {"task-management"}
        result = match_categories("trello clone with notes", RULES, available, DEFAULTS)
        # Trello rule resolves only two labels, so the notes rule is next.
        assert result == ["note-taking", "knowledge-management", "productivity"]

    def test_unknown_defaults_are_dropped(self):
        result = match_categories("nothing relevant", RULES, {"productivity"}, DEFAULTS)
        assert result == ["productivity"]

    def test_empty_store_yields_empty_list(self):
        assert match_categories("trello", RULES, set(), DEFAULTS) == []

    def test_empty_text_uses_defaults(self):
        assert match_categories("", RULES, ALL_LABELS, DEFAULTS) == list(DEFAULTS)

    def test_case_insensitive(self):
        result = match_categories("TRELLO", RULES, ALL_LABELS, DEFAULTS)
        assert result[0] == "project-management"

    def test_substring_match_inside_words(self):
        # "api" is found inside "rapid".
        result = match_categories("rapid prototyping", RULES, ALL_LABELS, DEFAULTS)
        assert result == ["api-development", "developer-tools", "testing-qa"]

    def test_at_most_three_labels(self):
        rules = [CategoryRule(keywords=("x",), categories=("a", "b", "c", "d"))]
        result = match_categories("x", rules, {"a", "b", "c", "d"}, DEFAULTS)
        assert result == ["a", "b", "c"]

    def test_idempotent(self):
        first = match_categories("kanban board", RULES, ALL_LABELS, DEFAULTS)
        second = match_categories("kanban board", RULES, ALL_LABELS, DEFAULTS)
        assert first == second
