"""Tests for manifest loading, declaration parsing, and validation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from content_loader.errors import ManifestError
from content_loader.manifest import (
    ManifestSource,
    ValidationError,
    blocks_with_errors,
    load_manifest,
    parse_declarations,
    validate,
    validate_or_raise,
)
from content_loader.model.declaration import Declaration, RunAt
from content_loader.model.diagnostic import Severity


def rules_of(diagnostics) -> list[str]:
    return [d.rule for d in diagnostics]


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


class TestLoadManifest:
    def test_reads_json(self, tmp_path: Path):
        path = tmp_path / "manifest.json"
        path.write_text(json.dumps({"name": "ext", "content_scripts": []}))
        assert load_manifest(path) == {"name": "ext", "content_scripts": []}

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ManifestError, match="Cannot read manifest"):
            load_manifest(tmp_path / "absent.json")

    def test_bad_json(self, tmp_path: Path):
        path = tmp_path / "manifest.json"
        path.write_text("{not json")
        with pytest.raises(ManifestError, match="not valid JSON") as excinfo:
            load_manifest(path)
        assert isinstance(excinfo.value.cause, json.JSONDecodeError)

    def test_not_an_object(self, tmp_path: Path):
        path = tmp_path / "manifest.json"
        path.write_text("[]")
        with pytest.raises(ManifestError, match="JSON object"):
            load_manifest(path)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestParseDeclarations:
    def test_full_block(self):
        manifest = {
            "content_scripts": [
                {
                    "matches": ["https://*.example.com/*"],
                    "css": ["a.css"],
                    "js": ["a.js", "b.js"],
                    "run_at": "document_start",
                }
            ]
        }
        assert parse_declarations(manifest) == (
            Declaration(
                matches=("https://*.example.com/*",),
                css=("a.css",),
                js=("a.js", "b.js"),
                run_at=RunAt.DOCUMENT_START,
            ),
        )

    def test_defaults(self):
        (decl,) = parse_declarations({"content_scripts": [{"matches": ["<all_urls>"]}]})
        assert decl.css == () and decl.js == ()
        assert decl.run_at is RunAt.DOCUMENT_IDLE

    def test_order_preserved(self):
        manifest = {
            "content_scripts": [
                {"matches": ["<all_urls>"], "js": ["first.js"]},
                {"matches": ["<all_urls>"], "js": ["second.js"]},
            ]
        }
        assert [d.js for d in parse_declarations(manifest)] == [("first.js",), ("second.js",)]

    def test_missing_key_is_empty(self):
        assert parse_declarations({"name": "ext"}) == ()

    @pytest.mark.parametrize(
        "manifest, message",
        [
            ({"content_scripts": {}}, "must be a list"),
            ({"content_scripts": ["x"]}, r"content_scripts\[0\] must be an object"),
            ({"content_scripts": [{"matches": "<all_urls>"}]}, "matches must be a list"),
            ({"content_scripts": [{"matches": [], "js": [1]}]}, "js must be a list"),
            ({"content_scripts": [{"matches": [], "run_at": "later"}]}, "unknown value"),
        ],
    )
    def test_malformed(self, manifest, message):
        with pytest.raises(ManifestError, match=message):
            parse_declarations(manifest)


class TestManifestSource:
    def test_get_declarations_is_stable(self):
        source = ManifestSource({"content_scripts": [{"matches": ["<all_urls>"], "js": ["a.js"]}]})
        assert source.get_declarations() == source.get_declarations()
        assert len(source.get_declarations()) == 1

    def test_from_file(self, tmp_path: Path):
        path = tmp_path / "manifest.json"
        path.write_text(json.dumps({"content_scripts": [{"matches": ["<all_urls>"], "css": ["a.css"]}]}))
        assert ManifestSource.from_file(path).get_declarations()[0].css == ("a.css",)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestValidate:
    def test_valid_manifest(self):
        manifest = {"content_scripts": [{"matches": ["<all_urls>"], "js": ["a.js"]}]}
        assert validate(manifest) == []

    def test_no_content_scripts(self):
        assert validate({"name": "ext"}) == []

    def test_content_scripts_not_list(self):
        diags = validate({"content_scripts": "nope"})
        assert rules_of(diags) == ["check_content_scripts_shape"]
        assert diags[0].severity is Severity.ERROR

    def test_block_not_object(self):
        diags = validate({"content_scripts": [42]})
        assert rules_of(diags) == ["check_content_scripts_shape"]
        assert diags[0].block == 0

    def test_missing_matches(self):
        diags = validate({"content_scripts": [{"js": ["a.js"]}]})
        assert "check_matches_present" in rules_of(diags)

    def test_bad_pattern(self):
        diags = validate({"content_scripts": [{"matches": ["chrome://*/*"], "js": ["a.js"]}]})
        assert rules_of(diags) == ["check_match_patterns"]
        assert "chrome" in diags[0].message

    def test_bad_run_at(self):
        diags = validate(
            {"content_scripts": [{"matches": ["<all_urls>"], "js": ["a.js"], "run_at": "soon"}]}
        )
        assert rules_of(diags) == ["check_run_at"]
        assert diags[0].fix is not None

    def test_bad_resource_list(self):
        diags = validate({"content_scripts": [{"matches": ["<all_urls>"], "css": "a.css"}]})
        assert "check_resource_lists" in rules_of(diags)

    def test_no_resources_warns(self):
        diags = validate({"content_scripts": [{"matches": ["<all_urls>"]}]})
        assert rules_of(diags) == ["check_has_resources"]
        assert diags[0].is_warning

    def test_duplicate_resources_warn(self):
        diags = validate(
            {"content_scripts": [{"matches": ["<all_urls>"], "js": ["a.js", "b.js", "a.js"]}]}
        )
        assert rules_of(diags) == ["check_duplicate_resources"]

    def test_ordered_by_block(self):
        diags = validate(
            {
                "content_scripts": [
                    {"matches": ["<all_urls>"], "js": ["a.js", "a.js"]},
                    {"matches": ["bogus"], "js": ["b.js"]},
                    {"js": ["c.js"], "run_at": "soon"},
                ]
            }
        )
        assert [d.block for d in diags] == [0, 1, 2, 2]
        assert rules_of(diags)[2:] == ["check_matches_present", "check_run_at"]

    def test_blocks_with_errors_ignores_warnings(self):
        diags = validate(
            {
                "content_scripts": [
                    {"matches": ["<all_urls>"]},
                    {"matches": ["bogus"], "js": ["b.js"]},
                    {"matches": [], "css": ["c.css"]},
                ]
            }
        )
        assert blocks_with_errors(diags) == [1, 2]


class TestValidateOrRaise:
    def test_raises_on_error(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_or_raise({"content_scripts": [{"matches": []}]})
        assert all(d.is_error for d in excinfo.value.diagnostics)
        assert excinfo.value.blocks == [0]
        assert "1 error(s) in content_scripts block(s) 0" in str(excinfo.value)

    def test_manifest_level_error_has_no_blocks(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_or_raise({"content_scripts": "nope"})
        assert excinfo.value.blocks == []
        assert "1 error(s) in content_scripts:" in str(excinfo.value)

    def test_only_errors_carried(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_or_raise(
                {"content_scripts": [{"matches": ["<all_urls>"]}, {"matches": ["x"], "js": ["a.js"]}]}
            )
        assert excinfo.value.blocks == [1]
        assert rules_of(excinfo.value.diagnostics) == ["check_match_patterns"]

    def test_returns_warnings(self):
        warnings = validate_or_raise({"content_scripts": [{"matches": ["<all_urls>"]}]})
        assert rules_of(warnings) == ["check_has_resources"]
