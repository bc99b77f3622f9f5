"""Unit tests for the Caddyfile.dev template renderer."""

from unittest.mock import patch

import pytest

from caddygen.errors import FileWriteError, OutputDirectoryError, TemplateReadError
from caddygen.template import (
    OUTPUT_FILENAME,
    TEMPLATE_FILENAME,
    generate,
    placeholder,
    render_string,
    render_template,
)


@pytest.mark.cli_unit
class TestRenderString:
    """Tests for render_string."""

    def test_replaces_every_occurrence(self):
        template = "{{host}}:{{port}} {\n  reverse_proxy {{host}}:3000\n}\n"

        result = render_string(template, {"host": "app.localhost", "port": "443"})

        assert result == "app.localhost:443 {\n  reverse_proxy app.localhost:3000\n}\n"

    def test_unknown_placeholders_left_untouched(self):
        template = "{{host}} {{unknown}}"

        assert render_string(template, {"host": "a"}) == "a {{unknown}}"

    def test_empty_variables_is_identity(self):
        template = "site {{host}} {\n\troot * /srv\n}\n"

        assert render_string(template, {}) == template

    def test_idempotent(self):
        template = "{{a}}-{{b}}-{{c}}"
        variables = {"a": "1", "b": "2"}

        assert render_string(template, variables) == render_string(template, variables)

    def test_literal_not_regex(self):
        """Test keys with regex metacharacters are matched literally."""
        template = "{{a.b}} {{a+b}} {{axb}}"

        assert render_string(template, {"a.b": "dot"}) == "dot {{a+b}} {{axb}}"

    def test_single_braces_not_placeholders(self):
        assert render_string("{host} {{host}}", {"host": "x"}) == "{host} x"

    def test_values_with_placeholders_cascade_to_later_keys(self):
        """Test a value introducing {{later}} is substituted by the later key."""
        result = render_string("{{first}}", {"first": "{{second}}", "second": "done"})

        assert result == "done"

    def test_values_with_placeholders_for_earlier_keys_stay(self):
        result = render_string("{{second}}", {"first": "x", "second": "{{first}}"})

        assert result == "{{first}}"

    def test_placeholder_token(self):
        assert placeholder("port") == "{{port}}"


@pytest.mark.cli_unit
class TestRenderTemplate:
    """Tests for render_template."""

    def test_reads_and_renders(self, tmp_path):
        template = tmp_path / "Caddyfile.template"
        template.write_text("{{host}} {\n}\n")

        assert render_template(template, {"host": "dev.localhost"}) == "dev.localhost {\n}\n"

    def test_missing_template(self, tmp_path):
        with pytest.raises(TemplateReadError) as exc_info:
            render_template(tmp_path / "missing.template", {})

        assert "missing.template" in exc_info.value.message

    def test_undecodable_template(self, tmp_path):
        template = tmp_path / "binary.template"
        template.write_bytes(b"\xff\xfe\x00bad")

        with pytest.raises(TemplateReadError):
            render_template(template, {})


@pytest.mark.cli_unit
class TestGenerate:
    """Tests for generate."""

    def test_uses_default_template(self, tmp_path):
        (tmp_path / TEMPLATE_FILENAME).write_text("{{host}}\n")

        result = generate(tmp_path, None, {"host": "a.localhost"})

        assert result.output_path == tmp_path / OUTPUT_FILENAME
        assert result.output_path.read_text() == "a.localhost\n"
        assert result.applied == ["host"]

    def test_explicit_template(self, tmp_path):
        template = tmp_path / "templates" / "site.tpl"
        template.parent.mkdir()
        template.write_text("root {{root}}\n")
        out_dir = tmp_path / "out"
        out_dir.mkdir()

        result = generate(out_dir, template, {"root": "/srv"})

        assert (out_dir / OUTPUT_FILENAME).read_text() == "root /srv\n"
        assert result.output_path == out_dir / OUTPUT_FILENAME

    def test_empty_variables_copies_template(self, tmp_path):
        content = "a {{b}} c\n"
        (tmp_path / TEMPLATE_FILENAME).write_text(content)

        result = generate(tmp_path, None, {})

        assert result.output_path.read_bytes() == content.encode()
        assert result.applied == []

    def test_overwrites_existing_output(self, tmp_path):
        (tmp_path / TEMPLATE_FILENAME).write_text("new\n")
        (tmp_path / OUTPUT_FILENAME).write_text("old content\n")

        generate(tmp_path, None, {})

        assert (tmp_path / OUTPUT_FILENAME).read_text() == "new\n"

    def test_missing_output_dir(self, tmp_path):
        with pytest.raises(OutputDirectoryError) as exc_info:
            generate(tmp_path / "missing", None, {})

        assert "does not exist" in exc_info.value.message

    def test_output_dir_is_file(self, tmp_path):
        not_a_dir = tmp_path / "file"
        not_a_dir.write_text("x")

        with pytest.raises(OutputDirectoryError):
            generate(not_a_dir, None, {})

    def test_missing_template_writes_nothing(self, tmp_path):
        with pytest.raises(TemplateReadError):
            generate(tmp_path, None, {"a": "b"})

        assert not (tmp_path / OUTPUT_FILENAME).exists()

    def test_write_failure(self, tmp_path):
        (tmp_path / TEMPLATE_FILENAME).write_text("x")

        with patch("caddygen.template.atomic_write_text", side_effect=PermissionError("denied")):
            with pytest.raises(FileWriteError) as exc_info:
                generate(tmp_path, None, {})

        assert "denied" in exc_info.value.message
