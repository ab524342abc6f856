"""
Tests for the HTML and plain-text presentation of InteractionState.
"""

from shared.schemas.tailor import Idle, Loading, Success, Failed, TailorResult
from services.web.render import (
    render_page,
    render_text,
    LOADING_LABEL,
    SUBMIT_LABEL,
    MISSING_KEYWORDS_NOTE,
)


SAMPLE = TailorResult(
    tailored_resume="X",
    matched_keywords=["a"],
    missing_but_referenced_keywords=[],
    ats_tips=["tip1"],
)


class TestRenderPage:
    """Server-rendered console page."""

    def test_idle_has_form_and_no_results(self):
        page = render_page(Idle())
        assert 'data-state="idle"' in page
        assert 'name="resume"' in page
        assert 'name="job_description"' in page
        assert 'name="role_title"' in page
        assert SUBMIT_LABEL in page
        assert "Matched Keywords" not in page
        assert 'role="alert"' not in page

    def test_loading_disables_button(self):
        page = render_page(Loading())
        assert f'<button type="submit" disabled>{LOADING_LABEL}</button>' in page

    def test_failed_shows_message(self):
        page = render_page(Failed(message="Request failed: 500"))
        assert '<div class="error" role="alert">Request failed: 500</div>' in page
        assert "Tailored Resume" not in page

    def test_success_shows_every_section(self):
        page = render_page(Success(result=SAMPLE))
        assert '<pre id="tailored-resume">X</pre>' in page
        assert '<span class="chip matched">a</span>' in page
        assert '<div id="missing-keywords"></div>' in page
        assert "<li>tip1</li>" in page
        assert "Copy</button>" in page

    def test_success_with_empty_result(self):
        """Absent fields render as empty panels."""
        page = render_page(Success(result=TailorResult()))
        assert '<pre id="tailored-resume"></pre>' in page
        assert '<ul id="ats-tips"></ul>' in page

    def test_form_values_are_kept(self):
        page = render_page(
            Failed(message="Please paste both the resume and the job description."),
            {"role_title": "PM", "resume": "My resume", "job_description": ""},
        )
        assert 'value="PM"' in page
        assert ">My resume</textarea>" in page

    def test_backend_text_is_escaped(self):
        result = TailorResult(
            tailored_resume="<script>alert(1)</script>",
            matched_keywords=["C++ & <Rust>"],
            ats_tips=['Use "quotes"'],
        )
        page = render_page(Success(result=result))
        assert "<script>alert(1)</script>" not in page
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in page
        assert "C++ &amp; &lt;Rust&gt;" in page
        assert "Use &quot;quotes&quot;" in page

    def test_user_input_is_escaped(self):
        page = render_page(Idle(), {"role_title": '"><b>', "resume": "</textarea>", "job_description": ""})
        assert 'value="&quot;&gt;&lt;b&gt;"' in page
        assert "&lt;/textarea&gt;</textarea>" in page


class TestRenderText:
    """Terminal rendering used by the CLI."""

    def test_idle_is_empty(self):
        assert render_text(Idle()) == ""

    def test_failed(self):
        assert render_text(Failed(message="timeout")) == "Error: timeout\n"

    def test_success_sections(self):
        text = render_text(Success(result=SAMPLE))
        lines = text.splitlines()
        assert "TAILORED RESUME (ATS-friendly)" in lines
        assert "X" in lines
        assert lines[lines.index("MATCHED KEYWORDS") + 1] == "a"
        assert lines[lines.index("MISSING KEYWORDS") + 1] == "(none)"
        assert MISSING_KEYWORDS_NOTE in lines
        assert "  - tip1" in lines

    def test_success_without_tips(self):
        text = render_text(Success(result=TailorResult(tailored_resume="X")))
        lines = text.splitlines()
        assert lines[lines.index("ATS TIPS") + 1] == "  (none)"
