"""
Presentation for the tailoring console.

Both renderers are pure functions of InteractionState (plus, for the page,
the submitted form values so they survive a round trip). All user and
backend text goes through html.escape before it reaches the page.
"""

from html import escape
from typing import Dict, List, Optional

from shared.schemas.tailor import InteractionState, Loading, Success, Failed, TailorResult

TITLE = "Resume Tailoring Engine"
TAGLINE = "Transforms resumes to match a job description. Never fabricates information."
MISSING_KEYWORDS_NOTE = (
    "Note: We never add content that isn't in your resume. "
    "Consider incorporating relevant keywords only where accurate."
)
FOOTER = (
    "This tool reorganizes and highlights existing content only. "
    "It never fabricates roles, dates, or achievements."
)

SUBMIT_LABEL = "Tailor Resume"
LOADING_LABEL = "Tailoring…"

PAGE_STYLE = """
body { font-family: system-ui, sans-serif; background: #0f172a; color: #f1f5f9; margin: 0; }
header { text-align: center; padding: 2.5rem 1rem 1rem; }
header p { color: #bfdbfe; }
main { max-width: 72rem; margin: 0 auto; padding: 0 1rem 4rem; }
.grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(22rem, 1fr)); gap: 1.5rem; }
.panel { background: #1e293b; border: 1px solid #1d4ed8; border-radius: 1rem; padding: 1.25rem; }
label { display: block; font-size: 0.875rem; color: #bfdbfe; margin: 0 0 0.5rem; }
input, textarea { width: 100%; box-sizing: border-box; background: #0f172a; color: inherit;
  border: 1px solid #475569; border-radius: 0.5rem; padding: 0.75rem; margin-bottom: 1rem; }
textarea { font-family: ui-monospace, monospace; font-size: 0.875rem; }
button { background: #2563eb; color: #fff; border: 0; border-radius: 0.5rem; padding: 0.6rem 1.25rem; cursor: pointer; }
button:disabled { opacity: 0.6; }
.error { color: #fca5a5; background: #450a0a; border: 1px solid #ef4444; border-radius: 0.5rem; padding: 0.75rem; margin-top: 1rem; }
pre { white-space: pre-wrap; background: #0f172a; border: 1px solid #334155; border-radius: 0.5rem;
  padding: 1rem; max-height: 60vh; overflow: auto; }
.chip { display: inline-block; font-size: 0.75rem; padding: 0.25rem 0.5rem; margin: 0.15rem; border-radius: 0.25rem; }
.matched { background: #065f46; }
.missing { background: #92400e; }
.note, .footer { font-size: 0.8rem; color: #93c5fd; }
.footer { text-align: center; margin-top: 2.5rem; }
"""

# Copy happens in the browser; the server never sees the clipboard
COPY_SCRIPT = (
    "navigator.clipboard.writeText("
    "document.getElementById('tailored-resume').textContent)"
)
SUBMIT_SCRIPT = (
    "var b=this.querySelector('button[type=submit]');"
    "b.disabled=true;b.textContent='" + LOADING_LABEL + "';"
)


def _chips(keywords: List[str], css_class: str) -> str:
    return "".join(
        f'<span class="chip {css_class}">{escape(keyword)}</span>' for keyword in keywords
    )


def _form_panel(state: InteractionState, form: Dict[str, str]) -> str:
    loading = isinstance(state, Loading)
    button_label = LOADING_LABEL if loading else SUBMIT_LABEL
    disabled = " disabled" if loading else ""

    error_html = ""
    if isinstance(state, Failed):
        error_html = f'<div class="error" role="alert">{escape(state.message)}</div>'

    return f"""
<form method="post" action="/" onsubmit="{escape(SUBMIT_SCRIPT)}">
  <div class="grid">
    <div class="panel">
      <label for="role_title">Target role (optional)</label>
      <input id="role_title" name="role_title" placeholder="e.g., Senior Product Manager" value="{escape(form.get('role_title', ''))}">
      <label for="resume">Paste resume</label>
      <textarea id="resume" name="resume" rows="14" placeholder="Paste your full resume text here...">{escape(form.get('resume', ''))}</textarea>
    </div>
    <div class="panel">
      <label for="job_description">Paste job description</label>
      <textarea id="job_description" name="job_description" rows="18" placeholder="Paste the job description here...">{escape(form.get('job_description', ''))}</textarea>
      <button type="submit"{disabled}>{button_label}</button>
      {error_html}
    </div>
  </div>
</form>"""


def _result_panels(result: TailorResult) -> str:
    tips = "".join(f"<li>{escape(tip)}</li>" for tip in result.ats_tips)
    return f"""
<div class="grid" style="margin-top: 2rem;">
  <section class="panel">
    <h2>Tailored Resume (ATS-friendly)</h2>
    <button type="button" onclick="{escape(COPY_SCRIPT)}">Copy</button>
    <pre id="tailored-resume">{escape(result.tailored_resume)}</pre>
  </section>
  <div>
    <section class="panel">
      <h3>Matched Keywords</h3>
      <p class="note">Appearing in your resume and the job description</p>
      <div id="matched-keywords">{_chips(result.matched_keywords, "matched")}</div>
    </section>
    <section class="panel">
      <h3>Missing Keywords</h3>
      <p class="note">Present in the job description but not detected in your resume</p>
      <div id="missing-keywords">{_chips(result.missing_but_referenced_keywords, "missing")}</div>
      <p class="note">{escape(MISSING_KEYWORDS_NOTE)}</p>
    </section>
    <section class="panel">
      <h3>ATS Tips</h3>
      <ul id="ats-tips">{tips}</ul>
    </section>
  </div>
</div>"""


def render_page(state: InteractionState, form: Optional[Dict[str, str]] = None) -> str:
    """Render the full console page for a state."""
    form = form or {}
    results = _result_panels(state.result) if isinstance(state, Success) else ""

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{TITLE}</title>
<style>{PAGE_STYLE}</style>
</head>
<body data-state="{state.kind}">
<header>
  <h1>{TITLE}</h1>
  <p>{escape(TAGLINE)}</p>
</header>
<main>
{_form_panel(state, form)}
{results}
<p class="footer">{escape(FOOTER)}</p>
</main>
</body>
</html>
"""


def render_text(state: InteractionState) -> str:
    """Render a state as plain text for the terminal."""
    if isinstance(state, Failed):
        return f"Error: {state.message}\n"
    if isinstance(state, Loading):
        return f"{LOADING_LABEL}\n"
    if not isinstance(state, Success):
        return ""

    result = state.result
    lines = [
        "=" * 60,
        "TAILORED RESUME (ATS-friendly)",
        "=" * 60,
        result.tailored_resume,
        "",
        "MATCHED KEYWORDS",
        ", ".join(result.matched_keywords) or "(none)",
        "",
        "MISSING KEYWORDS",
        ", ".join(result.missing_but_referenced_keywords) or "(none)",
        MISSING_KEYWORDS_NOTE,
        "",
        "ATS TIPS",
    ]
    lines.extend(f"  - {tip}" for tip in result.ats_tips)
    if not result.ats_tips:
        lines.append("  (none)")
    return "\n".join(lines) + "\n"
