"""HTML resume rendered from a researcher profile.

Layout:
  1. Header: name, designation | department, institution, contact line
  2. Research Interests: description + keyword tags
  3. Education, Professional Experience, Research Grants & Funding,
     Teaching, Awards & Achievements: one item card per list entry
  4. Professional Activities, Skills & Tools (tags), Outreach & Service

A section is emitted only when its backing data is present.
"""
from __future__ import annotations

import html as _html
from typing import Any, Dict, Iterable, List, Optional

from scholarfolio.models import Profile

_ACCENT = "#4f46e5"

_STYLE = f"""
    * {{ margin: 0; padding: 0; box-sizing: border-box; }}
    body {{ font-family: 'Georgia', serif; line-height: 1.6; color: #333; background: #f5f5f5; padding: 20px; }}
    .container {{ max-width: 900px; margin: 0 auto; background: white; padding: 50px; box-shadow: 0 0 20px rgba(0,0,0,0.1); }}
    .header {{ text-align: center; border-bottom: 3px solid {_ACCENT}; padding-bottom: 20px; margin-bottom: 30px; }}
    .header h1 {{ font-size: 2.5rem; color: #1a1a1a; margin-bottom: 10px; }}
    .header .designation {{ font-size: 1.3rem; color: {_ACCENT}; font-weight: 600; margin-bottom: 15px; }}
    .header .institution {{ font-size: 1.1rem; color: #666; margin-bottom: 15px; }}
    .contact-info {{ display: flex; justify-content: center; flex-wrap: wrap; gap: 20px; font-size: 0.95rem; color: #666; }}
    .section {{ margin-bottom: 30px; }}
    .section-title {{ font-size: 1.5rem; color: {_ACCENT}; border-bottom: 2px solid #e5e7eb; padding-bottom: 8px;
                      margin-bottom: 15px; text-transform: uppercase; letter-spacing: 1px; }}
    .item {{ margin-bottom: 20px; }}
    .item-header {{ display: flex; justify-content: space-between; align-items: baseline; margin-bottom: 5px; }}
    .item-title {{ font-weight: 700; font-size: 1.1rem; color: #1a1a1a; }}
    .item-subtitle {{ font-style: italic; color: #666; margin-bottom: 5px; }}
    .item-date {{ color: #888; font-size: 0.9rem; }}
    .item-description {{ color: #555; margin-top: 8px; line-height: 1.7; }}
    .keywords {{ display: flex; flex-wrap: wrap; gap: 10px; margin-top: 10px; }}
    .keyword {{ background: #e0e7ff; color: {_ACCENT}; padding: 5px 12px; border-radius: 15px; font-size: 0.9rem; }}
    .print-btn {{ position: fixed; top: 20px; right: 20px; background: {_ACCENT}; color: white; border: none;
                  padding: 12px 24px; border-radius: 8px; cursor: pointer; font-size: 1rem; font-weight: 600; }}
    .print-btn:hover {{ background: #4338ca; }}
    @media print {{
      body {{ background: white; padding: 0; }}
      .container {{ box-shadow: none; padding: 0; }}
      .print-btn {{ display: none; }}
    }}
"""

_MESSAGE_PAGE = """<!DOCTYPE html>
<html>
<head>
  <title>{title}</title>
  <style>
    body {{ font-family: Arial, sans-serif; padding: 50px; text-align: center; }}
    h1 {{ color: #ef4444; }}
  </style>
</head>
<body>
  <h1>{heading}</h1>
  <p>{message}</p>
  <button onclick="window.close()">Close</button>
</body>
</html>
"""


# ── helpers ─────────────────────────────────────────────────────

def _present(val: Any) -> bool:
    """Zero is a value; only None and empty strings count as missing."""
    return val is not None and val != ""


def _esc(val: Any) -> str:
    return _html.escape(str(val)) if _present(val) else ""


def split_tags(raw: Optional[str]) -> List[str]:
    """Split a comma-separated keyword string into trimmed, non-empty tags."""
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def _entries(value: Any) -> List[Dict[str, Any]]:
    """Dict entries of a list-valued profile field; anything else is dropped."""
    if not isinstance(value, list):
        return []
    return [entry for entry in value if isinstance(entry, dict)]


def _tags(values: Iterable[str]) -> str:
    spans = "".join(f'<span class="keyword">{_esc(v)}</span>' for v in values)
    return f'<div class="keywords">{spans}</div>'


def _section(title: str, body: str) -> str:
    return (
        '<div class="section">'
        f'<h2 class="section-title">{_esc(title)}</h2>'
        f"{body}"
        "</div>"
    )


def _item(title: str, date: Any = "", subtitle: str = "", extra: str = "") -> str:
    sub = f'<div class="item-subtitle">{subtitle}</div>' if subtitle else ""
    return (
        '<div class="item">'
        '<div class="item-header">'
        f'<div class="item-title">{title}</div>'
        f'<div class="item-date">{_esc(date)}</div>'
        "</div>"
        f"{sub}{extra}"
        "</div>"
    )


def _description(text: Any, label: str = "") -> str:
    if not _present(text):
        return ""
    prefix = f"<strong>{_esc(label)}:</strong> " if label else ""
    return f'<div class="item-description">{prefix}{_esc(text)}</div>'


# ── sections ────────────────────────────────────────────────────

def _header(p: Profile) -> str:
    designation = _esc(p.designation)
    if p.department:
        designation = f"{designation} | {_esc(p.department)}".strip()
    institution = f'<div class="institution">{_esc(p.institution)}</div>' if p.institution else ""

    contacts = []
    if p.official_email:
        contacts.append(f"<span>✉️ {_esc(p.official_email)}</span>")
    if p.phone:
        contacts.append(f"<span>📱 {_esc(p.phone)}</span>")
    if p.website:
        contacts.append(
            f'<span>🌐 <a href="{_esc(p.website)}" target="_blank">{_esc(p.website)}</a></span>'
        )
    if p.scholar_link:
        contacts.append(
            f'<span>📚 <a href="{_esc(p.scholar_link)}" target="_blank">Google Scholar</a></span>'
        )

    return (
        '<div class="header">'
        f"<h1>{_esc(p.full_name) or 'Name Not Provided'}</h1>"
        f'<div class="designation">{designation}</div>'
        f"{institution}"
        f'<div class="contact-info">{"".join(contacts)}</div>'
        "</div>"
    )


def _research(p: Profile) -> str:
    if not p.research_description:
        return ""
    keywords = split_tags(p.research_keywords)
    body = f'<p class="item-description">{_esc(p.research_description)}</p>'
    if keywords:
        body += _tags(keywords)
    return _section("Research Interests", body)


def _education(degrees: List[Dict[str, Any]]) -> str:
    if not degrees:
        return ""
    items = []
    for deg in degrees:
        title = _esc(deg.get("degree"))
        if deg.get("specialization"):
            title = f"{title} in {_esc(deg['specialization'])}".strip()
        extra = _description(deg.get("thesis"), "Thesis") + _description(deg.get("advisor"), "Advisor")
        items.append(_item(title, deg.get("year"), _esc(deg.get("institution")), extra))
    return _section("Education", "".join(items))


def _experience(employment: List[Dict[str, Any]]) -> str:
    if not employment:
        return ""
    items = [
        _item(
            _esc(emp.get("position")),
            emp.get("duration"),
            _esc(emp.get("organization")),
            _description(emp.get("responsibilities")),
        )
        for emp in employment
    ]
    return _section("Professional Experience", "".join(items))


def _grants(grants: List[Dict[str, Any]]) -> str:
    if not grants:
        return ""
    items = []
    for grant in grants:
        subtitle = f"{_esc(grant.get('role'))} | {_esc(grant.get('agency'))}"
        if _present(grant.get("amount")):
            subtitle += f" | {_esc(grant['amount'])}"
        status = _description(grant.get("status") or "N/A", "Status")
        items.append(_item(_esc(grant.get("projectTitle")), grant.get("duration"), subtitle, status))
    return _section("Research Grants & Funding", "".join(items))


def _teaching(courses: List[Dict[str, Any]]) -> str:
    if not courses:
        return ""
    items = []
    for course in courses:
        title = _esc(course.get("courseName"))
        if course.get("courseCode"):
            title = f"{title} ({_esc(course['courseCode'])})".strip()
        items.append(_item(title, course.get("semester"), "", _description(course.get("labDetails"))))
    return _section("Teaching", "".join(items))


def _awards(awards: List[Dict[str, Any]]) -> str:
    if not awards:
        return ""
    items = [
        _item(
            _esc(award.get("title")),
            award.get("year"),
            _esc(award.get("organization")),
            _description(award.get("description")),
        )
        for award in awards
    ]
    return _section("Awards & Achievements", "".join(items))


def _text_section(title: str, text: Optional[str]) -> str:
    if not text:
        return ""
    return _section(title, f'<div class="item-description">{_esc(text)}</div>')


def _skills(raw: Optional[str]) -> str:
    skills = split_tags(raw)
    if not skills:
        return ""
    return _section("Skills & Tools", _tags(skills))


# ── public API ──────────────────────────────────────────────────

def render_resume(profile: Profile) -> str:
    """Full resume document for one profile."""
    body = "".join(
        [
            _header(profile),
            _research(profile),
            _education(_entries(profile.degrees)),
            _experience(_entries(profile.employment)),
            _grants(_entries(profile.grants)),
            _teaching(_entries(profile.courses)),
            _awards(_entries(profile.awards)),
            _text_section("Professional Activities", profile.professional_activities),
            _skills(profile.skills),
            _text_section("Outreach & Service", profile.outreach_service),
        ]
    )
    title = _esc(profile.full_name) or "Academic Professional"
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Resume - {title}</title>
  <style>{_STYLE}</style>
</head>
<body>
  <button class="print-btn" onclick="window.print()">🖨️ Print Resume</button>
  <div class="container">{body}</div>
</body>
</html>
"""


def render_not_found() -> str:
    return _MESSAGE_PAGE.format(
        title="Resume Not Available",
        heading="Profile Not Found",
        message="Please complete your profile first before generating a resume.",
    )


def render_error() -> str:
    return _MESSAGE_PAGE.format(
        title="Error",
        heading="Error Generating Resume",
        message="An error occurred while generating your resume. Please try again.",
    )
