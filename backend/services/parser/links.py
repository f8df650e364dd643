"""Social and professional links extraction from resume text."""

import re

from .models import SocialLinks


_PORTFOLIO_PATTERNS = [
    r"((?:https?://)?[\w\-]+\.(?:vercel\.app|netlify\.app|github\.io|herokuapp\.com|onrender\.com)[/\w\-.]*)",
    r"(?:portfolio|website|site|blog)\s*[:\-]?\s*((?:https?://)?[a-zA-Z0-9\-]+(?:\.[a-zA-Z0-9\-]+)*\.[a-zA-Z]{2,}[/\w\-.]*)",
]

_EMAIL_PROVIDERS = ("gmail", "yahoo", "hotmail", "outlook", "icloud", "proton", "protonmail")


def _normalize_url(url: str) -> str:
    """Normalize URL to include https:// prefix."""
    url = url.strip().rstrip(".,;)")
    if not url:
        return ""
    if not url.startswith(("http://", "https://")):
        url = "https://" + url
    return url.rstrip("/")


def extract_links(text: str) -> SocialLinks:
    """Extract LinkedIn, GitHub, Twitter/X and portfolio links from resume text.

    Args:
        text: Raw resume text

    Returns:
        SocialLinks object with extracted URLs
    """
    links = SocialLinks()
    if not text:
        return links

    linkedin_match = re.search(r"linkedin\.com/in/([\w\-]+)", text, re.IGNORECASE)
    if linkedin_match:
        links.linkedin = f"https://linkedin.com/in/{linkedin_match.group(1)}"

    github_match = re.search(r"github\.com/([\w\-]+)", text, re.IGNORECASE)
    if github_match and github_match.group(1).lower() not in ("com", "io", "org", "pages"):
        links.github = f"https://github.com/{github_match.group(1)}"

    twitter_match = re.search(r"(?:twitter\.com|(?<![\w.])x\.com)/(\w+)", text, re.IGNORECASE)
    if twitter_match and twitter_match.group(1).lower() not in _EMAIL_PROVIDERS:
        links.twitter = f"https://twitter.com/{twitter_match.group(1)}"

    for pattern in _PORTFOLIO_PATTERNS:
        match = re.search(pattern, text, re.IGNORECASE)
        if match:
            candidate = match.group(1)
            if "@" in text[max(0, match.start(1) - 1):match.start(1)]:
                continue
            links.portfolio = _normalize_url(candidate)
            break

    return links
