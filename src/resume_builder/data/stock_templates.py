"""Stock templates inserted into an empty templates table."""

from __future__ import annotations

_PREVIEW = (
    "https://images.pexels.com/photos/4553618/pexels-photo-4553618.jpeg"
    "?auto=compress&cs=tinysrgb&w=400"
)


def _sections(*names: str, optional: tuple[str, ...] = ()) -> list[dict]:
    return [
        {"name": name, "required": name not in optional, "order": index}
        for index, name in enumerate(names, start=1)
    ]


STOCK_TEMPLATES: list[dict] = [
    {
        "name": "Modern Professional",
        "description": "Clean, modern design perfect for tech and business professionals",
        "category": "modern",
        "preview": _PREVIEW,
        "config": {
            "layout": "two-column",
            "colors": {"primary": "#3B82F6", "secondary": "#6B7280", "accent": "#10B981"},
            "fonts": {"heading": "Inter", "body": "Inter"},
        },
        "sections": _sections(
            "Personal Info", "Summary", "Experience", "Skills", "Education", optional=("Summary",)
        ),
        "premium": False,
        "rating_average": 4.5,
        "rating_count": 127,
        "usage": 1520,
    },
    {
        "name": "Classic Executive",
        "description": "Traditional, professional layout ideal for executive positions",
        "category": "classic",
        "preview": _PREVIEW,
        "config": {
            "layout": "single-column",
            "colors": {"primary": "#1F2937", "secondary": "#6B7280", "accent": "#059669"},
        },
        "sections": _sections("Personal Info", "Summary", "Experience", "Education", "Skills"),
        "premium": False,
        "rating_average": 4.3,
        "rating_count": 89,
        "usage": 892,
    },
    {
        "name": "Creative Designer",
        "description": "Bold, creative design for designers and creative professionals",
        "category": "creative",
        "preview": _PREVIEW,
        "config": {
            "layout": "two-column",
            "colors": {"primary": "#8B5CF6", "secondary": "#6B7280", "accent": "#F59E0B"},
        },
        "sections": _sections(
            "Personal Info", "Summary", "Experience", "Projects", "Skills", optional=("Summary",)
        ),
        "premium": True,
        "rating_average": 4.7,
        "rating_count": 156,
        "usage": 743,
    },
    {
        "name": "Minimal Clean",
        "description": "Simple, clean design that focuses on content",
        "category": "minimal",
        "preview": _PREVIEW,
        "config": {
            "layout": "single-column",
            "colors": {"primary": "#111827", "secondary": "#6B7280", "accent": "#3B82F6"},
        },
        "sections": _sections(
            "Personal Info", "Summary", "Experience", "Skills", "Education", optional=("Summary",)
        ),
        "premium": False,
        "rating_average": 4.2,
        "rating_count": 203,
        "usage": 1834,
    },
    {
        "name": "Professional Elite",
        "description": "A polished, professional template for high-level positions.",
        "category": "professional",
        "preview": _PREVIEW,
        "config": {
            "layout": "single-column",
            "colors": {"primary": "#0A0A23", "secondary": "#6B7280", "accent": "#FFD700"},
        },
        "sections": _sections("Personal Info", "Summary", "Experience", "Education", "Skills"),
        "premium": True,
        "rating_average": 4.8,
        "rating_count": 50,
        "usage": 100,
    },
]
