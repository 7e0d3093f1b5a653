"""Demo catalogue used by FileBrowser.with_sample_data()."""

from __future__ import annotations

from filedeck.models import Entity, EntityKind

_F = EntityKind.FOLDER
_IMG = EntityKind.IMAGE
_DOC = EntityKind.DOCUMENT
_PDF = EntityKind.PDF
_VID = EntityKind.VIDEO

# (id, name, kind, size_label, date_label, is_favorite, parent_id)
_SAMPLE_ROWS: tuple[tuple, ...] = (
    ("1", "Project Alpha Design", _F, None, "Today", True, None),
    ("2", "Q4 Financial Report.pdf", _DOC, "2.4 MB", "Yesterday", False, None),
    ("3", "Marketing Assets", _F, None, "Oct 24, 2023", False, None),
    ("4", "Launch Event.mp4", _VID, "154 MB", "Oct 20, 2023", True, None),
    ("5", "Hero Banner.png", _IMG, "4.2 MB", "Oct 18, 2023", False, None),
    ("6", "Client Contracts", _F, None, "Oct 15, 2023", False, None),
    ("1-1", "Design Specs v2.pdf", _PDF, "12 MB", "Today", False, "1"),
    ("1-2", "Wireframes", _F, None, "Yesterday", False, "1"),
    ("1-3", "Assets", _F, None, "Yesterday", False, "1"),
    ("1-4", "Moodboard.jpg", _IMG, "5.6 MB", "2 days ago", False, "1"),
    ("1-2-1", "Home_v1.fig", _DOC, "450 KB", "Yesterday", False, "1-2"),
    ("1-2-2", "Profile_Flow.fig", _DOC, "320 KB", "Yesterday", False, "1-2"),
    ("7", "Meeting Notes.docx", _DOC, "15 KB", "Oct 12, 2023", False, None),
    ("8", "User Research.pdf", _DOC, "1.2 MB", "Oct 10, 2023", False, None),
    ("9", "App Icon.png", _IMG, "240 KB", "Sep 28, 2023", False, None),
    ("10", "System Architecture", _F, None, "Sep 25, 2023", False, None),
    ("11", "Budget 2024.xlsx", _DOC, "45 KB", "Sep 20, 2023", True, None),
    ("12", "Demo Recording.mov", _VID, "450 MB", "Sep 15, 2023", False, None),
)


def sample_entities() -> list[Entity]:
    """Return fresh Entity objects for the demo catalogue."""
    return [
        Entity(
            id=entity_id,
            name=name,
            kind=kind,
            size_label=size_label,
            date_label=date_label,
            is_favorite=is_favorite,
            parent_id=parent_id,
        )
        for entity_id, name, kind, size_label, date_label, is_favorite, parent_id in _SAMPLE_ROWS
    ]
